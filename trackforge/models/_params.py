# trackforge/models/_params.py
# Lectura tolerante de parámetros de builder (dicts de la API / UI)
from __future__ import annotations

from typing import Any, Dict

from ..errors import InvalidParameter

_TRUE = {"1", "true", "yes", "si", "sí", "on"}
_FALSE = {"0", "false", "no", "off"}


def coalesce_float(params: Dict[str, Any], *keys: str, default: float) -> float:
    """Primer valor numérico presente entre `keys`; admite coma decimal."""
    for k in keys:
        v = params.get(k)
        if v is None or (isinstance(v, str) and not v.strip()):
            continue
        if isinstance(v, bool):
            raise InvalidParameter(f"{k} must be a number, got {v!r}")
        try:
            return float(str(v).replace(",", ".")) if isinstance(v, str) else float(v)
        except (TypeError, ValueError):
            raise InvalidParameter(f"{k} must be a number, got {v!r}") from None
    return float(default)


def coalesce_bool(params: Dict[str, Any], *keys: str, default: bool) -> bool:
    for k in keys:
        v = params.get(k)
        if v is None:
            continue
        if isinstance(v, bool):
            return v
        s = str(v).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise InvalidParameter(f"{k} must be a boolean, got {v!r}")
    return default
