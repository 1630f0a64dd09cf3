"""
Autodiscovery de builders de trackforge.

Para cada módulo `models/<nombre>.py` (sin prefijo `_`) se registra un
builder con las siguientes reglas (en orden):

1) El builder es su función `make_model`; sin ella el módulo se ignora.
2) Se crean alias snake <-> kebab automáticamente.
3) Si el módulo define `NAME: str` y/o `SLUGS: list[str]`, se añaden como alias.

Todos los builders tienen la firma `fn(params: dict, config=None) -> CSGNode`.
"""
from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Any, Callable, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

# --------------------- Registro y alias globales ---------------------

REGISTRY: Dict[str, Callable] = {}
ALIASES: Dict[str, str] = {}
METADATA: Dict[str, Dict[str, Any]] = {}

_SKIP = {"standards"}


def _register(name_snake: str, fn: Callable) -> None:
    """Registra el callable y crea alias básicos snake/kebab."""
    key = name_snake.lower()
    REGISTRY[key] = fn
    ALIASES.setdefault(key, key)
    ALIASES.setdefault(key.replace("_", "-"), key)


def _add_alias(raw_slug: str, target_snake: str) -> None:
    """Añade alias sin pisar entradas existentes."""
    if not raw_slug or not target_snake:
        return
    raw = raw_slug.strip().lower()
    snake = target_snake.strip().lower()
    ALIASES.setdefault(raw, snake)
    if "_" in raw:
        ALIASES.setdefault(raw.replace("_", "-"), snake)
    else:
        ALIASES.setdefault(raw.replace("-", "_"), snake)
    ALIASES.setdefault(snake.replace("_", "-"), snake)


# --------------------- Descubrimiento de módulos ---------------------

for _finder, _name, _ispkg in pkgutil.iter_modules(__path__):
    if _ispkg or _name.startswith("_") or _name in _SKIP:
        continue

    try:
        mod = importlib.import_module(f"{__name__}.{_name}")
    except Exception:
        # un módulo roto no tumba el resto del catálogo
        logger.exception("could not import builder module %s", _name)
        continue

    fn = getattr(mod, "make_model", None)
    if not callable(fn):
        # módulos auxiliares sin builder
        continue
    _register(_name, fn)
    METADATA[_name] = {
        "types": dict(getattr(mod, "TYPES", {}) or {}),
        "defaults": dict(getattr(mod, "DEFAULTS", {}) or {}),
    }

    name_alias = getattr(mod, "NAME", None)
    if isinstance(name_alias, str) and name_alias.strip():
        _add_alias(name_alias, _name)

    slugs: Iterable[str] = getattr(mod, "SLUGS", []) or []
    for s in slugs:
        if isinstance(s, str) and s.strip():
            _add_alias(s, _name)

logger.debug("registered %d builders: %s", len(REGISTRY), ", ".join(sorted(REGISTRY)))


# --------------------- API de ayuda -----------------------

def resolve_slug(slug_or_name: str) -> Optional[str]:
    if not slug_or_name:
        return None
    raw = slug_or_name.strip().lower()
    snake = ALIASES.get(raw, ALIASES.get(raw.replace("-", "_"), raw.replace("-", "_")))
    return snake if snake in REGISTRY else None


def get_builder(slug_or_name: str) -> Optional[Callable]:
    """Resuelve un slug en snake usando ALIASES y devuelve el callable."""
    snake = resolve_slug(slug_or_name)
    return REGISTRY.get(snake) if snake else None


def aliases_for(name: str) -> List[str]:
    return sorted(a for a, target in ALIASES.items() if target == name and a != name)


__all__ = ["REGISTRY", "ALIASES", "METADATA", "resolve_slug", "get_builder", "aliases_for"]
