# trackforge/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import InvalidParameter

# ---------------------- Valores por defecto ----------------------
# overlap: solape epsilon para que ninguna booleana deje caras coincidentes
# bevel_width: ancho nominal del chaflán (cara a 45º)
# sections: segmentos por círculo al evaluar cilindros

DEFAULT_OVERLAP = 0.01
DEFAULT_BEVEL_WIDTH = 1.0
DEFAULT_SECTIONS = 64


def _num(x: Any) -> Optional[float]:
    if x is None:
        return None
    if isinstance(x, (int, float)):
        return float(x)
    s = str(x).strip()
    if not s:
        return None
    try:
        return float(s.replace(",", "."))
    except ValueError:
        raise InvalidParameter(f"not a number: {x!r}") from None


@dataclass(frozen=True)
class ManifoldConfig:
    """Constantes de construcción compartidas por todos los builders."""

    overlap: float = DEFAULT_OVERLAP
    bevel_width: float = DEFAULT_BEVEL_WIDTH
    sections: int = DEFAULT_SECTIONS

    def __post_init__(self) -> None:
        if not self.overlap > 0:
            raise InvalidParameter(f"overlap must be > 0, got {self.overlap}")
        if not self.bevel_width > 0:
            raise InvalidParameter(f"bevel_width must be > 0, got {self.bevel_width}")
        if int(self.sections) < 3:
            raise InvalidParameter(f"sections must be >= 3, got {self.sections}")

    @property
    def bevel(self) -> float:
        return self.overlap + self.bevel_width

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ManifoldConfig":
        env = os.environ if environ is None else environ
        overlap = _num(env.get("TRACKFORGE_OVERLAP"))
        bevel_width = _num(env.get("TRACKFORGE_BEVEL_WIDTH"))
        sections = _num(env.get("TRACKFORGE_SECTIONS"))
        return cls(
            overlap=DEFAULT_OVERLAP if overlap is None else overlap,
            bevel_width=DEFAULT_BEVEL_WIDTH if bevel_width is None else bevel_width,
            sections=DEFAULT_SECTIONS if sections is None else int(sections),
        )


DEFAULT_CONFIG = ManifoldConfig()


def resolve(config: Optional[ManifoldConfig]) -> ManifoldConfig:
    return DEFAULT_CONFIG if config is None else config


__all__ = ["ManifoldConfig", "DEFAULT_CONFIG", "resolve"]
