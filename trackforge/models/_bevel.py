# trackforge/models/_bevel.py
"""
Chaflanes a 45º.

Todos los chaflanes del sistema salen de dos escalares (overlap, bevel_width):
  bevel  = overlap + bevel_width
  pad    = sin45 * overlap / 2
  height = sin45 * bevel
  radius = height - pad

Un prisma de chaflán es una barra cuadrada de lado `bevel` girada 45º sobre
su eje, centrada en el canto y desplazada `pad` hacia el hueco en los dos
ejes perpendiculares: corta una cara de `bevel_width` y sigue solapando el
vacío exterior en epsilon.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..config import ManifoldConfig, resolve
from ..csg import Box, CSGNode, Vec3, place, rotate, translate, vec3
from ..errors import InvalidParameter

SIN45 = math.sin(math.radians(45))

_AXES = {"x": 0, "y": 1, "z": 2}
# rotación que lleva el eje +Z local al eje del canto
_AXIS_ROTATION = {
    "x": (0.0, 90.0, 0.0),
    "y": (-90.0, 0.0, 0.0),
    "z": (0.0, 0.0, 0.0),
}


@dataclass(frozen=True)
class BevelDerived:
    pad: float
    height: float
    radius: float

    @classmethod
    def from_config(cls, config: Optional[ManifoldConfig] = None) -> "BevelDerived":
        cfg = resolve(config)
        return derive_bevel(cfg.overlap, cfg.bevel_width)


def derive_bevel(overlap: float, bevel_width: float) -> BevelDerived:
    bevel = overlap + bevel_width
    pad = SIN45 * (overlap / 2.0)
    height = SIN45 * bevel
    return BevelDerived(pad=pad, height=height, radius=height - pad)


@dataclass(frozen=True)
class Edge:
    """
    Canto a achaflanar.

    axis:   eje del canto ("x", "y" o "z")
    origin: punto inicial del canto
    length: extensión a lo largo de `axis`
    sign:   lado vacío (+1/-1) en los dos ejes perpendiculares, en orden xyz
    """
    axis: str
    origin: Vec3
    length: float
    sign: Tuple[int, int]

    def __post_init__(self) -> None:
        if self.axis not in _AXES:
            raise InvalidParameter(f"edge axis must be x, y or z, got {self.axis!r}")
        if not self.length > 0:
            raise InvalidParameter(f"edge length must be > 0, got {self.length}")
        if len(self.sign) != 2 or any(s not in (-1, 1) for s in self.sign):
            raise InvalidParameter(f"edge sign must be two of +-1, got {self.sign!r}")
        object.__setattr__(self, "origin", vec3(self.origin))
        object.__setattr__(self, "sign", tuple(self.sign))

    @property
    def perpendicular(self) -> Tuple[int, int]:
        i = _AXES[self.axis]
        a, b = (k for k in range(3) if k != i)
        return a, b


def chamfer_prism(edge: Edge, config: Optional[ManifoldConfig] = None) -> CSGNode:
    cfg = resolve(config)
    bv = BevelDerived.from_config(cfg)
    side = cfg.bevel
    span = edge.length + 2 * cfg.overlap

    # barra en Z centrada sobre el eje local, girada 45º -> rombo
    bar = translate(Box((side, side, span)), (-side / 2.0, -side / 2.0, 0.0))
    diamond = rotate(bar, (0.0, 0.0, 45.0))

    start = list(edge.origin)
    start[_AXES[edge.axis]] -= cfg.overlap
    for k, s in zip(edge.perpendicular, edge.sign):
        start[k] += s * bv.pad
    return place(diamond, start, _AXIS_ROTATION[edge.axis])


def chamfer_prisms(edges: Iterable[Edge], config: Optional[ManifoldConfig] = None) -> List[CSGNode]:
    return [chamfer_prism(e, config) for e in edges]


__all__ = ["SIN45", "BevelDerived", "derive_bevel", "Edge", "chamfer_prism", "chamfer_prisms"]
