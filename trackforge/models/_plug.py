# trackforge/models/_plug.py
"""
Piezas comunes del conector macho.

Marco local: cara de unión en x=0, el macho sobresale hacia +x, centrado
en y=0, de z=0 a z=height. El vástago entra `overlap` en la propia vía.
"""
from __future__ import annotations

from typing import Optional

from ..config import ManifoldConfig, resolve
from ..csg import CSGNode, box, cylinder, hull
from ..errors import InvalidParameter
from ._bevel import BevelDerived
from ._cutout import NECK_WIDTH
from .standards import StandardParams


def shank_width(params: StandardParams) -> float:
    return NECK_WIDTH - 2 * params.clearance


def shank(width: float, neck_length: float, height: float, config: Optional[ManifoldConfig] = None) -> CSGNode:
    """Vástago en cuña: hull de dos cajas desplazadas `bevel.height` en alto y ancho."""
    cfg = resolve(config)
    b = BevelDerived.from_config(cfg).height
    o = cfg.overlap
    if width <= 2 * b or height <= 2 * b:
        raise InvalidParameter(f"shank {width}x{height} too small for bevel {b:.3f}")
    span = neck_length + o
    tall = box((span, width - 2 * b, height), at=(-o, -(width - 2 * b) / 2.0, 0.0))
    wide = box((span, width, height - 2 * b), at=(-o, -width / 2.0, b))
    return hull(wide, tall)


def head(radius: float, neck_length: float, height: float, config: Optional[ManifoldConfig] = None) -> CSGNode:
    """Cabeza cilíndrica con solo el canto superior achaflanado."""
    b = BevelDerived.from_config(config).height
    if radius <= b or height <= b:
        raise InvalidParameter(f"head radius {radius} / height {height} too small for bevel {b:.3f}")
    lower = cylinder(height - b, radius=radius, at=(neck_length, 0.0, 0.0))
    upper = cylinder(height - b, radius=radius - b, at=(neck_length, 0.0, b))
    return hull(lower, upper)
