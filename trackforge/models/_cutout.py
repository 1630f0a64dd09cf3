# trackforge/models/_cutout.py
"""
Alojamiento hembra (socket) común a los dos estándares.

Marco local: la cara de unión es el plano x=0, la cavidad entra hacia +x,
centrada en y=0, de z=0 a z=height. El resultado es una herramienta de
corte (se resta de la vía), no un sólido.
"""
from __future__ import annotations

import logging
import math
from typing import List, Optional

from ..config import ManifoldConfig, resolve
from ..csg import CSGNode, box, cylinder, hull, rotate, translate, union
from ..errors import InvalidParameter, require_positive
from ._bevel import BevelDerived, Edge, chamfer_prisms
from .standards import WOOD

logger = logging.getLogger(__name__)

NECK_WIDTH = 7.5


def funnel(radius: float, config: Optional[ManifoldConfig] = None) -> CSGNode:
    """
    Embudo cónico a 45º sobre la cara z=0 de un taladro de `radius`.

    Hull entre un disco de radius + bevel.radius (fuera de la cara, a `pad`)
    y un disco de radius - pad a profundidad bevel.radius: pendiente unitaria.
    """
    bv = BevelDerived.from_config(config)
    outer = cylinder(bv.pad, radius=radius + bv.radius, at=(0.0, 0.0, -2 * bv.pad))
    inner = cylinder(bv.pad, radius=radius - bv.pad, at=(0.0, 0.0, bv.radius))
    return hull(outer, inner)


def hourglass(radius: float, height: float, config: Optional[ManifoldConfig] = None) -> List[CSGNode]:
    """Par de embudos (abajo y arriba) para que el macho entre por cualquier cara."""
    bottom = funnel(radius, config)
    top = translate(rotate(bottom, (180.0, 0.0, 0.0)), (0.0, 0.0, height))
    return [bottom, top]


def neck_edges(radius: float, neck_length: float, height: float) -> List[Edge]:
    half = NECK_WIDTH / 2.0
    # donde la pared del cuello corta el taladro
    x_join = neck_length - math.sqrt(radius ** 2 - half ** 2)
    if x_join <= 0:
        raise InvalidParameter(
            f"bore of radius {radius} reaches the joint face (neck_length={neck_length})"
        )
    return [
        Edge("z", (0.0, half, 0.0), height, (-1, -1)),
        Edge("z", (0.0, -half, 0.0), height, (-1, 1)),
        Edge("z", (x_join, half, 0.0), height, (1, -1)),
        Edge("z", (x_join, -half, 0.0), height, (1, 1)),
    ]


def plug_cutout(
    radius: float,
    neck_length: float,
    height: Optional[float] = None,
    config: Optional[ManifoldConfig] = None,
) -> CSGNode:
    cfg = resolve(config)
    radius = require_positive("radius", radius)
    neck_length = require_positive("neck_length", neck_length)
    height = require_positive("height", WOOD.height if height is None else height)
    if radius <= NECK_WIDTH / 2.0:
        raise InvalidParameter(f"radius {radius} must exceed half the neck width ({NECK_WIDTH / 2.0})")

    o = cfg.overlap
    neck = box(
        (neck_length + o, NECK_WIDTH, height + 2 * o),
        at=(-o, -NECK_WIDTH / 2.0, -o),
    )
    bore = cylinder(height + 2 * o, radius=radius, at=(neck_length, 0.0, -o))
    funnels = [translate(f, (neck_length, 0.0, 0.0)) for f in hourglass(radius, height, cfg)]
    corners = chamfer_prisms(neck_edges(radius, neck_length, height), cfg)

    logger.debug("plug_cutout radius=%.3f neck=%.3f height=%.3f", radius, neck_length, height)
    return union(neck, bore, *funnels, *corners)


__all__ = ["NECK_WIDTH", "funnel", "hourglass", "neck_edges", "plug_cutout"]
