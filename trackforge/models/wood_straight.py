# trackforge/models/wood_straight.py
"""
Pieza recta completa de madera: tramo + macho en x=length + hembra en x=0.

Macho y hembra comparten el marco de la cara de unión, así que dos rectas
generadas por separado encajan entre sí.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config import ManifoldConfig, resolve
from ..csg import CSGNode, count_nodes, difference, translate, union
from ..errors import InvalidParameter, require_positive
from ._params import coalesce_bool, coalesce_float
from .standards import StandardParams, WOOD, cutout_radius
from .wood_cutout import build_wood_cutout
from .wood_plug import build_wood_plug
from .wood_track import build_wood_track

logger = logging.getLogger(__name__)

NAME = "wood_straight"
SLUGS = ["wood-straight", "brio-straight", "straight", "recta_madera"]

TYPES: Dict[str, str] = {
    "length": "float",
    "solid": "bool",
}

DEFAULTS: Dict[str, Any] = {
    "length": 144.0,
    "solid": True,
}


def min_length(params: StandardParams) -> float:
    """El alojamiento hembra tiene que caber dentro de la pieza."""
    return params.cutout_neck_length + cutout_radius(params)


def build_wood_straight(
    length: float,
    solid: bool = True,
    config: Optional[ManifoldConfig] = None,
    params: Optional[StandardParams] = None,
) -> CSGNode:
    cfg = resolve(config)
    p = WOOD if params is None else params
    length = require_positive("length", length)
    if length <= min_length(p):
        raise InvalidParameter(f"length must be > {min_length(p):.2f} to hold the socket, got {length}")

    mid = p.width / 2.0
    body = build_wood_track(length, config=cfg, params=p)
    plug = translate(build_wood_plug(solid, config=cfg, params=p), (length, mid, 0.0))
    socket = translate(build_wood_cutout(config=cfg, params=p), (0.0, mid, 0.0))

    tree = difference(union(body, plug), socket)
    logger.debug("wood_straight length=%.3f solid=%s nodes=%d", length, solid, count_nodes(tree))
    return tree


def make_model(params: Dict[str, Any], config: Optional[ManifoldConfig] = None) -> CSGNode:
    params = params or {}
    length = coalesce_float(params, "length", "length_mm", "largo", default=DEFAULTS["length"])
    solid = coalesce_bool(params, "solid", "macizo", default=DEFAULTS["solid"])
    return build_wood_straight(length, solid, config=config)


__all__ = ["NAME", "SLUGS", "TYPES", "DEFAULTS", "min_length", "build_wood_straight", "make_model"]
