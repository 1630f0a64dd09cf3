# trackforge/models/wood_cutout.py
from __future__ import annotations

from typing import Any, Dict, Optional

from ..config import ManifoldConfig
from ..csg import CSGNode
from ._cutout import plug_cutout
from .standards import StandardParams, WOOD, cutout_radius

NAME = "wood_cutout"
SLUGS = ["wood-cutout", "brio-cutout", "cutout", "hembra_madera"]

TYPES: Dict[str, str] = {}
DEFAULTS: Dict[str, Any] = {}


def build_wood_cutout(
    config: Optional[ManifoldConfig] = None,
    params: Optional[StandardParams] = None,
) -> CSGNode:
    p = WOOD if params is None else params
    return plug_cutout(cutout_radius(p), p.cutout_neck_length, height=p.height, config=config)


def make_model(params: Dict[str, Any], config: Optional[ManifoldConfig] = None) -> CSGNode:
    return build_wood_cutout(config=config)


__all__ = ["NAME", "SLUGS", "TYPES", "DEFAULTS", "build_wood_cutout", "make_model"]
