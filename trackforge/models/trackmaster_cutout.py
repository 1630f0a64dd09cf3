# trackforge/models/trackmaster_cutout.py
from __future__ import annotations

from typing import Any, Dict, Optional

from ..config import ManifoldConfig
from ..csg import CSGNode
from ._cutout import plug_cutout
from .standards import StandardParams, TRACKMASTER, cutout_radius

NAME = "trackmaster_cutout"
SLUGS = ["trackmaster-cutout", "tm-cutout", "hembra_trackmaster"]

TYPES: Dict[str, str] = {}
DEFAULTS: Dict[str, Any] = {}


def build_trackmaster_cutout(
    config: Optional[ManifoldConfig] = None,
    params: Optional[StandardParams] = None,
) -> CSGNode:
    # sin altura propia: usa la altura por defecto del alojamiento
    p = TRACKMASTER if params is None else params
    return plug_cutout(cutout_radius(p), p.cutout_neck_length, height=p.height, config=config)


def make_model(params: Dict[str, Any], config: Optional[ManifoldConfig] = None) -> CSGNode:
    return build_trackmaster_cutout(config=config)


__all__ = ["NAME", "SLUGS", "TYPES", "DEFAULTS", "build_trackmaster_cutout", "make_model"]
