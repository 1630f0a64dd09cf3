# trackforge/models/trackmaster_plug.py
"""
Conector macho Trackmaster: mismo patrón vástago + cabeza que el de
madera, con un taladro pasante y una ranura estrecha hasta la punta.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config import ManifoldConfig, resolve
from ..csg import CSGNode, box, count_nodes, cylinder, difference, union
from ._plug import head, shank, shank_width
from .standards import StandardParams, TRACKMASTER

logger = logging.getLogger(__name__)

NAME = "trackmaster_plug"
SLUGS = ["trackmaster-plug", "tm-plug", "macho_trackmaster"]

TYPES: Dict[str, str] = {}
DEFAULTS: Dict[str, Any] = {}

BORE_RADIUS = 1.2
SLOT_WIDTH = 0.8


def build_trackmaster_plug(
    config: Optional[ManifoldConfig] = None,
    params: Optional[StandardParams] = None,
) -> CSGNode:
    cfg = resolve(config)
    p = TRACKMASTER if params is None else params
    o = cfg.overlap
    r, x0, h = p.plug_radius, p.plug_neck_length, p.well_height

    bore = cylinder(h + 2 * o, radius=BORE_RADIUS, at=(x0, 0.0, -o))
    slot = box((r + o, SLOT_WIDTH, h + 2 * o), at=(x0, -SLOT_WIDTH / 2.0, -o))
    top = difference(head(r, x0, h, cfg), bore, slot)

    tree = union(shank(shank_width(p), x0, h, cfg), top)
    logger.debug("trackmaster_plug nodes=%d", count_nodes(tree))
    return tree


def make_model(params: Dict[str, Any], config: Optional[ManifoldConfig] = None) -> CSGNode:
    return build_trackmaster_plug(config=config)


__all__ = ["NAME", "SLUGS", "TYPES", "DEFAULTS", "BORE_RADIUS", "SLOT_WIDTH",
           "build_trackmaster_plug", "make_model"]
