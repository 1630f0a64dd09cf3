# trackforge/models/wood_track.py
"""
Tramo recto de vía de madera: bloque con dos cajeados de rueda y todos
los cantos expuestos achaflanados a 45º.

Marco: x en [0, length], y en [0, width], z en [0, height]. Cajeados y
chaflanes nunca alteran la envolvente exterior.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..config import ManifoldConfig, resolve
from ..csg import CSGNode, box, count_nodes, difference
from ..errors import require_positive
from ._bevel import Edge, chamfer_prisms
from ._params import coalesce_float
from .standards import StandardParams, WOOD, well_offsets

logger = logging.getLogger(__name__)

NAME = "wood_track"
SLUGS = ["wood-track", "brio-track", "track", "via_madera"]

TYPES: Dict[str, str] = {
    "length": "float",   # largo del tramo (mm)
}

DEFAULTS: Dict[str, Any] = {
    "length": 53.5,
}


# ---------------------- cantos ----------------------

def well_edges(length: float, params: StandardParams) -> List[Edge]:
    """Cantos de cada cajeado: dos superiores a lo largo de X y cuatro verticales en los extremos."""
    h, wh, ww = params.height, params.well_height, params.well_width
    depth = h - wh
    edges: List[Edge] = []
    for y0 in well_offsets(params):
        y1 = y0 + ww
        edges += [
            Edge("x", (0.0, y0, h), length, (1, 1)),
            Edge("x", (0.0, y1, h), length, (-1, 1)),
            Edge("z", (0.0, y0, wh), depth, (-1, 1)),
            Edge("z", (0.0, y1, wh), depth, (-1, -1)),
            Edge("z", (length, y0, wh), depth, (1, 1)),
            Edge("z", (length, y1, wh), depth, (1, -1)),
        ]
    return edges


def slab_edges(length: float, params: StandardParams) -> List[Edge]:
    """Los cuatro cantos largos del bloque."""
    w, h = params.width, params.height
    return [
        Edge("x", (0.0, 0.0, 0.0), length, (-1, -1)),
        Edge("x", (0.0, 0.0, h), length, (-1, 1)),
        Edge("x", (0.0, w, 0.0), length, (1, -1)),
        Edge("x", (0.0, w, h), length, (1, 1)),
    ]


def wells(length: float, params: StandardParams, config: ManifoldConfig) -> List[CSGNode]:
    o = config.overlap
    size = (length + 2 * o, params.well_width, params.height - params.well_height + o)
    return [box(size, at=(-o, y0, params.well_height)) for y0 in well_offsets(params)]


# ---------------------- builder ----------------------

def build_wood_track(
    length: float,
    config: Optional[ManifoldConfig] = None,
    params: Optional[StandardParams] = None,
) -> CSGNode:
    cfg = resolve(config)
    p = WOOD if params is None else params
    length = require_positive("length", length)

    body = box((length, p.width, p.height))
    cutters = wells(length, p, cfg)
    cutters += chamfer_prisms(well_edges(length, p) + slab_edges(length, p), cfg)

    tree = difference(body, *cutters)
    logger.debug("wood_track length=%.3f nodes=%d", length, count_nodes(tree))
    return tree


def make_model(params: Dict[str, Any], config: Optional[ManifoldConfig] = None) -> CSGNode:
    length = coalesce_float(params or {}, "length", "length_mm", "largo", default=DEFAULTS["length"])
    return build_wood_track(length, config=config)


__all__ = ["NAME", "SLUGS", "TYPES", "DEFAULTS", "build_wood_track", "make_model",
           "well_edges", "slab_edges", "wells"]
