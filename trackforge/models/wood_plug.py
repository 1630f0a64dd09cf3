# trackforge/models/wood_plug.py
"""
Conector macho de madera, macizo o "spring".

La variante spring abre un chavetero en la cabeza (muesca + taladro + dos
cortes a 45º en la boca) que la convierte en dos patillas flexibles.
El vástago es idéntico en las dos variantes.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

from ..config import ManifoldConfig, resolve
from ..csg import CSGNode, box, count_nodes, cylinder, difference, union
from ..errors import InvalidParameter
from ._bevel import Edge, chamfer_prisms
from ._params import coalesce_bool
from ._plug import head, shank, shank_width
from .standards import StandardParams, WOOD

logger = logging.getLogger(__name__)

NAME = "wood_plug"
SLUGS = ["wood-plug", "brio-plug", "plug", "macho_madera"]

TYPES: Dict[str, str] = {
    "solid": "bool",   # False -> variante spring con chavetero
}

DEFAULTS: Dict[str, Any] = {
    "solid": True,
}

SLOT_WIDTH = 2.0


def keyway(params: StandardParams, config: Optional[ManifoldConfig] = None) -> List[CSGNode]:
    cfg = resolve(config)
    o = cfg.overlap
    r, x0, h = params.plug_radius, params.plug_neck_length, params.well_height
    half = SLOT_WIDTH / 2.0

    # muesca desde el centro de la cabeza hasta la punta
    notch = box((r + o, SLOT_WIDTH, h + 2 * o), at=(x0, -half, -o))
    bore = cylinder(h + 2 * o, radius=r / 2.0, at=(x0, 0.0, -o))
    # cantos donde las paredes de la muesca cortan el perímetro
    x_mouth = x0 + math.sqrt(r ** 2 - half ** 2)
    mouth = chamfer_prisms(
        [
            Edge("z", (x_mouth, half, 0.0), h, (1, -1)),
            Edge("z", (x_mouth, -half, 0.0), h, (1, 1)),
        ],
        cfg,
    )
    return [notch, bore, *mouth]


def build_wood_plug(
    solid: bool = True,
    config: Optional[ManifoldConfig] = None,
    params: Optional[StandardParams] = None,
) -> CSGNode:
    if not isinstance(solid, bool):
        raise InvalidParameter(f"solid must be a bool, got {solid!r}")
    cfg = resolve(config)
    p = WOOD if params is None else params

    base = shank(shank_width(p), p.plug_neck_length, p.well_height, cfg)
    top = head(p.plug_radius, p.plug_neck_length, p.well_height, cfg)
    if not solid:
        top = difference(top, *keyway(p, cfg))

    tree = union(base, top)
    logger.debug("wood_plug solid=%s nodes=%d", solid, count_nodes(tree))
    return tree


def make_model(params: Dict[str, Any], config: Optional[ManifoldConfig] = None) -> CSGNode:
    solid = coalesce_bool(params or {}, "solid", "macizo", default=DEFAULTS["solid"])
    return build_wood_plug(solid, config=config)


__all__ = ["NAME", "SLUGS", "TYPES", "DEFAULTS", "SLOT_WIDTH", "keyway", "build_wood_plug", "make_model"]
