# trackforge/parts.py
"""
PartRequest: única entrada de cara al llamador. Se traduce 1:1 a un
constructor del catálogo.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .config import ManifoldConfig
from .csg import CSGNode
from .errors import InvalidParameter, UnknownPart
from .models.standards import Standard
from .models.trackmaster_cutout import build_trackmaster_cutout
from .models.trackmaster_plug import build_trackmaster_plug
from .models.wood_cutout import build_wood_cutout
from .models.wood_plug import build_wood_plug
from .models.wood_straight import build_wood_straight
from .models.wood_track import build_wood_track

logger = logging.getLogger(__name__)


class PartKind(str, Enum):
    TRACK = "track"
    PLUG = "plug"
    CUTOUT = "cutout"
    STRAIGHT = "straight"


class PartRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    standard: Standard = Standard.WOOD
    kind: PartKind
    length: Optional[float] = None
    solid: bool = True


_SLUGS = {
    (Standard.WOOD, PartKind.TRACK): "wood_track",
    (Standard.WOOD, PartKind.PLUG): "wood_plug",
    (Standard.WOOD, PartKind.CUTOUT): "wood_cutout",
    (Standard.WOOD, PartKind.STRAIGHT): "wood_straight",
    (Standard.TRACKMASTER, PartKind.PLUG): "trackmaster_plug",
    (Standard.TRACKMASTER, PartKind.CUTOUT): "trackmaster_cutout",
}


def part_slug(request: PartRequest) -> str:
    try:
        return _SLUGS[(request.standard, request.kind)]
    except KeyError:
        raise UnknownPart(
            f"no {request.kind.value} part for standard {request.standard.value!r}"
        ) from None


def _length(request: PartRequest) -> float:
    if request.length is None:
        raise InvalidParameter(f"{request.kind.value} needs a length")
    return request.length


def build_part(request: PartRequest, config: Optional[ManifoldConfig] = None) -> CSGNode:
    slug = part_slug(request)
    logger.info("building %s (length=%s solid=%s)", slug, request.length, request.solid)
    if slug == "wood_track":
        return build_wood_track(_length(request), config=config)
    if slug == "wood_straight":
        return build_wood_straight(_length(request), request.solid, config=config)
    if slug == "wood_plug":
        return build_wood_plug(request.solid, config=config)
    if slug == "wood_cutout":
        return build_wood_cutout(config=config)
    if slug == "trackmaster_plug":
        return build_trackmaster_plug(config=config)
    return build_trackmaster_cutout(config=config)


__all__ = ["PartKind", "PartRequest", "part_slug", "build_part"]
