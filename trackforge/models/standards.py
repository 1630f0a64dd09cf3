# trackforge/models/standards.py
"""
Catálogo dimensional de cada estándar de vía (mm).

Única fuente de verdad: el resto de builders leen de aquí en lugar de
duplicar literales. Para variantes, crear un StandardParams nuevo con
`dataclasses.replace(wood(), ...)` y pasarlo como `params=`.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from ..errors import InvalidParameter, UnknownPart


class Standard(str, Enum):
    WOOD = "wood"
    TRACKMASTER = "trackmaster"


@dataclass(frozen=True)
class StandardParams:
    name: str
    plug_radius: float
    clearance: float             # holgura radial hembra - macho
    plug_neck_length: float      # cara de unión -> centro de la cabeza (macho)
    cutout_neck_length: float    # cara de unión -> centro del alojamiento (hembra)
    well_height: float
    width: Optional[float] = None
    height: Optional[float] = None
    well_width: Optional[float] = None
    well_spacing: Optional[float] = None

    @property
    def has_wells(self) -> bool:
        return None not in (self.width, self.height, self.well_width, self.well_spacing)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


WOOD = StandardParams(
    name=Standard.WOOD.value,
    width=40.0,
    height=12.0,
    well_height=9.0,
    well_width=5.7,
    well_spacing=19.25,
    plug_radius=6.0,
    clearance=0.3,
    plug_neck_length=10.75,
    cutout_neck_length=10.75,
)

# Trackmaster: sin cajeado de ruedas en este modelo.
# Cuello del macho 4.75 y de la hembra 5 (valores medidos, no unificados).
TRACKMASTER = StandardParams(
    name=Standard.TRACKMASTER.value,
    well_height=8.0,
    plug_radius=3.8,
    clearance=0.7,
    plug_neck_length=4.75,
    cutout_neck_length=5.0,
)

_CATALOG: Dict[Standard, StandardParams] = {
    Standard.WOOD: WOOD,
    Standard.TRACKMASTER: TRACKMASTER,
}


def wood() -> StandardParams:
    return WOOD


def trackmaster() -> StandardParams:
    return TRACKMASTER


def as_standard(standard: Union[Standard, str]) -> Standard:
    if isinstance(standard, Standard):
        return standard
    raw = str(standard or "").strip().lower()
    try:
        return Standard(raw)
    except ValueError:
        raise UnknownPart(f"unknown track standard {standard!r}") from None


def standard_params(standard: Union[Standard, str]) -> StandardParams:
    return _CATALOG[as_standard(standard)]


# ---------------------- Derivados ----------------------

def cutout_radius(params: StandardParams) -> float:
    """Radio del alojamiento hembra: radio del macho + holgura."""
    return params.plug_radius + params.clearance


def _require_wells(params: StandardParams) -> None:
    if not params.has_wells:
        raise InvalidParameter(f"standard {params.name!r} defines no wheel wells")


def well_padding(params: StandardParams) -> float:
    _require_wells(params)
    return (params.width - params.well_spacing - 2 * params.well_width) / 2.0


def well_offsets(params: StandardParams) -> Tuple[float, float]:
    """Posición Y del borde inferior de cada cajeado; simétricas respecto al eje."""
    pad = well_padding(params)
    return (pad, params.width - pad - params.well_width)


__all__ = [
    "Standard", "StandardParams", "WOOD", "TRACKMASTER",
    "wood", "trackmaster", "as_standard", "standard_params",
    "cutout_radius", "well_padding", "well_offsets",
]
