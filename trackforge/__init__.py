"""
trackforge: generador paramétrico de geometría CSG para conectores y
tramos de vía de juguete (madera y Trackmaster).

Cada constructor devuelve un árbol CSG inmutable (Box, Cylinder, Union,
Difference, Hull, Transform) que evalúa un kernel externo; ver
`trackforge.kernel` para el evaluador de referencia.
"""
from .config import DEFAULT_CONFIG, ManifoldConfig
from .errors import InvalidParameter, NonManifoldGeometry, TrackforgeError, UnknownPart
from .models._bevel import BevelDerived, derive_bevel
from .models._cutout import plug_cutout
from .models.standards import Standard, StandardParams, standard_params, trackmaster, wood
from .models.trackmaster_cutout import build_trackmaster_cutout
from .models.trackmaster_plug import build_trackmaster_plug
from .models.wood_cutout import build_wood_cutout
from .models.wood_plug import build_wood_plug
from .models.wood_straight import build_wood_straight
from .models.wood_track import build_wood_track
from .parts import PartKind, PartRequest, build_part

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG", "ManifoldConfig",
    "TrackforgeError", "InvalidParameter", "NonManifoldGeometry", "UnknownPart",
    "BevelDerived", "derive_bevel", "plug_cutout",
    "Standard", "StandardParams", "standard_params", "wood", "trackmaster",
    "build_wood_track", "build_wood_plug", "build_wood_cutout", "build_wood_straight",
    "build_trackmaster_plug", "build_trackmaster_cutout",
    "PartKind", "PartRequest", "build_part",
]
