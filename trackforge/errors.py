# trackforge/errors.py
"""
Errores tipados de trackforge.

- InvalidParameter: parámetro dimensional fuera de rango (longitud, radio...).
- NonManifoldGeometry: el evaluador detecta una malla no cerrada / no manifold.
- UnknownPart: estándar, tipo de pieza o slug que no existe en el catálogo.
"""
import math


class TrackforgeError(Exception):
    """Base de todos los errores del paquete."""


class InvalidParameter(TrackforgeError, ValueError):
    pass


class NonManifoldGeometry(TrackforgeError, RuntimeError):
    pass


class UnknownPart(TrackforgeError, KeyError):
    def __str__(self) -> str:
        # KeyError pone comillas alrededor del mensaje
        return str(self.args[0]) if self.args else ""


def require_positive(name: str, value: float) -> float:
    """Devuelve `value` como float o lanza InvalidParameter si no es finito y > 0."""
    if isinstance(value, bool):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(v) or not v > 0:
        raise InvalidParameter(f"{name} must be a finite number > 0, got {v}")
    return v


__all__ = [
    "TrackforgeError",
    "InvalidParameter",
    "NonManifoldGeometry",
    "UnknownPart",
    "require_positive",
]
