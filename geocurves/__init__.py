from geocurves._version import __version__  # noqa: F401
from geocurves.utils.logging import LOGGER
from geocurves.units import Angle, Length
from geocurves.coordinates import GeoCurve, GeoPoint
from geocurves.exceptions import (
    ConvergenceError, DegenerateGeometryError, GeodesicError, InvalidInputError
)
from geocurves.geodesic import compute_curve, compute_destination, compute_distance
from geocurves.location import GeoLocation


__all__ = [
    'Angle',
    'ConvergenceError',
    'DegenerateGeometryError',
    'GeoCurve',
    'GeoLocation',
    'GeoPoint',
    'GeodesicError',
    'InvalidInputError',
    'Length',
    'LOGGER',
    'compute_curve',
    'compute_destination',
    'compute_distance',
]
