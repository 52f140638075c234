"""Errors raised by the geodesic solvers"""

__all__ = [
    'ConvergenceError', 'DegenerateGeometryError', 'GeodesicError', 'InvalidInputError'
]


class GeodesicError(ValueError):
    """Base class for all geocurves errors"""


class InvalidInputError(GeodesicError):
    """An argument can never produce a meaningful result, e.g. a negative distance"""


class DegenerateGeometryError(GeodesicError):
    """The two points do not define an initial bearing"""


class ConvergenceError(GeodesicError):
    """An iterative solution did not settle within its iteration limit"""
