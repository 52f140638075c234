"""
Immutable angular and linear measurements
"""

__all__ = ['Angle', 'Length']

from functools import total_ordering
import math
from typing import Union

_NUMBER = Union[float, int]

_METERS_PER_KILOMETER = 1_000.0
_METERS_PER_NAUTICAL_MILE = 1_852.0


@total_ordering
class Angle:
    """
    An angular measurement. Canonically stored in degrees; use .from_degrees() or
    .from_radians() to create one.
    """

    def __init__(self, degrees: _NUMBER):
        self._degrees = float(degrees)

    def __eq__(self, other):
        if not isinstance(other, Angle):
            return False

        return self._degrees == other._degrees

    def __lt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented

        return self._degrees < other._degrees

    def __hash__(self):
        return hash(('Angle', self._degrees))

    def __repr__(self):
        return f'<Angle({self._degrees} degrees)>'

    def __neg__(self):
        return Angle(-self._degrees)

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented

        return Angle(self._degrees + other._degrees)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented

        return Angle(self._degrees - other._degrees)

    @property
    def base_value(self) -> float:
        """The canonical value of the angle, in degrees"""
        return self._degrees

    @property
    def degrees(self) -> float:
        return self._degrees

    @property
    def radians(self) -> float:
        return self._degrees / (180 / math.pi)

    @classmethod
    def from_degrees(cls, degrees: _NUMBER) -> 'Angle':
        return cls(degrees)

    @classmethod
    def from_radians(cls, radians: _NUMBER) -> 'Angle':
        return cls(radians * 180 / math.pi)


@total_ordering
class Length:
    """
    A distance measurement. Canonically stored in meters.
    """

    def __init__(self, meters: _NUMBER):
        self._meters = float(meters)

    def __eq__(self, other):
        if not isinstance(other, Length):
            return False

        return self._meters == other._meters

    def __lt__(self, other):
        if not isinstance(other, Length):
            return NotImplemented

        return self._meters < other._meters

    def __hash__(self):
        return hash(('Length', self._meters))

    def __repr__(self):
        return f'<Length({self._meters} meters)>'

    def __add__(self, other):
        if not isinstance(other, Length):
            return NotImplemented

        return Length(self._meters + other._meters)

    def __sub__(self, other):
        if not isinstance(other, Length):
            return NotImplemented

        return Length(self._meters - other._meters)

    @property
    def base_value(self) -> float:
        """The canonical value of the length, in meters"""
        return self._meters

    @property
    def meters(self) -> float:
        return self._meters

    @property
    def kilometers(self) -> float:
        return self._meters / _METERS_PER_KILOMETER

    @property
    def nautical_miles(self) -> float:
        return self._meters / _METERS_PER_NAUTICAL_MILE

    @classmethod
    def from_meters(cls, meters: _NUMBER) -> 'Length':
        return cls(meters)

    @classmethod
    def from_kilometers(cls, kilometers: _NUMBER) -> 'Length':
        return cls(kilometers * _METERS_PER_KILOMETER)

    @classmethod
    def from_nautical_miles(cls, nautical_miles: _NUMBER) -> 'Length':
        return cls(nautical_miles * _METERS_PER_NAUTICAL_MILE)
