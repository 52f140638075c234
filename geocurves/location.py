"""
Object-oriented access to the geodesic calculations
"""

__all__ = ['GeoLocation']

from typing import Union

from geocurves.coordinates import GeoCurve, GeoPoint
from geocurves.geodesic import compute_curve, compute_destination, compute_distance
from geocurves.units import Angle, Length


class GeoLocation:
    """
    A location in the world, wrapping a GeoPoint with convenience methods for the
    geodesic calculations.

    Args:
        geo_point:
            The location's coordinates
    """

    def __init__(self, geo_point: GeoPoint):
        self._geo_point = geo_point

    def __eq__(self, other):
        if not isinstance(other, GeoLocation):
            return False

        return self._geo_point == other._geo_point

    def __hash__(self):
        return hash(self._geo_point)

    def __repr__(self):
        lat, lon = self._geo_point.to_float()
        return f'<GeoLocation({lat}, {lon})>'

    @property
    def geo_point(self) -> GeoPoint:
        return self._geo_point

    @property
    def latitude(self) -> Angle:
        return self._geo_point.latitude

    @property
    def longitude(self) -> Angle:
        return self._geo_point.longitude

    @classmethod
    def from_degrees(
        cls,
        latitude: Union[float, int],
        longitude: Union[float, int]
    ) -> 'GeoLocation':
        """Creates a GeoLocation from a latitude/longitude pair in decimal degrees"""
        return cls(GeoPoint.from_degrees(latitude, longitude))

    def curve(self, other: 'GeoLocation') -> GeoCurve:
        """
        Get the curve (distance and initial bearing) from this location to another.

        Args:
            other:
                The location to calculate the curve to

        Returns:
            GeoCurve
        """
        return compute_curve(self._geo_point, other.geo_point)

    def destination(self, bearing: Angle, distance: Length) -> 'GeoLocation':
        """
        Get the location reached by traveling from this location along a bearing.

        Args:
            bearing:
                The initial bearing, clockwise from true north

            distance:
                The distance to travel

        Returns:
            GeoLocation
        """
        return GeoLocation(compute_destination(self._geo_point, bearing, distance))

    def distance_to(self, other: 'GeoLocation') -> Length:
        """
        Get the distance from this location to another.

        Args:
            other:
                The location to measure the distance to

        Returns:
            Length
        """
        return compute_distance(self._geo_point, other.geo_point)
