"""
Representation of a specific point on earth, and of the geodesic curve between two of them
"""

__all__ = ['GeoCurve', 'GeoPoint']

from typing import Tuple, Union

from geocurves.units import Angle, Length


class GeoPoint:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair).

    Values are not bounded or validated; latitudes are conventionally expected to
    fall within [-90, 90] degrees.
    """

    def __init__(self, latitude: Angle, longitude: Angle):
        self._latitude = latitude
        self._longitude = longitude

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self._latitude == other._latitude and
            self._longitude == other._longitude
        )

    def __hash__(self):
        return hash((self._latitude, self._longitude))

    def __repr__(self):
        return f'<GeoPoint({self._latitude.degrees}, {self._longitude.degrees})>'

    @property
    def latitude(self) -> Angle:
        return self._latitude

    @property
    def longitude(self) -> Angle:
        return self._longitude

    @classmethod
    def from_degrees(
        cls,
        latitude: Union[float, int],
        longitude: Union[float, int]
    ) -> 'GeoPoint':
        """
        Creates a GeoPoint from a latitude/longitude pair expressed in decimal degrees

        Args:
            latitude:
                The latitude, in degrees

            longitude:
                The longitude, in degrees

        Returns:
            GeoPoint
        """
        return cls(Angle.from_degrees(latitude), Angle.from_degrees(longitude))

    def to_float(self) -> Tuple[float, float]:
        """
        Converts the point to a tuple of (latitude, longitude) in degrees

        Returns:
            Tuple[float, float]
        """
        return self._latitude.degrees, self._longitude.degrees


class GeoCurve:
    """
    The solution to the inverse geodetic problem: the distance between two points and
    the initial bearing (azimuth) to travel from the first to the second.
    """

    def __init__(self, distance: Length, azimuth: Angle):
        self._distance = distance
        self._azimuth = azimuth

    def __eq__(self, other):
        if not isinstance(other, GeoCurve):
            return False

        return (
            self._distance == other._distance and
            self._azimuth == other._azimuth
        )

    def __hash__(self):
        return hash((self._distance, self._azimuth))

    def __repr__(self):
        return f'<GeoCurve({self._distance.meters} meters, {self._azimuth.degrees} degrees)>'

    @property
    def distance(self) -> Length:
        return self._distance

    @property
    def azimuth(self) -> Angle:
        """The initial bearing, in [0, 360) degrees clockwise from true north"""
        return self._azimuth
