from pytest import approx

from geocurves import GeoPoint


def assert_geopoints_equal(p1: GeoPoint, p2: GeoPoint, abs_tol=1e-9):
    """
    Asserts that two points are equal within a specified absolute tolerance.

    Args:
        p1: The first GeoPoint
        p2: The second GeoPoint
        abs_tol: The absolute tolerance, in degrees.
                 Default is 1e-9 (approx 0.1mm at the equator).
    """
    try:
        assert p1.latitude.degrees == approx(p2.latitude.degrees, abs=abs_tol)
        assert p1.longitude.degrees == approx(p2.longitude.degrees, abs=abs_tol)
    except AssertionError as e:
        print(p1.to_float())
        print(p2.to_float())
        raise e
