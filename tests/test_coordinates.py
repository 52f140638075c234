from geocurves import Angle, GeoCurve, GeoPoint, Length


def test_geopoint_init():
    p = GeoPoint(Angle.from_degrees(32), Angle.from_degrees(35))
    assert p.latitude == Angle.from_degrees(32)
    assert p.longitude == Angle.from_degrees(35)

    assert GeoPoint.from_degrees(32, 35) == p

    # Values are not bounded
    p = GeoPoint.from_degrees(95, 400)
    assert p.to_float() == (95., 400.)


def test_geopoint_eq():
    assert GeoPoint.from_degrees(0., 0.) == GeoPoint.from_degrees(0., 0.)
    assert GeoPoint.from_degrees(0., 0.) != GeoPoint.from_degrees(1., 0.)
    assert GeoPoint.from_degrees(0., 0.) != GeoPoint.from_degrees(0., 1.)
    assert GeoPoint.from_degrees(0., 0.) != (0., 0.)


def test_geopoint_hash():
    points = [
        GeoPoint.from_degrees(0., 0.),
        GeoPoint.from_degrees(0., 0.),
        GeoPoint.from_degrees(1., 1.),
    ]
    assert len(set(points)) == 2
    assert GeoPoint.from_degrees(1., 1.) in set(points)


def test_geopoint_repr():
    assert repr(GeoPoint.from_degrees(32., 35.)) == '<GeoPoint(32.0, 35.0)>'


def test_geopoint_to_float():
    assert GeoPoint.from_degrees(32, 35).to_float() == (32.0, 35.0)


def test_geocurve():
    curve = GeoCurve(Length.from_meters(100), Angle.from_degrees(45))
    assert curve.distance == Length.from_meters(100)
    assert curve.azimuth == Angle.from_degrees(45)

    assert curve == GeoCurve(Length.from_meters(100), Angle.from_degrees(45))
    assert curve != GeoCurve(Length.from_meters(100), Angle.from_degrees(46))
    assert curve != GeoCurve(Length.from_meters(101), Angle.from_degrees(45))
    assert len({curve, GeoCurve(Length.from_meters(100), Angle.from_degrees(45))}) == 1

    assert repr(curve) == '<GeoCurve(100.0 meters, 45.0 degrees)>'
