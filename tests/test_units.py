import math

import pytest
from pytest import approx

from geocurves import Angle, Length


def test_angle_conversion():
    angle = Angle.from_degrees(180)
    assert angle.degrees == 180.
    assert angle.base_value == 180.
    assert angle.radians == approx(math.pi)

    angle = Angle.from_radians(math.pi / 2)
    assert angle.degrees == approx(90.)
    assert angle.radians == approx(math.pi / 2)

    assert Angle.from_radians(0.).degrees == 0.


def test_angle_eq():
    assert Angle.from_degrees(10) == Angle.from_degrees(10.)
    assert Angle.from_degrees(10) != Angle.from_degrees(11)
    assert Angle.from_degrees(10) != 10.
    assert Angle.from_degrees(10) != Length.from_meters(10)


def test_angle_hash():
    angles = {Angle.from_degrees(1.), Angle.from_degrees(1), Angle.from_degrees(2.)}
    assert len(angles) == 2


def test_angle_ordering():
    assert Angle.from_degrees(1) < Angle.from_degrees(2)
    assert Angle.from_degrees(2) >= Angle.from_degrees(2)
    assert max(Angle.from_degrees(5), Angle.from_degrees(-5)) == Angle.from_degrees(5)

    with pytest.raises(TypeError):
        _ = Angle.from_degrees(1) < 2


def test_angle_arithmetic():
    assert Angle.from_degrees(10) + Angle.from_degrees(5) == Angle.from_degrees(15)
    assert Angle.from_degrees(10) - Angle.from_degrees(5) == Angle.from_degrees(5)
    assert -Angle.from_degrees(10) == Angle.from_degrees(-10)

    with pytest.raises(TypeError):
        _ = Angle.from_degrees(10) + 5

    with pytest.raises(TypeError):
        _ = Angle.from_degrees(10) + Length.from_meters(5)


def test_angle_repr():
    assert repr(Angle.from_degrees(10)) == '<Angle(10.0 degrees)>'


def test_length_conversion():
    length = Length.from_meters(1500)
    assert length.meters == 1500.
    assert length.base_value == 1500.
    assert length.kilometers == 1.5

    assert Length.from_kilometers(2.5).meters == 2500.
    assert Length.from_nautical_miles(1).meters == 1852.
    assert Length.from_meters(926).nautical_miles == 0.5


def test_length_eq():
    assert Length.from_meters(10) == Length.from_meters(10.)
    assert Length.from_meters(1000) == Length.from_kilometers(1)
    assert Length.from_meters(10) != Length.from_meters(11)
    assert Length.from_meters(10) != 10.


def test_length_hash():
    lengths = {Length.from_meters(1000), Length.from_kilometers(1), Length.from_meters(1)}
    assert len(lengths) == 2


def test_length_ordering():
    assert Length.from_meters(999) < Length.from_kilometers(1)
    assert sorted([Length.from_meters(3), Length.from_meters(1)]) == [
        Length.from_meters(1), Length.from_meters(3)
    ]


def test_length_arithmetic():
    assert Length.from_meters(10) + Length.from_meters(5) == Length.from_meters(15)
    assert Length.from_meters(10) - Length.from_meters(15) == Length.from_meters(-5)

    with pytest.raises(TypeError):
        _ = Length.from_meters(10) - 5


def test_length_repr():
    assert repr(Length.from_meters(10)) == '<Length(10.0 meters)>'
