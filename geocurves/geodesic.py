"""
Vincenty's solutions to the inverse and direct geodetic problems on the WGS84 ellipsoid.

All equation numbers refer back to Vincenty's publication:
See http://www.ngs.noaa.gov/PUBS_LIB/inverse.pdf
"""

__all__ = [
    'compute_curve', 'compute_destination', 'compute_distance',
]

import math
from typing import NamedTuple

from geocurves._const import (
    MAX_DIRECT_ITERATIONS, MAX_INVERSE_ITERATIONS, PRECISION, TWO_PI,
    WGS84_A, WGS84_B, WGS84_F
)
from geocurves.coordinates import GeoCurve, GeoPoint
from geocurves.exceptions import ConvergenceError, DegenerateGeometryError, InvalidInputError
from geocurves.units import Angle, Length
from geocurves.utils.functions import is_approximately_equal, is_negative, is_zero
from geocurves.utils.logging import LOGGER, warn_once

_SQUARED_RATIO = (WGS84_A ** 2 - WGS84_B ** 2) / WGS84_B ** 2


class _InverseSolution(NamedTuple):
    """Iteration state of the inverse problem, from which distance and azimuth derive"""
    distance: float
    converged: bool
    lambda_: float
    phi1: float
    phi2: float
    cos_u2: float
    cos_u1_sin_u2: float
    sin_u1_cos_u2: float


# -------------------------------------------------------------------------
# Shared Series Terms
# -------------------------------------------------------------------------

def _series_a(u_sq: float) -> float:
    # eq. 3
    return 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))


def _series_b(u_sq: float) -> float:
    # eq. 4
    return u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))


def _series_c(cos2_alpha: float) -> float:
    # eq. 10
    return WGS84_F / 16 * cos2_alpha * (4 + WGS84_F * (4 - 3 * cos2_alpha))


def _delta_sigma(
    big_b: float,
    sin_sigma: float,
    cos_sigma: float,
    cos2_sigma_m: float
) -> float:
    # eq. 6
    cos2_sigma_m_sq = cos2_sigma_m * cos2_sigma_m
    return big_b * sin_sigma * (
        cos2_sigma_m + big_b / 4 * (
            cos_sigma * (-1 + 2 * cos2_sigma_m_sq) -
            big_b / 6 * cos2_sigma_m * (-3 + 4 * sin_sigma * sin_sigma) *
            (-3 + 4 * cos2_sigma_m_sq)
        )
    )


def _longitude_correction(
    big_c: float,
    sin_alpha: float,
    sigma: float,
    sin_sigma: float,
    cos_sigma: float,
    cos2_sigma_m: float
) -> float:
    """The difference between longitude on the auxiliary sphere and on the ellipsoid"""
    # eq. 11
    return (1 - big_c) * WGS84_F * sin_alpha * (
        sigma + big_c * sin_sigma * (
            cos2_sigma_m + big_c * cos_sigma * (-1 + 2 * cos2_sigma_m * cos2_sigma_m)
        )
    )


# -------------------------------------------------------------------------
# Inverse Problem
# -------------------------------------------------------------------------

def _solve_inverse(start: GeoPoint, end: GeoPoint) -> _InverseSolution:
    """
    Iterates Vincenty's inverse formula until lambda settles, or until the iteration
    limit is reached.

    Args:
        start:
            The starting point

        end:
            The ending point

    Returns:
        _InverseSolution
    """
    phi1, lambda1 = start.latitude.radians, start.longitude.radians
    phi2, lambda2 = end.latitude.radians, end.longitude.radians

    omega = lambda2 - lambda1

    # Reduced latitudes, on the auxiliary sphere
    u1 = math.atan((1.0 - WGS84_F) * math.tan(phi1))
    u2 = math.atan((1.0 - WGS84_F) * math.tan(phi2))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    sin_u1_sin_u2 = sin_u1 * sin_u2
    cos_u1_sin_u2 = cos_u1 * sin_u2
    sin_u1_cos_u2 = sin_u1 * cos_u2
    cos_u1_cos_u2 = cos_u1 * cos_u2

    # eq. 13
    lambda_ = omega

    big_a, sigma, delta_sigma = 0.0, 0.0, 0.0
    converged = False

    for i in range(MAX_INVERSE_ITERATIONS):
        lambda0 = lambda_
        sin_lambda, cos_lambda = math.sin(lambda_), math.cos(lambda_)

        # eq. 14
        sin2_sigma = (
            (cos_u2 * sin_lambda) ** 2 +
            (cos_u1_sin_u2 - sin_u1_cos_u2 * cos_lambda) ** 2
        )
        sin_sigma = math.sqrt(sin2_sigma)

        # eq. 15
        cos_sigma = sin_u1_sin_u2 + cos_u1_cos_u2 * cos_lambda

        # eq. 16
        sigma = math.atan2(sin_sigma, cos_sigma)

        # eq. 17    sin2_sigma is exactly 0 for coincident points
        sin_alpha = 0.0 if is_zero(sin2_sigma) else cos_u1_cos_u2 * sin_lambda / sin_sigma
        cos2_alpha = 1 - sin_alpha * sin_alpha

        # eq. 18    cos2_alpha is exactly 0 along the equator
        cos2_sigma_m = 0.0 if is_zero(cos2_alpha) else cos_sigma - 2 * sin_u1_sin_u2 / cos2_alpha

        u_sq = cos2_alpha * _SQUARED_RATIO
        big_a = _series_a(u_sq)
        delta_sigma = _delta_sigma(_series_b(u_sq), sin_sigma, cos_sigma, cos2_sigma_m)

        lambda_ = omega + _longitude_correction(
            _series_c(cos2_alpha), sin_alpha, sigma, sin_sigma, cos_sigma, cos2_sigma_m
        )

        # A lambda of exactly zero (points on one meridian) never counts as converged
        if is_zero(lambda_):
            continue

        change = abs((lambda_ - lambda0) / lambda_)
        if i > 1 and change < PRECISION:
            converged = True
            LOGGER.debug('Vincenty inverse solution converged after %d iterations', i + 1)
            break

    if not converged and not is_zero(lambda_):
        warn_once(
            f'Vincenty inverse solution did not converge within {MAX_INVERSE_ITERATIONS} '
            'iterations (nearly antipodal points?); results are approximate. '
            '(this warning will not repeat)'
        )

    # eq. 19
    distance = WGS84_B * big_a * (sigma - delta_sigma)

    return _InverseSolution(
        distance=distance,
        converged=converged,
        lambda_=lambda_,
        phi1=phi1,
        phi2=phi2,
        cos_u2=cos_u2,
        cos_u1_sin_u2=cos_u1_sin_u2,
        sin_u1_cos_u2=sin_u1_cos_u2,
    )


def compute_distance(start: GeoPoint, end: GeoPoint) -> Length:
    """
    Calculate the ellipsoidal distance between two points in the world.

    Args:
        start:
            The starting point

        end:
            The ending point

    Returns:
        Length
    """
    return Length.from_meters(_solve_inverse(start, end).distance)


def compute_curve(start: GeoPoint, end: GeoPoint) -> GeoCurve:
    """
    Calculate the geodetic curve between two points in the world. This is the
    solution to the inverse geodetic problem.

    When the iteration does not converge the points are assumed to lie on a single
    meridian, and the azimuth is due north or due south accordingly.

    Args:
        start:
            The starting point

        end:
            The ending point

    Returns:
        GeoCurve, with an azimuth in [0, 360) degrees

    Raises:
        DegenerateGeometryError: the iteration did not converge and both
            latitudes are identical, so no azimuth can be derived
    """
    solution = _solve_inverse(start, end)

    if not solution.converged:
        # Must be N/S
        if solution.phi1 > solution.phi2:
            azimuth = Angle.from_degrees(180)
        elif solution.phi1 < solution.phi2:
            azimuth = Angle.from_degrees(0)
        else:
            raise DegenerateGeometryError(
                'Cannot determine a north/south azimuth between points of equal latitude '
                f'({start.latitude.degrees} degrees)'
            )
    else:
        # eq. 20
        radians = math.atan2(
            solution.cos_u2 * math.sin(solution.lambda_),
            solution.cos_u1_sin_u2 - solution.sin_u1_cos_u2 * math.cos(solution.lambda_)
        )
        if is_negative(radians):
            radians += TWO_PI
        azimuth = Angle.from_radians(radians)

    if azimuth.degrees >= 360.0:
        azimuth = Angle.from_degrees(azimuth.degrees - 360.0)

    return GeoCurve(Length.from_meters(solution.distance), azimuth)


# -------------------------------------------------------------------------
# Direct Problem
# -------------------------------------------------------------------------

def compute_destination(start: GeoPoint, bearing: Angle, distance: Length) -> GeoPoint:
    """
    Calculate the destination after traveling a specified distance at a specified
    starting bearing from an initial location. This is the solution to the direct
    geodetic problem.

    Args:
        start:
            The starting location

        bearing:
            The initial bearing, clockwise from true north

        distance:
            The distance to travel

    Returns:
        GeoPoint

    Raises:
        InvalidInputError: the distance is negative
        ConvergenceError: sigma did not settle within the iteration limit
    """
    s = distance.meters
    if is_negative(s):
        raise InvalidInputError(
            f'negative distance is not a valid travel distance ({s} meters)'
        )

    phi1 = start.latitude.radians
    alpha1 = bearing.radians
    sin_alpha1, cos_alpha1 = math.sin(alpha1), math.cos(alpha1)

    tan_u1 = (1.0 - WGS84_F) * math.tan(phi1)
    cos_u1 = 1.0 / math.sqrt(1.0 + tan_u1 * tan_u1)
    sin_u1 = tan_u1 * cos_u1

    # eq. 1
    sigma1 = math.atan2(tan_u1, cos_alpha1)

    # eq. 2
    sin_alpha = cos_u1 * sin_alpha1
    sin2_alpha = sin_alpha * sin_alpha
    cos2_alpha = 1 - sin2_alpha

    u_sq = cos2_alpha * _SQUARED_RATIO
    big_a = _series_a(u_sq)
    big_b = _series_b(u_sq)

    s_over_ba = s / (WGS84_B * big_a)
    sigma = s_over_ba
    prev_sigma = s_over_ba

    # Iterate until there is a negligible change in sigma
    for i in range(MAX_DIRECT_ITERATIONS):
        # eq. 5
        cos2_sigma_m = math.cos(2.0 * sigma1 + sigma)

        # eq. 7
        sigma = s_over_ba + _delta_sigma(
            big_b, math.sin(sigma), math.cos(sigma), cos2_sigma_m
        )

        if is_approximately_equal(sigma, prev_sigma, PRECISION):
            LOGGER.debug('Vincenty direct solution converged after %d iterations', i + 1)
            break

        prev_sigma = sigma

    else:
        raise ConvergenceError(
            f'Vincenty direct solution did not converge within {MAX_DIRECT_ITERATIONS} '
            f'iterations (bearing {bearing.degrees} degrees, distance {s} meters)'
        )

    cos2_sigma_m = math.cos(2.0 * sigma1 + sigma)
    sin_sigma, cos_sigma = math.sin(sigma), math.cos(sigma)

    # eq. 8
    phi2 = math.atan2(
        sin_u1 * cos_sigma + cos_u1 * sin_sigma * cos_alpha1,
        (1.0 - WGS84_F) * math.sqrt(
            sin2_alpha + (sin_u1 * sin_sigma - cos_u1 * cos_sigma * cos_alpha1) ** 2
        )
    )

    # eq. 9    atan2 rather than atan, otherwise paths crossing a pole land on the
    # wrong side of it
    lambda_ = math.atan2(
        sin_sigma * sin_alpha1,
        cos_u1 * cos_sigma - sin_u1 * sin_sigma * cos_alpha1
    )

    big_l = lambda_ - _longitude_correction(
        _series_c(cos2_alpha), sin_alpha, sigma, sin_sigma, cos_sigma, cos2_sigma_m
    )

    return GeoPoint(
        latitude=Angle.from_radians(phi2),
        longitude=Angle.from_radians(start.longitude.radians + big_l),
    )
