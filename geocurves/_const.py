"""
Constants declarations for geocurves
"""
import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_B = 6356752.314245  # Minor axis (meters)
WGS84_F = (WGS84_A - WGS84_B) / WGS84_A  # Flattening

# Vincenty iteration controls
PRECISION = 1e-12
MAX_INVERSE_ITERATIONS = 20
MAX_DIRECT_ITERATIONS = 200

TWO_PI = 2 * math.pi
