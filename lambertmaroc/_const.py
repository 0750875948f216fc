"""
Constants declarations for lambertmaroc
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Clarke 1880 (IGN) Ellipsoid Constants, carried by the Merchich datum
CLARKE_1880_A = 6378249.2  # Major axis (meters)
CLARKE_1880_B = 6356515.0  # Minor axis (meters)

# Geocentric translation from Merchich to WGS84 (meters)
MERCHICH_TO_WGS84_DX = 31.0
MERCHICH_TO_WGS84_DY = 146.0
MERCHICH_TO_WGS84_DZ = 47.0

# Iterative solvers
CONVERGENCE_TOLERANCE = 1e-12  # radians
# A solve stopped by its iteration cap is only reported when its last step exceeds this
PRECISION_WARNING_TOLERANCE = 1e-10  # radians
ECEF_MAX_ITERATIONS = 10
LAMBERT_MAX_ITERATIONS = 5

# Degenerate geometry thresholds (meters)
POLAR_AXIS_EPSILON = 1e-10
CONE_APEX_EPSILON = 1e-9

# Latitudes are clamped this far short of the poles under the 'clamp' policy
POLE_CLAMP_DEGREES = 1e-9
