# domain/geometry/constants.py
"""Constants for geometric calculations."""

# Default tolerance for floating-point comparisons and near-zero determinants
EPSILON = 1e-9

# Decimal places used when rendering coordinates
COORDINATE_DECIMALS = 2
