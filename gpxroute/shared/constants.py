"""
Shared constants.
"""

# Fixed pace used for the duration estimate (minutes per km)
DEFAULT_PACE_MIN_PER_KM = 6.0
