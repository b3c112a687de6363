"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000

DEFAULT_ACQUISITION_TIMEOUT_SECONDS = 20.0
DISPLAY_COORD_DECIMALS = 4
