"""
Application-wide constants for date-of-loss scoring.

The scoring weights, caps and proximity breakpoints below are calibrated
values; downstream confidence numbers depend on them exactly.
"""

# Geodesy
EARTH_RADIUS_MILES = 3958.7613
MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0

# Compass rose (16 points, clockwise from north)
CARDINAL_DIRECTIONS = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)
CARDINAL_SECTOR_DEGREES = 22.5

# Magnitude scoring
HAIL_POINTS_PER_INCH = 10
HAIL_SCORE_CAP = 50
WIND_MPH_PER_POINT = 10
WIND_SCORE_CAP = 30
TORNADO_WARNING_SCORE = 40
SEVERE_THUNDERSTORM_WARNING_SCORE = 25
FLASH_FLOOD_WARNING_SCORE = 20
DEFAULT_MAGNITUDE_SCORE = 5

# Proximity scoring (miles)
PROXIMITY_DIRECT_HIT_MILES = 1
PROXIMITY_NEAR_MILES = 5
PROXIMITY_MID_MILES = 10
PROXIMITY_FAR_MILES = 20
PROXIMITY_DIRECT_HIT_SCORE = 50

# Date selection
CONFIDENCE_SCALE = 100  # best event score that maps to confidence 1.0
TOP_EVENTS_LIMIT = 10
DISTANCE_DECIMALS = 2

# Timestamps
EVENT_DATE_FORMAT = "%Y-%m-%d"
EVENT_DATE_LENGTH = 10

# Configuration defaults
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "logs/storm_dol.log"
DEFAULT_LOG_TO_FILE = True
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_UNRESOLVED_LOCATION = "exclude"
