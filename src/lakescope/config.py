"""Runtime configuration for LakeScope.

Values are module-level constants. A handful can be overridden with
environment variables so deployments can tune timeouts without code changes:

- LAKESCOPE_USER_AGENT: User-Agent sent to upstream services
- LAKESCOPE_REQUEST_TIMEOUT: Per-request timeout in seconds
- LAKESCOPE_MAX_RETRIES: Attempts per upstream request
- LAKESCOPE_RETRY_DELAY: Base backoff delay in seconds
"""

import os

# Upstream endpoints
USGS_IV_URL = "https://waterservices.usgs.gov/nwis/iv/"
OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
OVERPASS_URL = "https://overpass-api.de/api/interpreter"

# Sardis Lake defaults
DEFAULT_SITE_ID = "07335700"
DEFAULT_PERIOD = "P7D"
DEFAULT_PARAMETER_CD = "00065,62614"
ALTERNATE_SITE_IDS = ["07335790", "07335500", "07336200"]
ALTERNATE_PARAMETER_CD = "00065"

DEFAULT_LAT = 34.6619
DEFAULT_LNG = -95.3890
DEFAULT_LAKE_NAME = "Sardis Lake"
DEFAULT_FORECAST_DAYS = 7
TIMEZONE = "America/Chicago"

# Overpass search radius in meters
BOUNDARY_SEARCH_RADIUS_M = 20000
OVERPASS_TIMEOUT_S = 30

USER_AGENT = os.environ.get(
    "LAKESCOPE_USER_AGENT", "LakeScope/1.0 (Environmental Analysis Platform)"
)
REQUEST_TIMEOUT = float(os.environ.get("LAKESCOPE_REQUEST_TIMEOUT", "30"))
MAX_RETRIES = int(os.environ.get("LAKESCOPE_MAX_RETRIES", "3"))
RETRY_DELAY = float(os.environ.get("LAKESCOPE_RETRY_DELAY", "2.0"))

# Refresh cadence in seconds, per data source
REFRESH_INTERVALS = {
    "usgs": 15 * 60,
    "weather": 30 * 60,
    "fishing": 60 * 60,
    "boundary": 24 * 60 * 60,
}
