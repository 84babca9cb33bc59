"""
Constants for the XAPI SDK.
Wire-level names and defaults shared by the request builder and the
response interpreter.
"""

# HTTP Headers sent on every request
HEADER_APIKEY = "X_APIKEY"
HEADER_TIMESTAMP = "X_TIMESTAMP"
HEADER_SIGNATURE = "X_SIGNATURE"

# Filter query parameter: q=field|value,field|value
PARAM_QUERY_NAME = "q"
PARAM_QUERY_FIELD_SEP = "|"
PARAM_QUERY_FILTER_SEP = ","

PATH_SEP = "/"

# YYYYMMDDHHMMSS
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

JSON_CONTENT_TYPE = "application/json"

# Success codes per operation
HTTP_OK = 200
HTTP_CREATED = 201

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,            # HTTP timeout in seconds
    'utc_timestamps': False,  # local time, as expected by the XAPI server
}

# Environment variables read by XAPISdkConfiguration.from_env()
ENV_PREFIX = "XAPI_"
