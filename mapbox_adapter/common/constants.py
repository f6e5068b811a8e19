"""Application constants."""

PROVIDER_NAME = "mapbox"
USER_AGENT = "mapbox-adapter/0.3"
DEFAULT_HOST = "api.mapbox.com"
DEFAULT_DATASET = "mapbox.places"
ENDPOINT_TEMPLATE = "{scheme}://{host}/geocoding/v5/{dataset}/{query}.json"
ACCESS_TOKEN_ENV = "MAPBOX_ACCESS_TOKEN"
COMMANDS = (
    "geocode",
    "reverse",
)
EXIT_SUCCESS = 0
EXIT_NO_RESULT = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "provider",
    "event",
    "status",
    "query",
    "duration_ms",
    "result_count",
    "error_code",
    "message",
)
