"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from mapbox_adapter.common.errors import ConfigError

TOP_LEVEL_KEYS = {"endpoint", "query", "credentials", "http"}
ENDPOINT_KEYS = {"host", "dataset", "use_ssl"}
QUERY_KEYS = {"country", "proximity", "limit"}
CREDENTIAL_KEYS = {"access_token"}
HTTP_KEYS = {"connect_timeout", "read_timeout", "max_attempts"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_mapping(obj: object, ctx: str) -> dict:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    return obj


def _assert_optional_str(value: object, ctx: str) -> None:
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{ctx} must be a string or null")


def _assert_positive_number(value: object, ctx: str) -> None:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{ctx} must be a positive number")


def _assert_positive_int(value: object, ctx: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"{ctx} must be a positive integer")


def validate_provider_config(cfg: object, *, allow_unknown: bool = False) -> dict:
    cfg = _assert_mapping(cfg, "provider config")
    _assert_required_keys(cfg, TOP_LEVEL_KEYS, "provider config")
    _assert_no_unknown_keys(cfg, TOP_LEVEL_KEYS, "provider config", allow_unknown)

    endpoint = _assert_mapping(cfg["endpoint"], "endpoint")
    _assert_required_keys(endpoint, ENDPOINT_KEYS, "endpoint")
    _assert_no_unknown_keys(endpoint, ENDPOINT_KEYS, "endpoint", allow_unknown)
    if not isinstance(endpoint["use_ssl"], bool):
        raise ConfigError("endpoint.use_ssl must be a boolean")
    for key in ("host", "dataset"):
        if not isinstance(endpoint[key], str) or not endpoint[key]:
            raise ConfigError(f"endpoint.{key} must be a non-empty string")

    query = _assert_mapping(cfg["query"] or {}, "query")
    _assert_no_unknown_keys(query, QUERY_KEYS, "query", allow_unknown)
    _assert_optional_str(query.get("country"), "query.country")
    if query.get("limit") is not None:
        _assert_positive_int(query["limit"], "query.limit")

    credentials = _assert_mapping(cfg["credentials"] or {}, "credentials")
    _assert_no_unknown_keys(credentials, CREDENTIAL_KEYS, "credentials", allow_unknown)
    _assert_optional_str(credentials.get("access_token"), "credentials.access_token")

    http = _assert_mapping(cfg["http"], "http")
    _assert_required_keys(http, HTTP_KEYS, "http")
    _assert_no_unknown_keys(http, HTTP_KEYS, "http", allow_unknown)
    _assert_positive_number(http["connect_timeout"], "http.connect_timeout")
    _assert_positive_number(http["read_timeout"], "http.read_timeout")
    _assert_positive_int(http["max_attempts"], "http.max_attempts")

    return cfg
