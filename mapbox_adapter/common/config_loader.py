"""Configuration loading and validation."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from mapbox_adapter.common.constants import ACCESS_TOKEN_ENV, DEFAULT_DATASET, DEFAULT_HOST
from mapbox_adapter.common.errors import ConfigError
from mapbox_adapter.common.fs import read_yaml
from mapbox_adapter.common.http import RetryConfig, TimeoutConfig
from mapbox_adapter.common.schema import validate_provider_config


@dataclass(frozen=True)
class ProviderConfig:
    country: str | None = None
    # Accepted for callers that pass it; not sent with the request.
    proximity: Any = None
    use_ssl: bool = False
    access_token: str | None = None
    host: str = DEFAULT_HOST
    dataset: str = DEFAULT_DATASET
    limit: int | None = None
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)

    def __post_init__(self) -> None:
        if self.limit is None:
            return
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise ConfigError(f"limit must be a positive integer, got {self.limit!r}")

    @property
    def scheme(self) -> str:
        return "https" if self.use_ssl else "http"


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    if overlay is None:
        return base
    return _deep_merge(base, overlay)


def config_from_mapping(cfg: dict, environ: Mapping[str, str] | None = None) -> ProviderConfig:
    env = os.environ if environ is None else environ
    endpoint = cfg["endpoint"]
    query = cfg.get("query") or {}
    credentials = cfg.get("credentials") or {}
    http = cfg["http"]

    access_token = credentials.get("access_token") or env.get(ACCESS_TOKEN_ENV) or None
    return ProviderConfig(
        country=query.get("country"),
        proximity=query.get("proximity"),
        use_ssl=endpoint["use_ssl"],
        access_token=access_token,
        host=endpoint["host"],
        dataset=endpoint["dataset"],
        limit=query.get("limit"),
        timeout=TimeoutConfig(connect=float(http["connect_timeout"]), read=float(http["read_timeout"])),
        retry=RetryConfig(max_attempts=int(http["max_attempts"])),
    )


def load_provider_config(
    path: Path,
    *,
    overlay_path: Path | None = None,
    allow_unknown: bool = False,
    environ: Mapping[str, str] | None = None,
) -> ProviderConfig:
    raw = _load_yaml_with_overlay(path, overlay_path)
    validated = validate_provider_config(raw, allow_unknown=allow_unknown)
    return config_from_mapping(validated, environ=environ)


def apply_overrides(config: ProviderConfig, **overrides: Any) -> ProviderConfig:
    """Return a copy of ``config`` with every non-``None`` override applied."""
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    try:
        return replace(config, **changes)
    except TypeError as exc:
        raise ConfigError(f"Unknown config override: {exc}") from exc
