from pathlib import Path

import pytest

from mapbox_adapter.common.config_loader import ProviderConfig, apply_overrides, load_provider_config
from mapbox_adapter.common.errors import ConfigError

BASE_YAML = """endpoint:
  host: api.mapbox.com
  dataset: mapbox.places
  use_ssl: false
query:
  country: null
  proximity: null
  limit: null
credentials:
  access_token: null
http:
  connect_timeout: 5
  read_timeout: 15
  max_attempts: 2
"""


def _write_base(tmp_path: Path) -> Path:
    path = tmp_path / "mapbox.yml"
    path.write_text(BASE_YAML, encoding="utf-8")
    return path


def test_load_provider_config_from_repo_config_dir():
    config = load_provider_config(Path("config") / "mapbox.yml", environ={})
    assert config.host == "api.mapbox.com"
    assert config.dataset == "mapbox.places"
    assert config.use_ssl is True
    assert config.scheme == "https"


def test_load_provider_config_reads_http_settings(tmp_path: Path):
    config = load_provider_config(_write_base(tmp_path), environ={})

    assert config.timeout.connect == 5
    assert config.timeout.read == 15
    assert config.retry.max_attempts == 2
    assert config.access_token is None
    assert config.scheme == "http"


def test_load_provider_config_applies_overlay_values(tmp_path: Path):
    base = _write_base(tmp_path)
    overlay = tmp_path / "live.yml"
    overlay.write_text(
        """endpoint:
  use_ssl: true
query:
  country: gb
credentials:
  access_token: pk.overlay
""",
        encoding="utf-8",
    )

    config = load_provider_config(base, overlay_path=overlay, environ={})

    assert config.use_ssl is True
    assert config.country == "gb"
    assert config.access_token == "pk.overlay"
    assert config.host == "api.mapbox.com"


def test_load_provider_config_ignores_empty_or_missing_overlay(tmp_path: Path):
    base = _write_base(tmp_path)
    overlay = tmp_path / "empty.yml"
    overlay.write_text("", encoding="utf-8")

    assert load_provider_config(base, overlay_path=overlay, environ={}).use_ssl is False
    assert load_provider_config(base, overlay_path=tmp_path / "nope.yml", environ={}).use_ssl is False


def test_load_provider_config_falls_back_to_environment_token(tmp_path: Path):
    config = load_provider_config(_write_base(tmp_path), environ={"MAPBOX_ACCESS_TOKEN": "pk.env"})
    assert config.access_token == "pk.env"


def test_load_provider_config_prefers_file_token_over_environment(tmp_path: Path):
    base = tmp_path / "mapbox.yml"
    base.write_text(BASE_YAML.replace("access_token: null", "access_token: pk.file"), encoding="utf-8")
    config = load_provider_config(base, environ={"MAPBOX_ACCESS_TOKEN": "pk.env"})
    assert config.access_token == "pk.file"


def test_load_provider_config_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_provider_config(tmp_path / "missing.yml")


def test_load_provider_config_rejects_unknown_keys(tmp_path: Path):
    path = tmp_path / "mapbox.yml"
    path.write_text(BASE_YAML + "cache:\n  enabled: true\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_provider_config(path, environ={})


def test_apply_overrides_skips_none_values():
    config = ProviderConfig(country="fr")
    updated = apply_overrides(config, country=None, limit=2, use_ssl=True)

    assert updated.country == "fr"
    assert updated.limit == 2
    assert updated.use_ssl is True
    assert config.limit is None


def test_apply_overrides_rejects_unknown_field():
    with pytest.raises(ConfigError):
        apply_overrides(ProviderConfig(), zoom=3)


@pytest.mark.parametrize("limit", [0, -1, True, "2"])
def test_provider_config_rejects_non_positive_limit(limit):
    with pytest.raises(ConfigError):
        ProviderConfig(limit=limit)


def test_apply_overrides_rejects_non_positive_limit():
    with pytest.raises(ConfigError):
        apply_overrides(ProviderConfig(), limit=0)
