"""Query URL construction for the Mapbox geocoding endpoint."""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import quote_plus, urlencode

from mapbox_adapter.common.config_loader import ProviderConfig
from mapbox_adapter.common.constants import ENDPOINT_TEMPLATE
from mapbox_adapter.common.errors import UnsupportedInput
from mapbox_adapter.common.models import Query

_ACCESS_TOKEN_RE = re.compile(r"(access_token=)[^&]*")


def is_ip_address(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def format_coordinates(latitude: float, longitude: float) -> str:
    return f"{float(latitude):.6f},{float(longitude):.6f}"


def redact_url(url: str) -> str:
    return _ACCESS_TOKEN_RE.sub(r"\1***", url)


def _query_params(config: ProviderConfig) -> dict[str, str]:
    params = {}
    if config.country is not None:
        params["country"] = config.country
    if config.access_token is not None:
        params["access_token"] = config.access_token
    return params


def build_query(address: str, config: ProviderConfig) -> Query:
    if is_ip_address(address):
        raise UnsupportedInput(
            "The Mapbox provider does not support IP addresses, only street addresses.",
            query=address,
        )

    url = ENDPOINT_TEMPLATE.format(
        scheme=config.scheme,
        host=config.host,
        dataset=config.dataset,
        query=quote_plus(address),
    )
    params = _query_params(config)
    if params:
        url = f"{url}?{urlencode(params)}"

    return Query(
        raw_input=address,
        scheme=config.scheme,
        url=url,
        country_filter=config.country,
        access_token=config.access_token,
    )
