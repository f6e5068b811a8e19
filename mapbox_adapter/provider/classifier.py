"""Classify a raw Mapbox response as a feature list or a query error."""

from __future__ import annotations

import json
from typing import Any

from mapbox_adapter.common.errors import InvalidCredentials, NoResult, QuotaExceeded
from mapbox_adapter.common.models import RawResponse
from mapbox_adapter.provider.request_builder import redact_url


def classify_response(response: RawResponse, query_url: str) -> list[dict[str, Any]]:
    shown = redact_url(query_url)

    if response.status_code == 401:
        raise InvalidCredentials(f"Access token is invalid {shown}", query=query_url)

    if response.status_code == 429:
        raise QuotaExceeded(f"Rate limits exceeded {shown}", query=query_url)

    if not response.body:
        raise NoResult(f'Could not execute query "{shown}".', query=query_url)

    try:
        payload = json.loads(response.body)
    except ValueError as exc:
        raise NoResult(f'Could not execute query "{shown}".', query=query_url) from exc

    if payload is None:
        raise NoResult(f'Could not execute query "{shown}".', query=query_url)

    features = payload.get("features") if isinstance(payload, dict) else None
    if not isinstance(features, list) or not features or response.status_code != 200:
        raise NoResult(f'Could not execute query "{shown}".', query=query_url)

    return features
