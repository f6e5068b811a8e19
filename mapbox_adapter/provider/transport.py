"""Boundary between the provider and its HTTP transport."""

from __future__ import annotations

from typing import Protocol

from mapbox_adapter.common.models import Query, RawResponse


class Transport(Protocol):
    def get(self, url: str) -> RawResponse: ...


def invoke(transport: Transport, query: Query) -> RawResponse:
    return transport.get(query.url)
