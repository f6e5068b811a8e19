"""Mapbox geocoding provider."""

from __future__ import annotations

import logging
import time
from dataclasses import replace

from mapbox_adapter.common.config_loader import ProviderConfig
from mapbox_adapter.common.constants import PROVIDER_NAME
from mapbox_adapter.common.errors import GeocoderError, NoResult
from mapbox_adapter.common.logging import LOGGER_NAME, log_event
from mapbox_adapter.common.models import AddressRecord
from mapbox_adapter.common.time_utils import elapsed_ms
from mapbox_adapter.provider.assembler import apply_limit, assemble_results
from mapbox_adapter.provider.classifier import classify_response
from mapbox_adapter.provider.normalizer import MalformedFeature
from mapbox_adapter.provider.request_builder import build_query, format_coordinates, redact_url
from mapbox_adapter.provider.transport import Transport, invoke


class MapboxProvider:
    """Geocode addresses and coordinate pairs against the Mapbox places API.

    Every call performs at most one request through ``transport`` and either
    returns the full list of records or raises exactly one ``GeocoderError``.
    The provider keeps no per-call state, so it can be shared as long as the
    transport is reentrant.
    """

    name = PROVIDER_NAME

    def __init__(
        self,
        transport: Transport,
        config: ProviderConfig | None = None,
        *,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
    ) -> None:
        self.transport = transport
        self.config = config or ProviderConfig()
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.run_id = run_id

    def with_country(self, country: str | None) -> "MapboxProvider":
        return MapboxProvider(
            self.transport,
            replace(self.config, country=country),
            logger=self.logger,
            run_id=self.run_id,
        )

    def geocode(self, address: str) -> list[AddressRecord]:
        started = time.monotonic()
        shown = address
        try:
            query = build_query(address, self.config)
            shown = redact_url(query.url)
            response = invoke(self.transport, query)
            features = classify_response(response, query.url)
            try:
                records = assemble_results(features)
            except MalformedFeature as exc:
                raise NoResult(f'Could not read features for query "{shown}": {exc}', query=query.url) from exc
        except GeocoderError as exc:
            log_event(
                self.logger,
                "geocode query failed",
                level=logging.WARNING,
                run_id=self.run_id,
                provider=self.name,
                event="QUERY_FAIL",
                status="error",
                query=shown,
                duration_ms=elapsed_ms(started),
                error_code=exc.error_code,
            )
            raise

        records = apply_limit(records, self.config.limit)
        log_event(
            self.logger,
            "geocode query succeeded",
            run_id=self.run_id,
            provider=self.name,
            event="QUERY_OK",
            status="ok",
            query=shown,
            duration_ms=elapsed_ms(started),
            result_count=len(records),
        )
        return records

    def reverse(self, latitude: float, longitude: float) -> list[AddressRecord]:
        return self.geocode(format_coordinates(latitude, longitude))
