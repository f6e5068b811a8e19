"""Turn a classified feature list into ordered address records."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from mapbox_adapter.common.models import DEFAULT_RECORD, AddressRecord
from mapbox_adapter.provider.normalizer import normalize_feature


def assemble_results(
    features: Iterable[Mapping[str, Any]],
    template: AddressRecord = DEFAULT_RECORD,
) -> list[AddressRecord]:
    return [normalize_feature(feature, template=template) for feature in features]


def apply_limit(records: list[AddressRecord], limit: int | None) -> list[AddressRecord]:
    if limit is None:
        return records
    return records[:limit]
