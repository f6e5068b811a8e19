"""Fold a Mapbox feature and its context hierarchy into one AddressRecord.

The feature itself is evaluated first, then each ``context`` ancestor in the
order the service returned them. Fields are last-write-wins, so a later
``place`` overwrites an earlier ``locality`` and so on. Region entries are
appended to ``admin_levels`` instead of overwriting.

Coordinates and bounding boxes are copied index for index: ``coordinates[0]``
is stored as latitude and ``bbox`` is read as south, west, north, east. This
matches the established output of this adapter and must not be reordered
without checking it against live responses.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping

from mapbox_adapter.common.models import DEFAULT_RECORD, AddressRecord, AdminLevel, Bounds, ContextEntry

_TEXT_FIELDS = {
    "postcode": "postal_code",
    "place": "locality",
    "locality": "locality",
    "neighborhood": "sub_locality",
    "address": "street_name",
}


class MalformedFeature(ValueError):
    pass


def _number(value: object, ctx: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedFeature(f"{ctx} is not numeric: {value!r}")
    return value


def normalize_context(value: Mapping[str, Any]) -> ContextEntry:
    if not isinstance(value, Mapping):
        raise MalformedFeature(f"Context entry is not an object: {value!r}")

    core = {"id": value.get("id"), "text": value.get("text"), "short_code": value.get("short_code")}
    properties: dict[str, Any] = {}
    raw_properties = value.get("properties")
    if isinstance(raw_properties, Mapping):
        # Property keys land on the entry itself and win over top-level ones.
        for key, item in raw_properties.items():
            if key in core:
                core[key] = item
            else:
                properties[key] = item

    return ContextEntry(
        id=str(core["id"] or ""),
        text=core["text"],
        short_code=core["short_code"],
        properties=properties,
    )


def context_entries(feature: Mapping[str, Any]) -> list[ContextEntry]:
    entries = [normalize_context(feature)]
    for item in feature.get("context") or []:
        entries.append(normalize_context(item))
    return entries


def _address_fields(entries: list[ContextEntry]) -> dict[str, Any]:
    updates: dict[str, Any] = {}
    admin_levels: list[AdminLevel] = []

    for entry in entries:
        entry_type = entry.type
        if entry_type == "country":
            updates["country"] = entry.text
            updates["country_code"] = entry.short_code
        elif entry_type == "region":
            admin_levels.append(AdminLevel(name=entry.text, code="", level=1))
        elif entry_type in _TEXT_FIELDS:
            updates[_TEXT_FIELDS[entry_type]] = entry.text
        # poi and unknown types carry nothing we map

    if admin_levels:
        updates["admin_levels"] = tuple(admin_levels)
    return updates


def _coordinates(feature: Mapping[str, Any]) -> tuple[float, float]:
    geometry = feature.get("geometry")
    if not isinstance(geometry, Mapping):
        raise MalformedFeature("Feature has no geometry")
    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, (list, tuple)) or len(coordinates) < 2:
        raise MalformedFeature(f"Feature geometry has no coordinate pair: {coordinates!r}")
    return _number(coordinates[0], "coordinates[0]"), _number(coordinates[1], "coordinates[1]")


def _bounds(feature: Mapping[str, Any]) -> Bounds | None:
    bbox = feature.get("bbox")
    if bbox is None:
        return None
    if not isinstance(bbox, (list, tuple)) or len(bbox) < 4:
        raise MalformedFeature(f"Feature bbox must have four values: {bbox!r}")
    south, west, north, east = (_number(bbox[i], f"bbox[{i}]") for i in range(4))
    return Bounds(south=south, west=west, north=north, east=east)


def normalize_feature(feature: Mapping[str, Any], template: AddressRecord = DEFAULT_RECORD) -> AddressRecord:
    if not isinstance(feature, Mapping):
        raise MalformedFeature(f"Feature is not an object: {feature!r}")

    updates = _address_fields(context_entries(feature))
    latitude, longitude = _coordinates(feature)
    updates["latitude"] = latitude
    updates["longitude"] = longitude
    updates["bounds"] = _bounds(feature)

    return replace(template, **updates)
