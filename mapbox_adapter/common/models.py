"""Data models shared by the request and normalization stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Query:
    raw_input: str
    scheme: str
    url: str
    country_filter: str | None = None
    access_token: str | None = None


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: str | None


@dataclass(frozen=True)
class ContextEntry:
    id: str
    text: str | None
    short_code: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return self.id.split(".", 1)[0]

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a field the same way it was flattened onto the entry.

        ``id``, ``text`` and ``short_code`` already hold any override from the
        source ``properties``; every other key comes from ``properties``.
        """
        if key in ("id", "text", "short_code"):
            value = getattr(self, key)
            return default if value is None else value
        return self.properties.get(key, default)


@dataclass(frozen=True)
class AdminLevel:
    name: str | None
    code: str
    level: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "code": self.code, "level": self.level}


@dataclass(frozen=True)
class Bounds:
    south: float
    west: float
    north: float
    east: float

    def to_dict(self) -> dict[str, float]:
        return {"south": self.south, "west": self.west, "north": self.north, "east": self.east}


@dataclass(frozen=True)
class AddressRecord:
    """Provider-agnostic address; every slot exists, unset ones are ``None``."""

    latitude: float | None = None
    longitude: float | None = None
    bounds: Bounds | None = None
    street_number: str | None = None
    street_name: str | None = None
    locality: str | None = None
    postal_code: str | None = None
    sub_locality: str | None = None
    admin_levels: tuple[AdminLevel, ...] = ()
    country: str | None = None
    country_code: str | None = None
    timezone: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "bounds": self.bounds.to_dict() if self.bounds is not None else None,
            "streetNumber": self.street_number,
            "streetName": self.street_name,
            "locality": self.locality,
            "postalCode": self.postal_code,
            "subLocality": self.sub_locality,
            "adminLevels": [level.to_dict() for level in self.admin_levels],
            "country": self.country,
            "countryCode": self.country_code,
            "timezone": self.timezone,
        }


DEFAULT_RECORD = AddressRecord()
