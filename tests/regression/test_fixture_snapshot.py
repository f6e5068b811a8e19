from __future__ import annotations

import json

import pytest

from mapbox_adapter.common.config_loader import ProviderConfig
from mapbox_adapter.common.models import RawResponse
from mapbox_adapter.provider.mapbox import MapboxProvider

# Trimmed from a real forward-geocoding response for "1600 Pennsylvania Ave NW".
FIXTURE = {
    "type": "FeatureCollection",
    "query": ["1600", "pennsylvania", "ave", "nw"],
    "features": [
        {
            "id": "address.3071437326482276",
            "type": "Feature",
            "place_type": ["address"],
            "relevance": 1,
            "properties": {"accuracy": "rooftop"},
            "text": "Pennsylvania Avenue Northwest",
            "place_name": "1600 Pennsylvania Avenue Northwest, Washington, District of Columbia 20500, United States",
            "center": [-77.036547, 38.897675],
            "geometry": {"type": "Point", "coordinates": [-77.036547, 38.897675]},
            "address": "1600",
            "context": [
                {"id": "neighborhood.2102966", "text": "Downtown"},
                {"id": "postcode.8428591010938400", "text": "20500"},
                {"id": "place.7673410831246050", "wikidata": "Q61", "text": "Washington"},
                {
                    "id": "region.14064402149979320",
                    "short_code": "US-DC",
                    "wikidata": "Q3551781",
                    "text": "District of Columbia",
                },
                {"id": "country.9053006287256050", "short_code": "us", "wikidata": "Q30", "text": "United States"},
            ],
        },
        {
            "id": "poi.1099511670000",
            "type": "Feature",
            "place_type": ["poi"],
            "properties": {"category": "landmark", "landmark": True},
            "text": "The White House",
            "geometry": {"type": "Point", "coordinates": [-77.0365, 38.8977]},
            "bbox": [-77.04, 38.89, -77.03, 38.90],
            "context": [
                {"id": "locality.1", "text": "Foggy Bottom"},
                {"id": "place.7673410831246050", "text": "Washington"},
                {"id": "region.14064402149979320", "short_code": "US-DC", "text": "District of Columbia"},
                {"id": "country.9053006287256050", "short_code": "us", "text": "United States"},
            ],
        },
    ],
}

EXPECTED = [
    {
        "latitude": -77.036547,
        "longitude": 38.897675,
        "bounds": None,
        "streetNumber": None,
        "streetName": "Pennsylvania Avenue Northwest",
        "locality": "Washington",
        "postalCode": "20500",
        "subLocality": "Downtown",
        "adminLevels": [{"name": "District of Columbia", "code": "", "level": 1}],
        "country": "United States",
        "countryCode": "us",
        "timezone": None,
    },
    {
        "latitude": -77.0365,
        "longitude": 38.8977,
        "bounds": {"south": -77.04, "west": 38.89, "north": -77.03, "east": 38.90},
        "streetNumber": None,
        "streetName": None,
        "locality": "Washington",
        "postalCode": None,
        "subLocality": None,
        "adminLevels": [{"name": "District of Columbia", "code": "", "level": 1}],
        "country": "United States",
        "countryCode": "us",
        "timezone": None,
    },
]


class FixtureTransport:
    def get(self, url: str) -> RawResponse:
        return RawResponse(200, json.dumps(FIXTURE))


@pytest.mark.regression
def test_fixture_records_are_stable():
    provider = MapboxProvider(FixtureTransport(), ProviderConfig(use_ssl=True))

    records = provider.geocode("1600 Pennsylvania Ave NW")

    assert [record.to_dict() for record in records] == EXPECTED


@pytest.mark.regression
def test_fixture_records_are_stable_across_calls():
    provider = MapboxProvider(FixtureTransport())
    assert provider.geocode("1600 Pennsylvania Ave NW") == provider.geocode("1600 Pennsylvania Ave NW")
