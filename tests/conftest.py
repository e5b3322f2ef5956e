from __future__ import annotations

import pytest

from requests_mock import Mocker


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def london_search() -> list:
    return [
        {"title": "London", "location_type": "City", "woeid": 44418, "latt_long": "51.506321,-0.12714"},
        {"title": "Londonderry", "location_type": "City", "woeid": 24554868, "latt_long": "54.9975,-7.3086"},
    ]


@pytest.fixture
def london_location() -> dict:
    return {
        "title": "London",
        "woeid": 44418,
        "consolidated_weather": [
            {
                "id": 1,
                "weather_state_name": "Rain",
                "weather_state_abbr": "lr",
                "wind_direction_compass": "SW",
                "applicable_date": "2021-03-01",
                "min_temp": 4.5,
                "max_temp": 11.0,
                "the_temp": 12.345,
                "air_pressure": 1012,
                "humidity": 88,
                "predictability": 75,
            },
            {
                "id": 2,
                "weather_state_name": "Snow",
                "weather_state_abbr": "sn",
                "applicable_date": "2021-03-02",
                "min_temp": -1.256,
                "max_temp": 2,
                "the_temp": 0.5,
                "humidity": 93,
            },
        ],
    }
