from __future__ import annotations

import math

import pytest

from weather_lookup.entities import WeatherReport
from weather_lookup.services.projector import CANONICAL_FIELDS, WeatherProjector, format_number


ICON_URL = "https://metaweather.test/static/img/weather"


def make_report(abbr: str = "lr", name: str = "Rain", date: str = "2021-03-01", temp: float = 12.345) -> WeatherReport:
    return WeatherReport(
        weather_state_name=name,
        weather_state_abbr=abbr,
        applicable_date=date,
        min_temp=4.5,
        max_temp=11.0,
        the_temp=temp,
        humidity=88,
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        (12.5, "12.50"),
        (12.345, "12.35"),
        (-1.256, "-1.26"),
        (0.001, "0.00"),
        (12.0, 12.0),
        (88, 88),
        ("Rain", "Rain"),
        (None, None),
        (True, True),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_integral_float_is_left_untouched():
    value = format_number(12.0)

    assert isinstance(value, float)


def test_columns_follow_canonical_order():
    projector = WeatherProjector(icon_base_url=ICON_URL)

    assert projector.columns() == ["Icon", "State", "Date", "Min", "Max", "Temp", "Humidity"]
    assert len(CANONICAL_FIELDS) == 7


def test_project_single_report():
    projector = WeatherProjector(icon_base_url=ICON_URL)

    rows = projector.project([make_report()])

    assert rows == [(f"{ICON_URL}/lr.svg", "Rain", "2021-03-01", "4.50", 11.0, "12.35", 88)]


def test_project_preserves_report_order():
    projector = WeatherProjector(icon_base_url=ICON_URL)
    reports = [make_report(date=f"2021-03-0{day}") for day in range(1, 7)]

    rows = projector.project(reports)

    assert [row[2] for row in rows] == [report.applicable_date for report in reports]
    assert all(len(row) == 7 for row in rows)


def test_icon_cell_is_never_the_raw_code():
    projector = WeatherProjector(icon_base_url=ICON_URL + "/")

    row = projector.project_report(make_report(abbr="sn", name="Snow"))

    assert row[0] == f"{ICON_URL}/sn.svg"
    assert row[0] != "sn"
    assert projector.icon_column() == 0


def test_project_empty_sequence():
    assert WeatherProjector().project([]) == []


def test_custom_field_list_without_icon():
    projector = WeatherProjector(fields=[("the_temp", "Temp"), ("weather_state_name", "State")])

    assert projector.project([make_report()]) == [("12.35", "Rain")]
    assert projector.icon_column() is None


def test_non_finite_floats_are_left_untouched():
    assert format_number(float("inf")) == float("inf")
    assert format_number(float("-inf")) == float("-inf")
    assert math.isnan(format_number(float("nan")))


def test_huge_integer_is_left_untouched():
    huge = 10 ** 400

    assert format_number(huge) == huge


def test_icon_code_is_quoted():
    projector = WeatherProjector(icon_base_url=ICON_URL)

    assert projector.icon_url("../x") == f"{ICON_URL}/..%2Fx.svg"
