from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


Identifier = Union[int, str]
Number = Union[int, float]


@dataclass(frozen=True)
class Candidate:
    """A place match returned by the location search endpoint."""

    woeid: Identifier
    title: str
    location_type: Optional[str] = None
    latt_long: Optional[str] = None


@dataclass(frozen=True)
class WeatherReport:
    """One day of consolidated weather for a resolved place.

    Only the attributes shown to the user are kept; everything else the
    upstream payload carries is dropped while parsing.
    """

    weather_state_name: str
    weather_state_abbr: str
    applicable_date: str
    min_temp: Number
    max_temp: Number
    the_temp: Number
    humidity: Number


Row = Tuple[Any, ...]


__all__ = ["Candidate", "Identifier", "Number", "Row", "WeatherReport"]
