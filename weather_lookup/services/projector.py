from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any, Iterable, List, Optional, Sequence, Tuple
from urllib.parse import quote

from ..entities import Row, WeatherReport


ICON_FIELD = "weather_state_abbr"

CANONICAL_FIELDS: Tuple[Tuple[str, str], ...] = (
    (ICON_FIELD, "Icon"),
    ("weather_state_name", "State"),
    ("applicable_date", "Date"),
    ("min_temp", "Min"),
    ("max_temp", "Max"),
    ("the_temp", "Temp"),
    ("humidity", "Humidity"),
)

_TWO_PLACES = Decimal("0.01")


def format_number(value: Any) -> Any:
    """Render non-integral numbers with exactly two decimals.

    Rounding is half-up on the shortest decimal form of the value, so
    ``12.345`` becomes ``"12.35"`` even though its binary form sits just
    below the midpoint. Integers, integral or non-finite floats and non-numbers
    are returned as is.
    """
    if isinstance(value, (bool, int)) or not isinstance(value, Real):
        return value
    number = float(value)
    if not math.isfinite(number) or number.is_integer():
        return value
    return str(Decimal(str(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


class WeatherProjector:
    """Turn weather reports into display rows in canonical field order."""

    icon_base_url = "https://www.metaweather.com/static/img/weather"

    def __init__(
        self,
        icon_base_url: Optional[str] = None,
        fields: Sequence[Tuple[str, str]] = CANONICAL_FIELDS,
    ) -> None:
        self.icon_base_url = (icon_base_url or self.icon_base_url).rstrip("/")
        self.fields = tuple(fields)

    def columns(self) -> List[str]:
        return [label for _, label in self.fields]

    def icon_column(self) -> Optional[int]:
        for index, (key, _) in enumerate(self.fields):
            if key == ICON_FIELD:
                return index
        return None

    def icon_url(self, code: str) -> str:
        return f"{self.icon_base_url}/{quote(str(code), safe='')}.svg"

    def project(self, reports: Iterable[WeatherReport]) -> List[Row]:
        return [self.project_report(report) for report in reports]

    def project_report(self, report: WeatherReport) -> Row:
        return tuple(self._cell(key, getattr(report, key)) for key, _ in self.fields)

    def _cell(self, key: str, value: Any) -> Any:
        if key == ICON_FIELD:
            return self.icon_url(value)
        return format_number(value)


__all__ = ["CANONICAL_FIELDS", "ICON_FIELD", "WeatherProjector", "format_number"]
