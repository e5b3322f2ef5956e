"""HTML rendering of lookup results for the launcher preview pane."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from django.utils.html import format_html, format_html_join

from weather_lookup.entities import Row
from weather_lookup.services.lookup import LookupResult, LookupStatus


@dataclass(frozen=True)
class Preview:
    status: LookupStatus
    html: str


def render_result(result: LookupResult, icon_column: Optional[int] = None) -> Preview:
    if result.ok:
        html = render_table(result.columns, result.rows, icon_column=icon_column)
    else:
        html = format_html('<p class="weather-{}">{}</p>', result.status.value, result.detail)
    return Preview(status=result.status, html=str(html))


def render_table(columns: Sequence[str], rows: Sequence[Row], icon_column: Optional[int] = None) -> str:
    header = format_html_join("", "<th>{}</th>", ((label,) for label in columns))
    body = format_html_join("", "<tr>{}</tr>", ((_render_cells(row, icon_column),) for row in rows))
    return format_html('<table class="weather"><thead><tr>{}</tr></thead><tbody>{}</tbody></table>', header, body)


def _render_cells(row: Row, icon_column: Optional[int]) -> str:
    return format_html_join("", "{}", ((_render_cell(value, index == icon_column),) for index, value in enumerate(row)))


def _render_cell(value: Any, is_icon: bool) -> str:
    if is_icon:
        return format_html('<td><img src="{}" width="32" height="32"></td>', value)
    return format_html("<td>{}</td>", "" if value is None else value)


__all__ = ["Preview", "render_result", "render_table"]
