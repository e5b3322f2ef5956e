from __future__ import annotations

from typing import List

from backend.launcher.plugin import ResultDescriptor, build_plugin
from backend.launcher.preview import render_table
from weather_lookup.services.lookup import LookupStatus


BASE_URL = "https://metaweather.test/api/location"
ICON_URL = "https://metaweather.test/static/img/weather"


class LauncherContext:
    def __init__(self, term: str) -> None:
        self.term = term
        self.displayed: List[ResultDescriptor] = []

    def display(self, descriptor: ResultDescriptor) -> None:
        self.displayed.append(descriptor)


def test_plugin_displays_result_without_network(requests_mock):
    plugin = build_plugin(base_url=BASE_URL, icon_base_url=ICON_URL)
    context = LauncherContext("london")

    plugin(context)

    assert len(context.displayed) == 1
    descriptor = context.displayed[0]
    assert descriptor.title == "Weather in london"
    assert descriptor.subtitle == "Daily forecast"
    assert requests_mock.call_count == 0


def test_plugin_ignores_blank_term(requests_mock):
    plugin = build_plugin(base_url=BASE_URL, icon_base_url=ICON_URL)
    context = LauncherContext("   ")

    plugin(context)

    assert context.displayed == []


def test_preview_renders_table(requests_mock, london_search, london_location):
    requests_mock.get(f"{BASE_URL}/search/", json=london_search)
    requests_mock.get(f"{BASE_URL}/44418", json=london_location)
    plugin = build_plugin(base_url=BASE_URL, icon_base_url=ICON_URL)
    context = LauncherContext("london")
    plugin(context)

    preview = context.displayed[0].preview()

    assert preview.status is LookupStatus.OK
    assert preview.html.count("<tr>") == 3
    assert f'<img src="{ICON_URL}/lr.svg"' in preview.html
    assert "<td>12.35</td>" in preview.html
    assert "<th>Humidity</th>" in preview.html


def test_preview_reports_not_found(requests_mock):
    requests_mock.get(f"{BASE_URL}/search/", json=[])
    plugin = build_plugin(base_url=BASE_URL, icon_base_url=ICON_URL)
    context = LauncherContext("atlantis")
    plugin(context)

    preview = context.displayed[0].preview()

    assert preview.status is LookupStatus.NOT_FOUND
    assert preview.html.startswith('<p class="weather-not_found">')
    assert "atlantis" in preview.html


def test_older_preview_is_superseded(requests_mock, london_search, london_location):
    requests_mock.get(f"{BASE_URL}/search/", json=london_search)
    detail = requests_mock.get(f"{BASE_URL}/44418", json=london_location)
    plugin = build_plugin(base_url=BASE_URL, icon_base_url=ICON_URL)
    first = LauncherContext("lond")
    second = LauncherContext("london")
    plugin(first)
    plugin(second)

    stale = first.displayed[0].preview()

    assert stale.status is LookupStatus.SUPERSEDED
    assert not detail.called
    assert second.displayed[0].preview().status is LookupStatus.OK


def test_render_table_escapes_text():
    html = render_table(["State"], [("<b>Rain</b>",)])

    assert "&lt;b&gt;Rain&lt;/b&gt;" in html
    assert "<b>" not in html
