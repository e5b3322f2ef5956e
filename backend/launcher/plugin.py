"""Launcher plugin entry point.

The launcher calls the plugin once per keystroke with a context exposing the
current ``term`` and a ``display`` callback. The plugin shows a result at
once and defers the network lookup to the preview callable, which the
launcher only invokes when the result is focused.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional

from backend.launcher.preview import Preview, render_result
from weather_lookup.providers.base import RequestConfig
from weather_lookup.providers.metaweather import MetaWeatherProvider
from weather_lookup.services.lookup import WeatherLookupService
from weather_lookup.services.projector import WeatherProjector
from weather_lookup.services.resolver import WeatherResolver
from weather_lookup.services.supersede import QueryTracker


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultDescriptor:
    title: str
    subtitle: str
    preview: Callable[[], Preview]


class WeatherPlugin:
    subtitle = "Daily forecast"

    def __init__(self, service: WeatherLookupService, tracker: Optional[QueryTracker] = None) -> None:
        self.service = service
        self.tracker = tracker or QueryTracker()

    def __call__(self, context: Any) -> None:
        term = (getattr(context, "term", "") or "").strip()
        if not term:
            return
        token = self.tracker.begin()
        context.display(
            ResultDescriptor(
                title=f"Weather in {term}",
                subtitle=self.subtitle,
                preview=partial(self.preview, term, token),
            )
        )

    def preview(self, term: str, token: int) -> Preview:
        result = self.service.lookup(term, is_cancelled=self.tracker.canceller(token))
        logger.debug("Preview for %r finished with %s", term, result.status.value)
        return render_result(result, icon_column=self.service.projector.icon_column())


def build_plugin(
    base_url: Optional[str] = None,
    icon_base_url: Optional[str] = None,
    timeout: float = 5.0,
) -> WeatherPlugin:
    provider = MetaWeatherProvider(base_url=base_url, request_config=RequestConfig(timeout=timeout))
    service = WeatherLookupService(
        resolver=WeatherResolver(provider),
        projector=WeatherProjector(icon_base_url=icon_base_url),
    )
    return WeatherPlugin(service)


__all__ = ["ResultDescriptor", "WeatherPlugin", "build_plugin"]
