from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import quote

from pydantic import ValidationError

from .base import MalformedResponse, WeatherProvider
from .schemas import SEARCH_RESULTS, LocationPayload
from ..entities import Candidate, Identifier, WeatherReport


class MetaWeatherProvider(WeatherProvider):
    base_url = "https://www.metaweather.com/api/location"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def search(self, query: str) -> List[Candidate]:
        """Return the location candidates matching ``query`` in upstream order."""
        response = self._request("GET", f"{self.base_url}/search/", params={"query": query})
        data = self._json(response)
        try:
            payloads = SEARCH_RESULTS.validate_python(data)
        except ValidationError as exc:
            self._log.error("Unexpected search payload: %s", exc)
            raise MalformedResponse("invalid search results") from exc
        return [payload.to_candidate() for payload in payloads]

    def location(self, woeid: Identifier) -> List[WeatherReport]:
        """Return the consolidated per-day reports for ``woeid``."""
        response = self._request("GET", f"{self.base_url}/{quote(str(woeid), safe='')}")
        data = self._json(response)
        try:
            payload = LocationPayload.model_validate(data)
        except ValidationError as exc:
            self._log.error("Unexpected location payload for %s: %s", woeid, exc)
            raise MalformedResponse("invalid location payload") from exc
        return [report.to_report() for report in payload.consolidated_weather]


__all__ = ["MetaWeatherProvider"]
