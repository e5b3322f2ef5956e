from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .projector import WeatherProjector
from .resolver import EmptyQuery, LocationNotFound, WeatherResolver
from ..entities import Candidate, Row
from ..providers.base import MalformedResponse, TransportError


class LookupStatus(str, enum.Enum):
    OK = "ok"
    EMPTY_QUERY = "empty_query"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_RESPONSE = "malformed_response"
    SUPERSEDED = "superseded"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a single weather lookup, successful or not."""

    query: str
    status: LookupStatus
    location: Optional[Candidate] = None
    columns: Tuple[str, ...] = ()
    rows: Tuple[Row, ...] = ()
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status is LookupStatus.OK

    def as_dict(self) -> Dict[str, Any]:
        location = None
        if self.location is not None:
            location = {"woeid": self.location.woeid, "title": self.location.title}
        return {
            "query": self.query,
            "status": self.status.value,
            "location": location,
            "columns": list(self.columns),
            "rows": [list(row) for row in self.rows],
            "detail": self.detail,
        }


class WeatherLookupService:
    """Run a resolution and projection and report the outcome as a value."""

    def __init__(
        self,
        *,
        resolver: WeatherResolver,
        projector: Optional[WeatherProjector] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.resolver = resolver
        self.projector = projector or WeatherProjector()
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def lookup(self, query: str, is_cancelled: Optional[Callable[[], bool]] = None) -> LookupResult:
        cancelled = is_cancelled or (lambda: False)
        try:
            candidate = self.resolver.locate(query)
            if cancelled():
                return self._superseded(query)
            reports = self.resolver.reports_for(candidate)
        except EmptyQuery:
            return LookupResult(query=query, status=LookupStatus.EMPTY_QUERY, detail="Type a city name")
        except LocationNotFound as exc:
            self._log.warning("Location not found: %s", exc.query)
            return LookupResult(query=query, status=LookupStatus.NOT_FOUND, detail=f"City {exc.query} not found")
        except MalformedResponse as exc:
            self._log.error("Malformed upstream response for %r: %s", query, exc)
            return LookupResult(
                query=query,
                status=LookupStatus.MALFORMED_RESPONSE,
                detail="Weather service returned an unexpected response",
            )
        except TransportError as exc:
            self._log.error("Weather service unavailable for %r: %s", query, exc)
            return LookupResult(
                query=query,
                status=LookupStatus.TRANSPORT_ERROR,
                detail="Weather service is unavailable",
            )
        if cancelled():
            return self._superseded(query)

        rows: List[Row] = self.projector.project(reports)
        return LookupResult(
            query=query,
            status=LookupStatus.OK,
            location=candidate,
            columns=tuple(self.projector.columns()),
            rows=tuple(rows),
        )

    # Helpers ------------------------------------------------------------
    def _superseded(self, query: str) -> LookupResult:
        self._log.debug("Lookup for %r superseded", query)
        return LookupResult(query=query, status=LookupStatus.SUPERSEDED, detail="Superseded by a newer query")


__all__ = ["LookupResult", "LookupStatus", "WeatherLookupService"]
