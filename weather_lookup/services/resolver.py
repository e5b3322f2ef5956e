from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence

from ..entities import Candidate, WeatherReport


CandidatePolicy = Callable[[Sequence[Candidate]], Candidate]


class EmptyQuery(ValueError):
    """Raised when the place query is blank."""


class LocationNotFound(LookupError):
    """Raised when the search endpoint returns no candidates."""

    def __init__(self, query: str) -> None:
        super().__init__(f"no location matches {query!r}")
        self.query = query


def select_first_candidate(candidates: Sequence[Candidate]) -> Candidate:
    """First result wins; relevance and name are not considered."""
    return candidates[0]


class WeatherResolver:
    """Resolve a place name into the per-day reports for its first match."""

    def __init__(
        self,
        provider: Any,
        candidate_policy: CandidatePolicy = select_first_candidate,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self.candidate_policy = candidate_policy
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def locate(self, query: str) -> Candidate:
        query = _clean_query(query)
        candidates = self.provider.search(query)
        if not candidates:
            raise LocationNotFound(query)
        candidate = self.candidate_policy(candidates)
        self._log.debug("Query %r resolved to %s (%s)", query, candidate.title, candidate.woeid)
        return candidate

    def reports_for(self, candidate: Candidate) -> List[WeatherReport]:
        return list(self.provider.location(candidate.woeid))

    def resolve(self, query: str) -> List[WeatherReport]:
        return self.reports_for(self.locate(query))


def _clean_query(query: str) -> str:
    query = (query or "").strip()
    if not query:
        raise EmptyQuery("query must not be empty")
    return query


__all__ = ["CandidatePolicy", "EmptyQuery", "LocationNotFound", "WeatherResolver", "select_first_candidate"]
