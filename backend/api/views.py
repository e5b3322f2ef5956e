"""REST API views for weather lookups."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weather_lookup.providers.base import RequestConfig
from weather_lookup.providers.metaweather import MetaWeatherProvider
from weather_lookup.services.lookup import LookupStatus, WeatherLookupService
from weather_lookup.services.projector import WeatherProjector
from weather_lookup.services.resolver import WeatherResolver


STATUS_CODES = {
    LookupStatus.OK: status.HTTP_200_OK,
    LookupStatus.EMPTY_QUERY: status.HTTP_400_BAD_REQUEST,
    LookupStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    LookupStatus.TRANSPORT_ERROR: status.HTTP_502_BAD_GATEWAY,
    LookupStatus.MALFORMED_RESPONSE: status.HTTP_502_BAD_GATEWAY,
    LookupStatus.SUPERSEDED: status.HTTP_409_CONFLICT,
}


@lru_cache(maxsize=1)
def get_lookup_service() -> WeatherLookupService:
    provider = MetaWeatherProvider(
        base_url=settings.METAWEATHER_BASE_URL,
        request_config=RequestConfig(timeout=settings.WEATHER_REQUEST_TIMEOUT),
    )
    return WeatherLookupService(
        resolver=WeatherResolver(provider),
        projector=WeatherProjector(icon_base_url=settings.METAWEATHER_ICON_URL),
    )


class WeatherView(APIView):
    """Look up the daily forecast for a place name."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the projected forecast table for ``term``."""
        term = request.query_params.get("term", "").strip()
        if not term:
            return Response({"detail": "term query parameter is required"}, status=status.HTTP_400_BAD_REQUEST)

        result = get_lookup_service().lookup(term)
        return Response(result.as_dict(), status=STATUS_CODES[result.status])
