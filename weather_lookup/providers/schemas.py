"""Payload schemas for the MetaWeather location API."""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from ..entities import Candidate, WeatherReport

__all__ = ["CandidatePayload", "LocationPayload", "ReportPayload", "SEARCH_RESULTS"]


class CandidatePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    woeid: Union[int, str]
    title: str = Field(default="")
    location_type: Optional[str] = Field(default=None)
    latt_long: Optional[str] = Field(default=None)

    def to_candidate(self) -> Candidate:
        return Candidate(
            woeid=self.woeid,
            title=self.title,
            location_type=self.location_type,
            latt_long=self.latt_long,
        )


class ReportPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    weather_state_name: str
    weather_state_abbr: str
    applicable_date: str
    # int before float keeps integral upstream values (humidity) as ints
    min_temp: Union[int, float]
    max_temp: Union[int, float]
    the_temp: Union[int, float]
    humidity: Union[int, float]

    @field_validator("weather_state_abbr")
    @classmethod
    def _abbr_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("weather_state_abbr must not be blank")
        return value

    def to_report(self) -> WeatherReport:
        return WeatherReport(
            weather_state_name=self.weather_state_name,
            weather_state_abbr=self.weather_state_abbr,
            applicable_date=self.applicable_date,
            min_temp=self.min_temp,
            max_temp=self.max_temp,
            the_temp=self.the_temp,
            humidity=self.humidity,
        )


class LocationPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(default=None)
    consolidated_weather: List[ReportPayload]


SEARCH_RESULTS = TypeAdapter(List[CandidatePayload])
