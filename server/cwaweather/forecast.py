"""Reshape CWA forecast elements into flat per-time-slot records."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ElementKind(str, Enum):
    """Forecast element tags of the F-C0032-001 dataset."""

    WEATHER = "Wx"
    RAIN = "PoP"
    MIN_TEMP = "MinT"
    MAX_TEMP = "MaxT"
    COMFORT = "CI"
    WIND_SPEED = "WS"


# kind -> (record field, suffix appended to parameterName)
_ELEMENT_FIELDS = {
    ElementKind.WEATHER: ("weather", ""),
    ElementKind.RAIN: ("rain", "%"),
    ElementKind.MIN_TEMP: ("min_temp", "°C"),
    ElementKind.MAX_TEMP: ("max_temp", "°C"),
    ElementKind.COMFORT: ("comfort", ""),
    ElementKind.WIND_SPEED: ("wind_speed", ""),
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ForecastRecord(_CamelModel):
    """One forecast time slot. Missing elements leave their field empty."""

    start_time: str = ""
    end_time: str = ""
    weather: str = ""
    rain: str = ""
    min_temp: str = ""
    max_temp: str = ""
    comfort: str = ""
    wind_speed: str = ""


class LocationWeather(_CamelModel):
    """Forecast for one county or city."""

    city: str
    update_time: str | None = None
    forecasts: list[ForecastRecord] = []


def _element_kind(name: Any) -> ElementKind | None:
    try:
        return ElementKind(name)
    except ValueError:
        return None


def parse_weather_elements(weather_elements: list[dict[str, Any]] | None) -> list[ForecastRecord]:
    """Turn CWA's element-oriented time series into one record per time slot.

    The first element's ``time`` array is the time axis. Unknown element
    kinds are skipped, and an element with fewer slots than the axis simply
    contributes nothing to the slots it lacks.
    """
    if not weather_elements:
        return []
    axis = weather_elements[0].get("time") or []

    forecasts = []
    for i, slot in enumerate(axis):
        values = {"start_time": slot.get("startTime") or "", "end_time": slot.get("endTime") or ""}

        for element in weather_elements:
            kind = _element_kind(element.get("elementName"))
            if kind is None:
                continue
            times = element.get("time") or []
            if i >= len(times):
                continue
            field, suffix = _ELEMENT_FIELDS[kind]
            value = (times[i].get("parameter") or {}).get("parameterName")
            if value is not None:
                values[field] = f"{value}{suffix}"

        forecasts.append(ForecastRecord(**values))

    return forecasts


def build_location_weather(location: dict[str, Any], dataset_description: str | None) -> LocationWeather:
    """Assemble the response record for one upstream ``location`` entry."""
    return LocationWeather(
        city=location.get("locationName", ""),
        update_time=dataset_description,
        forecasts=parse_weather_elements(location.get("weatherElement")),
    )
