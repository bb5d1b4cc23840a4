"""Forecast endpoints: Kaohsiung, any allowed county/city, and all of them."""

import logging
from urllib.parse import unquote

from starlette.requests import Request
from starlette.responses import JSONResponse

from cwaweather.client import CwaClient
from cwaweather.config import Settings
from cwaweather.errors import ConfigurationError, InvalidRegionError, NoDataError
from cwaweather.forecast import LocationWeather, build_location_weather
from cwaweather.regions import KAOHSIUNG, is_allowed_region

logger = logging.getLogger(__name__)


async def load_forecasts(
    settings: Settings,
    client: CwaClient,
    region_filter: str = "",
    require_allow_list: bool = False,
) -> list[LocationWeather]:
    """Fetch and reshape forecasts for ``region_filter`` ("" means all regions).

    Raises a WeatherServiceError subclass on any failure; no partial results.
    """
    if not settings.cwa_api_key:
        raise ConfigurationError()

    if require_allow_list and not is_allowed_region(region_filter):
        raise InvalidRegionError(region_filter)

    payload = await client.fetch_dataset(region_filter)
    records = payload.get("records") or {}
    locations = records.get("location") or []

    if not locations:
        raise NoDataError(region_filter, spaced=require_allow_list)

    if region_filter:
        locations = locations[:1]

    description = records.get("datasetDescription")
    return [build_location_weather(location, description) for location in locations]


def _success(data) -> JSONResponse:
    if isinstance(data, list):
        body = [item.model_dump(by_alias=True, exclude_none=True) for item in data]
    else:
        body = data.model_dump(by_alias=True, exclude_none=True)
    return JSONResponse({"success": True, "data": body})


async def kaohsiung_weather(request: Request):
    """GET /api/weather/kaohsiung"""
    state = request.app.state
    forecasts = await load_forecasts(state.settings, state.cwa_client, KAOHSIUNG)
    return _success(forecasts[0])


async def city_weather(request: Request):
    """GET /api/weather/city/{city_name}"""
    city_name = unquote(request.path_params.get("city_name", ""))
    state = request.app.state
    forecasts = await load_forecasts(
        state.settings, state.cwa_client, city_name, require_allow_list=True
    )
    return _success(forecasts[0])


async def all_weather(request: Request):
    """GET /api/weather/all"""
    state = request.app.state
    forecasts = await load_forecasts(state.settings, state.cwa_client)
    logger.info("Serving forecasts for %d locations", len(forecasts))
    return _success(forecasts)
