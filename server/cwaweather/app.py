"""Starlette application: routes, CORS and error responses."""

import logging

import httpx
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.types import ASGIApp

from cwaweather.client import CwaClient
from cwaweather.config import Settings
from cwaweather.errors import WeatherServiceError
from cwaweather.handlers.meta import health, index
from cwaweather.handlers.weather import all_weather, city_weather, kaohsiung_weather

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {"error": "找不到此路徑"}


async def weather_error(request: Request, exc: WeatherServiceError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


async def http_error(request: Request, exc: HTTPException):
    # Unknown paths and wrong methods on known paths both fall through to 404.
    if exc.status_code in (404, 405):
        return JSONResponse(NOT_FOUND_BODY, status_code=404)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code)


async def server_error(request: Request, exc: Exception):
    # The exception is re-raised after this response and logged by the ASGI server.
    return JSONResponse({"error": "伺服器錯誤", "message": str(exc)}, status_code=500)


def create_app(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> ASGIApp:
    """Build the app around an explicit ``settings`` object.

    ``transport`` is handed to the CWA client; tests use it to fake upstream.
    """
    if not settings.cwa_api_key:
        logger.warning("CWA_API_KEY is not set; weather endpoints will return 500")

    routes = [
        Route("/", index),
        Route("/api/health", health),
        Route("/api/weather/kaohsiung", kaohsiung_weather),
        Route("/api/weather/city/", city_weather),
        Route("/api/weather/city/{city_name}", city_weather),
        Route("/api/weather/all", all_weather),
    ]
    app = Starlette(
        routes=routes,
        exception_handlers={
            WeatherServiceError: weather_error,
            HTTPException: http_error,
            Exception: server_error,
        },
    )
    app.state.settings = settings
    app.state.cwa_client = CwaClient(settings, transport=transport)

    # Outermost, so the catch-all 500 response gets CORS headers too.
    return CORSMiddleware(
        app,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
