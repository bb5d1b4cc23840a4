"""Service description and health endpoints."""

from datetime import datetime, timezone

from starlette.requests import Request
from starlette.responses import JSONResponse

from cwaweather.regions import ALLOWED_CITY_NAMES

ENDPOINTS = {
    "kaohsiung": "/api/weather/kaohsiung",
    "all": "/api/weather/all",
    "city": "/api/weather/city/:cityName",
    "health": "/api/health",
}


async def index(request: Request):
    """Describe the service, the accepted region names and the endpoints."""
    return JSONResponse(
        {
            "message": "歡迎使用 CWA 天氣預報 API",
            "ALLOWED_CITY_NAMES": list(ALLOWED_CITY_NAMES),
            "endpoints": ENDPOINTS,
        }
    )


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def health(request: Request):
    return JSONResponse({"status": "OK", "timestamp": utc_timestamp()})
