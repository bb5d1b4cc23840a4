"""Errors raised while serving a weather request.

Each error carries the HTTP status and JSON body it is rendered as, so the
app only needs a single exception handler for all of them.
"""

from typing import Any

from cwaweather.regions import ALLOWED_CITY_NAMES

FETCH_FAILED_MESSAGE = "無法取得天氣資料"


class WeatherServiceError(Exception):
    """Base class for errors that map to a JSON error response."""

    status_code = 500
    error = "伺服器錯誤"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body = {"error": self.error, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigurationError(WeatherServiceError):
    """The CWA API key is not configured."""

    error = "伺服器設定錯誤"

    def __init__(self):
        super().__init__("請在 .env 檔案中設定 CWA_API_KEY")


class InvalidRegionError(WeatherServiceError):
    """Requested region is not in the allow-list."""

    status_code = 400
    error = "不支援的縣市"

    def __init__(self, region: str):
        super().__init__(f"請使用以下縣市名稱：{'、'.join(ALLOWED_CITY_NAMES)}")
        self.region = region


class NoDataError(WeatherServiceError):
    """Upstream answered but returned no matching location."""

    status_code = 404
    error = "查無資料"

    def __init__(self, region: str = "", spaced: bool = True):
        if region:
            label = f" {region} " if spaced else region
            super().__init__(f"無法取得{label}天氣資料")
        else:
            super().__init__("無法取得全縣市天氣資料")
        self.region = region


class UpstreamError(WeatherServiceError):
    """CWA responded with a non-2xx status; status and body are forwarded."""

    error = "CWA API 錯誤"

    def __init__(self, status_code: int, details: Any = None):
        message = None
        if isinstance(details, dict):
            message = details.get("message")
        super().__init__(message or FETCH_FAILED_MESSAGE, details=details)
        self.status_code = status_code


class UpstreamUnavailableError(WeatherServiceError):
    """No usable response from CWA (connection failure, timeout, bad body)."""

    def __init__(self):
        super().__init__(f"{FETCH_FAILED_MESSAGE}，請稍後再試")
