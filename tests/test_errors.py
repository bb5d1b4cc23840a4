"""Tests for error response bodies."""

from cwaweather.errors import (
    ConfigurationError,
    InvalidRegionError,
    NoDataError,
    UpstreamError,
    UpstreamUnavailableError,
)
from cwaweather.regions import ALLOWED_CITY_NAMES


def test_invalid_region_lists_all_names():
    err = InvalidRegionError("台北市")
    assert err.status_code == 400
    assert err.message == "請使用以下縣市名稱：" + "、".join(ALLOWED_CITY_NAMES)
    assert "details" not in err.to_dict()


def test_no_data_messages():
    assert NoDataError("高雄市").message == "無法取得 高雄市 天氣資料"
    assert NoDataError("高雄市", spaced=False).message == "無法取得高雄市天氣資料"
    assert NoDataError().message == "無法取得全縣市天氣資料"
    assert NoDataError().status_code == 404


def test_upstream_error_defaults_message():
    err = UpstreamError(502, details={"code": 502})
    assert err.status_code == 502
    assert err.to_dict() == {"error": "CWA API 錯誤", "message": "無法取得天氣資料", "details": {"code": 502}}


def test_server_side_errors_are_500():
    assert ConfigurationError().status_code == 500
    assert UpstreamUnavailableError().status_code == 500
