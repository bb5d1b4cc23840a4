"""Tests for the county/city allow-list."""

import pytest

from cwaweather.regions import ALLOWED_CITY_NAMES, KAOHSIUNG, is_allowed_region


def test_twenty_two_unique_regions():
    assert len(ALLOWED_CITY_NAMES) == 22
    assert len(set(ALLOWED_CITY_NAMES)) == 22


def test_kaohsiung_is_allowed():
    assert KAOHSIUNG in ALLOWED_CITY_NAMES
    assert is_allowed_region(KAOHSIUNG)


@pytest.mark.parametrize("name", ALLOWED_CITY_NAMES)
def test_every_listed_region_allowed(name):
    assert is_allowed_region(name) is True


@pytest.mark.parametrize("name", ["", "台北市", "臺北", "Taipei", " 臺北市", "臺北市 ", "高雄"])
def test_other_names_rejected(name):
    assert is_allowed_region(name) is False
