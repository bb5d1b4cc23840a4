"""County and city names accepted by the named-region endpoint.

Names must match the CWA ``locationName`` values exactly.
"""

ALLOWED_CITY_NAMES = (
    "基隆市",
    "臺北市",
    "新北市",
    "桃園市",
    "新竹市",
    "新竹縣",
    "苗栗縣",
    "臺中市",
    "彰化縣",
    "南投縣",
    "雲林縣",
    "嘉義市",
    "嘉義縣",
    "臺南市",
    "高雄市",
    "屏東縣",
    "宜蘭縣",
    "花蓮縣",
    "臺東縣",
    "澎湖縣",
    "金門縣",
    "連江縣",
)

KAOHSIUNG = "高雄市"

_ALLOWED = frozenset(ALLOWED_CITY_NAMES)


def is_allowed_region(name: str) -> bool:
    """Return True if ``name`` is one of the 22 supported regions."""
    return name in _ALLOWED
