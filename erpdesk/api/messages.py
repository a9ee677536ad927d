from __future__ import annotations

from erpdesk.config import get_config

FALLBACK_LOCALE = "en-US"

MESSAGES: dict[str, dict[str, str]] = {
    "zh-CN": {
        "provinces_failed": "获取省份数据失败",
        "cities_failed": "获取城市数据失败",
        "districts_failed": "获取区县数据失败",
        "search_failed": "搜索地址失败",
    },
    "en-US": {
        "provinces_failed": "Failed to load provinces",
        "cities_failed": "Failed to load cities",
        "districts_failed": "Failed to load districts",
        "search_failed": "Address search failed",
    },
}


def message(key: str) -> str:
    """Look up a user-facing message in the configured locale, falling back to English."""
    table = MESSAGES.get(get_config().locale, MESSAGES[FALLBACK_LOCALE])
    return table.get(key, MESSAGES[FALLBACK_LOCALE][key])
