"""
노선망 캐시 세팅
"""

from app.db.cache import (
    initialize_network,
    get_network,
    get_station_labels,
    get_station_index,
    get_station_label,
    search_stations,
    clear_network,
    reload_network,
)

__all__ = [
    "initialize_network",
    "get_network",
    "get_station_labels",
    "get_station_index",
    "get_station_label",
    "search_stations",
    "clear_network",
    "reload_network",
]
