"""
Core 설정 및 utilities, 커스텀 예외
"""

from app.core.config import settings

from app.core.exceptions import (
    MetroException,
    TimeFormatException,
    InvalidRequestException,
    StationNotFoundException,
    RouteNotFoundException,
)

__all__ = [
    "settings",
    "MetroException",
    "TimeFormatException",
    "InvalidRequestException",
    "StationNotFoundException",
    "RouteNotFoundException",
]
