"""
pydantic models for 요청, 응답, 도메인 객체
"""


from app.models.requests import TripPlanRequest
from app.models.responses import (
    LegInfo,
    TripPlanResponse,
    ErrorDetail,
    ErrorResponse,
    StationInfo,
    StationSearchResponse,
    NetworkInfoResponse,
)
from app.models.domain import NetworkConfig, Leg, Itinerary

__all__ = [
    "TripPlanRequest",
    "LegInfo",
    "TripPlanResponse",
    "ErrorDetail",
    "ErrorResponse",
    "StationInfo",
    "StationSearchResponse",
    "NetworkInfoResponse",
    "NetworkConfig",
    "Leg",
    "Itinerary",
]
