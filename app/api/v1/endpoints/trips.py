"""
REST API 여정 계산 엔드포인트
"""

from fastapi import APIRouter, HTTPException, Depends
import logging

from app.models.requests import TripPlanRequest
from app.models.responses import TripPlanResponse, ErrorResponse
from app.services.trip_service import TripService
from app.core.exceptions import (
    MetroException,
    RouteNotFoundException,
    StationNotFoundException,
)
from app.api.deps import get_trip_service


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/plan",
    response_model=TripPlanResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def plan_trip(
    request: TripPlanRequest,
    service: TripService = Depends(get_trip_service),
):
    """
    여정 계산 (최단 경로 + 구간별 시간표)

    - **origin**: 출발역 라벨
    - **destination**: 도착역 라벨
    - **departure_time**: 출발 시간 (06:00 AM - 08:00 PM)

    Example:
        POST /v1/trips/plan
        {
            "origin": "A",
            "destination": "E",
            "departure_time": "06:00 AM"
        }
    """
    try:
        logger.info(
            f"REST 여정 계산: {request.origin} → {request.destination}, "
            f"출발={request.departure_time}"
        )

        return service.plan_trip(
            origin=request.origin,
            destination=request.destination,
            departure_time=request.departure_time,
        )

    except (RouteNotFoundException, StationNotFoundException) as e:
        raise HTTPException(
            status_code=404, detail={"message": e.message, "code": e.code}
        )
    except MetroException as e:
        raise HTTPException(
            status_code=400, detail={"message": e.message, "code": e.code}
        )
    except Exception as e:
        logger.error(f"예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"여정 계산 중 오류 발생: {str(e)}")
