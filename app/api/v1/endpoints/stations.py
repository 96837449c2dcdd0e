"""
역 / 노선망 조회 REST API 엔드포인트
"""

from fastapi import APIRouter, Query, HTTPException
from typing import List
import logging

from app.db.cache import get_network, search_stations
from app.algorithms.clock import format_time
from app.algorithms.route_engine import STOP_WAIT_MINUTES
from app.models.responses import StationInfo, StationSearchResponse, NetworkInfoResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[StationInfo])
async def list_stations():
    """전체 역 목록 (index ↔ 라벨)"""
    network = get_network()
    return [
        {"index": index, "label": label}
        for index, label in enumerate(network.station_labels)
    ]


@router.get("/search", response_model=StationSearchResponse)
async def search(
    q: str = Query(..., description="검색 키워드", min_length=1, max_length=50),
    limit: int = Query(10, ge=1, le=50, description="최대 결과 수"),
):
    """
    역 검색 (자동완성용)

    Example:
        GET /v1/stations/search?q=a&limit=5
    """
    try:
        logger.info(f"역 검색: keyword={q}, limit={limit}")
        results = search_stations(q, limit)

        return {"keyword": q, "count": len(results), "results": results}
    except Exception as e:
        logger.error(f"역 검색 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"검색 중 오류 발생: {str(e)}")


@router.get("/network", response_model=NetworkInfoResponse)
async def get_network_info():
    """
    노선망 정보 조회

    거리 행렬, 열차 속도, 운행 시간, 역별 직통 연결 역
    """
    network = get_network()
    labels = network.station_labels

    neighbors = {
        labels[i]: [
            labels[j]
            for j, distance in enumerate(row)
            if j != i and distance is not None
        ]
        for i, row in enumerate(network.distances)
    }

    return {
        "stations": list(labels),
        "distances": [list(row) for row in network.distances],
        "speed_kmh": network.speed_kmh,
        "service_start": format_time(network.service_start),
        "service_end": format_time(network.service_end),
        "stop_wait_minutes": STOP_WAIT_MINUTES,
        "neighbors": neighbors,
    }
