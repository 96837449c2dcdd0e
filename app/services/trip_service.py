# 여정(경로 + 시간표) 계산 서비스

import logging
import time
import json
from typing import Optional, Dict, Any, Union

from app.algorithms.route_engine import RouteEngine
from app.algorithms.clock import parse_time, format_time
from app.db.cache import get_network
from app.models.domain import NetworkConfig, Itinerary
from app.core.exceptions import (
    MetroException,
    InvalidRequestException,
    StationNotFoundException,
    RouteNotFoundException,
)
from app.core.config import settings

logger = logging.getLogger(__name__)

# 화면 출력용 안내 문구
NO_PATH_MESSAGE = "No path found between selected stations."
INVALID_INPUT_MESSAGE = "Invalid input or time out of operating hours."


def render_trip_details(itinerary: Itinerary, labels) -> str:
    """
    여정 텍스트 렌더링

    Trip A to E
    --------------
    A to E : Start at 06:00 AM - Stops at 06:16 AM
    Total time = 16 minutes
    """
    lines = [
        "",
        f"Trip {labels[itinerary.path[0]]} to {labels[itinerary.path[-1]]}",
        "--------------",
    ]
    for leg in itinerary.legs:
        lines.append(
            f"{labels[leg.from_station]} to {labels[leg.to_station]} : "
            f"Start at {format_time(leg.departure_minutes)} - "
            f"Stops at {format_time(leg.arrival_minutes)}"
        )
    lines.append(f"Total time = {itinerary.total_minutes} minutes")
    return "\n".join(lines) + "\n"


def describe_error(error: MetroException) -> str:
    """예외를 화면 안내 문구로 변환"""
    if isinstance(error, RouteNotFoundException):
        return NO_PATH_MESSAGE
    return INVALID_INPUT_MESSAGE


class TripService:

    def __init__(self, network: Optional[NetworkConfig] = None):
        # 주입하지 않으면 cache에서 직접 가져오기
        self.network = network or get_network()
        self.engine = RouteEngine(self.network)
        logger.info(f"TripService 초기화 완료: 역 {self.network.station_count}개")

    def plan_trip(
        self,
        origin: Union[str, int],
        destination: Union[str, int],
        departure_time: Union[str, int],
    ) -> Dict[str, Any]:
        """
        여정 계산

        Args:
            origin: 출발역 라벨 또는 index
            destination: 도착역 라벨 또는 index
            departure_time: "H:MM AM|PM" 문자열 또는 자정 기준 분

        Returns:
            여정 데이터 딕셔너리

        Raises:
            StationNotFoundException: 역을 찾을 수 없을 때
            InvalidRequestException: 같은 역, 운행 시간 외 출발
            TimeFormatException: 출발 시간 형식 오류
            RouteNotFoundException: 경로를 찾을 수 없을 때
        """
        start_time = time.time()

        try:
            start = self.resolve_station(origin)
            end = self.resolve_station(destination)

            if start == end:
                raise InvalidRequestException(
                    "출발역과 도착역이 같습니다", code="SAME_STATION"
                )

            if isinstance(departure_time, str):
                departure = parse_time(departure_time)
            else:
                departure = int(departure_time)

            logger.info(
                f"여정 계산 요청: {self.engine.label(start)} → "
                f"{self.engine.label(end)}, 출발={format_time(departure) if departure >= 0 else departure}"
            )

            itinerary = self.engine.plan(start, end, departure)
            result = self._to_dict(itinerary)

            elapsed_time = time.time() - start_time
            self._log_trip_metrics(
                response_time_ms=elapsed_time * 1000,
                origin=result["origin"],
                destination=result["destination"],
                total_time=itinerary.total_minutes,
                stations=len(itinerary.path),
            )
            return result

        except MetroException as e:
            logger.warning(f"여정 계산 실패: [{e.code}] {e.message}")
            raise

    def resolve_station(self, station: Union[str, int]) -> int:
        """라벨(대소문자 무시) 또는 index를 역 index로 변환"""
        if isinstance(station, bool):
            raise InvalidRequestException(
                f"유효하지 않은 역입니다: {station!r}", code="INVALID_STATION"
            )

        if isinstance(station, int):
            if not 0 <= station < self.network.station_count:
                raise InvalidRequestException(
                    f"역 index 범위 초과: {station}", code="INVALID_STATION"
                )
            return station

        index = self.network.index_of(str(station))
        if index is not None:
            return index

        raise StationNotFoundException(f"역을 찾을 수 없습니다: {station}")

    def _to_dict(self, itinerary: Itinerary) -> Dict[str, Any]:
        labels = self.network.station_labels

        legs = [
            {
                "from_station": labels[leg.from_station],
                "to_station": labels[leg.to_station],
                "distance_km": leg.distance_km,
                "travel_minutes": leg.travel_minutes,
                "departure_time": format_time(leg.departure_minutes),
                "arrival_time": format_time(leg.arrival_minutes),
            }
            for leg in itinerary.legs
        ]

        return {
            "origin": labels[itinerary.path[0]],
            "destination": labels[itinerary.path[-1]],
            "departure_time": format_time(itinerary.departure_minutes),
            "arrival_time": format_time(itinerary.arrival_minutes),
            "route": list(itinerary.path),
            "route_labels": [labels[s] for s in itinerary.path],
            "legs": legs,
            "total_time": itinerary.total_minutes,
            "total_distance": itinerary.total_distance_km,
            "intermediate_stops": max(len(itinerary.path) - 2, 0),
            "trip_details": render_trip_details(itinerary, labels),
        }

    def _log_trip_metrics(
        self,
        response_time_ms: float,
        origin: str,
        destination: str,
        total_time: int,
        stations: int,
    ) -> None:
        """
        여정 계산 메트릭 로깅 => 로그 수집기에서 분석하기
        """
        if not settings.ENABLE_TRIP_METRICS:
            return

        metrics = {
            "event": "trip_calculation",
            "response_time_ms": round(response_time_ms, 2),
            "origin": origin,
            "destination": destination,
            "total_time_minutes": total_time,
            "stations": stations,
        }

        logger.info(f"METRICS: {json.dumps(metrics, ensure_ascii=False)}")
