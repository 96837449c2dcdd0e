import logging
import math
from typing import List, Optional, Sequence

from app.models.domain import NetworkConfig, Leg, Itinerary
from app.core.exceptions import InvalidRequestException, RouteNotFoundException
from app.algorithms.clock import format_time

logger = logging.getLogger(__name__)

# 중간 역 정차 대기 시간 (분)
STOP_WAIT_MINUTES = 10


class RouteEngine:
    """
    최단 경로 탐색 + 여정(시간표) 생성 엔진

    주입받은 NetworkConfig만 읽기 때문에 여러 요청에서 동시에 사용해도 안전
    """

    def __init__(self, network: NetworkConfig):
        self.network = network

    def find_shortest_path(self, start: int, end: int) -> Optional[List[int]]:
        """
        Dijkstra 최단 경로 (O(N^2), 우선순위 큐 미사용)

        동일 거리인 역이 여러 개면 index가 작은 역을 먼저 방문

        Returns:
            출발역 → 도착역 역 index 리스트, 도달 불가능하면 None
        """
        self._validate_station(start, "출발역")
        self._validate_station(end, "도착역")

        n = self.network.station_count
        dist = [math.inf] * n
        visited = [False] * n
        prev: List[Optional[int]] = [None] * n
        dist[start] = 0

        for _ in range(n - 1):
            u = None
            for j in range(n):
                if not visited[j] and (u is None or dist[j] < dist[u]):
                    u = j

            if dist[u] == math.inf:
                break  # 더 이상 도달 가능한 역 없음

            visited[u] = True

            for v in range(n):
                weight = self.network.distance(u, v)
                if visited[v] or weight is None:
                    continue
                if dist[u] + weight < dist[v]:
                    dist[v] = dist[u] + weight
                    prev[v] = u

        path = []
        at = end
        while at is not None:
            path.append(at)
            at = prev[at]
        path.reverse()

        if path[0] != start:
            logger.debug(f"경로 없음: {start} → {end}")
            return None

        return path

    def path_distance(self, path: Sequence[int]) -> int:
        """경로 총 거리(km)"""
        total = 0
        for from_station, to_station in zip(path, path[1:]):
            distance = self.network.distance(from_station, to_station)
            if distance is None:
                raise RouteNotFoundException(
                    f"직통 구간이 없습니다: {self.label(from_station)} → {self.label(to_station)}"
                )
            total += distance
        return total

    def travel_minutes(self, distance_km: int) -> int:
        # 소수점 이하 버림
        return (distance_km * 60) // self.network.speed_kmh

    def build_itinerary(self, path: Sequence[int], departure_minutes: int) -> Itinerary:
        """
        경로와 출발 시각으로 구간별 시간표 생성

        - 첫 구간은 출발 시각에 출발
        - 다음 구간은 이전 도착 + STOP_WAIT_MINUTES 후 출발
        - 마지막 구간 뒤에는 대기 시간 없음
        """
        if not path:
            raise InvalidRequestException("경로가 비어 있습니다", code="EMPTY_PATH")

        legs = []
        current_time = departure_minutes

        for i, (from_station, to_station) in enumerate(zip(path, path[1:])):
            distance = self.network.distance(from_station, to_station)
            if distance is None:
                raise RouteNotFoundException(
                    f"직통 구간이 없습니다: {self.label(from_station)} → {self.label(to_station)}"
                )

            arrival = current_time + self.travel_minutes(distance)
            legs.append(
                Leg(
                    from_station=from_station,
                    to_station=to_station,
                    distance_km=distance,
                    departure_minutes=current_time,
                    arrival_minutes=arrival,
                )
            )

            current_time = arrival
            if i < len(path) - 2:
                current_time += STOP_WAIT_MINUTES

        return Itinerary(
            path=tuple(path), departure_minutes=departure_minutes, legs=tuple(legs)
        )

    def validate_departure(self, departure_minutes: int) -> None:
        """운행 시간(양 끝 포함) 밖이면 InvalidRequestException"""
        if not (
            self.network.service_start
            <= departure_minutes
            <= self.network.service_end
        ):
            requested = (
                format_time(departure_minutes)
                if departure_minutes >= 0
                else str(departure_minutes)
            )
            raise InvalidRequestException(
                f"운행 시간이 아닙니다: {requested} "
                f"(운행 시간 {format_time(self.network.service_start)}"
                f" - {format_time(self.network.service_end)})",
                code="OUT_OF_SERVICE_HOURS",
            )

    def plan(self, start: int, end: int, departure_minutes: int) -> Itinerary:
        """운행 시간 검증 → 최단 경로 → 여정 생성"""
        self.validate_departure(departure_minutes)

        path = self.find_shortest_path(start, end)
        if path is None:
            raise RouteNotFoundException(
                f"{self.label(start)}에서 {self.label(end)}까지 경로를 찾을 수 없습니다"
            )

        return self.build_itinerary(path, departure_minutes)

    def label(self, station: int) -> str:
        return self.network.station_labels[station]

    def _validate_station(self, station: int, role: str) -> None:
        if isinstance(station, bool) or not isinstance(station, int):
            raise InvalidRequestException(
                f"{role} index는 정수여야 합니다: {station!r}", code="INVALID_STATION"
            )
        if not 0 <= station < self.network.station_count:
            raise InvalidRequestException(
                f"{role} index 범위 초과: {station} "
                f"(0-{self.network.station_count - 1})",
                code="INVALID_STATION",
            )
