from typing import Optional, Tuple
from dataclasses import dataclass, field

# domain 정의


def _is_int(value) -> bool:
    # bool은 int의 하위 타입이므로 제외
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class NetworkConfig:
    """
    노선망 설정 (불변)

    distances[i][j]: i → j 구간 거리(km), None이면 직통 구간 없음
    서버 시작 시 한 번 생성하여 RouteEngine에 주입
    """

    station_labels: Tuple[str, ...]
    distances: Tuple[Tuple[Optional[int], ...], ...]
    speed_kmh: int
    service_start: int  # 자정 기준 분
    service_end: int

    def __post_init__(self):
        # list로 들어와도 tuple로 고정
        object.__setattr__(self, "station_labels", tuple(self.station_labels))
        object.__setattr__(
            self, "distances", tuple(tuple(row) for row in self.distances)
        )

        n = len(self.distances)
        if n == 0:
            raise ValueError("노선망에 역이 없습니다")
        if len(self.station_labels) != n:
            raise ValueError(
                f"역 라벨 수({len(self.station_labels)})와 거리 행렬 크기({n})가 다릅니다"
            )
        if len(set(self.station_labels)) != n:
            raise ValueError("역 라벨이 중복되었습니다")

        for i, row in enumerate(self.distances):
            if len(row) != n:
                raise ValueError(f"거리 행렬이 정사각형이 아닙니다: row {i}")
            if row[i] != 0:
                raise ValueError(f"자기 자신까지의 거리는 0이어야 합니다: row {i}")
            for j, distance in enumerate(row):
                if distance is None:
                    continue
                if not _is_int(distance):
                    raise ValueError(f"거리는 정수(km)여야 합니다: ({i}, {j}) = {distance!r}")
                if distance < 0:
                    raise ValueError(f"음수 거리: ({i}, {j}) = {distance}")

        for name in ("speed_kmh", "service_start", "service_end"):
            value = getattr(self, name)
            if not _is_int(value):
                raise ValueError(f"{name}는 정수여야 합니다: {value!r}")

        if self.speed_kmh <= 0:
            raise ValueError(f"열차 속도는 양수여야 합니다: {self.speed_kmh}")
        if not 0 <= self.service_start <= self.service_end < 24 * 60:
            raise ValueError(
                f"운행 시간이 올바르지 않습니다: {self.service_start}-{self.service_end}"
            )

    @property
    def station_count(self) -> int:
        return len(self.distances)

    def distance(self, from_station: int, to_station: int) -> Optional[int]:
        return self.distances[from_station][to_station]

    def index_of(self, label: str) -> Optional[int]:
        """역 라벨로 index 조회 (정확 일치 우선, 대소문자 무시), 없으면 None"""
        key = label.strip()
        if key in self.station_labels:
            return self.station_labels.index(key)
        for index, name in enumerate(self.station_labels):
            if name.lower() == key.lower():
                return index
        return None


@dataclass(frozen=True)
class Leg:
    from_station: int
    to_station: int
    distance_km: int
    departure_minutes: int  # 자정 기준 분
    arrival_minutes: int

    @property
    def travel_minutes(self) -> int:
        return self.arrival_minutes - self.departure_minutes


@dataclass(frozen=True)
class Itinerary:
    path: Tuple[int, ...]
    departure_minutes: int
    legs: Tuple[Leg, ...] = field(default_factory=tuple)

    @property
    def arrival_minutes(self) -> int:
        return self.legs[-1].arrival_minutes if self.legs else self.departure_minutes

    @property
    def total_minutes(self) -> int:
        return self.arrival_minutes - self.departure_minutes

    @property
    def total_distance_km(self) -> int:
        return sum(leg.distance_km for leg in self.legs)
