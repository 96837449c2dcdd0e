from typing import List, Optional, Dict
from pydantic import BaseModel, Field

# service 별 응답 구조 정의


# 구간 정보
class LegInfo(BaseModel):
    from_station: str = Field(..., description="출발역")
    to_station: str = Field(..., description="도착역")
    distance_km: int = Field(..., description="구간 거리 (km)")
    travel_minutes: int = Field(..., description="구간 소요시간 (분)")
    departure_time: str = Field(..., description="출발 시각")
    arrival_time: str = Field(..., description="도착 시각")


# 여정 계산 응답
class TripPlanResponse(BaseModel):
    origin: str = Field(..., description="출발역")
    destination: str = Field(..., description="도착역")
    departure_time: str = Field(..., description="출발 시각")
    arrival_time: str = Field(..., description="최종 도착 시각")
    route: List[int] = Field(..., description="역 index 순서")
    route_labels: List[str] = Field(..., description="역 라벨 순서")
    legs: List[LegInfo] = Field(..., description="구간별 시간표")
    total_time: int = Field(..., description="총 소요시간 (분)")
    total_distance: int = Field(..., description="총 거리 (km)")
    intermediate_stops: int = Field(..., description="중간 정차 역 수")
    trip_details: str = Field(..., description="여정 텍스트")


# 에러 응답 (HTTPException detail)
class ErrorDetail(BaseModel):
    message: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="에러 코드")


class ErrorResponse(BaseModel):
    detail: ErrorDetail


# 역 정보
class StationInfo(BaseModel):
    index: int = Field(..., description="역 index")
    label: str = Field(..., description="역 라벨")


# 역 검색 응답
class StationSearchResponse(BaseModel):
    keyword: str = Field(..., description="검색 키워드")
    count: int = Field(..., description="검색 결과 수")
    results: List[StationInfo] = Field(default_factory=list, description="역 정보 리스트")


# 노선망 정보 응답
class NetworkInfoResponse(BaseModel):
    stations: List[str] = Field(..., description="역 라벨")
    distances: List[List[Optional[int]]] = Field(
        ..., description="역 간 거리 (km), null => 직통 구간 없음"
    )
    speed_kmh: int = Field(..., description="열차 속도 (km/h)")
    service_start: str = Field(..., description="운행 시작 시각")
    service_end: str = Field(..., description="운행 종료 시각")
    stop_wait_minutes: int = Field(..., description="중간 역 정차 시간 (분)")
    neighbors: Dict[str, List[str]] = Field(..., description="역별 직통 연결 역")
