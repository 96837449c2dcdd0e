from pydantic import BaseModel, Field

# service별 requests 구조 정의


# 여정 계산 요청
class TripPlanRequest(BaseModel):
    origin: str = Field(..., min_length=1, description="출발역 라벨 (예: A)")
    destination: str = Field(..., min_length=1, description="도착역 라벨 (예: E)")
    departure_time: str = Field(
        default="06:00 AM", description="출발 시간 (H:MM AM|PM)"
    )
