import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = "Metro Booking Backend"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8000))

    # 노선망 JSON 파일 경로 => 없으면 내장 기준 노선망 사용
    NETWORK_FILE: Optional[str] = os.getenv("NETWORK_FILE") or None

    # 성능 모니터링
    ENABLE_PERFORMANCE_MONITORING: bool = (
        os.getenv("ENABLE_PERFORMANCE_MONITORING", "true").lower() == "true"
    )
    SLOW_REQUEST_THRESHOLD_MS: int = int(os.getenv("SLOW_REQUEST_THRESHOLD_MS", 500))

    # 여정 계산 메트릭 로깅 플래그
    ENABLE_TRIP_METRICS: bool = (
        os.getenv("ENABLE_TRIP_METRICS", "true").lower() == "true"
    )

    # CORS 설정
    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")


settings = Settings()  # 모듈화


# ==================== 기준 노선망 ====================

# 역 라벨 (index 0 = "A")
STATION_LABELS = ("A", "B", "C", "D", "E", "F")

# 역 간 거리(km), None => 직통 구간 없음
DISTANCE_MATRIX = (
    (0, 10, 22, None, 8, None),
    (10, 0, 15, 9, None, 7),
    (22, 15, 0, 9, None, None),
    (None, 9, 9, 0, 5, 12),
    (8, None, None, 5, 0, 16),
    (None, 7, None, 12, 16, 0),
)

TRAIN_SPEED_KMH = 30

# 운행 시간 (자정 기준 분), 양 끝 포함
SERVICE_START_MINUTES = 6 * 60  # 06:00 AM
SERVICE_END_MINUTES = 20 * 60  # 08:00 PM
