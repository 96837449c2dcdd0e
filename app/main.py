"""
Metro Booking Backend - FastAPI Application

도시 간 지하철 여정 계산 서비스
최단 경로 탐색 및 구간별 시간표 제공
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.db.cache import initialize_network, get_network
from app.api.v1.router import api_router
from app.middleware.performance_monitoring import (
    PerformanceMonitoringMiddleware,
    RequestLoggingMiddleware,
)

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 노선망을 한 번 로드 (이후 읽기 전용)
    """
    logger.info("=" * 60)
    logger.info("Metro Booking Backend 시작 중...")
    logger.info("=" * 60)

    try:
        initialize_network()
        logger.info("Metro Booking Backend 시작 완료!")

    except Exception as e:
        logger.error(f"❌ 초기화 실패: {e}", exc_info=True)
        raise

    # application 실행 <- yield로 제어 반환
    yield

    logger.info("✓ Metro Booking Backend 종료 완료")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 도시 간 지하철 여정 계산

    ### 주요 기능
    - 🚇 최단 경로 탐색 (Dijkstra)
    - 🕒 구간별 출발/도착 시각 (정차역 대기 10분)
    - ⏰ 운행 시간 검증 (06:00 AM - 08:00 PM)
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 성능 모니터링 미들웨어 추가
if settings.ENABLE_PERFORMANCE_MONITORING:
    app.add_middleware(PerformanceMonitoringMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    logger.info("✓ 성능 모니터링 미들웨어 활성화")

# API 라우터 등록
app.include_router(api_router, prefix="/v1")


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """
    루트 엔드포인트

    서비스 기본 정보 반환
    """
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "plan_trip": "POST /v1/trips/plan",
            "stations": "GET /v1/stations",
            "search_stations": "GET /v1/stations/search",
            "network": "GET /v1/stations/network",
        },
    }


@app.get("/health")
async def health_check():
    """
    헬스 체크 엔드포인트

    노선망 로드 여부 확인
    """
    try:
        network = get_network()
        network_status = "healthy"
        station_count = network.station_count

    except Exception as e:
        logger.error(f"노선망 헬스 체크 실패: {e}")
        network_status = "unhealthy"
        station_count = 0

    status_code = 200 if network_status == "healthy" else 503

    return JSONResponse(
        status_code=status_code,
        content={
            "status": network_status,
            "version": settings.VERSION,
            "components": {"network": network_status},
            "stations": station_count,
        },
    )


# ========== Exception Handlers ==========


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    전역 예외 핸들러

    예상치 못한 오류 처리
    """
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "message": "서버 내부 오류가 발생했습니다",
            "detail": str(exc) if settings.DEBUG else "Internal Server Error",
        },
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
