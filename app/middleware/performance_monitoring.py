# 성능 모니터링 미들웨어

import time
import logging
import json
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.config import settings

logger = logging.getLogger(__name__)


class PerformanceMonitoringMiddleware(BaseHTTPMiddleware):
    """
    성능 모니터링 미들웨어

    모든 HTTP 요청의 응답 시간을 측정하여 X-Process-Time-Ms 헤더로 반환
    느린 요청(threshold 초과)은 경고로 로깅
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.slow_threshold_ms = settings.SLOW_REQUEST_THRESHOLD_MS

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_time_ms = (time.time() - start_time) * 1000
            logger.error(
                f"요청 처리 중 예외 발생: {request.method} {request.url.path}, "
                f"소요시간={elapsed_time_ms:.2f}ms, 예외={str(e)}",
                exc_info=True,
            )
            raise

        elapsed_time_ms = (time.time() - start_time) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_time_ms:.2f}"

        metrics = {
            "event": "http_request",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "elapsed_time_ms": round(elapsed_time_ms, 2),
            "slow_request": elapsed_time_ms > self.slow_threshold_ms,
        }

        if metrics["slow_request"]:
            logger.warning(
                f"⚠️ 느린 요청 감지: {request.method} {request.url.path}, "
                f"소요시간={elapsed_time_ms:.2f}ms (기준: {self.slow_threshold_ms}ms)"
            )

        logger.info(f"PERFORMANCE: {json.dumps(metrics, ensure_ascii=False)}")
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """요청/응답 로깅 미들웨어"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        logger.info(
            f"→ {request.method} {request.url.path} "
            f"from {request.client.host if request.client else 'unknown'}"
        )

        response = await call_next(request)

        log_level = logging.INFO if response.status_code < 400 else logging.ERROR
        logger.log(
            log_level,
            f"← {request.method} {request.url.path} "
            f"status={response.status_code}",
        )

        return response
