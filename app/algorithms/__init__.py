"""
최단 경로(Dijkstra) 알고리즘 및 시각 변환 유틸리티
"""

from app.algorithms.route_engine import RouteEngine, STOP_WAIT_MINUTES
from app.algorithms.clock import parse_time, format_time, compose_time

__all__ = [
    "RouteEngine",
    "STOP_WAIT_MINUTES",
    "parse_time",
    "format_time",
    "compose_time",
]
