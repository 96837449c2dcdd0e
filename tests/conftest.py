"""
Pytest 설정 및 공통 Fixture
"""

import os
import pytest
import sys
from pathlib import Path

# 내장 기준 노선망으로 테스트 (모듈 임포트 전에 설정해야 함)
os.environ.pop("NETWORK_FILE", None)

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.models.domain import NetworkConfig  # noqa: E402
from app.algorithms.route_engine import RouteEngine  # noqa: E402
from app.db.cache import build_default_network, clear_network  # noqa: E402


@pytest.fixture(autouse=True)
def reset_network_cache():
    """테스트마다 노선망 캐시 초기화 (전역 상태 격리)"""
    clear_network()
    yield
    clear_network()


@pytest.fixture
def reference_network():
    """기준 노선망 (A-F)"""
    return build_default_network()


@pytest.fixture
def engine(reference_network):
    return RouteEngine(reference_network)


@pytest.fixture
def line_network():
    """A - D - E 직선 노선 (A-D 8km, D-E 5km)"""
    return NetworkConfig(
        station_labels=["A", "B", "C", "D", "E"],
        distances=[
            [0, None, None, 8, None],
            [None, 0, None, None, None],
            [None, None, 0, None, None],
            [8, None, None, 0, 5],
            [None, None, None, 5, 0],
        ],
        speed_kmh=30,
        service_start=360,
        service_end=1200,
    )


@pytest.fixture
def disconnected_network():
    """0-1, 2-3 두 개의 분리된 구간"""
    return NetworkConfig(
        station_labels=["P", "Q", "R", "S"],
        distances=[
            [0, 4, None, None],
            [4, 0, None, None],
            [None, None, 0, 6],
            [None, None, 6, 0],
        ],
        speed_kmh=30,
        service_start=360,
        service_end=1200,
    )


@pytest.fixture
def tie_network():
    """0 → 3 최단 경로가 두 개 (0-1-3, 0-2-3)"""
    return NetworkConfig(
        station_labels=["W", "X", "Y", "Z"],
        distances=[
            [0, 1, 1, None],
            [1, 0, None, 1],
            [1, None, 0, 1],
            [None, 1, 1, 0],
        ],
        speed_kmh=60,
        service_start=0,
        service_end=1439,
    )


@pytest.fixture
def sample_network_json():
    """노선망 파일 샘플"""
    return {
        "stations": ["North", "Central", "South"],
        "distances": [[0, 12, None], [12, 0, 9], [None, 9, 0]],
        "speed_kmh": 36,
        "service_start": "05:30 AM",
        "service_end": "11:00 PM",
    }
