"""
노선망 singleton caching
Thread Lock으로 서버 시작 시 한 번만 로드하여 메모리에 유지
로드 이후에는 읽기 전용 => 요청 간 lock 없이 공유
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from threading import Lock

from app.core.config import (
    settings,
    STATION_LABELS,
    DISTANCE_MATRIX,
    TRAIN_SPEED_KMH,
    SERVICE_START_MINUTES,
    SERVICE_END_MINUTES,
)
from app.core.exceptions import StationNotFoundException
from app.algorithms.clock import parse_time
from app.models.domain import NetworkConfig

logger = logging.getLogger(__name__)

_cache_lock = Lock()
_cache_init = False

# cache data
_network_cache: Optional[NetworkConfig] = None


def build_default_network() -> NetworkConfig:
    """내장 기준 노선망 (A-F 6개 역)"""
    return NetworkConfig(
        station_labels=STATION_LABELS,
        distances=DISTANCE_MATRIX,
        speed_kmh=TRAIN_SPEED_KMH,
        service_start=SERVICE_START_MINUTES,
        service_end=SERVICE_END_MINUTES,
    )


def network_from_dict(data: Dict[str, Any]) -> NetworkConfig:
    """
    JSON 노선망 정의를 NetworkConfig로 변환

    {
        "stations": ["A", "B", ...],
        "distances": [[0, 10, null, ...], ...],
        "speed_kmh": 30,
        "service_start": "06:00 AM",
        "service_end": "08:00 PM"
    }
    speed_kmh, service_start, service_end는 생략 시 기준값 사용
    """
    try:
        stations = data["stations"]
        distances = data["distances"]
    except KeyError as e:
        raise ValueError(f"노선망 정의에 필수 항목이 없습니다: {e}") from e

    service_start = data.get("service_start")
    service_end = data.get("service_end")

    return NetworkConfig(
        station_labels=[str(s) for s in stations],
        distances=distances,
        speed_kmh=data.get("speed_kmh", TRAIN_SPEED_KMH),
        service_start=(
            parse_time(service_start) if service_start else SERVICE_START_MINUTES
        ),
        service_end=parse_time(service_end) if service_end else SERVICE_END_MINUTES,
    )


def load_network_file(path: str) -> NetworkConfig:
    with Path(path).open(encoding="utf-8") as f:
        data = json.load(f)
    return network_from_dict(data)


def initialize_network(network: Optional[NetworkConfig] = None):
    """
    서버 시작 시 노선망을 메모리에 로드
    Thread-safe singleton pattern

    network를 직접 넘기지 않으면 NETWORK_FILE → 내장 기준 노선망 순서로 사용
    """
    global _cache_init, _network_cache

    with _cache_lock:
        if _cache_init:
            logger.info("노선망 캐시가 이미 초기화되었습니다.")
            return

        logger.info("노선망 캐시 초기화 시작")

        if network is None:
            if settings.NETWORK_FILE:
                logger.info(f"노선망 파일 로드: {settings.NETWORK_FILE}")
                network = load_network_file(settings.NETWORK_FILE)
            else:
                network = build_default_network()

        _network_cache = network

        logger.info(f"✓ 역 데이터 로드 완료: {network.station_count}개")

        _cache_init = True
        logger.info("노선망 캐시 초기화 완료")


def get_network() -> NetworkConfig:
    if not _cache_init:
        initialize_network()
    return _network_cache


def get_station_labels() -> List[str]:
    return list(get_network().station_labels)


def get_station_index(label: str) -> int:
    """역 라벨(대소문자 무시)로 index 조회"""
    index = get_network().index_of(label)
    if index is not None:
        return index

    raise StationNotFoundException(f"역을 찾을 수 없습니다: {label}")


def get_station_label(index: int) -> str:
    labels = get_network().station_labels
    if not 0 <= index < len(labels):
        raise StationNotFoundException(f"역을 찾을 수 없습니다: {index}")
    return labels[index]


def search_stations(keyword: str, limit: int = 10) -> List[Dict]:
    """라벨 검색 (정확 일치 → 접두사 → 부분 일치 순)"""
    keyword = keyword.strip().lower()
    results = []

    for index, label in enumerate(get_network().station_labels):
        name_lower = label.lower()
        if keyword in name_lower:
            if name_lower == keyword:
                priority = 1
            elif name_lower.startswith(keyword):
                priority = 2
            else:
                priority = 3
            results.append({"index": index, "label": label, "_priority": priority})

    results.sort(key=lambda x: (x["_priority"], len(x["label"]), x["index"]))
    for r in results:
        r.pop("_priority", None)

    return results[:limit]


def clear_network():
    global _cache_init, _network_cache

    with _cache_lock:
        _network_cache = None

        _cache_init = False
        logger.info("노선망 캐시 초기화됨")


def reload_network(network: Optional[NetworkConfig] = None):
    clear_network()
    initialize_network(network)
