"""
여정 계산 CLI

사용법:
    metro-trip A E                          # 06:00 AM 출발
    metro-trip A F --time "7:30 AM"         # 출발 시간 지정
    metro-trip B E --hour 5 --minute 15 --meridiem PM   # 시간 선택기 방식
    metro-trip A F --json                   # JSON 출력
    metro-trip --list-stations              # 역 목록
"""

import sys
import json
import logging
import argparse
from typing import List, Optional

from app.algorithms.clock import compose_time, format_time
from app.core.exceptions import MetroException
from app.db.cache import get_network
from app.services.trip_service import TripService, describe_error

logger = logging.getLogger(__name__)

DEFAULT_DEPARTURE = "06:00 AM"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metro-trip", description="지하철 여정(최단 경로 + 시간표) 계산"
    )

    parser.add_argument("origin", nargs="?", help="출발역 라벨 (예: A)")
    parser.add_argument("destination", nargs="?", help="도착역 라벨 (예: E)")

    parser.add_argument(
        "-t", "--time",
        type=str,
        help=f"출발 시간 (H:MM AM|PM, 기본값 {DEFAULT_DEPARTURE})",
    )

    parser.add_argument("--hour", type=int, help="출발 시 (1-12)")
    parser.add_argument("--minute", type=int, default=0, help="출발 분 (0-59)")
    parser.add_argument(
        "--meridiem", type=str, default="AM", choices=["AM", "PM", "am", "pm"]
    )

    parser.add_argument("--json", action="store_true", help="JSON으로 출력")

    parser.add_argument(
        "--list-stations", action="store_true", help="역 목록 및 직통 구간 출력"
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="상세한 로그")

    return parser


def list_stations() -> str:
    network = get_network()
    labels = network.station_labels

    lines = [
        f"운행 시간: {format_time(network.service_start)} - "
        f"{format_time(network.service_end)}, 열차 속도 {network.speed_kmh} km/h",
    ]
    for i, row in enumerate(network.distances):
        links = ", ".join(
            f"{labels[j]}({distance}km)"
            for j, distance in enumerate(row)
            if j != i and distance is not None
        )
        lines.append(f"[{i}] {labels[i]} : {links or '-'}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list_stations:
        print(list_stations())
        return 0

    if not args.origin or not args.destination:
        parser.error("출발역과 도착역을 모두 입력하세요")

    service = TripService(get_network())

    try:
        if args.hour is not None:
            departure_time = compose_time(args.hour, args.minute, args.meridiem)
        else:
            departure_time = args.time or DEFAULT_DEPARTURE

        result = service.plan_trip(args.origin, args.destination, departure_time)

    except MetroException as e:
        logger.debug(f"여정 계산 실패: [{e.code}] {e.message}")
        print(describe_error(e), file=sys.stderr)
        if args.verbose:
            print(f"[{e.code}] {e.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        print(result["trip_details"], end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
