"""
12시간제 시각 문자열 <-> 자정 기준 분(TimeOfDay) 변환

내부 연산은 항상 분 단위 정수로 통일하고
문자열 처리는 입력/출력 경계에서만 수행
"""

import re

from app.core.exceptions import TimeFormatException

MINUTES_PER_DAY = 24 * 60

# "6:00 PM", "06:00 am" => 시(1-2자리):분(2자리) 공백 AM/PM (ASCII 숫자/공백만)
_TIME_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{2})\s+([AaPp][Mm])$", re.ASCII)


def parse_time(time_str: str) -> int:
    """
    "H:MM AM|PM" 문자열을 자정 기준 분으로 변환

    12 AM => 0, 12 PM => 720

    Raises:
        TimeFormatException: 형식 오류, 시(1-12)/분(0-59) 범위 초과
    """
    if not isinstance(time_str, str):
        raise TimeFormatException(f"출발 시간은 문자열이어야 합니다: {time_str!r}")

    match = _TIME_PATTERN.match(time_str.strip())
    if not match:
        raise TimeFormatException(
            f"출발 시간 형식이 올바르지 않습니다 (예: 06:00 AM): {time_str!r}"
        )

    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = match.group(3).upper()

    if not 1 <= hours <= 12:
        raise TimeFormatException(f"시는 1-12 사이여야 합니다: {time_str!r}")
    if not 0 <= minutes <= 59:
        raise TimeFormatException(f"분은 00-59 사이여야 합니다: {time_str!r}")

    if meridiem == "PM" and hours != 12:
        hours += 12
    if meridiem == "AM" and hours == 12:
        hours = 0

    return hours * 60 + minutes


def format_time(minutes: int) -> str:
    """
    자정 기준 분을 "HH:MM AM|PM" 문자열로 변환

    자정을 넘긴 도착 시각은 다음 날 시각으로 표시 (1440 => 12:00 AM)
    """
    if minutes < 0:
        raise ValueError(f"시각은 음수일 수 없습니다: {minutes}")

    minutes %= MINUTES_PER_DAY
    hrs, mins = divmod(minutes, 60)
    am_pm = "PM" if hrs >= 12 else "AM"
    if hrs > 12:
        hrs -= 12
    if hrs == 0:
        hrs = 12
    return f"{hrs:02d}:{mins:02d} {am_pm}"


def compose_time(hour: int, minute: int, meridiem: str) -> str:
    """시간 선택기 값(시, 분, AM/PM)으로 출발 시간 문자열 생성"""
    meridiem = meridiem.strip().upper()
    if not 1 <= hour <= 12:
        raise TimeFormatException(f"시는 1-12 사이여야 합니다: {hour}")
    if not 0 <= minute <= 59:
        raise TimeFormatException(f"분은 0-59 사이여야 합니다: {minute}")
    if meridiem not in ("AM", "PM"):
        raise TimeFormatException(f"AM 또는 PM이어야 합니다: {meridiem}")

    return f"{hour}:{minute:02d} {meridiem}"
