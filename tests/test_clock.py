"""
시각 변환 테스트
"""

import pytest

from app.algorithms.clock import parse_time, format_time, compose_time
from app.core.exceptions import TimeFormatException


class TestParseTime:
    """parse_time 테스트"""

    @pytest.mark.parametrize(
        "time_str, expected",
        [
            ("06:00 AM", 360),
            ("12:00 PM", 720),
            ("12:00 AM", 0),
            ("6:00 AM", 360),
            ("6:00 am", 360),
            ("06:00 PM", 1080),
            ("12:30 AM", 30),
            ("12:59 PM", 779),
            ("11:59 PM", 1439),
            ("8:00 pM", 1200),
            ("  7:45 AM  ", 465),
        ],
    )
    def test_valid_times(self, time_str, expected):
        assert parse_time(time_str) == expected

    @pytest.mark.parametrize(
        "time_str",
        [
            "",
            "6:00",
            "06:00AM",
            "0600 AM",
            "13:00 PM",
            "0:30 AM",
            "6:60 AM",
            "6:5 AM",
            "ab:cd AM",
            "6:00 XM",
            "6:00 AM PM",
            "-1:00 AM",
            "６:００ AM",
            "٦:٠٠ PM",
            "6:00\u3000AM",
        ],
    )
    def test_malformed_times(self, time_str):
        """형식 오류는 TimeFormatException (crash 아님)"""
        with pytest.raises(TimeFormatException) as exc_info:
            parse_time(time_str)

        assert exc_info.value.code == "INVALID_TIME_FORMAT"

    def test_non_string(self):
        with pytest.raises(TimeFormatException):
            parse_time(None)


class TestFormatTime:
    """format_time 테스트"""

    @pytest.mark.parametrize(
        "minutes, expected",
        [
            (0, "12:00 AM"),
            (720, "12:00 PM"),
            (360, "06:00 AM"),
            (376, "06:16 AM"),
            (779, "12:59 PM"),
            (1200, "08:00 PM"),
            (1439, "11:59 PM"),
        ],
    )
    def test_format(self, minutes, expected):
        assert format_time(minutes) == expected

    def test_past_midnight(self):
        """자정을 넘긴 시각은 다음 날 시각으로 표시"""
        assert format_time(1440) == "12:00 AM"
        assert format_time(1445) == "12:05 AM"

    def test_negative(self):
        with pytest.raises(ValueError):
            format_time(-1)

    def test_round_trip(self):
        """하루 전체 분 단위 왕복 변환"""
        for minutes in range(24 * 60):
            assert parse_time(format_time(minutes)) == minutes


class TestComposeTime:
    """시간 선택기 값 조합 테스트"""

    def test_compose(self):
        assert compose_time(6, 0, "AM") == "6:00 AM"
        assert compose_time(12, 5, "pm") == "12:05 PM"
        assert parse_time(compose_time(7, 30, "PM")) == 1170

    @pytest.mark.parametrize(
        "hour, minute, meridiem",
        [(0, 0, "AM"), (13, 0, "PM"), (6, 60, "AM"), (6, -1, "AM"), (6, 0, "XM")],
    )
    def test_compose_invalid(self, hour, minute, meridiem):
        with pytest.raises(TimeFormatException):
            compose_time(hour, minute, meridiem)
