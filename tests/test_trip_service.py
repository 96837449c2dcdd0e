"""
TripService 테스트
"""

import logging
import pytest

from app.services.trip_service import (
    TripService,
    render_trip_details,
    describe_error,
    NO_PATH_MESSAGE,
    INVALID_INPUT_MESSAGE,
)
from app.core.exceptions import (
    InvalidRequestException,
    StationNotFoundException,
    RouteNotFoundException,
    TimeFormatException,
)


class TestTripService:
    """TripService 테스트 클래스"""

    @pytest.fixture
    def service(self, reference_network):
        return TripService(reference_network)

    def test_service_initialization(self, service):
        """서비스 초기화 테스트"""
        assert service.network is not None
        assert service.engine is not None
        assert service.network.index_of("A") == 0

    def test_default_network_from_cache(self):
        """주입하지 않으면 캐시의 기준 노선망 사용"""
        service = TripService()

        assert service.network.station_count == 6

    def test_plan_trip_success(self, service):
        """정상적인 여정 계산 테스트"""
        result = service.plan_trip("A", "F", "06:00 AM")

        assert result["origin"] == "A"
        assert result["destination"] == "F"
        assert result["route"] == [0, 1, 5]
        assert result["route_labels"] == ["A", "B", "F"]
        assert result["total_time"] == 44
        assert result["total_distance"] == 17
        assert result["intermediate_stops"] == 1
        assert result["departure_time"] == "06:00 AM"
        assert result["arrival_time"] == "06:44 AM"

        first, second = result["legs"]
        assert first == {
            "from_station": "A",
            "to_station": "B",
            "distance_km": 10,
            "travel_minutes": 20,
            "departure_time": "06:00 AM",
            "arrival_time": "06:20 AM",
        }
        assert second["departure_time"] == "06:30 AM"
        assert second["arrival_time"] == "06:44 AM"

    def test_trip_details_text(self, service):
        """여정 텍스트 렌더링"""
        result = service.plan_trip("A", "D", "06:00 AM")

        assert result["trip_details"] == (
            "\n"
            "Trip A to D\n"
            "--------------\n"
            "A to E : Start at 06:00 AM - Stops at 06:16 AM\n"
            "E to D : Start at 06:26 AM - Stops at 06:36 AM\n"
            "Total time = 36 minutes\n"
        )

    def test_plan_trip_with_indices_and_minutes(self, service):
        """역 index, 분 단위 출발 시간 입력"""
        result = service.plan_trip(2, 5, 1200)

        assert result["route_labels"] == ["C", "D", "F"]
        assert result["departure_time"] == "08:00 PM"

    def test_lowercase_labels(self, service):
        result = service.plan_trip("a", "e", "7:00 am")

        assert result["route_labels"] == ["A", "E"]
        assert result["total_time"] == 16

    def test_same_station_rejected(self, service):
        """출발역 == 도착역은 잘못된 입력"""
        with pytest.raises(InvalidRequestException) as exc_info:
            service.plan_trip("C", "C", "06:00 AM")

        assert exc_info.value.code == "SAME_STATION"

    def test_unknown_station(self, service):
        with pytest.raises(StationNotFoundException):
            service.plan_trip("A", "Z", "06:00 AM")

    @pytest.mark.parametrize("station", [-1, 6, True])
    def test_station_index_out_of_range(self, service, station):
        with pytest.raises(InvalidRequestException) as exc_info:
            service.plan_trip(station, "A", "06:00 AM")

        assert exc_info.value.code == "INVALID_STATION"

    def test_invalid_time_format(self, service):
        with pytest.raises(TimeFormatException):
            service.plan_trip("A", "F", "six o'clock")

    @pytest.mark.parametrize("departure", ["05:59 AM", "08:01 PM"])
    def test_out_of_service_hours(self, service, departure):
        with pytest.raises(InvalidRequestException) as exc_info:
            service.plan_trip("A", "F", departure)

        assert exc_info.value.code == "OUT_OF_SERVICE_HOURS"

    @pytest.mark.parametrize("departure", ["06:00 AM", "08:00 PM"])
    def test_service_hour_boundaries(self, service, departure):
        result = service.plan_trip("A", "F", departure)

        assert result["departure_time"] == departure

    def test_no_route(self, disconnected_network):
        service = TripService(disconnected_network)

        with pytest.raises(RouteNotFoundException) as exc_info:
            service.plan_trip("P", "S", "09:00 AM")

        assert "P에서 S까지" in exc_info.value.message

    def test_service_reusable_after_error(self, service):
        with pytest.raises(TimeFormatException):
            service.plan_trip("A", "F", "99:99 PM")

        result = service.plan_trip("A", "F", "06:00 AM")
        assert result["total_time"] == 44

    def test_trip_metrics_logged(self, service, caplog):
        caplog.set_level(logging.INFO, logger="app.services.trip_service")

        service.plan_trip("A", "F", "06:00 AM")

        assert any("METRICS:" in record.message for record in caplog.records)

    def test_trip_metrics_disabled(self, service, caplog, mocker):
        caplog.set_level(logging.INFO, logger="app.services.trip_service")

        mock_settings = mocker.patch("app.services.trip_service.settings")
        mock_settings.ENABLE_TRIP_METRICS = False
        service.plan_trip("A", "F", "06:00 AM")

        assert not any("METRICS:" in record.message for record in caplog.records)


class TestRendering:
    """텍스트 렌더링 / 안내 문구 테스트"""

    def test_render_single_station(self, engine, reference_network):
        itinerary = engine.build_itinerary([1], 360)

        text = render_trip_details(itinerary, reference_network.station_labels)

        assert text == "\nTrip B to B\n--------------\nTotal time = 0 minutes\n"

    def test_describe_error(self):
        assert describe_error(RouteNotFoundException()) == NO_PATH_MESSAGE
        assert describe_error(TimeFormatException()) == INVALID_INPUT_MESSAGE
        assert describe_error(InvalidRequestException()) == INVALID_INPUT_MESSAGE
