# custom exception 정의 및 관리


class MetroException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class TimeFormatException(MetroException):
    def __init__(self, message: str = "출발 시간 형식이 올바르지 않습니다"):
        super().__init__(message, code="INVALID_TIME_FORMAT")


class InvalidRequestException(MetroException):
    def __init__(
        self, message: str = "유효하지 않은 요청입니다", code: str = "INVALID_REQUEST"
    ):
        super().__init__(message, code=code)


class StationNotFoundException(InvalidRequestException):
    def __init__(self, message: str = "역을 찾을 수 없습니다"):
        super().__init__(message, code="STATION_NOT_FOUND")


class RouteNotFoundException(MetroException):
    def __init__(self, message: str = "경로를 찾을 수 없습니다"):
        super().__init__(message, code="ROUTE_NOT_FOUND")
