from functools import lru_cache

from app.db.cache import get_network
from app.models.domain import NetworkConfig
from app.services.trip_service import TripService


# 노선망별로 lru_cache => 싱글톤과 유사한 효과, reload_network 이후에는 새 노선망으로 생성
@lru_cache(maxsize=4)
def _trip_service_for(network: NetworkConfig) -> TripService:
    return TripService(network)


def get_trip_service() -> TripService:
    return _trip_service_for(get_network())
