"""
Business logic services
"""

from app.services.trip_service import TripService

__all__ = [
    "TripService",
]
