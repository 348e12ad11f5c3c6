"""Application services."""

from placy_proximity.application.services.geo_distance import EARTH_RADIUS_KM, haversine_km
from placy_proximity.application.services.travel_time_estimator import TravelTimeEstimator

__all__ = ["EARTH_RADIUS_KM", "TravelTimeEstimator", "haversine_km"]
