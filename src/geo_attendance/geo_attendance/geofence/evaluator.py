from __future__ import annotations

import logging
from math import atan2, cos, radians, sin, sqrt

from ..core.constants import EARTH_RADIUS_METERS
from .model import Coordinate, EvaluationResult, GeoFence

logger = logging.getLogger(__name__)


def haversine_distance(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in meters between two coordinates."""
    phi1, phi2 = radians(a.latitude), radians(b.latitude)
    d_phi = radians(b.latitude - a.latitude)
    d_lambda = radians(b.longitude - a.longitude)

    h = min(1.0, sin(d_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(d_lambda / 2) ** 2)
    c = 2 * atan2(sqrt(h), sqrt(1 - h))
    return EARTH_RADIUS_METERS * c


def evaluate(point: Coordinate, fence: GeoFence) -> EvaluationResult:
    """Classify ``point`` against ``fence``. The radius edge counts as inside."""
    distance = haversine_distance(point, fence.center)
    within = distance <= fence.radius_meters
    logger.debug(
        "point=(%s, %s) distance=%.2fm radius=%sm within=%s",
        point.latitude,
        point.longitude,
        distance,
        fence.radius_meters,
        within,
    )
    return EvaluationResult(distance_meters=distance, within_fence=within)
