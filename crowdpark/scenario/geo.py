"""
Spherical geodesy and spline smoothing on (lat, lng) pairs.

Distances use the mean Earth radius (6371.0088 km) and bearings are degrees in
(-180, 180], measured clockwise from north.
"""
import math
from typing import List, Sequence

import numpy as np

from ..simulation.constants import LatLng

EARTH_RADIUS_KM = 6371.0088


def haversine_km(origin: LatLng, target: LatLng) -> float:
    lat1, lon1 = math.radians(origin[0]), math.radians(origin[1])
    lat2, lon2 = math.radians(target[0]), math.radians(target[1])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat / 2) ** 2 + math.sin(dlon / 2) ** 2 * math.cos(lat1) * math.cos(lat2)
    return 2 * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1 - a))) * EARTH_RADIUS_KM


def initial_bearing(origin: LatLng, target: LatLng) -> float:
    lat1, lon1 = math.radians(origin[0]), math.radians(origin[1])
    lat2, lon2 = math.radians(target[0]), math.radians(target[1])
    a = math.sin(lon2 - lon1) * math.cos(lat2)
    b = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(lon2 - lon1)
    return math.degrees(math.atan2(a, b))


def destination_point(origin: LatLng, distance_km: float, bearing_deg: float) -> LatLng:
    lat1, lon1 = math.radians(origin[0]), math.radians(origin[1])
    heading = math.radians(bearing_deg)
    angular = distance_km / EARTH_RADIUS_KM
    lat2 = math.asin(
        math.sin(lat1) * math.cos(angular)
        + math.cos(lat1) * math.sin(angular) * math.cos(heading)
    )
    lon2 = lon1 + math.atan2(
        math.sin(heading) * math.sin(angular) * math.cos(lat1),
        math.cos(angular) - math.sin(lat1) * math.sin(lat2)
    )
    return (math.degrees(lat2), math.degrees(lon2))


def _bernstein(t: np.ndarray) -> np.ndarray:
    # Columns weight (end, second control, first control, start)
    t2 = t * t
    t3 = t2 * t
    u = 1 - t
    return np.stack([t3, 3 * t2 * u, 3 * t * u * u, u * u * u], axis=1)


def bezier_spline(points: Sequence[LatLng], sharpness: float = 0.85,
                  resolution: int = 10000) -> List[LatLng]:
    """
    Smooth cubic Bezier spline passing through every point.

    Each interior point gets a pair of control points pulled toward the
    midpoints of its neighbouring segments by ``sharpness``. The curve is
    sampled every 10 time units of ``resolution``, keeping alternate blocks of
    100 units, plus the final point.
    """
    pts = np.asarray(points, dtype=float)
    if len(pts) < 2:
        return [tuple(p) for p in pts.tolist()]

    centers = (pts[:-1] + pts[1:]) / 2
    controls = [(pts[0], pts[0])]
    for i in range(len(centers) - 1):
        shift = pts[i + 1] - (centers[i] + centers[i + 1]) / 2
        controls.append((
            (1.0 - sharpness) * pts[i + 1] + sharpness * (centers[i] + shift),
            (1.0 - sharpness) * pts[i + 1] + sharpness * (centers[i + 1] + shift),
        ))
    controls.append((pts[-1], pts[-1]))

    times = np.arange(0, resolution, 10)
    times = times[(times // 100) % 2 == 0]
    progress = times / resolution
    segments = len(pts) - 1
    n = np.floor(segments * progress).astype(int)
    local_t = segments * progress - n

    weights = _bernstein(local_t)
    end = pts[n + 1]
    second = np.array([controls[k + 1][0] for k in n])
    first = np.array([controls[k][1] for k in n])
    start = pts[n]
    sampled = (
        end * weights[:, [0]]
        + second * weights[:, [1]]
        + first * weights[:, [2]]
        + start * weights[:, [3]]
    )
    path = [tuple(p) for p in sampled.tolist()]
    path.append(tuple(pts[-1].tolist()))
    return path
