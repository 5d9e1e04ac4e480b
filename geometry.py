"""Tx-Rx separation helpers.

The models only need a scalar distance in meters. Hosts that track Cartesian
positions use `euclidean_distance_m`; hosts that track WGS-84 coordinates can
use `haversine_distance_m` (great-circle, spherical Earth).
"""

import math
from typing import Sequence

import numpy as np


def euclidean_distance_m(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two 2-D or 3-D positions (meters)."""
    pa = np.asarray(a, dtype=float)
    pb = np.asarray(b, dtype=float)
    if pa.shape != pb.shape:
        raise ValueError("positions must have the same dimension")
    return float(np.linalg.norm(pa - pb))


def haversine_distance_m(lat1_deg: float, lon1_deg: float, lat2_deg: float, lon2_deg: float) -> float:
    """Great-circle distance between two WGS-84 points in meters.

    Args:
        lat1_deg, lon1_deg: point 1 latitude/longitude in degrees
        lat2_deg, lon2_deg: point 2 latitude/longitude in degrees
    """
    r_earth_m = 6371000.0
    lat1 = math.radians(lat1_deg)
    lat2 = math.radians(lat2_deg)
    dlat = lat2 - lat1
    dlon = math.radians(lon2_deg - lon1_deg)
    h = math.sin(dlat / 2.0) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    return 2.0 * r_earth_m * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))
