"""
Geometry helpers for hotel search.

Hotel locations are compared in plain coordinate units: the distance is the
Euclidean distance between (latitude, longitude) pairs, not a great-circle
distance.
"""

import math


def calculate_distance(lat1: float, long1: float, lat2: float, long2: float) -> float:
    """Euclidean distance between two coordinate pairs"""
    return math.sqrt((lat1 - lat2) ** 2 + (long1 - long2) ** 2)
