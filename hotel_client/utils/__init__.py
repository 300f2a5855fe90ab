"""
Utility helpers for the hotel client.
"""

from hotel_client.utils.hashing import PasswordHasher
from hotel_client.utils.geo_utils import calculate_distance

__all__ = ["PasswordHasher", "calculate_distance"]
