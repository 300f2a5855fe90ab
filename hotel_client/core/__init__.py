"""
Core exceptions shared by all layers.
"""

from hotel_client.core.exceptions import (
    ErrorCode,
    HotelClientError,
    DatabaseError,
    DatabaseConnectionError,
    ExecutionError,
    ConstraintViolationError,
    IdentityResolutionError,
    ConfigurationError,
)

__all__ = [
    "ErrorCode",
    "HotelClientError",
    "DatabaseError",
    "DatabaseConnectionError",
    "ExecutionError",
    "ConstraintViolationError",
    "IdentityResolutionError",
    "ConfigurationError",
]
