"""
Base service layer components.
"""

from hotel_client.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)
from hotel_client.services.base.base_service import BaseService

__all__ = [
    "BaseService",
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    "ErrorSeverity",
]
