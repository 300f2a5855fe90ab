"""
Authorization and user account services.
"""

from hotel_client.services.auth.authorization_service import AuthorizationService
from hotel_client.services.auth.user_service import UserService

__all__ = ["AuthorizationService", "UserService"]
