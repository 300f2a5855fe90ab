"""Enumerations shared by schemas and services."""

from enum import Enum

__all__ = ["UserRole"]


class UserRole(str, Enum):
    """Role of a user; the values match the ``usertype`` column."""

    CUSTOMER = "Customer"
    MANAGER = "Manager"
