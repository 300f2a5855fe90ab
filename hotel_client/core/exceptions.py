"""
Custom exceptions for the hotel client.

Database-level failures are raised as exceptions from the session and
executor layers and converted to ``ServiceResult`` failures at the
service boundary.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by raised exceptions"""
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    EXECUTION_ERROR = "EXECUTION_ERROR"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class HotelClientError(Exception):
    """
    Base exception class for all hotel client exceptions.

    Provides consistent error handling with structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Database Exceptions
# ========================================

class DatabaseError(HotelClientError):
    """Exception raised when database operations fail"""

    def __init__(
        self,
        message: str = "Database operation failed",
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details)


class DatabaseConnectionError(DatabaseError):
    """Exception raised when the database session cannot be opened"""

    def __init__(
        self,
        message: str = "Unable to connect to database",
        database: Optional[str] = None
    ):
        details = {"database": database} if database else {}
        super().__init__(message, error_code=ErrorCode.CONNECTION_ERROR, details=details)


class ExecutionError(DatabaseError):
    """Exception raised when a statement fails on an open session"""

    def __init__(
        self,
        message: str = "Statement execution failed",
        statement: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.EXECUTION_ERROR,
    ):
        details = {"statement": statement} if statement else {}
        super().__init__(message, error_code=error_code, details=details)
        self.statement = statement


class ConstraintViolationError(ExecutionError):
    """Exception raised when a statement violates an integrity constraint"""

    def __init__(
        self,
        message: str = "Integrity constraint violated",
        statement: Optional[str] = None,
    ):
        super().__init__(message, statement=statement, error_code=ErrorCode.CONSTRAINT_VIOLATION)


class ConfigurationError(HotelClientError):
    """Exception raised for invalid settings"""

    def __init__(self, message: str = "Invalid configuration"):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR)


class IdentityResolutionError(DatabaseError):
    """Exception raised when a sequence yields no value after an insert"""

    def __init__(self, sequence: str):
        super().__init__(
            f"No current value for sequence '{sequence}'",
            details={"sequence": sequence},
        )
        self.sequence = sequence
