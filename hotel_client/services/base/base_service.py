"""
Base service class providing common functionality for all services.
"""

from typing import Optional, Dict, Any
from contextlib import contextmanager

from hotel_client.config.logging import get_logger
from hotel_client.config.settings import Settings, settings as default_settings
from hotel_client.core.exceptions import (
    ConstraintViolationError,
    DatabaseError,
    ExecutionError,
    IdentityResolutionError,
)
from hotel_client.db.executor import StatementExecutor
from hotel_client.db.session import Session
from hotel_client.services.base.service_result import (
    ServiceResult,
    ServiceError,
    ErrorCode,
    ErrorSeverity,
)


class BaseService:
    """
    Base service with common behaviors:
    - Shared logger, executor and session
    - Consistent error handling via ServiceResult
    - Transaction management
    """

    def __init__(self, executor: StatementExecutor, settings: Optional[Settings] = None):
        """
        Initialize base service.

        Args:
            executor: Statement executor bound to the client session
            settings: Application settings (defaults to the environment settings)
        """
        self.executor = executor
        self.settings = settings or default_settings
        self._logger = get_logger(self.__class__.__name__)

    @property
    def session(self) -> Session:
        return self.executor.session

    # -------------------------------------------------------------------------
    # Exception & Error Handling
    # -------------------------------------------------------------------------

    def _handle_exception(
        self,
        exception: DatabaseError,
        operation: str,
        entity_ref: Optional[Any] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """
        Convert a database exception to a ServiceResult failure with logging.

        Args:
            exception: The caught exception
            operation: Description of the operation that failed
            entity_ref: Reference to the entity involved (ID, room, etc.)
            severity: Error severity level
            additional_context: Extra context for logging

        Returns:
            ServiceResult with failure status and error details
        """
        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if isinstance(exception, ExecutionError) and exception.statement:
            context["statement"] = exception.statement
        if additional_context:
            context.update(additional_context)

        self._logger.error(
            f"Error during {operation}: {exception}",
            exc_info=True,
            extra=context,
        )

        return ServiceResult.failure(
            ServiceError(
                code=self._map_exception_to_error_code(exception),
                message=f"Failed to {operation}: {exception.message}",
                details={
                    "error": str(exception),
                    "entity_ref": str(entity_ref) if entity_ref is not None else None,
                    "context": additional_context,
                },
                severity=severity,
            )
        )

    def _map_exception_to_error_code(self, exception: Exception) -> ErrorCode:
        """Map exception types to error codes."""
        exception_mapping = {
            ConstraintViolationError: ErrorCode.CONFLICT,
            DatabaseError: ErrorCode.DATABASE_ERROR,
        }

        for exc_type, error_code in exception_mapping.items():
            if isinstance(exception, exc_type):
                return error_code

        return ErrorCode.INTERNAL_ERROR

    def _identity_failure(self, exception: IdentityResolutionError, entity: str) -> ServiceResult:
        """Failure result for an insert rolled back because its new id was unknown."""
        self._logger.error(
            f"Rolled back {entity}: {exception.message}",
            extra={"operation": f"create {entity}"},
        )
        return ServiceResult.failure(
            ServiceError(
                code=ErrorCode.INVALID_REFERENCE,
                message=f"Could not determine the new {entity} id",
                details={"sequence": exception.sequence},
            )
        )

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(self):
        """
        Run the block as one database transaction.

        Example:
            with self.transaction():
                self.bookings.create(...)
                booking_id = self.identity.current_value(...)
        """
        with self.session.transaction() as connection:
            yield connection
