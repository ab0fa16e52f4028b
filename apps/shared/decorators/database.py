import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django.db import IntegrityError

from apps.shared.exceptions import AppError
from apps.shared.exceptions import ConflictError
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import StoreError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


class DatabaseErrorHandler:
    """
    Centralized database error handling with configurable mappings.

    Translation is driven by the exception type Django raises, never by
    inspecting driver messages or error codes.
    """

    def __init__(self, operation_type: str = "database_operation"):
        self.operation_type = operation_type
        # Order matters: IntegrityError is a DatabaseError subclass
        self.error_mappings = {
            IntegrityError: self._handle_integrity_error,
            DjangoValidationError: self._handle_validation_error,
            ObjectDoesNotExist: self._handle_not_found_error,
            DatabaseError: self._handle_database_error,
        }

    def _handle_integrity_error(self, error: IntegrityError, context: dict[str, Any]) -> ConflictError:
        """Handle database integrity constraint violations"""
        logger.warning(
            f"Integrity constraint violation in {self.operation_type}: {error}",
            extra={"operation": self.operation_type, "context": context},
        )
        model_name = context.get("model_name", "Resource")
        return ConflictError(
            message=f"Duplicate {model_name.lower()}",
            error_code=f"{self.operation_type}_integrity_error",
            context={"original_error": str(error), **context},
        )

    def _handle_validation_error(
        self, error: DjangoValidationError, context: dict[str, Any]
    ) -> ValidationError:
        """Handle Django validation errors while preserving field context"""
        logger.warning(
            f"Validation error in {self.operation_type}: {error}",
            extra={"operation": self.operation_type, "context": context},
        )

        field_errors = {}
        if hasattr(error, "error_dict"):
            field_errors = error.message_dict
        else:
            field_errors = {"non_field_errors": error.messages}

        return ValidationError(
            message="Validation Error",
            field_errors=field_errors,
            error_code=f"{self.operation_type}_validation_error",
            context={"original_error": str(error), **context},
        )

    def _handle_database_error(self, error: DatabaseError, context: dict[str, Any]) -> StoreError:
        """Handle general database connectivity/infrastructure errors"""
        logger.critical(
            f"Database infrastructure error in {self.operation_type}: {error}",
            extra={"operation": self.operation_type, "context": context},
            exc_info=True,
        )
        return StoreError(
            message=str(error) or "Database error",
            error_code=f"{self.operation_type}_database_error",
            context={"original_error": str(error), **context},
        )

    def _handle_not_found_error(
        self, error: ObjectDoesNotExist, context: dict[str, Any]
    ) -> ResourceNotFoundError:
        """Handle object not found errors"""
        model_name = context.get("model_name", "Resource")

        logger.debug(
            f"Resource not found in {self.operation_type}: {model_name}",
            extra={"operation": self.operation_type, "context": context},
        )

        return ResourceNotFoundError(
            message=f"{model_name} not found",
            error_code=f"{model_name.lower()}_not_found",
            context={"model": model_name, **context},
        )

    def handle_exception(self, error: Exception, context: dict[str, Any]) -> Exception | None:
        """
        Map a Django exception to a business exception.

        Returns None for exceptions outside the mapping so the caller
        re-raises them untouched.
        """
        for error_type, handler in self.error_mappings.items():
            if isinstance(error, error_type):
                return handler(error, context)
        return None


def handle_db_errors(
    operation_type: str = None,
    model_name: str = None,
    custom_mappings: dict[type[Exception], Callable] = None,
):
    """
    Decorator for centralized database error handling in DAL methods.

    Args:
        operation_type: Type of operation (create, read, update, delete)
        model_name: Model name for error context and messages
        custom_mappings: Extra ``{exception_type: handler(error, context)}``
            entries checked before the defaults

    Usage:
        @handle_db_errors(operation_type='create', model_name='Event')
        def create_event(self, event_data: dict) -> Event:
            return Event.objects.create(**event_data)
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs) -> Any:
            detected_operation = operation_type
            if not detected_operation:
                method_name = func.__name__.lower()
                if method_name.startswith("create"):
                    detected_operation = "create"
                elif method_name.startswith(("get", "find", "list", "count")):
                    detected_operation = "read"
                elif method_name.startswith("update"):
                    detected_operation = "update"
                elif method_name.startswith("delete"):
                    detected_operation = "delete"
                else:
                    detected_operation = method_name

            error_handler = DatabaseErrorHandler(detected_operation)
            if custom_mappings:
                defaults = {
                    error_type: handler
                    for error_type, handler in error_handler.error_mappings.items()
                    if error_type not in custom_mappings
                }
                error_handler.error_mappings = {**custom_mappings, **defaults}

            context = {
                "method": func.__name__,
                "class": self.__class__.__name__,
                "operation": detected_operation,
            }
            if model_name:
                context["model_name"] = model_name

            try:
                return func(self, *args, **kwargs)
            except AppError:
                raise
            except Exception as e:
                business_exception = error_handler.handle_exception(e, context)
                if business_exception is None:
                    raise
                raise business_exception from e

        return wrapper

    return decorator
