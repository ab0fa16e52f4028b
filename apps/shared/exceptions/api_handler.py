"""
DRF exception handler for CampusConnect.

Translates business exceptions and DRF's own exceptions into one JSON
envelope::

    {"success": false, "message": "...", "error_code": "...", "errors": [...]}

Architecture Flow:
DAL (Django exceptions) -> Business exceptions -> API Handler -> HTTP responses

Views contain no try/except; everything ends up here.
"""

import logging
import traceback

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import IntegrityError
from django.http import Http404
from django.utils import timezone
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.shared.exceptions import AppError
from apps.shared.exceptions import AuthenticationError
from apps.shared.exceptions import ConflictError
from apps.shared.exceptions import PermissionDeniedError
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import StoreError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

NO_TOKEN_MESSAGE = 'Access denied. No token provided.'


def custom_exception_handler(exc, context):
    """
    Exception handler with business -> HTTP translation.

    Called by DRF for every exception raised inside an API view.

    Args:
        exc: The exception instance
        context: View context (request, view, args, kwargs)

    Returns:
        Response with the error envelope and the matching HTTP status
    """
    request_info = _extract_request_info(context.get('request'), context.get('view'))

    # Business exceptions first; they are not APIException subclasses
    if isinstance(exc, ValidationError):
        return _handle_validation_error(exc, request_info)

    elif isinstance(exc, AuthenticationError):
        return _handle_business_exception(exc, request_info, status.HTTP_401_UNAUTHORIZED, level='warning')

    elif isinstance(exc, PermissionDeniedError):
        return _handle_business_exception(exc, request_info, status.HTTP_403_FORBIDDEN, level='warning')

    elif isinstance(exc, ResourceNotFoundError):
        return _handle_business_exception(exc, request_info, status.HTTP_404_NOT_FOUND, level='info')

    elif isinstance(exc, ConflictError):
        return _handle_business_exception(exc, request_info, status.HTTP_400_BAD_REQUEST, level='info')

    elif isinstance(exc, StoreError):
        return _handle_business_exception(
            exc, request_info, status.HTTP_500_INTERNAL_SERVER_ERROR, level='error'
        )

    elif isinstance(exc, AppError):
        # Generic fallback for other business errors
        return _handle_business_exception(exc, request_info, status.HTTP_400_BAD_REQUEST, level='error')

    # Let DRF build its response (sets auth headers, rolls back atomic blocks)
    response = exception_handler(exc, context)
    if response is not None:
        _log_drf_exception(exc, request_info)
        return _format_drf_response(response, exc)

    # Django exceptions that slipped past DRF
    if isinstance(exc, IntegrityError):
        return _handle_integrity_error(exc, request_info)

    # Unhandled exception - this is a 500 error
    return _handle_unhandled_exception(exc, request_info)


# =============================================================================
# Business Exception Handlers
# =============================================================================

def _handle_validation_error(exc: ValidationError, request_info: dict) -> Response:
    """Handle validation errors -> 400"""
    _log_business_exception(exc, request_info, level='info')

    errors = None
    if exc.field_errors:
        errors = _flatten_errors(exc.field_errors)

    return _error_response(str(exc), exc.error_code, status.HTTP_400_BAD_REQUEST, errors=errors)


def _handle_business_exception(exc: AppError, request_info: dict, status_code: int, level: str) -> Response:
    _log_business_exception(exc, request_info, level=level)
    return _error_response(str(exc), exc.error_code, status_code)


def _handle_integrity_error(exc: IntegrityError, request_info: dict) -> Response:
    """Constraint violations that were not translated by a DAL"""
    logger.warning(f'Untranslated IntegrityError in API: {exc} | Request: {request_info}')
    return _error_response('Duplicate value', 'duplicate_value', status.HTTP_400_BAD_REQUEST)


def _handle_unhandled_exception(exc, request_info: dict) -> Response:
    """Handle unexpected exceptions -> 500"""
    logger.error(
        f'UNHANDLED EXCEPTION in API: {type(exc).__name__}: {exc!s}\n'
        f'Request: {request_info}\n'
        f'Traceback: {traceback.format_exc()}'
    )

    return _error_response(
        'Internal Server Error',
        'internal_server_error',
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# =============================================================================
# DRF Exceptions
# =============================================================================

def _format_drf_response(response: Response, exc: Exception) -> Response:
    """Rewrite DRF's body into the common envelope, keeping status and headers"""
    error_code = getattr(exc, 'default_code', type(exc).__name__)
    errors = None

    if isinstance(exc, drf_exceptions.NotAuthenticated):
        message = NO_TOKEN_MESSAGE
    elif isinstance(exc, drf_exceptions.ValidationError):
        message = 'Validation Error'
        errors = _flatten_errors(exc.detail)
    elif isinstance(exc, (drf_exceptions.NotFound, Http404)):
        message = 'Resource not found'
        error_code = 'not_found'
    elif isinstance(exc, DjangoPermissionDenied):
        message = 'Permission denied'
        error_code = 'permission_denied'
    elif isinstance(exc, drf_exceptions.APIException):
        message = _detail_to_message(exc.detail)
    else:
        message = str(exc) or 'Request failed'

    response.data = _envelope(message, error_code, errors=errors)
    return response


def _flatten_errors(detail, field: str = None) -> list[str]:
    """Turn DRF/Django error structures into a flat list of readable strings"""
    messages = []
    if isinstance(detail, dict):
        for key, value in detail.items():
            nested_field = None if key == 'non_field_errors' else key
            messages.extend(_flatten_errors(value, nested_field))
    elif isinstance(detail, (list, tuple)):
        for item in detail:
            messages.extend(_flatten_errors(item, field))
    else:
        text = str(detail)
        messages.append(f'{field}: {text}' if field else text)
    return messages


def _detail_to_message(detail) -> str:
    if isinstance(detail, (list, dict)):
        flattened = _flatten_errors(detail)
        return flattened[0] if flattened else 'Request failed'
    return str(detail)


# =============================================================================
# Utility Functions
# =============================================================================

def _envelope(message: str, error_code: str, errors: list = None) -> dict:
    body = {
        'success': False,
        'message': message,
        'error_code': error_code,
        'timestamp': _get_timestamp(),
    }
    if errors:
        body['errors'] = errors
    return body


def _error_response(message: str, error_code: str, status_code: int, errors: list = None) -> Response:
    return Response(_envelope(message, error_code, errors=errors), status=status_code)


def _extract_request_info(request, view) -> dict:
    """Extract useful request info for logging"""
    if not request:
        return {'method': 'unknown', 'path': 'unknown', 'user': 'unknown'}

    # Read the cached user only; touching request.user would re-run authentication
    user = getattr(request, '_user', None)
    return {
        'method': getattr(request, 'method', 'unknown'),
        'path': getattr(request, 'path', 'unknown'),
        'user': getattr(user, 'id', None) or 'anonymous',
        'view': f'{view.__class__.__module__}.{view.__class__.__name__}' if view else 'unknown',
    }


def _log_business_exception(exc: AppError, request_info: dict, level: str = 'warning'):
    """Log business exceptions with appropriate level"""
    log_msg = (
        f'Business exception in API: {type(exc).__name__}: {exc!s} '
        f'| Request: {request_info} | Context: {exc.get_context()}'
    )

    if level == 'info':
        logger.info(log_msg)
    elif level == 'error':
        logger.error(log_msg)
    else:
        logger.warning(log_msg)


def _log_drf_exception(exc: Exception, request_info: dict):
    logger.info(f'DRF exception in API: {type(exc).__name__}: {exc!s} | Request: {request_info}')


def _get_timestamp() -> str:
    """Get ISO timestamp for error responses"""
    return timezone.now().isoformat()
