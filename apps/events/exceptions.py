"""
Domain-specific business exceptions for Events app.

These are BUSINESS exceptions, not HTTP exceptions; the global exception
handler maps them through the core hierarchy they inherit from.
"""

from apps.shared.exceptions import ConflictError
from apps.shared.exceptions import ResourceNotFoundError

# =============================================================================
# Event Domain Exceptions
# =============================================================================


class EventNotFoundError(ResourceNotFoundError):
    """Raised when requested event does not exist."""

    def __init__(self, event_id=None):
        super().__init__(
            "Event not found",
            error_code="event_not_found",
            context={"event_id": event_id},
        )


# =============================================================================
# Registration Domain Exceptions
# =============================================================================


class RegistrationNotFoundError(ResourceNotFoundError):
    """Raised when a student cancels a registration that does not exist."""

    def __init__(self, event_id=None, user_id=None):
        super().__init__(
            "Registration not found",
            error_code="registration_not_found",
            context={"event_id": event_id, "user_id": user_id},
        )


class AlreadyRegisteredError(ConflictError):
    """Raised when the (user, event) pair is already registered."""

    def __init__(self, event_id=None, user_id=None):
        super().__init__(
            "You are already registered for this event",
            error_code="already_registered",
            context={"event_id": event_id, "user_id": user_id},
        )
