from typing import Optional


class ExpiryCheckError(Exception):
    """Base class for failures raised by the expiry check collaborators."""


class QueryFailure(ExpiryCheckError):
    """The advert lookup could not complete."""


class NotificationFailure(ExpiryCheckError):
    """A single notification could not be created."""

    def __init__(self, message: str, reference_id: Optional[int] = None):
        super().__init__(message)
        self.reference_id = reference_id
