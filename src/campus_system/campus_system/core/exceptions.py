class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class DownstreamError(Exception):
    """Base exception for failures of external collaborators (mail server, ...)."""


class EmailDeliveryError(DownstreamError):
    """Raised when an email could not be handed over to the mail server."""
