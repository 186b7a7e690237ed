"""Custom domain exceptions for the application."""


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class ValidationError(DomainError):
    """Raised when untrusted input violates a domain invariant."""

    pass


class InvalidNameError(ValidationError):
    """Raised when a subscriber name fails validation."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"{raw!r} is not a valid subscriber name")


class InvalidEmailError(ValidationError):
    """Raised when a subscriber email fails validation."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"{raw!r} is not a valid email")


class MissingFieldError(ValidationError):
    """Raised when a required form field is absent from the request."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class PersistenceError(DomainError):
    """Raised when the storage layer fails to record a subscription."""

    pass


class DeliveryError(DomainError):
    """Raised when the email provider cannot be reached or the exchange fails."""

    pass


class DeliveryTimeoutError(DeliveryError):
    """Raised when the email provider does not answer within the configured timeout."""

    pass
