class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class EmptyImportError(ValidationError):
    """Raised when an import is attempted with no CSV text."""
