class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class RemoteSyncError(DomainError):
    """Raised when the remote document service cannot be reached or answers badly."""
