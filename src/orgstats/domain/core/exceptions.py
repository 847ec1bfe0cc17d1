# src/orgstats/domain/core/exceptions.py
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when domain validation fails."""


class PreconditionViolationError(ValidationError):
    """Raised when a query receives input that breaks its contract."""

    def __init__(self, operation: str, reason: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"{operation}: {reason}",
            "PRECONDITION_VIOLATION",
            {"operation": operation, **(details or {})},
        )
        self.operation = operation
        self.reason = reason


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", {"missing_fields": missing_fields or []})
        self.missing_fields = missing_fields or []


class RosterLoadError(DomainException):
    """Raised when a roster file cannot be read or interpreted."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot load roster {path}: {reason}", "ROSTER_LOAD_ERROR", {"path": path})
        self.path = path
        self.reason = reason


class QueryHandlerNotFoundError(DomainException):
    """Raised when no handler is registered for a query type."""

    def __init__(self, query_type: str):
        super().__init__(f"No handler registered for {query_type}", "HANDLER_NOT_FOUND",
                         {"query_type": query_type})
        self.query_type = query_type
