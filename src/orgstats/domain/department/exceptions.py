"""Department domain exceptions."""

from orgstats.domain.core.exceptions import ValidationError


class DepartmentValidationError(ValidationError):
    """Raised when department data fails validation."""
