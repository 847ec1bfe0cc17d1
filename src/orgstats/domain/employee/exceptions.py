"""Employee domain exceptions."""

from orgstats.domain.core.exceptions import ValidationError


class EmployeeValidationError(ValidationError):
    """Raised when employee data fails validation."""
