"""Department value objects."""
from typing import ClassVar, Type

from pydantic import Field

from orgstats.domain.base.value_object import ValueObject
from orgstats.domain.core.exceptions import ValidationError
from orgstats.domain.department.exceptions import DepartmentValidationError


class Department(ValueObject):
    """Organizational unit identified by id and name."""

    validation_error_type: ClassVar[Type[ValidationError]] = DepartmentValidationError

    id: int
    name: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"Department{{id={self.id}, name='{self.name}'}}"
