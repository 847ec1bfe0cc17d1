"""Employee domain record."""
from typing import ClassVar, Type

from pydantic import Field

from orgstats.domain.base.value_object import ValueObject
from orgstats.domain.core.exceptions import ValidationError
from orgstats.domain.department.value_objects import Department
from orgstats.domain.employee.exceptions import EmployeeValidationError


class Employee(ValueObject):
    """Salaried member of exactly one department.

    The department is held by value: employees referencing equal but
    separately constructed departments belong to the same group.
    """

    validation_error_type: ClassVar[Type[ValidationError]] = EmployeeValidationError

    id: int
    name: str = Field(min_length=1)
    department: Department
    salary: float = Field(ge=0, allow_inf_nan=False)

    @property
    def department_name(self) -> str:
        return self.department.name

    def belongs_to(self, department: Department) -> bool:
        """Check department membership by value equality."""
        return self.department == department

    def __str__(self) -> str:
        return (
            f"Employee{{id={self.id}, name='{self.name}', "
            f"department={self.department.name}, salary={self.salary}}}"
        )
