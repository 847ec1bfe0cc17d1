"""Domain layer - departments, employees and salary queries."""

from orgstats.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    PreconditionViolationError,
    QueryHandlerNotFoundError,
    RosterLoadError,
    ValidationError,
)
from orgstats.domain.department.value_objects import Department
from orgstats.domain.employee.employee_aggregate import Employee
from orgstats.domain.employee.salary_service import (
    distinct_departments,
    employees_in_department,
    group_by_department,
    highest_paid_in_department,
    highest_paid_per_department,
)

__all__ = [
    "ConfigurationError",
    "Department",
    "DomainException",
    "Employee",
    "PreconditionViolationError",
    "QueryHandlerNotFoundError",
    "RosterLoadError",
    "ValidationError",
    "distinct_departments",
    "employees_in_department",
    "group_by_department",
    "highest_paid_in_department",
    "highest_paid_per_department",
]
