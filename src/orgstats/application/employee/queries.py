"""Employee salary queries for CQRS implementation."""

from typing import Tuple

from orgstats.application.dto.base import BaseQuery
from orgstats.domain.department.value_objects import Department
from orgstats.domain.employee.employee_aggregate import Employee


class EmployeeQuery(BaseQuery):
    """Base for queries that run over a roster snapshot."""
    employees: Tuple[Employee, ...] = ()


class HighestPaidPerDepartmentQuery(EmployeeQuery):
    """Query for the highest-paid employee of every department."""


class HighestPaidInDepartmentQuery(EmployeeQuery):
    """Query for the highest-paid employee of one department."""

    department: Department


class ListDepartmentsQuery(EmployeeQuery):
    """Query to list the distinct departments of a roster."""


class ListEmployeesInDepartmentQuery(EmployeeQuery):
    """Query to list the members of one department."""

    department: Department
