# src/orgstats/domain/employee/salary_service.py
"""Salary queries over an in-memory employee roster.

All queries are pure: they read the supplied employees once, never mutate
them, and return freshly built results. When several employees in a group
share the maximal salary, the one appearing first in the input wins.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Tuple

from orgstats.domain.core.exceptions import PreconditionViolationError
from orgstats.domain.department.value_objects import Department
from orgstats.domain.employee.employee_aggregate import Employee
from orgstats.infrastructure.utilities.common.collections import (
    distinct,
    filter_by,
    group_by,
    map_values,
    max_by,
)

logger = logging.getLogger(__name__)


def _salary(employee: Employee) -> float:
    return employee.salary


def _department(employee: Employee) -> Department:
    return employee.department


def _validated(employees: Iterable[Employee], operation: str) -> Tuple[Employee, ...]:
    """Materialize the input and fail fast on malformed elements."""
    if employees is None:
        raise PreconditionViolationError(operation, "employees must be a sequence, got None")

    snapshot = tuple(employees)
    for index, employee in enumerate(snapshot):
        if not isinstance(employee, Employee):
            raise PreconditionViolationError(
                operation,
                f"element {index} is not an Employee",
                {"index": index, "type": type(employee).__name__},
            )
        # model_construct() skips validation, so the invariant is rechecked here
        if not isinstance(getattr(employee, "department", None), Department):
            raise PreconditionViolationError(
                operation,
                f"employee {getattr(employee, 'id', None)} has no department",
                {"index": index, "employee_id": getattr(employee, "id", None)},
            )
        salary = getattr(employee, "salary", None)
        if not isinstance(salary, (int, float)) or not math.isfinite(salary) or salary < 0:
            raise PreconditionViolationError(
                operation,
                f"employee {getattr(employee, 'id', None)} has invalid salary {salary!r}",
                {"index": index, "employee_id": getattr(employee, "id", None)},
            )
    return snapshot


def _require_department(department: Department, operation: str) -> None:
    if not isinstance(department, Department):
        raise PreconditionViolationError(
            operation,
            "target must be a Department",
            {"type": type(department).__name__},
        )


def group_by_department(employees: Iterable[Employee]) -> Dict[Department, List[Employee]]:
    """Partition employees by department value, keeping input order."""
    snapshot = _validated(employees, "group_by_department")
    return group_by(snapshot, _department)


def highest_paid_per_department(employees: Iterable[Employee]) -> Dict[Department, Employee]:
    """
    Map every department present in the input to its highest-paid employee.

    Args:
        employees: Employees to scan; may be empty

    Returns:
        Dictionary keyed by department in first-seen order. Empty iff the
        input is empty.

    Raises:
        PreconditionViolationError: If an element is not a well-formed Employee
    """
    snapshot = _validated(employees, "highest_paid_per_department")
    groups = group_by(snapshot, _department)
    # groups are never empty, so max_by always yields an employee
    result = map_values(groups, lambda members: max_by(members, _salary))
    logger.debug(
        "Computed highest paid per department: %d employees, %d departments",
        len(snapshot), len(result),
    )
    return result


def highest_paid_in_department(employees: Iterable[Employee],
                               department: Department) -> Optional[Employee]:
    """
    Find the highest-paid employee of a single department.

    Args:
        employees: Employees to scan; may be empty
        department: Department to filter on, compared by value

    Returns:
        The maximal-salary member, or None when nobody belongs to the department

    Raises:
        PreconditionViolationError: If an element is malformed or the target is
            not a Department
    """
    _require_department(department, "highest_paid_in_department")
    snapshot = _validated(employees, "highest_paid_in_department")
    members = filter_by(snapshot, lambda employee: employee.belongs_to(department))
    best = max_by(members, _salary)
    logger.debug(
        "Highest paid in %s: %s",
        department.name, best.name if best is not None else "no match",
    )
    return best


def employees_in_department(employees: Iterable[Employee],
                            department: Department) -> List[Employee]:
    """Return the members of a department in input order."""
    _require_department(department, "employees_in_department")
    snapshot = _validated(employees, "employees_in_department")
    return filter_by(snapshot, lambda employee: employee.belongs_to(department))


def distinct_departments(employees: Iterable[Employee]) -> List[Department]:
    """Return each department present in the input once, in first-seen order."""
    snapshot = _validated(employees, "distinct_departments")
    return distinct(_department(employee) for employee in snapshot)
