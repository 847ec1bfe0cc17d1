"""Employee salary queries, responses and their handlers."""

# Importing the handlers registers them with the query bus
from orgstats.application.employee import handlers  # noqa: F401
from orgstats.application.employee.queries import (
    HighestPaidInDepartmentQuery,
    HighestPaidPerDepartmentQuery,
    ListDepartmentsQuery,
    ListEmployeesInDepartmentQuery,
)

__all__ = [
    "HighestPaidInDepartmentQuery",
    "HighestPaidPerDepartmentQuery",
    "ListDepartmentsQuery",
    "ListEmployeesInDepartmentQuery",
]
