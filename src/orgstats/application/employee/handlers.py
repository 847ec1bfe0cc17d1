"""Query handlers for employee salary queries."""

from typing import List

from orgstats.application.base.handlers import BaseQueryHandler
from orgstats.application.decorators import query_handler
from orgstats.application.employee.dto import (
    DepartmentDTO,
    DepartmentHighestPaidDTO,
    DepartmentListResponse,
    EmployeeDTO,
    EmployeeListResponse,
    HighestPaidInDepartmentResponse,
    HighestPaidPerDepartmentResponse,
)
from orgstats.application.employee.queries import (
    HighestPaidInDepartmentQuery,
    HighestPaidPerDepartmentQuery,
    ListDepartmentsQuery,
    ListEmployeesInDepartmentQuery,
)
from orgstats.domain.employee import salary_service
from orgstats.infrastructure.utilities.common.collections import count_by


@query_handler(HighestPaidPerDepartmentQuery)
class HighestPaidPerDepartmentHandler(
    BaseQueryHandler[HighestPaidPerDepartmentQuery, HighestPaidPerDepartmentResponse]
):
    """Handler for the per-department salary maximum."""

    def execute_query(self, query: HighestPaidPerDepartmentQuery) -> HighestPaidPerDepartmentResponse:
        highest = salary_service.highest_paid_per_department(query.employees)
        results = [
            DepartmentHighestPaidDTO(
                department=DepartmentDTO.from_domain(department),
                employee=EmployeeDTO.from_domain(employee),
            )
            for department, employee in highest.items()
        ]
        return HighestPaidPerDepartmentResponse(
            results=results,
            metadata={"employee_count": len(query.employees), "department_count": len(results)},
        )


@query_handler(HighestPaidInDepartmentQuery)
class HighestPaidInDepartmentHandler(
    BaseQueryHandler[HighestPaidInDepartmentQuery, HighestPaidInDepartmentResponse]
):
    """Handler for the single-department salary maximum."""

    def execute_query(self, query: HighestPaidInDepartmentQuery) -> HighestPaidInDepartmentResponse:
        employee = salary_service.highest_paid_in_department(query.employees, query.department)
        if employee is None:
            self.logger.info("No employee in department", department=query.department.name)
            return HighestPaidInDepartmentResponse(
                department=DepartmentDTO.from_domain(query.department),
                found=False,
                message=f"No employees in department {query.department.name}",
            )

        return HighestPaidInDepartmentResponse(
            department=DepartmentDTO.from_domain(query.department),
            employee=EmployeeDTO.from_domain(employee),
            found=True,
        )


@query_handler(ListDepartmentsQuery)
class ListDepartmentsHandler(BaseQueryHandler[ListDepartmentsQuery, DepartmentListResponse]):
    """Handler listing distinct departments with their headcount."""

    def execute_query(self, query: ListDepartmentsQuery) -> DepartmentListResponse:
        departments = salary_service.distinct_departments(query.employees)
        headcounts = count_by(query.employees, lambda employee: employee.department)
        dtos: List[DepartmentDTO] = [
            DepartmentDTO.from_domain(department, headcount=headcounts[department])
            for department in departments
        ]
        return DepartmentListResponse(departments=dtos)


@query_handler(ListEmployeesInDepartmentQuery)
class ListEmployeesInDepartmentHandler(
    BaseQueryHandler[ListEmployeesInDepartmentQuery, EmployeeListResponse]
):
    """Handler listing the members of one department."""

    def execute_query(self, query: ListEmployeesInDepartmentQuery) -> EmployeeListResponse:
        members = salary_service.employees_in_department(query.employees, query.department)
        return EmployeeListResponse(
            department=DepartmentDTO.from_domain(query.department, headcount=len(members)),
            employees=[EmployeeDTO.from_domain(employee) for employee in members],
        )
