"""Response DTOs for employee salary queries."""
from typing import List, Optional

from orgstats.application.dto.base import BaseDTO, BaseResponse
from orgstats.domain.department.value_objects import Department
from orgstats.domain.employee.employee_aggregate import Employee


class DepartmentDTO(BaseDTO):
    """DTO for department responses."""
    department_id: int
    name: str
    headcount: Optional[int] = None

    @classmethod
    def from_domain(cls, department: Department, headcount: Optional[int] = None) -> 'DepartmentDTO':
        """Create DTO from domain object."""
        return cls(department_id=department.id, name=department.name, headcount=headcount)


class EmployeeDTO(BaseDTO):
    """DTO for employee responses."""
    employee_id: int
    name: str
    department_id: int
    department_name: str
    salary: float

    @classmethod
    def from_domain(cls, employee: Employee) -> 'EmployeeDTO':
        """Create DTO from domain object."""
        return cls(
            employee_id=employee.id,
            name=employee.name,
            department_id=employee.department.id,
            department_name=employee.department.name,
            salary=employee.salary,
        )


class DepartmentHighestPaidDTO(BaseDTO):
    """One department paired with its highest-paid employee."""
    department: DepartmentDTO
    employee: EmployeeDTO


class HighestPaidPerDepartmentResponse(BaseResponse):
    """Highest-paid employee of every department, in first-seen order."""
    results: List[DepartmentHighestPaidDTO] = []


class HighestPaidInDepartmentResponse(BaseResponse):
    """Highest-paid employee of one department; ``found`` is False on no match."""
    department: DepartmentDTO
    employee: Optional[EmployeeDTO] = None
    found: bool = False


class DepartmentListResponse(BaseResponse):
    departments: List[DepartmentDTO] = []


class EmployeeListResponse(BaseResponse):
    department: DepartmentDTO
    employees: List[EmployeeDTO] = []
