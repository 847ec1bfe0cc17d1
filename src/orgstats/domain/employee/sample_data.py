"""Built-in demonstration roster."""
from typing import List

from orgstats.domain.department.value_objects import Department
from orgstats.domain.employee.employee_aggregate import Employee

IT = Department(id=1, name="IT")
HR = Department(id=2, name="HR")
FINANCE = Department(id=3, name="Finance")


def sample_departments() -> List[Department]:
    return [IT, HR, FINANCE]


def sample_employees() -> List[Employee]:
    """Six employees, two per department."""
    return [
        Employee(id=101, name="Alice", department=IT, salary=95000),
        Employee(id=102, name="Bob", department=IT, salary=120000),
        Employee(id=103, name="Charlie", department=HR, salary=70000),
        Employee(id=104, name="Diana", department=HR, salary=88000),
        Employee(id=105, name="Eve", department=FINANCE, salary=99000),
        Employee(id=106, name="Frank", department=FINANCE, salary=123000),
    ]
