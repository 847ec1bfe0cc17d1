import pytest

from orgstats.domain.department.value_objects import Department
from orgstats.domain.employee.employee_aggregate import Employee


@pytest.fixture
def it():
    return Department(id=1, name="IT")


@pytest.fixture
def hr():
    return Department(id=2, name="HR")


@pytest.fixture
def finance():
    return Department(id=3, name="Finance")


@pytest.fixture
def employees(it, hr, finance):
    """IT={Alice, Bob}, HR={Charlie, Diana}, Finance={Eve, Frank}."""
    return [
        Employee(id=101, name="Alice", department=it, salary=95000),
        Employee(id=102, name="Bob", department=it, salary=120000),
        Employee(id=103, name="Charlie", department=hr, salary=70000),
        Employee(id=104, name="Diana", department=hr, salary=88000),
        Employee(id=105, name="Eve", department=finance, salary=99000),
        Employee(id=106, name="Frank", department=finance, salary=123000),
    ]


@pytest.fixture
def by_name(employees):
    return {employee.name: employee for employee in employees}


@pytest.fixture
def roster_data():
    return {
        "departments": [
            {"id": 1, "name": "IT"},
            {"id": 2, "name": "HR"},
        ],
        "employees": [
            {"id": 101, "name": "Alice", "department_id": 1, "salary": 95000},
            {"id": 102, "name": "Bob", "department_id": 1, "salary": 120000},
            {"id": 103, "name": "Charlie", "department_id": 2, "salary": 70000},
        ],
    }
