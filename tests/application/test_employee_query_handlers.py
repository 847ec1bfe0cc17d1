import pytest
from unittest.mock import Mock

from orgstats.application.base.queries import QueryBus
from orgstats.application.decorators import get_query_handler, get_registered_query_handlers
from orgstats.application.dto.base import BaseQuery
from orgstats.application.employee.handlers import (
    HighestPaidInDepartmentHandler,
    HighestPaidPerDepartmentHandler,
    ListDepartmentsHandler,
    ListEmployeesInDepartmentHandler,
)
from orgstats.application.employee.queries import (
    HighestPaidInDepartmentQuery,
    HighestPaidPerDepartmentQuery,
    ListDepartmentsQuery,
    ListEmployeesInDepartmentQuery,
)
from orgstats.domain.core.exceptions import PreconditionViolationError, QueryHandlerNotFoundError
from orgstats.domain.department.value_objects import Department
from orgstats.domain.employee.employee_aggregate import Employee


@pytest.fixture
def query_bus():
    return QueryBus()


def test_handlers_are_registered():
    registry = get_registered_query_handlers()

    assert registry[HighestPaidPerDepartmentQuery] is HighestPaidPerDepartmentHandler
    assert registry[HighestPaidInDepartmentQuery] is HighestPaidInDepartmentHandler
    assert get_query_handler(ListDepartmentsQuery) is ListDepartmentsHandler
    assert get_query_handler(ListEmployeesInDepartmentQuery) is ListEmployeesInDepartmentHandler


def test_highest_paid_per_department_response(query_bus, employees):
    # Act
    response = query_bus.dispatch(HighestPaidPerDepartmentQuery(employees=employees))

    # Assert
    assert response.success is True
    assert [(item.department.name, item.employee.name) for item in response.results] == [
        ("IT", "Bob"),
        ("HR", "Diana"),
        ("Finance", "Frank"),
    ]
    assert response.metadata == {"employee_count": 6, "department_count": 3}


def test_highest_paid_per_department_empty_roster(query_bus):
    response = query_bus.dispatch(HighestPaidPerDepartmentQuery(employees=[]))

    assert response.results == []


def test_highest_paid_in_department_found(query_bus, employees, it):
    response = query_bus.dispatch(HighestPaidInDepartmentQuery(employees=employees, department=it))

    assert response.found is True
    assert response.employee.name == "Bob"
    assert response.employee.salary == 120000.0
    assert response.department.name == "IT"


def test_highest_paid_in_department_no_match(query_bus, employees):
    # Arrange
    legal = Department(id=99, name="Legal")

    # Act
    response = query_bus.dispatch(HighestPaidInDepartmentQuery(employees=employees, department=legal))

    # Assert
    assert response.found is False
    assert response.employee is None
    assert response.success is True
    assert "Legal" in response.message


def test_list_departments_includes_headcount(query_bus, employees):
    response = query_bus.dispatch(ListDepartmentsQuery(employees=employees))

    assert [(d.department_id, d.name, d.headcount) for d in response.departments] == [
        (1, "IT", 2),
        (2, "HR", 2),
        (3, "Finance", 2),
    ]


def test_list_employees_in_department(query_bus, employees, hr):
    response = query_bus.dispatch(ListEmployeesInDepartmentQuery(employees=employees, department=hr))

    assert [employee.name for employee in response.employees] == ["Charlie", "Diana"]
    assert response.department.headcount == 2


def test_response_to_dict(query_bus, employees, finance):
    response = query_bus.dispatch(HighestPaidInDepartmentQuery(employees=employees, department=finance))

    data = response.to_dict()

    assert data["employee"] == {
        "employee_id": 106,
        "name": "Frank",
        "department_id": 3,
        "department_name": "Finance",
        "salary": 123000.0,
    }
    assert data["found"] is True


def test_malformed_employee_propagates(query_bus, employees):
    broken = Employee.model_construct(id=999, name="Ghost", department=None, salary=1.0)

    with pytest.raises(PreconditionViolationError):
        query_bus.dispatch(HighestPaidPerDepartmentQuery(employees=employees + [broken]))


def test_handler_logs_start_and_completion(employees):
    # Arrange
    logger = Mock()
    handler = HighestPaidPerDepartmentHandler(logger=logger)

    # Act
    handler.handle(HighestPaidPerDepartmentQuery(employees=employees))

    # Assert
    messages = [call.args[0] for call in logger.info.call_args_list]
    assert messages == ["Starting query", "Completed query"]
    logger.error.assert_not_called()


def test_handler_logs_failure(employees):
    logger = Mock()
    handler = HighestPaidInDepartmentHandler(logger=logger)
    broken = Employee.model_construct(id=1, name="Ghost", department=None, salary=1.0)

    with pytest.raises(PreconditionViolationError):
        handler.handle(HighestPaidInDepartmentQuery(employees=[broken], department=employees[0].department))

    logger.error.assert_called_once()


def test_registered_instance_overrides_registry(query_bus):
    # Arrange
    handler = Mock()
    handler.handle.return_value = "stubbed"
    query_bus.register_handler(ListDepartmentsQuery, handler)
    query = ListDepartmentsQuery(employees=[])

    # Act & Assert
    assert query_bus.dispatch(query) == "stubbed"
    handler.handle.assert_called_once_with(query)


def test_unknown_query_raises(query_bus):
    class UnhandledQuery(BaseQuery):
        pass

    with pytest.raises(QueryHandlerNotFoundError):
        query_bus.dispatch(UnhandledQuery())
