"""Roster file loading.

A roster file lists departments and the employees that reference them by id::

    departments:
      - {id: 1, name: IT}
    employees:
      - {id: 101, name: Alice, department_id: 1, salary: 95000}

JSON files use the same structure.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from orgstats.domain.core.exceptions import RosterLoadError, ValidationError
from orgstats.domain.department.value_objects import Department
from orgstats.domain.employee.employee_aggregate import Employee
from orgstats.domain.employee.sample_data import sample_departments, sample_employees

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Roster:
    """Departments and employees read from one source."""
    departments: List[Department] = field(default_factory=list)
    employees: List[Employee] = field(default_factory=list)

    def find_department(self, reference: str) -> Optional[Department]:
        """Resolve a department by numeric id or by name (case-insensitive)."""
        reference = reference.strip()
        for department in self.departments:
            if reference.isdigit() and department.id == int(reference):
                return department
            if department.name.lower() == reference.lower():
                return department
        return None


def sample_roster() -> Roster:
    """Return the built-in demonstration roster."""
    return Roster(departments=sample_departments(), employees=sample_employees())


class RosterLoader:
    """Reads rosters from JSON or YAML files."""

    SUPPORTED_SUFFIXES = ('.json', '.yml', '.yaml')

    def load(self, path: str) -> Roster:
        """
        Load a roster file.

        Args:
            path: Path to a .json, .yml or .yaml file

        Returns:
            Roster with departments in file order and employees in file order

        Raises:
            RosterLoadError: If the file is missing, unreadable or malformed
        """
        file_path = Path(path)
        if file_path.suffix.lower() not in self.SUPPORTED_SUFFIXES:
            raise RosterLoadError(path, f"unsupported file type '{file_path.suffix}'")
        if not file_path.exists():
            raise RosterLoadError(path, "file not found")

        data = self._read(file_path)
        roster = self._build(path, data)
        logger.info("Loaded roster %s: %d departments, %d employees",
                    path, len(roster.departments), len(roster.employees))
        return roster

    @staticmethod
    def _read(file_path: Path) -> Dict[str, Any]:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                if file_path.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise RosterLoadError(str(file_path), str(e)) from e

        if not isinstance(data, dict):
            raise RosterLoadError(str(file_path), "expected a mapping with 'departments' and 'employees'")
        return data

    @staticmethod
    def _build(path: str, data: Dict[str, Any]) -> Roster:
        departments_by_id: Dict[int, Department] = {}
        try:
            for entry in data.get('departments') or []:
                department = Department.from_dict(entry)
                if department.id in departments_by_id:
                    raise RosterLoadError(path, f"duplicate department id {department.id}")
                departments_by_id[department.id] = department

            employees = []
            for entry in data.get('employees') or []:
                entry = dict(entry)
                department_id = entry.pop('department_id', None)
                if department_id not in departments_by_id:
                    raise RosterLoadError(
                        path, f"employee {entry.get('id')} references unknown department {department_id}"
                    )
                employees.append(Employee(department=departments_by_id[department_id], **entry))
        except ValidationError as e:
            raise RosterLoadError(path, e.message) from e
        except (TypeError, ValueError, AttributeError) as e:
            raise RosterLoadError(path, f"malformed entry: {e}") from e

        return Roster(departments=list(departments_by_id.values()), employees=employees)
