"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for departments and employees
- Detailed list views
- JSON and YAML dumps of response dictionaries
"""

import io
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Dict[str, Any], format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def _rows(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Flatten any supported response into employee/department rows."""
    if "results" in data:
        return [
            {**item["employee"], "department_name": item["department"]["name"]}
            for item in data["results"]
        ]
    if "employees" in data:
        return list(data["employees"])
    if "employee" in data:
        return [data["employee"]] if data.get("employee") else []
    return []


def _render(table: Table) -> str:
    buffer = io.StringIO()
    Console(file=buffer, width=100, force_terminal=False).print(table)
    return buffer.getvalue()


def format_table_output(data: Dict[str, Any]) -> str:
    """Format data as a table."""
    if "departments" in data:
        return format_departments_table(data["departments"])

    rows = _rows(data)
    if not rows:
        return data.get("message") or "No employees found."
    return format_employees_table(rows)


def format_employees_table(employees: List[Dict[str, Any]]) -> str:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Department", style="blue")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Salary", style="yellow", justify="right")

    for employee in employees:
        table.add_row(
            employee["department_name"],
            str(employee["employee_id"]),
            employee["name"],
            f"{employee['salary']:,.2f}",
        )
    return _render(table)


def format_departments_table(departments: List[Dict[str, Any]]) -> str:
    if not departments:
        return "No departments found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Employees", style="yellow", justify="right")

    for department in departments:
        headcount = department.get("headcount")
        table.add_row(
            str(department["department_id"]),
            department["name"],
            "" if headcount is None else str(headcount),
        )
    return _render(table)


def format_list_output(data: Dict[str, Any]) -> str:
    """Format data as one line per record, mirroring the domain's string form."""
    if "departments" in data:
        if not data["departments"]:
            return "No departments found."
        return "\n".join(
            f"Department{{id={d['department_id']}, name='{d['name']}'}}" for d in data["departments"]
        )

    rows = _rows(data)
    if not rows:
        return data.get("message") or "No employees found."
    # only the per-department mapping is keyed by department
    prefix = "results" in data
    return "\n".join(
        (f"{row['department_name']} -> " if prefix else "")
        + f"Employee{{id={row['employee_id']}, name='{row['name']}', "
        f"department={row['department_name']}, salary={row['salary']}}}"
        for row in rows
    )
