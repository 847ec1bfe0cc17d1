"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Roster selection (file, configured default, or built-in sample)
- Query dispatch and output formatting
"""
import argparse
import os
import sys
from typing import List, Optional

from orgstats import __version__
from orgstats.application.base.queries import QueryBus
from orgstats.application.employee.queries import (
    HighestPaidInDepartmentQuery,
    HighestPaidPerDepartmentQuery,
    ListDepartmentsQuery,
    ListEmployeesInDepartmentQuery,
)
from orgstats.cli.formatters import format_output
from orgstats.config.defaults import LogLevel
from orgstats.config.manager import ConfigurationManager
from orgstats.domain.core.exceptions import DomainException
from orgstats.domain.department.value_objects import Department
from orgstats.helpers.logger import get_logger, setup_logging
from orgstats.infrastructure.roster import Roster, RosterLoader, sample_roster

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "orgstats",
        description="Salary statistics over an employee roster",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s highest-paid                      # Highest paid employee per department
  %(prog)s highest-paid --department IT      # Highest paid employee in IT
  %(prog)s --roster staff.yaml departments   # Departments of a roster file
  %(prog)s --format table employees -d 2     # Members of department 2
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table', 'list'],
                        default='json', help='Output format')
    parser.add_argument('--roster', help='Roster file (JSON or YAML); defaults to the sample roster')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.required = True

    highest = subparsers.add_parser('highest-paid', help='Highest paid employee per department')
    highest.add_argument('-d', '--department',
                         help='Restrict to one department, by id or name')

    subparsers.add_parser('departments', help='List departments of the roster')

    employees = subparsers.add_parser('employees', help='List employees of one department')
    employees.add_argument('-d', '--department', required=True,
                           help='Department id or name')

    return parser.parse_args(argv)


def load_roster(args: argparse.Namespace, config_manager: ConfigurationManager) -> Roster:
    """Pick the roster named on the command line, the configured one, or the sample."""
    path = args.roster or config_manager.get_roster_config().path
    if path:
        return RosterLoader().load(path)
    return sample_roster()


def resolve_department(roster: Roster, reference: str) -> Department:
    """Resolve a department reference; unknown references yield a department nobody belongs to."""
    department = roster.find_department(reference)
    if department is not None:
        return department

    logger.warning("Department not found in roster", reference=reference)
    reference = reference.strip()
    return Department(id=int(reference) if reference.isdigit() else 0, name=reference or "?")


def build_query(args: argparse.Namespace, roster: Roster):
    employees = tuple(roster.employees)
    if args.command == 'highest-paid':
        if args.department:
            return HighestPaidInDepartmentQuery(
                employees=employees, department=resolve_department(roster, args.department)
            )
        return HighestPaidPerDepartmentQuery(employees=employees)
    if args.command == 'departments':
        return ListDepartmentsQuery(employees=employees)
    return ListEmployeesInDepartmentQuery(
        employees=employees, department=resolve_department(roster, args.department)
    )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit code."""
    args = parse_args(argv)

    try:
        config_manager = ConfigurationManager(args.config)
        logging_config = config_manager.get_logging_config()
        if args.log_level:
            logging_config = logging_config.model_copy(update={'level': LogLevel(args.log_level)})
        setup_logging(logging_config)

        roster = load_roster(args, config_manager)
        response = QueryBus().dispatch(build_query(args, roster))
    except DomainException as e:
        logger.error("Command failed", command=args.command, error_code=e.error_code, error=e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(format_output(response.to_dict(), args.format))
    return 0


if __name__ == '__main__':
    sys.exit(main())
