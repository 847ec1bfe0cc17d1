"""org-stats - salary statistics over in-memory employee rosters.

The package is layered the usual way:

- ``orgstats.domain``: departments, employees and the pure salary queries
- ``orgstats.application``: query DTOs, handlers and the query bus
- ``orgstats.infrastructure``: roster loading and collection utilities
- ``orgstats.config`` / ``orgstats.helpers``: configuration and logging
- ``orgstats.cli``: the ``orgstats`` command
"""

__version__ = "0.1.0"
