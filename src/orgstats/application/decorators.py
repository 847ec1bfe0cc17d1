"""
Application layer decorators for CQRS.

Handlers declare the query they serve with ``@query_handler``; the query bus
resolves handlers from the registry kept here.
"""
from __future__ import annotations

from typing import Dict, Optional, Type, TypeVar

from orgstats.application.dto.base import BaseQuery

TQuery = TypeVar('TQuery', bound=BaseQuery)
THandler = TypeVar('THandler')

_query_handler_registry: Dict[Type[BaseQuery], type] = {}


def query_handler(query_type: Type[TQuery]):
    """
    Mark a class as the handler for ``query_type``.

    Usage:
        @query_handler(HighestPaidPerDepartmentQuery)
        class HighestPaidPerDepartmentHandler(BaseQueryHandler):
            ...

    Args:
        query_type: The query type this handler processes

    Returns:
        Decorated handler class
    """
    def decorator(handler_class: Type[THandler]) -> Type[THandler]:
        _query_handler_registry[query_type] = handler_class

        handler_class._query_type = query_type
        handler_class._is_query_handler = True

        return handler_class

    return decorator


def get_query_handler(query_type: Type[BaseQuery]) -> Optional[type]:
    """Look up the handler class registered for a query type."""
    return _query_handler_registry.get(query_type)


def get_registered_query_handlers() -> Dict[Type[BaseQuery], type]:
    """Return a copy of the query handler registry."""
    return _query_handler_registry.copy()
