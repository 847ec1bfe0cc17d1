"""Query bus - routes queries to their registered handlers."""
from typing import Any, Dict, Optional

from orgstats.application.decorators import get_query_handler
from orgstats.application.dto.base import BaseQuery
from orgstats.domain.core.exceptions import QueryHandlerNotFoundError


class QueryBus:
    """Synchronous query bus backed by the ``@query_handler`` registry."""

    def __init__(self):
        self._handlers: Dict[type, Any] = {}

    def register_handler(self, query_type: type, handler) -> None:
        """Register a handler instance, overriding the decorator registry."""
        self._handlers[query_type] = handler

    def _resolve(self, query_type: type):
        handler = self._handlers.get(query_type)
        if handler is not None:
            return handler

        handler_class: Optional[type] = get_query_handler(query_type)
        if handler_class is None:
            raise QueryHandlerNotFoundError(query_type.__name__)

        handler = handler_class()
        self._handlers[query_type] = handler
        return handler

    def dispatch(self, query: BaseQuery):
        """Send a query for processing and return the handler's response."""
        return self._resolve(type(query)).handle(query)
