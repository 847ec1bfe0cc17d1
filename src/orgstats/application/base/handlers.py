"""
Base query handler with common cross-cutting concerns.

Provides timing and structured logging around every query execution.
"""

import time
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

import structlog

from orgstats.helpers.logger import get_logger

TQuery = TypeVar("TQuery")
TResult = TypeVar("TResult")


class BaseQueryHandler(Generic[TQuery, TResult], ABC):
    """Base class for query handlers."""

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self.logger = logger or get_logger(self.__class__.__module__)

    def handle(self, query: TQuery) -> TResult:
        """Execute the query with logging and timing."""
        operation_id = f"{self.__class__.__name__}.execute_query"
        start_time = time.time()
        self.logger.info("Starting query", operation=operation_id,
                         correlation_id=getattr(query, "correlation_id", None))

        try:
            result = self.execute_query(query)
        except Exception as e:
            self.logger.error("Query failed", operation=operation_id,
                              duration=round(time.time() - start_time, 3), error=str(e))
            raise

        self.logger.info("Completed query", operation=operation_id,
                         duration=round(time.time() - start_time, 3))
        return result

    @abstractmethod
    def execute_query(self, query: TQuery) -> TResult:
        """Execute the query - implemented by concrete handlers."""
