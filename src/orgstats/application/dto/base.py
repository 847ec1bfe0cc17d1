"""Base DTO class with stable API and clean snake_case format."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all DTOs with stable API and clean snake_case format.

    Provides ``to_dict()``/``from_dict()`` so callers never depend on the
    underlying serialization framework.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """
        Stable public API - returns clean snake_case dictionary.

        Returns:
            Dict with snake_case keys
        """
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        """
        Stable public API - creates instance from snake_case dictionary.

        Args:
            data: Dictionary with snake_case keys

        Returns:
            New instance of the DTO
        """
        return cls.model_validate(data)


# CQRS Base Classes

class BaseQuery(BaseDTO):
    """Base class for query DTOs."""
    query_id: Optional[str] = None
    correlation_id: Optional[str] = None


class BaseResponse(BaseDTO):
    """Base class for response DTOs."""
    success: bool = True
    message: Optional[str] = None
    metadata: Dict[str, Any] = {}
