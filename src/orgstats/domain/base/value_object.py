"""Base value object - foundation for immutable domain records."""
from typing import Any, ClassVar, Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from orgstats.domain.core.exceptions import ValidationError

T = TypeVar('T', bound='ValueObject')


class ValueObject(BaseModel):
    """Base class for immutable domain values.

    Equality and hashing are derived from field values, so two instances built
    separately from the same data compare equal and collapse to one mapping key.
    Construction failures surface as the domain's own ``ValidationError``
    subclass named by ``validation_error_type``.
    """
    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )

    validation_error_type: ClassVar[Type[ValidationError]] = ValidationError

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
            raise self.validation_error_type(
                f"Invalid {self.__class__.__name__}: {', '.join(fields) or 'unknown field'}",
                details={"fields": fields, "errors": [err["msg"] for err in e.errors()]},
            ) from e

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain snake_case dictionary of the value."""
        return self.model_dump()

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create an instance from a snake_case dictionary."""
        return cls(**data)
