# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for the geometric value types.

    Instances are frozen after creation, so a value can be passed anywhere
    without being aliased. Modified copies are made with with_changes().
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Field values to replace

        Returns:
            New validated instance; the original is untouched

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = dict(self)

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        return cast(T, self.__class__.model_validate(current_data))
