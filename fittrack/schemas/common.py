"""Shared schema pieces: date keys and partial-update semantics."""

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, Field, model_validator

from fittrack.core.constants import DATE_PATTERN

DateKey = Annotated[str, Field(pattern=DATE_PATTERN, description="Date as YYYY-MM-DD")]


class PartialUpdate(BaseModel):
    """PATCH body where a missing field and an explicit null mean different things.

    Missing: leave the stored value alone. Null: clear it, which is only allowed
    for optional columns; subclasses list the columns that may not be cleared.
    """

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_cleared_required(self):
        cleared = [
            name
            for name in self.required_fields
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if cleared:
            raise ValueError(f"Field(s) cannot be cleared: {', '.join(cleared)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Only the fields the caller actually sent, nulls included."""
        return self.model_dump(include=self.model_fields_set)
