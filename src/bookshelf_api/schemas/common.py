from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialises as camelCase and accepts either camelCase or snake_case input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PartialUpdate(CamelModel):
    """
    Base for PUT bodies where only supplied fields are written.

    Presence is tracked by pydantic's ``model_fields_set``: a field that was
    omitted is left alone, a field sent as ``null`` is cleared. Fields listed
    in ``required_fields`` back NOT NULL columns and cannot be cleared.
    """

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_cleared_required_fields(self) -> Self:
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseModel):
    message: str = Field(examples=["Author successfully created"])
