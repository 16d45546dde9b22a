"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are immutable. Fields are snake_case in Python and camelCase on
    the wire (``model_dump(by_alias=True)``); both spellings are accepted on
    input.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
