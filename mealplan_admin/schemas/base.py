"""Base schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        alias_generator=to_camel,  # camelCase on the wire, snake_case in Python
        populate_by_name=True,
        validate_assignment=True,
    )
