"""Base model for objects that leave the package as JSON."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Serializes to camelCase with `model_dump(by_alias=True)`.

    Python callers keep using snake_case attribute and constructor names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
