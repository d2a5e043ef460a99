"""Shared base for API models."""

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """
    Base for models parsed from API responses.

    Unknown fields are kept as extra attributes so that new server fields
    are not lost, and numeric IDs are accepted where strings are expected.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)
