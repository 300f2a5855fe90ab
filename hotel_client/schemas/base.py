"""
Base schema class with the common Pydantic configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema"]


class BaseSchema(BaseModel):
    """
    Base schema for the values returned by the services.

    Column values arrive from the executor as text; fields coerce them to
    their declared types.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=False,
        str_strip_whitespace=True,
        frozen=True,
    )
