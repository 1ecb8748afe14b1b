"""Shared pydantic base for every engine schema.

Python code uses snake_case; JSON payloads keep the camelCase field names
the campaign and catalog stores emit.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable schema accepting both camelCase aliases and field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
