"""Immutable pydantic base for values and entities."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Frozen model compared field by field.

    Derive a changed copy with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)
