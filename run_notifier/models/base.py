"""Shared pydantic base for configuration and notification responses."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model, filled by field name or by its JSON alias.

    Aliases carry the camelCase keys printed by notification tools.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
