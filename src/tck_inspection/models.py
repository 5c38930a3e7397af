"""Base Pydantic models for inspection data.

This module defines the foundational model classes used by scenarios,
steps, value records and markup nodes. All of them are immutable and
strictly validated, so a rendered tree is a pure function of its input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaModel(BaseModel):
    """Base immutable model for all inspection data.

    Design principles enforced by this model:
        - Immutability: scenarios and markup cannot be modified after
          creation. Renderers only read their input.
        - Strict schema validation: unknown or extra fields are rejected
          to surface malformed fixtures instead of silently dropping data.

    All data and markup models must inherit from this class.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra='forbid',
    )


class SettingsModel(BaseSettings):
    """Base immutable model for runtime settings.

    Design principles enforced by this model:
        - Immutability: resolved settings cannot be modified after creation.
        - Tolerant schema handling: unknown or extra fields are ignored,
          so unrelated environment variables never break configuration.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra='ignore',
    )
