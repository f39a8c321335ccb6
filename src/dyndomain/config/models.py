"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dyndomain.toml only contains
overrides. An absent file is equivalent to an empty one.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from dyndomain.domain.notation import check_separator

# --- dyndomain.toml sections ---


class NotationConfig(BaseModel):
    """[notation] section."""

    model_config = {"frozen": True}

    separator: str = Field(default=";", min_length=1)

    @field_validator("separator")
    @classmethod
    def _parseable(cls, value: str) -> str:
        return check_separator(value)


class EnumerateConfig(BaseModel):
    """[enumerate] section.

    ``default_limit`` caps enumeration of infinite domains when the caller
    gives no limit. ``max_limit`` caps any explicit limit.
    """

    model_config = {"frozen": True}

    default_limit: int = Field(default=100, ge=1)
    max_limit: int = Field(default=10_000, ge=1)

    @model_validator(mode="after")
    def _default_within_max(self) -> EnumerateConfig:
        if self.default_limit > self.max_limit:
            msg = f"default_limit ({self.default_limit}) exceeds max_limit ({self.max_limit})"
            raise ValueError(msg)
        return self


class DomainConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    notation: NotationConfig = Field(default_factory=NotationConfig)
    enumerate: EnumerateConfig = Field(default_factory=EnumerateConfig)
