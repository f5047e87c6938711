"""Codec settings loaded from the environment.

Variables use the ``STRIPE_ENTITIES_`` prefix and may also come from a
``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Process-wide codec configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STRIPE_ENTITIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    strict_enums: bool = Field(
        default=False,
        description=(
            "Raise UnknownEnumValueError for unknown enum wire values even on "
            "fields that declare a fallback member."
        ),
    )
    log_enum_fallbacks: bool = Field(
        default=True,
        description="Emit a DEBUG record whenever a fallback member replaces an unknown value.",
    )


@lru_cache
def get_settings() -> CodecSettings:
    return CodecSettings()
