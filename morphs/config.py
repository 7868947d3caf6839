# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("MorphsSettings", "settings")


class MorphsSettings(BaseSettings, frozen=True):
    """Engine settings with environment variable support.

    Every field can be overridden with a ``MORPHS_``-prefixed environment
    variable, e.g. ``MORPHS_ENFORCE_MINTING_DEADLINE=true``.
    """

    model_config = SettingsConfigDict(
        env_prefix="MORPHS_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    ENGINE_NAME: str = Field(
        default="morphs", description="Version tag reported by engine.name"
    )

    ENFORCE_MINTING_DEADLINE: bool = Field(
        default=False,
        description="Reject mints at or after the engine minting deadline",
    )

    RENDER_IMAGE: bool = Field(
        default=True, description="Embed the SVG image in token metadata"
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = (
        "INFO"
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None


# Create a singleton instance
settings = MorphsSettings()
# Store the instance in the class variable for singleton pattern
MorphsSettings._instance = settings
