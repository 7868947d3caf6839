# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from morphs.ln import json_dumpb

__all__ = (
    "Affinity",
    "Attribute",
    "Era",
    "MetadataDocument",
)


class Era(str, Enum):
    """Generation a Morph was minted in.

    Attributes:
        GENESIS_I: Minted before the collection's cutover.
        GENESIS_II: Minted at or after the cutover threshold.
    """

    GENESIS_I = "Genesis I"
    GENESIS_II = "Genesis II"


class Affinity(str, Enum):
    CITIZEN = "Citizen"
    MYTHICAL = "Mythical"
    COSMIC = "Cosmic"
    CELESTIAL = "Celestial"


class Attribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    trait_type: str
    value: str


class MetadataDocument(BaseModel):
    """Token metadata in the ERC-721 metadata JSON shape."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    """Display name, ``Morph #{token_id}: ...``."""

    description: str

    image: str | None = None
    """SVG data URI, omitted from output when rendering images is off."""

    attributes: tuple[Attribute, ...] = Field(default_factory=tuple)
    """Ordered traits: Affinity, Palette, Signature, Group, Era."""

    def attribute(self, trait_type: str) -> str | None:
        """Return the value of ``trait_type``, or None when absent."""
        for attr in self.attributes:
            if attr.trait_type == trait_type:
                return attr.value
        return None

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> bytes:
        return json_dumpb(self.to_dict())
