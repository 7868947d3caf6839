from .renderer import render
from .tiers import TIERS, Tier, tier_for_flag
from .token_uri import (
    TOKEN_URI_PREFIX,
    encode_token_uri,
    metadata_from_token_uri,
)
from .types import Affinity, Attribute, Era, MetadataDocument
from .vocabulary import PALETTES, Palette, name_suffix, palette_for

__all__ = (
    "Affinity",
    "Attribute",
    "Era",
    "MetadataDocument",
    "PALETTES",
    "Palette",
    "TIERS",
    "TOKEN_URI_PREFIX",
    "Tier",
    "encode_token_uri",
    "metadata_from_token_uri",
    "name_suffix",
    "palette_for",
    "render",
    "tier_for_flag",
)
