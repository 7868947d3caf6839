# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from morphs._errors import ValidationError
from morphs.ln import UINT256_MAX, check_int

from .image import render_svg, svg_data_uri
from .tiers import tier_for_flag
from .types import Attribute, Era, MetadataDocument
from .vocabulary import name_suffix, palette_for

__all__ = ("render",)


def _coerce_era(era: Era | str) -> Era:
    try:
        return Era(era)
    except ValueError as e:
        raise ValidationError.from_value(
            era,
            expected=" | ".join(x.value for x in Era),
            message="Unknown era",
            cause=e,
        ) from e


def render(
    token_id: int,
    mint_sequence: int,
    flag: int,
    era: Era | str,
    *,
    include_image: bool = True,
) -> MetadataDocument:
    """Derive the metadata of a Morph.

    The result depends only on the arguments, so rendering the same token
    twice yields byte-identical JSON.

    Args:
        token_id: Sequential id of the token within its collection (>= 1).
        mint_sequence: 1-based ordinal of the mint operation that created
            the token. Surfaces as the ``Group`` attribute.
        flag: Tier selector supplied at mint time, in ``[0, UINT256_MAX]``.
        era: Era the token was minted in.
        include_image: Embed the SVG artwork as a data URI.

    Raises:
        ValidationError: If an argument is outside its domain.
    """
    token_id = check_int("token_id", token_id, 1, UINT256_MAX)
    mint_sequence = check_int("mint_sequence", mint_sequence, 1, UINT256_MAX)
    flag = check_int("flag", flag, 0, UINT256_MAX)
    era = _coerce_era(era)

    tier = tier_for_flag(flag)
    palette = palette_for(token_id)

    name = f"Morph #{token_id}: {tier.name_prefix} {name_suffix(token_id)}"
    description = (
        f"{tier.describe(flag)} This Morph was minted in the {era.value} era."
    )
    attributes = (
        Attribute(trait_type="Affinity", value=tier.affinity.value),
        Attribute(trait_type="Palette", value=palette.name),
        Attribute(
            trait_type="Signature", value=str(flag) if flag != 0 else "None"
        ),
        Attribute(trait_type="Group", value=f"Group {mint_sequence - 1}"),
        Attribute(trait_type="Era", value=era.value),
    )
    image = (
        svg_data_uri(render_svg(token_id, tier, palette))
        if include_image
        else None
    )
    return MetadataDocument(
        name=name,
        description=description,
        image=image,
        attributes=attributes,
    )
