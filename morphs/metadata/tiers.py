# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass

from .types import Affinity

__all__ = ("Tier", "TIERS", "tier_for_flag")


@dataclass(slots=True, frozen=True)
class Tier:
    name: str
    name_prefix: str
    affinity: Affinity
    description: str
    """Tier sentence; ``{flag}`` is substituted for the celestial tier."""

    def describe(self, flag: int) -> str:
        return self.description.format(flag=flag)


BASE = Tier(
    name="base",
    name_prefix="Scroll of",
    affinity=Affinity.CITIZEN,
    description=(
        "A sealed scroll, passed from hand to hand. "
        "What secrets might it hold?"
    ),
)
MYTHICAL = Tier(
    name="mythical",
    name_prefix="Mythical Scroll of",
    affinity=Affinity.MYTHICAL,
    description="A scroll that hums with mythical energy.",
)
COSMIC = Tier(
    name="cosmic",
    name_prefix="Cosmic Scroll of",
    affinity=Affinity.COSMIC,
    description="A scroll that crackles with cosmic energy.",
)
CELESTIAL = Tier(
    name="celestial",
    name_prefix="Celestial Scroll of",
    affinity=Affinity.CELESTIAL,
    description=(
        "A scroll radiating celestial energy. "
        "Eternal celestial signature: {flag}."
    ),
)

TIERS: tuple[Tier, ...] = (BASE, MYTHICAL, COSMIC, CELESTIAL)


def tier_for_flag(flag: int) -> Tier:
    """Map a mint flag to its tier. Flags of 3 and above are celestial."""
    if flag >= 3:
        return CELESTIAL
    return TIERS[flag]
