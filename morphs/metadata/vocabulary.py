# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Word lists and palettes used to derive Morph names and artwork.

Order matters: indices are chosen by seeded hashes, so reordering or
inserting entries changes the metadata of already minted tokens.
"""

from dataclasses import dataclass

from morphs.ln import seeded_choice

__all__ = (
    "ADJECTIVES",
    "NOUNS",
    "PALETTES",
    "Palette",
    "name_suffix",
    "palette_for",
)


@dataclass(slots=True, frozen=True)
class Palette:
    name: str
    background: str
    paper: str
    ink: str


PALETTES: tuple[Palette, ...] = (
    Palette("Greyskull", "#1c1c1e", "#d8d5cf", "#5b5a57"),
    Palette("Dream", "#2b1d3f", "#f3d9f7", "#9a6fc4"),
    Palette("Ember", "#2a0f08", "#f6d2a8", "#d4491c"),
    Palette("Tidal", "#061a2b", "#cde8f2", "#1f7fa8"),
    Palette("Verdant", "#0f2414", "#dcefcf", "#3f8f3a"),
    Palette("Dusk", "#241a2e", "#f2ddc7", "#c0627a"),
    Palette("Aurora", "#0b1f24", "#e3fbef", "#2fc7a0"),
    Palette("Obsidian", "#050505", "#bdbdbd", "#262626"),
    Palette("Solar", "#2e2100", "#fff2c2", "#e0a100"),
    Palette("Frost", "#101826", "#f0f6ff", "#8fb4e8"),
    Palette("Nebula", "#120a26", "#e9defc", "#6c3fd1"),
    Palette("Rust", "#1f130d", "#ecd6c4", "#9a4b27"),
)

ADJECTIVES: tuple[str, ...] = (
    "Whispering",
    "Forgotten",
    "Shifting",
    "Hollow",
    "Radiant",
    "Silent",
    "Wandering",
    "Broken",
    "Endless",
    "Gilded",
    "Crooked",
    "Sleeping",
    "Burning",
    "Veiled",
    "Distant",
    "Ancient",
)

NOUNS: tuple[str, ...] = (
    "Tides",
    "Embers",
    "Gardens",
    "Echoes",
    "Mirrors",
    "Lanterns",
    "Rivers",
    "Thresholds",
    "Storms",
    "Spires",
    "Dunes",
    "Orchards",
    "Shadows",
    "Harbors",
    "Ruins",
    "Stars",
)


def palette_for(token_id: int) -> Palette:
    return seeded_choice(PALETTES, "palette", token_id)


def name_suffix(token_id: int) -> str:
    adjective = seeded_choice(ADJECTIVES, "adjective", token_id)
    noun = seeded_choice(NOUNS, "noun", token_id)
    return f"{adjective} {noun}"
