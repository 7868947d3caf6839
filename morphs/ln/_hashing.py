# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import hashlib
from collections.abc import Sequence
from typing import Any, TypeVar

import orjson

__all__ = ("sha256_of_dict", "seed_int", "seeded_choice")

T = TypeVar("T")


def sha256_of_dict(obj: dict) -> str:
    """Deterministic SHA-256 of an arbitrary mapping."""

    payload: bytes = orjson.dumps(
        obj,
        option=(orjson.OPT_SORT_KEYS | orjson.OPT_NON_STR_KEYS),
    )
    return hashlib.sha256(memoryview(payload)).hexdigest()


def seed_int(namespace: str, *parts: Any) -> int:
    """Stable 256-bit integer seed for ``namespace`` and ``parts``.

    Integers are hashed by their decimal string so arbitrarily large values
    stay exact.
    """
    return int(
        sha256_of_dict(
            {"ns": namespace, "parts": [str(p) for p in parts]}
        ),
        16,
    )


def seeded_choice(options: Sequence[T], namespace: str, *parts: Any) -> T:
    """Pick one of ``options`` reproducibly from the seed of ``parts``."""
    if not options:
        raise ValueError("Cannot choose from an empty sequence")
    return options[seed_int(namespace, *parts) % len(options)]
