# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from morphs._errors import (
    NotAuthorizedError,
    TokenNotFoundError,
    ValidationError,
)
from morphs.ln import check_address, check_int

if TYPE_CHECKING:
    from morphs.engine.engine import MorphsEngine

__all__ = ("Collection",)


class Collection:
    """ERC-721-style token bookkeeping bound to one engine.

    Only the bound engine may mint; it does so while holding the
    collection's era-state lock, so this class keeps no lock of its own.
    """

    def __init__(
        self,
        address: str,
        name: str,
        symbol: str,
        engine: MorphsEngine,
        owner: str,
    ) -> None:
        self.address = check_address("collection address", address)
        self.name = name
        self.symbol = symbol
        self.engine = engine
        self.owner = check_address("owner", owner)
        self._owners: dict[int, str] = {}
        self._balances: Counter[str] = Counter()
        self._next_token_id = 1

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(address={self.address!r}, "
            f"name={self.name!r}, symbol={self.symbol!r})"
        )

    def next_token_id(self) -> int:
        return self._next_token_id

    def total_supply(self) -> int:
        return len(self._owners)

    def balance_of(self, owner: Any) -> int:
        return self._balances[check_address("owner", owner)]

    def owner_of(self, token_id: int) -> str:
        token_id = check_int("token_id", token_id, 1)
        try:
            return self._owners[token_id]
        except KeyError as e:
            raise TokenNotFoundError(
                details={"collection": self.address, "token_id": token_id},
                cause=e,
            ) from e

    def token_uri(self, token_id: int) -> str:
        self.owner_of(token_id)
        return self.engine.token_uri(self, token_id)

    def mint_from_engine(
        self, engine: Any, to: Any, token_ids: Sequence[int]
    ) -> None:
        """Assign ``token_ids`` to ``to``.

        Everything is validated before any state changes.

        Raises:
            NotAuthorizedError: If ``engine`` is not the bound engine.
            ValidationError: If the ids are not the next consecutive ids.
        """
        if engine is not self.engine:
            raise NotAuthorizedError(
                "Only the collection's engine can mint",
                details={"collection": self.address},
            )
        to = check_address("recipient", to)
        expected = list(
            range(self._next_token_id, self._next_token_id + len(token_ids))
        )
        if not token_ids or list(token_ids) != expected:
            raise ValidationError.from_value(
                list(token_ids),
                expected=f"consecutive ids from {self._next_token_id}",
                message="Token ids out of sequence",
            )

        for token_id in token_ids:
            self._owners[token_id] = to
        self._balances[to] += len(token_ids)
        self._next_token_id += len(token_ids)

