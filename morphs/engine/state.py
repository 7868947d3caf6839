# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from morphs._errors import InvalidCutoverError, TokenNotFoundError
from morphs.ln import UINT256_MAX, check_int, normalize_address, synchronized
from morphs.metadata import Era

if TYPE_CHECKING:
    from morphs.collection.collection import Collection

__all__ = ("CollectionState", "EraState", "MintRecord")

logger = logging.getLogger(__name__)


class MintRecord(BaseModel):
    """Immutable identity of a minted Morph, captured at mint time."""

    model_config = ConfigDict(frozen=True)

    collection: str
    token_id: int = Field(ge=1)
    mint_sequence: int = Field(ge=1)
    """1-based ordinal of the mint operation that produced the token."""

    flag: int = Field(ge=0, le=UINT256_MAX)
    era: Era
    minter: str
    minted_at: datetime

    @property
    def is_cutover(self) -> bool:
        return self.era is Era.GENESIS_II


class EraState(BaseModel):
    """Point-in-time snapshot of a collection's era state."""

    model_config = ConfigDict(frozen=True)

    collection: str
    minted_count: int = 0
    mint_calls: int = 0
    cutover_done: bool = False
    cutover_threshold_token_id: int | None = None

    @property
    def phase(self) -> Literal["PreCutover", "PostCutover"]:
        return "PostCutover" if self.cutover_done else "PreCutover"


class CollectionState:
    """Mutable era state of one collection.

    Every mutation runs under ``self._lock`` so token ids stay gap-free and
    the cutover flag flips at most once, whatever thread the call comes from.
    """

    def __init__(self, collection: Collection) -> None:
        self.collection = collection
        self.minted_count = 0
        self.mint_calls = 0
        self.cutover_done = False
        self.cutover_threshold_token_id: int | None = None
        self._records: dict[int, MintRecord] = {}
        self._lock = threading.Lock()

    @property
    def address(self) -> str:
        return self.collection.address

    def era_for(self, token_id: int) -> Era:
        threshold = self.cutover_threshold_token_id
        if threshold is not None and token_id >= threshold:
            return Era.GENESIS_II
        return Era.GENESIS_I

    @synchronized
    def mint(
        self,
        engine: object,
        *,
        count: int,
        flag: int,
        minter: str,
        minted_at: datetime,
    ) -> list[MintRecord]:
        """Mint ``count`` tokens to ``minter`` as a single mint operation.

        Records are built and the collection updated before any of this
        state changes; if the collection rejects the mint nothing is kept.
        """
        first = self.minted_count + 1
        sequence = self.mint_calls + 1
        records = [
            MintRecord(
                collection=self.address,
                token_id=token_id,
                mint_sequence=sequence,
                flag=flag,
                era=self.era_for(token_id),
                minter=minter,
                minted_at=minted_at,
            )
            for token_id in range(first, first + count)
        ]
        self.collection.mint_from_engine(
            engine, minter, [r.token_id for r in records]
        )

        self._records.update((r.token_id, r) for r in records)
        self.minted_count += count
        self.mint_calls += 1
        return records

    @synchronized
    def cutover(self, sender: str) -> int:
        """Close Genesis I. Returns the first Genesis II token id.

        Raises:
            InvalidCutoverError: If ``sender`` is not the collection owner or
                the cutover already happened.
        """
        sender = normalize_address(sender)
        if sender != self.collection.owner:
            logger.warning(
                f"Rejected cutover of {self.address} by non-owner {sender}"
            )
            raise InvalidCutoverError(
                details={
                    "collection": self.address,
                    "sender": sender,
                    "reason": "caller is not the collection owner",
                }
            )
        if self.cutover_done:
            logger.warning(f"Rejected repeated cutover of {self.address}")
            raise InvalidCutoverError(
                details={
                    "collection": self.address,
                    "sender": sender,
                    "reason": "cutover already performed",
                }
            )

        self.cutover_threshold_token_id = self.minted_count + 1
        self.cutover_done = True
        return self.cutover_threshold_token_id

    @synchronized
    def record(self, token_id: int) -> MintRecord:
        token_id = check_int("token_id", token_id, 1)
        try:
            return self._records[token_id]
        except KeyError as e:
            raise TokenNotFoundError(
                details={"collection": self.address, "token_id": token_id},
                cause=e,
            ) from e

    @synchronized
    def snapshot(self) -> EraState:
        return EraState(
            collection=self.address,
            minted_count=self.minted_count,
            mint_calls=self.mint_calls,
            cutover_done=self.cutover_done,
            cutover_threshold_token_id=self.cutover_threshold_token_id,
        )
