# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import functools
import logging
import threading
import time
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar

import anyio.to_thread

from morphs._errors import (
    CollectionExistsError,
    CollectionNotFoundError,
    MintingClosedError,
    NotAuthorizedError,
)
from morphs.config import MorphsSettings
from morphs.config import settings as default_settings
from morphs.ln import (
    UINT256_MAX,
    check_address,
    check_int,
    coerce_created_at,
    normalize_address,
    synchronized,
)
from morphs.metadata import MetadataDocument, encode_token_uri, render

from .state import CollectionState, EraState, MintRecord

if TYPE_CHECKING:
    from morphs.collection.collection import Collection

__all__ = ("MorphsEngine",)

logger = logging.getLogger(__name__)

CollectionRef = Any
"""A ``Collection`` or the address of one."""


def _check_sender(sender: Any) -> str:
    return check_address("sender", sender)


class MorphsEngine:
    """Mints Morphs into collections and renders their metadata.

    The engine owns one ``CollectionState`` per bound collection, keyed by
    collection address. Collections never share state, and all writes to a
    collection go through that collection's lock.

    Args:
        name: Version tag, defaults to ``settings.ENGINE_NAME``.
        settings: Policy overrides; the module-level settings by default.
        clock: Returns the current time as a Unix timestamp or datetime.
    """

    MINTING_ENDS_AT_TIMESTAMP: ClassVar[int] = 1646114400

    def __init__(
        self,
        name: str | None = None,
        *,
        settings: MorphsSettings | None = None,
        clock: Callable[[], float | datetime] | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.name = name or self.settings.ENGINE_NAME
        self._clock = clock or time.time
        self._states: dict[str, CollectionState] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

    # ------------------------------------------------------------------
    # registry
    # ------------------------------------------------------------------

    @synchronized
    def on_collection_created(self, collection: Collection) -> None:
        """Start tracking era state for a newly created collection.

        Raises:
            NotAuthorizedError: If the collection is bound to another engine.
            CollectionExistsError: If the address is already tracked.
        """
        if collection.engine is not self:
            raise NotAuthorizedError(
                "Collection is bound to a different engine",
                details={"collection": collection.address},
            )
        if collection.address in self._states:
            raise CollectionExistsError(
                details={"collection": collection.address}
            )
        self._states[collection.address] = CollectionState(collection)
        logger.info(f"Engine {self.name} bound to {collection.address}")

    def collections(self) -> list[str]:
        return list(self._states)

    def _state(self, collection: CollectionRef) -> CollectionState:
        try:
            return self._states[normalize_address(collection)]
        except (KeyError, ValueError) as e:
            raise CollectionNotFoundError(
                details={
                    "collection": str(
                        getattr(collection, "address", collection)
                    )
                },
                cause=e,
            ) from e

    # ------------------------------------------------------------------
    # minting
    # ------------------------------------------------------------------

    def now(self) -> datetime:
        return coerce_created_at(self._clock())

    def minting_open(self, now: datetime | float | None = None) -> bool:
        ts = coerce_created_at(now if now is not None else self._clock())
        return ts.timestamp() < self.MINTING_ENDS_AT_TIMESTAMP

    def _check_minting_open(self, now: datetime) -> None:
        if not self.settings.ENFORCE_MINTING_DEADLINE:
            return
        if not self.minting_open(now):
            logger.warning(
                f"Mint rejected at {now.isoformat()}: minting closed"
            )
            raise MintingClosedError(
                details={
                    "now": int(now.timestamp()),
                    "ends_at": self.MINTING_ENDS_AT_TIMESTAMP,
                }
            )

    def _mint(
        self, collection: CollectionRef, count: int, flag: int, sender: Any
    ) -> list[MintRecord]:
        flag = check_int("flag", flag, 0, UINT256_MAX)
        minter = _check_sender(sender)
        state = self._state(collection)
        now = self.now()
        self._check_minting_open(now)

        records = state.mint(
            self, count=count, flag=flag, minter=minter, minted_at=now
        )
        logger.debug(
            f"Minted {records[0].token_id}..{records[-1].token_id} "
            f"into {state.address} (flag={flag}, era={records[0].era.value})"
        )
        return records

    def mint(
        self, collection: CollectionRef, flag: int = 0, *, sender: Any
    ) -> int:
        """Mint one Morph to ``sender`` and return its token id.

        Anyone may mint. The token's era is fixed now and never changes.

        Raises:
            CollectionNotFoundError: If the collection is not bound here.
            MintingClosedError: If the deadline is enforced and has passed.
            ValidationError: If ``flag`` is not an integer in
                ``[0, UINT256_MAX]``.
        """
        return self._mint(collection, 1, flag, sender)[0].token_id

    def batch_mint(
        self,
        collection: CollectionRef,
        count: int,
        *,
        sender: Any,
        flag: int = 0,
    ) -> list[int]:
        """Mint ``count`` Morphs to ``sender`` as a single mint operation.

        All-or-nothing: on any error neither the collection nor the era state
        changes. Every token of the batch shares one ``Group``.
        """
        count = check_int("count", count, 1)
        records = self._mint(collection, count, flag, sender)
        return [r.token_id for r in records]

    # ------------------------------------------------------------------
    # cutover
    # ------------------------------------------------------------------

    def cutover(self, collection: CollectionRef, *, sender: Any) -> int:
        """Close Genesis I for ``collection``; returns the first Genesis II id.

        Raises:
            InvalidCutoverError: If ``sender`` is not the collection owner, or
                if the cutover already happened.
        """
        state = self._state(collection)
        threshold = state.cutover(_check_sender(sender))
        logger.info(
            f"Cutover of {state.address}: "
            f"Genesis II starts at token {threshold}"
        )
        return threshold

    def is_cutover_token(
        self, collection: CollectionRef, token_id: int
    ) -> bool:
        """Whether ``token_id`` was minted in Genesis II.

        Raises:
            TokenNotFoundError: If the token was never minted.
            ValidationError: If ``token_id`` is not a positive integer.
        """
        return self._state(collection).record(token_id).is_cutover

    def era_state(self, collection: CollectionRef) -> EraState:
        return self._state(collection).snapshot()

    # ------------------------------------------------------------------
    # metadata
    # ------------------------------------------------------------------

    def mint_record(
        self, collection: CollectionRef, token_id: int
    ) -> MintRecord:
        return self._state(collection).record(token_id)

    def metadata(
        self, collection: CollectionRef, token_id: int
    ) -> MetadataDocument:
        record = self.mint_record(collection, token_id)
        return render(
            record.token_id,
            record.mint_sequence,
            record.flag,
            record.era,
            include_image=self.settings.RENDER_IMAGE,
        )

    def token_uri(self, collection: CollectionRef, token_id: int) -> str:
        return encode_token_uri(self.metadata(collection, token_id))

    # ------------------------------------------------------------------
    # async
    # ------------------------------------------------------------------

    async def amint(
        self, collection: CollectionRef, flag: int = 0, *, sender: Any
    ) -> int:
        return await anyio.to_thread.run_sync(
            functools.partial(self.mint, collection, flag, sender=sender)
        )

    async def abatch_mint(
        self,
        collection: CollectionRef,
        count: int,
        *,
        sender: Any,
        flag: int = 0,
    ) -> list[int]:
        return await anyio.to_thread.run_sync(
            functools.partial(
                self.batch_mint, collection, count, sender=sender, flag=flag
            )
        )

    async def acutover(self, collection: CollectionRef, *, sender: Any) -> int:
        return await anyio.to_thread.run_sync(
            functools.partial(self.cutover, collection, sender=sender)
        )
