# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from morphs._errors import (
    CollectionNotFoundError,
    ImplementationExistsError,
    ImplementationNotFoundError,
    ValidationError,
)
from morphs.ln import make_address, normalize_address, now_utc, synchronized

from .collection import Collection

if TYPE_CHECKING:
    from morphs.engine.engine import MorphsEngine

__all__ = ("CollectionCreated", "Factory")

logger = logging.getLogger(__name__)


class CollectionCreated(BaseModel):
    """Event recorded for every collection a factory creates."""

    model_config = ConfigDict(frozen=True)

    collection: str
    name: str
    symbol: str
    implementation: str
    engine: str
    owner: str
    created_at: datetime = Field(default_factory=now_utc)


class Factory:
    """Registry of collection implementations and the collections built
    from them."""

    def __init__(self, address: str | None = None) -> None:
        self.address = normalize_address(
            address or make_address("factory", uuid4())
        )
        self.events: list[CollectionCreated] = []
        self._implementations: dict[str, type[Collection]] = {}
        self._collections: dict[str, Collection] = {}
        self._nonce = 0
        self._lock = threading.Lock()

    @synchronized
    def register_implementation(
        self, name: str, implementation: type[Collection] | Collection
    ) -> None:
        """Register a collection implementation under ``name``.

        ``implementation`` may be a ``Collection`` subclass or an instance of
        one, in which case its class is used.

        Raises:
            ImplementationExistsError: If ``name`` is already registered.
            ValidationError: If ``implementation`` is not a Collection type.
        """
        if isinstance(implementation, Collection):
            implementation = type(implementation)
        if not (
            isinstance(implementation, type)
            and issubclass(implementation, Collection)
        ):
            raise ValidationError.from_value(
                implementation,
                expected="Collection subclass",
                message="Invalid collection implementation",
            )
        if name in self._implementations:
            raise ImplementationExistsError(details={"name": name})
        self._implementations[name] = implementation

    def implementations(self) -> list[str]:
        return sorted(self._implementations)

    @synchronized
    def create_collection(
        self,
        name: str,
        symbol: str,
        implementation: str,
        engine: MorphsEngine,
        owner: Any,
    ) -> str:
        """Create a collection bound to ``engine`` and return its address.

        Raises:
            ImplementationNotFoundError: If ``implementation`` is unknown.
            ValidationError: If ``owner`` is not an address.
        """
        try:
            impl = self._implementations[implementation]
        except KeyError as e:
            raise ImplementationNotFoundError(
                details={"name": implementation}, cause=e
            ) from e

        address = make_address("collection", self.address, self._nonce)
        collection = impl(address, name, symbol, engine, owner)
        engine.on_collection_created(collection)

        self._nonce += 1
        self._collections[collection.address] = collection
        event = CollectionCreated(
            collection=collection.address,
            name=name,
            symbol=symbol,
            implementation=implementation,
            engine=engine.name,
            owner=collection.owner,
        )
        self.events.append(event)
        logger.info(
            f"Created collection {name} ({symbol}) at {collection.address}"
        )
        return collection.address

    def collection(self, address: Any) -> Collection:
        """Attach to a collection created by this factory."""
        try:
            return self._collections[normalize_address(address)]
        except (KeyError, ValueError) as e:
            raise CollectionNotFoundError(
                details={"address": str(address)}, cause=e
            ) from e

    def collections(self) -> list[Collection]:
        return list(self._collections.values())
