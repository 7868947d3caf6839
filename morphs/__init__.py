# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import TYPE_CHECKING

from ._errors import InvalidCutoverError, MintingClosedError, MorphsError
from .config import settings
from .version import __version__

if TYPE_CHECKING:
    from .collection import Collection, CollectionCreated, Factory
    from .engine import EraState, MintRecord, MorphsEngine
    from .metadata import (
        Era,
        MetadataDocument,
        metadata_from_token_uri,
        render,
    )

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)

_lazy_imports = {}


def _get_obj(name: str, module: str):
    global _lazy_imports
    from importlib import import_module

    obj_ = getattr(import_module(f"morphs.{module}"), name)

    _lazy_imports[name] = obj_
    return obj_


def __getattr__(name: str):
    global _lazy_imports
    if name in _lazy_imports:
        return _lazy_imports[name]

    match name:
        case "MorphsEngine" | "EraState" | "MintRecord":
            return _get_obj(name, "engine")
        case "Collection" | "CollectionCreated" | "Factory":
            return _get_obj(name, "collection")
        case "Era" | "MetadataDocument" | "metadata_from_token_uri" | "render":
            return _get_obj(name, "metadata")
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = (
    "__version__",
    "Collection",
    "CollectionCreated",
    "Era",
    "EraState",
    "Factory",
    "InvalidCutoverError",
    "MetadataDocument",
    "MintRecord",
    "MintingClosedError",
    "MorphsEngine",
    "MorphsError",
    "logger",
    "metadata_from_token_uri",
    "render",
    "settings",
)
