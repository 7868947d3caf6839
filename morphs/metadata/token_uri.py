# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import base64
import binascii

import orjson

from morphs._errors import ValidationError
from morphs.ln import json_loads

from .types import MetadataDocument

__all__ = ("TOKEN_URI_PREFIX", "encode_token_uri", "metadata_from_token_uri")

TOKEN_URI_PREFIX = "data:application/json;base64,"


def encode_token_uri(document: MetadataDocument) -> str:
    return TOKEN_URI_PREFIX + base64.b64encode(document.to_json()).decode(
        "ascii"
    )


def metadata_from_token_uri(uri: str) -> dict:
    """Decode the JSON document embedded in a ``tokenURI`` response.

    Raises:
        ValidationError: If the URI is not a base64 JSON data URI.
    """
    if not isinstance(uri, str) or not uri.startswith(TOKEN_URI_PREFIX):
        raise ValidationError.from_value(
            uri, expected=TOKEN_URI_PREFIX, message="Unsupported token URI"
        )
    try:
        payload = base64.b64decode(uri[len(TOKEN_URI_PREFIX) :], validate=True)
        data = json_loads(payload)
    except (binascii.Error, orjson.JSONDecodeError) as e:
        raise ValidationError(
            "Malformed token URI payload", cause=e
        ) from e
    if not isinstance(data, dict):
        raise ValidationError.from_value(
            data, expected="dict", message="Token URI must encode an object"
        )
    return data
