# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "MorphsError",
    "ValidationError",
    "NotFoundError",
    "CollectionNotFoundError",
    "TokenNotFoundError",
    "ImplementationNotFoundError",
    "ExistsError",
    "CollectionExistsError",
    "ImplementationExistsError",
    "NotAuthorizedError",
    "InvalidCutoverError",
    "MintingClosedError",
)


class MorphsError(Exception):
    default_message: ClassVar[str] = "Morphs error"
    status_code: ClassVar[int] = 500

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}
        self.status_code = status_code or self.status_code

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        cause: Exception | None = None,
        **extra: Any,
    ):
        """Create an error describing an offending value."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details, cause=cause)


class ValidationError(MorphsError):
    """Exception raised when an input is outside its domain."""

    default_message = "Validation failed"
    status_code = 422


class NotFoundError(MorphsError):
    default_message = "Item not found"
    status_code = 404


class CollectionNotFoundError(NotFoundError):
    default_message = "Collection not found"


class TokenNotFoundError(NotFoundError):
    default_message = "Token not found"


class ImplementationNotFoundError(NotFoundError):
    default_message = "Implementation not registered"


class ExistsError(MorphsError):
    default_message = "Item already exists"
    status_code = 409


class CollectionExistsError(ExistsError):
    default_message = "Collection already registered"


class ImplementationExistsError(ExistsError):
    default_message = "Implementation already registered"


class NotAuthorizedError(MorphsError):
    default_message = "Caller is not authorized"
    status_code = 403


class InvalidCutoverError(MorphsError):
    """Cutover attempted by a non-owner, or after it already happened."""

    default_message = "InvalidCutover"
    status_code = 403


class MintingClosedError(MorphsError):
    """Minting attempted at or after the minting deadline."""

    default_message = "MintingClosed"
    status_code = 410
