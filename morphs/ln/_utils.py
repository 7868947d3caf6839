import hashlib
from collections.abc import Callable
from datetime import datetime, timezone
from functools import wraps
from typing import Any, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

__all__ = (
    "coerce_created_at",
    "make_address",
    "normalize_address",
    "now_utc",
    "synchronized",
)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def coerce_created_at(v: Any) -> datetime:
    """Coerce value to UTC-aware datetime.

    Supports datetime or Unix timestamp (int/float).

    Raises:
        ValueError: If value cannot be converted.
    """
    if isinstance(v, datetime):
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v

    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return datetime.fromtimestamp(v, tz=timezone.utc)

    raise ValueError(
        f"Expected datetime or timestamp, got {type(v).__name__}"
    )


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------


def make_address(*parts: Any) -> str:
    """Derive a stable 20-byte hex address from ``parts``."""
    seed = ":".join(str(p) for p in parts).encode("utf-8")
    return "0x" + hashlib.sha256(seed).hexdigest()[:40]


def normalize_address(value: Any) -> str:
    """Lower-case a ``0x``-prefixed address, or the ``.address`` of an object.

    Raises:
        ValueError: If the value is not a 20-byte hex address.
    """
    if not isinstance(value, str) and hasattr(value, "address"):
        value = value.address
    if not isinstance(value, str):
        raise ValueError(
            f"Expected address string, got {type(value).__name__}"
        )

    addr = value.lower()
    if len(addr) != 42 or not addr.startswith("0x"):
        raise ValueError(f"Invalid address: {value}")
    try:
        int(addr[2:], 16)
    except ValueError as e:
        raise ValueError(f"Invalid address: {value}") from e
    return addr


# ---------------------------------------------------------------------------
# Synchronization decorators
# ---------------------------------------------------------------------------


def synchronized(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator for thread-safe method execution.

    Requires decorated method's instance to have ``self._lock``
    (``threading.Lock``).
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        self = args[0]
        with self._lock:
            return func(*args, **kwargs)

    return wrapper
