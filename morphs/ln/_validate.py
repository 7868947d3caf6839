from typing import Any

from morphs._errors import ValidationError

from ._utils import normalize_address

__all__ = ("UINT256_MAX", "check_address", "check_int")

UINT256_MAX = 2**256 - 1


def check_int(
    name: str, value: Any, minimum: int, maximum: int | None = None
) -> int:
    """Return ``value`` if it is an int within ``[minimum, maximum]``.

    Booleans are rejected even though they subclass int.

    Raises:
        ValidationError: If the value is not an int or is out of range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError.from_value(
            value, expected="int", message=f"{name} must be an integer"
        )
    if value < minimum:
        raise ValidationError.from_value(
            value,
            expected=f">= {minimum}",
            message=f"{name} must be >= {minimum}",
        )
    if maximum is not None and value > maximum:
        # value omitted, it may exceed the int-to-str digit limit
        raise ValidationError(
            f"{name} must be <= {maximum}",
            details={"type": "int", "expected": f"<= {maximum}"},
        )
    return value


def check_address(name: str, value: Any) -> str:
    """Normalize ``value`` as an address.

    Raises:
        ValidationError: If the value is not a 20-byte hex address.
    """
    try:
        return normalize_address(value)
    except ValueError as e:
        raise ValidationError.from_value(
            value, expected="address", message=f"Invalid {name}", cause=e
        ) from e
