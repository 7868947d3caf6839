from typing import Any

import orjson
from pydantic import BaseModel

__all__ = ("json_dumpb", "json_loads")


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def json_dumpb(obj: Any, *, sort_keys: bool = False) -> bytes:
    """Serialize ``obj`` to JSON bytes with orjson.

    Key order is preserved unless ``sort_keys`` is set, so equal inputs always
    give byte-identical output.
    """
    option = orjson.OPT_NON_STR_KEYS
    if sort_keys:
        option |= orjson.OPT_SORT_KEYS
    return orjson.dumps(obj, default=_default, option=option)


def json_loads(data: str | bytes) -> Any:
    """Parse JSON with orjson.

    Raises:
        orjson.JSONDecodeError: If ``data`` is not valid JSON.
    """
    return orjson.loads(data)
