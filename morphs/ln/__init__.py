from ._hashing import seed_int, seeded_choice, sha256_of_dict
from ._json_dump import json_dumpb, json_loads
from ._utils import (
    coerce_created_at,
    make_address,
    normalize_address,
    now_utc,
    synchronized,
)
from ._validate import UINT256_MAX, check_address, check_int

__all__ = (
    "UINT256_MAX",
    "check_address",
    "check_int",
    "coerce_created_at",
    "json_dumpb",
    "json_loads",
    "make_address",
    "normalize_address",
    "now_utc",
    "seed_int",
    "seeded_choice",
    "sha256_of_dict",
    "synchronized",
)
