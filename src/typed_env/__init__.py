"""Typed environment variables — read ``os.environ`` as bools, ints and floats.

Re-exports public symbols so callers can write::

    from typed_env import get_int, must_get_array_of_float64s
"""

import logging

from typed_env.arrays import (
    get_array_of_bools,
    get_array_of_float32s,
    get_array_of_float64s,
    get_array_of_ints,
    get_array_of_strings,
    must_get_array_of_bools,
    must_get_array_of_float32s,
    must_get_array_of_float64s,
    must_get_array_of_ints,
)
from typed_env.env import read_raw, split_raw
from typed_env.errors import EnvParseError
from typed_env.scalars import (
    Parsed,
    get_bool,
    get_float32,
    get_float64,
    get_int,
    get_string,
    must_get_bool,
    must_get_float32,
    must_get_float64,
    must_get_int,
    unwrap,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EnvParseError",
    "Parsed",
    "get_array_of_bools",
    "get_array_of_float32s",
    "get_array_of_float64s",
    "get_array_of_ints",
    "get_array_of_strings",
    "get_bool",
    "get_float32",
    "get_float64",
    "get_int",
    "get_string",
    "must_get_array_of_bools",
    "must_get_array_of_float32s",
    "must_get_array_of_float64s",
    "must_get_array_of_ints",
    "must_get_bool",
    "must_get_float32",
    "must_get_float64",
    "must_get_int",
    "read_raw",
    "split_raw",
    "unwrap",
]
