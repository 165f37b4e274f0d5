"""Array accessors — one delimited environment variable, a list of values.

``ARR=10,3,5`` read with ``get_array_of_ints("ARR", ",")`` gives
``[10, 3, 5]``.  The rules:

- An unset or empty variable gives ``None`` (the absent sequence), not an
  empty list and not an error.
- Splitting is literal and keeps empty tokens, so ``"1,,2"`` has three
  tokens and the middle one fails any numeric parse.
- Parsing is all-or-nothing: the first bad token aborts the call, and the
  error names that token and its index.  Earlier tokens are discarded.

As with scalars, every type has a fallible ``get_array_of_*`` form that
returns ``Parsed`` and a ``must_get_array_of_*`` form that raises.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

import numpy as np

from typed_env.env import read_raw, split_raw
from typed_env.errors import EnvParseError
from typed_env.parsing import parse_bool, parse_float32, parse_float64, parse_int
from typed_env.scalars import Parsed, unwrap

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_array_of_strings(key: str, sep: str) -> list[str] | None:
    """Return *key* split on *sep*, or ``None`` if it is not set.

    Example::

        export STRING_ARR=config,hello,thing,10
        get_array_of_strings("STRING_ARR", ",")  # ['config', 'hello', 'thing', '10']

    """
    raw = read_raw(key)
    if not raw:
        return None
    return split_raw(raw, sep)


def _get_array(
    key: str,
    sep: str,
    parse: Callable[[str], T],
    type_name: str,
) -> Parsed[list[T] | None]:
    tokens = get_array_of_strings(key, sep)
    if tokens is None:
        return Parsed(None)
    values: list[T] = []
    for index, token in enumerate(tokens):
        try:
            values.append(parse(token))
        except ValueError as exc:
            logger.debug("Rejected %s[%d]=%r as %s: %s", key, index, token, type_name, exc)
            error = EnvParseError(key, token, type_name, index=index)
            error.__cause__ = exc
            return Parsed(None, error)
    return Parsed(values)


def get_array_of_bools(key: str, sep: str) -> Parsed[list[bool] | None]:
    """Return *key* as a list of bools, using the scalar bool literals."""
    return _get_array(key, sep, parse_bool, "bool")


def must_get_array_of_bools(key: str, sep: str) -> list[bool] | None:
    """Return *key* as a list of bools, raising ``EnvParseError`` on a bad token."""
    return unwrap(get_array_of_bools(key, sep))


def get_array_of_ints(key: str, sep: str) -> Parsed[list[int] | None]:
    """Return *key* as a list of signed 64-bit ints.

    Example::

        export INT_ARR=100,4,95,103
        get_array_of_ints("INT_ARR", ",")  # Parsed(value=[100, 4, 95, 103], error=None)

    """
    return _get_array(key, sep, parse_int, "int")


def must_get_array_of_ints(key: str, sep: str) -> list[int] | None:
    """Return *key* as a list of ints, raising ``EnvParseError`` on a bad token."""
    return unwrap(get_array_of_ints(key, sep))


def get_array_of_float32s(key: str, sep: str) -> Parsed[list[np.float32] | None]:
    """Return *key* as a list of single-precision floats."""
    return _get_array(key, sep, parse_float32, "float32")


def must_get_array_of_float32s(key: str, sep: str) -> list[np.float32] | None:
    """Return *key* as a list of float32s, raising ``EnvParseError`` on a bad token."""
    return unwrap(get_array_of_float32s(key, sep))


def get_array_of_float64s(key: str, sep: str) -> Parsed[list[float] | None]:
    """Return *key* as a list of double-precision floats.

    Example::

        export FLOAT64_ARR=100.4,4,95.3
        get_array_of_float64s("FLOAT64_ARR", ",")  # Parsed(value=[100.4, 4.0, 95.3], error=None)

    """
    return _get_array(key, sep, parse_float64, "float64")


def must_get_array_of_float64s(key: str, sep: str) -> list[float] | None:
    """Return *key* as a list of floats, raising ``EnvParseError`` on a bad token."""
    return unwrap(get_array_of_float64s(key, sep))
