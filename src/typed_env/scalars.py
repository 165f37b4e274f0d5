"""Scalar accessors — one environment variable, one typed value.

Each type comes as a pair of operations:

- ``get_<type>(key)`` is **fallible**: it returns a ``Parsed`` pair of
  ``(value, error)``.  A missing or empty variable gives the zero value
  and no error; a malformed one gives the zero value and an
  ``EnvParseError``.
- ``must_get_<type>(key)`` is **fatal**: it returns the bare value, or
  raises the ``EnvParseError`` the fallible form produced.  Use it at
  startup, where a misconfigured variable should stop the program.

Strings have no parse step, so ``get_string`` is the only accessor
without a pair.
"""

import logging
from collections.abc import Callable
from typing import Generic, NamedTuple, TypeVar

import numpy as np

from typed_env.env import read_raw
from typed_env.errors import EnvParseError
from typed_env.parsing import parse_bool, parse_float32, parse_float64, parse_int

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Parsed(NamedTuple, Generic[T]):
    """Result of a fallible accessor.

    Unpacks like a plain pair: ``value, err = get_int("PORT")``.

    Attributes:
        value: The parsed value, or the zero value when absent or invalid.
        error: ``None`` on success, otherwise what went wrong.

    """

    value: T
    error: EnvParseError | None = None


def _get(key: str, parse: Callable[[str], T], zero: T, type_name: str) -> Parsed[T]:
    """Read *key* and parse it, mapping empty to *zero*."""
    raw = read_raw(key)
    if not raw:
        return Parsed(zero)
    try:
        return Parsed(parse(raw))
    except ValueError as exc:
        logger.debug("Rejected %s=%r as %s: %s", key, raw, type_name, exc)
        error = EnvParseError(key, raw, type_name)
        error.__cause__ = exc
        return Parsed(zero, error)


def unwrap(result: Parsed[T]) -> T:
    """Return the value of *result*, raising its error if it has one.

    This is the bridge from every fallible accessor to its ``must_*``
    twin.

    Raises:
        EnvParseError: If *result* carries an error.

    """
    if result.error is not None:
        logger.error("%s", result.error)
        raise result.error
    return result.value


def get_string(key: str) -> str:
    """Return the value of *key*, or ``""`` if it is not set."""
    return read_raw(key)


def get_bool(key: str) -> Parsed[bool]:
    """Return *key* as a bool; unset or empty gives ``False``.

    Accepts ``1, t, T, TRUE, true, True, 0, f, F, FALSE, false, False``.
    """
    return _get(key, parse_bool, False, "bool")


def must_get_bool(key: str) -> bool:
    """Return *key* as a bool, raising ``EnvParseError`` if malformed."""
    return unwrap(get_bool(key))


def get_int(key: str) -> Parsed[int]:
    """Return *key* as a signed 64-bit int; unset or empty gives ``0``."""
    return _get(key, parse_int, 0, "int")


def must_get_int(key: str) -> int:
    """Return *key* as an int, raising ``EnvParseError`` if malformed."""
    return unwrap(get_int(key))


def get_float32(key: str) -> Parsed[np.float32]:
    """Return *key* as a single-precision float; unset or empty gives ``0.0``."""
    return _get(key, parse_float32, np.float32(0.0), "float32")


def must_get_float32(key: str) -> np.float32:
    """Return *key* as a float32, raising ``EnvParseError`` if malformed."""
    return unwrap(get_float32(key))


def get_float64(key: str) -> Parsed[float]:
    """Return *key* as a double-precision float; unset or empty gives ``0.0``."""
    return _get(key, parse_float64, 0.0, "float64")


def must_get_float64(key: str) -> float:
    """Return *key* as a float, raising ``EnvParseError`` if malformed."""
    return unwrap(get_float64(key))
