"""Raw environment access — the one primitive every accessor builds on.

Every process carries an environment: a block of ``KEY=VALUE`` string
pairs inherited from its parent.  Python exposes it as ``os.environ``.

Key properties this module relies on:
    - **Strings only** — values have no type until something parses them.
    - **Unset equals empty** — at this layer a missing key and a key set
      to ``""`` both read back as ``""``.  Typed accessors map that to a
      zero value instead of an error.
    - **Read-only** — nothing here ever writes to the environment.
"""

import os


def read_raw(key: str) -> str:
    """Return the raw value of *key*, or ``""`` if it is not set."""
    return os.environ.get(key, "")


def split_raw(raw: str, sep: str) -> list[str]:
    """Split *raw* on every occurrence of *sep*.

    Follows ``str.split`` for a non-empty separator: the whole string is
    the only element when *sep* never occurs, and adjacent separators
    produce empty tokens.  An empty separator splits into individual
    characters.

    Args:
        raw: The string to split.
        sep: Literal separator (not a regular expression).

    Returns:
        The tokens in their original order.

    """
    if not sep:
        return list(raw)
    return raw.split(sep)
