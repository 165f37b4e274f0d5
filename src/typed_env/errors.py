"""Error raised when an environment value cannot be parsed."""


class EnvParseError(ValueError):
    """Raise when a set, non-empty environment value has the wrong syntax.

    Fallible accessors hand this back as the second element of their
    result; ``must_*`` accessors raise it.

    Attributes:
        key: The environment variable name.
        value: The offending raw value, or the single offending token
            for array accessors.
        type_name: The requested type (``"bool"``, ``"int"``, ...).
        index: Position of the offending token, ``None`` for scalars.

    """

    def __init__(
        self,
        key: str,
        value: str,
        type_name: str,
        *,
        index: int | None = None,
    ) -> None:
        """Build the error and its message from the failing lookup."""
        self.key = key
        self.value = value
        self.type_name = type_name
        self.index = index
        article = "an" if type_name[0] in "aeiou" else "a"
        where = "" if index is None else f" at index {index}"
        super().__init__(
            f"unable to parse env key: {key} with value: {value}{where} as {article} {type_name}"
        )
