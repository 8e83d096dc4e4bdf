"""Exception types raised by value_checks."""


class ValueCheckError(Exception):
    """Base class for value_checks errors."""


class MissingFractionError(ValueCheckError, IndexError):
    """The coerced value has no fractional segment to measure."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"No fractional segment in {text!r}")


class UnknownCheckError(ValueCheckError, KeyError):
    """No check is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown value check: {self.name!r}"
