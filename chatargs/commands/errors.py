"""Errors raised while resolving command arguments.

Every error here is an expected outcome of bad or ambiguous user input. The
dispatcher catches ``ArgumentError``, shows ``str(error)`` to the user and
stops processing that command.
"""

from typing import Any


class ArgumentError(Exception):
    """Base class for all argument resolution failures."""


class MalformedValueError(ArgumentError):
    """A token looked like the target type but could not be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(self._message())

    def _message(self) -> str:
        return f"`{self.value}` is not a valid value"


class InvalidIntegerError(MalformedValueError):
    def _message(self) -> str:
        return f"`{self.value}` is not a whole number"


class InvalidFloatError(MalformedValueError):
    def _message(self) -> str:
        return f"`{self.value}` is not a decimal number"


class ImproperMentionError(MalformedValueError):
    def _message(self) -> str:
        return f"Improper mention `{self.value}`"


class OutOfRangeError(ArgumentError):
    """A numeric value fell outside the configured ``[min, max]`` window."""

    def __init__(
        self,
        arg_name: str,
        got: int | float,
        min_value: int | float,
        max_value: int | float,
        is_float: bool = False,
    ) -> None:
        self.arg_name = arg_name
        self.got = got
        self.min_value = min_value
        self.max_value = max_value
        self.is_float = is_float

        if is_float:
            bounds = f"{min_value:g} - {max_value:g}"
            got_str = f"{got:g}"
        else:
            bounds = f"{min_value} - {max_value}"
            got_str = str(got)

        super().__init__(f"{arg_name} is not within the range of ({bounds}), got {got_str}")


class EntityNotFoundError(ArgumentError):
    """A mentioned, named or identified entity could not be located."""


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"User `{query}` not found")


class MemberNotFoundError(EntityNotFoundError):
    def __init__(self, query: str | int | None = None) -> None:
        self.query = query
        super().__init__("User/Member not found")


class ChannelNotFoundError(EntityNotFoundError):
    def __init__(self, query: str | int) -> None:
        self.query = query
        super().__init__(f"Channel `{query}` not found")


class AmbiguousMatchError(ArgumentError):
    """A username search matched more than one plausible member."""

    def __init__(
        self,
        query: str,
        full_matches: list[str],
        partial_matches: list[str],
        message: str,
    ) -> None:
        self.query = query
        self.full_matches = full_matches
        self.partial_matches = partial_matches
        super().__init__(message)

    @property
    def candidates(self) -> list[str]:
        return self.full_matches + self.partial_matches


class OptionExpectedError(ArgumentError):
    """Base class for structured option lookups that did not yield the expected kind."""

    def __init__(self, name: str, expected: str, message: str) -> None:
        self.name = name
        self.expected = expected
        super().__init__(message)


class MissingOptionError(OptionExpectedError):
    def __init__(self, name: str, expected: str) -> None:
        super().__init__(name, expected, f"Missing required argument `{name}` ({expected})")


class OptionTypeMismatchError(OptionExpectedError):
    def __init__(self, name: str, expected: str, got: Any) -> None:
        self.got = got
        super().__init__(
            name,
            expected,
            f"Argument `{name}` expected {expected}, got {type(got).__name__}",
        )


class ResolvedNotFoundError(ArgumentError):
    """An interaction option referenced an id missing from its resolved data."""

    def __init__(self, key: str, entity_id: int, kind: str) -> None:
        self.key = key
        self.entity_id = entity_id
        self.kind = kind
        super().__init__(f"Could not find the {kind} `{entity_id}` referenced by `{key}`")
