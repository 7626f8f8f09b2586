"""Command argument definitions and parsed argument values."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import hikari

from config.settings import settings

if TYPE_CHECKING:
    from .parsers import ArgumentType

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def cut_string_short(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, ending it with "..." if it was longer."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


@dataclass(frozen=True)
class ArgumentDefinition:
    """Declares one argument a command accepts."""

    name: str
    type: "ArgumentType"
    help: str = ""
    default: Any = None

    def new_parsed(self) -> "ParsedArgument":
        return ParsedArgument(definition=self, value=self.default)

    def standard_option(
        self, option_type: hikari.OptionType, name: str | None = None
    ) -> hikari.CommandOption:
        description = cut_string_short(self.help, settings.option_description_limit)
        if not description:
            description = self.name

        # Slash option names must be lowercase
        option_name = (name or self.name).lower()
        return hikari.CommandOption(type=option_type, name=option_name, description=description)


@dataclass(frozen=True)
class AdvancedUserMatch:
    """Result of an advanced user argument.

    ``member`` is only present when the user is known to be in the guild.
    """

    user: hikari.User
    member: hikari.Member | None = None

    @property
    def username_or_nickname(self) -> str:
        if self.member is not None and self.member.nickname:
            return self.member.nickname
        return self.user.username


@dataclass
class ParsedArgument:
    """The value of one argument for one invocation.

    The ``as_*`` accessors never raise on a shape mismatch, they return the
    zero value of the requested type instead. ``as_int32`` is the exception: it
    refuses to truncate.
    """

    definition: ArgumentDefinition
    value: Any = None
    raw: str | None = field(default=None)

    def as_str(self) -> str:
        if isinstance(self.value, str):
            return self.value
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            return str(int(self.value))
        return ""

    def as_int(self) -> int:
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            return int(self.value)
        return 0

    def as_int32(self) -> int:
        value = self.as_int()
        if value < INT32_MIN or value > INT32_MAX:
            raise OverflowError(f"{self.definition.name}: {value} does not fit in 32 bits")
        return value

    def as_float(self) -> float:
        if isinstance(self.value, float):
            return self.value
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            return float(self.value)
        return 0.0

    def as_bool(self) -> bool:
        if isinstance(self.value, bool):
            return self.value
        if isinstance(self.value, int):
            return self.value > 0
        if isinstance(self.value, str):
            return self.value != ""
        return False

    def as_member(self) -> hikari.Member | None:
        if isinstance(self.value, hikari.Member):
            return self.value
        if isinstance(self.value, AdvancedUserMatch):
            return self.value.member
        return None

    def as_user(self) -> hikari.User | None:
        # Member is a User subclass, so it has to be checked first
        if isinstance(self.value, hikari.Member):
            return self.value.user
        if isinstance(self.value, AdvancedUserMatch):
            return self.value.user
        if isinstance(self.value, hikari.User):
            return self.value
        return None

    def as_advanced_user(self) -> AdvancedUserMatch | None:
        if isinstance(self.value, AdvancedUserMatch):
            return self.value
        return None

    def as_channel(self) -> hikari.GuildChannel | None:
        if isinstance(self.value, hikari.GuildChannel):
            return self.value
        return None


def new_parsed_arguments(definitions: list[ArgumentDefinition]) -> list[ParsedArgument]:
    """Create a fresh list of parsed arguments holding each definition's default."""
    return [definition.new_parsed() for definition in definitions]
