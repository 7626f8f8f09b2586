"""Argument types using strategy pattern.

Each argument type knows how to recognise a text token (``matches``), parse
it (``parse_from_message``), read the same argument out of a slash command
interaction (``parse_from_interaction``) and describe itself as slash command
options. Types hold configuration only and are shared between invocations.
"""

import logging
import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import hikari

from config.settings import settings

from .argument_types import AdvancedUserMatch, ArgumentDefinition
from .errors import (
    ChannelNotFoundError,
    ImproperMentionError,
    InvalidFloatError,
    InvalidIntegerError,
    MemberNotFoundError,
    OutOfRangeError,
    ResolvedNotFoundError,
)
from .options import SlashCommandOptions

if TYPE_CHECKING:
    from ..core.context import InvocationContext

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_USER_MENTION_RE = re.compile(r"<@!?([0-9]+)>")
_CHANNEL_MENTION_RE = re.compile(r"<#([0-9]+)>")


def parse_int64(text: str) -> int:
    """Parse a base-10 signed 64-bit integer, raising ``ValueError`` otherwise."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")

    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"integer out of 64-bit range: {text!r}")
    return value


def parse_float64(text: str) -> float:
    """Parse a float, rejecting the whitespace and digit separators ``float()`` tolerates."""
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float: {text!r}")

    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise ValueError(f"float out of range: {text!r}")
    return value


def parse_user_mention(part: str) -> int | None:
    """Return the id in ``<@id>`` or ``<@!id>``, or None if ``part`` is not one."""
    match = _USER_MENTION_RE.fullmatch(part)
    if match is None:
        return None
    try:
        return parse_int64(match.group(1))
    except ValueError:
        return None


def parse_channel_mention(part: str) -> int | None:
    match = _CHANNEL_MENTION_RE.fullmatch(part)
    if match is None:
        return None
    try:
        return parse_int64(match.group(1))
    except ValueError:
        return None


def _looks_like_user_mention(part: str) -> bool:
    return part.startswith("<@") and part.endswith(">")


def _is_int64(part: str) -> bool:
    try:
        parse_int64(part)
    except ValueError:
        return False
    return True


def _id_option_name(definition: ArgumentDefinition) -> str:
    return f"{definition.name}{settings.id_option_suffix}".lower()


class ArgumentType(ABC):
    """Base class for argument types."""

    @abstractmethod
    def matches(self, definition: ArgumentDefinition, part: str) -> bool:
        """Return True if ``part`` could be a value of this type. Must not do any lookups."""

    @abstractmethod
    async def parse_from_message(
        self, definition: ArgumentDefinition, part: str, ctx: "InvocationContext"
    ) -> Any:
        """Parse one text token."""

    @abstractmethod
    async def parse_from_interaction(
        self, definition: ArgumentDefinition, ctx: "InvocationContext", options: SlashCommandOptions
    ) -> Any:
        """Read the argument out of a slash command interaction."""

    @abstractmethod
    def help_name(self) -> str:
        """Name of the type as shown in help."""

    @abstractmethod
    def slash_command_options(self, definition: ArgumentDefinition) -> list[hikari.CommandOption]:
        """Options this argument registers on a slash command."""

    def option_names(self, definition: ArgumentDefinition) -> list[str]:
        return [option.name for option in self.slash_command_options(definition)]


@dataclass(frozen=True)
class IntegerArgument(ArgumentType):
    """Whole numbers. When ``min_value != max_value`` the value must lie within them.

    ``interaction_string`` registers the slash option as a string, for values
    such as snowflakes that exceed the platform's integer precision.
    """

    min_value: int = 0
    max_value: int = 0
    interaction_string: bool = False

    def matches(self, definition: ArgumentDefinition, part: str) -> bool:
        return _is_int64(part)

    def _check_range(self, definition: ArgumentDefinition, value: int) -> int:
        if self.min_value != self.max_value:
            if value < self.min_value or value > self.max_value:
                raise OutOfRangeError(definition.name, value, self.min_value, self.max_value)
        return value

    async def parse_from_message(
        self, definition: ArgumentDefinition, part: str, ctx: "InvocationContext"
    ) -> int:
        try:
            value = parse_int64(part)
        except ValueError:
            raise InvalidIntegerError(part) from None
        return self._check_range(definition, value)

    async def parse_from_interaction(
        self, definition: ArgumentDefinition, ctx: "InvocationContext", options: SlashCommandOptions
    ) -> int:
        raw = options.expect_any(definition.name)
        if isinstance(raw, str):
            try:
                value = parse_int64(raw)
            except ValueError:
                raise InvalidIntegerError(raw) from None
        else:
            value, _ = options.expect_int_opt(definition.name)
        return self._check_range(definition, value)

    def help_name(self) -> str:
        return "Whole number"

    def slash_command_options(self, definition: ArgumentDefinition) -> list[hikari.CommandOption]:
        if self.interaction_string:
            return [definition.standard_option(hikari.OptionType.STRING)]
        return [definition.standard_option(hikari.OptionType.INTEGER)]


@dataclass(frozen=True)
class FloatArgument(ArgumentType):
    """Decimal numbers. When ``min_value != max_value`` the value must lie within them."""

    min_value: float = 0.0
    max_value: float = 0.0

    def matches(self, definition: ArgumentDefinition, part: str) -> bool:
        try:
            parse_float64(part)
        except ValueError:
            return False
        return True

    def _check_range(self, definition: ArgumentDefinition, value: float) -> float:
        if self.min_value != self.max_value:
            # NaN compares false against both bounds
            if math.isnan(value) or value < self.min_value or value > self.max_value:
                raise OutOfRangeError(
                    definition.name, value, self.min_value, self.max_value, is_float=True
                )
        return value

    def _parse(self, part: str) -> float:
        try:
            return parse_float64(part)
        except ValueError:
            raise InvalidFloatError(part) from None

    async def parse_from_message(
        self, definition: ArgumentDefinition, part: str, ctx: "InvocationContext"
    ) -> float:
        return self._check_range(definition, self._parse(part))

    async def parse_from_interaction(
        self, definition: ArgumentDefinition, ctx: "InvocationContext", options: SlashCommandOptions
    ) -> float:
        # Slash options are registered as strings, there's no native float kind we rely on
        raw = options.expect_string(definition.name)
        return self._check_range(definition, self._parse(raw))

    def help_name(self) -> str:
        return "Decimal number"

    def slash_command_options(self, definition: ArgumentDefinition) -> list[hikari.CommandOption]:
        return [definition.standard_option(hikari.OptionType.STRING)]


@dataclass(frozen=True)
class StringArgument(ArgumentType):
    """Free text, returned as is."""

    def matches(self, definition: ArgumentDefinition, part: str) -> bool:
        return True

    async def parse_from_message(
        self, definition: ArgumentDefinition, part: str, ctx: "InvocationContext"
    ) -> str:
        return part

    async def parse_from_interaction(
        self, definition: ArgumentDefinition, ctx: "InvocationContext", options: SlashCommandOptions
    ) -> str:
        return options.expect_string(definition.name)

    def help_name(self) -> str:
        return "Text"

    def slash_command_options(self, definition: ArgumentDefinition) -> list[hikari.CommandOption]:
        return [definition.standard_option(hikari.OptionType.STRING)]


@dataclass(frozen=True)
class UserArgument(ArgumentType):
    """A user, by mention or (unless ``require_mention``) by username search in the guild."""

    require_mention: bool = False

    def matches(self, definition: ArgumentDefinition, part: str) -> bool:
        if self.require_mention:
            return _looks_like_user_mention(part)

        # Username search is enabled, anything could be a name
        return True

    async def parse_from_message(
        self, definition: ArgumentDefinition, part: str, ctx: "InvocationContext"
    ) -> hikari.User:
        if part.startswith("<@"):
            user_id = parse_user_mention(part)
            if user_id is not None:
                user = ctx.mentioned_user(user_id)
                if user is not None:
                    return user
            raise ImproperMentionError(part)

        if not self.require_mention and ctx.guild is not None:
            member = ctx.member_search.find(ctx.guild, part)
            return member.user

        raise ImproperMentionError(part)

    async def parse_from_interaction(
        self, definition: ArgumentDefinition, ctx: "InvocationContext", options: SlashCommandOptions
    ) -> hikari.User:
        return options.expect_user(definition.name)

    def help_name(self) -> str:
        if self.require_mention:
            return "User Mention"
        return "User"

    def slash_command_options(self, definition: ArgumentDefinition) -> list[hikari.CommandOption]:
        return [definition.standard_option(hikari.OptionType.USER)]


@dataclass(frozen=True)
class UserIDArgument(ArgumentType):
    """A user id from a mention or a plain number.

    The user doesn't have to be a member of the guild, or be known at all.
    """

    def matches(self, definition: ArgumentDefinition, part: str) -> bool:
        return _looks_like_user_mention(part) or _is_int64(part)

    async def parse_from_message(
        self, definition: ArgumentDefinition, part: str, ctx: "InvocationContext"
    ) -> int:
        if part.startswith("<@"):
            user_id = parse_user_mention(part)
            if user_id is None:
                raise ImproperMentionError(part)
            return user_id

        try:
            return parse_int64(part)
        except ValueError:
            raise ImproperMentionError(part) from None

    async def parse_from_interaction(
        self, definition: ArgumentDefinition, ctx: "InvocationContext", options: SlashCommandOptions
    ) -> int:
        user, found = options.expect_user_opt(definition.name)
        if found:
            return int(user.id)

        raw = options.expect_string(_id_option_name(definition))
        try:
            return parse_int64(raw)
        except ValueError:
            raise InvalidIntegerError(raw) from None

    def help_name(self) -> str:
        return "Mention/ID"

    def slash_command_options(self, definition: ArgumentDefinition) -> list[hikari.CommandOption]:
        # Slash commands have no "one of" option type, so offer both and use whichever was given
        id_option = definition.standard_option(hikari.OptionType.STRING, name=_id_option_name(definition))
        user_option = definition.standard_option(hikari.OptionType.USER)
        return [id_option, user_option]


@dataclass(frozen=True)
class ChannelArgument(ArgumentType):
    """A guild channel by mention or id. Outside a guild this parses to None."""

    def matches(self, definition: ArgumentDefinition, part: str) -> bool:
        if part.startswith("<#") and part.endswith(">"):
            return True
        return _is_int64(part)

    async def parse_from_message(
        self, definition: ArgumentDefinition, part: str, ctx: "InvocationContext"
    ) -> hikari.GuildChannel | None:
        if ctx.guild is None:
            return None

        if part.startswith("<#"):
            channel_id = parse_channel_mention(part)
            if channel_id is None:
                raise ImproperMentionError(part)
        else:
            try:
                channel_id = parse_int64(part)
            except ValueError:
                raise ImproperMentionError(part) from None

        channel = ctx.guild.get_channel(channel_id)
        if channel is None:
            raise ChannelNotFoundError(part)
        return channel

    async def parse_from_interaction(
        self, definition: ArgumentDefinition, ctx: "InvocationContext", options: SlashCommandOptions
    ) -> hikari.GuildChannel | None:
        if ctx.guild is None:
            return None

        resolved = options.expect_channel(definition.name)
        channel = ctx.guild.get_channel(resolved.id)
        if channel is None:
            raise ChannelNotFoundError(int(resolved.id))
        return channel

    def help_name(self) -> str:
        return "Channel"

    def slash_command_options(self, definition: ArgumentDefinition) -> list[hikari.CommandOption]:
        return [definition.standard_option(hikari.OptionType.CHANNEL)]


@dataclass(frozen=True)
class AdvancedUserArgument(ArgumentType):
    """A user by mention, id or name, returned as an ``AdvancedUserMatch``.

    Ids missing from the guild directory are fetched over REST. With
    ``require_membership`` the user must be a member of the guild and the
    match always carries the member.
    """

    enable_user_id: bool = False
    enable_username_search: bool = False
    require_membership: bool = False

    def matches(self, definition: ArgumentDefinition, part: str) -> bool:
        if _looks_like_user_mention(part):
            return True

        if self.enable_user_id and _is_int64(part):
            return True

        return self.enable_username_search

    async def parse_from_message(
        self, definition: ArgumentDefinition, part: str, ctx: "InvocationContext"
    ) -> AdvancedUserMatch:
        user: hikari.User | None = None
        member: hikari.Member | None = None

        if part.startswith("<@"):
            user = self.parse_mention(part, ctx)

        member_failed = False
        if user is None and self.enable_user_id:
            try:
                user_id = parse_int64(part)
            except ValueError:
                user_id = None

            if user_id is not None:
                member, user = await self.search_id(user_id, ctx)
                if member is None:
                    member_failed = True

        if self.enable_username_search and ctx.guild is not None and member is None and user is None:
            member = ctx.member_search.find(ctx.guild, part)

        if member is None and user is None:
            raise MemberNotFoundError(part)

        if member is not None and user is None:
            user = member.user
        elif member is None and user is not None and not member_failed:
            member, fetched = await self.search_id(user.id, ctx)
            if member is not None:
                user = fetched

        if user is None or (self.require_membership and member is None):
            raise MemberNotFoundError(part)

        return AdvancedUserMatch(user=user, member=member)

    async def parse_from_interaction(
        self, definition: ArgumentDefinition, ctx: "InvocationContext", options: SlashCommandOptions
    ) -> AdvancedUserMatch:
        user, found = options.expect_user_opt(definition.name)
        if found:
            # They used the user option, the platform resolved the member for us
            try:
                member = options.expect_member(definition.name)
            except ResolvedNotFoundError:
                if self.require_membership:
                    raise
                member = None
            return AdvancedUserMatch(user=user, member=member)

        user_id = options.expect_int(_id_option_name(definition))
        member, user = await self.search_id(user_id, ctx)
        if user is None:
            raise MemberNotFoundError(user_id)
        return AdvancedUserMatch(user=user, member=member)

    async def search_id(
        self, user_id: int, ctx: "InvocationContext"
    ) -> tuple[hikari.Member | None, hikari.User | None]:
        """Look a user up by id: guild directory, then the member endpoint, then the user endpoint.

        The user endpoint is skipped when membership is required.
        """
        if ctx.guild is not None:
            member = ctx.guild.member_copy(user_id)
            if member is not None:
                return member, member.user

            try:
                member = await ctx.rest.fetch_member(ctx.guild.guild_id, user_id)
            except hikari.NotFoundError:
                logger.debug(f"User {user_id} is not a member of guild {ctx.guild.guild_id}")
            except hikari.HTTPError as e:
                logger.warning(f"Failed to fetch member {user_id}: {e}")
                raise
            else:
                return member, member.user

        if self.require_membership:
            return None, None

        try:
            user = await ctx.rest.fetch_user(user_id)
        except hikari.NotFoundError:
            logger.debug(f"User {user_id} not found")
            return None, None
        except hikari.HTTPError as e:
            logger.warning(f"Failed to fetch user {user_id}: {e}")
            raise
        return None, user

    def parse_mention(self, part: str, ctx: "InvocationContext") -> hikari.User | None:
        user_id = parse_user_mention(part)
        if user_id is None:
            return None
        return ctx.mentioned_user(user_id)

    def help_name(self) -> str:
        out = "User mention"
        if self.enable_username_search:
            out += "/Name"
        if self.enable_user_id:
            out += "/ID"
        return out

    def slash_command_options(self, definition: ArgumentDefinition) -> list[hikari.CommandOption]:
        user_option = definition.standard_option(hikari.OptionType.USER)
        id_option = definition.standard_option(hikari.OptionType.INTEGER, name=_id_option_name(definition))
        return [user_option, id_option]


# Ready-made instances for the common cases
INT = IntegerArgument()
BIG_INT = IntegerArgument(interaction_string=True)
FLOAT = FloatArgument()
STRING = StringArgument()
USER = UserArgument()
USER_REQ_MENTION = UserArgument(require_mention=True)
USER_ID = UserIDArgument()
CHANNEL = ChannelArgument()
ADV_USER = AdvancedUserArgument(enable_user_id=True, enable_username_search=True, require_membership=True)
ADV_USER_NO_MEMBER = AdvancedUserArgument(enable_user_id=True, enable_username_search=True)
