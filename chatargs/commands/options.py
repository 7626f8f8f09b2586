"""Typed access to the options of a slash command interaction."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import hikari

from .errors import MissingOptionError, OptionTypeMismatchError, ResolvedNotFoundError

logger = logging.getLogger(__name__)

_GROUP_OPTION_TYPES = (hikari.OptionType.SUB_COMMAND, hikari.OptionType.SUB_COMMAND_GROUP)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class SlashCommandOptions:
    """Flat, case-insensitive view over an interaction's options.

    Every kind has two accessors. ``expect_<kind>`` raises
    ``MissingOptionError`` when the option is absent, ``expect_<kind>_opt``
    returns ``(value, found)`` instead. Both raise ``OptionTypeMismatchError``
    when the option holds a different kind of value.

    Entity kinds (user, member, role, channel) read the id option and look it
    up in the interaction's resolved data.
    """

    def __init__(
        self,
        options: Mapping[str, Any],
        resolved: "hikari.ResolvedOptionData | None" = None,
        interaction: hikari.CommandInteraction | None = None,
    ) -> None:
        self.options = {name.lower(): value for name, value in options.items()}
        self.resolved = resolved
        self.interaction = interaction

    @classmethod
    def from_options(
        cls,
        options: Sequence[hikari.CommandInteractionOption] | None,
        resolved: "hikari.ResolvedOptionData | None" = None,
        interaction: hikari.CommandInteraction | None = None,
    ) -> "SlashCommandOptions":
        values = {option.name: option.value for option in options or ()}
        return cls(values, resolved=resolved, interaction=interaction)

    @classmethod
    def from_interaction(cls, interaction: hikari.CommandInteraction) -> "SlashCommandOptions":
        """Build from an interaction, descending into sub-commands to the leaf options."""
        options = interaction.options
        while options and len(options) == 1 and options[0].type in _GROUP_OPTION_TYPES:
            logger.debug(f"Descending into sub-command option {options[0].name}")
            options = options[0].options

        return cls.from_options(options, resolved=interaction.resolved, interaction=interaction)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self.options

    # Scalars

    def expect_any(self, name: str) -> Any:
        value, found = self.expect_any_opt(name)
        if not found:
            raise MissingOptionError(name, "any")
        return value

    def expect_any_opt(self, name: str) -> tuple[Any, bool]:
        key = name.lower()
        if key in self.options:
            return self.options[key], True
        return None, False

    def expect_int(self, name: str) -> int:
        value, found = self.expect_int_opt(name)
        if not found:
            raise MissingOptionError(name, "integer")
        return value

    def expect_int_opt(self, name: str) -> tuple[int, bool]:
        value, found = self.expect_any_opt(name)
        if not found:
            return 0, False
        if not _is_int(value):
            raise OptionTypeMismatchError(name, "integer", value)
        return int(value), True

    def expect_string(self, name: str) -> str:
        value, found = self.expect_string_opt(name)
        if not found:
            raise MissingOptionError(name, "string")
        return value

    def expect_string_opt(self, name: str) -> tuple[str, bool]:
        value, found = self.expect_any_opt(name)
        if not found:
            return "", False
        if not isinstance(value, str):
            raise OptionTypeMismatchError(name, "string", value)
        return value, True

    def expect_bool(self, name: str) -> bool:
        value, found = self.expect_bool_opt(name)
        if not found:
            raise MissingOptionError(name, "boolean")
        return value

    def expect_bool_opt(self, name: str) -> tuple[bool, bool]:
        value, found = self.expect_any_opt(name)
        if not found:
            return False, False
        if not isinstance(value, bool):
            raise OptionTypeMismatchError(name, "boolean", value)
        return value, True

    # Resolved entities

    def _resolved_table(self, table: str) -> Mapping[int, Any]:
        if self.resolved is None:
            return {}
        return getattr(self.resolved, table, None) or {}

    def expect_user(self, name: str) -> hikari.User:
        user, found = self.expect_user_opt(name)
        if not found:
            raise MissingOptionError(name, "user")
        return user

    def expect_user_opt(self, name: str) -> tuple[hikari.User | None, bool]:
        user_id, found = self.expect_int_opt(name)
        if not found:
            return None, False

        user = self._resolved_table("users").get(user_id)
        if user is None:
            raise ResolvedNotFoundError(name, user_id, "user")
        return user, True

    def expect_member(self, name: str) -> hikari.Member:
        member, found = self.expect_member_opt(name)
        if not found:
            raise MissingOptionError(name, "member")
        return member

    def expect_member_opt(self, name: str) -> tuple[hikari.Member | None, bool]:
        user_id, found = self.expect_int_opt(name)
        if not found:
            return None, False

        member = self._resolved_table("members").get(user_id)
        if member is None:
            raise ResolvedNotFoundError(name, user_id, "member")

        if user_id not in self._resolved_table("users") and getattr(member, "user", None) is None:
            raise ResolvedNotFoundError(name, user_id, "user")
        return member, True

    def expect_role(self, name: str) -> hikari.Role:
        role, found = self.expect_role_opt(name)
        if not found:
            raise MissingOptionError(name, "role")
        return role

    def expect_role_opt(self, name: str) -> tuple[hikari.Role | None, bool]:
        role_id, found = self.expect_int_opt(name)
        if not found:
            return None, False

        role = self._resolved_table("roles").get(role_id)
        if role is None:
            raise ResolvedNotFoundError(name, role_id, "role")
        return role, True

    def expect_channel(self, name: str) -> hikari.PartialChannel:
        channel, found = self.expect_channel_opt(name)
        if not found:
            raise MissingOptionError(name, "channel")
        return channel

    def expect_channel_opt(self, name: str) -> tuple[hikari.PartialChannel | None, bool]:
        channel_id, found = self.expect_int_opt(name)
        if not found:
            return None, False

        channel = self._resolved_table("channels").get(channel_id)
        if channel is None:
            raise ResolvedNotFoundError(name, channel_id, "channel")
        return channel, True
