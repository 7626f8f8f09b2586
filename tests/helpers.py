"""Factories for the hikari objects used across the test suite."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import hikari

GUILD_ID = 123456789


def make_user(user_id: int, username: str) -> MagicMock:
    user = MagicMock(spec=hikari.User)
    user.id = hikari.Snowflake(user_id)
    user.username = username
    user.is_bot = False
    user.mention = f"<@{user_id}>"
    return user


def make_member(user_id: int, username: str, nickname: str | None = None) -> MagicMock:
    user = make_user(user_id, username)
    member = MagicMock(spec=hikari.Member)
    member.id = user.id
    member.username = username
    member.nickname = nickname
    member.user = user
    member.guild_id = hikari.Snowflake(GUILD_ID)
    return member


def copy_member(member: MagicMock) -> MagicMock:
    """Stand-in for copying a hikari member out of the directory."""
    copied = make_member(int(member.id), member.username, member.nickname)
    copied.user = member.user
    return copied


def make_channel(channel_id: int, name: str) -> MagicMock:
    channel = MagicMock(spec=hikari.GuildTextChannel)
    channel.id = hikari.Snowflake(channel_id)
    channel.name = name
    channel.type = hikari.ChannelType.GUILD_TEXT
    channel.mention = f"<#{channel_id}>"
    return channel


def make_resolved(users=None, members=None, roles=None, channels=None) -> SimpleNamespace:
    """Resolved option data as attached to a command interaction."""
    return SimpleNamespace(
        users=users or {},
        members=members or {},
        roles=roles or {},
        channels=channels or {},
        attachments={},
        messages={},
    )


def make_option(name: str, value, option_type=hikari.OptionType.STRING, options=None) -> MagicMock:
    option = MagicMock(spec=hikari.CommandInteractionOption)
    option.name = name
    option.value = value
    option.type = option_type
    option.options = options
    return option


def not_found(message: str = "Not found") -> hikari.NotFoundError:
    return hikari.NotFoundError("test_url", {}, b"", message)


def make_interaction_channel(channel_id: int) -> MagicMock:
    """Partial channel as found in an interaction's resolved data."""
    channel = MagicMock(spec=hikari.PartialChannel)
    channel.id = hikari.Snowflake(channel_id)
    return channel
