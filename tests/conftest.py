"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from chatargs.commands.search import FuzzyMemberResolver
from chatargs.core.context import InvocationContext
from chatargs.core.directory import GuildDirectory
from tests.helpers import GUILD_ID, copy_member, make_channel, make_member, not_found

# Disable logging during tests
logging.disable(logging.CRITICAL)


@pytest.fixture
def mock_member():
    return make_member(111111111, "testuser", "Test User")


@pytest.fixture
def mock_channel():
    return make_channel(444444444, "test-channel")


@pytest.fixture
def directory(mock_member, mock_channel):
    """Guild directory with a handful of members and one channel."""
    members = [
        mock_member,
        make_member(222222222, "alice"),
        make_member(333333333, "bob", "Bobby"),
        make_member(555555555, "charlie"),
    ]
    return GuildDirectory(
        GUILD_ID,
        members={m.id: m for m in members},
        channels={mock_channel.id: mock_channel},
        copy_member=copy_member,
    )


@pytest.fixture
def mock_rest():
    """Mock REST client; every fetch misses unless a test says otherwise."""
    rest = MagicMock()
    rest.fetch_member = AsyncMock(side_effect=not_found("Unknown Member"))
    rest.fetch_user = AsyncMock(side_effect=not_found("Unknown User"))
    return rest


@pytest.fixture
def mock_message():
    message = MagicMock(spec=hikari.Message)
    message.guild_id = hikari.Snowflake(GUILD_ID)
    message.user_mentions = {}
    return message


@pytest.fixture
def guild_context(mock_rest, mock_message, directory):
    """Context for a prefix command invoked in a guild."""
    return InvocationContext(
        rest=mock_rest,
        message=mock_message,
        guild=directory,
        member_search=FuzzyMemberResolver(max_matches=5),
    )


@pytest.fixture
def dm_context(mock_rest, mock_message):
    """Context for a prefix command invoked outside of a guild."""
    mock_message.guild_id = None
    return InvocationContext(rest=mock_rest, message=mock_message)
