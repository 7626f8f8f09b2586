"""Per-invocation context handed to argument parsers."""

import logging
from dataclasses import dataclass, field
from typing import Any

import hikari

from ..commands.search import FuzzyMemberResolver
from .directory import GuildDirectory

logger = logging.getLogger(__name__)


@dataclass
class InvocationContext:
    """Everything an argument type may consult while parsing one invocation.

    ``guild`` is None for commands invoked outside a guild. ``rest`` is only
    used as a fallback when the directory does not know a user.
    """

    rest: hikari.api.RESTClient
    message: hikari.Message | None = None
    interaction: hikari.CommandInteraction | None = None
    guild: GuildDirectory | None = None
    member_search: FuzzyMemberResolver = field(default_factory=FuzzyMemberResolver)

    @classmethod
    def from_message(
        cls, app: Any, message: hikari.Message, **kwargs: Any
    ) -> "InvocationContext":
        guild = None
        if message.guild_id:
            guild = GuildDirectory.from_cache(app.cache, message.guild_id)
        return cls(rest=app.rest, message=message, guild=guild, **kwargs)

    @classmethod
    def from_interaction(
        cls, app: Any, interaction: hikari.CommandInteraction, **kwargs: Any
    ) -> "InvocationContext":
        guild = None
        if interaction.guild_id:
            guild = GuildDirectory.from_cache(app.cache, interaction.guild_id)
        return cls(rest=app.rest, interaction=interaction, guild=guild, **kwargs)

    def mentioned_user(self, user_id: int) -> hikari.User | None:
        """Return the user with ``user_id`` from the message's mention list."""
        if self.message is None:
            return None

        mentions = self.message.user_mentions
        if not mentions:
            return None
        return mentions.get(user_id)
