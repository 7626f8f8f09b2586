"""Username and nickname search over a guild directory."""

import logging
from collections.abc import Callable

import hikari

from config.settings import settings

from ..core.directory import GuildDirectory
from .errors import AmbiguousMatchError, UserNotFoundError

logger = logging.getLogger(__name__)

SearchFunc = Callable[[GuildDirectory, str], hikari.Member]


class FuzzyMemberResolver:
    """Resolves a free-text name to exactly one guild member.

    The resolver never guesses: anything other than a single exact match is
    reported back as ``UserNotFoundError`` or ``AmbiguousMatchError`` with the
    candidate names. A ``search_func`` replaces the scan entirely, e.g. with an
    indexed or remote member search.
    """

    def __init__(self, max_matches: int | None = None, search_func: SearchFunc | None = None):
        self.max_matches = max_matches if max_matches is not None else settings.search_max_matches
        self.search_func = search_func

    def find(self, directory: GuildDirectory, query: str) -> hikari.Member:
        if self.search_func is not None:
            return self.search_func(directory, query)

        lower_query = query.lower()
        full_matches: list[hikari.Member] = []
        partial_matches: list[hikari.Member] = []

        with directory.read_lock():
            for member in directory.members():
                if member is None or not member.username:
                    continue

                username = member.username.lower()
                nickname = (member.nickname or "").lower()

                if lower_query == username or (nickname and lower_query == nickname):
                    full_matches.append(directory.copy_member(member))
                    if len(full_matches) >= self.max_matches:
                        break
                elif len(partial_matches) < self.max_matches and lower_query in username:
                    partial_matches.append(member)

        logger.debug(
            f"Search for {query!r} in guild {directory.guild_id}: "
            f"{len(full_matches)} full, {len(partial_matches)} partial"
        )

        if len(full_matches) == 1 and not partial_matches:
            return full_matches[0]

        if not full_matches and not partial_matches:
            raise UserNotFoundError(query)

        full_names = [m.username for m in full_matches]
        partial_names = [m.username for m in partial_matches]
        candidates = ", ".join(f"`{name}`" for name in full_names + partial_names)

        if len(full_matches) > 1:
            message = (
                f"Too many users with that name, {candidates}. "
                "Please re-run the command with a narrower search, mention or ID."
            )
        else:
            message = (
                f"Did you mean one of these? {candidates}. "
                "Please re-run the command with a narrower search, mention or ID."
            )

        raise AmbiguousMatchError(query, full_names, partial_names, message)
