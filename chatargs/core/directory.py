"""Read-locked snapshot of a guild's members, channels and roles."""

import copy
import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import hikari

logger = logging.getLogger(__name__)


def clone_member(member: hikari.Member) -> hikari.Member:
    """Copy a member along with its user and role list.

    ``copy.deepcopy`` is not an option: hikari entities hold a reference to
    the running app.
    """
    copied = copy.copy(member)
    copied.user = copy.copy(member.user)
    copied.role_ids = list(member.role_ids)
    return copied


class GuildDirectory:
    """In-memory view of one guild used for argument lookups.

    Readers hold ``read_lock()`` for the duration of a lookup or scan. Members
    that outlive the lock are handed out through ``member_copy`` so writers
    updating the snapshot never alias what a command handler holds.

    A directory built with ``from_cache`` snapshots each table the first time
    it is read, so an invocation only pays for the tables its arguments use.
    """

    def __init__(
        self,
        guild_id: int,
        members: Mapping[int, hikari.Member] | None = None,
        channels: Mapping[int, hikari.GuildChannel] | None = None,
        roles: Mapping[int, hikari.Role] | None = None,
        copy_member: Callable[[hikari.Member], hikari.Member] = clone_member,
        cache: hikari.api.Cache | None = None,
    ) -> None:
        self.guild_id = guild_id
        self._cache = cache
        self._members = self._initial_table(members)
        self._channels = self._initial_table(channels)
        self._roles = self._initial_table(roles)
        self._copy_member = copy_member
        self._lock = threading.RLock()

    def _initial_table(self, table: Mapping[int, Any] | None) -> dict[int, Any] | None:
        if table is not None:
            return dict(table)
        if self._cache is not None:
            return None
        return {}

    @classmethod
    def from_cache(cls, cache: hikari.api.Cache, guild_id: int) -> "GuildDirectory":
        """Directory over a guild in the hikari cache, snapshotted lazily."""
        return cls(guild_id, cache=cache)

    def _member_table(self) -> dict[int, hikari.Member]:
        # Caller holds the lock
        if self._members is None:
            self._members = dict(self._cache.get_members_view_for_guild(self.guild_id))
            logger.debug(f"Snapshot {len(self._members)} members of guild {self.guild_id}")
        return self._members

    def _channel_table(self) -> dict[int, hikari.GuildChannel]:
        if self._channels is None:
            self._channels = dict(self._cache.get_guild_channels_view_for_guild(self.guild_id))
            logger.debug(f"Snapshot {len(self._channels)} channels of guild {self.guild_id}")
        return self._channels

    def _role_table(self) -> dict[int, hikari.Role]:
        if self._roles is None:
            self._roles = dict(self._cache.get_roles_view_for_guild(self.guild_id))
            logger.debug(f"Snapshot {len(self._roles)} roles of guild {self.guild_id}")
        return self._roles

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        with self._lock:
            yield

    def members(self) -> Iterator[hikari.Member]:
        """Iterate the cached members. The caller must hold ``read_lock()``."""
        return iter(list(self._member_table().values()))

    def copy_member(self, member: hikari.Member) -> hikari.Member:
        return self._copy_member(member)

    def get_member(self, user_id: int) -> hikari.Member | None:
        with self.read_lock():
            return self._member_table().get(user_id)

    def member_copy(self, user_id: int) -> hikari.Member | None:
        with self.read_lock():
            member = self._member_table().get(user_id)
            if member is None:
                return None
            return self._copy_member(member)

    def get_channel(self, channel_id: int) -> hikari.GuildChannel | None:
        with self.read_lock():
            return self._channel_table().get(channel_id)

    def get_role(self, role_id: int) -> hikari.Role | None:
        with self.read_lock():
            return self._role_table().get(role_id)

    def upsert_member(self, member: hikari.Member) -> None:
        with self._lock:
            self._member_table()[member.id] = member

    def remove_member(self, user_id: int) -> None:
        with self._lock:
            self._member_table().pop(user_id, None)

    def upsert_channel(self, channel: hikari.GuildChannel) -> None:
        with self._lock:
            self._channel_table()[channel.id] = channel

    def remove_channel(self, channel_id: int) -> None:
        with self._lock:
            self._channel_table().pop(channel_id, None)

    def upsert_role(self, role: hikari.Role) -> None:
        with self._lock:
            self._role_table()[role.id] = role
