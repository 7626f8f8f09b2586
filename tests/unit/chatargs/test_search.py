"""Tests for the username/nickname member search."""

from unittest.mock import MagicMock

import pytest

from chatargs.commands.errors import AmbiguousMatchError, UserNotFoundError
from chatargs.commands.search import FuzzyMemberResolver
from chatargs.core.directory import GuildDirectory

from tests.helpers import GUILD_ID, copy_member, make_member


def _directory(*members):
    return GuildDirectory(GUILD_ID, members={m.id: m for m in members}, copy_member=copy_member)


class TestFuzzyMemberResolver:
    """Test FuzzyMemberResolver.find."""

    def test_unique_full_match_by_username(self, directory):
        resolver = FuzzyMemberResolver()

        member = resolver.find(directory, "ALICE")

        assert member.id == 222222222
        assert member is not directory.get_member(222222222)

    def test_unique_full_match_by_nickname(self, directory):
        member = FuzzyMemberResolver().find(directory, "bobby")

        assert member.id == 333333333

    def test_not_found(self, directory):
        with pytest.raises(UserNotFoundError) as exc_info:
            FuzzyMemberResolver().find(directory, "zzz")

        assert exc_info.value.query == "zzz"

    def test_multiple_full_matches_are_ambiguous(self):
        directory = _directory(make_member(1, "Bob"), make_member(2, "bob"))

        with pytest.raises(AmbiguousMatchError) as exc_info:
            FuzzyMemberResolver().find(directory, "bob")

        error = exc_info.value
        assert error.full_matches == ["Bob", "bob"]
        assert error.partial_matches == []
        assert str(error).startswith("Too many users with that name, `Bob`, `bob`.")
        assert "mention or ID" in str(error)

    def test_partial_matches_only(self, directory):
        with pytest.raises(AmbiguousMatchError) as exc_info:
            FuzzyMemberResolver().find(directory, "li")

        error = exc_info.value
        assert error.full_matches == []
        assert error.partial_matches == ["alice", "charlie"]
        assert str(error).startswith("Did you mean one of these? `alice`, `charlie`.")

    def test_single_full_match_with_partials_is_ambiguous(self):
        directory = _directory(make_member(1, "sam"), make_member(2, "samantha"))

        with pytest.raises(AmbiguousMatchError) as exc_info:
            FuzzyMemberResolver().find(directory, "sam")

        assert exc_info.value.candidates == ["sam", "samantha"]
        assert str(exc_info.value).startswith("Did you mean one of these?")

    def test_partial_matches_ignore_nicknames(self):
        directory = _directory(make_member(1, "alice", "Wonderland"))

        with pytest.raises(UserNotFoundError):
            FuzzyMemberResolver().find(directory, "wonder")

    def test_members_without_username_are_skipped(self):
        directory = _directory(make_member(1, "", "ghost"), make_member(2, "alice"))

        with pytest.raises(UserNotFoundError):
            FuzzyMemberResolver().find(directory, "ghost")

    def test_full_matches_capped(self):
        members = [make_member(i, "dup") for i in range(1, 9)]
        directory = _directory(*members)

        with pytest.raises(AmbiguousMatchError) as exc_info:
            FuzzyMemberResolver(max_matches=5).find(directory, "dup")

        assert len(exc_info.value.full_matches) == 5

    def test_partial_matches_capped(self):
        members = [make_member(i, f"user{i}") for i in range(1, 9)]
        directory = _directory(*members)

        with pytest.raises(AmbiguousMatchError) as exc_info:
            FuzzyMemberResolver(max_matches=3).find(directory, "user")

        assert exc_info.value.partial_matches == ["user1", "user2", "user3"]

    def test_search_is_deterministic(self, directory):
        resolver = FuzzyMemberResolver()
        results = []
        for _ in range(3):
            with pytest.raises(AmbiguousMatchError) as exc_info:
                resolver.find(directory, "li")
            results.append(exc_info.value.candidates)

        assert results[0] == results[1] == results[2]

    def test_custom_search_func_replaces_scan(self, directory):
        found = make_member(99, "remote")
        search_func = MagicMock(return_value=found)
        resolver = FuzzyMemberResolver(search_func=search_func)

        assert resolver.find(directory, "anything") is found
        search_func.assert_called_once_with(directory, "anything")

    def test_default_max_matches_from_settings(self):
        assert FuzzyMemberResolver().max_matches == 5
