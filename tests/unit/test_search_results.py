"""
Unit tests for search results data models.

Tests the MatchSet collection and the WalkError record to ensure proper
validation, thread-safe accumulation and diagnostic formatting.
"""

import threading

import pytest
from pydantic import ValidationError

from globfind.models.search_results import MatchSet, SkipReason, WalkError


class TestWalkError:
    """Test cases for WalkError class."""

    def test_access_denied_message(self):
        error = WalkError(path="/root/secret", reason=SkipReason.ACCESS_DENIED)

        assert error.format_message() == "Skipping: /root/secret (Access Denied)"

    def test_access_denied_message_omits_detail(self):
        error = WalkError(path="p", reason=SkipReason.ACCESS_DENIED, detail="[Errno 13]")
        assert error.format_message() == "Skipping: p (Access Denied)"

    def test_unhandled_message_includes_detail(self):
        """Test that the raw error text follows the classification."""
        error = WalkError(path="data/bad", reason=SkipReason.UNHANDLED, detail="[Errno 5] I/O error")

        assert error.format_message() == "Skipping: data/bad (Unhandled Error) [Errno 5] I/O error"
        assert str(error) == error.format_message()

    def test_unhandled_message_without_detail(self):
        error = WalkError(path="x", reason=SkipReason.UNHANDLED)
        assert error.format_message() == "Skipping: x (Unhandled Error)"

    def test_reason_from_string(self):
        """Test reason conversion from its display value."""
        error = WalkError(path="x", reason="Access Denied")
        assert error.reason is SkipReason.ACCESS_DENIED

    def test_invalid_reason(self):
        with pytest.raises(ValidationError):
            WalkError(path="x", reason="Out of coffee")


class TestMatchSet:
    """Test cases for MatchSet class."""

    def test_empty(self):
        matches = MatchSet()

        assert len(matches) == 0
        assert not matches
        assert matches.paths == []
        assert matches.as_set() == set()

    def test_add_and_read(self):
        matches = MatchSet()
        matches.add("b")
        matches.add("a")

        assert len(matches) == 2
        assert matches
        assert matches.paths == ["b", "a"]
        assert list(matches) == ["b", "a"]
        assert "a" in matches
        assert "c" not in matches

    def test_paths_is_snapshot(self):
        """Test that the returned list does not alias internal storage."""
        matches = MatchSet()
        matches.add("a")
        snapshot = matches.paths
        snapshot.append("b")

        assert matches.paths == ["a"]

    def test_concurrent_adds(self):
        """Test that appends from many threads are all kept."""
        matches = MatchSet()

        def worker(offset):
            for i in range(200):
                matches.add(f"{offset}/{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(matches) == 2000
        assert len(matches.as_set()) == 2000

    def test_string_representation(self):
        matches = MatchSet()
        matches.add("x")
        assert str(matches) == "Found 1 matches"
