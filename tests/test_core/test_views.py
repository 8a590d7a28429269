"""Tests for core.schedule.views module."""

import dataclasses

import pytest

from core.schedule import filter_by_day, group_by_day, select_live
from factories import make_match


class TestSelectLive:
    """Tests for select_live function."""

    def test_keeps_only_in_play(self):
        """Test scheduled and finished matches are dropped."""
        scheduled = make_match(status="SCHEDULED")
        in_play = make_match(status="IN_PLAY")
        finished = make_match(status="FINISHED")

        assert select_live([scheduled, in_play, finished]) == [in_play]

    def test_unknown_status_counts_as_live(self):
        """Test statuses outside the known vocabulary are kept."""
        paused = make_match(status="PAUSED")
        odd = make_match(status="SUSPENDED")
        assert select_live([paused, odd]) == [paused, odd]

    def test_preserves_order(self):
        """Test live matches keep their input order."""
        first = make_match(status="LIVE", home="First")
        second = make_match(status="IN_PLAY", home="Second")
        assert select_live([first, second]) == [first, second]

    def test_empty(self):
        assert select_live([]) == []

    def test_idempotent(self):
        """Test repeated calls give the same answer."""
        matches = [make_match(status="IN_PLAY"), make_match(status="FINISHED")]
        assert select_live(matches) == select_live(matches)
        assert select_live(select_live(matches)) == select_live(matches)


class TestGroupByDay:
    """Tests for group_by_day function."""

    def test_day_membership_by_prefix(self):
        """Test a 14:00 kickoff belongs to its day and midnight does not."""
        same_day = make_match(date="2024-06-05 14:00:00")
        next_day = make_match(date="2024-06-06 00:00:00")

        grouped = group_by_day([same_day, next_day], "2024-06-05")

        assert grouped == {"Premier League": [same_day]}

    def test_competition_first_seen_order(self):
        """Test competitions and matches keep first-seen order."""
        pl_late = make_match(date="2024-06-05 19:00:00", home="PL late")
        liga = make_match(competition="La Liga", home="Liga")
        pl_early = make_match(date="2024-06-05 12:00:00", home="PL early")

        grouped = group_by_day([pl_late, liga, pl_early], "2024-06-05")

        assert list(grouped) == ["Premier League", "La Liga"]
        # No secondary sort by kickoff time
        assert grouped["Premier League"] == [pl_late, pl_early]

    def test_no_matches_on_day(self):
        """Test an empty day is an empty mapping."""
        assert group_by_day([make_match()], "2024-06-09") == {}

    def test_idempotent(self):
        """Test repeated calls give equal output and leave input alone."""
        matches = [
            make_match(),
            make_match(competition="Serie A"),
            make_match(date="2024-06-06 10:00:00"),
        ]
        snapshot = list(matches)

        assert group_by_day(matches, "2024-06-05") == group_by_day(
            matches, "2024-06-05"
        )
        assert matches == snapshot


def test_filter_by_day():
    """Test day filtering keeps order."""
    a = make_match(date="2024-06-05 10:00:00", home="A")
    b = make_match(date="2024-06-04 10:00:00", home="B")
    c = make_match(date="2024-06-05 20:00:00", home="C")
    assert filter_by_day([a, b, c], "2024-06-05") == [a, c]


def test_match_is_immutable():
    """Test normalized matches cannot be changed in place."""
    match = make_match()
    with pytest.raises(dataclasses.FrozenInstanceError):
        match.home_score = 5
