"""
Tests for circle-method round-robin pairings.
"""

from collections import Counter

import pytest

from fixture_engine.errors import DuplicateEntry, FixtureGenerationError, InsufficientEntries
from fixture_engine.services.rr_pairing import (
    GroupPairing,
    generate_group_pairings,
    rr_match_count,
    rr_round_count,
)


def _entries(n: int) -> list[str]:
    return [f"e{i}" for i in range(1, n + 1)]


def _as_tuples(pairings):
    return [(p.round_number, p.home_entry_id, p.away_entry_id) for p in pairings]


class TestCounts:
    def test_round_count(self):
        assert rr_round_count(4) == 3
        assert rr_round_count(5) == 5
        assert rr_round_count(4, "double") == 6
        assert rr_round_count(2) == 1

    def test_match_count(self):
        assert rr_match_count(4) == 6
        assert rr_match_count(5) == 10
        assert rr_match_count(5, "double") == 20


class TestExactOrder:
    def test_four_entries(self):
        result = generate_group_pairings(["A", "B", "C", "D"])
        assert _as_tuples(result) == [
            (1, "D", "A"),
            (1, "B", "C"),
            (2, "A", "B"),
            (2, "C", "D"),
            (3, "A", "C"),
            (3, "B", "D"),
        ]

    def test_three_entries_with_bye(self):
        result = generate_group_pairings(["A", "B", "C"])
        assert _as_tuples(result) == [(1, "B", "C"), (2, "A", "B"), (3, "C", "A")]

    def test_two_entries_double(self):
        result = generate_group_pairings(["A", "B"], "double")
        assert result == [GroupPairing(1, "A", "B"), GroupPairing(2, "B", "A")]


class TestSingleMode:
    def test_each_pair_once(self):
        for n in range(2, 13):
            entries = _entries(n)
            result = generate_group_pairings(entries)
            assert len(result) == n * (n - 1) // 2
            pairs = Counter(frozenset((p.home_entry_id, p.away_entry_id)) for p in result)
            assert len(pairs) == n * (n - 1) // 2
            assert set(pairs.values()) == {1}

    def test_no_self_pairings_and_no_bye(self):
        for n in (3, 5, 7, 9):
            entries = set(_entries(n))
            for p in generate_group_pairings(_entries(n)):
                assert p.home_entry_id != p.away_entry_id
                assert p.home_entry_id in entries
                assert p.away_entry_id in entries

    def test_entry_plays_at_most_once_per_round(self):
        for n in (4, 5, 6, 7, 8):
            result = generate_group_pairings(_entries(n))
            for round_number in {p.round_number for p in result}:
                playing = [
                    e
                    for p in result
                    if p.round_number == round_number
                    for e in (p.home_entry_id, p.away_entry_id)
                ]
                assert len(playing) == len(set(playing))

    def test_odd_group_each_entry_sits_out_once(self):
        entries = _entries(5)
        result = generate_group_pairings(entries)
        rounds = sorted({p.round_number for p in result})
        assert rounds == [1, 2, 3, 4, 5]
        for entry in entries:
            played_rounds = {p.round_number for p in result if entry in (p.home_entry_id, p.away_entry_id)}
            assert len(played_rounds) == 4

    def test_rounds_in_order(self):
        rounds = [p.round_number for p in generate_group_pairings(_entries(6))]
        assert rounds == sorted(rounds)


class TestHomeAwayBalance:
    def test_home_counts_within_one_of_half(self):
        for n in range(4, 11):
            result = generate_group_pairings(_entries(n))
            homes = Counter(p.home_entry_id for p in result)
            for entry in _entries(n):
                played = n - 1
                assert played // 2 <= homes[entry] <= (played + 1) // 2, (n, entry, homes[entry])

    def test_odd_groups_split_exactly(self):
        for n in (3, 5, 7, 9):
            homes = Counter(p.home_entry_id for p in generate_group_pairings(_entries(n)))
            assert set(homes.values()) == {(n - 1) // 2}

    def test_double_mode_hosts_every_pair_once(self):
        result = generate_group_pairings(_entries(6), "double")
        homes = Counter(p.home_entry_id for p in result)
        assert set(homes.values()) == {5}


class TestDoubleMode:
    def test_each_pair_twice_with_sides_swapped(self):
        for n in range(2, 10):
            result = generate_group_pairings(_entries(n), "double")
            assert len(result) == n * (n - 1)
            ordered = Counter((p.home_entry_id, p.away_entry_id) for p in result)
            for (home, away), count in ordered.items():
                assert count == 1
                assert ordered[(away, home)] == 1

    def test_second_leg_follows_first(self):
        result = generate_group_pairings(_entries(4), "double")
        first_leg = result[:6]
        second_leg = result[6:]
        assert max(p.round_number for p in first_leg) == 3
        assert [p.round_number for p in second_leg] == [4, 4, 5, 5, 6, 6]
        for first, second in zip(first_leg, second_leg):
            assert (second.home_entry_id, second.away_entry_id) == (first.away_entry_id, first.home_entry_id)


class TestValidation:
    def test_one_entry(self):
        with pytest.raises(InsufficientEntries):
            generate_group_pairings(["A"])

    def test_duplicate_entry(self):
        with pytest.raises(DuplicateEntry):
            generate_group_pairings(["A", "A", "B"])

    def test_unknown_mode(self):
        with pytest.raises(FixtureGenerationError):
            generate_group_pairings(["A", "B"], "triple")

    def test_deterministic(self):
        assert generate_group_pairings(_entries(7)) == generate_group_pairings(_entries(7))
