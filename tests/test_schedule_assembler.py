"""
Tests for fixture codes, labels and the merged fixture list.
"""

import pytest

from fixture_engine.errors import FixtureGenerationError
from fixture_engine.models import Group, LoserOf, SeedRef, WinnerOf
from fixture_engine.schemas import ParticipantSource
from fixture_engine.services.bracket_builder import build_knockout_bracket
from fixture_engine.services.round_robin_schedule import generate_round_robin_schedule
from fixture_engine.services.schedule_assembler import (
    assemble_group_fixtures,
    assemble_knockout_fixtures,
    assemble_schedule,
    describe_participant,
    knockout_code,
    participant_source,
)


def _seeds(n: int):
    return [(s, f"E{s}") for s in range(1, n + 1)]


class TestKnockoutCodes:
    def test_code_rules(self):
        assert knockout_code("third_place", 3, 3) == "3P"
        assert knockout_code("final", 3, 3) == "F"
        assert knockout_code("round", 2, 3) == "SF2"
        assert knockout_code("round", 1, 3) == "R1"
        assert knockout_code("round", 1, None) == "R1"

    def test_four_seeds_with_third_place(self):
        result = build_knockout_bracket("s", "br", _seeds(4), third_place_match=True)
        codes = [f.code for f in assemble_knockout_fixtures(result.matches)]
        assert codes == ["SF1", "SF1", "F", "3P"]

    def test_eight_seeds(self):
        result = build_knockout_bracket("s", "br", _seeds(8))
        codes = [f.code for f in assemble_knockout_fixtures(result.matches)]
        assert codes == ["R1", "R1", "R1", "R1", "SF2", "SF2", "F"]

    def test_two_seeds_single_match_coded_final(self):
        result = build_knockout_bracket("s", "br", _seeds(2))
        fixture = assemble_knockout_fixtures(result.matches)[0]
        assert fixture.code == "F"
        assert fixture.type == "round"


class TestLabels:
    def test_winner_and_loser_labels(self):
        result = build_knockout_bracket("s", "br", _seeds(4), third_place_match=True)
        fixtures = {f.match_id: f for f in assemble_knockout_fixtures(result.matches)}
        assert fixtures["br-r2-m1"].home_label == "Winner of SF1"
        assert fixtures["br-third-place"].away_label == "Loser of SF1"
        assert fixtures["br-r1-m1"].home_label == "Seed 1"

    def test_bye_label(self):
        result = build_knockout_bracket("s", "br", _seeds(3))
        fixtures = {f.match_id: f for f in assemble_knockout_fixtures(result.matches)}
        assert fixtures["br-r1-m1"].away_label == "Bye"

    def test_seed_label_uses_seed_number(self):
        assert describe_participant(SeedRef(3, "E3"), {}) == "Seed 3"
        assert describe_participant(SeedRef(4, None), {}) == "Bye"

    def test_unparseable_match_reference(self):
        assert describe_participant(WinnerOf("custom"), {}) == "Winner of custom"

    def test_sources(self):
        assert participant_source(SeedRef(3, "E3")) == ParticipantSource(type="seed", seed=3, entry_id="E3")
        assert participant_source(WinnerOf("br-r1-m1")).match_id == "br-r1-m1"
        assert participant_source(LoserOf("br-r1-m2")).type == "loser"


class TestGroupCodes:
    def test_sequence_per_group(self, start_at, two_venues):
        groups = [
            Group(id="g1", code="A", entry_ids=["a1", "a2", "a3", "a4"]),
            Group(id="g2", code="B", entry_ids=["b1", "b2", "b3"]),
        ]
        schedule = generate_round_robin_schedule("s", groups, two_venues, start_at, 60, 15)
        fixtures = assemble_group_fixtures(schedule.matches, groups)
        assert [f.code for f in fixtures if f.group_id == "g1"] == [f"A-{i:02d}" for i in range(1, 7)]
        assert [f.code for f in fixtures if f.group_id == "g2"] == ["B-01", "B-02", "B-03"]
        assert all(f.kickoff_at is not None and f.venue_id for f in fixtures)

    def test_unknown_group(self, start_at, two_venues):
        groups = [Group(id="g1", code="A", entry_ids=["a1", "a2"])]
        schedule = generate_round_robin_schedule("s", groups, two_venues, start_at, 60, 15)
        with pytest.raises(FixtureGenerationError):
            assemble_group_fixtures(schedule.matches, [])


class TestAssembleSchedule:
    def test_knockout_then_groups(self, start_at, two_venues):
        groups = [Group(id="g1", code="A", entry_ids=["a1", "a2", "a3"])]
        knockout = build_knockout_bracket("s", "br", _seeds(4))
        schedule = generate_round_robin_schedule("s", groups, two_venues, start_at, 60, 15)

        fixture_list = assemble_schedule("s", knockout.matches, schedule.matches, groups)

        assert fixture_list.stage_id == "s"
        assert [f.code for f in fixture_list.fixtures] == ["SF1", "SF1", "F", "A-01", "A-02", "A-03"]
        payload = fixture_list.model_dump(mode="json")
        assert payload["fixtures"][0]["home"] == {"type": "seed", "seed": 1, "entry_id": "E1", "match_id": None}

    def test_empty(self):
        assert assemble_schedule("s").fixtures == []
