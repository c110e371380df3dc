"""
Schedule Assembler — uniform fixture list with human-readable codes.

Knockout codes (per bracket, from round numbers):
  3P             third-place match
  F              round_number == the bracket's last round
  SF{round}      the round before it
  R{round}       any earlier round

Group codes: "{group_code}-{n:02d}", n counting from 1 per group in the
order the matches are given (pairing order from the round-robin schedule).
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from fixture_engine.errors import FixtureGenerationError
from fixture_engine.models import Group, LoserOf, MatchPlan, Participant, SeedRef, WinnerOf
from fixture_engine.schemas import Fixture, FixtureList, ParticipantSource
from fixture_engine.utils.match_ids import parse_bracket_match_id

logger = logging.getLogger(__name__)


def knockout_code(match_type: str, round_number: int, final_round: Optional[int]) -> str:
    if match_type == "third_place":
        return "3P"
    if final_round is not None and round_number == final_round:
        return "F"
    if final_round is not None and round_number == final_round - 1:
        return f"SF{round_number}"
    return f"R{round_number}"


def final_rounds_by_bracket(matches: Iterable[MatchPlan]) -> Dict[str, int]:
    """Highest round number seen per bracket id."""
    rounds: Dict[str, int] = {}
    for match in matches:
        if match.bracket_id is None:
            continue
        if match.round_number > rounds.get(match.bracket_id, 0):
            rounds[match.bracket_id] = match.round_number
    return rounds


def participant_source(participant: Participant) -> ParticipantSource:
    if isinstance(participant, SeedRef):
        return ParticipantSource(type="seed", seed=participant.seed, entry_id=participant.entry_id)
    if isinstance(participant, WinnerOf):
        return ParticipantSource(type="winner", match_id=participant.match_id)
    if isinstance(participant, LoserOf):
        return ParticipantSource(type="loser", match_id=participant.match_id)
    raise TypeError(f"Unknown participant type: {type(participant).__name__}")


def describe_participant(participant: Participant, final_rounds: Dict[str, int]) -> str:
    """
    Display label for a match side.

      SeedRef with entry  -> "Seed 3"
      SeedRef bye         -> "Bye"
      WinnerOf / LoserOf  -> "Winner of SF2" / "Loser of SF2"
    """
    if isinstance(participant, SeedRef):
        return f"Seed {participant.seed}" if participant.entry_id is not None else "Bye"

    if isinstance(participant, (WinnerOf, LoserOf)):
        prefix = "Winner of" if isinstance(participant, WinnerOf) else "Loser of"
        ref = parse_bracket_match_id(participant.match_id)
        if ref is None:
            return f"{prefix} {participant.match_id}"
        code = knockout_code("round", ref.round_number, final_rounds.get(ref.bracket_id))
        return f"{prefix} {code}"

    raise TypeError(f"Unknown participant type: {type(participant).__name__}")


def _to_fixture(match: MatchPlan, code: str, final_rounds: Dict[str, int]) -> Fixture:
    return Fixture(
        code=code,
        match_id=match.id,
        stage_id=match.stage_id,
        bracket_id=match.bracket_id,
        group_id=match.group_id,
        round_number=match.round_number,
        type=match.type,
        home=participant_source(match.home),
        away=participant_source(match.away),
        home_label=describe_participant(match.home, final_rounds),
        away_label=describe_participant(match.away, final_rounds),
        kickoff_at=match.kickoff_at,
        venue_id=match.venue_id,
    )


def assemble_knockout_fixtures(matches: Sequence[MatchPlan]) -> List[Fixture]:
    """Code every knockout match, keeping the bracket builder's order."""
    final_rounds = final_rounds_by_bracket(matches)
    return [
        _to_fixture(
            match,
            knockout_code(match.type, match.round_number, final_rounds.get(match.bracket_id)),
            final_rounds,
        )
        for match in matches
    ]


def assemble_group_fixtures(matches: Sequence[MatchPlan], groups: Sequence[Group]) -> List[Fixture]:
    """Code every group match as "{group_code}-{n:02d}"."""
    codes = {group.id: group.code for group in groups}
    sequence: Dict[str, int] = {}
    fixtures: List[Fixture] = []

    for match in matches:
        if match.group_id not in codes:
            raise FixtureGenerationError(
                f"Match {match.id} references unknown group {match.group_id}.",
                match_id=match.id,
                group_id=match.group_id,
            )
        sequence[match.group_id] = sequence.get(match.group_id, 0) + 1
        code = f"{codes[match.group_id]}-{sequence[match.group_id]:02d}"
        fixtures.append(_to_fixture(match, code, {}))

    return fixtures


def assemble_schedule(
    stage_id: str,
    knockout_matches: Sequence[MatchPlan] = (),
    group_matches: Sequence[MatchPlan] = (),
    groups: Sequence[Group] = (),
) -> FixtureList:
    """Merge knockout and group output into one list: knockout first, then groups."""
    fixtures = assemble_knockout_fixtures(knockout_matches) + assemble_group_fixtures(group_matches, groups)
    logger.debug(
        "Assembled stage %s: knockout=%d group=%d",
        stage_id,
        len(knockout_matches),
        len(group_matches),
    )
    return FixtureList(stage_id=stage_id, fixtures=fixtures)
