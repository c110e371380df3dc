"""
Knockout Bracket Builder — seeded single-elimination tree as a flat match list.

Round 1 pairs seed k with seed (bracket_size + 1 - k). Every later round
mirrors the previous one: match i meets match (L - 1 - i). A round-1 match
between an entry and a bye is still emitted, but the next round takes the
entry's SeedRef directly instead of WinnerOf{that match}.

Match ids: "{bracket_id}-r{round}-m{k}" and "{bracket_id}-third-place".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from fixture_engine.errors import BracketPairingFailed
from fixture_engine.models import LoserOf, MatchPlan, Participant, SeedRef, WinnerOf
from fixture_engine.services.seed_normalizer import (
    SeedInput,
    first_round_pairs,
    next_power_of_two,
    normalize_seeds,
)

logger = logging.getLogger(__name__)


@dataclass
class _DraftMatch:
    """In-progress match plus its transient auto-advance participant."""

    plan: MatchPlan
    auto_advance: Optional[Participant] = None


@dataclass
class KnockoutBracketResult:
    matches: List[MatchPlan] = field(default_factory=list)
    bracket_size: int = 0


def bracket_match_id(bracket_id: str, round_number: int, index: int) -> str:
    return f"{bracket_id}-r{round_number}-m{index}"


def third_place_match_id(bracket_id: str) -> str:
    return f"{bracket_id}-third-place"


def derive_auto_advance(home: Participant, away: Participant) -> Optional[Participant]:
    """Return the populated side when exactly one side is a bye seed."""
    if isinstance(home, SeedRef) and isinstance(away, SeedRef):
        if home.entry_id is not None and away.entry_id is None:
            return home
        if home.entry_id is None and away.entry_id is not None:
            return away
    return None


def _forward(draft: _DraftMatch) -> Participant:
    if draft.auto_advance is not None:
        return draft.auto_advance
    return WinnerOf(match_id=draft.plan.id)


def build_knockout_bracket(
    stage_id: str,
    bracket_id: str,
    seeds: Sequence[SeedInput],
    third_place_match: bool = False,
) -> KnockoutBracketResult:
    """
    Build every match of a single-elimination bracket.

    Args:
        stage_id: Stage the bracket belongs to
        bracket_id: Prefix for generated match ids
        seeds: Seed objects or (seed, entry_id) pairs; entry_id None = bye
        third_place_match: Add a match between the semifinal losers

    Returns:
        KnockoutBracketResult with matches ordered round by round, then
        the third-place match (if any).

    Note:
        A 2-seed bracket yields one match of type "round", not "final".
        "final" is only assigned when a 2-match round collapses.
    """
    seeds_by_number = normalize_seeds(seeds)
    bracket_size = len(seeds_by_number)

    rounds: List[List[_DraftMatch]] = []

    first_round: List[_DraftMatch] = []
    for index, (home_seed, away_seed) in enumerate(first_round_pairs(bracket_size), start=1):
        home = seeds_by_number[home_seed]
        away = seeds_by_number[away_seed]
        plan = MatchPlan(
            id=bracket_match_id(bracket_id, 1, index),
            stage_id=stage_id,
            bracket_id=bracket_id,
            round_number=1,
            type="round",
            home=home,
            away=away,
        )
        first_round.append(_DraftMatch(plan=plan, auto_advance=derive_auto_advance(home, away)))
    rounds.append(first_round)

    previous = first_round
    round_number = 2
    while len(previous) > 1:
        if len(previous) % 2 != 0:
            raise BracketPairingFailed(round_number=round_number, match_count=len(previous))

        current: List[_DraftMatch] = []
        last = len(previous) - 1
        for index in range(len(previous) // 2):
            home = _forward(previous[index])
            away = _forward(previous[last - index])
            plan = MatchPlan(
                id=bracket_match_id(bracket_id, round_number, index + 1),
                stage_id=stage_id,
                bracket_id=bracket_id,
                round_number=round_number,
                type="final" if len(previous) == 2 else "round",
                home=home,
                away=away,
            )
            current.append(_DraftMatch(plan=plan, auto_advance=derive_auto_advance(home, away)))

        rounds.append(current)
        previous = current
        round_number += 1

    # Drafts are dropped here; auto_advance never leaves this function
    matches = [draft.plan for round_matches in rounds for draft in round_matches]

    third_place = _third_place(stage_id, bracket_id, rounds) if third_place_match else None
    if third_place is not None:
        matches.append(third_place)

    logger.debug(
        "Built bracket %s: size=%d byes=%d rounds=%d matches=%d third_place=%s",
        bracket_id,
        bracket_size,
        sum(1 for ref in seeds_by_number.values() if ref.is_bye),
        len(rounds),
        len(matches),
        third_place is not None,
    )

    return KnockoutBracketResult(matches=matches, bracket_size=bracket_size)


def _third_place(
    stage_id: str,
    bracket_id: str,
    rounds: List[List[_DraftMatch]],
) -> Optional[MatchPlan]:
    """Third-place match from the two semifinals, or None when there are not exactly two."""
    if len(rounds) < 2:
        return None

    semifinals = rounds[-2]
    if len(semifinals) != 2:
        return None

    first, second = semifinals
    return MatchPlan(
        id=third_place_match_id(bracket_id),
        stage_id=stage_id,
        bracket_id=bracket_id,
        round_number=rounds[-1][0].plan.round_number,
        type="third_place",
        home=LoserOf(match_id=first.plan.id),
        away=LoserOf(match_id=second.plan.id),
    )


def knockout_match_count(seed_count: int, third_place_match: bool = False) -> int:
    """Matches a bracket of seed_count distinct seeds produces."""
    size = next_power_of_two(seed_count)
    total = size - 1
    if third_place_match and size >= 4:
        total += 1
    return total
