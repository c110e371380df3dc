"""
Round-Robin Pairing Generator — circle method for a single group.

Position 0 is anchored; each round pairs position i with position (n'-1-i)
and then rotates positions 1..n'-1 one step (position 1 moves to the end).
Odd groups get a BYE placeholder; any pairing with it is dropped.

Home/away: each pair is oriented by seating distance, independent of the
round. For entries seated at a < b in the input list, a hosts when
b - a <= n // 2, otherwise b hosts. Every entry hosts either floor or ceil
of half its matches (exactly half when n is odd).

  4 entries A B C D -> A hosts B, C; B hosts C, D; C hosts D; D hosts A

Double mode appends the whole first cycle again, renumbered after it, with
every pair's sides reversed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from fixture_engine.errors import DuplicateEntry, FixtureGenerationError, InsufficientEntries
from fixture_engine.models import ROUND_ROBIN_MODES, RoundRobinMode

logger = logging.getLogger(__name__)

MIN_ENTRIES = 2

_BYE = object()


@dataclass(frozen=True)
class GroupPairing:
    round_number: int
    home_entry_id: str
    away_entry_id: str


def rr_round_count(entry_count: int, mode: RoundRobinMode = "single") -> int:
    """
    Rounds needed for a group.
    Even n: n-1 rounds. Odd n: n rounds (one entry sits out each round).
    Doubled in double mode.
    """
    padded = entry_count + 1 if entry_count % 2 == 1 else entry_count
    rounds = max(padded - 1, 0)
    return rounds * 2 if mode == "double" else rounds


def rr_match_count(entry_count: int, mode: RoundRobinMode = "single") -> int:
    """C(n, 2) for single mode, n*(n-1) for double mode."""
    single = (entry_count * (entry_count - 1)) // 2
    return single * 2 if mode == "double" else single


def validate_mode(mode: str) -> None:
    if mode not in ROUND_ROBIN_MODES:
        raise FixtureGenerationError(
            f"Unknown round-robin mode {mode!r}; expected one of {', '.join(ROUND_ROBIN_MODES)}.",
            mode=mode,
        )


def validate_entries(entry_ids: Sequence[str], group_id: str = "") -> None:
    label = f"Group {group_id}" if group_id else "A round-robin group"
    if len(entry_ids) < MIN_ENTRIES:
        raise InsufficientEntries(
            f"{label} requires at least {MIN_ENTRIES} entries.",
            group_id=group_id or None,
            entry_count=len(entry_ids),
        )

    seen = set()
    for entry_id in entry_ids:
        if entry_id in seen:
            raise DuplicateEntry(
                f"{label} lists entry {entry_id} more than once.",
                group_id=group_id or None,
                entry_id=entry_id,
            )
        seen.add(entry_id)


def orient_pair(a: str, b: str, seating: Dict[str, int], reach: int) -> Tuple[str, str]:
    """(home, away) for two entries given their seating indices."""
    low, high = (a, b) if seating[a] < seating[b] else (b, a)
    if seating[high] - seating[low] <= reach:
        return low, high
    return high, low


def generate_group_pairings(
    entry_ids: Sequence[str],
    mode: RoundRobinMode = "single",
) -> List[GroupPairing]:
    """
    Ordered (round_number, home, away) pairings for one group.

    Args:
        entry_ids: Unique entry identifiers in seating order
        mode: "single" (each pair once) or "double" (twice, sides reversed)

    Returns:
        Pairings sorted by round, then by seating position within the round.
    """
    validate_mode(mode)
    validate_entries(entry_ids)

    positions: List[object] = list(entry_ids)
    if len(positions) % 2 == 1:
        positions.append(_BYE)

    n2 = len(positions)
    half = n2 // 2
    rounds_count = n2 - 1

    seating = {entry_id: index for index, entry_id in enumerate(entry_ids)}
    reach = len(entry_ids) // 2

    first_leg: List[GroupPairing] = []
    for round_number in range(1, rounds_count + 1):
        for i in range(half):
            a, b = positions[i], positions[n2 - 1 - i]
            if a is _BYE or b is _BYE:
                continue
            home, away = orient_pair(a, b, seating, reach)
            first_leg.append(GroupPairing(round_number, home, away))
        # Keep 0, move position 1 to the end, shift the rest down
        positions = [positions[0]] + positions[2:] + [positions[1]]

    if mode == "single":
        result = first_leg
    else:
        second_leg = [
            GroupPairing(p.round_number + rounds_count, p.away_entry_id, p.home_entry_id)
            for p in first_leg
        ]
        result = first_leg + second_leg

    logger.debug(
        "Generated %d %s round-robin pairings over %d rounds for %d entries",
        len(result),
        mode,
        rounds_count * (2 if mode == "double" else 1),
        len(entry_ids),
    )
    return result
