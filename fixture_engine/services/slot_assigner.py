"""
Fixture Time/Venue Assigner — kickoff times and venues in waves.

A wave is up to len(venues) matches sharing one kickoff time, the k-th
match of a wave taking venues[k]. A wave closes when every venue is used
or the round ends; the next wave starts duration + break minutes later.
Kickoff times are therefore non-decreasing, and no venue hosts two
matches in the same wave.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple

from fixture_engine.config import get_settings
from fixture_engine.errors import InvalidBreak, InvalidDuration, InvalidStartTime, NoVenuesProvided
from fixture_engine.models import VenueSlot
from fixture_engine.services.rr_pairing import GroupPairing
from fixture_engine.utils.venues import parse_venues

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledPairing:
    round_number: int
    home_entry_id: str
    away_entry_id: str
    kickoff_at: datetime
    venue_id: str


def resolve_timing(
    match_duration_minutes: Optional[int],
    break_minutes: Optional[int],
) -> Tuple[int, int]:
    """Fill omitted duration / break from configured defaults."""
    settings = get_settings()
    if match_duration_minutes is None:
        match_duration_minutes = settings.default_match_minutes
    if break_minutes is None:
        break_minutes = settings.default_break_minutes
    return match_duration_minutes, break_minutes


def validate_slot_parameters(
    venues: Sequence[VenueSlot],
    start_at: datetime,
    match_duration_minutes: int,
    break_minutes: int,
    max_break_minutes: Optional[int] = None,
) -> None:
    """Raise the matching error for the first malformed scheduling parameter."""
    if not venues:
        raise NoVenuesProvided()

    if not isinstance(start_at, datetime):
        raise InvalidStartTime(
            f"start_at must be a datetime, got {type(start_at).__name__}.",
        )

    if match_duration_minutes is None or match_duration_minutes <= 0:
        raise InvalidDuration(
            f"Match duration must be positive, got {match_duration_minutes}.",
            match_duration_minutes=match_duration_minutes,
        )

    if max_break_minutes is None:
        max_break_minutes = get_settings().max_break_minutes
    if break_minutes is None or break_minutes < 0 or break_minutes > max_break_minutes:
        raise InvalidBreak(
            f"Breaks must be between 0 and {max_break_minutes} minutes, got {break_minutes}.",
            break_minutes=break_minutes,
            max_break_minutes=max_break_minutes,
        )


class SlotCursor:
    """
    Walks (kickoff, venue) slots wave by wave.

    One cursor may be shared across several groups so their matches never
    collide on a venue.
    """

    def __init__(
        self,
        venues: Sequence[VenueSlot],
        start_at: datetime,
        match_duration_minutes: int,
        break_minutes: int,
    ):
        self.venues = list(venues)
        self.current = start_at
        self.step = timedelta(minutes=match_duration_minutes + break_minutes)
        self.venue_index = 0
        self.waves = 0

    def next_slot(self) -> Tuple[datetime, str]:
        if self.venue_index >= len(self.venues):
            self.close_wave()
        venue = self.venues[self.venue_index]
        self.venue_index += 1
        return self.current, venue.venue_id

    def close_wave(self) -> None:
        """Advance to the next kickoff if the current wave holds any match."""
        if self.venue_index == 0:
            return
        self.current = self.current + self.step
        self.venue_index = 0
        self.waves += 1

    def assign(self, pairings: Sequence[GroupPairing]) -> List[ScheduledPairing]:
        """Assign slots in round order; each round starts a fresh wave."""
        ordered = sorted(pairings, key=lambda p: p.round_number)
        result: List[ScheduledPairing] = []
        current_round: Optional[int] = None

        for pairing in ordered:
            if current_round is not None and pairing.round_number != current_round:
                self.close_wave()
            current_round = pairing.round_number

            kickoff_at, venue_id = self.next_slot()
            result.append(
                ScheduledPairing(
                    round_number=pairing.round_number,
                    home_entry_id=pairing.home_entry_id,
                    away_entry_id=pairing.away_entry_id,
                    kickoff_at=kickoff_at,
                    venue_id=venue_id,
                )
            )

        self.close_wave()
        return result


def assign_slots(
    pairings: Sequence[GroupPairing],
    venues: Sequence[VenueSlot],
    start_at: datetime,
    match_duration_minutes: Optional[int] = None,
    break_minutes: Optional[int] = None,
) -> List[ScheduledPairing]:
    """
    Give each pairing a kickoff time and venue.

    Args:
        pairings: Output of generate_group_pairings (any order; sorted by round)
        venues: Venues in rotation order (VenueSlots, ids, or "A,B,C")
        start_at: Kickoff of the first wave
        match_duration_minutes: Defaults to FIXTURE_DEFAULT_MATCH_MINUTES
        break_minutes: Defaults to FIXTURE_DEFAULT_BREAK_MINUTES

    Raises:
        NoVenuesProvided, InvalidDuration, InvalidBreak, InvalidStartTime
    """
    venues = parse_venues(venues)
    match_duration_minutes, break_minutes = resolve_timing(match_duration_minutes, break_minutes)
    validate_slot_parameters(venues, start_at, match_duration_minutes, break_minutes)

    cursor = SlotCursor(venues, start_at, match_duration_minutes, break_minutes)
    result = cursor.assign(pairings)

    logger.debug(
        "Assigned %d pairings to %d venues in %d waves starting %s",
        len(result),
        len(cursor.venues),
        cursor.waves,
        start_at.isoformat(),
    )
    return result
