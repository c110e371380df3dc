"""
Round-robin stage schedule across one or more groups.

Every group is validated before any match is produced. Groups are then
scheduled one after another in input order on a single shared slot cursor,
so matches from different groups never share a venue in the same wave.
Group matches reference entries as SeedRef(seed=position in group).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from fixture_engine.errors import NoGroupsProvided
from fixture_engine.models import Group, MatchPlan, SeedRef, VenueSlot
from fixture_engine.services.rr_pairing import generate_group_pairings, validate_entries, validate_mode
from fixture_engine.services.slot_assigner import SlotCursor, resolve_timing, validate_slot_parameters
from fixture_engine.utils.venues import parse_venues

logger = logging.getLogger(__name__)


@dataclass
class RoundRobinScheduleResult:
    matches: List[MatchPlan] = field(default_factory=list)

    def for_group(self, group_id: str) -> List[MatchPlan]:
        return [m for m in self.matches if m.group_id == group_id]


def group_match_id(group_id: str, round_number: int, index: int) -> str:
    return f"{group_id}-r{round_number}-m{index}"


def generate_round_robin_schedule(
    stage_id: str,
    groups: Sequence[Group],
    venues: Sequence[VenueSlot],
    start_at: datetime,
    match_duration_minutes: Optional[int] = None,
    break_minutes: Optional[int] = None,
) -> RoundRobinScheduleResult:
    """
    Generate, slot and order every group match of a stage.

    Raises:
        NoGroupsProvided, InsufficientEntries, DuplicateEntry,
        NoVenuesProvided, InvalidDuration, InvalidBreak, InvalidStartTime
    """
    if not groups:
        raise NoGroupsProvided()

    venues = parse_venues(venues)
    match_duration_minutes, break_minutes = resolve_timing(match_duration_minutes, break_minutes)
    validate_slot_parameters(venues, start_at, match_duration_minutes, break_minutes)
    for group in groups:
        validate_entries(group.entry_ids, group_id=group.id)
        validate_mode(group.round_robin_mode)

    cursor = SlotCursor(venues, start_at, match_duration_minutes, break_minutes)
    matches: List[MatchPlan] = []

    for group in groups:
        position: Dict[str, int] = {entry_id: i for i, entry_id in enumerate(group.entry_ids, start=1)}
        pairings = generate_group_pairings(group.entry_ids, group.round_robin_mode)

        per_round: Dict[int, int] = {}
        for scheduled in cursor.assign(pairings):
            per_round[scheduled.round_number] = per_round.get(scheduled.round_number, 0) + 1
            matches.append(
                MatchPlan(
                    id=group_match_id(group.id, scheduled.round_number, per_round[scheduled.round_number]),
                    stage_id=stage_id,
                    group_id=group.id,
                    round_number=scheduled.round_number,
                    type="group",
                    home=SeedRef(seed=position[scheduled.home_entry_id], entry_id=scheduled.home_entry_id),
                    away=SeedRef(seed=position[scheduled.away_entry_id], entry_id=scheduled.away_entry_id),
                    kickoff_at=scheduled.kickoff_at,
                    venue_id=scheduled.venue_id,
                )
            )

    # Stable: groups scheduled back to back keep their own order
    matches.sort(key=lambda m: m.kickoff_at)

    logger.debug(
        "Generated round-robin stage %s: groups=%d matches=%d waves=%d",
        stage_id,
        len(groups),
        len(matches),
        cursor.waves,
    )
    return RoundRobinScheduleResult(matches=matches)
