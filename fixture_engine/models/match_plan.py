from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

from fixture_engine.models.participants import Participant

MatchType = Literal["round", "final", "third_place", "group"]


@dataclass(frozen=True)
class MatchPlan:
    """One scheduled fixture produced by a generator.

    Knockout matches carry bracket_id, group matches carry group_id.
    kickoff_at / venue_id are only populated by slot assignment.
    """

    id: str
    stage_id: str
    round_number: int
    type: MatchType
    home: Participant
    away: Participant
    bracket_id: Optional[str] = None
    group_id: Optional[str] = None
    kickoff_at: Optional[datetime] = None
    venue_id: Optional[str] = None
