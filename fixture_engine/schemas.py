"""
Uniform fixture output consumed by whatever persists or renders the schedule.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

# ============================================================================
# Pydantic Output Models
# ============================================================================


class ParticipantSource(BaseModel):
    type: Literal["seed", "winner", "loser"]
    seed: Optional[int] = None
    entry_id: Optional[str] = None
    match_id: Optional[str] = None


class Fixture(BaseModel):
    code: str
    match_id: str
    stage_id: str
    bracket_id: Optional[str] = None
    group_id: Optional[str] = None
    round_number: int
    type: Literal["round", "final", "third_place", "group"]
    home: ParticipantSource
    away: ParticipantSource
    home_label: str
    away_label: str
    kickoff_at: Optional[datetime] = None
    venue_id: Optional[str] = None


class FixtureList(BaseModel):
    stage_id: str
    fixtures: List[Fixture]
