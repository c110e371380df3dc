from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

RoundRobinMode = Literal["single", "double"]

ROUND_ROBIN_MODES: Tuple[str, ...] = ("single", "double")


@dataclass(frozen=True)
class Seed:
    """Knockout seed input. entry_id None marks a deliberate bye slot."""

    seed: int
    entry_id: Optional[str] = None


@dataclass(frozen=True)
class Group:
    id: str
    code: str
    entry_ids: Tuple[str, ...]
    round_robin_mode: RoundRobinMode = "single"

    def __post_init__(self):
        # Accept any sequence but store a tuple so the group stays hashable
        object.__setattr__(self, "entry_ids", tuple(self.entry_ids))


@dataclass(frozen=True)
class VenueSlot:
    venue_id: str
