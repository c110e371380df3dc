from fixture_engine.models.inputs import ROUND_ROBIN_MODES, Group, RoundRobinMode, Seed, VenueSlot
from fixture_engine.models.match_plan import MatchPlan, MatchType
from fixture_engine.models.participants import LoserOf, Participant, SeedRef, WinnerOf

__all__ = [
    "Group",
    "LoserOf",
    "MatchPlan",
    "MatchType",
    "Participant",
    "ROUND_ROBIN_MODES",
    "RoundRobinMode",
    "Seed",
    "SeedRef",
    "VenueSlot",
    "WinnerOf",
]
