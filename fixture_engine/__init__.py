"""Deterministic fixture generation for knockout brackets and round-robin groups."""

from fixture_engine.errors import (
    BracketPairingFailed,
    DuplicateEntry,
    DuplicateSeedNumber,
    FixtureGenerationError,
    InsufficientEntries,
    InsufficientSeeds,
    InvalidBreak,
    InvalidDuration,
    InvalidSeedNumber,
    InvalidStartTime,
    NoGroupsProvided,
    NoVenuesProvided,
)
from fixture_engine.models import Group, LoserOf, MatchPlan, Seed, SeedRef, VenueSlot, WinnerOf
from fixture_engine.services.bracket_builder import KnockoutBracketResult, build_knockout_bracket
from fixture_engine.services.round_robin_schedule import RoundRobinScheduleResult, generate_round_robin_schedule
from fixture_engine.services.rr_pairing import GroupPairing, generate_group_pairings
from fixture_engine.services.schedule_assembler import assemble_schedule
from fixture_engine.services.slot_assigner import ScheduledPairing, assign_slots

__version__ = "0.1.0"

__all__ = [
    "BracketPairingFailed",
    "DuplicateEntry",
    "DuplicateSeedNumber",
    "FixtureGenerationError",
    "Group",
    "GroupPairing",
    "InsufficientEntries",
    "InsufficientSeeds",
    "InvalidBreak",
    "InvalidDuration",
    "InvalidSeedNumber",
    "InvalidStartTime",
    "KnockoutBracketResult",
    "LoserOf",
    "MatchPlan",
    "NoGroupsProvided",
    "NoVenuesProvided",
    "RoundRobinScheduleResult",
    "ScheduledPairing",
    "Seed",
    "SeedRef",
    "VenueSlot",
    "WinnerOf",
    "assemble_schedule",
    "assign_slots",
    "build_knockout_bracket",
    "generate_group_pairings",
    "generate_round_robin_schedule",
]
