"""
Fixture generation errors.

Every failure is a local validation error raised before any output exists.
Each error carries problem-details fields so a caller can turn it into a
user-facing response without the engine knowing about transport.
"""

from typing import Any, Dict, Optional

PROBLEM_BASE = "https://tournament.app/problems"


class FixtureGenerationError(ValueError):
    """Base class for all fixture engine errors."""

    problem_type = f"{PROBLEM_BASE}/generation/invalid"
    title = "Invalid fixture input"
    status = 400
    default_detail = "The fixture generator rejected the supplied input."

    def __init__(self, detail: Optional[str] = None, **context: Any):
        self.detail = detail or self.default_detail
        self.context = context
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "type": self.problem_type,
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
        }
        if self.context:
            result["context"] = dict(self.context)
        return result


# ============================================================================
# Knockout
# ============================================================================


class InsufficientSeeds(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/bracket/insufficient-seeds"
    title = "Not enough seeds"
    default_detail = "Provide at least two seeds to build a knockout bracket."


class InvalidSeedNumber(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/bracket/invalid-seed"
    title = "Invalid seed number"
    default_detail = "Seed numbers must be positive integers."


class DuplicateSeedNumber(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/bracket/duplicate-seed"
    title = "Duplicate seed number"
    default_detail = "A seed number is defined more than once."


class BracketPairingFailed(FixtureGenerationError):
    """Internal invariant breach while collapsing rounds; never user input."""

    problem_type = f"{PROBLEM_BASE}/bracket/pairing-failed"
    title = "Bracket pairing failed"
    status = 500
    default_detail = "An internal error occurred while pairing knockout matches."


# ============================================================================
# Round robin
# ============================================================================


class NoGroupsProvided(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/round-robin/no-groups"
    title = "At least one group is required"
    default_detail = "Select one or more groups before generating fixtures."


class InsufficientEntries(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/round-robin/insufficient-entries"
    title = "Not enough entries"
    default_detail = "A round-robin group requires at least two entries."


class DuplicateEntry(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/round-robin/duplicate-entry"
    title = "Duplicate entries detected"
    default_detail = "Each entry can only be scheduled once per group."


# ============================================================================
# Slot assignment
# ============================================================================


class NoVenuesProvided(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/round-robin/no-venues"
    title = "No venues available"
    default_detail = "Provide at least one venue to allocate matches."


class InvalidDuration(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/round-robin/invalid-duration"
    title = "Invalid match duration"
    default_detail = "Match duration must be a positive number of minutes."


class InvalidBreak(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/round-robin/invalid-break"
    title = "Break length is invalid"
    default_detail = "Breaks must be a non-negative number of minutes."


class InvalidStartTime(FixtureGenerationError):
    problem_type = f"{PROBLEM_BASE}/round-robin/invalid-start"
    title = "Invalid start time"
    default_detail = "Provide a valid start timestamp to seed the schedule."
