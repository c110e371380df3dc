"""
Parse generated knockout match ids back into their parts.

"{bracket_id}-r{round}-m{index}" -> BracketMatchRef
"""

import re
from dataclasses import dataclass
from typing import Optional

_BRACKET_MATCH_ID = re.compile(r"^(?P<bracket>.+)-r(?P<round>\d+)-m(?P<index>\d+)$")


@dataclass(frozen=True)
class BracketMatchRef:
    bracket_id: str
    round_number: int
    match_index: int


def parse_bracket_match_id(value: Optional[str]) -> Optional[BracketMatchRef]:
    """Return the parsed reference, or None if value is not a bracket match id."""
    if not value:
        return None
    found = _BRACKET_MATCH_ID.match(value)
    if not found:
        return None
    round_number = int(found.group("round"))
    if round_number < 1:
        return None
    return BracketMatchRef(
        bracket_id=found.group("bracket"),
        round_number=round_number,
        match_index=int(found.group("index")),
    )
