"""
Canonical parser for venue lists.

Handles both string ("Court 1, Court 2") and list (["Court 1", "Court 2"])
inputs so a string is never split into characters.
"""
from typing import List, Optional, Sequence, Union

from fixture_engine.models import VenueSlot


def parse_venues(venues: Optional[Union[str, Sequence[Union[str, VenueSlot]]]]) -> List[VenueSlot]:
    """
    Normalize venues to a list of VenueSlot, keeping order.

    - None or "" -> []
    - String (e.g. "A,B,C") -> split on commas, strip whitespace, drop empties
    - Sequence -> VenueSlot kept as-is, anything else coerced with str(x).strip(), empties dropped
    """
    if venues is None:
        return []
    if isinstance(venues, str):
        return [VenueSlot(venue_id=x.strip()) for x in venues.split(",") if x.strip()]

    result: List[VenueSlot] = []
    for item in venues:
        if isinstance(item, VenueSlot):
            result.append(item)
            continue
        label = str(item).strip()
        if label:
            result.append(VenueSlot(venue_id=label))
    return result
