"""
Match participants — a closed union of three variants.

SeedRef   : a direct seed slot (entry_id None = bye)
WinnerOf  : whoever wins the referenced match
LoserOf   : whoever loses the referenced match (third place only)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class SeedRef:
    seed: int
    entry_id: Optional[str] = None

    @property
    def is_bye(self) -> bool:
        return self.entry_id is None


@dataclass(frozen=True)
class WinnerOf:
    match_id: str


@dataclass(frozen=True)
class LoserOf:
    match_id: str


Participant = Union[SeedRef, WinnerOf, LoserOf]
