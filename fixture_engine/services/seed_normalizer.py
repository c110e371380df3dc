"""
Seed Normalizer — validate a sparse seed list and pad it to bracket size.

Missing seed numbers up to the next power of two become explicit byes
(SeedRef with entry_id None). Input seeds are never mutated.
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

from fixture_engine.errors import DuplicateEntry, DuplicateSeedNumber, InsufficientSeeds, InvalidSeedNumber
from fixture_engine.models import Seed, SeedRef

MIN_SEEDS = 2

SeedInput = Union[Seed, Tuple[int, Optional[str]]]


def next_power_of_two(value: int) -> int:
    """Smallest power of two >= value (1 for value <= 1)."""
    power = 1
    while power < value:
        power *= 2
    return power


def coerce_seed(raw: SeedInput) -> Seed:
    """Accept a Seed or a (seed, entry_id) pair."""
    if isinstance(raw, Seed):
        return raw
    seed, entry_id = raw
    return Seed(seed=seed, entry_id=entry_id)


def normalize_seeds(seeds: Sequence[SeedInput]) -> Dict[int, SeedRef]:
    """
    Build the seed-number -> SeedRef mapping for a knockout bracket.

    Raises:
        InsufficientSeeds: fewer than two seeds supplied
        InvalidSeedNumber: a seed number is not a positive integer, or is
            larger than the padded bracket size
        DuplicateSeedNumber: two seeds share a number
        DuplicateEntry: one entry is bound to two seed numbers

    Returns:
        Mapping covering every seed number 1..bracket_size.
    """
    if len(seeds) < MIN_SEEDS:
        raise InsufficientSeeds(seed_count=len(seeds))

    by_number: Dict[int, SeedRef] = {}
    seeded_entries: Dict[str, int] = {}
    for raw in seeds:
        seed = coerce_seed(raw)
        number = seed.seed
        if isinstance(number, bool) or not isinstance(number, int) or number < 1:
            raise InvalidSeedNumber(
                f"Seed numbers must be positive integers, got {number!r}.",
                seed=number,
            )
        if number in by_number:
            raise DuplicateSeedNumber(
                f"Seed {number} is defined more than once.",
                seed=number,
            )
        if seed.entry_id is not None:
            if seed.entry_id in seeded_entries:
                raise DuplicateEntry(
                    f"Entry {seed.entry_id} is seeded as both {seeded_entries[seed.entry_id]} and {number}.",
                    entry_id=seed.entry_id,
                    seeds=[seeded_entries[seed.entry_id], number],
                )
            seeded_entries[seed.entry_id] = number
        by_number[number] = SeedRef(seed=number, entry_id=seed.entry_id)

    bracket_size = next_power_of_two(len(by_number))
    for number in sorted(by_number):
        if number > bracket_size:
            raise InvalidSeedNumber(
                f"Seed {number} does not fit a {bracket_size}-slot bracket.",
                seed=number,
                bracket_size=bracket_size,
            )

    for number in range(1, bracket_size + 1):
        if number not in by_number:
            by_number[number] = SeedRef(seed=number, entry_id=None)

    return by_number


def first_round_pairs(bracket_size: int) -> List[Tuple[int, int]]:
    """
    Pair lowest remaining with highest remaining seed number.

      4 -> [(1, 4), (2, 3)]
      8 -> [(1, 8), (2, 7), (3, 6), (4, 5)]
    """
    numbers = list(range(1, bracket_size + 1))
    pairs: List[Tuple[int, int]] = []
    while len(numbers) > 1:
        pairs.append((numbers.pop(0), numbers.pop()))
    return pairs

