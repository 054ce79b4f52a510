"""Group rhyme units into families sharing a phonetic tail."""
from __future__ import annotations

import math
from typing import Dict, List, Sequence

from .models import RhymeFamily, RhymeLink, RhymeUnit
from .similarity import SLANT

MIN_COMPLEXITY = 1
MAX_COMPLEXITY = 5


def group_into_families(units: Sequence[RhymeUnit], links: Sequence[RhymeLink]) -> List[RhymeFamily]:
    """Return families of units with identical phonetic tails, most complex first.

    Grouping uses the exact tail string as a key. Links only decide which
    relationships are reported inside a family, they never merge families,
    so two pairs bridged by a borderline unit stay apart.
    """

    by_tail: Dict[str, List[int]] = {}
    for index, unit in enumerate(units):
        by_tail.setdefault(unit.phonetic_tail, []).append(index)

    families: List[RhymeFamily] = []
    for phonetic_tail, indices in by_tail.items():
        if len(indices) < 2:
            continue
        members = set(indices)
        family_units = [units[i] for i in indices]
        family_links = [
            link for link in links if link.unit_a_index in members and link.unit_b_index in members
        ]
        pattern = family_units[0]
        for unit in family_units[1:]:
            if len(unit.text_span) > len(pattern.text_span):
                pattern = unit
        families.append(
            RhymeFamily(
                pattern_text=pattern.text_span,
                phonetic_tail=phonetic_tail,
                units=tuple(family_units),
                links=tuple(family_links),
                complexity=calculate_complexity(family_units, family_links),
            )
        )

    families.sort(key=lambda family: family.complexity, reverse=True)
    return families


def calculate_complexity(units: Sequence[RhymeUnit], links: Sequence[RhymeLink]) -> int:
    """Score a family from 1 to 5.

    Starts at 1, adds half a point per approximate syllable (two characters
    of phonetic tail each), one point for any slant link and one point for
    chains longer than two units.
    """

    if not units:
        return MIN_COMPLEXITY
    complexity = 1.0
    average_length = sum(len(unit.phonetic_tail) for unit in units) / len(units)
    complexity += math.floor(average_length / 2) * 0.5
    if any(link.match_type == SLANT for link in links):
        complexity += 1
    if len(units) > 2:
        complexity += 1
    return min(MAX_COMPLEXITY, max(MIN_COMPLEXITY, _round_half_up(complexity)))


def _round_half_up(value: float) -> int:
    return int(value + 0.5)
