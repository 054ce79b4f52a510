"""Dataclasses describing parsed lyrics and extracted rhymes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

SECTION_TYPES = ("verse", "chorus", "intro", "outro", "bridge", "hook", "unknown")


@dataclass(frozen=True)
class Line:
    """A single lyric line.

    ``text`` keeps ad-lib remarks, ``clean_text`` has them stripped and
    ``tail`` is the trailing word span used for rhyme comparison.
    """

    index: int
    global_index: int
    text: str
    clean_text: str
    tail: str


@dataclass
class Section:
    type: str
    name: str
    lines: List[Line] = field(default_factory=list)


@dataclass
class Track:
    title: str
    sections: List[Section] = field(default_factory=list)
    all_lines: List[Line] = field(default_factory=list)


@dataclass(frozen=True)
class RhymeUnit:
    line_index: int
    global_line_index: int
    text: str
    text_span: str
    char_start: int
    char_end: int
    phonetic_tail: str
    section: str


@dataclass(frozen=True)
class RhymeLink:
    """Rhyme between two units, referenced by position in the unit list."""

    unit_a_index: int
    unit_b_index: int
    match_type: str
    similarity: float
    distance_lines: int


@dataclass(frozen=True)
class RhymeFamily:
    pattern_text: str
    phonetic_tail: str
    units: Tuple[RhymeUnit, ...]
    links: Tuple[RhymeLink, ...]
    complexity: int


@dataclass(frozen=True)
class RhymeCandidate:
    """Low-similarity pair worth a second opinion from a verifier."""

    line_a: str
    line_b: str
    tail_a: str
    tail_b: str
    phonetic_tail_a: str
    phonetic_tail_b: str
    distance: int
    rule_similarity: float


@dataclass(frozen=True)
class VerifiedRhyme:
    tail_a: str
    tail_b: str
    is_rhyme: bool
    rhyme_type: str
    confidence: float
    explanation: Optional[str] = None


@dataclass
class ExtractionResult:
    units: List[RhymeUnit] = field(default_factory=list)
    links: List[RhymeLink] = field(default_factory=list)
    families: List[RhymeFamily] = field(default_factory=list)
    candidates: Optional[List[RhymeCandidate]] = None
    verified: List[VerifiedRhyme] = field(default_factory=list)


@dataclass(frozen=True)
class PhoneticAnalysis:
    original: str
    phonetic_full: str
    phonetic_tail: str
    simplified: str
    syllable_count: int
    source: str = "rules"
