"""Sliding-window rhyme detection over the lines of a track."""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, ExtractionConfig
from .families import group_into_families
from .models import ExtractionResult, Line, RhymeCandidate, RhymeLink, RhymeUnit, Section, Track
from .phonetics import get_phonetic_tail
from .similarity import calculate_phonetic_similarity, classify_rhyme_match

LOGGER = logging.getLogger(__name__)

LATIN_RE = re.compile(r"[A-Za-z]")


def create_unit(line: Line, section: str, config: ExtractionConfig = DEFAULT_CONFIG) -> Optional[RhymeUnit]:
    """Build a rhyme unit for ``line`` or ``None`` when its tail is too short."""

    tail = line.tail
    if len(tail) < config.min_tail_length:
        return None
    phonetic_tail = get_phonetic_tail(tail, config.tail_syllables)
    if len(phonetic_tail) < config.min_phonetic_tail_length:
        return None

    char_start = line.clean_text.rfind(tail)
    if char_start < 0:
        char_start = 0
        char_end = len(line.clean_text)
    else:
        char_end = char_start + len(tail)
    return RhymeUnit(
        line_index=line.index,
        global_line_index=line.global_index,
        text=line.clean_text,
        text_span=tail,
        char_start=char_start,
        char_end=char_end,
        phonetic_tail=phonetic_tail,
        section=section,
    )


def build_units(track: Track, config: ExtractionConfig = DEFAULT_CONFIG) -> List[RhymeUnit]:
    units: List[RhymeUnit] = []
    for section in track.sections:
        for line in section.lines:
            unit = create_unit(line, section.name, config)
            if unit is None:
                LOGGER.debug("No rhyme unit for line %d: %r", line.global_index, line.tail)
                continue
            units.append(unit)
    return units


def link_units(
    units: Sequence[RhymeUnit],
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> Tuple[List[RhymeLink], List[RhymeCandidate]]:
    """Compare every unit with the ``window_size`` units before it.

    Pairs at or above ``min_similarity`` become links. When candidate
    collection is enabled, weaker pairs above ``candidate_similarity`` that
    are adjacent, hyphenated or contain Latin script are returned as
    candidates for outside verification, up to ``max_candidates``.
    """

    links: List[RhymeLink] = []
    candidates: List[RhymeCandidate] = []
    for i, unit in enumerate(units):
        for j in range(max(0, i - config.window_size), i):
            other = units[j]
            similarity = calculate_phonetic_similarity(unit.phonetic_tail, other.phonetic_tail)
            distance = i - j
            if similarity >= config.min_similarity:
                match_type = classify_rhyme_match(similarity)
                if match_type:
                    links.append(RhymeLink(j, i, match_type, similarity, distance))
            elif (
                config.collect_candidates
                and similarity >= config.candidate_similarity
                and len(candidates) < config.max_candidates
                and _is_interesting(other, unit, distance)
            ):
                candidates.append(
                    RhymeCandidate(
                        line_a=other.text,
                        line_b=unit.text,
                        tail_a=other.text_span,
                        tail_b=unit.text_span,
                        phonetic_tail_a=other.phonetic_tail,
                        phonetic_tail_b=unit.phonetic_tail,
                        distance=distance,
                        rule_similarity=similarity,
                    )
                )
    return links, candidates


def _is_interesting(unit_a: RhymeUnit, unit_b: RhymeUnit, distance: int) -> bool:
    if distance == 1:
        return True
    spans = (unit_a.text_span, unit_b.text_span)
    return any(LATIN_RE.search(span) or "-" in span for span in spans)


def extract_rhymes(track: Track, config: ExtractionConfig = DEFAULT_CONFIG) -> ExtractionResult:
    """Extract units, links and families from a single track."""

    units = build_units(track, config)
    links, candidates = link_units(units, config)
    families = group_into_families(units, links)
    LOGGER.debug(
        "Track %r: %d units, %d links, %d families, %d candidates",
        track.title,
        len(units),
        len(links),
        len(families),
        len(candidates),
    )
    return ExtractionResult(
        units=units,
        links=links,
        families=families,
        candidates=candidates if config.collect_candidates else None,
    )


def extract_rhymes_from_section(
    section: Section,
    global_offset: int = 0,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> ExtractionResult:
    """Run the pipeline on one section as if it were a whole track."""

    lines = [
        Line(
            index=line.index,
            global_index=global_offset + position,
            text=line.text,
            clean_text=line.clean_text,
            tail=line.tail,
        )
        for position, line in enumerate(section.lines)
    ]
    pseudo_section = Section(type=section.type, name=section.name, lines=lines)
    pseudo_track = Track(title=section.name, sections=[pseudo_section], all_lines=list(lines))
    return extract_rhymes(pseudo_track, config)


def extract_all(
    tracks: Iterable[Track],
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> List[Tuple[Track, ExtractionResult]]:
    return [(track, extract_rhymes(track, config)) for track in tracks]
