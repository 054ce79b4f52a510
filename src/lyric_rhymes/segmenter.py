"""Split raw lyric text into tracks, sections and lines."""
from __future__ import annotations

import logging
import re
from typing import List, Optional

from nltk.tokenize import WhitespaceTokenizer

from .models import Line, Section, Track

LOGGER = logging.getLogger(__name__)

SECTION_PATTERNS = {
    "verse": re.compile(r"^\[?(куплет|verse|куп\.?)\s*\d*\]?:?$", re.IGNORECASE),
    "chorus": re.compile(r"^\[?(припев|chorus|хор|ref|refrain)\s*\d*\]?:?$", re.IGNORECASE),
    "intro": re.compile(r"^\[?(интро|intro|вступление)\]?:?$", re.IGNORECASE),
    "outro": re.compile(r"^\[?(аутро|outro|концовка)\]?:?$", re.IGNORECASE),
    "bridge": re.compile(r"^\[?(бридж|bridge|переход)\]?:?$", re.IGNORECASE),
    "hook": re.compile(r"^\[?(хук|hook)\]?:?$", re.IGNORECASE),
}

# Headers outside the known vocabulary: "[Anything]" or "Слово 2:"
_GENERIC_HEADER_PATTERNS = (
    re.compile(r"^\[.*\]$"),
    re.compile(r"^[А-Яа-яЁё]+\s*\d*:$"),
)

TRACK_TITLE_PATTERN = re.compile(r"^##\s+(.+)$")
REMARK_PATTERN = re.compile(r"\s*[(\[][^)\]]*[)\]]\s*")
TRAILING_PUNCTUATION = re.compile(r"[.,!?:;]+$")

_TOKENIZER = WhitespaceTokenizer()


def parse_full_text(text: str, max_words: int = 3) -> List[Track]:
    """Parse a text blob that may hold several ``## Title`` tracks.

    ``max_words`` caps the rhyme tail of each line. Content that appears
    before the first title marker has no track to belong to and is dropped.
    """

    tracks: List[Track] = []
    current_track: Optional[Track] = None
    current_section: Optional[Section] = None
    global_index = 0
    section_index = 0

    for raw_line in text.splitlines():
        trimmed = raw_line.strip()
        if not trimmed:
            continue

        title_match = TRACK_TITLE_PATTERN.match(trimmed)
        if title_match:
            current_track = Track(title=title_match.group(1).strip())
            tracks.append(current_track)
            current_section = None
            global_index = 0
            section_index = 0
            continue

        section_type = detect_section_type(trimmed)
        if section_type:
            current_section = Section(type=section_type, name=trimmed.replace("[", "").replace("]", ""))
            section_index = 0
            if current_track is not None:
                current_track.sections.append(current_section)
            continue

        if current_track is None:
            LOGGER.debug("Dropping line outside of any track: %r", trimmed)
            continue

        if current_section is None:
            current_section = Section(type="unknown", name="Unknown")
            current_track.sections.append(current_section)
            section_index = 0

        line = parse_line(trimmed, section_index, global_index, max_words)
        if not line.clean_text or not line.tail:
            LOGGER.debug("Skipping remark-only line: %r", trimmed)
            continue
        current_section.lines.append(line)
        current_track.all_lines.append(line)
        section_index += 1
        global_index += 1

    return tracks


def parse_single_track(text: str, title: str, max_words: int = 3) -> Track:
    """Parse ``text`` as the body of a single track called ``title``."""

    tracks = parse_full_text(f"## {title}\n{text}", max_words)
    if tracks:
        return tracks[0]
    return Track(title=title)


def detect_section_type(line: str) -> Optional[str]:
    """Return the section type for a header line, or ``None`` for lyrics."""

    for section_type, pattern in SECTION_PATTERNS.items():
        if pattern.match(line):
            return section_type
    if any(pattern.match(line) for pattern in _GENERIC_HEADER_PATTERNS):
        return "unknown"
    return None


def clean_line(text: str) -> str:
    """Strip ad-lib remarks such as ``(Йе)`` or ``[?]``."""

    return REMARK_PATTERN.sub(" ", text).strip()


def parse_line(text: str, index: int, global_index: int, max_words: int = 3) -> Line:
    clean_text = clean_line(text)
    return Line(
        index=index,
        global_index=global_index,
        text=text,
        clean_text=clean_text,
        tail=extract_tail(clean_text, max_words),
    )


def extract_tail(text: str, max_words: int = 3) -> str:
    """Return the trailing word span of a line used for rhyme comparison.

    A short word (one or two letters) at the very end pulls one more word into
    the span. A single letter cut off by punctuation, as in ``"поласкала, а"``,
    is a dangling particle and is dropped instead.
    """

    cleaned = TRAILING_PUNCTUATION.sub("", text).strip()
    words = _TOKENIZER.tokenize(cleaned)
    if not words:
        return ""

    if len(words) > 1 and len(words[-1]) == 1 and TRAILING_PUNCTUATION.search(words[-2]):
        return extract_tail(" ".join(words[:-1]), max_words)

    tail_words = words[-max_words:]
    if len(tail_words[-1]) <= 2:
        extra_words = words[-max_words - 1:]
        if len(extra_words) > len(tail_words):
            return " ".join(extra_words)
    return " ".join(tail_words)
