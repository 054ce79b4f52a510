"""Phonetic rhyme detection for song lyrics."""

from .config import ExtractionConfig, load_config
from .families import group_into_families
from .phonetics import get_phonetic_tail, transliterate
from .rhymes import extract_rhymes
from .segmenter import extract_tail, parse_full_text, parse_single_track
from .similarity import calculate_phonetic_similarity, classify_rhyme_match
from .syllables import get_last_syllables, get_rhyme_tail, split_into_syllables
from .verification import extract_rhymes_with_verifier

__all__ = [
    "ExtractionConfig",
    "calculate_phonetic_similarity",
    "classify_rhyme_match",
    "extract_rhymes",
    "extract_rhymes_with_verifier",
    "extract_tail",
    "get_last_syllables",
    "get_phonetic_tail",
    "get_rhyme_tail",
    "group_into_families",
    "load_config",
    "parse_full_text",
    "parse_single_track",
    "split_into_syllables",
    "transliterate",
]
