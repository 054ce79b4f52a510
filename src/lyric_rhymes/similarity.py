"""Phonetic similarity between transcribed rhyme tails."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import PhoneticAnalysis
from .phonetics import VOWEL_PHONEMES, analyze, get_phonetic_tail

EXACT = "exact"
SLANT = "slant"
ASSONANCE = "assonance"
CONSONANCE = "consonance"
MATCH_TYPES = (EXACT, SLANT, ASSONANCE, CONSONANCE)

VOWEL_WEIGHT = 1.0
CONSONANT_WEIGHT = 0.8
CONSONANT_GROUP_WEIGHT = 0.4
LENGTH_PENALTY = 0.1

CONSONANT_GROUPS = {
    "labial": frozenset({"b", "p", "v", "f", "m"}),
    "dental": frozenset({"d", "t", "z", "s", "n", "l"}),
    "velar": frozenset({"g", "k", "h"}),
    "sibilant": frozenset({"zh", "sh", "ch", "sch", "ts"}),
    "sonorant": frozenset({"m", "n", "l", "r", "j"}),
}

# (threshold, match type), strongest first
_CLASSIFICATION = (
    (0.95, EXACT),
    (0.7, SLANT),
    (0.5, ASSONANCE),
    (0.3, CONSONANCE),
)


def calculate_phonetic_similarity(a: str, b: str) -> float:
    """Score two phonetic tails between 0 and 1, comparing from the end.

    Matching vowels weigh more than matching consonants, consonants of the
    same articulatory group earn partial credit and a vowel facing a
    consonant counts against the score. Surplus length of the longer tail is
    penalised per character.
    """

    if not a or not b:
        return 0.0
    shorter, longer = (a, b) if len(a) <= len(b) else (b, a)

    score = 0.0
    max_score = 0.0
    for offset in range(1, len(shorter) + 1):
        char_a = shorter[-offset]
        char_b = longer[-offset]
        vowel_a = char_a in VOWEL_PHONEMES
        vowel_b = char_b in VOWEL_PHONEMES
        if vowel_a and vowel_b:
            max_score += VOWEL_WEIGHT
            if char_a == char_b:
                score += VOWEL_WEIGHT
        elif not vowel_a and not vowel_b:
            max_score += CONSONANT_WEIGHT
            if char_a == char_b:
                score += CONSONANT_WEIGHT
            elif same_consonant_group(char_a, char_b):
                score += CONSONANT_GROUP_WEIGHT
        else:
            max_score += CONSONANT_WEIGHT

    if max_score == 0:
        return 0.0
    score -= (len(longer) - len(shorter)) * LENGTH_PENALTY
    return round(max(0.0, score) / max_score, 2)


def same_consonant_group(a: str, b: str) -> bool:
    return any(a in group and b in group for group in CONSONANT_GROUPS.values())


def classify_rhyme_match(similarity: float) -> Optional[str]:
    """Map a similarity score to a match type, ``None`` below consonance."""

    for threshold, match_type in _CLASSIFICATION:
        if similarity >= threshold:
            return match_type
    return None


def are_rhyming(tail_a: str, tail_b: str, threshold: float = 0.7) -> bool:
    return calculate_phonetic_similarity(tail_a, tail_b) >= threshold


def text_similarity(text_a: str, text_b: str) -> float:
    """Similarity of two raw texts through their two-syllable phonetic tails."""

    return calculate_phonetic_similarity(
        get_phonetic_tail(text_a.lower(), 2),
        get_phonetic_tail(text_b.lower(), 2),
    )


def is_rhyme(text_a: str, text_b: str, threshold: float = 0.7) -> bool:
    return text_similarity(text_a, text_b) >= threshold


@dataclass(frozen=True)
class RhymeComparison:
    similarity: float
    match_type: Optional[str]
    is_rhyme: bool
    analysis_a: PhoneticAnalysis
    analysis_b: PhoneticAnalysis


def compare_texts(text_a: str, text_b: str, threshold: float = 0.7) -> RhymeComparison:
    analysis_a = analyze(text_a)
    analysis_b = analyze(text_b)
    similarity = calculate_phonetic_similarity(analysis_a.phonetic_tail, analysis_b.phonetic_tail)
    return RhymeComparison(
        similarity=similarity,
        match_type=classify_rhyme_match(similarity),
        is_rhyme=similarity >= threshold,
        analysis_a=analysis_a,
        analysis_b=analysis_b,
    )
