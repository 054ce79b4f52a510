"""Letter-level syllable helpers for Russian words."""
from __future__ import annotations

from typing import List, Optional

from .phonetics import VOWEL_LETTERS, count_syllables

__all__ = ["count_syllables", "get_last_syllables", "get_rhyme_tail", "split_into_syllables"]


def split_into_syllables(word: str) -> List[str]:
    """Split ``word`` into open syllables.

    A boundary falls after a vowel when the next letter is a consonant that is
    itself followed by a vowel. Longer consonant clusters stay with the
    preceding syllable.
    """

    normalized = word.lower()
    syllables: List[str] = []
    current: List[str] = []
    for i, char in enumerate(normalized):
        current.append(char)
        if char not in VOWEL_LETTERS:
            continue
        next_char = normalized[i + 1] if i + 1 < len(normalized) else None
        after_next = normalized[i + 2] if i + 2 < len(normalized) else None
        if next_char is not None and next_char not in VOWEL_LETTERS:
            if after_next is not None and after_next in VOWEL_LETTERS:
                syllables.append("".join(current))
                current = []
    if current:
        syllables.append("".join(current))
    return syllables


def get_last_syllables(word: str, count: int) -> str:
    if count <= 0:
        return ""
    return "".join(split_into_syllables(word)[-count:])


def get_rhyme_tail(word: str, stress_index: Optional[int] = None) -> str:
    """Return the word from its stressed vowel (or last vowel) to the end."""

    normalized = word.lower()
    if stress_index is not None and stress_index >= 0:
        return normalized[stress_index:]
    for i in range(len(normalized) - 1, -1, -1):
        if normalized[i] in VOWEL_LETTERS:
            return normalized[i:]
    return normalized
