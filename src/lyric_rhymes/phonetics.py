"""Rule-based transcription of Russian text into a simple ASCII phonetic form."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import PhoneticAnalysis

VOWEL_LETTERS = frozenset("аеёиоуыэюя")
CONSONANT_LETTERS = frozenset("бвгджзйклмнпрстфхцчшщ")
SOFT_SIGN = "ь"
HARD_SIGN = "ъ"
SOFTNESS_MARK = "'"
WORD_BOUNDARIES = frozenset(" -")

LETTER_TO_PHONEME = {
    "а": "a",
    "б": "b",
    "в": "v",
    "г": "g",
    "д": "d",
    "е": "e",
    "ё": "o",
    "ж": "zh",
    "з": "z",
    "и": "i",
    "й": "j",
    "к": "k",
    "л": "l",
    "м": "m",
    "н": "n",
    "о": "o",
    "п": "p",
    "р": "r",
    "с": "s",
    "т": "t",
    "у": "u",
    "ф": "f",
    "х": "h",
    "ц": "ts",
    "ч": "ch",
    "ш": "sh",
    "щ": "sch",
    "ы": "y",
    "э": "e",
    "ю": "yu",
    "я": "ya",
}

# Letters that carry a leading glide; after a consonant they soften it instead.
IOTATED_VOWELS = {
    "е": "e",
    "ё": "o",
    "ю": "u",
    "я": "a",
    "и": "i",
}

# Word-final devoicing. Deliberately limited to these six letters.
DEVOICING = {
    "б": "п",
    "в": "ф",
    "г": "к",
    "д": "т",
    "ж": "ш",
    "з": "с",
}

# Applied to every vowel because stress positions are unknown.
VOWEL_REDUCTION = {
    "о": "a",
    "е": "i",
    "я": "i",
}

VOWEL_PHONEMES = frozenset("aeiouy")


@dataclass(frozen=True)
class TransliterationResult:
    phonetic: str
    simplified: str


def transliterate(
    text: str,
    apply_reduction: bool = False,
    stress_index: Optional[int] = None,
) -> TransliterationResult:
    """Transcribe ``text`` letter by letter.

    ``phonetic`` keeps softness marks (``'``); ``simplified`` drops them.
    Spaces and hyphens are kept as word boundaries, any other character that
    is not a Cyrillic letter is skipped. ``stress_index`` counts vowels from
    the start and exempts that vowel from reduction.
    """

    chars = text.lower().strip()
    phonetic: list[str] = []
    simplified: list[str] = []
    vowel_index = 0

    for i, char in enumerate(chars):
        prev_char = chars[i - 1] if i > 0 else None
        next_char = chars[i + 1] if i + 1 < len(chars) else None

        if char in WORD_BOUNDARIES:
            phonetic.append(char)
            simplified.append(char)
            continue
        if char == SOFT_SIGN:
            phonetic.append(SOFTNESS_MARK)
            continue
        if char == HARD_SIGN:
            continue

        if char in VOWEL_LETTERS:
            stressed = stress_index is not None and vowel_index == stress_index
            iotated = IOTATED_VOWELS.get(char)
            if iotated is not None and _glide_position(prev_char):
                phoneme = "j" + iotated
            elif iotated is not None:
                phoneme = iotated
            else:
                phoneme = LETTER_TO_PHONEME[char]
            if apply_reduction and not stressed and char in VOWEL_REDUCTION:
                phoneme = VOWEL_REDUCTION[char]
            phonetic.append(phoneme)
            simplified.append(phoneme)
            vowel_index += 1
            continue

        if char not in CONSONANT_LETTERS:
            continue

        phoneme = LETTER_TO_PHONEME[char]
        if char in DEVOICING and (next_char is None or next_char in WORD_BOUNDARIES):
            phoneme = LETTER_TO_PHONEME[DEVOICING[char]]
        if next_char is not None and next_char in IOTATED_VOWELS:
            phoneme += SOFTNESS_MARK
        phonetic.append(phoneme)
        simplified.append(phoneme.replace(SOFTNESS_MARK, ""))

    return TransliterationResult(phonetic="".join(phonetic), simplified="".join(simplified))


def _glide_position(prev_char: Optional[str]) -> bool:
    # word start, after a vowel, or after a separating sign
    if prev_char is None:
        return True
    if prev_char in VOWEL_LETTERS or prev_char in (SOFT_SIGN, HARD_SIGN):
        return True
    return prev_char not in CONSONANT_LETTERS


def simplified_transliterate(text: str) -> str:
    """Return the simplified transcription with vowel reduction applied."""

    return transliterate(text, apply_reduction=True).simplified


def get_phonetic_tail(text: str, syllable_count: int = 2, apply_reduction: bool = True) -> str:
    """Return the last ``syllable_count`` syllables of the simplified transcription.

    The tail starts at the consonant cluster leading into the N-th vowel from
    the end. Text with fewer vowels than requested yields an empty string.
    """

    if syllable_count < 1:
        raise ValueError(f"syllable_count must be positive, got {syllable_count}")

    simplified = transliterate(text, apply_reduction=apply_reduction).simplified
    vowel_count = 0
    tail_start = len(simplified)
    for i in range(len(simplified) - 1, -1, -1):
        if simplified[i] not in VOWEL_PHONEMES:
            continue
        vowel_count += 1
        if vowel_count >= syllable_count:
            tail_start = i
            while tail_start > 0 and not _ends_onset(simplified[tail_start - 1]):
                tail_start -= 1
            break
    return simplified[tail_start:]


def _ends_onset(char: str) -> bool:
    return char in VOWEL_PHONEMES or char in WORD_BOUNDARIES or char.isspace()


def count_syllables(text: str) -> int:
    """Number of vowel letters in ``text``."""

    return sum(1 for char in text.lower() if char in VOWEL_LETTERS)


def analyze(text: str) -> PhoneticAnalysis:
    """Rule-only phonetic analysis of a word or phrase."""

    normalized = text.lower().strip()
    result = transliterate(normalized, apply_reduction=True)
    return PhoneticAnalysis(
        original=text,
        phonetic_full=result.phonetic,
        phonetic_tail=get_phonetic_tail(normalized, 2),
        simplified=result.simplified,
        syllable_count=count_syllables(normalized),
    )
