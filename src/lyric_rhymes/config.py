"""Extraction settings shared by the rhyme pipeline."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Callable, Dict, Mapping, Optional

ENV_PREFIX = "LYRIC_RHYMES_"


@dataclass(frozen=True)
class ExtractionConfig:
    """Immutable knobs for :func:`lyric_rhymes.rhymes.extract_rhymes`."""

    window_size: int = 4
    min_similarity: float = 0.7
    candidate_similarity: float = 0.3
    min_tail_length: int = 3
    min_phonetic_tail_length: int = 2
    max_candidates: int = 50
    tail_syllables: int = 2
    tail_words: int = 3
    min_verdict_confidence: float = 0.7
    collect_candidates: bool = False

    def __post_init__(self) -> None:
        for name in ("window_size", "tail_syllables", "tail_words"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        for name in ("min_tail_length", "min_phonetic_tail_length", "max_candidates"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        for name in ("min_similarity", "candidate_similarity", "min_verdict_confidence"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {value!r}")
        if self.candidate_similarity > self.min_similarity:
            raise ValueError("candidate_similarity cannot exceed min_similarity")

    def replace(self, **changes) -> "ExtractionConfig":
        return replace(self, **changes)


DEFAULT_CONFIG = ExtractionConfig()

_ENV_FIELDS: Dict[str, Callable[[str], object]] = {
    "window_size": int,
    "min_similarity": float,
    "candidate_similarity": float,
    "min_tail_length": int,
    "max_candidates": int,
    "tail_syllables": int,
    "tail_words": int,
}


def load_config(environ: Optional[Mapping[str, str]] = None) -> ExtractionConfig:
    """Build a config from ``LYRIC_RHYMES_*`` environment variables.

    Unset variables keep their defaults.
    """

    env = os.environ if environ is None else environ
    overrides: Dict[str, object] = {}
    for name, convert in _ENV_FIELDS.items():
        variable = ENV_PREFIX + name.upper()
        raw = env.get(variable)
        if raw is None or not raw.strip():
            continue
        try:
            overrides[name] = convert(raw.strip())
        except ValueError as exc:
            raise ValueError(f"Invalid value for {variable}: {raw!r}") from exc
    return ExtractionConfig(**overrides)
