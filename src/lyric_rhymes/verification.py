"""Contract for optional outside verification of rhyme candidates.

The rule-based engine only produces :class:`RhymeCandidate` objects. Callers
that have a verifier (a person, a language model, a lookup table) plug it in
here; nothing in the engine calls it on its own.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import replace
from typing import Any, Callable, Iterable, List, Optional, Protocol, Sequence, Union

from .config import DEFAULT_CONFIG, ExtractionConfig
from .models import ExtractionResult, RhymeCandidate, Track, VerifiedRhyme
from .rhymes import extract_rhymes

LOGGER = logging.getLogger(__name__)

VERDICT_TYPES = ("exact", "slant", "assonance", "pun", "none")
DEFAULT_BATCH_SIZE = 10

_JSON_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


class Verifier(Protocol):
    def verify(self, candidates: Sequence[RhymeCandidate]) -> List[VerifiedRhyme]:
        ...


VerifierLike = Union[Verifier, Callable[[Sequence[RhymeCandidate]], List[VerifiedRhyme]]]


def accept_verdicts(
    verdicts: Iterable[VerifiedRhyme],
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> List[VerifiedRhyme]:
    """Keep confirmed rhymes with enough confidence."""

    return [
        verdict
        for verdict in verdicts
        if verdict.is_rhyme and verdict.confidence >= config.min_verdict_confidence
    ]


def verify_candidates(
    candidates: Sequence[RhymeCandidate],
    verifier: VerifierLike,
    batch_size: int = DEFAULT_BATCH_SIZE,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> List[VerifiedRhyme]:
    """Send candidates to ``verifier`` in batches and keep accepted verdicts.

    A batch whose verification raises is logged and skipped; retries and
    rate limiting belong to the verifier.
    """

    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    verdicts: List[VerifiedRhyme] = []
    for start in range(0, len(candidates), batch_size):
        batch = candidates[start : start + batch_size]
        try:
            verdicts.extend(_call_verifier(verifier, batch))
        except Exception as exc:  # noqa: BLE001
            LOGGER.warning("Verification of %d candidates failed: %s", len(batch), exc)
    accepted = accept_verdicts(verdicts, config)
    LOGGER.debug("Verifier confirmed %d of %d candidates", len(accepted), len(candidates))
    return accepted


def _call_verifier(verifier: VerifierLike, batch: Sequence[RhymeCandidate]) -> List[VerifiedRhyme]:
    verify = getattr(verifier, "verify", None)
    if verify is None:
        verify = verifier
    return list(verify(batch))


def parse_verdicts(payload: Union[str, Sequence[Any]], batch: Sequence[RhymeCandidate]) -> List[VerifiedRhyme]:
    """Turn a verifier's JSON answer into :class:`VerifiedRhyme` objects.

    ``payload`` is either a decoded list or text containing a JSON array,
    possibly wrapped in prose. Items refer to ``batch`` through a 1-based
    ``idx``; items that cannot be matched or read are skipped.
    """

    items: Sequence[Any]
    if isinstance(payload, str):
        match = _JSON_ARRAY_RE.search(payload)
        if not match:
            LOGGER.debug("No JSON array in verifier answer")
            return []
        try:
            items = json.loads(match.group(0))
        except json.JSONDecodeError as exc:
            LOGGER.debug("Malformed verifier answer: %s", exc)
            return []
    else:
        items = payload
    if not isinstance(items, list):
        return []

    verdicts: List[VerifiedRhyme] = []
    for item in items:
        verdict = _parse_item(item, batch)
        if verdict is None:
            LOGGER.debug("Skipping verifier item %r", item)
            continue
        verdicts.append(verdict)
    return verdicts


def _parse_item(item: Any, batch: Sequence[RhymeCandidate]) -> Optional[VerifiedRhyme]:
    if not isinstance(item, dict):
        return None
    try:
        idx = int(item["idx"])
        confidence = float(item.get("confidence", 0.0))
    except (KeyError, TypeError, ValueError):
        return None
    if not 1 <= idx <= len(batch):
        return None
    candidate = batch[idx - 1]
    rhyme_type = str(item.get("type", item.get("rhyme_type", "none"))).lower()
    if rhyme_type not in VERDICT_TYPES:
        rhyme_type = "none"
    explanation = item.get("explanation")
    return VerifiedRhyme(
        tail_a=candidate.tail_a,
        tail_b=candidate.tail_b,
        is_rhyme=bool(item.get("isRhyme", item.get("is_rhyme", False))),
        rhyme_type=rhyme_type,
        confidence=min(1.0, max(0.0, confidence)),
        explanation=str(explanation) if explanation else None,
    )


def extract_rhymes_with_verifier(
    track: Track,
    verifier: Optional[VerifierLike] = None,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> ExtractionResult:
    """Rule-based extraction followed by verification of weak candidates."""

    if verifier is None:
        return extract_rhymes(track, config)
    result = extract_rhymes(track, config.replace(collect_candidates=True))
    if result.candidates:
        LOGGER.debug("Verifying %d rhyme candidates for %r", len(result.candidates), track.title)
        result = replace(result, verified=verify_candidates(result.candidates, verifier, config=config))
    return result
