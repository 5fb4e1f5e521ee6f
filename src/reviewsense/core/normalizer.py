"""Normalization of Hugging Face text-classification responses.

The Inference API answers a single input with
``[[{"label": "POSITIVE", "score": 0.99}, {"label": "NEGATIVE", "score": 0.01}]]``.
A flat list of candidates is accepted as well. The top-scored candidate is
turned into a verdict by a strict threshold rule:

- ``POSITIVE`` with score > 0.5 -> positive
- ``NEGATIVE`` with score > 0.5 -> negative
- anything else -> neutral
"""

from typing import Any, List, Optional

from .constants import ClassifierConstants
from .models import Candidate, SentimentResult, Verdict


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _score_of(item: Any) -> float:
    if isinstance(item, dict) and _is_number(item.get("score")):
        return item["score"]
    return 0


def extract_candidates(raw: Any) -> Optional[List[Any]]:
    """Pick the candidate list out of a raw response, or None."""
    if not raw:
        return None
    if isinstance(raw, (list, tuple)):
        if isinstance(raw[0], (list, tuple)):
            return list(raw[0])
        return list(raw)
    return None


def top_candidate(candidates: List[Any]) -> Optional[Candidate]:
    """Return the highest-scored candidate if its label is textual."""
    if not candidates:
        return None
    # sorted() is stable, so ties keep response order
    top = sorted(candidates, key=_score_of, reverse=True)[0]
    if not isinstance(top, dict) or not isinstance(top.get("label"), str):
        return None
    score = top.get("score")
    return Candidate(label=top["label"], score=score if _is_number(score) else 0)


def decide_verdict(label: str, score: float) -> Verdict:
    """Apply the strict-threshold decision rule to an uppercased label."""
    if label == ClassifierConstants.POSITIVE_LABEL and score > ClassifierConstants.CONFIDENCE_THRESHOLD:
        return Verdict.POSITIVE
    if label == ClassifierConstants.NEGATIVE_LABEL and score > ClassifierConstants.CONFIDENCE_THRESHOLD:
        return Verdict.NEGATIVE
    return Verdict.NEUTRAL


def normalize(raw: Any) -> Optional[SentimentResult]:
    """Normalize a raw classifier response into a SentimentResult.

    Returns None when the payload has no usable candidate. The input is
    never mutated.
    """
    candidates = extract_candidates(raw)
    if not candidates:
        return None

    top = top_candidate(candidates)
    if top is None:
        return None

    label = top.label.upper()
    return SentimentResult(label=label, score=top.score, verdict=decide_verdict(label, top.score))
