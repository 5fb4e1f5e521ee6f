"""View models for the status chip, counter and sentiment display."""

from dataclasses import dataclass
from typing import Optional

from ..core.models import SentimentResult, StatusMode, Verdict

EMPTY_REVIEW = "(Empty review)"


@dataclass(frozen=True)
class SentimentView:
    icon: str
    label: str
    score_text: str
    css_class: str


_VERDICT_VIEWS = {
    Verdict.POSITIVE: ("👍", "Positive", "positive"),
    Verdict.NEGATIVE: ("👎", "Negative", "negative"),
    Verdict.NEUTRAL: ("❓", "Neutral", "neutral"),
}

NO_RESULT_VIEW = SentimentView(icon="❓", label="Neutral (no result)", score_text="Score: -", css_class="neutral")

STATUS_ICONS = {
    StatusMode.NEUTRAL: "⚪",
    StatusMode.READY: "🟢",
    StatusMode.ERROR: "🔴",
}


def count_label(n: int) -> str:
    return f"{n} review{'' if n == 1 else 's'} loaded"


def review_text(review: Optional[str]) -> str:
    return review or EMPTY_REVIEW


def sentiment_view(result: Optional[SentimentResult]) -> SentimentView:
    """Map a normalized result (or its absence) to display values."""
    if result is None:
        return NO_RESULT_VIEW
    icon, label, css_class = _VERDICT_VIEWS[result.verdict]
    return SentimentView(icon=icon, label=label, score_text=f"Score: {float(result.score):.3f}", css_class=css_class)


def status_chip(mode: StatusMode, text: str) -> str:
    return f"{STATUS_ICONS[mode]} {text}"


def form_token(entered: Optional[str]) -> Optional[str]:
    """Token typed into the form, or None to fall back to the configured one."""
    entered = (entered or "").strip()
    return entered or None
