"""Data models for ReviewSense."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List


class Verdict(str, Enum):
    """Three-way sentiment decision."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class InteractionState(str, Enum):
    """Where the controller is in a user action."""
    IDLE = "idle"
    LOADING_DATASET = "loading-dataset"
    ANALYZING = "analyzing"
    RESULT_SHOWN = "result-shown"
    ERROR = "error"


class StatusMode(str, Enum):
    """Status chip tri-state."""
    NEUTRAL = ""
    READY = "ready"
    ERROR = "error"


class ErrorKind(str, Enum):
    INGESTION_EMPTY = "ingestion-empty"
    INGESTION_FAILED = "ingestion-failed"
    NOT_LOADED = "not-loaded"
    NETWORK = "network"
    API_STATUS = "api-status"
    INVALID_RESPONSE = "invalid-response"


@dataclass
class ReviewStore:
    """In-memory holder of ingested review texts.

    ``loaded`` is true iff at least one review was extracted.
    """
    reviews: List[str] = field(default_factory=list)
    loaded: bool = False

    @classmethod
    def from_reviews(cls, reviews: List[str]) -> "ReviewStore":
        reviews = list(reviews)
        return cls(reviews=reviews, loaded=len(reviews) > 0)

    @property
    def count(self) -> int:
        return len(self.reviews)


@dataclass
class Candidate:
    """One classifier-reported label/score pair."""
    label: str
    score: float


@dataclass(frozen=True)
class SentimentResult:
    """Normalized classifier output for a single review."""
    label: str  # uppercased
    score: float
    verdict: Verdict

    def to_dict(self) -> dict:
        return {"label": self.label, "score": self.score, "verdict": self.verdict.value}


@dataclass
class IngestionOutcome:
    """Result of one dataset load attempt."""
    store: ReviewStore
    status: StatusMode
    status_text: str
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class AnalysisOutcome:
    """Result of one analyze action.

    Exactly one of ``error`` and the rendered result applies: when ``error``
    is None the (possibly absent) ``result`` is what gets displayed.
    """
    state: InteractionState
    review: Optional[str] = None
    result: Optional[SentimentResult] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None
