"""Core modules for ReviewSense."""

from .models import *
from .config import settings
from .normalizer import normalize, decide_verdict
from .messages import check_ready, api_status_message

__all__ = [
    "settings",
    "normalize",
    "decide_verdict",
    "check_ready",
    "api_status_message",
    "Verdict",
    "InteractionState",
    "StatusMode",
    "ErrorKind",
    "ReviewStore",
    "Candidate",
    "SentimentResult",
    "IngestionOutcome",
    "AnalysisOutcome",
]
