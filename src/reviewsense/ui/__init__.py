"""User interface helpers for ReviewSense."""

from .presenter import count_label, sentiment_view, status_chip

__all__ = [
    "count_label",
    "sentiment_view",
    "status_chip",
]
