"""Services for ReviewSense."""

from .dataset_loader import DatasetLoader
from .sentiment_client import SentimentClient
from .review_analyzer import ReviewAnalyzer

__all__ = [
    "DatasetLoader",
    "SentimentClient",
    "ReviewAnalyzer",
]
