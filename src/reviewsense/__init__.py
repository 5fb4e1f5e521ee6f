"""ReviewSense - random review sentiment demo on the Hugging Face Inference API."""

__version__ = "1.0.0"
__author__ = "ReviewSense Team"

from .core.models import *
from .core.config import settings
from .core.normalizer import normalize
from .services.review_analyzer import ReviewAnalyzer

__all__ = [
    "settings",
    "normalize",
    "ReviewAnalyzer",
]
