"""Orchestrates dataset reloads and random-review analysis."""

import logging
import random
import threading
from typing import Callable, List, Optional

from ..core.constants import ErrorMessages
from ..core.messages import api_status_message, check_ready
from ..core.models import (
    AnalysisOutcome,
    ErrorKind,
    IngestionOutcome,
    InteractionState,
    ReviewStore,
)
from ..core.normalizer import normalize
from .dataset_loader import DatasetLoader
from .sentiment_client import (
    ClassifierNetworkError,
    ClassifierResponseError,
    ClassifierStatusError,
    SentimentClient,
)

logger = logging.getLogger(__name__)


def choose_random(reviews: List[str], rng: random.Random) -> str:
    """Return one element of a non-empty list, each index equally likely."""
    return reviews[rng.randrange(len(reviews))]


class ReviewAnalyzer:
    """Owns the review store and runs the reload/analyze actions.

    Actions are serialized: an action started while another is in flight
    waits for it, so the last action to finish is the one the caller shows.
    """

    def __init__(
        self,
        loader: Optional[DatasetLoader] = None,
        client: Optional[SentimentClient] = None,
        rng: Optional[random.Random] = None,
    ):
        self.loader = loader or DatasetLoader()
        self.client = client or SentimentClient()
        self.rng = rng or random.Random()
        self.store = ReviewStore()
        self.state = InteractionState.IDLE
        self.busy = False
        self._lock = threading.Lock()

    def reload(self) -> IngestionOutcome:
        """Reset the store and ingest the dataset again."""
        with self._lock:
            self.store = ReviewStore()
            self.state = InteractionState.LOADING_DATASET
            outcome = self.loader.load()
            # A failed reload leaves the store empty even if an earlier load succeeded.
            self.store = outcome.store
            self.state = InteractionState.IDLE if outcome.ok else InteractionState.ERROR
            return outcome

    def analyze(
        self,
        token: Optional[str] = None,
        on_review: Optional[Callable[[str], None]] = None,
    ) -> AnalysisOutcome:
        """Classify one random review.

        ``on_review`` is called with the chosen review before the request is
        sent so a display can show it and clear the previous verdict.
        """
        with self._lock:
            not_ready = check_ready(self.store, self.loader.dataset_name, self.loader.text_column)
            if not_ready:
                return self._error(not_ready, ErrorKind.NOT_LOADED)

            review = choose_random(self.store.reviews, self.rng)
            if on_review is not None:
                on_review(review)

            self.busy = True
            self.state = InteractionState.ANALYZING
            try:
                raw = self.client.classify(review, token=token)
            except ClassifierNetworkError as e:
                return self._error(ErrorMessages.NETWORK.format(detail=e), ErrorKind.NETWORK, review)
            except ClassifierStatusError as e:
                return self._error(
                    api_status_message(e.status_code, e.detail),
                    ErrorKind.API_STATUS,
                    review,
                    status_code=e.status_code,
                )
            except ClassifierResponseError as e:
                return self._error(ErrorMessages.INVALID_JSON.format(detail=e), ErrorKind.INVALID_RESPONSE, review)
            finally:
                self.busy = False

            result = normalize(raw)
            if result is None:
                logger.info("Classifier response had no usable candidate")
            else:
                logger.info(f"Verdict {result.verdict.value} ({result.label} {result.score:.3f})")
            self.state = InteractionState.RESULT_SHOWN
            return AnalysisOutcome(state=self.state, review=review, result=result)

    def _error(
        self,
        message: str,
        kind: ErrorKind,
        review: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> AnalysisOutcome:
        logger.error(message)
        self.state = InteractionState.ERROR
        return AnalysisOutcome(
            state=self.state,
            review=review,
            error=message,
            error_kind=kind,
            status_code=status_code,
        )
