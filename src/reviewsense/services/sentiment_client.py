"""Hugging Face Inference API client for sentiment classification."""

import logging
from typing import Any, Optional

import requests

from ..core.config import settings
from ..core.messages import describe_exception, error_detail

logger = logging.getLogger(__name__)


class ClassifierError(Exception):
    """Base class for failed classification calls."""


class ClassifierNetworkError(ClassifierError):
    """The request never completed."""


class ClassifierStatusError(ClassifierError):
    """The API answered with a non-success status."""

    def __init__(self, status_code: int, detail: str = ""):
        super().__init__(f"HTTP {status_code}{detail}")
        self.status_code = status_code
        self.detail = detail


class ClassifierResponseError(ClassifierError):
    """The API answered with a body that is not valid JSON."""


class SentimentClient:
    """Sends review text to a remote text-classification model.

    One POST per call, no retries; a 503 while the model warms up is
    reported to the caller.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint or settings.sentiment_endpoint
        self.token = settings.effective_hf_token if token is None else token.strip()
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()

    def _headers(self, token: Optional[str]) -> dict:
        headers = {"Content-Type": "application/json"}
        token = self.token if token is None else token.strip()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def classify(self, text: str, token: Optional[str] = None) -> Any:
        """Classify ``text`` and return the decoded JSON body.

        ``token`` overrides the configured token for this call; an empty
        string sends the request unauthenticated.
        """
        headers = self._headers(token)
        logger.debug(f"POST {self.endpoint} (authenticated={'Authorization' in headers})")

        try:
            response = self.session.post(
                self.endpoint,
                headers=headers,
                json={"inputs": text},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Sentiment request failed: {e}")
            raise ClassifierNetworkError(describe_exception(e)) from e

        if not 200 <= response.status_code < 300:
            try:
                detail = error_detail(response.json())
            except ValueError:
                detail = ""
            logger.warning(f"Sentiment API returned {response.status_code}{detail}")
            raise ClassifierStatusError(response.status_code, detail)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Sentiment API returned invalid JSON: {e}")
            raise ClassifierResponseError(describe_exception(e)) from e
