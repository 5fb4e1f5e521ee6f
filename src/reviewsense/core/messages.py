"""Pure builders for the messages surfaced to users."""

from typing import Any, Optional

from .constants import DatasetConstants, ErrorMessages
from .models import ReviewStore


def check_ready(
    store: ReviewStore,
    dataset: str = DatasetConstants.DEFAULT_DATASET,
    column: str = DatasetConstants.TEXT_COLUMN,
) -> Optional[str]:
    """Return the not-loaded error message, or None when analysis may proceed."""
    if not store.loaded or store.count == 0:
        return ErrorMessages.NOT_LOADED.format(dataset=dataset, column=column)
    return None


def error_detail(body: Any) -> str:
    """Format the ``error`` field of an API error body as a message suffix."""
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return f"{ErrorMessages.DETAIL_SEPARATOR}{body['error']}"
    return ""


def api_status_message(status: int, detail: str = "") -> str:
    """Map a non-success HTTP status to user guidance."""
    if status == 401:
        return ErrorMessages.UNAUTHORIZED.format(detail=detail)
    if status == 429:
        return ErrorMessages.RATE_LIMITED.format(detail=detail)
    if status == 503:
        return ErrorMessages.MODEL_LOADING.format(detail=detail)
    return ErrorMessages.API_ERROR.format(status=status, detail=detail)


def describe_exception(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__
