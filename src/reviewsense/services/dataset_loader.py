"""Reviews TSV ingestion service."""

import io
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

import pandas as pd
import requests

from ..core.config import settings
from ..core.constants import DatasetConstants, ErrorMessages, StatusMessages
from ..core.messages import describe_exception
from ..core.models import ErrorKind, IngestionOutcome, ReviewStore, StatusMode

logger = logging.getLogger(__name__)


class DatasetReadError(Exception):
    """The dataset resource could not be fetched or decoded."""


def fetch_text(source: str, timeout: Optional[float] = None) -> str:
    """Read the raw TSV text from a local path or an http(s) URL."""
    try:
        if source.startswith(DatasetConstants.URL_PREFIXES):
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            response.encoding = DatasetConstants.ENCODING
            return response.text
        return Path(source).read_text(encoding=DatasetConstants.ENCODING)
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        raise DatasetReadError(describe_exception(e)) from e


def parse_tsv(content: str) -> List[Dict[str, Any]]:
    """Parse TSV text with a header row into row mappings.

    Cells are kept verbatim as strings ("NA" stays "NA", blank cells are
    ""). Rows with more fields than the header keep their leading fields;
    fields missing from short rows come back as NaN.
    """
    header = next(iter(content.splitlines()), "")
    width = len(header.split(DatasetConstants.DELIMITER))

    def _trim_row(fields: List[str]) -> List[str]:
        logger.warning(f"Row has {len(fields)} fields, expected {width}; extra fields ignored")
        return fields[:width]

    try:
        frame = pd.read_csv(
            io.StringIO(content),
            sep=DatasetConstants.DELIMITER,
            header=0,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
            engine="python",
            on_bad_lines=_trim_row,
        )
    except pd.errors.EmptyDataError:
        return []
    return frame.to_dict(orient="records")


def extract_reviews(rows: Iterable[Any], column: str = DatasetConstants.TEXT_COLUMN) -> List[str]:
    """Keep trimmed, non-empty string values of ``column`` in file order."""
    reviews = []
    for row in rows:
        value = row.get(column) if isinstance(row, dict) else None
        if not isinstance(value, str):
            continue
        value = value.strip()
        if value:
            reviews.append(value)
    return reviews


class DatasetLoader:
    """Loads review texts from a tab-separated file.

    ``fetcher`` and ``parser`` can be swapped for fakes; each ``load`` call
    starts from scratch and returns a fresh store.
    """

    def __init__(
        self,
        source: Optional[str] = None,
        text_column: Optional[str] = None,
        fetcher: Optional[Callable[[str], str]] = None,
        parser: Optional[Callable[[str], Iterable[Dict[str, Any]]]] = None,
    ):
        self.source = source or settings.dataset_path
        self.text_column = text_column or settings.text_column
        self.fetcher = fetcher or (lambda src: fetch_text(src, timeout=settings.request_timeout))
        self.parser = parser or parse_tsv

    @property
    def dataset_name(self) -> str:
        return self.source.rstrip("/").rsplit("/", 1)[-1] or self.source

    def load(self) -> IngestionOutcome:
        """Fetch, parse and filter the dataset."""
        logger.info(f"Loading reviews from {self.source}...")

        try:
            content = self.fetcher(self.source)
        except DatasetReadError as e:
            return self._failure(StatusMessages.LOAD_FAILED, ErrorMessages.LOAD_FAILED, e)

        try:
            rows = self.parser(content)
            reviews = extract_reviews(rows, self.text_column)
        except (pd.errors.ParserError, ValueError, TypeError) as e:
            return self._failure(StatusMessages.PARSE_ERROR, ErrorMessages.PARSE_FAILED, e)

        store = ReviewStore.from_reviews(reviews)
        if not store.loaded:
            message = ErrorMessages.NO_REVIEWS.format(column=self.text_column, dataset=self.dataset_name)
            logger.warning(message)
            return IngestionOutcome(
                store=store,
                status=StatusMode.ERROR,
                status_text=StatusMessages.EMPTY,
                error=message,
                error_kind=ErrorKind.INGESTION_EMPTY,
            )

        logger.info(f"Loaded {store.count} reviews from {self.source}")
        return IngestionOutcome(store=store, status=StatusMode.READY, status_text=StatusMessages.READY)

    def _failure(self, status_text: str, template: str, exc: Exception) -> IngestionOutcome:
        message = template.format(detail=describe_exception(exc))
        logger.error(message)
        return IngestionOutcome(
            store=ReviewStore(),
            status=StatusMode.ERROR,
            status_text=status_text,
            error=message,
            error_kind=ErrorKind.INGESTION_FAILED,
        )
