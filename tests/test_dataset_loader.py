"""Tests for reviews TSV ingestion."""

from unittest.mock import Mock, patch

import pandas as pd
import pytest
import requests
from reviewsense.core.models import ErrorKind, StatusMode
from reviewsense.services.dataset_loader import (
    DatasetLoader,
    DatasetReadError,
    extract_reviews,
    fetch_text,
    parse_tsv,
)


def _loader(content="", parser=None, source="reviews_test.tsv"):
    return DatasetLoader(source=source, text_column="text", fetcher=lambda src: content, parser=parser)


class TestExtractReviews:
    """Row filtering."""

    def test_trims_and_drops_invalid_rows(self):
        """Empty and non-string values are dropped, order kept."""
        rows = [{"text": " good "}, {"text": ""}, {"text": 42}, {"text": "bad movie"}]
        assert extract_reviews(rows) == ["good", "bad movie"]

    def test_duplicates_are_kept(self):
        rows = [{"text": "same"}, {"text": "same"}]
        assert extract_reviews(rows) == ["same", "same"]

    def test_missing_column_and_bad_rows(self):
        """Rows without the column or that are not mappings are skipped."""
        rows = [{"body": "hello"}, None, {"text": "   "}, {"text": None}]
        assert extract_reviews(rows) == []


class TestParseTsv:
    """pandas-backed parsing."""

    def test_header_and_tab_delimiter(self):
        content = "id\ttext\n1\t good \n2\t\n\n3\tbad, really bad movie\n"
        rows = parse_tsv(content)
        assert extract_reviews(rows) == ["good", "bad, really bad movie"]

    def test_values_stay_strings(self):
        """Numeric-looking cells are not converted."""
        rows = parse_tsv("text\n42\n")
        assert rows == [{"text": "42"}]

    def test_empty_content(self):
        assert parse_tsv("") == []

    def test_na_like_texts_are_reviews(self):
        """Words pandas would read as missing values stay review text."""
        content = "id\ttext\n1\tNA\n2\tNone\n3\tnull\n4\tn/a\n5\tnan\n6\tN/A\n7\tgood\n"
        assert extract_reviews(parse_tsv(content)) == ["NA", "None", "null", "n/a", "nan", "N/A", "good"]

    def test_blank_cell_is_empty_string(self):
        rows = parse_tsv("id\ttext\n1\t\n")
        assert rows == [{"id": "1", "text": ""}]

    def test_row_with_extra_fields(self):
        """A ragged row keeps its leading fields and the other rows still load."""
        rows = parse_tsv("id\ttext\n1\tgood\n2\tbad\textra\n3\tfine\n")
        assert extract_reviews(rows) == ["good", "bad", "fine"]


class TestDatasetLoader:
    """DatasetLoader.load outcomes."""

    def test_successful_load(self):
        """Surviving rows populate a loaded store."""
        rows = [{"text": " good "}, {"text": ""}, {"text": 42}, {"text": "bad movie"}]
        outcome = _loader(parser=lambda content: rows).load()

        assert outcome.ok
        assert outcome.store.reviews == ["good", "bad movie"]
        assert outcome.store.loaded is True
        assert outcome.store.count == 2
        assert outcome.status == StatusMode.READY
        assert outcome.status_text == "TSV loaded"

    def test_load_through_pandas(self):
        outcome = _loader("id\ttext\n1\tGreat phone\n2\tTerrible battery\n").load()
        assert outcome.store.reviews == ["Great phone", "Terrible battery"]

    def test_ragged_file_still_loads(self):
        outcome = _loader("id\ttext\n1\tgood\n2\tbad\textra\n3\tfine\n").load()

        assert outcome.ok
        assert outcome.status_text == "TSV loaded"
        assert outcome.store.reviews == ["good", "bad", "fine"]

    def test_no_valid_rows(self):
        """Zero surviving rows is an error with an unloaded store."""
        outcome = _loader("id\tbody\n1\thello\n").load()

        assert not outcome.ok
        assert outcome.store.reviews == []
        assert outcome.store.loaded is False
        assert outcome.status == StatusMode.ERROR
        assert outcome.status_text == "No reviews found in TSV"
        assert outcome.error_kind == ErrorKind.INGESTION_EMPTY
        assert outcome.error == 'No valid "text" column values found in reviews_test.tsv.'

    def test_read_failure(self):
        """Transport failures are reported as load failures."""
        def failing_fetch(source):
            raise DatasetReadError("connection reset")

        outcome = DatasetLoader(source="reviews_test.tsv", fetcher=failing_fetch).load()

        assert outcome.store.loaded is False
        assert outcome.status_text == "Load failed"
        assert outcome.error == "Failed to load TSV: connection reset"
        assert outcome.error_kind == ErrorKind.INGESTION_FAILED

    def test_parse_failure(self):
        """Parser errors are reported as parse errors."""
        def failing_parse(content):
            raise pd.errors.ParserError("Error tokenizing data")

        outcome = _loader("garbage", parser=failing_parse).load()

        assert outcome.store.reviews == []
        assert outcome.status_text == "Parse error"
        assert outcome.error == "Failed to parse TSV: Error tokenizing data"

    def test_each_load_starts_fresh(self):
        """Reloading never merges with a previous result."""
        contents = iter(["text\nfirst\n", "text\nsecond\n"])
        loader = DatasetLoader(source="reviews_test.tsv", fetcher=lambda src: next(contents))

        assert loader.load().store.reviews == ["first"]
        assert loader.load().store.reviews == ["second"]

    def test_dataset_name_from_url(self):
        loader = DatasetLoader(source="https://example.com/data/reviews_test.tsv")
        assert loader.dataset_name == "reviews_test.tsv"


class TestFetchText:
    """Reading the raw resource."""

    def test_reads_local_file(self, tmp_path):
        path = tmp_path / "reviews.tsv"
        path.write_text("text\nsolid build\n", encoding="utf-8")
        assert fetch_text(str(path)) == "text\nsolid build\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetReadError):
            fetch_text(str(tmp_path / "missing.tsv"))

    @patch('reviewsense.services.dataset_loader.requests.get')
    def test_fetches_url(self, mock_get):
        mock_get.return_value = Mock(text="text\nfrom the web\n")

        assert fetch_text("https://example.com/reviews_test.tsv", timeout=5) == "text\nfrom the web\n"
        mock_get.assert_called_once_with("https://example.com/reviews_test.tsv", timeout=5)

    @patch('reviewsense.services.dataset_loader.requests.get')
    def test_url_http_error(self, mock_get):
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error: Not Found")
        mock_get.return_value = response

        with pytest.raises(DatasetReadError, match="404"):
            fetch_text("https://example.com/reviews_test.tsv")


if __name__ == "__main__":
    pytest.main([__file__])
