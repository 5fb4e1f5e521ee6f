"""Constants and user-facing messages for ReviewSense."""

# Dataset Constants
class DatasetConstants:
    """Constants related to the reviews TSV."""

    DEFAULT_DATASET = "reviews_test.tsv"  # fetched by this fixed name
    TEXT_COLUMN = "text"
    DELIMITER = "\t"
    ENCODING = "utf-8"
    URL_PREFIXES = ("http://", "https://")

# Classifier Constants
class ClassifierConstants:
    """Constants for the remote sentiment classifier."""

    DEFAULT_ENDPOINT = "https://api-inference.huggingface.co/models/siebert/sentiment-roberta-large-english"
    REQUEST_TIMEOUT = 60  # seconds

    # Decision rule
    POSITIVE_LABEL = "POSITIVE"
    NEGATIVE_LABEL = "NEGATIVE"
    CONFIDENCE_THRESHOLD = 0.5  # strictly greater than

# Status Messages
class StatusMessages:
    """Texts for the dataset status chip."""

    LOADING = "Loading TSV…"
    READY = "TSV loaded"
    EMPTY = "No reviews found in TSV"
    PARSE_ERROR = "Parse error"
    LOAD_FAILED = "Load failed"

# Error Messages
class ErrorMessages:
    """Templates for errors surfaced to the user."""

    NO_REVIEWS = 'No valid "{column}" column values found in {dataset}.'
    LOAD_FAILED = "Failed to load TSV: {detail}"
    PARSE_FAILED = "Failed to parse TSV: {detail}"
    NOT_LOADED = 'Data not loaded. Reload the dataset and ensure {dataset} is present with a "{column}" column.'
    NETWORK = "Network error: {detail}"
    INVALID_JSON = "Invalid JSON from API: {detail}"

    UNAUTHORIZED = "Unauthorized (401). Invalid or missing token{detail}. You can try without a token or provide a valid one."
    RATE_LIMITED = "Rate limited (429). Please wait and try again{detail}. Supplying your token may help."
    MODEL_LOADING = "Model loading (503). The model is warming up. Please retry in a moment{detail}."
    API_ERROR = "API error ({status}).{detail}"
    DETAIL_SEPARATOR = " - "

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    CONFIG_FILE = ".env.example"  # configuration template file
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
