"""Data preparation for export."""

import datetime
import json
from typing import Any, Dict

from ..core.models import AnalysisOutcome


def prepare_export(outcome: AnalysisOutcome, dataset: str, review_count: int) -> Dict[str, Any]:
    """Prepare an analysis outcome for JSON export."""
    return {
        "dataset": dataset,
        "review_count": review_count,
        "review": outcome.review,
        "result": outcome.result.to_dict() if outcome.result else None,
        "error": outcome.error,
        "error_kind": outcome.error_kind.value if outcome.error_kind else None,
        "status_code": outcome.status_code,
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": "1.0.0"
        }
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
