"""JSON results store — reads and writes persisted ResultSets."""

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from code_judge.results.domain.record import ResultRecord, ResultSet
from code_judge.results.domain.stats import AggregateStats
from code_judge.results.infrastructure.errors import (
    ResultsStoreFormatError,
    ResultsStoreNotFoundError,
)

DEFAULT_RESULTS_FILE = Path("test-results.json")


def normalize_results(data: Any) -> ResultSet:
    """Return the canonical ResultSet for any accepted persisted shape.

    Accepted top-level shapes::

        [record, ...]
        {"results": [record, ...]}
        {"results": {"results": [record, ...]}}

    Raises:
        ResultsStoreFormatError: for any other shape or an invalid record.
    """
    items = data
    for _ in range(2):
        if isinstance(items, dict) and "results" in items:
            items = items["results"]

    if not isinstance(items, list):
        raise ResultsStoreFormatError(
            "expected a list of results, optionally wrapped in 'results'"
        )

    records: ResultSet = []
    for index, item in enumerate(items):
        try:
            records.append(ResultRecord.model_validate(item))
        except ValidationError as exc:
            raise ResultsStoreFormatError(f"result {index} is invalid: {exc}") from exc
    return records


class JsonResultsStore:
    """Results file on disk. A missing file is a configuration failure."""

    def __init__(self, path: Path = DEFAULT_RESULTS_FILE) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> ResultSet:
        """
        Read and normalize the results file.

        Raises:
            ResultsStoreNotFoundError: if the file does not exist.
            ResultsStoreFormatError: if it is not JSON or has an unsupported shape.
        """
        if not self.exists():
            raise ResultsStoreNotFoundError(path=self._path)
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ResultsStoreFormatError(f"{self._path}: {exc}") from exc
        return normalize_results(data)

    def write(self, records: ResultSet, stats: AggregateStats) -> Path:
        """Write *records* wrapped with a timestamp and summary; return the path."""
        payload = {
            "timestamp": datetime.now(UTC).isoformat(),
            "summary": stats.model_dump(mode="json", exclude={"failures"}),
            "results": [r.model_dump(mode="json") for r in records],
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return self._path
