"""Flat-file JSON collection access."""

import json
import logging
from pathlib import Path

from bindery_estimator.errors import StoreCorruptError

logger = logging.getLogger(__name__)


class JsonFileConnection:
    """Reads and rewrites one JSON-array file.

    Every write serializes the whole collection to the same path. There is
    no locking: one process, one writer.
    """

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    def exists(self) -> bool:
        return self.file_path.exists()

    def read_records(self) -> list[dict]:
        """Return the stored records; a missing or blank file is empty."""
        if not self.file_path.exists():
            return []
        text = self.file_path.read_text(encoding="utf-8")
        if not text.strip():
            return []
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StoreCorruptError(
                f"{self.file_path} is not valid JSON: {e}"
            ) from e
        if not isinstance(data, list):
            raise StoreCorruptError(
                f"{self.file_path} must contain a JSON array"
            )
        logger.debug("Loaded %d records from %s", len(data), self.file_path)
        return data

    def write_records(self, records: list[dict]):
        """Replace the file contents with ``records``."""
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self.file_path.write_text(
            json.dumps(records, indent=2), encoding="utf-8"
        )
        logger.debug("Wrote %d records to %s", len(records), self.file_path)
