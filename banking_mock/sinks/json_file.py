"""JSON file sink for exporting fixtures to files."""

import json
import logging
from pathlib import Path
from typing import Any

from banking_mock.exceptions import SinkError
from banking_mock.serialization import to_dict
from banking_mock.store.memory import BankingDataStore

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output entities to JSON files, one file per entity kind."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json``."""
        file_path = self.output_dir / f"{entity_type}.json"
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Could not write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(records)
        return file_path

    def write_store(self, store: BankingDataStore) -> dict[str, int]:
        """Write every entity kind held by ``store``."""
        for entity_type in store.summary():
            self.write_batch(entity_type, getattr(store, entity_type).list())
        return dict(self._counts)

    def close(self) -> None:
        """Log a summary of what was written."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
