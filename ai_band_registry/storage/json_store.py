"""JSON file storage for submission and catalog records."""

import json
import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

from ai_band_registry.core.exceptions import StorageError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

# One lock per resolved file path, shared by every store instance in the process
_locks: Dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = path.resolve()
    with _locks_guard:
        if key not in _locks:
            _locks[key] = threading.RLock()
        return _locks[key]


def read_json_document(path: Union[str, Path]) -> Any:
    """
    Parse a whole JSON file.

    Raises:
        StorageError: If the file is missing, unreadable or not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise StorageError(f"Failed to read {path}: {e}") from e


class JsonFileStore:
    """
    A list of JSON records kept in a single file.

    The whole file is read on every load and rewritten on every save. The
    per-path lock only serialises writers inside this process.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the store with a file path.

        Args:
            path: Path to the JSON file
        """
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(path='{self.path}')>"

    def ensure_exists(self) -> None:
        """Create the file holding an empty list if it does not exist yet."""
        with self._lock:
            if self.path.exists():
                return
            logger.info(f"Creating empty store at {self.path}")
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError(f"Failed to create directory for {self.path}: {e}") from e
            self.save_all([])

    def load_all(self) -> List[Record]:
        """
        Read every record from the file.

        Returns:
            The records in file order

        Raises:
            StorageError: If the file is missing, unreadable, not a JSON list,
                or holds an element that is not a JSON object
        """
        data = read_json_document(self.path)
        if not isinstance(data, list):
            raise StorageError(f"Malformed store {self.path}: expected a JSON list, got {type(data).__name__}")
        for position, record in enumerate(data):
            if not isinstance(record, dict):
                raise StorageError(
                    f"Malformed store {self.path}: record {position} is a {type(record).__name__}, not an object"
                )
        return data

    def save_all(self, records: List[Record]) -> None:
        """
        Overwrite the file with the given records.

        The new content goes to a temporary file in the same directory which
        then replaces the store, so readers never see a truncated file.

        Raises:
            StorageError: If the file cannot be written
        """
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            payload = json.dumps(records, indent=2, ensure_ascii=False)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Failed to write {self.path}: {e}") from e
        logger.debug(f"Wrote {len(records)} records to {self.path}")

    @contextmanager
    def update(self) -> Iterator[List[Record]]:
        """
        Hold the store lock across a read-modify-write cycle.

        Yields the loaded records; the list is written back when the block
        exits without an exception.
        """
        with self._lock:
            records = self.load_all()
            yield records
            self.save_all(records)


class SubmissionStore(JsonFileStore):
    """Pending, approved and rejected submissions."""

    def count_pending(self) -> int:
        return sum(1 for record in self.load_all() if record.get("status") == "pending")


class CatalogStore(JsonFileStore):
    """The published AI bands catalog."""

    def append(self, record: Record) -> int:
        """Append one entry and return the new catalog length."""
        with self.update() as records:
            records.append(record)
            return len(records)
