import json
import logging
import os
import tempfile
import threading
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from string_analyzer.models import StringRecord
from string_analyzer.utils import compute_sha256

logger = logging.getLogger(__name__)


class StringStore:
    """
    In-memory collection of analyzed strings keyed by their SHA-256 id.

    Every mutation and every enumeration runs under one lock, so a value is
    never inserted twice and readers never see a half-built collection.
    When ``data_file`` is set, the whole collection is snapshotted to it after
    each successful insert or delete. Snapshot failures are logged and the
    in-memory change is kept.
    """

    def __init__(self, data_file: Optional[str] = None):
        self.data_file = data_file or None
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    # --------------------------------------------------------------------------
    # CRUD
    # --------------------------------------------------------------------------

    def insert_if_absent(self, value: str) -> Tuple[StringRecord, bool]:
        """Store ``value`` unless already present. Returns (record, created)."""
        with self._lock:
            existing = self._get(value)
            if existing is not None:
                return existing, False

            record = StringRecord.from_value(value)
            self._records[record.id] = record
            self._persist()
            logger.info(f"Stored string {record.id[:12]} (length {record.properties.length})")
            return record, True

    def find_by_value(self, value: str) -> Optional[StringRecord]:
        """Get a record by exact (case-sensitive) value"""
        with self._lock:
            return self._get(value)

    def remove_by_value(self, value: str) -> Optional[StringRecord]:
        """Delete a record by exact value and return it, or None if absent"""
        with self._lock:
            record = self._get(value)
            if record is None:
                return None
            del self._records[record.id]
            self._persist()
            logger.info(f"Deleted string {record.id[:12]}")
            return record

    def enumerate(self) -> List[StringRecord]:
        """Snapshot of every stored record, oldest first"""
        with self._lock:
            return list(self._records.values())

    def _get(self, value: str) -> Optional[StringRecord]:
        record = self._records.get(compute_sha256(value))
        if record is not None and record.value == value:
            return record
        return None

    # --------------------------------------------------------------------------
    # PERSISTENCE
    # --------------------------------------------------------------------------

    def load(self) -> int:
        """
        Replace the in-memory contents with the snapshot on disk.

        Missing or unreadable snapshots leave the store empty; this never
        raises. Returns the number of records loaded.
        """
        if not self.data_file:
            return 0

        with self._lock:
            self._records = {}
            if not os.path.exists(self.data_file):
                logger.info(f"No snapshot at {self.data_file}, starting empty")
                return 0

            try:
                with open(self.data_file, "r", encoding="utf-8") as f:
                    raw = json.load(f)
                if not isinstance(raw, dict):
                    raise ValueError("snapshot root must be an object keyed by id")
                records = {}
                for key, item in raw.items():
                    record = StringRecord.model_validate(item)
                    if record.id != key or record.id != compute_sha256(record.value):
                        raise ValueError(f"snapshot entry {key[:12]} does not match its value")
                    records[record.id] = record
            except (OSError, ValueError, ValidationError) as e:
                logger.error(f"Failed to load snapshot {self.data_file}, starting empty: {e}")
                return 0

            self._records = records
            logger.info(f"Loaded {len(records)} records from {self.data_file}")
            return len(records)

    def _persist(self) -> None:
        if not self.data_file:
            return

        directory = os.path.dirname(os.path.abspath(self.data_file))
        try:
            snapshot = {
                record_id: record.model_dump(mode="json")
                for record_id, record in self._records.items()
            }
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".strings-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(snapshot, f, indent=2)
                os.replace(tmp_path, self.data_file)
            except BaseException:
                os.unlink(tmp_path)
                raise
        except (OSError, ValueError) as e:
            logger.error(f"Failed to persist snapshot to {self.data_file}: {e}")
