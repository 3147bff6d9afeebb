"""Recent conversion history with optional JSON persistence."""

from __future__ import annotations

import json
import logging
import threading
import time
from datetime import datetime
from pathlib import Path

from .. import config
from ..core.formatting import format_measurement
from ..lib.tapeutils import log
from ..models.history import HistoryEntry
from ..models.measurement import validate_measurement_value


class HistorySaveError(IOError):
    """Raised when saving the conversion history fails."""

    pass


class HistoryLoadError(IOError):
    """Raised when loading the conversion history fails due to I/O errors."""

    pass


class MeasurementHistory:
    """
    Keeps the most recent conversions, newest first.

    When a path is given the history is stored in a JSON file and loaded
    lazily on first access. Without a path it lives in memory only.

    Schema Version History:
        1.0 - Initial schema with entries
    """

    CURRENT_VERSION = '1.0'
    SUPPORTED_VERSIONS = {'1.0'}

    def __init__(self, limit: int = config.HISTORY_LIMIT, path: str | Path | None = None) -> None:
        """
        Initialize the history.

        Args:
            limit: Maximum number of entries kept (must be positive)
            path: JSON file to persist to, or None for in-memory only

        Raises:
            ValueError: If limit is not positive
        """
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")

        self._limit = limit
        self._path = Path(path) if path is not None else None
        self._entries: list[HistoryEntry] = []
        self._loaded = self._path is None
        self._lock = threading.RLock()

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def entries(self) -> list[HistoryEntry]:
        """Get a copy of the entries, newest first.

        Loading, recording and clearing share one lock, so concurrent
        callers never see a half-loaded list or lose an entry.
        """
        with self._lock:
            self._ensure_loaded()
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            self._ensure_loaded()
            return len(self._entries)

    def _ensure_loaded(self) -> None:
        with self._lock:
            if not self._loaded:
                self.load()

    def record(self, value: float, precision: int = config.DEFAULT_PRECISION) -> HistoryEntry:
        """
        Convert a value and add it to the top of the history.

        Args:
            value: Measurement in inches
            precision: Maximum denominator for the conversion

        Returns:
            The new entry

        Raises:
            ValueError: If value or precision is invalid
            HistorySaveError: If the history is persisted and saving fails
        """
        validate_measurement_value(value)
        fraction = format_measurement(value, precision)

        with self._lock:
            self._ensure_loaded()

            entry = HistoryEntry(
                id=self._next_id(),
                decimal=float(value),
                fraction=fraction,
                precision=precision,
                timestamp=datetime.now(),
            )
            previous = self._entries
            self._entries = [entry] + previous[:self._limit - 1]
            self._save_or_restore(previous)
        return entry

    def get(self, entry_id: int) -> HistoryEntry | None:
        """Find an entry by ID."""
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def clear(self) -> None:
        """Remove all entries.

        Raises:
            HistorySaveError: If the history is persisted and saving fails
        """
        with self._lock:
            self._ensure_loaded()
            previous = self._entries
            self._entries = []
            self._save_or_restore(previous)

    def _save_or_restore(self, previous: list[HistoryEntry]) -> None:
        """Persist the current entries, putting back the old list on failure."""
        if self._path is None:
            return
        try:
            self.save()
        except HistorySaveError:
            self._entries = previous
            raise

    def _next_id(self) -> int:
        """Millisecond timestamp, bumped past the newest entry on collision."""
        entry_id = int(time.time() * 1000)
        if self._entries and entry_id <= self._entries[0].id:
            entry_id = self._entries[0].id + 1
        return entry_id

    def load(self) -> None:
        """
        Load the history from disk.

        A missing file is an empty history. A corrupted file (invalid JSON)
        is logged and replaced by an empty history. Invalid individual
        entries are skipped with a warning.

        Raises:
            HistoryLoadError: If the file cannot be read or has the wrong shape
        """
        self._entries = []

        if self._path is None or not self._path.exists():
            self._loaded = True
            return

        try:
            with open(self._path, encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            log(f"Error loading history (invalid JSON), starting empty: {e}", logging.WARNING)
            self._loaded = True
            return
        except OSError as e:
            # I/O errors are not recoverable - raise to caller
            raise HistoryLoadError(f"Failed to load history: {e}") from e

        if not isinstance(data, dict):
            raise HistoryLoadError("Invalid history format: expected JSON object at root")

        file_version = data.get('version', '1.0')
        if file_version not in self.SUPPORTED_VERSIONS:
            raise HistoryLoadError(
                f"Unsupported history schema version: {file_version}. "
                f"Supported versions: {', '.join(sorted(self.SUPPORTED_VERSIONS))}"
            )

        entries_list = data.get('entries')
        if not isinstance(entries_list, list):
            raise HistoryLoadError("Invalid history format: 'entries' must be a list")

        for i, entry_data in enumerate(entries_list):
            try:
                self._entries.append(HistoryEntry.from_dict(entry_data))
            except (KeyError, TypeError, ValueError) as e:
                log(f"Skipping invalid history entry at index {i}: {e}", logging.WARNING)
                continue

        del self._entries[self._limit:]
        self._loaded = True

    def save(self) -> None:
        """
        Save the history to disk using atomic write pattern.

        Writes to a temporary file first, then atomically renames to target.

        Raises:
            HistorySaveError: If there is no path or the file cannot be written
        """
        if self._path is None:
            raise HistorySaveError("History has no storage path")

        temp_path = self._path.with_suffix('.tmp')

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)

            data = {
                'version': self.CURRENT_VERSION,
                'entries': [e.to_dict() for e in self._entries],
            }

            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)

            temp_path.replace(self._path)

        except (OSError, TypeError) as e:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup

            raise HistorySaveError(f"Failed to save history: {e}") from e
