"""Bounded, persisted history of conversions."""

import json
import logging
import time

from binary_tutor.exceptions import BinaryTutorException
from binary_tutor.interfaces import KeyValueStore
from binary_tutor.models import ConversionRecord, Direction

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 20
DEFAULT_HISTORY_KEY = "conversionHistory"


class HistoryLedger:
    """Most-recent-first log of successful conversions.

    The ledger never holds more than ``limit`` entries. Every mutation
    writes the full sequence back to the store; loading never does.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = DEFAULT_HISTORY_KEY,
        limit: int = HISTORY_LIMIT,
    ):
        """Initialize the ledger.

        Call ``load()`` before mutating it to pick up persisted entries.

        Args:
            store: Persistence backend
            key: Store key holding the serialized history
            limit: Maximum number of entries kept
        """
        self._store = store
        self._key = key
        self._limit = limit
        self._entries: list[ConversionRecord] = []

    @property
    def entries(self) -> tuple[ConversionRecord, ...]:
        """Snapshot of the current entries, most recent first."""
        return tuple(self._entries)

    @property
    def limit(self) -> int:
        return self._limit

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> None:
        """Replace the entries with the persisted history.

        A corrupt persisted value is logged, removed from the store and
        treated as an empty history. This method never raises.
        """
        try:
            raw = self._store.get(self._key)
            if raw is None:
                self._entries = []
                return
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(f"expected a list, got {type(data).__name__}")
            entries = [ConversionRecord.from_dict(item) for item in data]
        except (
            json.JSONDecodeError,
            RecursionError,
            TypeError,
            KeyError,
            ValueError,
            BinaryTutorException,
        ) as e:
            logger.warning(f"Failed to parse conversion history, discarding it: {e}")
            self._entries = []
            try:
                self._store.remove(self._key)
            except BinaryTutorException as remove_error:
                logger.warning(f"Could not remove corrupt history: {remove_error}")
            return

        if len(entries) > self._limit:
            logger.info(f"Persisted history has {len(entries)} entries, keeping {self._limit}")
        self._entries = entries[: self._limit]
        logger.debug(f"Loaded {len(self._entries)} history entries")

    def save(self) -> None:
        """Write the full current history to the store.

        Raises:
            StorageError: If the store cannot be written
        """
        payload = json.dumps([record.to_dict() for record in self._entries], ensure_ascii=False)
        self._store.set(self._key, payload)

    def append(self, record: ConversionRecord) -> None:
        """Insert ``record`` as the most recent entry, evicting the oldest beyond the limit.

        Args:
            record: Record to add
        """
        self._entries.insert(0, record)
        del self._entries[self._limit :]
        self.save()

    def clear(self) -> None:
        """Remove every entry and persist the empty history."""
        self._entries = []
        self.save()

    def new_record(self, direction: Direction, input_text: str, output_text: str) -> ConversionRecord:
        """Create a record with an id greater than any id currently held.

        The id is the creation time in milliseconds, bumped past the
        newest entry when the clock has not moved on.

        Args:
            direction: Direction of the conversion
            input_text: Validated input
            output_text: Converted value

        Returns:
            The new (not yet appended) record
        """
        record_id = int(time.time() * 1000)
        if self._entries:
            record_id = max(record_id, max(record.id for record in self._entries) + 1)
        return ConversionRecord(
            id=record_id, direction=direction, input=input_text, output=output_text
        )
