"""Service tying the conversion engine to the history ledger."""

import logging

from binary_tutor.models import ConversionRecord, ConversionResult, Direction

from .conversion_engine import convert
from .history_service import HistoryLedger

logger = logging.getLogger(__name__)


class ConversionService:
    """Runs conversions and records the successful ones.

    This is the single entry point used by the CLI and the GUI.
    """

    def __init__(self, ledger: HistoryLedger):
        """Initialize the conversion service.

        Args:
            ledger: Loaded history ledger that successful conversions are appended to
        """
        self.ledger = ledger

    def to_decimal(self, raw: str) -> ConversionResult:
        """Convert a binary string to decimal and record it on success."""
        return self.convert(Direction.BINARY_TO_DECIMAL, raw)

    def to_binary(self, raw: str) -> ConversionResult:
        """Convert a decimal string to binary and record it on success."""
        return self.convert(Direction.DECIMAL_TO_BINARY, raw)

    def convert(self, direction: Direction, raw: str) -> ConversionResult:
        """Run the conversion for ``direction``.

        Args:
            direction: Which way to convert
            raw: Candidate input text

        Returns:
            The conversion result; failures leave the history untouched

        Raises:
            StorageError: If the updated history cannot be persisted
        """
        result = convert(direction, raw)
        if not result.ok:
            logger.debug(f"Rejected {direction.value} input {raw!r}: {result.error.value}")
            return result

        record = self.ledger.new_record(direction, result.input, result.value)
        self.ledger.append(record)
        logger.debug(f"Recorded conversion {record}")
        return result

    @property
    def history(self) -> tuple[ConversionRecord, ...]:
        """Snapshot of the conversion history, most recent first."""
        return self.ledger.entries

    def clear_history(self) -> None:
        """Remove all recorded conversions."""
        self.ledger.clear()
        logger.info("Conversion history cleared")
