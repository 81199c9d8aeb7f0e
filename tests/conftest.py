"""Pytest configuration and shared fixtures."""

import pytest

from binary_tutor.config import BinaryTutorConfig
from binary_tutor.models import ConversionRecord, Direction
from binary_tutor.presenters import NullPresenter
from binary_tutor.services import ConversionService, HistoryLedger, MemoryStore


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with a temporary storage file."""
    return BinaryTutorConfig(storage_path=temp_dir / "storage.json")


@pytest.fixture
def memory_store():
    """Provide an empty in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def ledger(memory_store):
    """Provide a loaded, empty history ledger backed by memory."""
    history = HistoryLedger(memory_store)
    history.load()
    return history


@pytest.fixture
def conversion_service(ledger):
    """Provide a conversion service recording into the memory ledger."""
    return ConversionService(ledger)


@pytest.fixture
def make_record():
    """Factory fixture for creating ConversionRecord instances with sensible defaults."""

    def _make(
        id=1,
        direction=Direction.BINARY_TO_DECIMAL,
        input="1010",
        output="10",
    ):
        return ConversionRecord(id=id, direction=direction, input=input, output=output)

    return _make
