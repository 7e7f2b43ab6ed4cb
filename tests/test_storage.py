"""Tests for storage layer."""

import json
from datetime import datetime

import pytest

from schedcal.exceptions import (
    StoreExistsError,
    StoreIOError,
    StoreParseError,
)
from schedcal.models.calendar import Calendar
from schedcal.storage.schedule_store import InMemoryScheduleStore, JSONScheduleStore


@pytest.fixture
def store(tmp_path):
    """Create a JSONScheduleStore in a temporary directory."""
    return JSONScheduleStore(tmp_path / "schedule.json")


def test_save_and_load_round_trip(store, three_schedules):
    """Test saving then loading yields an equal calendar."""
    store.save(three_schedules)
    loaded = store.load()
    assert loaded == three_schedules
    assert [s.id for s in loaded.schedules] == [0, 1, 2]


def test_save_writes_expected_format(store, evening_calendar):
    """Test the file contains naive ISO timestamps under 'schedules'."""
    store.save(evening_calendar)
    data = json.loads(store.path.read_text())
    assert data["schedules"][0]["start"] == "2024-01-01T19:00:00"
    assert data["schedules"][0]["end"] == "2024-01-01T20:09:00"


def test_load_reads_hand_written_file(store):
    """Test loading a file written by another tool."""
    store.path.write_text(
        '{"schedules": [{"id": 7, "subject": "Call", '
        '"start": "2024-02-03T10:00:00", "end": "2024-02-03T10:30:00"}]}'
    )
    calendar = store.load()
    assert calendar.schedules[0].id == 7
    assert calendar.schedules[0].start == datetime(2024, 2, 3, 10, 0)


def test_save_creates_parent_directories(tmp_path, evening_calendar):
    """Test save creates missing parent directories."""
    store = JSONScheduleStore(tmp_path / "nested" / "dir" / "schedule.json")
    store.save(evening_calendar)
    assert store.path.exists()


def test_load_missing_file(store):
    """Test loading a missing file raises StoreIOError."""
    with pytest.raises(StoreIOError, match="not found"):
        store.load()


def test_load_directory(tmp_path):
    """Test loading a directory raises StoreIOError."""
    with pytest.raises(StoreIOError):
        JSONScheduleStore(tmp_path).load()


def test_load_invalid_json(store):
    """Test malformed JSON raises StoreParseError."""
    store.path.write_text("{not json")
    with pytest.raises(StoreParseError):
        store.load()


def test_load_schema_mismatch(store):
    """Test JSON missing required fields raises StoreParseError."""
    store.path.write_text('{"schedules": [{"id": 0, "subject": "x"}]}')
    with pytest.raises(StoreParseError):
        store.load()


def test_load_invalid_utf8(store):
    """Test undecodable bytes are a parse failure, not an I/O failure."""
    store.path.write_bytes(
        b'{"schedules": [{"id": 0, "subject": "\xff\xfe", '
        b'"start": "2024-01-01T19:00:00", "end": "2024-01-01T20:00:00"}]}'
    )
    with pytest.raises(StoreParseError):
        store.load()


@pytest.mark.parametrize(
    "field,value",
    [
        ("id", True),
        ("id", "7"),
        ("start", "2024-01-01"),
        ("start", 1704135600),
    ],
)
def test_load_rejects_loosely_typed_values(store, field, value):
    """Test hand-edited values are rejected rather than normalized."""
    entry = {
        "id": 0,
        "subject": "x",
        "start": "2024-01-01T19:00:00",
        "end": "2024-01-01T20:00:00",
    }
    entry[field] = value
    store.path.write_text(json.dumps({"schedules": [entry]}))
    before = store.path.read_bytes()
    with pytest.raises(StoreParseError):
        store.load()
    assert store.path.read_bytes() == before


def test_load_inverted_interval(store):
    """Test an entry with start after end is rejected on load."""
    store.path.write_text(
        '{"schedules": [{"id": 0, "subject": "x", '
        '"start": "2024-01-01T20:00:00", "end": "2024-01-01T19:00:00"}]}'
    )
    with pytest.raises(StoreParseError):
        store.load()


def test_save_unwritable_path(tmp_path, evening_calendar):
    """Test writing over a directory raises StoreIOError."""
    target = tmp_path / "schedule.json"
    target.mkdir()
    with pytest.raises(StoreIOError):
        JSONScheduleStore(target).save(evening_calendar)


def test_initialize_creates_empty_calendar(store):
    """Test initialize writes an empty calendar."""
    assert not store.exists()
    calendar = store.initialize()
    assert calendar == Calendar()
    assert store.exists()
    assert json.loads(store.path.read_text()) == {"schedules": []}


def test_initialize_refuses_existing_file(store, evening_calendar):
    """Test initialize does not overwrite an existing file."""
    store.save(evening_calendar)
    before = store.path.read_bytes()
    with pytest.raises(StoreExistsError):
        store.initialize()
    assert store.path.read_bytes() == before


def test_in_memory_store_copies(evening_calendar):
    """Test the in-memory store does not share state with callers."""
    store = InMemoryScheduleStore(evening_calendar)
    loaded = store.load()
    loaded.schedules.clear()
    assert len(store.load()) == 1
    assert store.save_count == 0


def test_in_memory_store_uninitialized():
    """Test loading an empty in-memory store fails like a missing file."""
    store = InMemoryScheduleStore()
    assert not store.exists()
    with pytest.raises(StoreIOError):
        store.load()
    store.initialize()
    assert store.load() == Calendar()
    with pytest.raises(StoreExistsError):
        store.initialize()
