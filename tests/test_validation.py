from __future__ import annotations

from datetime import datetime

import pytest

from tasktracker.domain.enums import TaskStatus
from tasktracker.domain.errors import ValidationError
from tasktracker.domain.validation import (
    MAX_TASK_ID,
    parse_deadline,
    parse_task_id,
    validate_description,
    validate_status,
    validate_title,
)


def test_title_is_stripped() -> None:
    assert validate_title("  Buy milk ") == "Buy milk"


@pytest.mark.parametrize("raw", [None, "", " \t "])
def test_blank_title_is_rejected(raw) -> None:
    with pytest.raises(ValidationError, match="title is required"):
        validate_title(raw)


def test_missing_description_becomes_empty() -> None:
    assert validate_description(None) == ""
    assert validate_description("2%") == "2%"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("pending", TaskStatus.PENDING), ("done", TaskStatus.DONE)],
)
def test_known_statuses(raw, expected) -> None:
    assert validate_status(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "archived", "in_progress", "DONE", " done "])
def test_unknown_status_is_rejected(raw) -> None:
    with pytest.raises(ValidationError, match="pending, done"):
        validate_status(raw)


def test_task_id_is_parsed() -> None:
    assert parse_task_id("42") == 42
    assert parse_task_id(" 7 ") == 7


@pytest.mark.parametrize("raw", [None, "", "abc", "-1", "0", "1.5", "²"])
def test_bad_task_id_is_rejected(raw) -> None:
    with pytest.raises(ValidationError):
        parse_task_id(raw)


def test_largest_storable_id_is_accepted() -> None:
    assert parse_task_id(str(MAX_TASK_ID)) == MAX_TASK_ID
    assert parse_task_id("0007") == 7


@pytest.mark.parametrize("raw", [str(MAX_TASK_ID + 1), "99999999999999999999", "9" * 5000])
def test_id_beyond_sqlite_integer_is_rejected(raw) -> None:
    with pytest.raises(ValidationError, match="out of range"):
        parse_task_id(raw)


def test_blank_deadline_is_absent() -> None:
    assert parse_deadline(None) is None
    assert parse_deadline("  ") is None


def test_aware_deadline_is_normalized_to_naive_utc() -> None:
    assert parse_deadline("2026-11-01T12:00:00+02:00") == datetime(2026, 11, 1, 10, 0)


def test_date_only_deadline() -> None:
    assert parse_deadline("2026-11-01") == datetime(2026, 11, 1)


def test_garbage_deadline_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_deadline("tomorrow")
