"""Unit tests for the unique-name allocator."""

from __future__ import annotations

from typing import Iterable, List

import pytest

from createfile import allocator
from createfile.allocator import allocate, check_name, create_unique
from createfile.exceptions import (
    CreateFailedError,
    ExhaustedError,
    InvalidNameError,
    NameTooLongError,
)


class _RecordingExists:
    """Existence predicate over a fixed set of taken names that logs queries."""

    def __init__(self, taken: Iterable[str] = ()) -> None:
        self.taken = set(taken)
        self.queries: List[str] = []

    def __call__(self, name: str) -> bool:
        self.queries.append(name)
        return name in self.taken


class _FakeFileSystem:
    def __init__(self, taken: Iterable[str] = (), error: OSError | None = None):
        self.exists = _RecordingExists(taken)
        self.error = error
        self.created: List[str] = []

    def create(self, name: str) -> str:
        if self.error is not None:
            raise self.error
        self.created.append(name)
        self.exists.taken.add(name)
        return name

    def rename(self, old: str, new: str) -> None:  # pragma: no cover
        raise NotImplementedError


def test_free_name_is_returned_unchanged(monkeypatch):
    calls = []
    monkeypatch.setattr(
        allocator, "generate_candidate", lambda *a: calls.append(a) or "unused"
    )
    exists = _RecordingExists()
    assert allocate("untitled.txt", exists) == "untitled.txt"
    assert exists.queries == ["untitled.txt"]
    assert calls == []


def test_first_numbered_candidate():
    exists = _RecordingExists({"untitled.txt"})
    assert allocate("untitled.txt", exists) == "untitled(1).txt"


def test_skips_taken_candidates_in_order():
    taken = {"report.txt", "report(1).txt", "report(2).txt"}
    exists = _RecordingExists(taken)
    assert allocate("report.txt", exists) == "report(3).txt"
    assert exists.queries == [
        "report.txt",
        "report(1).txt",
        "report(2).txt",
        "report(3).txt",
    ]


def test_gaps_are_not_filled_before_first_free():
    exists = _RecordingExists({"a.txt", "a(2).txt"})
    assert allocate("a.txt", exists) == "a(1).txt"


def test_splits_once(monkeypatch):
    calls = []
    real_split = allocator.split_name

    def _split(name):
        calls.append(name)
        return real_split(name)

    monkeypatch.setattr(allocator, "split_name", _split)
    exists = _RecordingExists({"x.md", "x(1).md", "x(2).md"})
    assert allocate("x.md", exists) == "x(3).md"
    assert calls == ["x.md"]


def test_exhaustion_after_exactly_max_attempts():
    exists = _RecordingExists()
    exists.taken = _Everything()
    with pytest.raises(ExhaustedError) as excinfo:
        allocate("x", exists, max_attempts=999)
    assert len(exists.queries) == 1 + 999
    assert exists.queries[-1] == "x(999)"
    assert excinfo.value.name == "x"
    assert excinfo.value.max_attempts == 999


def test_default_bound_is_999():
    exists = _RecordingExists()
    exists.taken = _Everything()
    with pytest.raises(ExhaustedError):
        allocate("x", exists)
    assert exists.queries[-1] == "x(999)"


def test_zero_attempts_fails_on_first_collision():
    exists = _RecordingExists({"x"})
    with pytest.raises(ExhaustedError):
        allocate("x", exists, max_attempts=0)
    assert exists.queries == ["x"]


def test_negative_attempts_rejected():
    with pytest.raises(ValueError):
        allocate("x", _RecordingExists(), max_attempts=-1)


def test_exists_errors_propagate():
    def _boom(name):
        raise PermissionError(name)

    with pytest.raises(PermissionError):
        allocate("x", _boom)


@pytest.mark.parametrize("name", ["", "bad\0name", "build/", "a/b/"])
def test_invalid_names_rejected(name):
    with pytest.raises(InvalidNameError):
        allocate(name, _RecordingExists())


def test_desired_name_too_long():
    with pytest.raises(NameTooLongError) as excinfo:
        allocate("a" * 11, _RecordingExists(), max_name_length=10)
    assert excinfo.value.limit == 10


def test_candidate_name_too_long():
    exists = _RecordingExists({"abcdefgh.t"})
    with pytest.raises(NameTooLongError):
        allocate("abcdefgh.t", exists, max_name_length=10)


def test_name_length_counts_final_component_bytes():
    check_name("long-directory-name/short", max_name_length=5)
    with pytest.raises(NameTooLongError):
        check_name("dir/ééé", max_name_length=5)


def test_create_unique_creates_allocated_name():
    fs = _FakeFileSystem({"untitled.txt"})
    assert create_unique("untitled.txt", fs) == "untitled(1).txt"
    assert fs.created == ["untitled(1).txt"]


def test_create_unique_wraps_os_errors():
    fs = _FakeFileSystem(error=PermissionError(13, "Permission denied"))
    with pytest.raises(CreateFailedError) as excinfo:
        create_unique("locked.txt", fs)
    assert excinfo.value.name == "locked.txt"
    assert excinfo.value.reason == "Permission denied"
    assert isinstance(excinfo.value.__cause__, PermissionError)


def test_create_unique_does_not_retry_on_failure():
    fs = _FakeFileSystem({"a.txt"}, error=FileExistsError(17, "File exists"))
    with pytest.raises(CreateFailedError):
        create_unique("a.txt", fs)
    assert fs.exists.queries == ["a.txt", "a(1).txt"]


def test_create_unique_exhaustion_propagates():
    fs = _FakeFileSystem({"a", "a(1)", "a(2)"})
    with pytest.raises(ExhaustedError):
        create_unique("a", fs, max_attempts=2)
    assert fs.created == []


class _Everything:
    def __contains__(self, _item) -> bool:
        return True

    def add(self, _item) -> None:  # pragma: no cover
        pass
