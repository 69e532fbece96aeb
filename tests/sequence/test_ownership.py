"""Ownership transfer between callers and sequences."""

import logging

import pytest

import unilib.sequence
from unilib import Deque, Status


def test_push_takes_the_callers_element(cell_type):
    x = cell_type(1)
    deque = Deque()
    deque.push_back(x)
    assert deque.front() is x


def test_push_copy_owns_a_clone(cell_type):
    x = cell_type(1)
    deque = Deque(copier=cell_type.clone)
    assert deque.push_back_copy(x) is Status.OK
    assert deque.push_front_copy(x) is Status.OK

    assert deque.front() is not x
    assert deque.back() is not x
    assert deque.front() is not deque.back()
    x.value = 99
    assert [cell.value for cell in deque] == [1, 1]


def test_default_copier_is_shallow_copy():
    original = [1, 2]
    deque = Deque()
    deque.push_back_copy(original)
    stored = deque.front()
    assert stored == original
    assert stored is not original


def test_popped_elements_are_not_released(cells, recorder, released):
    deque = Deque(releaser=recorder)
    deque.push_back(cells[0])
    deque.push_back(cells[1])
    assert deque.pop_back() is cells[1]
    assert deque.pop_front() is cells[0]
    deque.release()
    assert released == []


def test_empty_releases_every_element_once(cells, recorder, released):
    deque = Deque(releaser=recorder)
    for cell in cells:
        deque.push_back(cell)
    capacity = deque.capacity

    assert deque.empty() is Status.OK
    assert released == cells
    assert deque.length == 0
    assert deque.capacity == capacity

    deque.empty()
    assert released == cells


def test_release_frees_elements_and_store(cells, recorder, released):
    deque = Deque(8, releaser=recorder)
    for cell in cells[:3]:
        deque.push_back(cell)

    assert deque.release() is Status.OK
    assert released == cells[:3]
    assert deque.length == 0
    assert deque.capacity == 0


def test_released_sequence_can_be_reinitialised(cells):
    deque = Deque()
    deque.push_back(cells[0])
    deque.release()

    assert Deque.init(deque) is Status.OK
    assert deque.push_back(cells[1]) is Status.OK
    assert list(deque) == [cells[1]]


def test_failed_copy_push_releases_the_copy(cells, recorder, released, monkeypatch, cell_type):
    deque = Deque(copier=cell_type.clone, releaser=recorder)
    deque.push_back(cells[0])

    def _fail(capacity: int):
        raise MemoryError

    monkeypatch.setattr(unilib.sequence, "allocate_slots", _fail)

    assert deque.push_back_copy(cells[1]) is Status.ALLOC_FAILED
    assert deque.push_front_copy(cells[2]) is Status.ALLOC_FAILED

    assert len(released) == 2
    assert released[0] is not cells[1] and released[0].value == cells[1].value
    assert released[1] is not cells[2] and released[1].value == cells[2].value
    assert list(deque) == [cells[0]]


def test_failed_copy_returns_alloc_failed(caplog):
    def _copier(elem):
        raise MemoryError

    deque = Deque(copier=_copier)
    with caplog.at_level(logging.WARNING, logger="unilib.sequence"):
        assert deque.push_back_copy(1) is Status.ALLOC_FAILED
    assert deque.length == 0
    assert any("element copy" in rec.message for rec in caplog.records)


def test_releaser_errors_propagate(cells, caplog):
    def _releaser(elem):
        raise RuntimeError("boom")

    deque = Deque(releaser=_releaser)
    deque.push_back(cells[0])
    with caplog.at_level(logging.WARNING, logger="unilib.sequence"):
        with pytest.raises(RuntimeError):
            deque.empty()
    assert deque.length == 0
    assert any("Releaser failed" in rec.message for rec in caplog.records)
