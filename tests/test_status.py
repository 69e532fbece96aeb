import pytest

from unilib import Status, StatusError, is_ok


def test_status_codes_are_stable():
    assert Status.OK == 0
    assert Status.NULL_RECEIVER == 1
    assert Status.ALLOC_FAILED == 2
    assert Status.ZERO_CAPACITY == 3


def test_is_ok_only_for_ok():
    assert is_ok(Status.OK)
    assert Status.OK.is_ok
    for status in (Status.NULL_RECEIVER, Status.ALLOC_FAILED, Status.ZERO_CAPACITY):
        assert not is_ok(status)
        assert not status.is_ok


def test_raise_for_status():
    Status.OK.raise_for_status()
    with pytest.raises(StatusError) as excinfo:
        Status.ZERO_CAPACITY.raise_for_status()
    assert excinfo.value.status is Status.ZERO_CAPACITY
    assert "ZERO_CAPACITY" in str(excinfo.value)
