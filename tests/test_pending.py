import pytest

from image_provisioner.errors import OperationError, OperationTimeoutError
from image_provisioner.pending import Pending

from fakes import DONE, RUNNING, make_operation


def _sequence(*ops):
    states = list(ops)
    calls = []

    def doable():
        calls.append(1)
        return states.pop(0) if len(states) > 1 else states[0]

    return doable, calls


def test_wait_returns_immediately_when_done(clock):
    doable, calls = _sequence(make_operation("op-1"))

    op = Pending("op-1", doable).wait()

    assert op.name == "op-1"
    assert len(calls) == 1
    assert clock.sleeps == []


def test_wait_polls_until_done(clock):
    doable, calls = _sequence(
        make_operation("op-1", status=RUNNING),
        make_operation("op-1", status=RUNNING),
        make_operation("op-1", status=DONE),
    )
    seen = []

    Pending("op-1", doable, interval=5, progress=lambda name, elapsed, op: seen.append(elapsed)).wait()

    assert len(calls) == 3
    assert clock.sleeps == [5, 5]
    assert seen == [0, 5]


def test_wait_raises_terminal_error():
    doable, _ = _sequence(make_operation("op-1", errors=["disk is corrupt", "quota exceeded"]))

    with pytest.raises(OperationError) as exc_info:
        Pending("op-1", doable).wait()

    assert exc_info.value.operation_name == "op-1"
    assert len(exc_info.value.errors) == 2
    assert "disk is corrupt" in str(exc_info.value)


def test_wait_times_out(clock):
    doable, calls = _sequence(make_operation("op-1", status=RUNNING))

    with pytest.raises(OperationTimeoutError):
        Pending("op-1", doable, interval=10, timeout=30).wait()

    assert clock.now <= 30
    assert len(calls) == 4


def test_wait_propagates_fetch_failure():
    def doable():
        raise RuntimeError("connection reset")

    with pytest.raises(RuntimeError):
        Pending("op-1", doable).wait()
