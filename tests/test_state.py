"""Tests for the execution state suspend/resume protocol."""

import logging

import pytest

from lazy_generator.core.errors import InvalidState, ProducerFault
from lazy_generator.core.models import FaultPolicy, Phase
from lazy_generator.core.state import ExecutionState


def emit(*values):
    for value in values:
        yield value


def failing_after(*values):
    for value in values:
        yield value
    raise KeyError("boom")


def test_lazy_start():
    """Test that no producer code runs before the first resume."""
    calls = []

    def producer():
        calls.append("started")
        yield 1

    state = ExecutionState(producer())

    assert calls == []
    assert state.phase is Phase.NOT_STARTED
    assert not state.done


def test_resume_stores_each_emission():
    """Test that each resume stores exactly one emitted value."""
    state = ExecutionState(emit("a", "b"))

    state.resume()
    assert state.phase is Phase.SUSPENDED
    assert state.value == "a"

    state.resume()
    assert state.value == "b"

    state.resume()
    assert state.phase is Phase.COMPLETED
    assert state.done


def test_value_only_available_while_suspended():
    """Test that the value slot is empty before start and after completion."""
    state = ExecutionState(emit(1))

    with pytest.raises(InvalidState, match="not_started"):
        state.value

    state.resume()
    state.resume()

    with pytest.raises(InvalidState, match="completed"):
        state.value


def test_locals_survive_suspension():
    """Test that producer-local variables persist across resumes."""

    def counter():
        total = 0
        for step in (1, 2, 3):
            total += step
            yield total

    state = ExecutionState(counter())
    seen = []
    state.resume()
    while not state.done:
        seen.append(state.value)
        state.resume()

    assert seen == [1, 3, 6]


def test_resume_after_completion_is_noop():
    """Test that a completed state never runs producer code again."""
    runs = []

    def producer():
        runs.append(1)
        yield "only"

    state = ExecutionState(producer())
    state.resume()
    state.resume()
    resumes = state.stats.resumes

    state.resume()
    state.resume()

    assert runs == [1]
    assert state.done
    assert state.stats.resumes == resumes


def test_rejects_coroutines():
    """Test that producers suspending on awaitables are rejected."""

    async def awaiting():
        return 1

    coro = awaiting()
    try:
        with pytest.raises(TypeError, match="emission points"):
            ExecutionState(coro)
    finally:
        coro.close()


def test_rejects_async_generators():
    """Test that async generator producers are rejected."""

    async def agen():
        yield 1

    with pytest.raises(TypeError, match="emission points"):
        ExecutionState(agen())


def test_rejects_plain_iterators():
    """Test that only generator objects are accepted."""
    with pytest.raises(TypeError, match="generator object"):
        ExecutionState(iter([1, 2]))


def test_rejects_started_generator():
    """Test that an already running producer cannot be wrapped."""
    frame = emit(1, 2)
    next(frame)

    with pytest.raises(ValueError, match="already been started"):
        ExecutionState(frame)


def test_fault_discarded_by_default(caplog):
    """Test that producer faults end the sequence silently but are logged."""
    state = ExecutionState(failing_after(1), FaultPolicy.DISCARD)

    state.resume()
    assert state.value == 1

    with caplog.at_level(logging.WARNING):
        state.resume()

    assert state.done
    assert state.stats.faults_discarded == 1
    assert "Discarding KeyError" in caplog.text


def test_fault_raised_when_configured():
    """Test that the RAISE policy surfaces the fault to the consumer."""
    state = ExecutionState(failing_after(1), FaultPolicy.RAISE)
    state.resume()

    with pytest.raises(ProducerFault) as exc_info:
        state.resume()

    assert isinstance(exc_info.value.fault, KeyError)
    assert exc_info.value.__cause__ is exc_info.value.fault
    assert state.done


def test_default_policy_comes_from_config(monkeypatch):
    """Test that the environment selects the fault policy."""
    monkeypatch.setenv("LAZY_GENERATOR_FAULT_POLICY", "raise")

    state = ExecutionState(emit())

    assert state.fault_policy is FaultPolicy.RAISE


def test_base_exceptions_propagate():
    """Test that non-Exception errors are never discarded."""

    def interrupted():
        yield 1
        raise KeyboardInterrupt

    state = ExecutionState(interrupted(), FaultPolicy.DISCARD)
    state.resume()

    with pytest.raises(KeyboardInterrupt):
        state.resume()

    assert state.done


def test_destroy_mid_sequence_runs_cleanup(ledger):
    """Test that destroying a suspended state releases producer resources."""
    state = ExecutionState(ledger.producer(1, 2, 3))
    state.resume()
    assert ledger.live == 1

    state.destroy()

    assert ledger.live == 0
    assert state.done
    with pytest.raises(InvalidState):
        state.value


def test_destroy_before_start(ledger):
    """Test that destroying an unstarted state runs no producer code."""
    state = ExecutionState(ledger.producer(1))

    state.destroy()
    state.destroy()

    assert ledger.acquired == 0
    assert state.done


def test_fault_during_cleanup_follows_policy():
    """Test that exceptions raised while closing follow the fault policy."""

    def bad_cleanup():
        try:
            yield 1
        finally:
            raise OSError("cleanup failed")

    state = ExecutionState(bad_cleanup(), FaultPolicy.RAISE)
    state.resume()

    with pytest.raises(ProducerFault, match="cleanup failed"):
        state.destroy()
    assert state.done
