"""Tests for the submission guard."""

import asyncio
from datetime import timedelta

import pytest
from kungfu import Error, Ok

from rigcart.config import Settings
from rigcart.payment import ALREADY_PROCESSING, SubmissionConflict, SubmissionGuard, SubmissionState


class Operation:
    def __init__(self, result=None, gate=None, error=None):
        self.result = result if result is not None else Ok("order-1")
        self.gate = gate
        self.error = error
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.result


class TestSubmissionGuard:
    async def test_completed_outcome_is_replayed(self, guard):
        op = Operation()
        assert await guard.run("k", op) == Ok("order-1")
        assert await guard.run("k", op) == Ok("order-1")
        assert op.calls == 1
        assert await guard.state("k") is SubmissionState.COMPLETED

    async def test_concurrent_duplicate_is_rejected(self, guard, gate):
        op = Operation(gate=gate)
        first = asyncio.create_task(guard.run("k", op))
        await asyncio.sleep(0)
        assert await guard.state("k") is SubmissionState.PENDING

        match await guard.run("k", op):
            case Error(SubmissionConflict(key=key, message=message)):
                assert key == "k"
                assert message == ALREADY_PROCESSING
            case other:
                pytest.fail(f"expected a conflict, got {other}")

        gate.set()
        assert await first == Ok("order-1")
        assert op.calls == 1

    async def test_failure_is_forgotten(self, guard):
        failing = Operation(result=Error("declined"))
        assert await guard.run("k", failing) == Error("declined")
        assert await guard.state("k") is None

        assert await guard.run("k", Operation()) == Ok("order-1")

    async def test_exception_is_forgotten_and_raised(self, guard):
        with pytest.raises(RuntimeError):
            await guard.run("k", Operation(error=RuntimeError("boom")))
        assert await guard.state("k") is None

    async def test_keys_are_independent(self, guard):
        await guard.run("a", Operation())
        op = Operation(result=Ok("order-2"))
        assert await guard.run("b", op) == Ok("order-2")
        assert op.calls == 1

    async def test_expired_record_runs_again(self):
        guard = SubmissionGuard(ttl=timedelta(seconds=-1))
        op = Operation()
        await guard.run("k", op)
        assert await guard.state("k") is None
        await guard.run("k", op)
        assert op.calls == 2

    async def test_no_ttl_never_expires(self):
        guard = SubmissionGuard(settings=Settings(submission_ttl_seconds=None))
        op = Operation()
        await guard.run("k", op)
        await guard.run("k", op)
        assert op.calls == 1

    async def test_ttl_defaults_from_settings(self):
        guard = SubmissionGuard(settings=Settings(submission_ttl_seconds=-1))
        op = Operation()
        await guard.run("k", op)
        await guard.run("k", op)
        assert op.calls == 2

    async def test_explicit_ttl_wins_over_settings(self):
        guard = SubmissionGuard(ttl=timedelta(hours=1), settings=Settings(submission_ttl_seconds=-1))
        op = Operation()
        await guard.run("k", op)
        await guard.run("k", op)
        assert op.calls == 1

    async def test_expired_records_swept_on_acquire(self):
        guard = SubmissionGuard(ttl=timedelta(seconds=-1))
        for key in ("a", "b", "c"):
            await guard.run(key, Operation())
        assert len(guard) == 1
