"""Tests for the settle-all fan-out."""

import asyncio

from gig_organizer.services.fanout import gather_settled


async def _value(value: int, delay: float = 0.0) -> int:
    await asyncio.sleep(delay)
    return value


async def _fail(message: str) -> int:
    raise RuntimeError(message)


def test_failure_does_not_cancel_other_branches() -> None:
    results = asyncio.run(
        gather_settled(_value(1, 0.01), _fail("boom"), _value(3))
    )

    assert [result.ok for result in results] == [True, False, True]
    assert results[0].value == 1
    assert str(results[1].error) == "boom"
    assert results[2].value == 3


def test_value_or_returns_default_for_failures() -> None:
    ok, failed = asyncio.run(gather_settled(_value(7), _fail("nope")))

    assert ok.value_or(0) == 7
    assert failed.value_or(0) == 0


def test_empty_fanout() -> None:
    assert asyncio.run(gather_settled()) == []
