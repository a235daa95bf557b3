"""Settle-all fan-out of independent requests."""

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Settled(Generic[T]):
    """Outcome of one fan-out branch: a value or the exception it raised."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        if self.error is not None or self.value is None:
            return default
        return self.value


async def gather_settled(*awaitables: Awaitable[T]) -> list[Settled[T]]:
    """Run all branches concurrently; one failure never cancels the others.

    Results keep the argument order. Cancellation of the caller propagates.
    """
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    settled: list[Settled[T]] = []
    for result in results:
        if isinstance(result, Exception):
            settled.append(Settled(error=result))
        elif isinstance(result, BaseException):
            raise result
        else:
            settled.append(Settled(value=result))
    return settled
