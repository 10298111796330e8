"""All-settle fan-out: run awaitables concurrently, never let one failure cancel the rest."""

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Settled(Generic[T]):
    """Outcome of one task: either ``value`` or ``error`` is set."""

    value: T | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def gather_settled(*aws: Awaitable[T]) -> list[Settled[T]]:
    """Await every awaitable concurrently and return outcomes in input order.

    Exceptions are captured per task instead of propagating. Cancellation of
    the caller still propagates.
    """
    if not aws:
        return []
    outcomes = await asyncio.gather(*aws, return_exceptions=True)
    settled: list[Settled[T]] = []
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            settled.append(Settled(error=outcome))
        else:
            settled.append(Settled(value=outcome))
    return settled
