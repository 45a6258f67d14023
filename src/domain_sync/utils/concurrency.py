"""Concurrency helpers for fan-out over registry calls."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable
from typing import TypeVar

T = TypeVar("T")


async def gather_fail_fast(aws: Iterable[Awaitable[T]]) -> list[T]:
    """Run awaitables concurrently and return their results in input order.

    On the first failure the pending siblings are cancelled and awaited, then
    the failure is re-raised. When several tasks have already failed, the one
    submitted first wins.
    """

    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        await _cancel_all(tasks)
        raise

    if pending:
        await _cancel_all(pending)

    failures: list[BaseException] = []
    for task in tasks:
        if task not in done or task.cancelled():
            continue
        exc = task.exception()
        if exc is not None:
            failures.append(exc)
    if failures:
        raise failures[0]
    return [task.result() for task in tasks]


async def _cancel_all(tasks: Iterable[asyncio.Future[T]]) -> None:
    pending = [task for task in tasks if not task.done()]
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


__all__ = ["gather_fail_fast"]
