"""Structured fan-out/fan-in helpers for concurrent GitHub requests."""

import asyncio
from typing import Any, Awaitable


async def gather_all(*awaitables: Awaitable[Any]) -> list[Any]:
    """Run awaitables concurrently and return their results in argument order.

    The first failure cancels the remaining tasks and is re-raised as-is, so
    callers see the original exception rather than an ExceptionGroup.
    """
    try:
        async with asyncio.TaskGroup() as task_group:
            tasks = [task_group.create_task(awaitable) for awaitable in awaitables]  # type: ignore[arg-type]
    except ExceptionGroup as group:
        raise group.exceptions[0]
    return [task.result() for task in tasks]
