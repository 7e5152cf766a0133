"""Asynchronous operation utilities"""

import asyncio
import threading
from typing import Any, Awaitable, Callable, Coroutine, Iterable, List, TypeVar

T = TypeVar('T')
R = TypeVar('R')


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run async coroutine in sync context

    Args:
        coro: Coroutine to run

    Returns:
        Coroutine result
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        # No running loop
        loop = None

    if loop and loop.is_running():
        # Already in async context, run on a fresh loop in a worker thread
        outcome = {}

        def run_in_thread():
            try:
                outcome['result'] = asyncio.run(coro)
            except BaseException as e:
                outcome['error'] = e

        thread = threading.Thread(target=run_in_thread)
        thread.start()
        thread.join()

        if 'error' in outcome:
            raise outcome['error']
        return outcome['result']

    return asyncio.run(coro)


async def gather_bounded(items: Iterable[T],
                         processor: Callable[[T], Awaitable[R]],
                         max_workers: int = 8) -> List[R]:
    """
    Run processor over items with bounded concurrency

    Results keep the order of items. The first exception propagates and
    cancels the tasks still running.

    Args:
        items: Items to process
        processor: Async processor function
        max_workers: Maximum number of concurrent calls

    Returns:
        List of results
    """
    semaphore = asyncio.Semaphore(max_workers)

    async def bounded(item: T) -> R:
        async with semaphore:
            return await processor(item)

    tasks = [asyncio.ensure_future(bounded(item)) for item in items]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise
