"""Change notification for live observation of stored collections."""

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import TypeVar

T = TypeVar("T")


class ChangeFeed:
    """Broadcasts a tick to every subscriber after each committed write."""

    def __init__(self) -> None:
        self._subscribers: set[asyncio.Queue[None]] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def notify(self) -> None:
        for queue in self._subscribers:
            queue.put_nowait(None)

    @asynccontextmanager
    async def subscription(self) -> AsyncIterator[asyncio.Queue[None]]:
        queue: asyncio.Queue[None] = asyncio.Queue()
        self._subscribers.add(queue)
        try:
            yield queue
        finally:
            self._subscribers.discard(queue)


async def observe_snapshots(
    feed: ChangeFeed, load: Callable[[], Awaitable[T]]
) -> AsyncIterator[T]:
    """Yield the current snapshot, then a fresh one after every change."""
    async with feed.subscription() as queue:
        yield await load()
        while True:
            await queue.get()
            # Collapse bursts of writes into a single re-read
            while not queue.empty():
                queue.get_nowait()
            yield await load()
