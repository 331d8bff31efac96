import asyncio
from collections.abc import AsyncIterator

from task import CancelToken, OperationCancelled
from worker.events import FetchEvent


class ChannelClosed(Exception):
    def __init__(self):
        super().__init__("event channel is closed")


class EventChannel:
    """Bounded FIFO hand-off between the fetchers and the dashboard.

    Producers get an :class:`EventSender` each (at most ``max_senders``), the
    single consumer gets the one :class:`EventReceiver`. Sending to a full
    channel suspends the producer until the consumer catches up.
    """

    def __init__(self, capacity: int = 1024, max_senders: int = 2) -> None:
        self._queue: asyncio.Queue[FetchEvent] = asyncio.Queue(maxsize=capacity)
        self._closed = CancelToken()
        self._max_senders = max_senders
        self._senders = 0
        self._receiver: EventReceiver | None = None

    @property
    def closed(self) -> bool:
        return self._closed.cancelled

    def qsize(self) -> int:
        return self._queue.qsize()

    def sender(self) -> "EventSender":
        if self._senders >= self._max_senders:
            raise RuntimeError(f"channel allows at most {self._max_senders} senders")
        self._senders += 1
        return EventSender(self)

    def receiver(self) -> "EventReceiver":
        if self._receiver is not None:
            raise RuntimeError("channel allows a single receiver")
        self._receiver = EventReceiver(self)
        return self._receiver

    def close(self) -> None:
        self._closed.cancel()

    async def _put(self, event: FetchEvent) -> None:
        try:
            await self._closed.guard(self._queue.put(event))
        except OperationCancelled:
            raise ChannelClosed from None

    async def _get(self) -> FetchEvent:
        try:
            return await self._closed.guard(self._queue.get())
        except OperationCancelled:
            raise ChannelClosed from None


class EventSender:
    def __init__(self, channel: EventChannel) -> None:
        self._channel = channel

    async def send(self, event: FetchEvent) -> None:
        await self._channel._put(event)


class EventReceiver:
    def __init__(self, channel: EventChannel) -> None:
        self._channel = channel

    async def recv(self) -> FetchEvent:
        return await self._channel._get()

    def __aiter__(self) -> AsyncIterator[FetchEvent]:
        return self

    async def __anext__(self) -> FetchEvent:
        try:
            return await self.recv()
        except ChannelClosed:
            raise StopAsyncIteration from None
