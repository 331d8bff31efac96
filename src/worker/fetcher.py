import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Generic, TypeVar

from printer.errors import PrinterError
from printer.models import JobSnapshot, StateSnapshot
from task import CancelToken, OperationCancelled, PeriodicTask, Sleep, TimerError
from worker.channel import ChannelClosed, EventSender
from worker.events import FetchEvent, JobUpdate, StateUpdate

T = TypeVar("T", JobSnapshot, StateSnapshot)

FetchError = PrinterError | TimerError

FETCH_INTERVAL_SECS = 1.0


class Fetcher(PeriodicTask, Generic[T]):
    def __init__(
        self,
        fetch: Callable[[], Awaitable[T]],
        wrap: Callable[[T], FetchEvent],
        sender: EventSender,
        cancel: CancelToken,
        name: str | None = None,
        interval_secs: float = FETCH_INTERVAL_SECS,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        PeriodicTask.__init__(
            self, interval_secs=interval_secs, name=name, cancel=cancel, sleep=sleep
        )
        self.fetch: Callable[[], Awaitable[T]] = fetch
        self.wrap: Callable[[T], FetchEvent] = wrap
        self.sender: EventSender = sender
        self._consumed: bool = False

    async def outcomes(self) -> AsyncGenerator[T | FetchError, None]:
        if self._consumed:
            raise RuntimeError(f"outcomes of {self.name} can only be consumed once")
        self._consumed = True

        async for tick in self.ticks():
            if isinstance(tick, TimerError):
                yield tick
                continue

            try:
                yield await self.cancel.guard(self.fetch())
            except PrinterError as e:
                yield e

    async def run(self) -> None:
        self.logger.info("started")
        async with self:
            try:
                async for outcome in self.outcomes():
                    await self.handle(outcome)
            except (OperationCancelled, ChannelClosed):
                pass
        self.logger.info("stopped")

    async def handle(self, outcome: T | FetchError) -> None:
        match outcome:
            case PrinterError() | TimerError() as err:
                self.logger.error("fetch failed: %s", err)
            case value:
                await self.cancel.guard(self.sender.send(self.wrap(value)))


def job_fetcher(
    fetch: Callable[[], Awaitable[JobSnapshot]],
    sender: EventSender,
    cancel: CancelToken,
) -> Fetcher[JobSnapshot]:
    return Fetcher(fetch, JobUpdate, sender, cancel, name="JobFetcher")


def state_fetcher(
    fetch: Callable[[], Awaitable[StateSnapshot]],
    sender: EventSender,
    cancel: CancelToken,
) -> Fetcher[StateSnapshot]:
    return Fetcher(fetch, StateUpdate, sender, cancel, name="StateFetcher")
