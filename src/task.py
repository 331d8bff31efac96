import asyncio
import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Self, TypeVar

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


class OperationCancelled(Exception):
    def __init__(self):
        super().__init__("operation cancelled")


class TimerError(Exception):
    @staticmethod
    def from_exception(err: Exception) -> "TimerError":
        return TimerError(f"timer failed, error type={type(err).__name__}: {err}")


class CancelToken:
    """Cancellation signal shared by every task of the process.

    Suspension points are wrapped with :meth:`guard`, so an awaitable still
    pending when the token fires is cancelled and the caller sees
    :class:`OperationCancelled` instead of waiting for it to finish.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        await self._event.wait()

    async def guard(self, aw: Awaitable[T]) -> T:
        if self.cancelled:
            if asyncio.iscoroutine(aw):
                aw.close()
            raise OperationCancelled

        task = asyncio.ensure_future(aw)
        waiter = asyncio.ensure_future(self._event.wait())

        try:
            done, _ = await asyncio.wait(
                {task, waiter}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            waiter.cancel()
            if not task.done():
                task.cancel()

        if task in done:
            return task.result()

        raise OperationCancelled


class PeriodicTask:
    def __init__(
        self,
        interval_secs: float,
        name: str | None = None,
        cancel: CancelToken | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.interval_secs: float = interval_secs
        self.name: str = name or type(self).__name__
        self.logger: logging.Logger = logging.getLogger(self.name)
        self.cancel: CancelToken = cancel or CancelToken()
        self._sleep: Sleep = sleep

    def stop(self) -> None:
        self.cancel.cancel()

    async def ticks(self) -> AsyncGenerator[int | TimerError, None]:
        """Yield tick numbers at a fixed rate until cancelled.

        Deadlines are kept on a fixed grid, so the time spent by the consumer
        between two ticks does not shift the schedule. Deadlines missed by
        more than one interval are skipped. A failing sleep is yielded as a
        :class:`TimerError` in place of the tick it was waiting for.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        tick = 0
        ready = True

        while not self.cancel.cancelled:
            if ready:
                yield tick
                tick += 1
                deadline += self.interval_secs

            now = loop.time()
            if deadline < now - self.interval_secs:
                self.logger.debug("skipping missed ticks")
                deadline = now

            try:
                await self.cancel.guard(self._sleep(max(deadline - now, 0)))
                ready = True
            except OperationCancelled:
                return
            except Exception as e:
                ready = False
                yield TimerError.from_exception(e)
                try:
                    # a broken sleep source is retried at most once per interval
                    await self.cancel.guard(asyncio.sleep(self.interval_secs))
                except OperationCancelled:
                    return

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return
