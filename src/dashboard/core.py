import logging
from types import TracebackType
from typing import Self

from rich.console import Console
from rich.live import Live

from task import CancelToken, OperationCancelled
from worker.channel import ChannelClosed, EventReceiver
from .models import ViewModel
from .ui import DashboardView, render


class TerminalError(RuntimeError):
    ...


class Dashboard:
    """Sole consumer of the event channel.

    Folds every event into the view model and redraws the whole screen from
    it. The console is private to this class; nothing else writes to the
    terminal while the dashboard is open.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.model: ViewModel = ViewModel()
        self.frames: int = 0
        self.logger: logging.Logger = logging.getLogger("Dashboard")
        self._console: Console = console or Console()
        self._live: Live | None = None

    @property
    def is_open(self) -> bool:
        return self._live is not None

    def open(self) -> None:
        if not self._console.is_terminal:
            raise TerminalError("cannot open dashboard, output is not a terminal")

        self._live = Live(
            console=self._console,
            screen=True,
            auto_refresh=False,
            redirect_stdout=False,
            redirect_stderr=False,
        )
        self._live.start()
        self.logger.debug("terminal opened, size=%s", self._console.size)

    def close(self) -> None:
        if self._live is None:
            return

        self._live.stop()
        self._live = None
        self.logger.debug("terminal restored")

    def view(self) -> DashboardView:
        return DashboardView.from_model(self.model)

    def draw(self) -> None:
        assert self._live is not None, "dashboard is not open"

        self._live.update(render(self.view()), refresh=True)
        self.frames += 1

    async def run(self, receiver: EventReceiver, cancel: CancelToken) -> None:
        self.logger.info("started")
        with self:
            self.draw()
            try:
                while True:
                    event = await cancel.guard(receiver.recv())
                    self.model.apply(event)
                    self.draw()
            except (OperationCancelled, ChannelClosed):
                pass
        self.logger.info("stopped after %d frames", self.frames)

    def __enter__(self) -> Self:
        if not self.is_open:
            self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
