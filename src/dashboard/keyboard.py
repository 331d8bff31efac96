import asyncio
import logging

from blessed import Terminal

from task import CancelToken

POLL_SECS = 0.1


class ShutdownWatcher:
    """Fires the cancel token when the exit key (Escape by default) is pressed.

    Keys are read in cbreak mode on a worker thread. The read loop polls with a
    short timeout, so it also ends when the token is fired by someone else.
    """

    def __init__(
        self,
        cancel: CancelToken,
        term: Terminal | None = None,
        exit_key: int | str | None = None,
    ) -> None:
        self.cancel: CancelToken = cancel
        self.term: Terminal = term or Terminal()
        if exit_key is None:
            exit_key = self.term.KEY_ESCAPE
        self.exit_key: int | str = exit_key
        self.logger: logging.Logger = logging.getLogger("ShutdownWatcher")

    async def watch(self) -> None:
        self.logger.info("press escape to quit")

        if await asyncio.to_thread(self._read_keys):
            self.logger.info("exit key pressed, shutting down")
            self.cancel.cancel()

    def _read_keys(self) -> bool:
        with self.term.cbreak():
            while not self.cancel.cancelled:
                key = self.term.inkey(timeout=POLL_SECS)
                if key and (key.code == self.exit_key or key == self.exit_key):
                    return True
        return False
