import asyncio

from dashboard import ShutdownWatcher
from task import CancelToken
from tests.dashboard.fake_terminal import FakeTerminal, escape


async def test_exit_key_fires_cancel():
    cancel = CancelToken()
    term = FakeTerminal(["a", None, "q", escape()])

    await asyncio.wait_for(ShutdownWatcher(cancel, term).watch(), timeout=2)

    assert cancel.cancelled
    assert term.polls == 4
    assert not term.in_cbreak


async def test_other_keys_are_ignored():
    cancel = CancelToken()
    term = FakeTerminal(["a", "b", "\n"])
    watcher = asyncio.create_task(ShutdownWatcher(cancel, term).watch())

    await asyncio.sleep(0.3)

    assert not cancel.cancelled
    assert not watcher.done()

    cancel.cancel()
    await asyncio.wait_for(watcher, timeout=2)


async def test_custom_exit_key():
    cancel = CancelToken()
    term = FakeTerminal([escape(), "q"])
    watcher = ShutdownWatcher(cancel, term, exit_key="q")

    await asyncio.wait_for(watcher.watch(), timeout=2)

    assert cancel.cancelled
    assert term.polls == 2


async def test_stops_when_cancelled_elsewhere():
    cancel = CancelToken()
    term = FakeTerminal()
    watcher = asyncio.create_task(ShutdownWatcher(cancel, term).watch())

    await asyncio.sleep(0.05)
    cancel.cancel()

    await asyncio.wait_for(watcher, timeout=2)
    assert not term.in_cbreak


def test_scripted_escape_keeps_its_code():
    term = FakeTerminal([escape(), "q"])

    assert term.inkey(0).code == FakeTerminal.KEY_ESCAPE
    assert term.inkey(0).code is None
