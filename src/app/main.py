import asyncio
import logging

from blessed import Terminal
from rich.console import Console

from dashboard import Dashboard, ShutdownWatcher
from printer import ActualPrinter, create_printer
from setting import AppSettings
from task import CancelToken
from worker import EventChannel, job_fetcher, state_fetcher

_logger = logging.getLogger("app")


def make_printer(settings: AppSettings) -> ActualPrinter:
    return create_printer(
        api=settings.printer_api,
        url=str(settings.octoprint_url),
        api_key=settings.octoprint_api_key,
        mock_interval=settings.mock_printer_interval,
        mock_job_time=settings.mock_printer_job_time,
    )


async def serve(
    settings: AppSettings,
    console: Console | None = None,
    term: Terminal | None = None,
    printer: ActualPrinter | None = None,
) -> Dashboard:
    cancel = CancelToken()
    channel = EventChannel(capacity=settings.channel_capacity)
    dashboard = Dashboard(console)
    watcher = ShutdownWatcher(cancel, term)
    printer = printer or make_printer(settings)

    # raises TerminalError before any task is started
    dashboard.open()

    _logger.info("watching %s (%s)", printer.url, settings.printer_api)

    try:
        async with printer, asyncio.TaskGroup() as group:
            group.create_task(
                job_fetcher(printer.fetch_job, channel.sender(), cancel).run()
            )
            group.create_task(
                state_fetcher(printer.fetch_state, channel.sender(), cancel).run()
            )
            group.create_task(dashboard.run(channel.receiver(), cancel))
            group.create_task(watcher.watch())
    finally:
        cancel.cancel()
        channel.close()
        dashboard.close()

    return dashboard
