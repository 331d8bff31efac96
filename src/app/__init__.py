import asyncio
import logging
import sys

from dashboard import TerminalError
from setting import app_settings
from .main import serve


def run() -> None:
    logging.basicConfig(
        format="[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        level=app_settings.logging_level,
        filename=app_settings.log_file,
    )
    logging.getLogger("httpx").setLevel("WARNING")

    try:
        if not sys.stdin.isatty():
            raise TerminalError("cannot read keys, input is not a terminal")
        asyncio.run(serve(app_settings))
    except TerminalError as e:
        logging.getLogger("app").critical("%s", e)
        sys.exit(f"octodash: {e}")
