import io
from pathlib import Path

import pytest
from rich.console import Console

from printer import PrinterApi
from setting import AppSettings


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        octoprint_url="http://octoprint.local:5000",
        octoprint_api_key="key1",
        printer_api=PrinterApi.Mock,
        channel_capacity=16,
        mock_printer_interval=0.01,
        mock_printer_job_time=10,
        log_file=tmp_path / "octodash.log",
    )


@pytest.fixture
def console() -> Console:
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system=None,
        width=100,
        height=30,
    )


@pytest.fixture
def job_response() -> dict:
    return {
        "job": {
            "file": {
                "name": "part.gcode",
                "origin": "local",
                "path": "folder/part.gcode",
                "size": 1468987,
                "date": 1378847754,
            },
            "estimatedPrintTime": 8811,
            "lastPrintTime": None,
            "filament": {"tool0": {"length": 810, "volume": 5.36}},
            "user": "admin",
        },
        "progress": {
            "completion": 42.5,
            "filepos": 337942,
            "printTime": 120,
            "printTimeLeft": 300,
            "printTimeLeftOrigin": "estimate",
        },
        "state": "Printing",
    }


@pytest.fixture
def state_response() -> dict:
    return {
        "temperature": {
            "tool0": {"actual": 214.8821, "target": 220.0, "offset": 0},
            "bed": {"actual": 59.7, "target": None, "offset": 5},
        },
        "sd": {"ready": True},
        "state": {
            "text": "Operational",
            "flags": {
                "operational": True,
                "paused": False,
                "printing": False,
                "cancelling": False,
                "pausing": False,
                "sdReady": True,
                "error": False,
                "ready": True,
                "closedOrError": False,
            },
        },
    }
