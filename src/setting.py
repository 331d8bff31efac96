from enum import StrEnum
from pathlib import Path

from pydantic import HttpUrl, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from printer.core import PrinterApi


class LoggingLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    ERROR = "ERROR"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


class AppSettings(BaseSettings):
    octoprint_url: HttpUrl = HttpUrl("http://localhost:5000")
    octoprint_api_key: str = ""
    printer_api: PrinterApi = PrinterApi.OctoPrint
    channel_capacity: PositiveInt = 1024
    mock_printer_interval: PositiveFloat = 1
    mock_printer_job_time: PositiveInt = 300
    logging_level: LoggingLevel = LoggingLevel.INFO
    log_file: Path = Path("octodash.log")


class EnvAppSettings(AppSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


app_settings: AppSettings = EnvAppSettings()


def display() -> None:
    print(EnvAppSettings().model_dump_json(indent=4))
