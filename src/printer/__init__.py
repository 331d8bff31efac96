__all__ = [
    "PrinterApi",
    "MockPrinter",
    "OctoPrinter",
    "ActualPrinter",
    "create_printer",
]

from .core import PrinterApi
from .mock.core import MockPrinter
from .octo.core import OctoPrinter

ActualPrinter = OctoPrinter | MockPrinter


def create_printer(
    api: PrinterApi,
    url: str,
    api_key: str | None,
    mock_interval: float = 1,
    mock_job_time: int = 100,
) -> ActualPrinter:
    match api:
        case PrinterApi.OctoPrint:
            return OctoPrinter(url=url, api_key=api_key)
        case PrinterApi.Mock:
            return MockPrinter(
                url=url,
                api_key=api_key,
                interval=mock_interval,
                job_time=mock_job_time,
            )
        case _:
            raise NotImplementedError
