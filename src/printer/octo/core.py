from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from printer.core import BaseHttpPrinter
from printer.errors import NetworkError, ParseError
from printer.models import JobSnapshot, StateSnapshot, Temperature
from printer.octo.models import CurrentJob, OctoPrinterStatus, TemperatureData

Model = TypeVar("Model", bound=BaseModel)


def parse_temperature(data: TemperatureData | None) -> Temperature | None:
    if data is None:
        return None
    return Temperature(actual=data.actual, target=data.target)


def parse_job(model: CurrentJob) -> JobSnapshot:
    job, progress = model.job, model.progress
    file = job.file if job is not None else None

    return JobSnapshot(
        file_name=file.name if file is not None else None,
        estimated_print_time=job.estimatedPrintTime if job is not None else None,
        last_print_time=job.lastPrintTime if job is not None else None,
        print_time=progress.printTime if progress is not None else None,
        print_time_left=progress.printTimeLeft if progress is not None else None,
        completion=progress.completion if progress is not None else None,
    )


def parse_state(model: OctoPrinterStatus) -> StateSnapshot:
    temperature = model.temperature

    return StateSnapshot(
        status=model.state.text if model.state is not None else None,
        hotend=parse_temperature(temperature.tool0) if temperature else None,
        bed=parse_temperature(temperature.bed) if temperature else None,
    )


class OctoPrinter(BaseHttpPrinter):
    async def fetch_job(self) -> JobSnapshot:
        model = await self._get("/api/job", CurrentJob)
        return parse_job(model)

    async def fetch_state(self) -> StateSnapshot:
        model = await self._get("/api/printer", OctoPrinterStatus)
        return parse_state(model)

    async def _get(self, path: str, model_class: type[Model]) -> Model:
        url = self.url + path

        try:
            resp = await self.client.get(url, headers=self.headers)
            resp.raise_for_status()
            body = await resp.aread()
        except httpx.HTTPError as e:
            raise NetworkError.from_http_error(e) from e

        try:
            return model_class.model_validate_json(body)
        except ValidationError as e:
            raise ParseError.from_validation_error(e) from e
