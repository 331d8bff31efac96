import asyncio
from asyncio import CancelledError, Task

from pydantic import HttpUrl

from printer.core import BaseActualPrinter
from printer.mock.models import _Heater, _Job
from printer.models import JobSnapshot, StateSnapshot, Temperature


class MockPrinter(BaseActualPrinter):
    def __init__(
        self,
        url: str | HttpUrl,
        api_key: str | None = None,
        interval: float = 1,
        job_time: int = 100,
        bed_expected: int = 60,
        nozzle_expected: int = 210,
        gcode_file: str | None = "mock.gcode",
    ):
        super().__init__(url, api_key)

        self.interval: float = interval
        self.job_time: int = job_time
        self.gcode_file: str | None = gcode_file

        self.bed_expected = bed_expected
        self.nozzle_expected = nozzle_expected

        self.bed = _Heater()
        self.nozzle = _Heater(step=15)

        self.job: _Job | None = None
        self.task: Task[None] | None = None

    async def setup(self) -> None:
        if self.gcode_file is not None:
            self.start_job(self.gcode_file)
        self.task = asyncio.create_task(self._run())

    async def cleanup(self) -> None:
        if self.task is not None:
            self.task.cancel()

    def start_job(self, gcode_file: str) -> None:
        self.job = _Job(file=gcode_file, time_estimated=self.job_time)
        self.bed.target = self.bed_expected
        self.nozzle.target = self.nozzle_expected

    @property
    def printing(self) -> bool:
        return self.job is not None and self.job.printing

    async def fetch_job(self) -> JobSnapshot:
        if self.job is None:
            return JobSnapshot()

        return JobSnapshot(
            file_name=self.job.file,
            estimated_print_time=self.job.time_estimated,
            print_time=self.job.time_used,
            print_time_left=self.job.time_left,
            completion=self.job.progress,
        )

    async def fetch_state(self) -> StateSnapshot:
        return StateSnapshot(
            status="Printing" if self.printing else "Operational",
            hotend=Temperature(actual=self.nozzle.actual, target=self.nozzle.target),
            bed=Temperature(actual=self.bed.actual, target=self.bed.target),
        )

    def tick(self) -> None:
        self.bed.tick()
        self.nozzle.tick()

        if not self.printing:
            return

        assert self.job is not None

        if self.bed.heating_finished and self.nozzle.heating_finished:
            self.job.time_used += 1

        if not self.job.printing:
            self.bed.target = 0
            self.nozzle.target = 0

    async def _run(self) -> None:
        try:
            while True:
                self.tick()
                await asyncio.sleep(self.interval)
        except CancelledError:
            return
