from pydantic import BaseModel


class _Job(BaseModel):
    file: str
    time_estimated: int = 100
    time_used: int = 0

    @property
    def printing(self) -> bool:
        return self.time_used < self.time_estimated

    @property
    def progress(self) -> float:
        return self.time_used / self.time_estimated * 100

    @property
    def time_left(self) -> int:
        return self.time_estimated - self.time_used


AMBIENT = 21.0


class _Heater(BaseModel):
    actual: float = AMBIENT
    target: float = 0
    step: float = 10

    def tick(self) -> None:
        if self.actual < self.target:
            self.actual = min(self.actual + self.step, self.target)
        elif self.target == 0:
            self.actual = max(self.actual - self.step, AMBIENT)

    @property
    def heating_finished(self) -> bool:
        return self.actual >= self.target
