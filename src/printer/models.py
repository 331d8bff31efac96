from pydantic import BaseModel, ConfigDict


class Temperature(BaseModel):
    model_config = ConfigDict(frozen=True)

    actual: float | None = None
    target: float | None = None


class JobSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_name: str | None = None
    estimated_print_time: float | None = None  # seconds
    last_print_time: float | None = None
    print_time: float | None = None
    print_time_left: float | None = None
    completion: float | None = None  # percentage, 0 - 100


class StateSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str | None = None
    hotend: Temperature | None = None
    bed: Temperature | None = None
