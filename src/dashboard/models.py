from dataclasses import dataclass

from printer.models import JobSnapshot, StateSnapshot, Temperature
from worker.events import FetchEvent, JobUpdate, StateUpdate

JOB_FIELDS = (
    "file_name",
    "estimated_print_time",
    "last_print_time",
    "print_time",
    "print_time_left",
    "completion",
)
STATE_FIELDS = ("status", "hotend", "bed")


@dataclass(slots=True)
class ViewModel:
    """Latest known value of every displayed field.

    Job fields and state fields are refreshed by different fetchers and are
    never aligned in time with each other.
    """

    # from JobSnapshot
    file_name: str | None = None
    estimated_print_time: float | None = None
    last_print_time: float | None = None
    print_time: float | None = None
    print_time_left: float | None = None
    completion: float | None = None

    # from StateSnapshot
    status: str | None = None
    hotend: Temperature | None = None
    bed: Temperature | None = None

    @property
    def estimated_time(self) -> float | None:
        if self.last_print_time is not None:
            return self.last_print_time
        return self.estimated_print_time

    def apply(self, event: FetchEvent) -> None:
        match event:
            case JobUpdate(snapshot=snapshot):
                self.apply_job(snapshot)
            case StateUpdate(snapshot=snapshot):
                self.apply_state(snapshot)
            case _:
                raise TypeError(f"unknown event {event!r}")

    def apply_job(self, job: JobSnapshot) -> None:
        for name in JOB_FIELDS:
            setattr(self, name, getattr(job, name))

    def apply_state(self, state: StateSnapshot) -> None:
        for name in STATE_FIELDS:
            setattr(self, name, getattr(state, name))
