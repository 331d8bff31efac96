from dataclasses import dataclass

from printer.models import JobSnapshot, StateSnapshot


@dataclass(frozen=True, slots=True)
class JobUpdate:
    snapshot: JobSnapshot


@dataclass(frozen=True, slots=True)
class StateUpdate:
    snapshot: StateSnapshot


FetchEvent = JobUpdate | StateUpdate
