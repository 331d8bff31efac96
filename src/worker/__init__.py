__all__ = [
    "EventChannel",
    "EventReceiver",
    "EventSender",
    "ChannelClosed",
    "FetchEvent",
    "JobUpdate",
    "StateUpdate",
    "Fetcher",
    "job_fetcher",
    "state_fetcher",
]

from .channel import ChannelClosed, EventChannel, EventReceiver, EventSender
from .events import FetchEvent, JobUpdate, StateUpdate
from .fetcher import Fetcher, job_fetcher, state_fetcher
