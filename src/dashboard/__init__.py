__all__ = [
    "Dashboard",
    "DashboardView",
    "ShutdownWatcher",
    "TerminalError",
    "ViewModel",
]

from .core import Dashboard, TerminalError
from .keyboard import ShutdownWatcher
from .models import ViewModel
from .ui import DashboardView
