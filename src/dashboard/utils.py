"""Formatting helpers for the dashboard."""

from printer.models import Temperature

NO_NUMBER = "--"
NO_DURATION = "--:--:--"
NO_FILE = "No File"
NO_STATUS = "No Status"


def seconds_to_time(seconds: float) -> tuple[int, int, float]:
    """Split seconds into whole hours, whole minutes and remaining seconds."""
    hours = int(seconds // 3600)
    seconds = seconds % 3600
    minutes = int(seconds // 60)
    seconds = seconds % 60

    return hours, minutes, seconds


def format_duration(seconds: float | None) -> str:
    if seconds is None:
        return NO_DURATION

    hours, minutes, seconds = seconds_to_time(max(seconds, 0))
    return f"{hours}:{minutes:02d}:{int(seconds):02d}"


def format_number(value: float | None, decimals: int = 2) -> str:
    if value is None:
        return NO_NUMBER
    return f"{value:.{decimals}f}"


def format_temperature(temp: Temperature | None) -> str:
    actual = format_number(temp.actual if temp else None)
    target = format_number(temp.target if temp else None, decimals=0)
    return f"{actual}/{target}°C"


def gauge_percent(completion: float | None) -> int | None:
    """Percentage shown by the progress gauge, ``None`` hides the gauge."""
    if completion is None or not completion > 0:
        return None
    return min(int(completion), 100)
