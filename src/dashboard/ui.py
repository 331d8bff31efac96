"""Layout of the full-screen dashboard."""

from dataclasses import dataclass

from rich.align import Align
from rich.console import RenderableType
from rich.layout import Layout
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from .models import ViewModel
from .utils import (
    NO_FILE,
    NO_STATUS,
    format_duration,
    format_temperature,
    gauge_percent,
)

STYLE = "white on black"
GAUGE_STYLE = "italic white on black"


@dataclass(frozen=True, slots=True)
class DashboardView:
    """Every string shown on screen, computed from one ViewModel state."""

    status: str
    file_name: str
    hotend: str
    bed: str
    print_time: str
    estimated_time: str
    remaining_time: str
    gauge: int | None
    gauge_label: str

    @staticmethod
    def from_model(model: ViewModel) -> "DashboardView":
        gauge = gauge_percent(model.completion)

        return DashboardView(
            status=model.status or NO_STATUS,
            file_name=model.file_name or NO_FILE,
            hotend=format_temperature(model.hotend),
            bed=format_temperature(model.bed),
            print_time=format_duration(model.print_time),
            estimated_time=format_duration(model.estimated_time),
            remaining_time=format_duration(model.print_time_left),
            gauge=gauge,
            gauge_label=f"{model.completion:.2f}%" if gauge is not None else "",
        )


def _centered(renderable: RenderableType) -> Align:
    return Align.center(renderable, vertical="middle", style=STYLE)


def _blank() -> Align:
    return _centered(Text(""))


def _labelled(label: str, value: str) -> Align:
    return _centered(Text(f"{label}\n{value}", justify="center"))


def render_gauge(view: DashboardView) -> RenderableType:
    if view.gauge is None:
        return _blank()

    grid = Table.grid(expand=True, padding=(0, 1))
    grid.add_column(ratio=1)
    grid.add_column(no_wrap=True)
    grid.add_row(
        ProgressBar(
            total=100,
            completed=view.gauge,
            style="grey23",
            complete_style=GAUGE_STYLE,
            finished_style=GAUGE_STYLE,
        ),
        Text(view.gauge_label, style=GAUGE_STYLE),
    )
    return _centered(grid)


def render(view: DashboardView) -> Layout:
    """Build the whole screen from scratch for one view."""
    layout = Layout(name="root")
    layout.split_column(
        Layout(_blank(), name="top", size=1),
        Layout(_centered(Text(view.status)), name="status", size=1),
        Layout(_centered(Text(view.file_name)), name="file", size=1),
        Layout(_blank(), name="upper", size=5),
        Layout(name="temperatures", size=2),
        Layout(_blank(), name="middle", minimum_size=5),
        Layout(name="times", size=2),
        Layout(_blank(), name="lower", size=1),
        Layout(render_gauge(view), name="progress", size=1),
        Layout(_blank(), name="bottom", size=1),
    )

    layout["temperatures"].split_row(
        Layout(_labelled("Hotend", view.hotend), name="hotend"),
        Layout(_labelled("Bed", view.bed), name="bed"),
    )
    layout["times"].split_row(
        Layout(_labelled("Print Time", view.print_time), name="print_time"),
        Layout(_labelled("Estimated Time", view.estimated_time), name="estimated"),
        Layout(_labelled("Remaining Time", view.remaining_time), name="remaining"),
    )

    return layout
