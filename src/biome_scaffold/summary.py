"""Render the end-of-run setup summary."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.text import Text

from . import log
from .models import TaskDetail, TaskResults, TaskStatus

SETUP_COMPLETE = "Setup complete!"
BAR_WIDTH = 20

STATUS_ICONS: dict[TaskStatus, str] = {
    "success": "✔",
    "error": "✖",
    "skipped": "⚠",
}
STATUS_STYLES: dict[TaskStatus, str] = {
    "success": "green",
    "error": "red",
    "skipped": "yellow",
}


@dataclass(frozen=True)
class SummaryItem:
    name: str
    detail: TaskDetail


def lefthook_attempted(tasks: TaskResults) -> bool:
    return tasks.lefthook.status != "skipped" or tasks.lefthook.message is not None


def summary_items(tasks: TaskResults) -> list[SummaryItem]:
    items = [
        SummaryItem("Dependencies", tasks.dependencies),
        SummaryItem("biome.json", tasks.biome_config),
        SummaryItem("Scripts", tasks.scripts),
        SummaryItem(".vscode/settings.json", tasks.settings_file),
    ]
    if lefthook_attempted(tasks):
        items.append(SummaryItem("lefthook", tasks.lefthook))
    return items


def progress_bar(completed: int, total: int, width: int = BAR_WIDTH) -> Text:
    """Return ``[████░░░░]``-style text for ``completed`` out of ``total``.

    Example:
        >>> progress_bar(2, 4, width=4).plain
        '[██░░]'
    """
    filled = round(completed / total * width) if total else 0
    bar = Text("[")
    bar.append("█" * filled, style="green")
    bar.append("░" * (width - filled))
    bar.append("]")
    return bar


def format_item(item: SummaryItem) -> Text:
    status = item.detail.status
    line = Text(f"  {STATUS_ICONS[status]} {item.name}")
    if item.detail.message:
        line.append(f" ({item.detail.message})", style=STATUS_STYLES[status])
    return line


def show_setup_summary(tasks: TaskResults, *, console: Console | None = None) -> None:
    """Print the progress bar and one status line per task."""
    out = console or log.console()
    log.final_success(SETUP_COMPLETE)
    items = summary_items(tasks)
    completed = sum(1 for item in items if item.detail.status == "success")
    header = Text("  ")
    header.append_text(progress_bar(completed, len(items)))
    header.append(f" {completed}/{len(items)} completed")
    out.print(header)
    out.print()
    for item in items:
        out.print(format_item(item))


def echo_task(name: str, detail: TaskDetail) -> None:
    """Print one task outcome as soon as it is known."""
    log.console().print(format_item(SummaryItem(name, detail)))
