"""
Manages a Rich progress display while templates are being fetched.
Shows an overall bar plus one spinner line per template in flight.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


class ProgressManager:
    """Tracks in-flight and finished templates for the live display."""

    def __init__(self, console: Console, total: int):
        self.console = console
        self.progress = Progress(
            SpinnerColumn(style="yellow"),
            TextColumn("[progress.description]{task.description}", justify="left"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            console=console,
            transient=True,
        )
        self._overall_task_id = self.progress.add_task(
            "[bold yellow]Fetching fresh templates from the citrus grove...",
            total=total,
        )
        self._active_tasks: dict[str, TaskID] = {}
        self._stats = {"completed": 0, "failed": 0, "peak_concurrent": 0}

    def template_started(self, name: str) -> None:
        task_id = self.progress.add_task(f"  {name}.mdc", total=None)
        self._active_tasks[name] = task_id
        self._stats["peak_concurrent"] = max(
            self._stats["peak_concurrent"], len(self._active_tasks)
        )

    def template_finished(self, name: str, success: bool = True) -> None:
        task_id = self._active_tasks.pop(name, None)
        if task_id is not None:
            self.progress.remove_task(task_id)
        if success:
            self._stats["completed"] += 1
        else:
            self._stats["failed"] += 1
        self.progress.advance(self._overall_task_id)

    def get_statistics(self) -> dict:
        return self._stats.copy()

    async def __aenter__(self):
        self.progress.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.progress.stop()
