from __future__ import annotations

import sys
from typing import Any, Iterable, Optional, TextIO

from task_desk.domain.task_models import Task, TaskPriority

PRIORITY_LABELS = {
    TaskPriority.low: "Low",
    TaskPriority.medium: "Medium",
    TaskPriority.high: "High",
}


def format_priority(priority: Any) -> str:
    """Human label for a priority; anything outside the enum is "Unknown"."""
    try:
        return PRIORITY_LABELS[TaskPriority(priority)]
    except (ValueError, TypeError, KeyError):
        return "Unknown"


def format_status(completed: bool) -> str:
    return "Completed" if completed else "Incomplete"


class TaskReport:
    """Writes line-oriented task reports to a text stream."""

    def __init__(self, out: Optional[TextIO] = None):
        self._out = out

    @property
    def out(self) -> TextIO:
        # resolved lazily so pytest's capsys sees stdout swaps
        return self._out if self._out is not None else sys.stdout

    def line(self, text: str = "") -> None:
        print(text, file=self.out)

    def summary(self, task: Task, indent: str = "") -> None:
        self.line(f"{indent}Task ID: {task.id}, Title: {task.title}")

    def details(self, task: Task) -> None:
        self.line(f"Task ID: {task.id}")
        self.line(f"Title: {task.title}")
        self.line(f"Description: {task.description}")
        self.line(f"Priority: {format_priority(task.priority)}")
        self.line(f"Status: {format_status(task.completed)}")

    def all_tasks(self, tasks: Iterable[Task]) -> None:
        self.line("List of all tasks:")
        for task in tasks:
            self.line(f"Task ID: {task.id}, Title: {task.title}, Status: {format_status(task.completed)}")

    def completed(self, tasks: Iterable[Task]) -> None:
        self.line("Completed tasks:")
        for task in tasks:
            if task.completed:
                self.summary(task)

    def incomplete(self, tasks: Iterable[Task]) -> None:
        self.line("Incomplete tasks:")
        found = False
        for task in tasks:
            if not task.completed:
                self.summary(task)
                found = True
        if not found:
            self.line("No incomplete tasks.")

    def grouped(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        self.line("Tasks grouped by priority:")
        for priority in TaskPriority:
            self.line(f"{format_priority(priority)}:")
            matching = [t for t in tasks if t.priority == priority]
            if not matching:
                self.line("  No tasks with this priority.")
            for task in matching:
                self.summary(task, indent="  ")

    def search(self, field: str, fragment: str, matches: Iterable[Task]) -> None:
        self.line(f"Searching tasks with {field} containing '{fragment}':")
        for task in matches:
            self.summary(task)

    def high_priority(self, tasks: Iterable[Task]) -> None:
        for task in tasks:
            if task.priority == TaskPriority.high:
                self.line(f"High-priority task: {task.title}")

    def status_counts(self, completed: int, incomplete: int) -> None:
        self.line(f"Completed tasks: {completed}")
        self.line(f"Incomplete tasks: {incomplete}")

    def priority_counts(self, low: int, medium: int, high: int) -> None:
        self.line(f"Low priority tasks: {low}")
        self.line(f"Medium priority tasks: {medium}")
        self.line(f"High priority tasks: {high}")

    def task_count(self, total: int) -> None:
        self.line(f"Total number of tasks: {total}")
