import logging
from typing import Any, List, Optional, TextIO
from task_desk.domain.errors import CapacityExceededError, TaskError, TaskNotFoundError
from task_desk.domain.task_models import (
    OperationResult, PriorityCounts, StatusCounts, Task, TaskCreate, TaskPriority,
)
from task_desk.infra.task_repo_memory import InMemoryTaskRepo
from task_desk.services.task_report import TaskReport, format_priority, format_status

logger = logging.getLogger("task_desk.tasks")

class TaskService:
    def __init__(self, repo: InMemoryTaskRepo, out: Optional[TextIO] = None):
        self.repo = repo
        self.report = TaskReport(out)

    # ---- results ----

    def _ok(self, message: str, task: Optional[Task] = None) -> OperationResult:
        self.report.line(message)
        return OperationResult(ok=True, message=message, task=task)

    def _fail(self, err: TaskError, event: str) -> OperationResult:
        logger.warning(event, extra={"category": "tasks", "event": event, "error": err.code.value})
        self.report.line(err.message)
        return OperationResult(ok=False, message=err.message, error=err.code)

    # ---- create / read ----

    def add(self, data: TaskCreate) -> OperationResult:
        try:
            task = self.repo.create(data)
        except CapacityExceededError as err:
            return self._fail(err, "task.create.rejected")
        logger.info("task.create", extra={"category": "tasks", "event": "task.create", "task_id": task.id, "title": task.title})
        return self._ok("Task added successfully.", task)

    def create_task(self, title: str, description: str = "", priority: TaskPriority = TaskPriority.medium) -> OperationResult:
        return self.add(TaskCreate(title=title, description=description, priority=priority))

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self.repo.get(task_id)

    def search_by_id(self, task_id: int) -> Optional[Task]:
        return self.repo.get(task_id)

    def list_tasks(self) -> List[Task]:
        return self.repo.list()

    def count(self) -> int:
        return self.repo.count()

    # ---- mutations ----

    def delete_task(self, task_id: int) -> OperationResult:
        if not self.repo.delete(task_id):
            return self._fail(TaskNotFoundError(task_id), "task.delete.missing")
        logger.info("task.delete", extra={"category": "tasks", "event": "task.delete", "task_id": task_id})
        return self._ok(f"Task {task_id} deleted successfully.")

    def update_task(self, task_id: int, title: str, description: str, priority: TaskPriority) -> OperationResult:
        data = TaskCreate(title=title, description=description, priority=priority)
        task = self.repo.update(task_id, data)
        if task is None:
            return self._fail(TaskNotFoundError(task_id), "task.update.missing")
        logger.info("task.update", extra={"category": "tasks", "event": "task.update", "task_id": task_id})
        return self._ok("Task updated successfully.", task)

    def mark_completed(self, task_id: int) -> OperationResult:
        return self.set_status(task_id, True)

    def set_status(self, task_id: int, completed: bool) -> OperationResult:
        task = self.repo.set_completed(task_id, completed)
        if task is None:
            return self._fail(TaskNotFoundError(task_id), "task.status.missing")
        logger.info(
            "task.status",
            extra={"category": "tasks", "event": "task.status", "task_id": task_id, "completed": completed},
        )
        state = "completed" if completed else "incomplete"
        return self._ok(f"Task {task_id} marked as {state}.", task)

    def clear_completed(self) -> OperationResult:
        removed = self.repo.clear_completed()
        logger.info("task.clear_completed", extra={"category": "tasks", "event": "task.clear_completed", "removed": removed})
        return self._ok("Completed tasks have been cleared.")

    def reset(self) -> OperationResult:
        self.repo.reset()
        logger.info("task.reset", extra={"category": "tasks", "event": "task.reset"})
        return self._ok("All tasks have been reset.")

    def sort_by_priority(self) -> OperationResult:
        self.repo.sort(key=lambda t: t.priority.value)
        return self._ok("Tasks sorted by priority.")

    def sort_by_title(self) -> OperationResult:
        self.repo.sort(key=lambda t: t.title)
        return self._ok("Tasks sorted by title.")

    # ---- aggregates ----

    def count_by_status(self) -> StatusCounts:
        completed = sum(1 for t in self.repo.list() if t.completed)
        return StatusCounts(completed=completed, incomplete=self.repo.count() - completed)

    def count_by_priority(self) -> PriorityCounts:
        tally = {p: 0 for p in TaskPriority}
        for task in self.repo.list():
            tally[task.priority] += 1
        return PriorityCounts(
            low=tally[TaskPriority.low],
            medium=tally[TaskPriority.medium],
            high=tally[TaskPriority.high],
        )

    # ---- reports ----

    def display_task_details(self, task_id: int) -> OperationResult:
        task = self.repo.get(task_id)
        if task is None:
            return self._fail(TaskNotFoundError(task_id), "task.details.missing")
        self.report.details(task)
        return OperationResult(ok=True, message="", task=task)

    def list_all(self) -> None:
        self.report.all_tasks(self.repo.list())

    def list_completed(self) -> None:
        self.report.completed(self.repo.list())

    def list_incomplete(self) -> None:
        self.report.incomplete(self.repo.list())

    def group_by_priority(self) -> None:
        self.report.grouped(self.repo.list())

    def search_by_title(self, fragment: str) -> List[Task]:
        matches = [t for t in self.repo.list() if fragment in t.title]
        self.report.search("title", fragment, matches)
        return matches

    def search_by_description(self, fragment: str) -> List[Task]:
        matches = [t for t in self.repo.list() if fragment in t.description]
        self.report.search("description", fragment, matches)
        return matches

    def notify_high_priority(self) -> None:
        self.report.high_priority(self.repo.list())

    def report_status_counts(self) -> StatusCounts:
        counts = self.count_by_status()
        self.report.status_counts(*counts)
        return counts

    def report_priority_counts(self) -> PriorityCounts:
        counts = self.count_by_priority()
        self.report.priority_counts(*counts)
        return counts

    def report_task_count(self) -> int:
        total = self.count()
        self.report.task_count(total)
        return total

    # ---- formatting ----

    @staticmethod
    def format_priority(priority: Any) -> str:
        return format_priority(priority)

    @staticmethod
    def format_status(completed: bool) -> str:
        return format_status(completed)
