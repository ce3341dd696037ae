from __future__ import annotations

from task_desk.domain.task_models import TaskErrorCode


class TaskError(Exception):
    code: TaskErrorCode
    message: str = "Error: Task operation failed."

    def __str__(self) -> str:
        return self.message


class TaskNotFoundError(TaskError):
    code = TaskErrorCode.not_found
    message = "Error: Task not found."

    def __init__(self, task_id: int):
        super().__init__(task_id)
        self.task_id = task_id


class CapacityExceededError(TaskError):
    code = TaskErrorCode.capacity_exceeded
    message = "Error: Maximum number of tasks reached."

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.capacity = capacity
