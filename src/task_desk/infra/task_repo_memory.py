from __future__ import annotations
from typing import Any, Callable, List, Optional

from task_desk.domain.errors import CapacityExceededError
from task_desk.domain.task_models import MAX_TASKS, Task, TaskCreate

class InMemoryTaskRepo:
    """
    Ordered in-memory task collection plus the id counter.

    Tasks keep insertion order until explicitly sorted. Reads hand out
    copies, so a caller holding a task never aliases stored state.
    """
    def __init__(self, capacity: int = MAX_TASKS):
        self.capacity = capacity
        self._tasks: List[Task] = []
        self._next_id = 0

    @property
    def next_id(self) -> int:
        return self._next_id

    def _find(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def create(self, data: TaskCreate) -> Task:
        if len(self._tasks) >= self.capacity:
            raise CapacityExceededError(self.capacity)
        self._next_id += 1
        task = Task(
            id=self._next_id,
            title=data.title,
            description=data.description,
            priority=data.priority,
            completed=False,
        )
        self._tasks.append(task)
        return task.model_copy()

    def get(self, task_id: int) -> Optional[Task]:
        task = self._find(task_id)
        return task.model_copy() if task else None

    def update(self, task_id: int, data: TaskCreate) -> Optional[Task]:
        task = self._find(task_id)
        if task is None:
            return None
        task.title = data.title
        task.description = data.description
        task.priority = data.priority
        return task.model_copy()

    def set_completed(self, task_id: int, completed: bool) -> Optional[Task]:
        task = self._find(task_id)
        if task is None:
            return None
        task.completed = completed
        return task.model_copy()

    def delete(self, task_id: int) -> bool:
        task = self._find(task_id)
        if task is None:
            return False
        self._tasks.remove(task)
        return True

    def list(self) -> List[Task]:
        # collection order, never re-sorted here
        return [t.model_copy() for t in self._tasks]

    def clear_completed(self) -> int:
        kept = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(kept)
        self._tasks = kept
        return removed

    def reset(self) -> None:
        self._tasks.clear()
        self._next_id = 0

    def sort(self, key: Callable[[Task], Any]) -> None:
        # list.sort is stable: equal keys keep their prior order
        self._tasks.sort(key=key)

    def count(self) -> int:
        return len(self._tasks)
