from __future__ import annotations
from pydantic import BaseModel, Field
from enum import Enum
from typing import NamedTuple, Optional

MAX_TASKS = 100
# Advisory only; titles and descriptions are stored as given.
MAX_TITLE_LENGTH = 100
MAX_DESC_LENGTH = 500

class TaskPriority(int, Enum):
    low = 0
    medium = 1
    high = 2

class TaskErrorCode(str, Enum):
    not_found = "not_found"
    capacity_exceeded = "capacity_exceeded"

class TaskCreate(BaseModel):
    title: str
    description: str = ""
    priority: TaskPriority = TaskPriority.medium

class Task(TaskCreate):
    id: int = Field(gt=0)
    completed: bool = False

class OperationResult(BaseModel):
    ok: bool
    message: str
    error: Optional[TaskErrorCode] = None
    task: Optional[Task] = None

class StatusCounts(NamedTuple):
    completed: int
    incomplete: int

class PriorityCounts(NamedTuple):
    low: int
    medium: int
    high: int
