import logging
from typing import Optional, TextIO

from task_desk.config import Settings, get_settings
from task_desk.infra.task_repo_memory import InMemoryTaskRepo
from task_desk.observability.logging import setup_logging
from task_desk.services.task_service import TaskService

logger = logging.getLogger("task_desk.system")


def create_service(settings: Optional[Settings] = None, out: Optional[TextIO] = None) -> TaskService:
    settings = settings or get_settings()
    setup_logging(settings)
    logger.info(
        "system.start",
        extra={"category": "system", "event": "system.start", "max_tasks": settings.max_tasks},
    )

    repo = InMemoryTaskRepo(capacity=settings.max_tasks)
    return TaskService(repo, out=out)
