# tests/conftest.py

from __future__ import annotations

import io
import logging

import pytest

from task_desk.infra.task_repo_memory import InMemoryTaskRepo
from task_desk.services.task_service import TaskService


@pytest.fixture()
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def repo() -> InMemoryTaskRepo:
    return InMemoryTaskRepo()


@pytest.fixture()
def service(repo: InMemoryTaskRepo, out: io.StringIO) -> TaskService:
    return TaskService(repo, out=out)


@pytest.fixture()
def restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def drain(out: io.StringIO):
    """Return everything written to `out` so far as lines, then reset it."""

    def _drain() -> list[str]:
        text = out.getvalue()
        out.seek(0)
        out.truncate(0)
        return text.splitlines()

    return _drain
