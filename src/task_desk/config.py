"""Settings loaded from environment variables (TASK_DESK_ prefix)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from task_desk.domain.task_models import MAX_TASKS

ENV_PREFIX = "TASK_DESK"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    max_tasks: int = MAX_TASKS


def get_settings() -> Settings:
    max_tasks = _env_int(_k("MAX_TASKS"), MAX_TASKS)
    if max_tasks <= 0:
        max_tasks = MAX_TASKS
    log_level = os.getenv(_k("LOG_LEVEL"), "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"
    return Settings(
        log_level=log_level,
        log_dir=_env_path(_k("LOG_DIR")),
        max_tasks=max_tasks,
    )
