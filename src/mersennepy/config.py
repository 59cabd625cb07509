"""Search configuration and validation for mersennepy."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


EXECUTORS = ("process", "thread")


@dataclass
class SearchConfig:
    workers: Optional[int] = None
    executor: str = "process"
    verbose: bool = False
    time_job: bool = False
    progress_to_terminal: bool = True

_CONFIG: Optional[SearchConfig] = None

class ConfigError(ValueError):
    pass

#user-inputted data is validated here and put in an instance of SearchConfig
def configure_search(
    *,
    workers: Optional[int] = None, #None means one worker per cpu
    executor: str = "process",
    verbose: bool = False,
    time_job: bool = False,
    progress_to_terminal: bool = True,
) -> SearchConfig:
    """Configure how exponent ranges are searched.

    Settings stay in effect for every search() call until clear_config().
    """
    if workers is not None and workers <= 0:
        raise ConfigError("workers must be positive if set")
    if executor not in EXECUTORS:
        raise ConfigError(f"executor must be one of {', '.join(EXECUTORS)}")
    if verbose and not progress_to_terminal:
        raise ConfigError("verbose output requires progress_to_terminal")

    cfg = SearchConfig(
        workers=workers,
        executor=executor,
        verbose=verbose,
        time_job=time_job,
        progress_to_terminal=progress_to_terminal,
    )

    global _CONFIG
    _CONFIG = cfg
    return cfg

def get_config() -> Optional[SearchConfig]:
    return _CONFIG

def clear_config() -> None:
    global _CONFIG
    _CONFIG = None

def resolved_workers(cfg: Optional[SearchConfig]) -> int:
    if cfg is not None and cfg.workers is not None:
        return cfg.workers
    return os.cpu_count() or 1
