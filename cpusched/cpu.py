"""A virtual CPU that reports which task it runs."""

from __future__ import annotations

import sys
from typing import TextIO

from .task import Task


def run(task: Task, time_slice: int, out: TextIO | None = None) -> str:
    """Report running ``task`` for ``time_slice`` units and return the report.

    The task's remaining burst is left for the caller to update.
    """
    line = (
        f"Running task [{task.name}] (TID: {task.tid}, Priority: {task.priority}, "
        f"Burst: {task.burst}) for {time_slice} units."
    )
    print(line, file=out if out is not None else sys.stdout)
    return line