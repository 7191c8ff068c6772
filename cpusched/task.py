"""The task record shared by the scheduler queues."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Task:
    """A unit of work waiting for the CPU.

    ``priority`` 1 is the highest.
    ``burst`` is the execution time still remaining.
    """

    name: str
    tid: int
    priority: int
    burst: int
    deadline: int = 0
    waiting_time: int = 0

    def describe(self) -> str:
        """Return the one-line listing form of the task."""
        return (
            f"[{self.name}] [{self.priority}] [{self.burst}] "
            f"[{self.deadline}] [{self.waiting_time}]"
        )