"""Round-robin schedulers, plain and with priority queues."""

from __future__ import annotations

import sys
from typing import TextIO

from .cpu import run
from .task import Task
from .tasklist import TaskList

MIN_PRIORITY = 1
MAX_PRIORITY = 10
QUANTUM = 2


class InvalidPriorityError(ValueError):
    """Raised when a task's priority lies outside the allowed range."""

    def __init__(self, priority: int) -> None:
        super().__init__(
            f"Erro: Prioridade inválida ({priority}). "
            f"Deve estar entre {MIN_PRIORITY} e {MAX_PRIORITY}."
        )
        self.priority = priority


class _BaseScheduler:
    def __init__(self, quantum: int = QUANTUM, out: TextIO | None = None) -> None:
        if quantum <= 0:
            raise ValueError("quantum must be positive")
        self.quantum = quantum
        self._out = out
        self._next_tid = 1

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _new_task(self, name: str, priority: int, burst: int) -> Task:
        task = Task(name=name, tid=self._next_tid, priority=priority, burst=burst)
        self._next_tid += 1
        return task

    def _run_slice(self, task: Task) -> None:
        time_slice = min(task.burst, self.quantum)
        run(task, time_slice, self.out)
        task.burst -= time_slice

    def _report_done(self, task: Task) -> None:
        print(f"Task [{task.name}] (TID: {task.tid}) concluída.", file=self.out)


class RoundRobinScheduler(_BaseScheduler):
    """A single FIFO queue served one quantum at a time; priority is ignored."""

    def __init__(self, quantum: int = QUANTUM, out: TextIO | None = None) -> None:
        super().__init__(quantum, out)
        self._queue = TaskList()

    def add(self, name: str, priority: int, burst: int) -> Task:
        """Queue a new task and return it."""
        task = self._new_task(name, 0, burst)
        self._queue.append(task)
        return task

    def schedule(self) -> list[Task]:
        """Run every queued task to completion; return them in finishing order."""
        finished: list[Task] = []
        while self._queue:
            task = self._queue.pop_first()
            self._run_slice(task)
            if task.burst > 0:
                self._queue.append(task)
            else:
                self._report_done(task)
                finished.append(task)
        return finished


class PriorityRoundRobinScheduler(_BaseScheduler):
    """One round-robin queue per priority level, highest priority (1) first."""

    def __init__(self, quantum: int = QUANTUM, out: TextIO | None = None) -> None:
        super().__init__(quantum, out)
        self._queues = [TaskList() for _ in range(MAX_PRIORITY)]

    def add(self, name: str, priority: int, burst: int) -> Task:
        """Queue a new task at its priority level and return it."""
        if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            raise InvalidPriorityError(priority)
        task = self._new_task(name, priority, burst)
        self._queues[priority - 1].append(task)
        return task

    def schedule(self) -> list[Task]:
        """Drain the levels in priority order; return tasks in finishing order.

        Completion notices are reported together after all slices have run.
        """
        if not any(self._queues):
            return []
        finished: list[Task] = []
        for queue in self._queues:
            while queue:
                task = queue.pop_first()
                self._run_slice(task)
                if task.burst > 0:
                    queue.append(task)
                else:
                    finished.append(task)
        print(file=self.out)
        for task in finished:
            self._report_done(task)
        return finished