"""An ordered queue of tasks used by the schedulers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from .task import Task

EMPTY_LISTING = "Lista vazia."


class TaskList:
    """A sequence of tasks that supports stack and FIFO insertion."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._items: deque[Task] = deque(tasks or ())

    def push_front(self, task: Task) -> None:
        """Insert a task at the head of the list."""
        self._items.appendleft(task)

    def append(self, task: Task) -> None:
        """Insert a task at the tail of the list."""
        self._items.append(task)

    def remove(self, task: Task) -> None:
        """Remove the first task whose name matches; do nothing if none does."""
        for index, candidate in enumerate(self._items):
            if candidate.name == task.name:
                del self._items[index]
                return

    def first(self) -> Task | None:
        """Return the head task without removing it, or None when empty."""
        return self._items[0] if self._items else None

    def pop_first(self) -> Task:
        """Remove and return the head task.

        Raises IndexError when the list is empty.
        """
        if not self._items:
            raise IndexError("pop from an empty task list")
        return self._items.popleft()

    def lines(self) -> list[str]:
        """Return the listing of the tasks, one line per task."""
        if not self._items:
            return [EMPTY_LISTING]
        return [task.describe() for task in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)