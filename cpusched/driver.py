"""Read a task file and hand its tasks to a scheduler."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .schedulers import InvalidPriorityError, PriorityRoundRobinScheduler, RoundRobinScheduler

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

SCHEDULERS = {
    "rr": RoundRobinScheduler,
    "rr_p": PriorityRoundRobinScheduler,
}


@dataclass(frozen=True)
class TaskSpec:
    """One line of a task file: ``name,priority,burst[,deadline]``."""

    name: str
    priority: int
    burst: int
    deadline: int = 0


def _to_int(text: str) -> int:
    """Read a leading integer the lenient way; text without one reads as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_task_line(line: str) -> TaskSpec:
    """Parse one task line; raise ValueError when priority or burst is missing."""
    line = line.split("\n", 1)[0]
    fields = line.split(",")
    if len(fields) < 3:
        raise ValueError(f"malformed task line: {line!r}")
    name, priority, burst = fields[0], fields[1], fields[2]
    deadline = _to_int(fields[3]) if len(fields) > 3 else 0
    return TaskSpec(name, _to_int(priority), _to_int(burst), deadline)


def read_task_file(path: str | Path) -> list[TaskSpec]:
    """Parse every line of a task file."""
    with open(path, encoding="utf-8") as handle:
        return [parse_task_line(line) for line in handle]


def main(argv: Sequence[str] | None = None) -> int:
    """Load tasks from a file and run the chosen scheduler."""
    parser = argparse.ArgumentParser(
        prog="cpusched",
        description="Simulate CPU scheduling of the tasks in a file.",
    )
    parser.add_argument("task_file", help="file with lines name,priority,burst[,deadline]")
    parser.add_argument(
        "-s",
        "--scheduler",
        choices=sorted(SCHEDULERS),
        default="rr",
        help="scheduling algorithm (default: rr)",
    )
    args = parser.parse_args(argv)

    try:
        specs = read_task_file(args.task_file)
    except OSError as error:
        print(f"Erro ao abrir o arquivo de tarefas: {error.strerror or error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Erro ao ler o arquivo de tarefas: {error}", file=sys.stderr)
        return 1

    scheduler = SCHEDULERS[args.scheduler]()
    for spec in specs:
        try:
            scheduler.add(spec.name, spec.priority, spec.burst)
        except InvalidPriorityError as error:
            print(error)
    scheduler.schedule()
    return 0


if __name__ == "__main__":
    sys.exit(main())