import io
import re

import pytest

from cpusched.schedulers import (
    MAX_PRIORITY,
    MIN_PRIORITY,
    InvalidPriorityError,
    PriorityRoundRobinScheduler,
    RoundRobinScheduler,
)

RUN_LINE = re.compile(r"Running task \[(\w+)\] \(TID: \d+, Priority: -?\d+, Burst: (\d+)\) for (\d+) units\.")


def runs(text):
    return [(m.group(1), int(m.group(2)), int(m.group(3))) for m in RUN_LINE.finditer(text)]


def test_round_robin_interleaves_and_requeues():
    out = io.StringIO()
    sched = RoundRobinScheduler(quantum=2, out=out)
    sched.add("A", 5, 3)
    sched.add("B", 1, 2)
    finished = sched.schedule()
    assert [t.name for t in finished] == ["B", "A"]
    assert [(n, s) for n, _, s in runs(out.getvalue())] == [("A", 2), ("B", 2), ("A", 1)]


def test_round_robin_ignores_priority():
    sched = RoundRobinScheduler(out=io.StringIO())
    task = sched.add("A", 7, 4)
    assert task.priority == 0


def test_round_robin_assigns_sequential_tids():
    sched = RoundRobinScheduler(out=io.StringIO())
    tids = [sched.add(n, 1, 1).tid for n in ("a", "b", "c")]
    assert tids == [1, 2, 3]


def test_round_robin_slices_sum_to_bursts():
    out = io.StringIO()
    sched = RoundRobinScheduler(quantum=3, out=out)
    bursts = {"a": 7, "b": 1, "c": 9}
    for name, burst in bursts.items():
        sched.add(name, 1, burst)
    finished = sched.schedule()
    assert all(t.burst == 0 for t in finished)
    totals = {}
    for name, _, time_slice in runs(out.getvalue()):
        assert time_slice <= 3
        totals[name] = totals.get(name, 0) + time_slice
    assert totals == bursts


def test_round_robin_reports_completion():
    out = io.StringIO()
    sched = RoundRobinScheduler(out=out)
    sched.add("Solo", 1, 1)
    sched.schedule()
    assert "Task [Solo] (TID: 1) concluída." in out.getvalue()


def test_round_robin_empty_prints_nothing():
    out = io.StringIO()
    assert RoundRobinScheduler(out=out).schedule() == []
    assert out.getvalue() == ""


def test_invalid_quantum_rejected():
    with pytest.raises(ValueError):
        RoundRobinScheduler(quantum=0)


@pytest.mark.parametrize("priority", [MIN_PRIORITY - 1, MAX_PRIORITY + 1])
def test_priority_out_of_range(priority):
    sched = PriorityRoundRobinScheduler(out=io.StringIO())
    with pytest.raises(InvalidPriorityError) as info:
        sched.add("X", priority, 3)
    assert info.value.priority == priority


def test_invalid_priority_does_not_consume_tid():
    sched = PriorityRoundRobinScheduler(out=io.StringIO())
    with pytest.raises(InvalidPriorityError):
        sched.add("bad", 0, 1)
    assert sched.add("good", 1, 1).tid == 1


def test_priority_levels_run_in_order():
    out = io.StringIO()
    sched = PriorityRoundRobinScheduler(quantum=2, out=out)
    sched.add("Tarefa1", 2, 10)
    sched.add("Tarefa2", 1, 5)
    sched.add("Tarefa3", 3, 8)
    sched.add("Tarefa4", 2, 6)
    sched.add("Tarefa5", 1, 4)
    finished = sched.schedule()
    priorities = [t.priority for t in finished]
    assert priorities == sorted(priorities)
    assert [t.name for t in finished][-1] == "Tarefa3"
    seen = [name for name, _, _ in runs(out.getvalue())]
    first_level_two = seen.index("Tarefa1")
    assert set(seen[:first_level_two]) == {"Tarefa2", "Tarefa5"}


def test_priority_completions_reported_after_blank_line():
    out = io.StringIO()
    sched = PriorityRoundRobinScheduler(out=out)
    sched.add("A", 1, 3)
    sched.add("B", 2, 1)
    sched.schedule()
    text = out.getvalue()
    head, tail = text.split("\n\n", 1)
    assert "concluída" not in head
    assert tail.splitlines() == [
        "Task [A] (TID: 1) concluída.",
        "Task [B] (TID: 2) concluída.",
    ]


def test_priority_empty_prints_nothing():
    out = io.StringIO()
    assert PriorityRoundRobinScheduler(out=out).schedule() == []
    assert out.getvalue() == ""