# cpusched

A small simulator of CPU scheduling algorithms. It reads a list of tasks,
hands them to a scheduler, and prints each time slice that the virtual CPU
runs, along with a line for each task that finishes.

Two schedulers are provided, in `cpusched.schedulers`:

- **Round-robin** (`RoundRobinScheduler`): one FIFO queue. Each task runs for
  at most one quantum (2 units by default) and then goes to the back of the
  queue until its burst is used up. Priorities are ignored: every task is
  stored with priority 0. A completion line is printed as soon as a task
  finishes.
- **Priority round-robin** (`PriorityRoundRobinScheduler`): one queue for each
  priority from 1 (highest) to 10 (lowest). Each queue is run round-robin to
  the end before the next one starts. After all slices have run, a blank line
  is printed and then the completion lines, in finishing order. Adding a task
  whose priority lies outside 1–10 raises `InvalidPriorityError` (a
  `ValueError`).

Each task gets a task id, counting from 1 in the order tasks are added.
`schedule()` returns the tasks in the order they finished.

## Installation

```
pip install .
```

## Task files

Each line of a task file describes one task:

```
name,priority,burst
```

A fourth field, a deadline, is accepted and read, but neither scheduler uses it:

```
name,priority,burst,deadline
```

Numbers are read leniently: a field is read up to its first non-digit, and a
field with no leading number reads as 0. A line with fewer than three fields
is an error.

For example, `tasks.txt`:

```
T1,2,10
T2,1,5
T3,3,8
```

## Command line

```
cpusched tasks.txt
cpusched --scheduler rr_p tasks.txt
```

This reads the file, adds every task to the scheduler and runs the scheduler.
`-s`/`--scheduler` chooses `rr` (round-robin, the default) or `rr_p`
(priority round-robin). With `rr_p`, a task with an invalid priority is
reported on standard output and skipped; the rest still run. If the file
cannot be opened or a line is malformed, a message goes to standard error and
the exit status is 1.

Output looks like:

```
Running task [T1] (TID: 1, Priority: 0, Burst: 10) for 2 units.
...
Task [T2] (TID: 2) concluída.
```

## Library use

```python
from cpusched.schedulers import PriorityRoundRobinScheduler

scheduler = PriorityRoundRobinScheduler()
scheduler.add("Tarefa1", 2, 10)
scheduler.add("Tarefa2", 1, 5)
finished = scheduler.schedule()
```

To send output somewhere other than standard output, pass any text stream as
`out`; the quantum can be set too (it must be positive):

```python
import io
from cpusched.schedulers import RoundRobinScheduler

buffer = io.StringIO()
scheduler = RoundRobinScheduler(quantum=3, out=buffer)
scheduler.add("A", 1, 4)
scheduler.schedule()
print(buffer.getvalue())
```

Task files can also be read without scheduling, with
`cpusched.driver.read_task_file(path)` or, for one line at a time,
`cpusched.driver.parse_task_line(line)`. Both return `TaskSpec` records
(`name`, `priority`, `burst`, `deadline`).

The building blocks are available too:

- `cpusched.task.Task`: a dataclass with `name`, `tid`, `priority`, `burst`,
  `deadline` and `waiting_time`; `describe()` gives its one-line listing.
- `cpusched.tasklist.TaskList`: a task queue with `push_front`, `append`,
  `remove` (by name), `first`, `pop_first` and `lines`.
- `cpusched.cpu.run(task, time_slice, out=None)`: prints and returns the
  "Running task" line; it does not change the task's burst.

## What it does not do

Only the two round-robin schedulers exist. There is no deadline-based
scheduler and no priority scheduler with aging: the deadline and waiting-time
fields of a task are stored but never used for scheduling.