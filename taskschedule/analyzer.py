from __future__ import annotations

"""Schedule analysis over a task DAG.

Kahn's topological traversal driven by a min-heap keyed on each task's
earliest completion time. One pass computes:

- the longest duration path reaching every task (and the parents that achieve it)
- the sink tasks
- the peak number of ready tasks, i.e. the runners needed under earliest start

A finite DAG has at least one source and one sink, so an empty heap at seeding
time, or any task whose preceding count never reaches zero, means a cycle.

Cost is O((V + E) log V) for the traversal plus the critical path enumeration,
which can be exponential in the number of equal-weight branch points; callers
facing adversarial input should pass `max_paths`.
"""

from dataclasses import dataclass
import heapq
import itertools
import logging
from typing import AbstractSet, Mapping

from taskschedule.graph import Graph, build_graph
from taskschedule.paths import TaskPath, find_critical_paths
from taskschedule.render import render_analysis
from taskschedule.types import Duration, TaskLabel, TaskOrder, TotalDuration
from taskschedule.validate import CycleError, validate_inputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleAnalysis:
    max_parallelism: int
    task_count: int
    minimum_completion_time: TotalDuration
    critical_path_count: int
    critical_paths: tuple[TaskPath, ...]
    critical_paths_truncated: bool = False

    def __str__(self) -> str:
        return render_analysis(self)


@dataclass(frozen=True)
class _Relaxation:
    longest_duration_path_to_task: dict[TaskLabel, TotalDuration]
    parent_tasks: dict[TaskLabel, list[TaskLabel]]
    sink_tasks: list[TaskLabel]
    max_parallelism: int


def _relax(
    graph: Graph,
    preceding_task_count: dict[TaskLabel, int],
    task_durations: Mapping[TaskLabel, Duration],
) -> _Relaxation:
    # (end_time, push sequence, task). Equal end times pop in push order, which
    # follows input iteration order. When ready tasks share an end time (zero
    # durations, or equal positive times) the peak may differ by one between
    # equivalent inputs.
    seq = itertools.count()
    task_queue: list[tuple[TotalDuration, int, TaskLabel]] = []
    longest: dict[TaskLabel, TotalDuration] = {}
    for task, count in preceding_task_count.items():
        if count == 0:
            longest[task] = task_durations[task]
            heapq.heappush(task_queue, (longest[task], next(seq), task))

    if not task_queue:
        raise CycleError()
    logger.debug("source_tasks: %r", [entry[2] for entry in task_queue])

    max_parallel_tasks = 0
    sink_tasks: list[TaskLabel] = []
    parent_tasks: dict[TaskLabel, list[TaskLabel]] = {}
    while task_queue:
        max_parallel_tasks = max(max_parallel_tasks, len(task_queue))
        _, _, from_task = heapq.heappop(task_queue)

        adjacent = graph.successors_of(from_task)
        if not adjacent:
            sink_tasks.append(from_task)
            continue

        for to_task in adjacent:
            alternative = longest[from_task] + task_durations[to_task]
            previous = longest.get(to_task)
            if previous is None or alternative > previous:
                longest[to_task] = alternative
                parent_tasks[to_task] = [from_task]
            elif alternative == previous:
                parent_tasks[to_task].append(from_task)

            preceding_task_count[to_task] -= 1
            if preceding_task_count[to_task] == 0:
                heapq.heappush(task_queue, (longest[to_task], next(seq), to_task))

    if any(count != 0 for count in preceding_task_count.values()):
        raise CycleError()

    return _Relaxation(
        longest_duration_path_to_task=longest,
        parent_tasks=parent_tasks,
        sink_tasks=sink_tasks,
        max_parallelism=max_parallel_tasks,
    )


def analyze_schedule(
    task_orders: AbstractSet[TaskOrder],
    task_durations: Mapping[TaskLabel, Duration],
    *,
    max_paths: int | None = None,
) -> ScheduleAnalysis:
    graph = build_graph(task_orders)
    validate_inputs(task_orders, task_durations, graph)
    logger.debug(
        "graph: %d tasks, %d edges",
        graph.task_count,
        sum(len(v) for v in graph.successors.values()),
    )

    relaxed = _relax(graph, dict(graph.preceding_task_count), task_durations)

    critical = find_critical_paths(
        relaxed.parent_tasks,
        relaxed.longest_duration_path_to_task,
        relaxed.sink_tasks,
        max_paths=max_paths,
    )
    logger.debug("critical paths: %r", critical.paths)

    return ScheduleAnalysis(
        max_parallelism=relaxed.max_parallelism,
        task_count=graph.task_count,
        minimum_completion_time=critical.duration,
        critical_path_count=len(critical.paths),
        critical_paths=critical.paths,
        critical_paths_truncated=critical.truncated,
    )
