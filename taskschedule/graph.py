from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from taskschedule.types import TaskLabel, TaskOrder


@dataclass(frozen=True)
class Graph:
    # task -> tasks it precedes
    successors: dict[TaskLabel, list[TaskLabel]]
    # task -> number of preceding tasks (every mentioned task, sources included)
    preceding_task_count: dict[TaskLabel, int]

    def successors_of(self, task: TaskLabel) -> tuple[TaskLabel, ...]:
        return tuple(self.successors.get(task, ()))

    @property
    def task_count(self) -> int:
        return len(self.preceding_task_count)


def build_graph(orders: Iterable[TaskOrder]) -> Graph:
    successors: dict[TaskLabel, list[TaskLabel]] = {}
    preceding: dict[TaskLabel, int] = {}
    for order in orders:
        preceding.setdefault(order.first, 0)
        adjacent = successors.setdefault(order.first, [])
        if order.second is not None:
            adjacent.append(order.second)
            preceding[order.second] = preceding.get(order.second, 0) + 1
    return Graph(successors=successors, preceding_task_count=preceding)
