from __future__ import annotations

from typing import AbstractSet, Iterable, Mapping

from taskschedule.graph import Graph
from taskschedule.types import Duration, TaskLabel, TaskOrder


class ScheduleValidationError(ValueError):
    pass


class EmptyInputError(ScheduleValidationError):
    def __init__(self) -> None:
        super().__init__("Input is empty")


class _LabelsError(ScheduleValidationError):
    what = ""

    def __init__(self, labels: Iterable[TaskLabel]) -> None:
        self.labels: tuple[TaskLabel, ...] = tuple(sorted(labels))
        names = [label.text for label in self.labels]
        super().__init__(f"Schedule is missing {self.what} for: {names!r}")


class MissingDurationsError(_LabelsError):
    what = "durations"


class MissingOrdersError(_LabelsError):
    what = "orders"


class CycleError(ScheduleValidationError):
    def __init__(self) -> None:
        super().__init__("There's a cycle in the schedule")


def validate_inputs(
    orders: AbstractSet[TaskOrder],
    durations: Mapping[TaskLabel, Duration],
    graph: Graph,
) -> None:
    if not orders and not durations:
        raise EmptyInputError()

    missing = [task for task in graph.preceding_task_count if task not in durations]
    if missing:
        raise MissingDurationsError(missing)

    if len(durations) != graph.task_count:
        raise MissingOrdersError(
            task for task in durations if task not in graph.preceding_task_count
        )

    for task, duration in durations.items():
        if duration < 0:
            raise ScheduleValidationError(
                f"task '{task}' duration must be >= 0 (got {duration})"
            )
