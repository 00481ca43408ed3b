from __future__ import annotations

import logging
from typing import Iterable

from taskschedule.analyzer import ScheduleAnalysis, analyze_schedule
from taskschedule.parser import parse_content
from taskschedule.types import Duration, TaskLabel, TaskOrder
from taskschedule.validate import ScheduleValidationError

logger = logging.getLogger(__name__)


class ConflictingDurationsError(ScheduleValidationError):
    def __init__(self, task: TaskLabel) -> None:
        self.task = task
        super().__init__(f"Conflicting durations for task: {task}")


def establish_task_durations(
    task_durations: Iterable[tuple[TaskLabel, Duration]],
) -> dict[TaskLabel, Duration]:
    durations: dict[TaskLabel, Duration] = {}
    for task, duration in task_durations:
        previous = durations.setdefault(task, duration)
        if previous != duration:
            raise ConflictingDurationsError(task)
    return durations


def establish_task_orders(
    task_orders: Iterable[tuple[TaskLabel, TaskLabel | None]],
) -> set[TaskOrder]:
    return {TaskOrder(first=first, second=second) for first, second in task_orders}


def process(content: str, *, max_paths: int | None = None) -> ScheduleAnalysis:
    logger.debug("parsing content...")
    data = parse_content(content)
    logger.debug("preparing data for analysis...")
    durations = establish_task_durations(data.task_durations)
    orders = establish_task_orders(data.task_orders)
    logger.debug("analyzing schedule...")
    return analyze_schedule(orders, durations, max_paths=max_paths)
