from __future__ import annotations

# Critical path reconstruction: walk the longest-path parent map back from every
# critical sink and enumerate each distinct maximum-duration path.

from dataclasses import dataclass
import logging
from typing import Mapping, Sequence

from taskschedule.types import TaskLabel, TotalDuration

logger = logging.getLogger(__name__)

TaskPath = tuple[TaskLabel, ...]


@dataclass(frozen=True)
class CriticalPaths:
    paths: tuple[TaskPath, ...]
    duration: TotalDuration
    truncated: bool = False


def _path_sort_key(path: TaskPath) -> tuple[int, TaskPath]:
    # More tasks first (more room for optimization), then lexicographic.
    return (-len(path), path)


def construct_paths(
    parent_tasks: Mapping[TaskLabel, Sequence[TaskLabel]],
    sink: TaskLabel,
    *,
    limit: int | None = None,
) -> tuple[list[TaskPath], bool]:
    """Enumerate every source->sink path through `parent_tasks` ending at `sink`.

    Paths are built tail-first on an explicit stack and reversed once a source
    (a task without recorded parents) is reached. Returns the paths and whether
    enumeration stopped early because `limit` was reached.
    """

    paths: list[TaskPath] = []
    stack: list[tuple[TaskLabel, TaskPath]] = [(sink, (sink,))]
    while stack:
        task, tail_first = stack.pop()
        parents = parent_tasks.get(task)
        if not parents:
            if limit is not None and len(paths) >= limit:
                return paths, True
            paths.append(tuple(reversed(tail_first)))
            continue
        # Smallest parent label is expanded first.
        for parent in sorted(parents, reverse=True):
            stack.append((parent, tail_first + (parent,)))
    return paths, False


def find_critical_paths(
    parent_tasks: Mapping[TaskLabel, Sequence[TaskLabel]],
    longest_duration_path_to_task: Mapping[TaskLabel, TotalDuration],
    sink_tasks: Sequence[TaskLabel],
    *,
    max_paths: int | None = None,
) -> CriticalPaths:
    if max_paths is not None and max_paths < 1:
        raise ValueError(f"max_paths must be >= 1 (got {max_paths})")

    logger.debug("parent_tasks: %r", parent_tasks)
    logger.debug("sink_tasks: %r", sink_tasks)

    duration = max(
        (longest_duration_path_to_task[task] for task in sink_tasks), default=0
    )

    found: list[TaskPath] = []
    truncated = False
    # Sorted so a capped enumeration keeps the same subset on every run.
    for sink in sorted(sink_tasks):
        if longest_duration_path_to_task[sink] != duration:
            continue
        remaining = None if max_paths is None else max_paths - len(found)
        paths, stopped = construct_paths(parent_tasks, sink, limit=remaining)
        found.extend(paths)
        if stopped:
            truncated = True
            logger.warning(
                "critical path enumeration truncated at %d paths", max_paths
            )
            break

    found.sort(key=_path_sort_key)
    for prev, cur in zip(found, found[1:]):
        if prev == cur:
            raise AssertionError(f"There cannot be duplicate critical paths {cur!r}")

    return CriticalPaths(paths=tuple(found), duration=duration, truncated=truncated)
