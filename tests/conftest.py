from __future__ import annotations

import sys
from pathlib import Path

import pytest

from taskschedule.analyzer import ScheduleAnalysis, analyze_schedule
from taskschedule.types import TaskLabel, TaskOrder

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session", autouse=True)
def _add_repo_root_to_syspath() -> None:
    """Make local packages importable when running tests from `tests/`.

    Some Windows/PyTest invocations end up with `tests/` as the import root.
    Ensure the repo root is on `sys.path` so `import runner` works.
    """

    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


def labels(*names: str) -> tuple[TaskLabel, ...]:
    return tuple(TaskLabel(n) for n in names)


def paths(*specs: str) -> tuple[tuple[TaskLabel, ...], ...]:
    """`paths("A->B", "K")` -> the critical_paths tuple an analysis would hold."""

    return tuple(labels(*spec.split("->")) for spec in specs)


def analyze(
    orders: list[TaskOrder],
    durations: list[tuple[str, int]],
    **kwargs: object,
) -> ScheduleAnalysis:
    return analyze_schedule(
        set(orders),
        {TaskLabel(name): d for name, d in durations},
        **kwargs,  # type: ignore[arg-type]
    )


arrow = TaskOrder.arrow
node = TaskOrder.node
