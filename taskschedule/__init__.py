"""Critical path and parallelism analysis for task dependency graphs.

The engine is stdlib-only and synchronous; every analysis is a one-shot
computation over its input.

    python -m taskschedule analyze tasks.txt
"""

from __future__ import annotations

from taskschedule.analyzer import ScheduleAnalysis, analyze_schedule
from taskschedule.types import TaskLabel, TaskOrder

__all__ = [
    "ScheduleAnalysis",
    "TaskLabel",
    "TaskOrder",
    "__version__",
    "analyze_schedule",
]

__version__ = "0.1.0"
