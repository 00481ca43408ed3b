from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from taskschedule.types import MAX_LABEL_LEN, TaskLabel

if TYPE_CHECKING:  # pragma: no cover
    from taskschedule.analyzer import ScheduleAnalysis

PATH_DELIMITER = "->"


def serialize_path(
    path: Sequence[TaskLabel],
    delimiter: str = PATH_DELIMITER,
    max_label_len: int = MAX_LABEL_LEN,
) -> list[str]:
    """Greedily pack `path` into lines of at most `max_label_len + len(delimiter)`.

    Every label is charged a delimiter's width, including the last one, so a
    line never exceeds one label-plus-delimiter unit.
    """

    delimiter_len = len(delimiter)
    max_line_len = max_label_len + delimiter_len

    lines: list[str] = []
    line: list[str] = []
    used = 0
    for idx, task in enumerate(path):
        required = len(task) + delimiter_len
        if line and used + required > max_line_len:
            lines.append("".join(line))
            line = []
            used = 0
        line.append(str(task))
        if idx != len(path) - 1:
            line.append(delimiter)
        used += required
    lines.append("".join(line))
    return lines


def render_analysis(analysis: "ScheduleAnalysis") -> str:
    many = analysis.critical_path_count > 1
    count = str(analysis.critical_path_count)
    if analysis.critical_paths_truncated:
        count += " (truncated)"

    out = [
        f"task_count: {analysis.task_count}",
        f"max_parallelism: {analysis.max_parallelism}",
        f"minimum_completion_time: {analysis.minimum_completion_time}",
        f"critical_path_count: {count}",
        f"critical_path{'s' if many else ''}:",
    ]
    for idx, path in enumerate(analysis.critical_paths):
        if many:
            out.append(f"{idx + 1})")
        out.extend(serialize_path(path))
        if idx != len(analysis.critical_paths) - 1:
            out.append("")
    return "\n".join(out) + "\n"


def summarize_analysis(analysis: "ScheduleAnalysis") -> dict[str, Any]:
    return {
        "task_count": analysis.task_count,
        "max_parallelism": analysis.max_parallelism,
        "minimum_completion_time": analysis.minimum_completion_time,
        "critical_path": {
            "count": analysis.critical_path_count,
            "truncated": analysis.critical_paths_truncated,
            "paths": [[str(task) for task in path] for path in analysis.critical_paths],
        },
    }
