from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

from taskschedule.analyzer import ScheduleAnalysis
from taskschedule.render import PATH_DELIMITER


def read_task_file(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_summary_json(path: Path, summary: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, indent=2, sort_keys=True), encoding="utf-8")


def write_paths_csv(path: Path, analysis: ScheduleAnalysis) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["path_index", "length", "tasks"])
        for idx, tasks in enumerate(analysis.critical_paths, start=1):
            w.writerow([idx, len(tasks), PATH_DELIMITER.join(str(t) for t in tasks)])
