from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
import sys

from taskschedule.io import read_task_file, write_paths_csv, write_summary_json
from taskschedule.processor import process
from taskschedule.render import render_analysis, summarize_analysis

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TASKSCHEDULE_LOG_LEVEL"


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1 (got {value})")
    return value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="taskschedule", description="Task schedule analyzer"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    an = sub.add_parser(
        "analyze", help="Report parallelism, makespan and critical paths"
    )
    an.add_argument("file", type=Path)
    an.add_argument(
        "--max-paths",
        required=False,
        type=_positive_int,
        default=None,
        help="Stop enumerating critical paths after this many (default: no limit)",
    )
    an.add_argument("--out-summary", required=False, type=Path)
    an.add_argument("--out-paths", required=False, type=Path)
    an.add_argument(
        "--log-level",
        required=False,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return p


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _io_error_message(prog: str, path: Path, err: Exception) -> str:
    if isinstance(err, FileNotFoundError):
        return f"{prog}: {path}: No such file"
    if isinstance(err, PermissionError):
        return f"{prog}: {path}: Access to file is denied"
    return f"{prog}: {path}: Encountered an error while opening the file: {err}"


def _analyze(args: argparse.Namespace, prog: str) -> int:
    try:
        content = read_task_file(args.file)
    except (OSError, UnicodeDecodeError) as e:
        msg = _io_error_message(prog, args.file, e)
        logger.error(msg)
        sys.stderr.write(msg + "\n")
        return 1

    try:
        analysis = process(content, max_paths=args.max_paths)
    except ValueError as e:
        logger.error("Error: %s", e)
        sys.stderr.write(f"Error: {e}\n")
        return 1

    sys.stdout.write(render_analysis(analysis))
    if args.out_summary:
        write_summary_json(args.out_summary, summarize_analysis(analysis))
    if args.out_paths:
        write_paths_csv(args.out_paths, analysis)
    return 0


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    if args.cmd == "analyze":
        _configure_logging(args.log_level)
        return _analyze(args, p.prog)

    raise AssertionError(f"Unhandled command: {args.cmd}")
