from __future__ import annotations

"""Line-oriented parser for task definition files.

One record per line::

    Q(1)                # a task with no prerequisites
    N(1) <- T, J        # N takes 1 and starts after T and J finish

Task names start with a letter and continue with letters, digits, '.', '-' or
'_'. Durations are non-negative integers up to 65535. '#' starts a comment.
"""

from dataclasses import dataclass, field
import logging
import re

from taskschedule.types import MAX_DURATION, Duration, LabelError, TaskLabel

logger = logging.getLogger(__name__)

_TASK_NAME = re.compile(r"[^\W\d_][\w.\-]*")
_DIGITS = re.compile(r"[0-9]+")
_BLANK = re.compile(r"[ \t]*")


class ParseError(ValueError):
    def __init__(self, line: int, column: int, reason: str | None = None) -> None:
        self.line = line
        self.column = column
        self.reason = reason
        msg = f"line {line}, column {column}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


@dataclass
class ParsedData:
    task_orders: list[tuple[TaskLabel, TaskLabel | None]] = field(default_factory=list)
    task_durations: list[tuple[TaskLabel, Duration]] = field(default_factory=list)


class _LineScanner:
    def __init__(self, text: str, line_no: int) -> None:
        self.text = text
        self.line_no = line_no
        self.pos = 0

    def error(self, reason: str | None = None, *, at: int | None = None) -> ParseError:
        return ParseError(self.line_no, (self.pos if at is None else at) + 1, reason)

    def skip_blank(self) -> None:
        self.pos = _BLANK.match(self.text, self.pos).end()

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def literal(self, token: str) -> None:
        if not self.text.startswith(token, self.pos):
            raise self.error()
        self.pos += len(token)

    def task_name(self) -> TaskLabel:
        m = _TASK_NAME.match(self.text, self.pos)
        if m is None:
            raise self.error()
        try:
            label = TaskLabel(m.group())
        except LabelError as e:
            raise self.error(str(e)) from e
        self.pos = m.end()
        return label

    def duration(self) -> Duration:
        m = _DIGITS.match(self.text, self.pos)
        if m is None:
            raise self.error()
        value = int(m.group())
        if value > MAX_DURATION:
            raise self.error(f"duration must be <= {MAX_DURATION} (got {value})")
        self.pos = m.end()
        return value


def _strip_comment(line: str) -> str:
    return line.split("#", 1)[0]


def _parse_record(scanner: _LineScanner, data: ParsedData) -> None:
    task = scanner.task_name()
    scanner.literal("(")
    duration = scanner.duration()
    scanner.literal(")")
    data.task_durations.append((task, duration))

    scanner.skip_blank()
    if scanner.at_end():
        data.task_orders.append((task, None))
        return

    scanner.literal("<-")
    while True:
        scanner.skip_blank()
        data.task_orders.append((scanner.task_name(), task))
        scanner.skip_blank()
        if scanner.at_end():
            return
        scanner.literal(",")


def parse_content(content: str) -> ParsedData:
    data = ParsedData()
    record_count = 0
    for line_no, line in enumerate(content.splitlines(), start=1):
        scanner = _LineScanner(_strip_comment(line), line_no)
        scanner.skip_blank()
        if scanner.at_end():
            continue
        _parse_record(scanner, data)
        record_count += 1

    logger.debug("parsed record_count: %d", record_count)
    logger.debug("parsed task_durations: %r", data.task_durations)
    logger.debug("parsed task_orders: %r", data.task_orders)
    return data
