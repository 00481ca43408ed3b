from __future__ import annotations

from dataclasses import dataclass
from typing import Union

MAX_LABEL_LEN = 70
MAX_DURATION = 0xFFFF

# A single task's execution time (fits in 16 bits).
Duration = int
# Summed path lengths; Python ints do not overflow.
TotalDuration = int


class LabelError(ValueError):
    pass


def _label_problem(text: str) -> str | None:
    if not text:
        return "Empty strings cannot be labels"
    if len(text) > MAX_LABEL_LEN:
        return f"Labels cannot have more than {MAX_LABEL_LEN} characters: {text}"
    if any(ch.isspace() for ch in text):
        return f"Labels cannot have whitespace characters: {text}"
    return None


@dataclass(frozen=True, order=True)
class TaskLabel:
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise LabelError(f"Labels must be strings (got {type(self.text).__name__})")
        problem = _label_problem(self.text)
        if problem is not None:
            raise LabelError(problem)

    @staticmethod
    def parse(text: str) -> "TaskLabel | None":
        """Checked construction: `None` instead of an exception."""

        if _label_problem(text) is not None:
            return None
        return TaskLabel(text)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"TL({self.text})"


LabelLike = Union[TaskLabel, str]


def as_label(value: LabelLike) -> TaskLabel:
    if isinstance(value, TaskLabel):
        return value
    return TaskLabel(value)


@dataclass(frozen=True)
class TaskOrder:
    """`first` must finish before `second` starts.

    Without `second` the order only declares `first` as a task; it can be fused
    with edges declared elsewhere.
    """

    first: TaskLabel
    second: TaskLabel | None = None

    def __post_init__(self) -> None:
        if self.second is not None and self.first == self.second:
            raise LabelError(
                f"Labels cannot have a dependency on themselves: {self.first}"
            )

    @staticmethod
    def arrow(first: LabelLike, second: LabelLike) -> "TaskOrder":
        return TaskOrder(first=as_label(first), second=as_label(second))

    @staticmethod
    def node(first: LabelLike) -> "TaskOrder":
        return TaskOrder(first=as_label(first))

    def is_node(self) -> bool:
        return self.second is None
