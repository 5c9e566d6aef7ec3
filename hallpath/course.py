"""Rooms of the building, used as the nodes of the route graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterable


@total_ordering
@dataclass(frozen=True)
class Course:
    """A room, named by its teacher (or purpose) and its room number.

    Two courses are equal when teacher and room match; ``teacher_names``
    is carried along but takes no part in comparison. Courses sort by
    room first, then by teacher.
    """

    teacher_name: str = ""
    room_name: str = ""
    teacher_names: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        names: Iterable[str] = self.teacher_names
        object.__setattr__(self, "teacher_names", tuple(names))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return (self.room_name, self.teacher_name) < (other.room_name, other.teacher_name)

    def is_empty(self) -> bool:
        """Return True for the blank course that stands for "not found"."""
        return not self.teacher_name and not self.room_name