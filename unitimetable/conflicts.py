"""Pairwise overlap rules: a group, room or teacher cannot be in two places at once."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import time
from itertools import combinations
from typing import Callable, Hashable, Iterator

from .domain import Lesson, Plan, Weekday
from .score import Constraint, HardMediumSoftScore


@dataclass(frozen=True)
class _AssignedLessonSlot:
    lesson_index: int
    day_of_week: Weekday
    start_time: time
    end_time: time

    def overlaps(self, other: _AssignedLessonSlot) -> bool:
        return (
            self.day_of_week == other.day_of_week
            and self.start_time < other.end_time
            and other.start_time < self.end_time
        )


def _overlapping_pairs(
    plan: Plan, key: Callable[[Lesson], Hashable]
) -> Iterator[tuple[_AssignedLessonSlot, _AssignedLessonSlot]]:
    """Yield each pair of timed lessons sharing ``key`` whose slots overlap, once per pair."""
    buckets: dict[Hashable, list[_AssignedLessonSlot]] = defaultdict(list)
    for lesson in plan.lessons:
        if lesson.timeslot_idx is None:
            continue
        timeslot = plan.get_timeslot(lesson.timeslot_idx)
        if timeslot is None:
            continue
        buckets[key(lesson)].append(
            _AssignedLessonSlot(
                lesson_index=lesson.index,
                day_of_week=timeslot.day_of_week,
                start_time=timeslot.start_time,
                end_time=timeslot.end_time,
            )
        )
    for rows in buckets.values():
        ordered = sorted(rows, key=lambda row: row.lesson_index)
        for first, second in combinations(ordered, 2):
            if first.lesson_index < second.lesson_index and first.overlaps(second):
                yield first, second


def no_group_conflict() -> Constraint:
    """HARD: no two lessons for the same group can overlap in time."""
    return Constraint(
        "No Group Conflict",
        HardMediumSoftScore.of_hard(1),
        lambda plan: _overlapping_pairs(plan, lambda lesson: lesson.group_idx),
    )


def no_room_conflict() -> Constraint:
    """HARD: no two lessons in the same room can overlap in time."""
    return Constraint(
        "No Room Conflict",
        HardMediumSoftScore.of_hard(1),
        lambda plan: _overlapping_pairs(plan, lambda lesson: lesson.room_idx),
    )


def no_teacher_conflict() -> Constraint:
    """HARD: no two lessons with the same teacher can overlap in time."""
    return Constraint(
        "No Teacher Conflict",
        HardMediumSoftScore.of_hard(1),
        lambda plan: _overlapping_pairs(plan, lambda lesson: lesson.teacher_idx),
    )