"""Single-lesson scoring rules: assignment, availability, room fit and day spread."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from typing import Iterator, Sequence

from .domain import Lesson, Plan, Timeslot
from .score import Constraint, HardMediumSoftScore

_LATE_START_HOUR = 15


def _is_available(availability: Sequence[bool], slot: int) -> bool:
    return 0 <= slot < len(availability) and availability[slot]


def _assigned_slots(plan: Plan) -> Iterator[tuple[Lesson, Timeslot]]:
    for lesson in plan.lessons:
        if lesson.timeslot_idx is None:
            continue
        timeslot = plan.get_timeslot(lesson.timeslot_idx)
        if timeslot is not None:
            yield lesson, timeslot


def _assigned_rooms(plan: Plan):
    for lesson in plan.lessons:
        if lesson.room_idx is None:
            continue
        room = plan.get_room(lesson.room_idx)
        if room is not None:
            yield lesson, room


def assign_room() -> Constraint:
    """MEDIUM: every lesson should receive a room."""
    return Constraint(
        "Assign Room",
        HardMediumSoftScore.of_medium(1),
        lambda plan: (lesson for lesson in plan.lessons if lesson.room_idx is None),
    )


def assign_timeslot() -> Constraint:
    """MEDIUM: every lesson should receive a timeslot."""
    return Constraint(
        "Assign Timeslot",
        HardMediumSoftScore.of_medium(1),
        lambda plan: (lesson for lesson in plan.lessons if lesson.timeslot_idx is None),
    )


def _group_unavailable(plan: Plan):
    for lesson in plan.lessons:
        group = plan.get_group(lesson.group_idx)
        if group is None or lesson.timeslot_idx is None:
            continue
        if not _is_available(group.availability, lesson.timeslot_idx):
            yield lesson, group


def group_availability() -> Constraint:
    """HARD: cohorts can only attend lessons in slots where they are available."""
    return Constraint("Group Availability", HardMediumSoftScore.of_hard(1), _group_unavailable)


def late_lesson() -> Constraint:
    """SOFT: prefer lessons before the late afternoon."""
    return Constraint(
        "Avoid Late Lessons",
        HardMediumSoftScore.of_soft(1),
        lambda plan: (
            (lesson, timeslot)
            for lesson, timeslot in _assigned_slots(plan)
            if timeslot.start_time.hour >= _LATE_START_HOUR
        ),
    )


def _repeated_subject_pairs(plan: Plan):
    same_day: dict[tuple, list[Lesson]] = defaultdict(list)
    for lesson, timeslot in _assigned_slots(plan):
        same_day[(lesson.group_idx, timeslot.day_of_week, lesson.subject)].append(lesson)
    for lessons in same_day.values():
        ordered = sorted(lessons, key=lambda lesson: lesson.index)
        yield from (
            (first, second)
            for first, second in combinations(ordered, 2)
            if first.index < second.index
        )


def repeated_subject_day() -> Constraint:
    """SOFT: avoid scheduling the same subject twice in one day for a cohort."""
    return Constraint(
        "Avoid Repeated Subject Day", HardMediumSoftScore.of_soft(1), _repeated_subject_pairs
    )


def room_capacity() -> Constraint:
    """HARD: a room must be large enough for the cohort assigned to it."""
    return Constraint(
        "Room Capacity",
        HardMediumSoftScore.of_hard(1),
        lambda plan: (
            (lesson, room)
            for lesson, room in _assigned_rooms(plan)
            if lesson.student_count > room.capacity
        ),
    )


def room_kind() -> Constraint:
    """SOFT: prefer rooms that support the lesson's subject."""
    return Constraint(
        "Room Kind",
        HardMediumSoftScore.of_soft(1),
        lambda plan: (
            (lesson, room)
            for lesson, room in _assigned_rooms(plan)
            if lesson.required_room_kind != room.kind
        ),
    )


def _teacher_unavailable(plan: Plan):
    for lesson in plan.lessons:
        if lesson.teacher_idx is None or lesson.timeslot_idx is None:
            continue
        teacher = plan.get_teacher(lesson.teacher_idx)
        if teacher is not None and not _is_available(teacher.availability, lesson.timeslot_idx):
            yield lesson, teacher


def teacher_availability() -> Constraint:
    """HARD: teachers can only teach in slots where they are available."""
    return Constraint(
        "Teacher Availability", HardMediumSoftScore.of_hard(1), _teacher_unavailable
    )