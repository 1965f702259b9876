"""Builders for the timeslots, groups, teachers and rooms of the demo dataset."""

from __future__ import annotations

from datetime import time
from itertools import islice
from typing import Iterator

from .domain import Group, Room, Teacher, Timeslot, Weekday
from .vocabulary import (
    DAY_END_HOUR,
    DAY_START_HOUR,
    LESSON_DURATION_HOURS,
    LUNCH_BREAK_END,
    LUNCH_BREAK_START,
    group_specs,
    room_specs,
    teacher_names,
    weekly_availability,
)

_SIMPLE_TIMESLOT_LIMIT = 7


def _teaching_hours() -> Iterator[tuple[Weekday, int]]:
    for day in Weekday:
        for hour in range(DAY_START_HOUR, DAY_END_HOUR):
            if not LUNCH_BREAK_START <= hour < LUNCH_BREAK_END:
                yield day, hour


def build_timeslots(count: int) -> list[Timeslot]:
    """Up to ``count`` one-hour slots Monday to Friday, skipping the lunch break."""
    if count <= _SIMPLE_TIMESLOT_LIMIT:
        return build_simple_timeslots(count)
    return [
        Timeslot(
            index=index,
            day_of_week=day,
            start_time=time(hour),
            end_time=time(hour + LESSON_DURATION_HOURS),
        )
        for index, (day, hour) in enumerate(islice(_teaching_hours(), count))
    ]


def build_simple_timeslots(count: int) -> list[Timeslot]:
    """``count`` sequential timeslots with default day and times."""
    return [Timeslot(index=index) for index in range(max(count, 0))]


def build_groups(count: int) -> list[Group]:
    """Groups from the cohort inventory, each with five unavailable slots."""
    groups = []
    for index, spec in enumerate(group_specs()[:count]):
        unavailable = (
            index % 8,
            8 + (index + 2) % 8,
            16 + (index + 4) % 8,
            24 + (index + 6) % 8,
            32 + (index + 1) % 8,
        )
        groups.append(
            Group(index, spec.name, spec.student_count, weekly_availability(unavailable))
        )
    return groups


def build_teachers() -> list[Teacher]:
    """One teacher per catalog name, each with four unavailable slots."""
    teachers = []
    for index, name in enumerate(teacher_names()):
        unavailable = (
            index % 8,
            8 + (index * 3) % 8,
            16 + (index * 5) % 8,
            32 + (index * 7) % 8,
        )
        teachers.append(Teacher(index, name, weekly_availability(unavailable)))
    return teachers


def build_rooms(count: int) -> list[Room]:
    """Rooms from the fixed room inventory."""
    return [
        Room(index, spec.name, spec.kind, spec.capacity)
        for index, spec in enumerate(room_specs()[:count])
    ]