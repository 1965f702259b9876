"""Demo datasets: the public identifiers and the large university benchmark instance."""

from __future__ import annotations

import copy
from enum import Enum
from functools import lru_cache

from .builders import build_groups, build_rooms, build_teachers, build_timeslots
from .domain import Lesson, Plan
from .vocabulary import (
    GROUP_COUNT,
    LESSON_DURATION_MINUTES,
    ROOM_COUNT,
    TIMESLOT_COUNT,
    group_specs,
    subjects,
    teacher_index,
)


class DemoData(Enum):
    """Demo dataset identifiers exposed through the HTTP API."""

    LARGE = "LARGE"

    @property
    def id(self) -> str:
        """The canonical uppercase id."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> DemoData:
        """Parse a case-insensitive demo id; raise ValueError if it is unknown."""
        if not isinstance(text, str):
            raise ValueError(f"demo id must be a string, got {text!r}")
        try:
            return cls(text.upper())
        except ValueError:
            raise ValueError(f"unknown demo data: {text!r}") from None


def build_lessons(group_count: int) -> list[Lesson]:
    """Lessons for the first ``group_count`` cohorts, each subject repeated per its weekly hours.

    Teachers rotate through a subject's qualified list by group and lesson number.
    """
    specs = group_specs()
    lessons: list[Lesson] = []
    for group_idx in range(group_count):
        student_count = specs[group_idx].student_count
        for subject in subjects():
            for lesson_num in range(subject.hours_per_week):
                teacher_name = subject.teachers[(group_idx + lesson_num) % len(subject.teachers)]
                lessons.append(
                    Lesson(
                        index=len(lessons),
                        subject=subject.name,
                        group_idx=group_idx,
                        teacher_idx=teacher_index(teacher_name),
                        duration=LESSON_DURATION_MINUTES,
                        required_room_kind=subject.room_kind,
                        student_count=student_count,
                    )
                )
    return lessons


def default_demo_data() -> DemoData:
    """The demo dataset served when none is chosen."""
    return DemoData.LARGE


def available_demo_data() -> tuple[DemoData, ...]:
    """Every demo dataset that can be generated."""
    return (DemoData.LARGE,)


@lru_cache(maxsize=1)
def _large_schedule() -> Plan:
    return Plan(
        timeslots=build_timeslots(TIMESLOT_COUNT),
        teachers=build_teachers(),
        groups=build_groups(GROUP_COUNT),
        lessons=build_lessons(GROUP_COUNT),
        rooms=build_rooms(ROOM_COUNT),
    )


def generate_large() -> Plan:
    """A fresh copy of the large benchmark: 40 slots, 20 teachers, 12 cohorts, 300 lessons, 10 rooms."""
    return copy.deepcopy(_large_schedule())


def generate(demo: DemoData) -> Plan:
    """Generate the requested demo dataset."""
    if demo is DemoData.LARGE:
        return generate_large()
    raise ValueError(f"unknown demo data: {demo!r}")