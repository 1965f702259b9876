"""Generator constants and the shared university vocabulary for demo data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .domain import RoomKind

LESSON_DURATION_HOURS = 1
DAY_START_HOUR = 8
DAY_END_HOUR = 18
LUNCH_BREAK_START = 12
LUNCH_BREAK_END = 14

TIMESLOT_COUNT = 40
GROUP_COUNT = 12
ROOM_COUNT = 10

LESSON_DURATION_MINUTES = 60


@dataclass(frozen=True)
class Subject:
    """Subject configuration with weekly demand, qualified teachers and room type."""

    name: str
    hours_per_week: int
    teachers: tuple[str, ...]
    room_kind: RoomKind


@dataclass(frozen=True)
class RoomSpec:
    """A room in the fixed inventory of the benchmark instance."""

    name: str
    kind: RoomKind
    capacity: int


@dataclass(frozen=True)
class GroupSpec:
    """A cohort in the fixed inventory of the benchmark instance."""

    name: str
    student_count: int


_LITERATURE_TEACHERS = (
    "Jane Austen",
    "William Shakespeare",
    "Chinua Achebe",
    "Mary Shelley",
)

_SUBJECTS: tuple[Subject, ...] = (
    Subject("English", 4, _LITERATURE_TEACHERS, RoomKind.LECTURE),
    Subject(
        "Mathematics",
        4,
        ("Isaac Newton", "Emmy Noether", "Katherine Johnson", "Florence Nightingale"),
        RoomKind.LECTURE,
    ),
    Subject(
        "Physics", 3, ("Marie Curie", "Albert Einstein", "Stephen Hawking"), RoomKind.LAB
    ),
    Subject(
        "Chemistry", 3, ("Marie Curie", "Albert Einstein", "Rosalind Franklin"), RoomKind.LAB
    ),
    Subject(
        "Biology",
        3,
        ("Rosalind Franklin", "Charles Darwin", "Jane Goodall", "Rachel Carson"),
        RoomKind.LAB,
    ),
    Subject(
        "Computer Science",
        2,
        ("Ada Lovelace", "Alan Turing", "Grace Hopper", "Donald Knuth"),
        RoomKind.COMPUTER,
    ),
    Subject("History", 2, _LITERATURE_TEACHERS, RoomKind.LECTURE),
    Subject(
        "Geography",
        2,
        ("Charles Darwin", "Jane Goodall", "Rachel Carson", "Alexander von Humboldt"),
        RoomKind.LECTURE,
    ),
    Subject("French", 1, ("Chinua Achebe", "Mary Shelley"), RoomKind.LANGUAGE),
    Subject(
        "German", 1, ("William Shakespeare", "Alexander von Humboldt"), RoomKind.LANGUAGE
    ),
)

_ROOM_SPECS: tuple[RoomSpec, ...] = (
    RoomSpec("Auditorium A", RoomKind.LECTURE, 120),
    RoomSpec("Auditorium B", RoomKind.LECTURE, 80),
    RoomSpec("Seminar 1", RoomKind.LECTURE, 40),
    RoomSpec("Seminar 2", RoomKind.LECTURE, 36),
    RoomSpec("Wet Lab 1", RoomKind.LAB, 36),
    RoomSpec("Wet Lab 2", RoomKind.LAB, 36),
    RoomSpec("Wet Lab 3", RoomKind.LAB, 36),
    RoomSpec("Computer Lab", RoomKind.COMPUTER, 36),
    RoomSpec("Language Room A", RoomKind.LANGUAGE, 36),
    RoomSpec("Language Room B", RoomKind.LANGUAGE, 36),
)

_GROUP_SPECS: tuple[GroupSpec, ...] = (
    GroupSpec("Cohort 01", 24),
    GroupSpec("Cohort 02", 26),
    GroupSpec("Cohort 03", 28),
    GroupSpec("Cohort 04", 30),
    GroupSpec("Cohort 05", 32),
    GroupSpec("Cohort 06", 34),
    GroupSpec("Cohort 07", 22),
    GroupSpec("Cohort 08", 25),
    GroupSpec("Cohort 09", 29),
    GroupSpec("Cohort 10", 31),
    GroupSpec("Cohort 11", 33),
    GroupSpec("Cohort 12", 27),
)


def subjects() -> tuple[Subject, ...]:
    """Ordered subject catalog: 25 weekly lessons per cohort."""
    return _SUBJECTS


def teacher_names() -> list[str]:
    """Teacher names in first-use catalog order, without duplicates."""
    return list(dict.fromkeys(name for subject in _SUBJECTS for name in subject.teachers))


def teacher_index(name: str) -> int:
    """Position of ``name`` in :func:`teacher_names`; raises ValueError if unknown."""
    try:
        return teacher_names().index(name)
    except ValueError:
        raise ValueError(f"unknown teacher: {name!r}") from None


def room_specs() -> tuple[RoomSpec, ...]:
    """Rooms available in the generated instance."""
    return _ROOM_SPECS


def group_specs() -> tuple[GroupSpec, ...]:
    """Cohorts available in the generated instance."""
    return _GROUP_SPECS


def weekly_availability(unavailable_slots: Iterable[int]) -> list[bool]:
    """A full-week availability list with the given slots marked unavailable."""
    availability = [True] * TIMESLOT_COUNT
    for slot in unavailable_slots:
        if 0 <= slot < TIMESLOT_COUNT:
            availability[slot] = False
    return availability