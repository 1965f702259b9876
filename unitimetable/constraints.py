"""The full timetable constraint set."""

from __future__ import annotations

from .conflicts import no_group_conflict, no_room_conflict, no_teacher_conflict
from .rules import (
    assign_room,
    assign_timeslot,
    group_availability,
    late_lesson,
    repeated_subject_day,
    room_capacity,
    room_kind,
    teacher_availability,
)
from .score import ConstraintSet


def create_constraints() -> ConstraintSet:
    """Build every scoring rule for the timetable, in a fixed order."""
    return ConstraintSet(
        [
            assign_room(),
            assign_timeslot(),
            group_availability(),
            late_lesson(),
            no_group_conflict(),
            no_room_conflict(),
            no_teacher_conflict(),
            repeated_subject_day(),
            room_capacity(),
            room_kind(),
            teacher_availability(),
        ]
    )