from datetime import time

import pytest

from unitimetable.domain import (
    Group,
    Lesson,
    Plan,
    Room,
    RoomKind,
    Teacher,
    Timeslot,
    Weekday,
)


def _two_slot_plan():
    timeslots = [
        Timeslot(0, Weekday.MON, time(8), time(10)),
        Timeslot(1, Weekday.MON, time(10), time(12)),
    ]
    rooms = [Room(0, "Room A"), Room(1, "Room B")]
    lessons = [
        Lesson(0, "Math", 0, None, 120),
        Lesson(1, "Physics", 0, None, 120),
    ]
    return Plan(timeslots, [], [], lessons, rooms)


def test_group_construction():
    group = Group(0, "test", 32, [True] * 40)
    assert group.index == 0
    assert group.id == "group-0"
    assert group.name == "test"
    assert group.student_count == 32
    assert len(group.availability) == 40


def test_lesson_construction():
    lesson = Lesson(0, "test", 0, None, 0)
    assert lesson.id == "lesson-0"
    assert lesson.student_count == 30
    assert lesson.required_room_kind is RoomKind.LECTURE
    assert lesson.timeslot_idx is None
    assert lesson.room_idx is None


def test_room_construction():
    room = Room(0, "test", RoomKind.LECTURE, 40)
    assert room.id == "room-0"
    assert room.name == "test"
    assert room.kind is RoomKind.LECTURE
    assert room.capacity == 40


def test_room_defaults():
    room = Room(3, "Hall")
    assert (room.kind, room.capacity, room.id) == (RoomKind.LECTURE, 40, "room-3")


def test_teacher_construction():
    teacher = Teacher(0, "test", [True] * 40)
    assert teacher.index == 0
    assert teacher.id == "teacher-0"
    assert teacher.name == "test"
    assert teacher.availability == [True] * 40


def test_timeslot_construction():
    slot = Timeslot(0, Weekday.MON, time(), time())
    assert slot.index == 0
    assert slot.id == "timeslot-0"
    assert slot.day_of_week is Weekday.MON
    assert slot.start_time == time(0, 0)


def test_rebuild_filters_out_of_bounds_indices():
    plan = _two_slot_plan()
    plan.lessons[0].timeslot_idx = 100
    plan.lessons[0].room_idx = 100
    plan.lessons[1].timeslot_idx = 1
    plan.lessons[1].room_idx = 1

    plan.rebuild_derived_fields()

    assert plan.lessons[0].timeslot_idx is None
    assert plan.lessons[0].room_idx is None
    assert plan.lessons[1].timeslot_idx == 1
    assert plan.lessons[1].room_idx == 1


def test_rebuild_restores_lesson_indexes():
    timeslots = [Timeslot(0, Weekday.MON, time(8), time(10))]
    lessons = [Lesson(0, "Math", 0, None, 120), Lesson(1, "Physics", 0, None, 120)]
    plan = Plan(timeslots, [], [], lessons, [])
    plan.lessons[0].index = 0
    plan.lessons[1].index = 0

    plan.rebuild_derived_fields()

    assert [lesson.index for lesson in plan.lessons] == [0, 1]


def test_rebuild_reindexes_facts():
    rooms = [Room(5, "A"), Room(9, "B")]
    plan = Plan([], [], [], [], rooms)
    assert [room.index for room in plan.rooms] == [0, 1]


def test_getters_return_none_for_invalid_indices():
    plan = Plan(
        [Timeslot(0, Weekday.MON, time(8), time(10))],
        [Teacher(0, "Teacher A", [True] * 10)],
        [Group(0, "Group A", 30, [True] * 10)],
        [],
        [Room(0, "Room A")],
    )
    assert plan.get_timeslot(0).id == "timeslot-0"
    assert plan.get_teacher(0).name == "Teacher A"
    assert plan.get_group(0).name == "Group A"
    assert plan.get_room(0).name == "Room A"
    assert plan.get_timeslot(100) is None
    assert plan.get_teacher(100) is None
    assert plan.get_group(100) is None
    assert plan.get_room(100) is None
    assert plan.get_room(-1) is None


def test_timeslot_serialized_form():
    slot = Timeslot(0, Weekday.TUE, time(8), time(10))
    assert slot.to_dict() == {
        "id": "timeslot-0",
        "day_of_week": "Tue",
        "start_time": "08:00:00",
        "end_time": "10:00:00",
    }


def test_lesson_serialized_form_omits_index():
    lesson = Lesson(4, "Chemistry", 1, 2, 60, RoomKind.LAB)
    data = lesson.to_dict()
    assert "index" not in data
    assert data["required_room_kind"] == "lab"
    assert data["teacher_idx"] == 2
    assert data["timeslot_idx"] is None


def test_plan_round_trip():
    plan = _two_slot_plan()
    plan.teachers.append(Teacher(0, "Prof", [True, False]))
    plan.groups.append(Group(0, "Cohort", 25, [False, True]))
    plan.lessons[1].timeslot_idx = 1
    plan.lessons[1].room_idx = 0
    plan.rebuild_derived_fields()

    restored = Plan.from_dict(plan.to_dict())

    assert restored == plan


def test_from_dict_rebuilds_indexes_and_filters():
    data = _two_slot_plan().to_dict()
    data["lessons"][0]["timeslot_idx"] = 7
    plan = Plan.from_dict(data)
    assert [lesson.index for lesson in plan.lessons] == [0, 1]
    assert [slot.index for slot in plan.timeslots] == [0, 1]
    assert plan.lessons[0].timeslot_idx is None


def test_lesson_from_dict_missing_optional_fields():
    lesson = Lesson.from_dict(
        {
            "id": "lesson-x",
            "subject": "Math",
            "group_idx": 0,
            "student_count": 20,
            "duration": 60,
            "required_room_kind": "computer",
        }
    )
    assert lesson.teacher_idx is None
    assert lesson.room_idx is None
    assert lesson.required_room_kind is RoomKind.COMPUTER
    assert lesson.id == "lesson-x"


def test_from_dict_rejects_unknown_weekday():
    with pytest.raises(ValueError):
        Timeslot.from_dict(
            {"id": "t", "day_of_week": "Sun", "start_time": "08:00:00", "end_time": "09:00:00"}
        )


def test_from_dict_rejects_missing_field():
    with pytest.raises(ValueError):
        Room.from_dict({"id": "room-0", "name": "A", "kind": "lecture"})


def test_from_dict_rejects_negative_index():
    data = _two_slot_plan().to_dict()
    data["lessons"][0]["group_idx"] = -1
    with pytest.raises(ValueError):
        Plan.from_dict(data)


def test_from_dict_rejects_non_list_collection():
    data = _two_slot_plan().to_dict()
    data["rooms"] = "nope"
    with pytest.raises(ValueError):
        Plan.from_dict(data)