"""Timetable domain model: facts, planning entities and the planning solution."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

_U32_MAX = 0xFFFFFFFF

T = TypeVar("T")


class Weekday(Enum):
    """Teaching day of the week."""

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"


class RoomKind(Enum):
    """The type of teaching space a lesson can require."""

    LECTURE = "lecture"
    LAB = "lab"
    COMPUTER = "computer"
    LANGUAGE = "language"


def _require(data: Mapping[str, Any], key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _uint(value: Any, key: str, maximum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"field {key!r} must be a non-negative integer, got {value!r}")
    if maximum is not None and value > maximum:
        raise ValueError(f"field {key!r} is out of range: {value}")
    return value


def _optional_uint(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    return None if value is None else _uint(value, key)


def _string(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _availability(value: Any) -> list[bool]:
    if not isinstance(value, list) or not all(isinstance(item, bool) for item in value):
        raise ValueError("field 'availability' must be a list of booleans")
    return list(value)


def _enum(enum_cls: type[Enum], value: Any, key: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"field {key!r} has unknown value {value!r}") from None


def _time(value: Any, key: str) -> time:
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a time string, got {value!r}")
    try:
        return time.fromisoformat(value)
    except ValueError:
        raise ValueError(f"field {key!r} is not a valid time: {value!r}") from None


@dataclass
class Timeslot:
    """A teaching period on one weekday."""

    index: int = 0
    day_of_week: Weekday = Weekday.MON
    start_time: time = field(default_factory=time)
    end_time: time = field(default_factory=time)
    id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = f"timeslot-{self.index}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "day_of_week": self.day_of_week.value,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Timeslot:
        return cls(
            day_of_week=_enum(Weekday, _require(data, "day_of_week"), "day_of_week"),
            start_time=_time(_require(data, "start_time"), "start_time"),
            end_time=_time(_require(data, "end_time"), "end_time"),
            id=_string(_require(data, "id"), "id"),
        )


@dataclass
class Teacher:
    """A teacher with a weekly availability calendar."""

    index: int
    name: str
    availability: list[bool] = field(default_factory=list)
    id: str = ""

    def __post_init__(self) -> None:
        self.availability = list(self.availability)
        if not self.id:
            self.id = f"teacher-{self.index}"

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "availability": list(self.availability)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Teacher:
        return cls(
            index=0,
            name=_string(_require(data, "name"), "name"),
            availability=_availability(_require(data, "availability")),
            id=_string(_require(data, "id"), "id"),
        )


@dataclass
class Group:
    """A student cohort that receives a weekly timetable."""

    index: int
    name: str
    student_count: int
    availability: list[bool] = field(default_factory=list)
    id: str = ""

    def __post_init__(self) -> None:
        self.availability = list(self.availability)
        if not self.id:
            self.id = f"group-{self.index}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "student_count": self.student_count,
            "availability": list(self.availability),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Group:
        return cls(
            index=0,
            name=_string(_require(data, "name"), "name"),
            student_count=_uint(_require(data, "student_count"), "student_count"),
            availability=_availability(_require(data, "availability")),
            id=_string(_require(data, "id"), "id"),
        )


@dataclass
class Room:
    """A physical teaching space available to the timetable."""

    index: int
    name: str
    kind: RoomKind = RoomKind.LECTURE
    capacity: int = 40
    id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = f"room-{self.index}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "capacity": self.capacity,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Room:
        return cls(
            index=0,
            name=_string(_require(data, "name"), "name"),
            kind=_enum(RoomKind, _require(data, "kind"), "kind"),
            capacity=_uint(_require(data, "capacity"), "capacity"),
            id=_string(_require(data, "id"), "id"),
        )


@dataclass
class Lesson:
    """A subject meeting that the solver assigns to one timeslot and one room."""

    index: int
    subject: str
    group_idx: int = 0
    teacher_idx: int | None = None
    duration: int = 0
    required_room_kind: RoomKind = RoomKind.LECTURE
    student_count: int = 30
    timeslot_idx: int | None = None
    room_idx: int | None = None
    id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = f"lesson-{self.index}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "subject": self.subject,
            "group_idx": self.group_idx,
            "student_count": self.student_count,
            "teacher_idx": self.teacher_idx,
            "duration": self.duration,
            "required_room_kind": self.required_room_kind.value,
            "timeslot_idx": self.timeslot_idx,
            "room_idx": self.room_idx,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Lesson:
        return cls(
            index=0,
            subject=_string(_require(data, "subject"), "subject"),
            group_idx=_uint(_require(data, "group_idx"), "group_idx"),
            student_count=_uint(_require(data, "student_count"), "student_count"),
            teacher_idx=_optional_uint(data, "teacher_idx"),
            duration=_uint(_require(data, "duration"), "duration", _U32_MAX),
            required_room_kind=_enum(
                RoomKind, _require(data, "required_room_kind"), "required_room_kind"
            ),
            timeslot_idx=_optional_uint(data, "timeslot_idx"),
            room_idx=_optional_uint(data, "room_idx"),
            id=_string(_require(data, "id"), "id"),
        )


def _collection(
    data: Mapping[str, Any], key: str, parse: Callable[[Mapping[str, Any]], T]
) -> list[T]:
    items = _require(data, key)
    if not isinstance(items, list):
        raise ValueError(f"field {key!r} must be a list")
    return [parse(item) for item in items]


def _lookup(items: list[T], idx: int) -> T | None:
    return items[idx] if 0 <= idx < len(items) else None


@dataclass
class Plan:
    """The planning solution: facts, lessons to place, and the current score."""

    timeslots: list[Timeslot] = field(default_factory=list)
    teachers: list[Teacher] = field(default_factory=list)
    groups: list[Group] = field(default_factory=list)
    lessons: list[Lesson] = field(default_factory=list)
    rooms: list[Room] = field(default_factory=list)
    score: Any = None

    def __post_init__(self) -> None:
        self.timeslots = list(self.timeslots)
        self.teachers = list(self.teachers)
        self.groups = list(self.groups)
        self.lessons = list(self.lessons)
        self.rooms = list(self.rooms)
        self.rebuild_derived_fields()

    def rebuild_derived_fields(self) -> None:
        """Reset join-key indexes to collection positions and drop out-of-range assignments."""
        for collection in (self.timeslots, self.teachers, self.groups, self.rooms):
            for index, item in enumerate(collection):
                item.index = index
        timeslot_count = len(self.timeslots)
        room_count = len(self.rooms)
        for index, lesson in enumerate(self.lessons):
            lesson.index = index
            if lesson.timeslot_idx is not None and not 0 <= lesson.timeslot_idx < timeslot_count:
                lesson.timeslot_idx = None
            if lesson.room_idx is not None and not 0 <= lesson.room_idx < room_count:
                lesson.room_idx = None

    def get_timeslot(self, idx: int) -> Timeslot | None:
        return _lookup(self.timeslots, idx)

    def get_teacher(self, idx: int) -> Teacher | None:
        return _lookup(self.teachers, idx)

    def get_group(self, idx: int) -> Group | None:
        return _lookup(self.groups, idx)

    def get_room(self, idx: int) -> Room | None:
        return _lookup(self.rooms, idx)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timeslots": [timeslot.to_dict() for timeslot in self.timeslots],
            "teachers": [teacher.to_dict() for teacher in self.teachers],
            "groups": [group.to_dict() for group in self.groups],
            "lessons": [lesson.to_dict() for lesson in self.lessons],
            "rooms": [room.to_dict() for room in self.rooms],
            "score": None if self.score is None else str(self.score),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Plan:
        score = data.get("score") if isinstance(data, Mapping) else None
        return cls(
            timeslots=_collection(data, "timeslots", Timeslot.from_dict),
            teachers=_collection(data, "teachers", Teacher.from_dict),
            groups=_collection(data, "groups", Group.from_dict),
            lessons=_collection(data, "lessons", Lesson.from_dict),
            rooms=_collection(data, "rooms", Room.from_dict),
            score=None if score is None else str(score),
        )