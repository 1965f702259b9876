# unitimetable

A university timetabling model with hard/medium/soft scoring rules, a
deterministic benchmark dataset, and JSON-ready transport shapes for plans
and solver events.

## Modules

- `unitimetable.domain`: the enums `Weekday` and `RoomKind`, and the
  dataclasses `Timeslot`, `Teacher`, `Group`, `Room`, `Lesson` and `Plan`.
  Each has `to_dict()` and `from_dict()`; `from_dict()` raises `ValueError`
  on missing or malformed fields. Creating a `Plan`, or calling
  `Plan.rebuild_derived_fields()`, sets every item's `index` to its position
  and drops lesson `timeslot_idx`/`room_idx` values that point past the end
  of the timeslot or room lists. `get_timeslot()`, `get_teacher()`,
  `get_group()` and `get_room()` return `None` for an out-of-range index.
- `unitimetable.score`: `HardMediumSoftScore` (ordered hard, then medium,
  then soft; `of_hard()`, `of_medium()`, `of_soft()`, `parse()`, `ZERO`,
  `is_feasible`, addition, subtraction, negation and integer multiplication;
  text form such as `-1hard/0medium/-3soft`), `Constraint`,
  `ConstraintAnalysis` and `ConstraintSet` with `evaluate_all()` and
  `evaluate_detailed()`.
- `unitimetable.rules`: `assign_room`, `assign_timeslot` (medium),
  `group_availability`, `teacher_availability`, `room_capacity` (hard),
  `late_lesson` (slots starting at 15:00 or later), `room_kind` and
  `repeated_subject_day` (soft).
- `unitimetable.conflicts`: `no_group_conflict`, `no_room_conflict` and
  `no_teacher_conflict`, which penalise each pair of lessons sharing a group,
  room or teacher whose slots overlap on the same day.
- `unitimetable.constraints`: `create_constraints()` returns all eleven rules
  as one `ConstraintSet`.
- `unitimetable.vocabulary` and `unitimetable.builders`: the subject, room
  and cohort catalog and the builders for timeslots, groups, teachers and
  rooms.
- `unitimetable.demo`: `DemoData` (with `DemoData.parse()`, case-insensitive),
  `default_demo_data()`, `available_demo_data()`, `build_lessons()`,
  `generate()` and `generate_large()`. The large dataset has 40 timeslots,
  20 teachers, 12 cohorts, 300 unassigned lessons and 10 rooms; each call
  returns a fresh copy.
- `unitimetable.dto`: `PlanDto` (plan fields plus a score string),
  `Telemetry`, `LifecycleState`, `TerminalReason`, `telemetry_dto()`,
  `analysis_response()`, `lifecycle_state_label()` and
  `terminal_reason_label()`.
- `unitimetable.events`: `event_payload()` serialises a job lifecycle event
  as compact JSON; `bootstrap_event_type()`,
  `bootstrap_snapshot_event_type()`, `event_sequence_from_json()`,
  `event_is_not_newer()` and `sse_frame()` help build a server-sent event
  stream.

## Example

```python
from unitimetable.constraints import create_constraints
from unitimetable.demo import DemoData, generate

plan = generate(DemoData.LARGE)
constraints = create_constraints()
print(constraints.evaluate_all(plan))  # 0hard/-600medium/0soft

for analysis in constraints.evaluate_detailed(plan):
    print(analysis.name, analysis.score, analysis.match_count)
```

## What it does not do

The package scores plans; it does not search for them. There is no solver
engine, no job manager, and no HTTP or event-stream server: the transport
and event helpers produce the JSON and frames such a service would send, but
running the service and assigning lessons is left to the caller.

## Tests

The `test` extra installs pytest; the tests live in `tests/`.