from datetime import timedelta

import pytest

from unitimetable.constraints import create_constraints
from unitimetable.demo import DemoData, generate
from unitimetable.domain import Plan, Room, Timeslot, Weekday, Lesson
from unitimetable.dto import (
    LifecycleState,
    PlanDto,
    Telemetry,
    TerminalReason,
    analysis_response,
    lifecycle_state_label,
    telemetry_dto,
    terminal_reason_label,
)
from unitimetable.score import HardMediumSoftScore


def test_plan_dto_round_trip_restores_lesson_indexes():
    dto = PlanDto.from_plan(generate(DemoData.LARGE))
    plan = dto.to_domain()
    assert [lesson.index for lesson in plan.lessons] == list(range(len(plan.lessons)))


def test_plan_dto_round_trip_preserves_hard_conflict_detection():
    plan = generate(DemoData.LARGE)
    plan.lessons[0].timeslot_idx = 0
    plan.lessons[0].room_idx = 0
    plan.lessons[1].timeslot_idx = 0
    plan.lessons[1].room_idx = 0

    round_tripped = PlanDto.from_plan(plan).to_domain()
    score = create_constraints().evaluate_all(round_tripped)
    assert score.hard < 0


def _small_plan():
    from datetime import time

    timeslots = [Timeslot(0, Weekday.MON, time(8), time(9))]
    rooms = [Room(0, "Room A")]
    lessons = [Lesson(0, "Math", 0, None, 60)]
    return Plan(timeslots, [], [], lessons, rooms)


def test_from_plan_extracts_score_string():
    plan = _small_plan()
    plan.score = HardMediumSoftScore.of_hard(-1)
    dto = PlanDto.from_plan(plan)
    assert dto.score == str(HardMediumSoftScore.of_hard(-1))
    assert "score" not in dto.fields


def test_from_plan_without_score():
    dto = PlanDto.from_plan(_small_plan())
    assert dto.score is None
    assert dto.to_dict()["score"] is None


def test_to_domain_drops_score():
    plan = _small_plan()
    plan.score = HardMediumSoftScore.of_soft(-3)
    restored = PlanDto.from_plan(plan).to_domain()
    assert restored.score is None
    assert restored.lessons[0].subject == "Math"


def test_dict_round_trip():
    dto = PlanDto.from_plan(_small_plan())
    dto.score = "0hard/0medium/0soft"
    again = PlanDto.from_dict(dto.to_dict())
    assert again == dto


def test_from_dict_rejects_non_string_score():
    data = PlanDto.from_plan(_small_plan()).to_dict()
    data["score"] = 5
    with pytest.raises(ValueError):
        PlanDto.from_dict(data)


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        PlanDto.from_dict([1, 2])


def test_to_domain_rejects_invalid_fields():
    dto = PlanDto(fields={"timeslots": []})
    with pytest.raises(ValueError):
        dto.to_domain()


def test_telemetry_dto_derived_values():
    telemetry = Telemetry(
        elapsed=timedelta(seconds=2),
        step_count=10,
        moves_generated=600,
        moves_evaluated=500,
        moves_accepted=125,
        score_calculations=700,
        generation_time=timedelta(milliseconds=1500),
        evaluation_time=timedelta(milliseconds=300),
    )
    dto = telemetry_dto(telemetry)
    assert dto == {
        "elapsedMs": 2000,
        "stepCount": 10,
        "movesGenerated": 600,
        "movesEvaluated": 500,
        "movesAccepted": 125,
        "scoreCalculations": 700,
        "generationMs": 1500,
        "evaluationMs": 300,
        "movesPerSecond": 250,
        "acceptanceRate": 0.25,
    }


def test_telemetry_dto_zero_elapsed_and_no_evaluations():
    dto = telemetry_dto(Telemetry())
    assert dto["movesPerSecond"] == 0
    assert dto["acceptanceRate"] == 0.0


def test_moves_per_second_saturates():
    u64_max = 2**64 - 1
    dto = telemetry_dto(
        Telemetry(elapsed=timedelta(microseconds=1), moves_evaluated=u64_max)
    )
    assert dto["movesPerSecond"] == u64_max


def test_telemetry_rejects_negative_values():
    with pytest.raises(ValueError):
        Telemetry(step_count=-1)
    with pytest.raises(ValueError):
        Telemetry(elapsed=timedelta(seconds=-1))


def test_analysis_response_for_initial_demo():
    plan = generate(DemoData.LARGE)
    constraints = create_constraints()
    response = analysis_response(
        constraints.evaluate_all(plan), constraints.evaluate_detailed(plan)
    )
    assert response["score"] == str(HardMediumSoftScore.of_medium(-600))
    by_name = {item["name"]: item for item in response["constraints"]}
    assert by_name["Assign Room"]["matchCount"] == 300
    assert by_name["Assign Room"]["weight"] == str(HardMediumSoftScore.of_medium(1))
    assert by_name["Assign Room"]["score"] == str(HardMediumSoftScore.of_medium(-300))
    assert len(response["constraints"]) == 11


@pytest.mark.parametrize(
    "state, label",
    [
        (LifecycleState.SOLVING, "SOLVING"),
        (LifecycleState.PAUSE_REQUESTED, "PAUSE_REQUESTED"),
        (LifecycleState.PAUSED, "PAUSED"),
        (LifecycleState.COMPLETED, "COMPLETED"),
        (LifecycleState.CANCELLED, "CANCELLED"),
        (LifecycleState.FAILED, "FAILED"),
    ],
)
def test_lifecycle_state_label(state, label):
    assert lifecycle_state_label(state) == label


@pytest.mark.parametrize(
    "reason, label",
    [
        (TerminalReason.COMPLETED, "completed"),
        (TerminalReason.TERMINATED_BY_CONFIG, "terminated_by_config"),
        (TerminalReason.CANCELLED, "cancelled"),
        (TerminalReason.FAILED, "failed"),
    ],
)
def test_terminal_reason_label(reason, label):
    assert terminal_reason_label(reason) == label


def test_label_rejects_unknown_values():
    with pytest.raises(ValueError):
        lifecycle_state_label("SOLVING")
    with pytest.raises(ValueError):
        terminal_reason_label("completed")