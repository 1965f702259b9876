"""Transport shapes for plans, solver telemetry and score analyses."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Iterable, Mapping

from .domain import Plan
from .score import ConstraintAnalysis, HardMediumSoftScore

_U64_MAX = 0xFFFFFFFFFFFFFFFF
_NANOS_PER_SECOND = 1_000_000_000


class LifecycleState(Enum):
    """Where a solving job is in its lifecycle."""

    SOLVING = "SOLVING"
    PAUSE_REQUESTED = "PAUSE_REQUESTED"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


class TerminalReason(Enum):
    """Why a solving job stopped."""

    COMPLETED = "completed"
    TERMINATED_BY_CONFIG = "terminated_by_config"
    CANCELLED = "cancelled"
    FAILED = "failed"


def _check_counter(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value!r}")


def _check_duration(value: Any, name: str) -> None:
    if not isinstance(value, timedelta) or value < timedelta(0):
        raise ValueError(f"{name} must be a non-negative timedelta, got {value!r}")


@dataclass(frozen=True)
class Telemetry:
    """Raw solver runtime counters."""

    elapsed: timedelta = timedelta(0)
    step_count: int = 0
    moves_generated: int = 0
    moves_evaluated: int = 0
    moves_accepted: int = 0
    score_calculations: int = 0
    generation_time: timedelta = timedelta(0)
    evaluation_time: timedelta = timedelta(0)

    def __post_init__(self) -> None:
        for name in ("elapsed", "generation_time", "evaluation_time"):
            _check_duration(getattr(self, name), name)
        for name in (
            "step_count",
            "moves_generated",
            "moves_evaluated",
            "moves_accepted",
            "score_calculations",
        ):
            _check_counter(getattr(self, name), name)


def _duration_to_millis(duration: timedelta) -> int:
    return min(duration // timedelta(milliseconds=1), _U64_MAX)


def _whole_units_per_second(count: int, elapsed: timedelta) -> int:
    nanos = (elapsed // timedelta(microseconds=1)) * 1000
    if nanos == 0:
        return 0
    return min(count * _NANOS_PER_SECOND // nanos, _U64_MAX)


def _acceptance_rate(moves_accepted: int, moves_evaluated: int) -> float:
    if moves_evaluated == 0:
        return 0.0
    return moves_accepted / moves_evaluated


def telemetry_dto(telemetry: Telemetry) -> dict[str, Any]:
    """Telemetry in its wire form, with derived throughput and acceptance rate."""
    return {
        "elapsedMs": _duration_to_millis(telemetry.elapsed),
        "stepCount": telemetry.step_count,
        "movesGenerated": telemetry.moves_generated,
        "movesEvaluated": telemetry.moves_evaluated,
        "movesAccepted": telemetry.moves_accepted,
        "scoreCalculations": telemetry.score_calculations,
        "generationMs": _duration_to_millis(telemetry.generation_time),
        "evaluationMs": _duration_to_millis(telemetry.evaluation_time),
        "movesPerSecond": _whole_units_per_second(telemetry.moves_evaluated, telemetry.elapsed),
        "acceptanceRate": _acceptance_rate(telemetry.moves_accepted, telemetry.moves_evaluated),
    }


def analysis_response(
    score: HardMediumSoftScore, constraints: Iterable[ConstraintAnalysis]
) -> dict[str, Any]:
    """A score analysis in its wire form."""
    return {
        "score": str(score),
        "constraints": [
            {
                "name": analysis.name,
                "weight": str(analysis.weight),
                "score": str(analysis.score),
                "matchCount": analysis.match_count,
            }
            for analysis in constraints
        ],
    }


def lifecycle_state_label(state: LifecycleState) -> str:
    """The upper-case wire label of a lifecycle state."""
    if not isinstance(state, LifecycleState):
        raise ValueError(f"not a lifecycle state: {state!r}")
    return state.value


def terminal_reason_label(reason: TerminalReason) -> str:
    """The snake-case wire label of a terminal reason."""
    if not isinstance(reason, TerminalReason):
        raise ValueError(f"not a terminal reason: {reason!r}")
    return reason.value


@dataclass
class PlanDto:
    """A plan as exchanged over the wire: its fields plus an optional score string."""

    fields: dict[str, Any]
    score: str | None = None

    @classmethod
    def from_plan(cls, plan: Plan) -> PlanDto:
        fields = plan.to_dict()
        value = fields.pop("score", None)
        if value is None:
            score = None
        elif isinstance(value, str):
            score = value
        else:
            score = json.dumps(value)
        return cls(fields=fields, score=score)

    def to_domain(self) -> Plan:
        """Decode into a plan; the score is dropped and indexes are rebuilt.

        Raises ValueError when the fields do not describe a valid plan.
        """
        fields = dict(self.fields)
        fields["score"] = None
        return Plan.from_dict(fields)

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.fields)
        data["score"] = self.score
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlanDto:
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        score = data.get("score")
        if score is not None and not isinstance(score, str):
            raise ValueError(f"field 'score' must be a string or null, got {score!r}")
        fields = {key: value for key, value in data.items() if key != "score"}
        return cls(fields=fields, score=score)