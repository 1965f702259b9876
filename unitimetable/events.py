"""Solver lifecycle event payloads and server-sent-event framing."""

from __future__ import annotations

import json
from typing import Any

from .domain import Plan
from .dto import (
    LifecycleState,
    PlanDto,
    Telemetry,
    TerminalReason,
    lifecycle_state_label,
    telemetry_dto,
    terminal_reason_label,
)
from .score import HardMediumSoftScore

_U64_MAX = 0xFFFFFFFFFFFFFFFF

_BOOTSTRAP_EVENT_TYPES = {
    LifecycleState.SOLVING: "progress",
    LifecycleState.PAUSE_REQUESTED: "pause_requested",
    LifecycleState.PAUSED: "paused",
    LifecycleState.COMPLETED: "completed",
    LifecycleState.CANCELLED: "cancelled",
    LifecycleState.FAILED: "failed",
}


def _score_text(score: HardMediumSoftScore | str | None) -> str | None:
    return None if score is None else str(score)


def event_payload(
    job_id: int,
    event_type: str,
    event_sequence: int,
    lifecycle_state: LifecycleState,
    terminal_reason: TerminalReason | None,
    telemetry: Telemetry,
    current_score: HardMediumSoftScore | None,
    best_score: HardMediumSoftScore | None,
    snapshot_revision: int | None,
    solution: Plan | None,
    error: str | None,
) -> str:
    """Serialize one job lifecycle event as compact JSON."""
    payload: dict[str, Any] = {
        "id": str(job_id),
        "jobId": str(job_id),
        "eventType": event_type,
        "eventSequence": event_sequence,
        "lifecycleState": lifecycle_state_label(lifecycle_state),
        "terminalReason": (
            None if terminal_reason is None else terminal_reason_label(terminal_reason)
        ),
        "telemetry": telemetry_dto(telemetry),
        "currentScore": _score_text(current_score),
        "bestScore": _score_text(best_score),
        "snapshotRevision": snapshot_revision,
        "solution": None if solution is None else PlanDto.from_plan(solution).to_dict(),
        "error": error,
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def bootstrap_event_type(state: LifecycleState) -> str:
    """Event type announcing a job's current state to a new subscriber."""
    try:
        return _BOOTSTRAP_EVENT_TYPES[state]
    except KeyError:
        raise ValueError(f"not a lifecycle state: {state!r}") from None


def bootstrap_snapshot_event_type(state: LifecycleState) -> str:
    """Like :func:`bootstrap_event_type`, but a solving job reports its best solution."""
    if state is LifecycleState.SOLVING:
        return "best_solution"
    return bootstrap_event_type(state)


def event_sequence_from_json(text: str) -> int | None:
    """The ``eventSequence`` of a payload, or None if absent or not an unsigned integer."""
    try:
        value = json.loads(text)
    except (TypeError, ValueError):
        return None
    if not isinstance(value, dict):
        return None
    sequence = value.get("eventSequence")
    if isinstance(sequence, bool) or not isinstance(sequence, int):
        return None
    if not 0 <= sequence <= _U64_MAX:
        return None
    return sequence


def event_is_not_newer(text: str, bootstrap_event_sequence: int | None) -> bool:
    """Whether a live event was already covered by the bootstrap event."""
    if bootstrap_event_sequence is None:
        return False
    sequence = event_sequence_from_json(text)
    return sequence is not None and sequence <= bootstrap_event_sequence


def sse_frame(text: str) -> bytes:
    """Frame a payload as one server-sent event."""
    return f"data: {text}\n\n".encode()