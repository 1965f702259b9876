"""Hard/medium/soft scores and the constraint machinery that produces them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, Iterator

from .domain import Plan

_SCORE_PATTERN = re.compile(r"^\s*(-?\d+)hard/(-?\d+)medium/(-?\d+)soft\s*$")


@dataclass(frozen=True, order=True)
class HardMediumSoftScore:
    """A three-level score compared lexicographically: hard, then medium, then soft."""

    hard: int = 0
    medium: int = 0
    soft: int = 0

    ZERO: ClassVar[HardMediumSoftScore]

    @classmethod
    def of_hard(cls, value: int) -> HardMediumSoftScore:
        return cls(hard=value)

    @classmethod
    def of_medium(cls, value: int) -> HardMediumSoftScore:
        return cls(medium=value)

    @classmethod
    def of_soft(cls, value: int) -> HardMediumSoftScore:
        return cls(soft=value)

    @classmethod
    def parse(cls, text: str) -> HardMediumSoftScore:
        """Parse the textual form produced by ``str()``."""
        if not isinstance(text, str):
            raise ValueError(f"score must be a string, got {text!r}")
        match = _SCORE_PATTERN.match(text)
        if match is None:
            raise ValueError(f"not a hard/medium/soft score: {text!r}")
        hard, medium, soft = (int(part) for part in match.groups())
        return cls(hard, medium, soft)

    @property
    def is_feasible(self) -> bool:
        return self.hard >= 0

    def __add__(self, other: Any) -> HardMediumSoftScore:
        if not isinstance(other, HardMediumSoftScore):
            return NotImplemented
        return HardMediumSoftScore(
            self.hard + other.hard,
            self.medium + other.medium,
            self.soft + other.soft,
        )

    def __sub__(self, other: Any) -> HardMediumSoftScore:
        if not isinstance(other, HardMediumSoftScore):
            return NotImplemented
        return self + (-other)

    def __mul__(self, factor: Any) -> HardMediumSoftScore:
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return HardMediumSoftScore(self.hard * factor, self.medium * factor, self.soft * factor)

    __rmul__ = __mul__

    def __neg__(self) -> HardMediumSoftScore:
        return HardMediumSoftScore(-self.hard, -self.medium, -self.soft)

    def __str__(self) -> str:
        return f"{self.hard}hard/{self.medium}medium/{self.soft}soft"


HardMediumSoftScore.ZERO = HardMediumSoftScore()


@dataclass(frozen=True)
class Constraint:
    """A named penalty: every match found in a plan costs ``weight``."""

    name: str
    weight: HardMediumSoftScore
    matches: Callable[[Plan], Iterable[object]]

    def match_count(self, plan: Plan) -> int:
        return sum(1 for _ in self.matches(plan))

    def score(self, plan: Plan) -> HardMediumSoftScore:
        return self.weight * -self.match_count(plan)


@dataclass(frozen=True)
class ConstraintAnalysis:
    """Per-constraint breakdown of a plan's score."""

    name: str
    weight: HardMediumSoftScore
    score: HardMediumSoftScore
    match_count: int


class ConstraintSet:
    """An ordered collection of constraints evaluated together."""

    def __init__(self, constraints: Iterable[Constraint] = ()) -> None:
        self.constraints: tuple[Constraint, ...] = tuple(constraints)

    def __iter__(self) -> Iterator[Constraint]:
        return iter(self.constraints)

    def __len__(self) -> int:
        return len(self.constraints)

    def evaluate_all(self, plan: Plan) -> HardMediumSoftScore:
        total = HardMediumSoftScore.ZERO
        for constraint in self.constraints:
            total += constraint.score(plan)
        return total

    def evaluate_detailed(self, plan: Plan) -> list[ConstraintAnalysis]:
        analyses = []
        for constraint in self.constraints:
            count = constraint.match_count(plan)
            analyses.append(
                ConstraintAnalysis(
                    name=constraint.name,
                    weight=constraint.weight,
                    score=constraint.weight * -count,
                    match_count=count,
                )
            )
        return analyses