from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

from atslens.models import Grade


@dataclass(frozen=True)
class ScoreCriterion:
    score: int  # 0-100
    weight: int  # percentage of the overall score
    threshold: int  # score needed to pass
    details: List[str] = field(default_factory=list)  # findings, not scoring input

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", tuple(self.details or ()))

    @property
    def passed(self) -> bool:
        return self.score >= self.threshold

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "weight": self.weight,
            "details": list(self.details),
            "passed": self.passed,
        }


# Rubric order; also the order used for display and serialization.
CRITERIA_ORDER: Tuple[Tuple[str, str], ...] = (
    ("keywords", "keywords"),
    ("formatting", "formatting"),
    ("quantification", "quantification"),
    ("action_verbs", "actionVerbs"),
    ("length", "length"),
    ("structure", "structure"),
)


@dataclass(frozen=True)
class CriteriaScores:
    keywords: ScoreCriterion
    formatting: ScoreCriterion
    quantification: ScoreCriterion
    action_verbs: ScoreCriterion
    length: ScoreCriterion
    structure: ScoreCriterion

    def __post_init__(self) -> None:
        total = sum(c.weight for _, c in self.items())
        if total != 100:
            raise ValueError(f"criterion weights must sum to 100, got {total}")

    def items(self) -> Iterator[Tuple[str, ScoreCriterion]]:
        """(public key, criterion) pairs in rubric order."""
        for attr, key in CRITERIA_ORDER:
            yield key, getattr(self, attr)

    def to_dict(self) -> Dict[str, Any]:
        return {key: c.to_dict() for key, c in self.items()}


@dataclass(frozen=True)
class ATSScoreBreakdown:
    overall: int
    criteria: CriteriaScores
    suggestions: List[str]
    grade: Grade

    def __post_init__(self) -> None:
        object.__setattr__(self, "suggestions", tuple(self.suggestions or ()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall": self.overall,
            "criteria": self.criteria.to_dict(),
            "suggestions": list(self.suggestions),
            "grade": self.grade.value,
        }
