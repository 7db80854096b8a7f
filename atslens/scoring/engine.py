from __future__ import annotations

from datetime import date
from typing import Optional

from atslens.models import CVDocument, Grade
from atslens.scoring.criteria import (
    action_verb_score,
    formatting_score,
    keyword_score,
    length_score,
    quantification_score,
    structure_score,
)
from atslens.scoring.suggestions import generate_suggestions
from atslens.scoring.types import ATSScoreBreakdown, CriteriaScores

# Grade ladder, highest first. No hysteresis.
GRADE_THRESHOLDS = (
    (85, Grade.EXCELLENT),
    (70, Grade.GOOD),
    (50, Grade.FAIR),
)


def grade_for(overall: int) -> Grade:
    for floor, grade in GRADE_THRESHOLDS:
        if overall >= floor:
            return grade
    return Grade.POOR


def weighted_overall(criteria: CriteriaScores) -> int:
    """round(sum(score * weight) / 100), rounding .5 up, in exact integer math."""
    total = sum(c.score * c.weight for _, c in criteria.items())
    return (total + 50) // 100


def score_cv(
        cv: CVDocument,
        job_description: Optional[str] = None,
        *,
        today: Optional[date] = None,
) -> ATSScoreBreakdown:
    """
    Score a CV against the fixed six-criterion rubric.

    Pure and single-pass: each analyzer runs once, nothing is cached or
    persisted, and the input document is never modified. `today` drives the
    recency advisory; it is read from the clock once when not supplied.
    """
    today = today or date.today()

    criteria = CriteriaScores(
        keywords=keyword_score(cv, job_description),
        formatting=formatting_score(cv),
        quantification=quantification_score(cv),
        action_verbs=action_verb_score(cv),
        length=length_score(cv),
        structure=structure_score(cv, today),
    )

    overall = weighted_overall(criteria)
    return ATSScoreBreakdown(
        overall=overall,
        criteria=criteria,
        suggestions=generate_suggestions(criteria),
        grade=grade_for(overall),
    )


# Short alias matching the public entry point name.
score = score_cv
