from .engine import grade_for, score, score_cv
from .types import ATSScoreBreakdown, CriteriaScores, ScoreCriterion

__all__ = ["score", "score_cv", "grade_for", "ATSScoreBreakdown", "CriteriaScores", "ScoreCriterion"]
