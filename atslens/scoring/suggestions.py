from __future__ import annotations

from typing import List

from atslens.scoring.types import CriteriaScores

MAX_SUGGESTIONS = 5

KEYWORDS_SUGGESTION = "🎯 HIGH PRIORITY: Add more industry-specific keywords to improve ATS matching"
QUANTIFICATION_SUGGESTION = "📊 HIGH PRIORITY: Quantify your achievements with numbers, percentages, and metrics"
ACTION_VERBS_SUGGESTION = "💪 HIGH PRIORITY: Replace weak phrases with strong action verbs (Led, Achieved, Optimized)"
STRUCTURE_SUGGESTION = "🏗️ HIGH PRIORITY: Complete all key sections (Summary, Experience, Skills, Education)"
FORMATTING_SUGGESTION = "✏️ Fix formatting issues with contact info, dates, or descriptions"
LENGTH_SUGGESTION = "📝 Adjust CV length to optimal range (400-800 words)"

# Secondary checks use their own cut-offs, independent of pass/fail.
FORMATTING_SUGGESTION_BELOW = 80
LENGTH_SUGGESTION_BELOW = 70

ENCOURAGEMENT = (
    "🎉 Great job! Your CV is well-optimized for ATS systems",
    "💡 Consider tailoring keywords for specific job applications",
    "🔍 Paste a job description to check keyword coverage for a specific role",
)


def generate_suggestions(criteria: CriteriaScores) -> List[str]:
    """
    Fixed priority order: failed high-impact criteria first, then the
    secondary formatting/length checks. At most MAX_SUGGESTIONS entries.
    """
    out: List[str] = []

    if not criteria.keywords.passed:
        out.append(KEYWORDS_SUGGESTION)
    if not criteria.quantification.passed:
        out.append(QUANTIFICATION_SUGGESTION)
    if not criteria.action_verbs.passed:
        out.append(ACTION_VERBS_SUGGESTION)
    if not criteria.structure.passed:
        out.append(STRUCTURE_SUGGESTION)

    if criteria.formatting.score < FORMATTING_SUGGESTION_BELOW:
        out.append(FORMATTING_SUGGESTION)
    if criteria.length.score < LENGTH_SUGGESTION_BELOW:
        out.append(LENGTH_SUGGESTION)

    if not out:
        out.extend(ENCOURAGEMENT)

    return out[:MAX_SUGGESTIONS]
