from __future__ import annotations

import math
from datetime import date
from typing import List, Optional

from atslens.core.text_processing import (
    contains_whole_word,
    count_whole_word,
    split_bullets,
    word_count,
)
from atslens.core.vocabulary import (
    PASSIVE_INDICATORS,
    REFERENCE_KEYWORDS,
    STRONG_ACTION_VERBS,
    SUGGESTED_VERBS,
    WEAK_PHRASES,
)
from atslens.models import CVDocument
from atslens.requirements import extract_job_keywords
from atslens.scoring.patterns import detect_date_format, is_quantified, parse_leading_year
from atslens.scoring.text import extract_all_text
from atslens.scoring.types import ScoreCriterion

# Fixed rubric weights (sum to 100) and pass thresholds.
KEYWORDS_WEIGHT, KEYWORDS_THRESHOLD = 25, 60
FORMATTING_WEIGHT, FORMATTING_THRESHOLD = 20, 70
QUANTIFICATION_WEIGHT, QUANTIFICATION_THRESHOLD = 15, 50
ACTION_VERBS_WEIGHT, ACTION_VERBS_THRESHOLD = 15, 60
LENGTH_WEIGHT, LENGTH_THRESHOLD = 10, 70
STRUCTURE_WEIGHT, STRUCTURE_THRESHOLD = 15, 70

RECENT_EXPERIENCE_YEARS = 5


def round_half_up(x: float) -> int:
    """Round .5 up (towards +inf), unlike Python's banker's round()."""
    return int(math.floor(x + 0.5))


def clamp_score(x: float) -> int:
    """Round once, then clamp into [0, 100]."""
    r = round_half_up(x)
    return 0 if r < 0 else (100 if r > 100 else r)


def _pct(rate: float) -> int:
    return round_half_up(rate * 100)


# ---------------------------------------------------------------------------
# Keywords (25)
# ---------------------------------------------------------------------------

def keyword_score(cv: CVDocument, job_description: Optional[str] = None) -> ScoreCriterion:
    """
    Reference vocabulary coverage (+30 max), optional job description
    match rate (+20 max), and a skills-count penalty, from a base of 50.
    """
    all_text = extract_all_text(cv).lower()
    details: List[str] = []
    score = 50.0

    found = [kw for kw in REFERENCE_KEYWORDS if kw in all_text]
    coverage = len(found) / len(REFERENCE_KEYWORDS)
    score += min(coverage * 100, 30)

    if len(found) < 5:
        details.append(
            f"Only {len(found)} industry keywords found - add more industry-specific keywords "
            f"to improve ATS visibility"
        )
    elif len(found) < 10:
        details.append(f"Good keyword usage ({len(found)} found), consider adding more specific technologies")
    else:
        details.append(f"Excellent keyword coverage ({len(found)} industry terms found)")

    if job_description:
        job_keywords = extract_job_keywords(job_description).keywords
        matched = [k for k in job_keywords if k in all_text]
        match_rate = (len(matched) / len(job_keywords)) if job_keywords else 0.0
        score += min(match_rate * 20, 20)

        matched_set = set(matched)
        missing = [k for k in job_keywords if k not in matched_set]
        if missing:
            details.append(f"Missing from job description: {', '.join(missing[:5])}")
        elif job_keywords:
            details.append("Excellent match with job description keywords")
    else:
        details.append("Upload job description for keyword matching analysis")

    if len(cv.skills) < 5:
        details.append("Add more skills (aim for 10-15 skills)")
        score -= 10

    return ScoreCriterion(
        score=clamp_score(score),
        weight=KEYWORDS_WEIGHT,
        threshold=KEYWORDS_THRESHOLD,
        details=details,
    )


# ---------------------------------------------------------------------------
# Formatting (20)
# ---------------------------------------------------------------------------

def date_format_issues(cv: CVDocument) -> List[str]:
    """Start dates must all share one format (YYYY, MM/YYYY, Month YYYY or OTHER)."""
    formats = {detect_date_format(e.start_date) for e in cv.experience}
    if len(formats) > 1:
        return ["Inconsistent date formats across experiences"]
    return []


def formatting_score(cv: CVDocument) -> ScoreCriterion:
    p = cv.personal
    details: List[str] = []
    score = 100

    if not p.email or "@" not in p.email:
        details.append("Missing or invalid email address")
        score -= 15

    if not p.phone or len(p.phone) < 10:
        details.append("Missing or incomplete phone number")
        score -= 10

    if not p.full_name or len(p.full_name.strip().split(" ")) < 2:
        details.append("Full name should include first and last name")
        score -= 10

    issues = date_format_issues(cv)
    if issues:
        details.append(f"Date format inconsistencies: {', '.join(issues)}")
        score -= 10

    thin = [e for e in cv.experience if not e.description or len(e.description.strip()) < 20]
    if thin:
        details.append(f"{len(thin)} experience(s) missing detailed descriptions")
        score -= 10 * len(thin)

    if p.linkedin_url and "linkedin.com" not in p.linkedin_url:
        details.append("LinkedIn URL format appears incorrect")
        score -= 5

    if p.website_url and not p.website_url.startswith("http"):
        details.append("Website URL should include http:// or https://")
        score -= 5

    if not details:
        details.append("Excellent formatting - all fields properly structured")

    return ScoreCriterion(
        score=clamp_score(score),
        weight=FORMATTING_WEIGHT,
        threshold=FORMATTING_THRESHOLD,
        details=details,
    )


# ---------------------------------------------------------------------------
# Quantification (15)
# ---------------------------------------------------------------------------

_QUANTIFIED_EXAMPLE = 'Example: "Increased sales by 30%" instead of "Improved sales"'


def quantification_score(cv: CVDocument) -> ScoreCriterion:
    details: List[str] = []
    total = 0
    quantified = 0

    for exp in cv.experience:
        for bullet in split_bullets(exp.description):
            total += 1
            if is_quantified(bullet):
                quantified += 1

    rate = (quantified / total) if total else 0.0
    score = _pct(rate)

    if quantified == 0:
        details.append("❌ No quantified achievements found - add numbers, percentages, or metrics")
        details.append(_QUANTIFIED_EXAMPLE)
    elif rate < 0.3:
        details.append(f"⚠️ Only {_pct(rate)}% of achievements are quantified")
        details.append(_QUANTIFIED_EXAMPLE)
    elif rate < 0.6:
        details.append(f"✓ {_pct(rate)}% quantified - good progress!")
        details.append("Try to add metrics to more achievements")
    else:
        details.append(f"✓ Excellent! {_pct(rate)}% of achievements include metrics")

    details.append(f"Found {quantified} quantified achievements out of {total} total")

    return ScoreCriterion(
        score=clamp_score(score),
        weight=QUANTIFICATION_WEIGHT,
        threshold=QUANTIFICATION_THRESHOLD,
        details=details,
    )


# ---------------------------------------------------------------------------
# Action verbs (15)
# ---------------------------------------------------------------------------

def action_verb_score(cv: CVDocument) -> ScoreCriterion:
    details: List[str] = []
    text = " ".join(e.description for e in cv.experience).lower()

    strong_found = sum(1 for verb in STRONG_ACTION_VERBS if contains_whole_word(text, verb))
    weak_found = [phrase for phrase in WEAK_PHRASES if phrase in text]
    passive_count = sum(count_whole_word(text, word) for word in PASSIVE_INDICATORS)

    score = 50
    score += min(strong_found * 3, 40)
    score -= len(weak_found) * 10

    if weak_found:
        quoted = '", "'.join(weak_found[:2])
        more = "..." if len(weak_found) > 2 else ""
        details.append(f'❌ Found {len(weak_found)} weak phrases: "{quoted}"{more}')
        details.append(f"Replace with strong action verbs like: {', '.join(SUGGESTED_VERBS)}")

    if strong_found < 5:
        details.append("⚠️ Use more strong action verbs to start your bullet points")
    elif strong_found < 10:
        details.append(f"✓ Good use of action verbs ({strong_found} found)")
    else:
        details.append(f"✓ Excellent action verb usage ({strong_found} strong verbs)")

    if passive_count > 5:
        details.append("⚠️ Reduce passive voice - use active voice for stronger impact")
        score -= 10

    return ScoreCriterion(
        score=clamp_score(score),
        weight=ACTION_VERBS_WEIGHT,
        threshold=ACTION_VERBS_THRESHOLD,
        details=details,
    )


# ---------------------------------------------------------------------------
# Length (10)
# ---------------------------------------------------------------------------

def length_score(cv: CVDocument) -> ScoreCriterion:
    details: List[str] = []
    n = word_count(extract_all_text(cv))

    if n < 300:
        score = round_half_up((n / 300) * 50)
        details.append(f"❌ CV is too short ({n} words). Aim for 400-800 words")
        details.append("Add more detailed descriptions of your achievements")
    elif n < 400:
        score = 70
        details.append(f"⚠️ CV is somewhat short ({n} words). Add more details")
    elif n <= 800:
        score = 100
        details.append(f"✓ Excellent length ({n} words) - optimal for ATS systems")
    elif n <= 1000:
        score = 85
        details.append(f"✓ Good length ({n} words) but slightly long. Consider condensing")
    else:
        score = 60
        details.append(f"⚠️ CV is too long ({n} words). Aim for 400-800 words")
        details.append("Focus on most recent and relevant experiences")

    return ScoreCriterion(
        score=clamp_score(score),
        weight=LENGTH_WEIGHT,
        threshold=LENGTH_THRESHOLD,
        details=details,
    )


# ---------------------------------------------------------------------------
# Structure (15)
# ---------------------------------------------------------------------------

def recent_experience_count(cv: CVDocument, today: date) -> int:
    """Entries whose effective end year is within the last RECENT_EXPERIENCE_YEARS years."""
    cutoff = today.year - RECENT_EXPERIENCE_YEARS
    n = 0
    for exp in cv.experience:
        end_year = today.year if exp.current else parse_leading_year(exp.end_date)
        if end_year is not None and end_year >= cutoff:
            n += 1
    return n


def structure_score(cv: CVDocument, today: date) -> ScoreCriterion:
    p = cv.personal
    details: List[str] = []
    score = 100

    if not p.summary or len(p.summary.strip()) < 50:
        details.append("❌ Missing or too short professional summary (aim for 50-100 words)")
        score -= 20

    if not cv.experience:
        details.append("❌ No work experience added")
        score -= 30
    elif len(cv.experience) < 2:
        details.append("⚠️ Add more work experience entries for better profile")
        score -= 10

    if not cv.education:
        details.append("⚠️ No education entries - consider adding your educational background")
        score -= 15

    if not cv.skills:
        details.append("❌ No skills listed - this is critical for ATS matching")
        score -= 25
    elif len(cv.skills) < 8:
        details.append("⚠️ Add more skills (most competitive CVs have 10-15 skills)")
        score -= 10

    if not p.job_title.strip():
        details.append("⚠️ Missing professional title/headline")
        score -= 10

    if not p.linkedin_url and not p.website_url:
        details.append("⚠️ Add LinkedIn profile or personal website for credibility")
        score -= 5

    # Advisory only, no deduction.
    if cv.experience and recent_experience_count(cv, today) == 0:
        details.append("⚠️ Focus on recent experience (last 5 years is most relevant)")

    if not details:
        details.append("✓ Excellent structure - all key sections complete")

    return ScoreCriterion(
        score=clamp_score(score),
        weight=STRUCTURE_WEIGHT,
        threshold=STRUCTURE_THRESHOLD,
        details=details,
    )
