from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple


@dataclass(frozen=True)
class NamedPattern:
    """
    A single rubric rule: a name (for diagnostics/tests) plus a compiled regex.
    Matching is stateless; the same pattern can be evaluated any number of times.
    """
    name: str
    regex: Pattern[str]

    def matches(self, text: str) -> bool:
        return bool(text) and self.regex.search(text) is not None


def _p(name: str, pattern: str, flags: int = 0) -> NamedPattern:
    return NamedPattern(name=name, regex=re.compile(pattern, flags))


# --- Quantification evidence (any match => bullet is quantified) ---

QUANTIFICATION_PATTERNS: Tuple[NamedPattern, ...] = (
    _p("percentage", r"\d+%"),
    _p("currency", r"\$\d+[kmb]?", re.IGNORECASE),
    _p("people_count", r"\d+\+?\s*(?:users?|customers?|clients?|people|employees?|members?)", re.IGNORECASE),
    _p("deliverable_count", r"\d+\+?\s*(?:projects?|products?|features?|applications?)", re.IGNORECASE),
    _p("duration", r"\d+\+?\s*(?:years?|months?|weeks?)", re.IGNORECASE),
    _p("multiplier", r"\d+x", re.IGNORECASE),
    _p("increased_by", r"increased?.*?by\s+\d+", re.IGNORECASE),
    _p("reduced_by", r"reduced?.*?by\s+\d+", re.IGNORECASE),
    _p("grew_from_to", r"grew.*?from\s+\d+.*?to\s+\d+", re.IGNORECASE),
    _p("large_number_word", r"\d+\+?\s*(?:million|thousand|billion)", re.IGNORECASE),
)


def matching_quantification_patterns(text: str) -> Tuple[str, ...]:
    """Names of every quantification rule the text satisfies, in table order."""
    return tuple(p.name for p in QUANTIFICATION_PATTERNS if p.matches(text))


def is_quantified(text: str) -> bool:
    return any(p.matches(text) for p in QUANTIFICATION_PATTERNS)


# --- Date formats (first match wins) ---

DATE_FORMAT_YEAR = "YYYY"
DATE_FORMAT_MONTH_YEAR_NUMERIC = "MM/YYYY"
DATE_FORMAT_MONTH_NAME_YEAR = "Month YYYY"
DATE_FORMAT_OTHER = "OTHER"

DATE_FORMAT_PATTERNS: Tuple[NamedPattern, ...] = (
    _p(DATE_FORMAT_YEAR, r"^\d{4}\Z"),
    _p(DATE_FORMAT_MONTH_YEAR_NUMERIC, r"^\d{2}/\d{4}\Z"),
    _p(DATE_FORMAT_MONTH_NAME_YEAR, r"^[A-Za-z]+\s+\d{4}\Z"),
)


def detect_date_format(value: Optional[str]) -> str:
    for p in DATE_FORMAT_PATTERNS:
        if p.matches(value or ""):
            return p.name
    return DATE_FORMAT_OTHER


# Leading integer of a date string, like "2021" in "2021-05" or "2021 (contract)".
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_year(value: Optional[str]) -> Optional[int]:
    m = _LEADING_INT_RE.match(value or "")
    if not m:
        return None
    return int(m.group(1))
