from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List

from atslens.core.text_processing import dedupe_first_seen, tokenize_words
from atslens.core.vocabulary import JOB_DESCRIPTION_STOPWORDS, REFERENCE_KEYWORDS

MAX_JOB_KEYWORDS = 20
MIN_TERM_LENGTH = 5
MIN_TERM_FREQUENCY = 2


@dataclass(frozen=True)
class JobKeywords:
    """
    Heuristic keyword signals pulled from free-text job description input.

    - vocabulary_hits: reference terms present in the text (vocabulary order)
    - frequent_terms: repeated non-stopword tokens (first-seen order)
    - keywords: the capped, deduplicated union used for matching
    """
    vocabulary_hits: List[str]
    frequent_terms: List[str]
    keywords: List[str]


def extract_job_keywords(job_description: str, *, max_keywords: int = MAX_JOB_KEYWORDS) -> JobKeywords:
    """
    Deterministic, vocabulary + frequency based extraction. Not NLP: the same
    input always yields the same keywords, in the same order.
    """
    text = (job_description or "").lower()
    if not text.strip():
        return JobKeywords(vocabulary_hits=[], frequent_terms=[], keywords=[])

    vocabulary_hits = [kw for kw in REFERENCE_KEYWORDS if kw in text]

    counts = Counter(tokenize_words(text, min_length=MIN_TERM_LENGTH))
    already = set(vocabulary_hits)
    # Counter preserves first-seen insertion order.
    frequent_terms = [
        tok
        for tok, n in counts.items()
        if n >= MIN_TERM_FREQUENCY and tok not in JOB_DESCRIPTION_STOPWORDS and tok not in already
    ]

    keywords = dedupe_first_seen(vocabulary_hits + frequent_terms)[:max_keywords]
    return JobKeywords(
        vocabulary_hits=vocabulary_hits,
        frequent_terms=frequent_terms,
        keywords=keywords,
    )
