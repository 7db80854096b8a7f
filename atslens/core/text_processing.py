from __future__ import annotations

import re
import unicodedata
from functools import lru_cache
from typing import Iterable, List, Pattern

# NOTE: shared text helpers. The analyzers, the job keyword extractor and the
# CLI all depend on this module rather than re-implementing splitting/matching.

# Bullet separators inside rich-text experience descriptions:
# HTML list markup, line breaks and the bullet glyph.
_BULLET_SPLIT_RE = re.compile(r"<li>|</li>|\n|•")

# Anything that is neither a word character nor whitespace.
_NON_WORD_RE = re.compile(r"[^\w\s]")


def normalize_text(text: str) -> str:
    """
    Deterministic normalization for display and file-loaded text.

    - remove unicode quirks (smart quotes, non-breaking spaces)
    - collapse whitespace
    """
    if not text:
        return ""
    t = unicodedata.normalize("NFKC", text)
    t = t.replace("\u00a0", " ")
    t = re.sub(r"[\u2010-\u2015]", "-", t)
    return " ".join(t.split())


def words(text: str) -> List[str]:
    """Whitespace-delimited words."""
    return (text or "").split()


def word_count(text: str) -> int:
    return len(words(text))


@lru_cache(maxsize=512)
def _whole_word_re(term: str) -> Pattern[str]:
    return re.compile(r"\b" + re.escape(term) + r"\b", re.IGNORECASE)


def contains_whole_word(text: str, term: str) -> bool:
    if not text or not term:
        return False
    return _whole_word_re(term).search(text) is not None


def count_whole_word(text: str, term: str) -> int:
    if not text or not term:
        return 0
    return len(_whole_word_re(term).findall(text))


def split_bullets(description: str, *, min_length: int = 10) -> List[str]:
    """
    Split a rich-text description into bullet fragments.
    Fragments whose stripped length is not above `min_length` are dropped.
    """
    if not description:
        return []
    out: List[str] = []
    for part in _BULLET_SPLIT_RE.split(description):
        stripped = part.strip()
        if len(stripped) > min_length:
            out.append(stripped)
    return out


def tokenize_words(text: str, *, min_length: int = 5) -> List[str]:
    """
    Ordered token stream: punctuation replaced by spaces, split on whitespace,
    tokens shorter than `min_length` discarded. Case is preserved; callers
    lower-case first when they need case-insensitive counts.
    """
    if not text:
        return []
    cleaned = _NON_WORD_RE.sub(" ", text)
    return [tok for tok in cleaned.split() if len(tok) >= min_length]


def dedupe_first_seen(items: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for it in items:
        if it and it not in seen:
            out.append(it)
            seen.add(it)
    return out
