from __future__ import annotations

from typing import List

from atslens.models import CVDocument


def extract_all_text(cv: CVDocument) -> str:
    """
    Flatten every analyzable field of the CV into one space-joined string.
    Order is fixed (personal, experience, education, skills, certifications,
    languages) so repeated calls are byte-identical. Empty parts are skipped.
    """
    p = cv.personal
    parts: List[str] = [p.full_name, p.job_title, p.summary]
    parts.extend(f"{e.title} {e.company} {e.description}" for e in cv.experience)
    parts.extend(f"{e.degree} {e.school}" for e in cv.education)
    parts.extend(cv.skills)
    parts.extend(f"{c.name} {c.description}" for c in cv.certifications)
    parts.extend(lang.language for lang in cv.languages)
    return " ".join(part for part in parts if part)
