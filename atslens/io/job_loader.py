from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from pypdf import PdfReader

from atslens.core.text_processing import normalize_text


@dataclass(frozen=True)
class LoadedJobDescription:
    text: str
    source: str  # "text" | "pdf" | "none"
    path: Optional[str] = None
    truncated: bool = False


def _cap(text: str, max_chars: Optional[int]) -> Tuple[str, bool]:
    if max_chars is None or max_chars <= 0 or len(text) <= max_chars:
        return text, False
    return text[:max_chars], True


def load_job_description(
        *,
        job_text_path: Optional[str],
        job_pdf_path: Optional[str],
        max_chars: Optional[int] = None,
) -> LoadedJobDescription:
    """
    Load a job description locally.
    Precedence:
      1) job_text_path (.txt)
      2) job_pdf_path (.pdf)
      3) none
    Best-effort: failures return source='none' and empty text (caller scores
    without a job description).
    """
    if job_text_path:
        p = Path(job_text_path)
        try:
            raw = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return LoadedJobDescription(text="", source="none", path=str(p))
        text, truncated = _cap(normalize_text(raw), max_chars)
        return LoadedJobDescription(text=text, source="text", path=str(p), truncated=truncated)

    if job_pdf_path:
        p = Path(job_pdf_path)
        try:
            reader = PdfReader(str(p))
            parts = []
            for page in reader.pages:
                t = page.extract_text() or ""
                if t.strip():
                    parts.append(t)
        except Exception:
            # pypdf raises a wide range of errors for damaged files.
            return LoadedJobDescription(text="", source="none", path=str(p))
        text = normalize_text("\n".join(parts))
        if not text:
            return LoadedJobDescription(text="", source="none", path=str(p))
        text, truncated = _cap(text, max_chars)
        return LoadedJobDescription(text=text, source="pdf", path=str(p), truncated=truncated)

    return LoadedJobDescription(text="", source="none", path=None)
