# atslens/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

# NOTE: the rubric (weights, thresholds, vocabularies, patterns) is NOT
# configurable. Only I/O guardrails and CLI defaults live here.

# --- Guardrails ---

JOB_MAX_CHARS_DEFAULT = 20000

# --- CLI defaults ---

OUTPUT_MODES: Tuple[str, ...] = ("human", "json")

# Searched in order when no --cv is given and ATSLENS_CV_PATH is unset.
DEFAULT_CV_CANDIDATES: Tuple[Path, ...] = (
    Path("cv.json"),
    Path(".atslens") / "cv.json",
)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_choice(name: str, choices: Tuple[str, ...], default: str) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True)
class ReportConfig:
    cv_path: Optional[str]
    output: str  # "human" | "json"
    job_max_chars: int


def load_report_config() -> ReportConfig:
    """Snapshot of the environment, read once per CLI run."""
    return ReportConfig(
        cv_path=(os.getenv("ATSLENS_CV_PATH") or "").strip() or None,
        output=_env_choice("ATSLENS_OUTPUT", OUTPUT_MODES, "human"),
        job_max_chars=_env_int("ATSLENS_JOB_MAX_CHARS", JOB_MAX_CHARS_DEFAULT),
    )
