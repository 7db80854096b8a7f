from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from atslens import config
from atslens.io.cv_loader import load_cv_document
from atslens.io.job_loader import load_job_description
from atslens.models import CVDocument, CVDocumentError
from atslens.scoring.engine import score_cv
from atslens.scoring.types import ATSScoreBreakdown

_LABELS = {
    "keywords": "Keywords",
    "formatting": "Formatting",
    "quantification": "Quantification",
    "actionVerbs": "Action verbs",
    "length": "Length",
    "structure": "Structure",
}


def _notice(message: str) -> None:
    print(f"[ATSLens] {message}", file=sys.stderr)


def print_human_summary(result: ATSScoreBreakdown, *, job_source: str = "none") -> None:
    print("\n=== ATSLens CV Score ===")
    print(f"Overall: {result.overall}/100 ({result.grade.value})")
    if job_source != "none":
        print(f"Job description: loaded from {job_source}")

    print("\nCriteria:")
    for key, c in result.criteria.items():
        status = "pass" if c.passed else "FAIL"
        print(f"\n- {_LABELS.get(key, key)}: {c.score}/100  (weight {c.weight}%, {status})")
        for d in c.details:
            print(f"   {d}")

    print("\nSuggestions:")
    for idx, s in enumerate(result.suggestions, start=1):
        print(f"{idx}) {s}")


def _resolve_cv_path(raw: Optional[str]) -> Optional[Path]:
    # 1) explicit path (flag or ATSLENS_CV_PATH)
    if raw:
        return Path(raw)

    # 2) conventional locations
    for c in config.DEFAULT_CV_CANDIDATES:
        if c.is_file():
            return c

    return None


def _parse_today(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {raw!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="atslens", description="Score a CV against the ATS rubric")
    parser.add_argument("--cv", type=str, default="", help="Path to the CV JSON export")
    parser.add_argument("--job-text", type=str, default="", help="Optional path to a job description .txt")
    parser.add_argument("--job-pdf", type=str, default="", help="Optional path to a job description .pdf")
    parser.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")
    parser.add_argument("--today", type=_parse_today, default=None, help="Reference date for recency (YYYY-MM-DD)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = config.load_report_config()

    cv_path = _resolve_cv_path(args.cv or cfg.cv_path)
    if cv_path is None or not cv_path.is_file():
        shown = cv_path if cv_path is not None else "cv.json"
        _notice(f"CV file not found: {shown}")
        print("Tip: pass --cv, set ATSLENS_CV_PATH, or place cv.json in the current directory", file=sys.stderr)
        raise SystemExit(2)

    try:
        cv: CVDocument = load_cv_document(cv_path)
    except CVDocumentError as e:
        _notice(f"Invalid CV document: {e}")
        raise SystemExit(2)
    except OSError as e:
        _notice(f"Could not read CV file {cv_path}: {e}")
        raise SystemExit(2)

    loaded = load_job_description(
        job_text_path=args.job_text or None,
        job_pdf_path=args.job_pdf or None,
        max_chars=cfg.job_max_chars,
    )
    if (args.job_text or args.job_pdf) and loaded.source == "none":
        _notice(f"Could not read job description from {loaded.path}; scoring without it.")
    if loaded.truncated:
        _notice(f"Job description truncated to {cfg.job_max_chars} characters.")

    result = score_cv(cv, loaded.text or None, today=args.today)

    if args.json or cfg.output == "json":
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_human_summary(result, job_source=loaded.source)
        print("\nJSON Output:")
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
