from __future__ import annotations

import json
from pathlib import Path

from atslens.models import CVDocument, CVDocumentError, cv_document_from_dict


def load_cv_document(path: Path) -> CVDocument:
    """
    Read a CV JSON file (the editing UI's export shape) into a CVDocument.
    Raises CVDocumentError on non-UTF-8 bytes, unparseable JSON or a malformed
    top-level shape; OSError propagates for unreadable files.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CVDocumentError(f"{path}: not valid UTF-8 text") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CVDocumentError(f"{path}: invalid JSON ({e.msg} at line {e.lineno})") from e
    return cv_document_from_dict(data)
