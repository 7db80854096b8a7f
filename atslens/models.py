from __future__ import annotations

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence


class Grade(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class CVDocumentError(ValueError):
    """Raised when raw input cannot be shaped into a CVDocument."""


def normalize_whitespace(text: str) -> str:
    return " ".join((text or "").split()).strip()


def _str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _blank_missing(record: Any, *names: str) -> None:
    """Replace None (or non-str) text fields on a frozen record with strings."""
    for name in names:
        object.__setattr__(record, name, _str(getattr(record, name)))


@dataclass(frozen=True)
class CVPersonal:
    full_name: str = ""
    job_title: str = ""
    summary: str = ""
    email: str = ""
    phone: str = ""
    linkedin_url: str = ""
    website_url: str = ""
    address: str = ""

    def __post_init__(self) -> None:
        _blank_missing(self, "full_name", "job_title", "summary", "email", "phone",
                       "linkedin_url", "website_url", "address")


@dataclass(frozen=True)
class CVExperience:
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    # Rich text: may contain line breaks, bullet characters or <li> markup.
    # Never whitespace-normalized since line breaks delimit bullets.
    description: str = ""
    id: Optional[str] = None

    def __post_init__(self) -> None:
        _blank_missing(self, "title", "company", "location", "start_date", "end_date", "description")
        object.__setattr__(self, "current", self.current is True)


@dataclass(frozen=True)
class CVEducation:
    degree: str = ""
    school: str = ""
    location: str = ""
    year: str = ""
    id: Optional[str] = None

    def __post_init__(self) -> None:
        _blank_missing(self, "degree", "school", "location", "year")


@dataclass(frozen=True)
class CVCertification:
    name: str = ""
    issuer: str = ""
    date: str = ""
    url: str = ""
    description: str = ""
    id: Optional[str] = None

    def __post_init__(self) -> None:
        _blank_missing(self, "name", "issuer", "date", "url", "description")


@dataclass(frozen=True)
class CVLanguage:
    language: str = ""
    proficiency: str = ""
    id: Optional[str] = None

    def __post_init__(self) -> None:
        _blank_missing(self, "language", "proficiency")


@dataclass(frozen=True)
class CVDocument:
    """
    The structured résumé consumed by the scoring engine.
    Owned by the editing layer; the engine only reads it.
    """
    personal: CVPersonal = field(default_factory=CVPersonal)
    experience: List[CVExperience] = field(default_factory=list)
    education: List[CVEducation] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    certifications: List[CVCertification] = field(default_factory=list)
    languages: List[CVLanguage] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.personal is None:
            object.__setattr__(self, "personal", CVPersonal())
        # Freeze the sequences so a scoring call can never mutate its input.
        object.__setattr__(self, "experience", tuple(self.experience or ()))
        object.__setattr__(self, "education", tuple(self.education or ()))
        object.__setattr__(self, "skills", tuple(_str(s) for s in (self.skills or ())))
        object.__setattr__(self, "certifications", tuple(self.certifications or ()))
        object.__setattr__(self, "languages", tuple(self.languages or ()))

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        for key in ("experience", "education", "skills", "certifications", "languages"):
            d[key] = list(d[key])
        return d


# --- Raw (UI-shaped) input ---

def _pick(raw: Mapping[str, Any], *keys: str) -> str:
    """First present key wins; accepts both camelCase (UI) and snake_case."""
    for k in keys:
        if k in raw and raw[k] is not None:
            return _str(raw[k])
    return ""


def _records(raw: Mapping[str, Any], key: str) -> Sequence[Mapping[str, Any]]:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CVDocumentError(f"'{key}' must be a list, got {type(value).__name__}")
    for item in value:
        if not isinstance(item, dict):
            raise CVDocumentError(f"every '{key}' entry must be an object")
    return value


def _flag(value: Any) -> bool:
    """JSON booleans, or the strings "true"/"false" some exports write."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True


def _optional_id(raw: Mapping[str, Any]) -> Optional[str]:
    v = raw.get("id")
    return None if v is None else _str(v)


def cv_document_from_dict(data: Any) -> CVDocument:
    """
    Build a CVDocument from the JSON shape the editing UI stores.

    Missing fields degrade to empty values. Only container-type mismatches
    (a section that is not a list, a record that is not an object) are errors.
    """
    if not isinstance(data, dict):
        raise CVDocumentError("CV document must be a JSON object")

    personal_raw = data.get("personal") or {}
    if not isinstance(personal_raw, dict):
        raise CVDocumentError("'personal' must be an object")

    personal = CVPersonal(
        full_name=_pick(personal_raw, "fullName", "full_name"),
        job_title=_pick(personal_raw, "jobTitle", "job_title"),
        summary=_pick(personal_raw, "summary"),
        email=_pick(personal_raw, "email"),
        phone=_pick(personal_raw, "phone"),
        linkedin_url=_pick(personal_raw, "linkedinUrl", "linkedin", "linkedin_url"),
        website_url=_pick(personal_raw, "websiteUrl", "website", "website_url"),
        address=_pick(personal_raw, "address"),
    )

    experience = [
        CVExperience(
            title=_pick(e, "title"),
            company=_pick(e, "company"),
            location=_pick(e, "location"),
            start_date=_pick(e, "startDate", "start_date"),
            end_date=_pick(e, "endDate", "end_date"),
            current=_flag(e.get("current")),
            description=_pick(e, "description"),
            id=_optional_id(e),
        )
        for e in _records(data, "experience")
    ]

    education = [
        CVEducation(
            degree=_pick(e, "degree"),
            school=_pick(e, "school"),
            location=_pick(e, "location"),
            year=_pick(e, "year"),
            id=_optional_id(e),
        )
        for e in _records(data, "education")
    ]

    skills_raw = data.get("skills") or []
    if not isinstance(skills_raw, list):
        raise CVDocumentError("'skills' must be a list of strings")
    skills = [normalize_whitespace(_str(s)) for s in skills_raw if normalize_whitespace(_str(s))]

    certifications = [
        CVCertification(
            name=_pick(c, "name"),
            issuer=_pick(c, "issuer"),
            date=_pick(c, "date"),
            url=_pick(c, "url"),
            description=_pick(c, "description"),
            id=_optional_id(c),
        )
        for c in _records(data, "certifications")
    ]

    languages = [
        CVLanguage(
            language=_pick(lang, "language", "name"),
            proficiency=_pick(lang, "proficiency"),
            id=_optional_id(lang),
        )
        for lang in _records(data, "languages")
    ]

    return CVDocument(
        personal=personal,
        experience=experience,
        education=education,
        skills=skills,
        certifications=certifications,
        languages=languages,
    )
