import json
from dataclasses import replace
from pathlib import Path

import pytest

from atslens.models import CVDocument, CVEducation, CVExperience, CVPersonal

# Path to tests/fixtures directory
FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """
    Exposes the fixtures directory in case a test needs direct file access.
    """
    return FIXTURES_DIR


@pytest.fixture
def load_text(fixtures_dir):
    """
    Fixture that returns a function: load_text("file.ext") -> str
    """
    def _load(name: str) -> str:
        return (fixtures_dir / name).read_text(encoding="utf-8")
    return _load


@pytest.fixture
def load_json(load_text):
    """
    Fixture that returns a function: load_json("file.json") -> dict
    Built on load_text so there's one source of truth for file IO.
    """
    def _load(name: str) -> dict:
        return json.loads(load_text(name))
    return _load


BASE_PERSONAL = CVPersonal(
    full_name="John Doe",
    job_title="Senior Software Engineer",
    summary="Experienced software engineer with 8+ years building scalable web applications.",
    email="john.doe@example.com",
    phone="+1 234 567 8900",
    linkedin_url="https://linkedin.com/in/johndoe",
    website_url="https://johndoe.com",
    address="San Francisco, CA",
)

BASE_EXPERIENCE = CVExperience(
    title="Senior Software Engineer",
    company="Tech Corp",
    location="San Francisco, CA",
    start_date="2020",
    end_date="2024",
    current=True,
    description=(
        "Led development of microservices architecture, improving system performance by 40%. "
        "Managed team of 5 engineers. Built React applications serving 1M+ users."
    ),
)

BASE_EDUCATION = CVEducation(
    degree="Bachelor of Computer Science",
    school="University of California",
    location="Berkeley, CA",
    year="2016",
)

BASE_SKILLS = ["JavaScript", "React", "Node.js", "TypeScript", "AWS", "Docker", "Python", "PostgreSQL"]


@pytest.fixture
def make_cv():
    """
    Fixture that returns a factory: make_cv(**overrides) -> CVDocument
    Starts from a realistic, well-formed CV. `personal` may be a dict of
    field overrides instead of a full CVPersonal.
    """
    def _make(**overrides) -> CVDocument:
        personal = overrides.pop("personal", None)
        if isinstance(personal, dict):
            personal = replace(BASE_PERSONAL, **personal)
        fields = {
            "personal": personal or BASE_PERSONAL,
            "experience": [BASE_EXPERIENCE],
            "education": [BASE_EDUCATION],
            "skills": list(BASE_SKILLS),
            "certifications": [],
            "languages": [],
        }
        fields.update(overrides)
        return CVDocument(**fields)
    return _make


@pytest.fixture
def make_experience():
    """
    Fixture that returns a factory: make_experience(description, **fields) -> CVExperience
    For tests that only care about the description.
    """
    def _make(description: str, **kwargs) -> CVExperience:
        base = {"title": "Engineer", "company": "Acme", "start_date": "2021", "end_date": "2023"}
        base.update(kwargs)
        return CVExperience(description=description, **base)
    return _make
