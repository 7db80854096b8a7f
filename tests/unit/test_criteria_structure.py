from __future__ import annotations

from datetime import date

from atslens.models import CVDocument
from atslens.scoring.criteria import recent_experience_count, structure_score

TODAY = date(2026, 10, 19)
TEN_SKILLS = ["Python", "AWS", "Docker", "Kubernetes", "SQL", "Redis", "Terraform", "Go", "REST", "Agile"]


def test_single_experience_costs_ten(make_cv) -> None:
    c = structure_score(make_cv(), TODAY)
    assert c.score == 90
    assert c.weight == 15
    assert c.passed is True
    assert c.details == ("⚠️ Add more work experience entries for better profile",)


def test_complete_cv_gets_confirmation(make_cv, make_experience) -> None:
    desc = "Owned the payments service end to end."
    cv = make_cv(
        experience=[make_experience(desc, current=True), make_experience(desc, end_date="2023")],
        skills=TEN_SKILLS,
    )
    c = structure_score(cv, TODAY)
    assert c.score == 100
    assert c.details == ("✓ Excellent structure - all key sections complete",)


def test_empty_document_fails_and_clamps() -> None:
    c = structure_score(CVDocument(), TODAY)
    # 100 - 20 - 30 - 15 - 25 - 10 - 5 -> clamped
    assert c.score == 0
    assert c.passed is False
    assert "❌ No skills listed - this is critical for ATS matching" in c.details
    assert "❌ No work experience added" in c.details


def test_section_deductions(make_cv) -> None:
    cv = make_cv(
        personal={"summary": "Engineer.", "job_title": "", "linkedin_url": "", "website_url": ""},
        education=[],
        skills=["Python"],
    )
    c = structure_score(cv, TODAY)
    # 100 - 20 (summary) - 10 (one job) - 15 (education) - 10 (skills) - 10 (title) - 5 (links)
    assert c.score == 30
    assert "⚠️ Missing professional title/headline" in c.details
    assert "⚠️ Add LinkedIn profile or personal website for credibility" in c.details


def test_website_alone_satisfies_links(make_cv) -> None:
    cv = make_cv(personal={"linkedin_url": ""})
    assert structure_score(cv, TODAY).score == 90


def test_stale_experience_is_advisory_only(make_cv, make_experience) -> None:
    desc = "Owned the payments service end to end."
    cv = make_cv(
        experience=[make_experience(desc, end_date="2010"), make_experience(desc, end_date="2012")],
        skills=TEN_SKILLS,
    )
    c = structure_score(cv, TODAY)
    assert c.score == 100
    assert c.details == ("⚠️ Focus on recent experience (last 5 years is most relevant)",)


def test_recency_window_boundary(make_cv, make_experience) -> None:
    desc = "Owned the payments service end to end."
    cv = make_cv(experience=[
        make_experience(desc, end_date="2021"),
        make_experience(desc, end_date="2020"),
        make_experience(desc, end_date="May 2024"),
        make_experience(desc, end_date="", current=True),
    ])
    # 2021 is within five years of 2026; 2020 is not; "May 2024" has no leading year.
    assert recent_experience_count(cv, TODAY) == 2


def test_recency_depends_on_injected_date(make_cv, make_experience) -> None:
    cv = make_cv(experience=[make_experience("Owned the payments service end to end.", end_date="2019")])
    assert recent_experience_count(cv, date(2024, 1, 1)) == 1
    assert recent_experience_count(cv, date(2025, 1, 1)) == 0
