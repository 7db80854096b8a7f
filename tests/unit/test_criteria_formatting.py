from __future__ import annotations

from atslens.scoring.criteria import date_format_issues, formatting_score


def test_well_formed_cv_scores_full_marks(make_cv) -> None:
    c = formatting_score(make_cv())
    assert c.score == 100
    assert c.weight == 20
    assert c.passed is True
    assert c.details == ("Excellent formatting - all fields properly structured",)


def test_missing_email_and_phone(make_cv) -> None:
    c = formatting_score(make_cv(personal={"email": "", "phone": ""}))
    assert c.score == 75
    assert c.passed is True
    assert "Missing or invalid email address" in c.details
    assert "Missing or incomplete phone number" in c.details


def test_invalid_email_short_phone_and_single_name(make_cv) -> None:
    c = formatting_score(make_cv(personal={"email": "john.example.com", "phone": "555-1234", "full_name": "John"}))
    assert c.score == 65
    assert c.passed is False
    assert "Full name should include first and last name" in c.details


def test_inconsistent_start_date_formats(make_cv, make_experience) -> None:
    desc = "Owned the payments service end to end."
    cv = make_cv(experience=[
        make_experience(desc, start_date="2020"),
        make_experience(desc, start_date="01/2018"),
    ])
    assert date_format_issues(cv) == ["Inconsistent date formats across experiences"]
    c = formatting_score(cv)
    assert c.score == 90
    assert "Date format inconsistencies: Inconsistent date formats across experiences" in c.details


def test_consistent_start_dates_ignore_end_dates(make_cv, make_experience) -> None:
    desc = "Owned the payments service end to end."
    cv = make_cv(experience=[
        make_experience(desc, start_date="March 2020", end_date="2021"),
        make_experience(desc, start_date="June 2017", end_date="05/2019"),
    ])
    assert date_format_issues(cv) == []


def test_each_thin_description_costs_ten_points(make_cv, make_experience) -> None:
    cv = make_cv(experience=[
        make_experience(""),
        make_experience("Wrote some code"),
        make_experience("Maintained the internal analytics dashboards."),
    ])
    c = formatting_score(cv)
    assert c.score == 80
    assert "2 experience(s) missing detailed descriptions" in c.details


def test_url_shape_checks(make_cv) -> None:
    c = formatting_score(make_cv(personal={"linkedin_url": "twitter.com/johndoe", "website_url": "johndoe.com"}))
    assert c.score == 90
    assert "LinkedIn URL format appears incorrect" in c.details
    assert "Website URL should include http:// or https://" in c.details


def test_absent_urls_are_not_penalized(make_cv) -> None:
    c = formatting_score(make_cv(personal={"linkedin_url": "", "website_url": ""}))
    assert c.score == 100


def test_score_is_clamped_at_zero(make_cv, make_experience) -> None:
    cv = make_cv(
        personal={"email": "", "phone": "", "full_name": ""},
        experience=[make_experience("", start_date="2020")] * 9 + [make_experience("", start_date="x")],
    )
    c = formatting_score(cv)
    assert c.score == 0
    assert c.passed is False
