"""
tests/unit/test_config.py

Environment-driven CLI defaults and guardrails.
"""
from atslens import config


def _clear(monkeypatch):
    for name in ("ATSLENS_CV_PATH", "ATSLENS_OUTPUT", "ATSLENS_JOB_MAX_CHARS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_env_is_empty(monkeypatch):
    _clear(monkeypatch)
    cfg = config.load_report_config()
    assert cfg.cv_path is None
    assert cfg.output == "human"
    assert cfg.job_max_chars == config.JOB_MAX_CHARS_DEFAULT


def test_values_read_from_env(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("ATSLENS_CV_PATH", " /tmp/cv.json ")
    monkeypatch.setenv("ATSLENS_OUTPUT", "JSON")
    monkeypatch.setenv("ATSLENS_JOB_MAX_CHARS", "500")
    cfg = config.load_report_config()
    assert cfg.cv_path == "/tmp/cv.json"
    assert cfg.output == "json"
    assert cfg.job_max_chars == 500


def test_invalid_values_fall_back_to_defaults(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("ATSLENS_OUTPUT", "yaml")
    monkeypatch.setenv("ATSLENS_JOB_MAX_CHARS", "lots")
    cfg = config.load_report_config()
    assert cfg.output == "human"
    assert cfg.job_max_chars == config.JOB_MAX_CHARS_DEFAULT


def test_blank_int_falls_back(monkeypatch):
    monkeypatch.setenv("ATSLENS_JOB_MAX_CHARS", "  ")
    assert config._env_int("ATSLENS_JOB_MAX_CHARS", 7) == 7
