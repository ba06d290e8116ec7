"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from talent_matcher.core import JobMatcher


@pytest.fixture
def matcher() -> JobMatcher:
    """Matcher with default weights and tables."""
    return JobMatcher()


@pytest.fixture
def perfect_candidate() -> Dict[str, Any]:
    """Candidate that fits perfect_job on every factor."""
    return {
        "id": "cand-1",
        "name": "Anna Schmidt",
        "skills": ["Python", "Django"],
        "location": "Berlin",
        "experience_years": 5,
        "education": "Master of Science",
        "preferred_work_model": "Vollzeit",
    }


@pytest.fixture
def perfect_job() -> Dict[str, Any]:
    """Job posting matching perfect_candidate."""
    return {
        "id": "job-1",
        "title": "Backend Developer",
        "required_skills": "Python, Django",
        "location": "Berlin",
        "experience_years": 5,
        "education_required": "Master",
        "work_model": "full-time",
    }


@pytest.fixture
def weak_candidate() -> Dict[str, Any]:
    """Candidate sharing little with perfect_job."""
    return {
        "id": "cand-2",
        "name": "Tom Weber",
        "skills": '[{"name": "Photoshop", "level": 4}]',
        "location": "München",
        "experience": [{"years": 1}],
        "education": "Ausbildung",
        "preferred_work_model": "Teilzeit",
    }


@pytest.fixture
def requirement() -> Dict[str, Any]:
    """Customer requirement allowing remote work."""
    return {
        "id": "req-1",
        "title": "Frontend Support",
        "skills": "React; TypeScript",
        "location": "Hamburg",
        "experience": 3,
        "education": "Bachelor",
        "isRemote": True,
        "work_model": "Projekt",
        "description": "Remote project for an e-commerce platform",
    }


@pytest.fixture
def tables_file(tmp_path) -> Path:
    """Knowledge table overrides on disk."""
    path = tmp_path / "tables.json"
    path.write_text(json.dumps({
        "synonyms": [["golang", "go"]],
        "remote_keywords": ["remote", "anywhere"],
    }))
    return path


@pytest.fixture
def records_dir(tmp_path, perfect_candidate, weak_candidate, perfect_job) -> Path:
    """Entity and position files as the CLI reads them."""
    (tmp_path / "candidate.json").write_text(json.dumps(perfect_candidate))
    (tmp_path / "candidates.json").write_text(json.dumps([weak_candidate, perfect_candidate]))
    (tmp_path / "job.json").write_text(json.dumps(perfect_job))
    return tmp_path
