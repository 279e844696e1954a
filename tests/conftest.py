"""Pytest configuration and global fixtures for SkillRank tests."""

import json

import pytest

from skillrank.entities import Candidate


@pytest.fixture
def tier_candidates() -> list[Candidate]:
    """Three seniority tiers with devops/fe/be scores."""
    return [
        Candidate(name="EARLY", scores=[8, 13, 14]),
        Candidate(name="INT", scores=[12, 17, 21]),
        Candidate(name="EXPERT", scores=[17, 11, 24]),
    ]


@pytest.fixture
def company_records() -> list[dict]:
    return [
        {"id": 1, "name": "Brightdog", "devops": 8, "fe": 13, "be": 14},
        {"id": 2, "name": "Quatz", "devops": 12, "fe": 17, "be": 21},
        {"id": 3, "name": "Skyvu", "devops": 17, "fe": 11, "be": 24},
    ]


@pytest.fixture
def candidate_file(tmp_path, company_records):
    """A MOCK_DATA.json style file in a temp directory."""
    path = tmp_path / "MOCK_DATA.json"
    path.write_text(json.dumps(company_records))
    return path
