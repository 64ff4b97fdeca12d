"""
Shared pytest fixtures for Rewards Report tests.

This module provides common fixtures used across test files:
- Mock API responses
- Sample records
- Environment mocks
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src to path for package imports
PROJECT_ROOT = Path(__file__).parent.parent
SRC_ROOT = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_ROOT))

from rewards_report.records import Employee, Nomination, Reward, RewardCategory


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as requiring a live rewards API"
    )


# =============================================================================
# MOCK HELPERS
# =============================================================================

def make_response(status_code: int = 200, body=None):
    """Build a MagicMock shaped like a requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.text = "" if body is None else str(body)
    return response


@pytest.fixture
def mock_response():
    """Factory fixture for fake requests responses."""
    return make_response


@pytest.fixture
def api_base_url(monkeypatch):
    """Point the client at a fake API root."""
    from rewards_report import config
    monkeypatch.setattr(config, "API_BASE_URL", "https://rewards.test")
    return "https://rewards.test"


# =============================================================================
# API PAYLOAD FIXTURES
# =============================================================================

@pytest.fixture
def nomination_payloads():
    """Nominations as returned by GET /nominations/."""
    return [
        {"nomination_id": 1, "nominee_id": 10, "nominator_id": 20, "reward_id": 1,
         "nomination_type": "peer", "nomination_date": "2024-01-10", "approval_status": "approved"},
        {"nomination_id": 2, "nominee_id": 11, "nominator_id": 20, "reward_id": 1,
         "nomination_type": "peer", "nomination_date": "2024-01-15", "approval_status": "pending"},
        {"nomination_id": 3, "nominee_id": 10, "nominator_id": 21, "reward_id": 2,
         "nomination_type": "manager", "nomination_date": "2024-02-01", "approval_status": "approved"},
    ]


@pytest.fixture
def reward_payloads():
    return [
        {"reward_id": 1, "reward_name": "Mug", "category_id": 100, "description": "Coffee mug"},
        {"reward_id": 2, "reward_name": "Mug", "category_id": 200, "image_url": None},
    ]


@pytest.fixture
def category_payloads():
    return [
        {"category_id": 100, "category_name": "A"},
        {"category_id": 200, "category_name": "B"},
    ]


@pytest.fixture
def employee_payloads():
    return [
        {"employee_id": 10, "first_name": "Ada", "last_name": "Lovelace",
         "email": "ada@example.com", "department_id": 1},
        {"employee_id": 11, "first_name": "Alan", "last_name": "Turing",
         "email": "alan@example.com", "department_id": 2},
    ]


# =============================================================================
# RECORD FIXTURES
# =============================================================================

@pytest.fixture
def sample_nominations(nomination_payloads):
    return [Nomination.from_dict(p) for p in nomination_payloads]


@pytest.fixture
def sample_rewards(reward_payloads):
    return [Reward.from_dict(p) for p in reward_payloads]


@pytest.fixture
def sample_categories(category_payloads):
    return [RewardCategory.from_dict(p) for p in category_payloads]


@pytest.fixture
def sample_employees(employee_payloads):
    return [Employee.from_dict(p) for p in employee_payloads]


def _nomination(nomination_id, reward_id, nomination_date="2024-01-10", status=None, nominee_id=1):
    return Nomination(
        nomination_id=nomination_id,
        nominee_id=nominee_id,
        nominator_id=99,
        reward_id=reward_id,
        nomination_date=nomination_date,
        approval_status=status,
    )


@pytest.fixture
def make_nomination():
    """Factory fixture: make_nomination(id, reward_id, date, status, nominee_id)."""
    return _nomination
