"""
Pytest fixtures for plan-api tests.
"""

import random
import sys
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from api.deps import get_current_user, get_exercise_catalog, get_plan_repo, get_rng
from backend.main import create_app
from backend.settings import Settings
from infrastructure.catalog import load_default_catalog
from models.exercise import ExperienceLevel
from models.plan import TrainingStyle
from models.profile import AthleteProfile
from tests.fakes import FakeExerciseCatalog, FakePlanRepository


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "test-athlete-123"
OTHER_USER_ID = "other-athlete-456"

TEST_SEED = 1234


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test athlete."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("PLAN_RANDOM_SEED", raising=False)
    monkeypatch.delenv("SENTRY_DSN", raising=False)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def fake_plan_repo() -> FakePlanRepository:
    """Empty fake plan store."""
    return FakePlanRepository()


@pytest.fixture
def client(app, fake_plan_repo) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient over the shipped catalog.

    Plans go to a fresh fake store and selection uses a fixed seed.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_plan_repo] = lambda: fake_plan_repo
    app.dependency_overrides[get_rng] = lambda: random.Random(TEST_SEED)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(app, fake_plan_repo) -> Generator[TestClient, None, None]:
    """TestClient that goes through the real auth dependency."""
    app.dependency_overrides[get_plan_repo] = lambda: fake_plan_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def fake_catalog_client(app, fake_plan_repo, fake_catalog) -> Generator[TestClient, None, None]:
    """TestClient backed by the small fake catalog instead of the shipped one."""
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_plan_repo] = lambda: fake_plan_repo
    app.dependency_overrides[get_exercise_catalog] = lambda: fake_catalog
    app.dependency_overrides[get_rng] = lambda: random.Random(TEST_SEED)
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Catalog Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def default_catalog():
    """The shipped exercise catalog."""
    return load_default_catalog()


@pytest.fixture
def fake_catalog() -> FakeExerciseCatalog:
    """Fake catalog pre-seeded with a small gym."""
    catalog = FakeExerciseCatalog()
    catalog.seed_default_exercises()
    return catalog


@pytest.fixture
def rng() -> random.Random:
    """Seeded randomness source."""
    return random.Random(TEST_SEED)


# ---------------------------------------------------------------------------
# Domain Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hypertrophy_profile() -> AthleteProfile:
    """Intermediate hypertrophy athlete training three times a week."""
    return AthleteProfile(
        experience=ExperienceLevel.INTERMEDIATE,
        training_style=TrainingStyle.HYPERTROPHY,
        training_days=3,
    )


@pytest.fixture
def sample_generation_request() -> Dict[str, Any]:
    """Valid payload for plan generation."""
    return {
        "experience": "intermediate",
        "training_style": "hypertrophy",
        "training_days": 3,
    }
