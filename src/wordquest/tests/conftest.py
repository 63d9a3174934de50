"""Test configuration."""
import os
import random
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Set test environment before any imports
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["COACH_API_KEY"] = ""

# Load test environment variables
test_env_path = Path(__file__).parent.parent.parent.parent / ".env.test"
load_dotenv(test_env_path)

# Import after environment setup
from wordquest.config import ensure_directories


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment before each test."""
    ensure_directories()

    yield


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible draws."""
    return random.Random(1234)
