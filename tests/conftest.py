"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.main import app

FIXTURES = Path(__file__).parent / "fixtures" / "fountain"


def read_fixture(name: str) -> str:
    # newline="" keeps CR/CRLF line endings intact for normalizer tests
    with open(FIXTURES / name, encoding="utf-8", newline="") as handle:
        return handle.read()


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def kitchen_scene() -> str:
    """Smallest complete scene: heading, blank, cue, dialogue."""
    return "INT. KITCHEN - DAY\n\nBOB\nHello.\n"


@pytest.fixture
def brick_and_steel() -> str:
    """Two-scene screenplay with a title page."""
    return read_fixture("brick_and_steel.fountain")


@pytest.fixture
def crlf_blank_runs() -> str:
    """Two scenes with CRLF endings, trailing spaces and long blank runs."""
    return read_fixture("crlf_blank_runs.fountain")
