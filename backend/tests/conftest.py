"""Shared test fixtures and client stubs."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from models.schemas.user_profile import UserProfile
from services.catalog import load_catalog


@pytest.fixture()
def catalog():
    return load_catalog()


@pytest.fixture()
def data_profile() -> UserProfile:
    return UserProfile(
        name="Asha",
        age=21,
        education_field="BSc Computer Science",
        study_year=3,
        skills=["python", "sql", "statistics"],
        skill_expertise={"python": "advanced", "sql": "intermediate"},
        interests="I love machine learning and data analysis",
        career_goals="Work on applied ML products",
        experience_level="student",
        availability_hours_per_week=12,
    )


@pytest.fixture()
def empty_profile() -> UserProfile:
    return UserProfile()


def _make_gemini(text: str | None = None, error: Exception | None = None) -> MagicMock:
    """Gemini client stub whose async generate_content returns ``text`` or raises ``error``."""
    client = MagicMock()
    if error is not None:
        client.aio.models.generate_content = AsyncMock(side_effect=error)
    else:
        response = MagicMock()
        response.text = text
        client.aio.models.generate_content = AsyncMock(return_value=response)
    return client


@pytest.fixture()
def make_gemini():
    return _make_gemini


def _make_execute(data=None) -> MagicMock:
    """Fake supabase ``.execute()`` result."""
    result = MagicMock()
    result.data = data if data is not None else []
    return result


@pytest.fixture()
def make_execute():
    return _make_execute
