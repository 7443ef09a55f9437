"""Pytest configuration and fixtures."""

import pytest

from pages_showcase.cache import SessionCache
from pages_showcase.config import ShowcaseConfig
from pages_showcase.source import RepositorySource


@pytest.fixture
def repos_payload():
    """A /users/{user}/repos response: one kept, one without Pages, one excluded."""
    return [
        {
            "name": "x",
            "has_pages": True,
            "updated_at": "2020-01-01",
            "description": "Project X",
            "stargazers_count": 3,
        },
        {
            "name": "y",
            "has_pages": False,
            "updated_at": "2021-01-01",
            "description": "Project Y",
        },
        {
            "name": "liamnewmarch.github.io",
            "has_pages": True,
            "updated_at": "2022-01-01",
            "description": None,
        },
    ]


@pytest.fixture
def session_cache():
    return SessionCache()


@pytest.fixture
def source(session_cache):
    return RepositorySource(ShowcaseConfig(), session_cache)
