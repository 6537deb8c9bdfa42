"""
Shared test fixtures and utilities for the jsonchanges test suite.
"""

import pytest


@pytest.fixture
def users_tree():
    """Mixed dict/list tree used across resolver and applicator tests.

    Usage:
        def test_something(users_tree):
            assert users_tree["users"][0]["name"] == "Alice"
    """
    return {
        "users": [
            {"id": 1, "name": "Alice", "skills": ["JavaScript", "TypeScript"]},
            {"id": 2, "name": "Bob", "skills": ["Python", "Go"]},
        ],
        "active": True,
        "meta": {"10": "ten", "count": 2},
    }
