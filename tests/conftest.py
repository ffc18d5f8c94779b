"""Shared fixtures for fileref tests."""

import pytest


class FakeFileSystem:
    """In-memory filesystem capability that records search calls."""

    def __init__(self, files=(), search_results=None, error=None):
        self.files = set(files)
        self.search_results = search_results or {}
        self.error = error
        self.searches = []
        self.exists_calls = []

    def exists(self, path):
        self.exists_calls.append(path)
        return path in self.files

    def search(self, roots, suffix, exclude_dirs=None, max_results=20):
        self.searches.append(suffix)
        if self.error is not None:
            raise self.error
        return list(self.search_results.get(suffix, []))[:max_results]


@pytest.fixture
def fake_fs():
    """Factory for FakeFileSystem instances."""
    return FakeFileSystem
