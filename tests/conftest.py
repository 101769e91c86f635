"""Shared test fixtures for the unit converter."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from unitconv.conversions import ConversionRegistry
from unitconv.dependencies import reset_dependencies
from unitconv.main import app


@pytest.fixture
def registry() -> ConversionRegistry:
    """A fresh registry, independent of the cached app singleton."""
    return ConversionRegistry()


@pytest.fixture
def client():
    reset_dependencies()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
