"""Pytest configuration and shared fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from procsheet.api.routes import router


@pytest.fixture
def sample_grid() -> list:
    """A grid as exported: banner row, header row, one data row."""
    return [
        ["Ignore", "Me"],
        [
            "Número Processo",
            "Other",
            "Localizadores",
            "Inclusão no Localizador",
            "Último Evento",
        ],
        [
            "1234567890",
            "Data",
            "Loc A - TESTE (G)",
            "01/01/2023 10:00",
            "02/02/2023 11:00",
        ],
    ]


@pytest.fixture
def full_header_row(sample_grid) -> list:
    return sample_grid[1]


@pytest.fixture
def test_client() -> TestClient:
    """Create a test client for the API router without app-level setup."""
    app = FastAPI()
    app.include_router(router, prefix="/api")
    return TestClient(app)
