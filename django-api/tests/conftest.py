"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from theater.domain import Invoice, Performance, Play
from theater.stores import InMemoryPlayCatalog


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def plays() -> dict[str, Play]:
    return {
        "hamlet": Play(name="Hamlet", category="tragedy"),
        "as-like": Play(name="As You Like It", category="comedy"),
        "othello": Play(name="Othello", category="tragedy"),
    }


@pytest.fixture
def catalog(plays: dict[str, Play]) -> InMemoryPlayCatalog:
    return InMemoryPlayCatalog(plays)


@pytest.fixture
def invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )
