"""Fixtures for Docker-free harness tests."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from tests.unit.fakes import FakeContainer


@pytest.fixture
def containers() -> list[FakeContainer]:
    """Every FakeContainer built by ``container_factory`` in this test."""
    return []


@pytest.fixture
def container_factory(containers: list[FakeContainer]) -> Callable[..., FakeContainer]:
    """Drop-in for PostgresContainer that never touches Docker."""

    def factory(image: str, **kwargs: Any) -> FakeContainer:
        container = FakeContainer(image, **kwargs)
        containers.append(container)
        return container

    return factory
