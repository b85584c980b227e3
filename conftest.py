"""Root conftest: markers, the Docker skip rule and instance settings.

Integration tests start one PostgreSQL container per test through
pgverify.PostgresInstance; nothing is shared between tests.
"""
from __future__ import annotations

import pytest

from pgverify import config as settings


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers to suppress PytestUnknownMarkWarning."""
    config.addinivalue_line("markers", "integration: Requires a Docker daemon for Testcontainers")
    config.addinivalue_line("markers", "extension: Exercises a PostgreSQL extension type")


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Skip container-backed tests unless Testcontainers is enabled."""
    skip_no_containers = pytest.mark.skip(
        reason="Testcontainers disabled, set PGVERIFY_USE_TESTCONTAINERS=true"
    )
    if settings.USE_TESTCONTAINERS:
        return
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_no_containers)


# ---------------------------------------------------------------------------
# Instance settings
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def postgres_image() -> str:
    """Image every integration test starts its own container from."""
    return settings.POSTGRES_IMAGE
