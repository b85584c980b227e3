"""Environment-driven settings for the harness and its test suite."""
from __future__ import annotations

import os

POSTGRES_IMAGE: str = os.getenv("PGVERIFY_POSTGRES_IMAGE", "postgres:10.14")

POSTGRES_USER: str = os.getenv("PGVERIFY_POSTGRES_USER", "test")
POSTGRES_PASSWORD: str = os.getenv("PGVERIFY_POSTGRES_PASSWORD", "test")
POSTGRES_DB: str = os.getenv("PGVERIFY_POSTGRES_DB", "test")

# Integration tests need a Docker daemon; they are skipped unless this is set.
USE_TESTCONTAINERS: bool = os.getenv("PGVERIFY_USE_TESTCONTAINERS", "false").lower() == "true"
