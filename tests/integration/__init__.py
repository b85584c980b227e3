"""Container-backed checks of PostgreSQL features.

Every test starts its own PostgreSQL container through PostgresInstance,
optionally seeded by one of the packaged init scripts, and stops it on exit.

All tests require PGVERIFY_USE_TESTCONTAINERS=true and Docker socket access.
"""
