"""Harness tests that run without Docker, using fake containers and connections."""
