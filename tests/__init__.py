"""pgverify test suite."""
