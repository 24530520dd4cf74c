"""Shared pytest configuration."""

pytest_plugins = ["coldmon_auth.testing.fixtures"]
