"""Testing fixtures – pytest fixtures for the access-control engine.

Enable them in a service's ``conftest.py``::

    pytest_plugins = ["coldmon_auth.testing.fixtures"]
"""
from coldmon_auth.testing.fixtures.membership import membership_lookup
from coldmon_auth.testing.fixtures.principal import principal_factory, security_context

__all__ = ["membership_lookup", "principal_factory", "security_context"]
