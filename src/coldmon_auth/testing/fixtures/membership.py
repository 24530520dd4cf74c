"""Testing fixtures – membership_lookup."""
from __future__ import annotations

import pytest

from coldmon_auth.kernel.security import InMemoryMembershipLookup


@pytest.fixture
def membership_lookup() -> InMemoryMembershipLookup:
    """Empty :class:`InMemoryMembershipLookup`; add memberships per test."""
    return InMemoryMembershipLookup()


__all__ = ["membership_lookup"]
