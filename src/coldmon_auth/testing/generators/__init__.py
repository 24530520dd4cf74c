"""Testing generators – Hypothesis strategies."""
from coldmon_auth.testing.generators.strategies import (
    KNOWN_ACTIONS,
    action_strategy,
    principal_strategy,
    role_strategy,
    subject_instance_strategy,
    subject_kind_strategy,
    subject_strategy,
    tenant_id_strategy,
)

__all__ = [
    "KNOWN_ACTIONS",
    "action_strategy",
    "principal_strategy",
    "role_strategy",
    "subject_instance_strategy",
    "subject_kind_strategy",
    "subject_strategy",
    "tenant_id_strategy",
]
