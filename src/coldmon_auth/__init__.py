"""
coldmon_auth – attribute-based access control for the cold-monitor platform.

Import path convention::

    from coldmon_auth.kernel.errors import ForbiddenError
    from coldmon_auth.kernel.security import build_ability, validate_subject
    from coldmon_auth.config import load_settings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
