"""
Public test utilities for rail-scalars.
"""

from .harness import ScalarTestClient, build_schema, override_scalar_settings

__all__ = [
    "ScalarTestClient",
    "build_schema",
    "override_scalar_settings",
]
