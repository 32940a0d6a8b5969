"""
Exceptions for custom scalar definitions and their validation signals.

Configuration problems are raised at schema-build time. Rejected values are
only raised at the engine boundary, as ``ScalarValidationError``.
"""

from typing import Optional

from graphql.error import GraphQLError


class ScalarConfigurationError(Exception):
    """Raised when a scalar definition or its settings are invalid."""

    def __init__(self, message: str, scalar_name: Optional[str] = None):
        self.scalar_name = scalar_name
        super().__init__(message)


class ScalarBindingError(ScalarConfigurationError):
    """Raised when a definition cannot be bound onto a schema type."""


class ScalarValidationError(GraphQLError):
    """
    Engine-facing signal for a value rejected by a scalar.

    The engine attaches path and location when it collects the error; the
    kind and scalar name travel in ``extensions``.
    """

    def __init__(self, message: str, kind=None, scalar_name: Optional[str] = None):
        self.kind = kind
        self.scalar_name = scalar_name
        extensions = {}
        if kind is not None:
            extensions["code"] = getattr(kind, "value", kind)
        if scalar_name:
            extensions["scalar"] = scalar_name
        super().__init__(message, extensions=extensions or None)
