"""
Django app configuration for the rail-scalars library.

Validates the configured scalar settings once at startup so a bad extension
list fails early instead of on the first request.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for rail-scalars."""

    name = "rail_scalars"
    verbose_name = "Rail GraphQL Scalars"
    label = "rail_scalars"

    def ready(self):
        """Initialize the application after Django has loaded."""
        try:
            self._validate_configuration()
        except Exception as e:
            logger.error(f"Invalid rail-scalars configuration: {e}")
            if self._is_debug_mode():
                raise

    def _validate_configuration(self):
        """Build every enabled scalar from settings so errors surface now."""
        from .core.scalars import build_image_scalar, get_enabled_scalars

        schema_names = [None] + list(getattr(settings, "RAIL_SCALARS_SCHEMAS", {}) or {})
        for schema_name in schema_names:
            enabled = get_enabled_scalars(schema_name)
            if "Image" in enabled:
                build_image_scalar(schema_name=schema_name)
            logger.info(
                "Enabled scalars for schema %s: %s",
                schema_name or "default",
                ", ".join(sorted(enabled)) or "none",
            )

    def _is_debug_mode(self) -> bool:
        return bool(getattr(settings, "DEBUG", False))
