"""
Configuration management for rail-scalars.

This module provides a settings proxy that resolves a setting from
schema-specific, Django global, and library default settings.
"""

from typing import Any, Optional

from django.conf import settings
from django.core.signals import setting_changed

from .defaults import LIBRARY_DEFAULTS

# Runtime storage for schema settings overrides (avoids modifying Django settings)
_RUNTIME_SCHEMA_SETTINGS: dict[str, Any] = {}


class SettingsProxy:
    """
    Proxy for accessing rail-scalars settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Runtime schema-specific settings (via configure_schema_settings)
    2. Schema-specific settings (RAIL_SCALARS_SCHEMAS[schema_name])
    3. Global Django settings (RAIL_SCALARS)
    4. Library defaults (LIBRARY_DEFAULTS)
    """

    def __init__(self, schema_name: Optional[str] = None):
        self.schema_name = schema_name
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None, schema_name: Optional[str] = None) -> Any:
        """
        Get a setting value with hierarchical resolution and caching.

        Args:
            key: Dotted setting key, e.g. "custom_scalars.Image.extensions"
            default: Default value if setting is not found
            schema_name: Schema overriding the proxy's own schema name

        Returns:
            The setting value from the highest priority source
        """
        schema_name = schema_name or self.schema_name
        cache_key = f"{schema_name}:{key}" if schema_name else f"global:{key}"

        if cache_key in self._cache:
            return self._cache[cache_key]

        for lookup in (
            lambda: self._get_schema_setting(key, schema_name),
            lambda: self._get_django_setting(key),
            lambda: self._get_library_default(key),
        ):
            value = lookup()
            if value is not None:
                self._cache[cache_key] = value
                return value

        return default

    def _get_schema_setting(self, key: str, schema_name: Optional[str]) -> Any:
        if not schema_name:
            return None

        runtime_settings = _RUNTIME_SCHEMA_SETTINGS.get(schema_name)
        if runtime_settings:
            value = self._get_nested_value(runtime_settings, key)
            if value is not None:
                return value

        if not settings.configured:
            return None
        schema_settings = getattr(settings, "RAIL_SCALARS_SCHEMAS", {}) or {}
        return self._get_nested_value(schema_settings.get(schema_name, {}), key)

    def _get_django_setting(self, key: str) -> Any:
        if not settings.configured:
            return None
        return self._get_nested_value(getattr(settings, "RAIL_SCALARS", {}) or {}, key)

    def _get_library_default(self, key: str) -> Any:
        return self._get_nested_value(LIBRARY_DEFAULTS, key)

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current

    def clear_cache(self) -> None:
        """Clear the settings cache."""
        self._cache.clear()


# Global settings proxy instance
settings_proxy = SettingsProxy()


def get_setting(key: str, default: Any = None, schema_name: Optional[str] = None) -> Any:
    """
    Get a setting value using the global settings proxy.

    Args:
        key: Dotted setting key
        default: Default value if setting is not found
        schema_name: Schema name for schema-specific settings

    Returns:
        The setting value
    """
    return settings_proxy.get(key, default, schema_name)


def configure_schema_settings(schema_name: str, **overrides: Any) -> None:
    """
    Store runtime settings for a schema, taking priority over Django settings.

    Args:
        schema_name: Schema to configure
        **overrides: Settings sections, e.g. custom_scalars={...}
    """
    _RUNTIME_SCHEMA_SETTINGS.setdefault(schema_name, {}).update(overrides)
    settings_proxy.clear_cache()


def _clear_cache_on_setting_change(sender, setting=None, **kwargs):
    if setting in ("RAIL_SCALARS", "RAIL_SCALARS_SCHEMAS"):
        settings_proxy.clear_cache()


setting_changed.connect(_clear_cache_on_setting_change)
