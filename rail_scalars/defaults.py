"""
Default configuration for the rail-scalars library.

Every setting the library consumes is listed here. Projects override values
through ``RAIL_SCALARS`` (global) or ``RAIL_SCALARS_SCHEMAS[<schema>]``
(per schema) in their Django settings.
"""

from __future__ import annotations

from typing import Any

from .core.scalars.rules import IMAGE_EXTENSIONS

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "rail-scalars"


LIBRARY_DEFAULTS: dict[str, Any] = {
    "custom_scalars": {
        "Image": {
            "enabled": True,
            "extensions": sorted(IMAGE_EXTENSIONS),
            # Extensions compare case-insensitively unless set
            "case_sensitive": False,
        },
    },
}
