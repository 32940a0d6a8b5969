"""
rail-scalars: validating custom scalar types for graphene and graphql-core.
"""

from .core.scalars import (
    IMAGE_EXTENSIONS,
    IMAGE_SCALAR,
    Accepted,
    Image,
    ImageReferenceRule,
    Rejected,
    ScalarBindingError,
    ScalarConfigurationError,
    ScalarDefinition,
    ScalarError,
    ScalarErrorKind,
    ScalarResult,
    ScalarValidationError,
    bind_scalars,
    build_image_scalar,
    get_custom_scalar,
    get_enabled_scalars,
    register_custom_scalar,
    reject,
    text_literal_parser,
    unregister_custom_scalar,
)
from .defaults import LIBRARY_VERSION as __version__

__all__ = [
    "IMAGE_EXTENSIONS",
    "IMAGE_SCALAR",
    "Accepted",
    "Image",
    "ImageReferenceRule",
    "Rejected",
    "ScalarBindingError",
    "ScalarConfigurationError",
    "ScalarDefinition",
    "ScalarError",
    "ScalarErrorKind",
    "ScalarResult",
    "ScalarValidationError",
    "bind_scalars",
    "build_image_scalar",
    "get_custom_scalar",
    "get_enabled_scalars",
    "register_custom_scalar",
    "reject",
    "text_literal_parser",
    "unregister_custom_scalar",
]
