"""
Custom GraphQL scalars package.

This package implements the scalar validation contract (serialize,
parse_value, parse_literal) and the custom scalar types built on it.
"""

from .definition import BUILTIN_SCALAR_NAMES, ScalarDefinition, text_literal_parser
from .exceptions import (
    ScalarBindingError,
    ScalarConfigurationError,
    ScalarValidationError,
)
from .image import IMAGE_SCALAR, Image, build_image_scalar
from .registry import (
    CUSTOM_SCALARS,
    bind_scalars,
    get_custom_scalar,
    get_enabled_scalars,
    register_custom_scalar,
    unregister_custom_scalar,
)
from .results import Accepted, Rejected, ScalarError, ScalarErrorKind, ScalarResult, reject
from .rules import (
    IMAGE_EXTENSIONS,
    ImageReferenceRule,
    ValueKind,
    classify_value,
    extract_extension,
)

__all__ = [
    # Scalars
    "Image",
    "IMAGE_SCALAR",
    "build_image_scalar",
    # Contract
    "ScalarDefinition",
    "BUILTIN_SCALAR_NAMES",
    "text_literal_parser",
    "Accepted",
    "Rejected",
    "ScalarError",
    "ScalarErrorKind",
    "ScalarResult",
    "reject",
    # Rules
    "IMAGE_EXTENSIONS",
    "ImageReferenceRule",
    "ValueKind",
    "classify_value",
    "extract_extension",
    # Errors
    "ScalarConfigurationError",
    "ScalarBindingError",
    "ScalarValidationError",
    # Registry functions
    "CUSTOM_SCALARS",
    "get_custom_scalar",
    "register_custom_scalar",
    "unregister_custom_scalar",
    "get_enabled_scalars",
    "bind_scalars",
]
