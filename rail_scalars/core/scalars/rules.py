"""
Validation rules used by custom scalars.

Rules are pure callables over a single candidate value and return a
``ScalarResult``. They hold no mutable state; reference tables are frozen at
construction and shared read-only across requests.
"""

from enum import Enum
from typing import Any, Iterable, Optional

from .exceptions import ScalarConfigurationError
from .results import Accepted, ScalarErrorKind, ScalarResult, reject

# Recognized image file extensions, lower case.
IMAGE_EXTENSIONS = frozenset(
    {
        "apng",
        "avif",
        "bmp",
        "gif",
        "ico",
        "jfif",
        "jpeg",
        "jpg",
        "pjp",
        "pjpeg",
        "png",
        "svg",
        "tif",
        "tiff",
        "webp",
    }
)


class ValueKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    STRUCTURED = "structured"


def classify_value(value: Any) -> ValueKind:
    """Classify a runtime value into the kinds an output encoding knows about."""
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    return ValueKind.STRUCTURED


def extract_extension(value: str) -> Optional[str]:
    """
    Return the substring after the final "." of the last path segment.

    Returns None when the last segment has no dot or ends with one.
    """
    basename = value.rsplit("/", 1)[-1]
    _, dot, extension = basename.rpartition(".")
    if not dot or not extension:
        return None
    return extension


class ImageReferenceRule:
    """
    Accept text that looks like a reference to an image file.

    The candidate is returned unchanged when the extension of its final path
    segment is in ``extensions``. Nothing is stripped first, so a URL with a
    query string after the extension is rejected.
    """

    def __init__(
        self,
        extensions: Iterable[str] = IMAGE_EXTENSIONS,
        case_sensitive: bool = False,
        type_name: str = "Image",
    ):
        if isinstance(extensions, (str, bytes)) or not isinstance(
            extensions, (list, tuple, set, frozenset)
        ):
            raise ScalarConfigurationError(
                f"{type_name} extensions must be a list, tuple or set, "
                f"got {type(extensions).__name__}",
                scalar_name=type_name,
            )
        self.case_sensitive = bool(case_sensitive)
        self.type_name = type_name
        normalized = frozenset(
            self._normalize(str(ext).lstrip(".")) for ext in extensions if ext
        )
        normalized = normalized - {""}
        if not normalized:
            raise ScalarConfigurationError(
                f"{type_name} requires at least one recognized extension",
                scalar_name=type_name,
            )
        self.extensions = normalized

    def _normalize(self, extension: str) -> str:
        return extension if self.case_sensitive else extension.lower()

    def __call__(self, value: Any) -> ScalarResult:
        kind = classify_value(value)
        if kind is not ValueKind.TEXT:
            return reject(
                ScalarErrorKind.WRONG_BASE_TYPE,
                f"{self.type_name} must be a string, got {kind.value} "
                f"({type(value).__name__})",
            )

        extension = extract_extension(value)
        if extension is None:
            return reject(
                ScalarErrorKind.NOT_RECOGNIZED_IMAGE,
                f"{self.type_name} must reference an image file, "
                f"'{value}' has no file extension",
            )

        if self._normalize(extension) not in self.extensions:
            return reject(
                ScalarErrorKind.NOT_RECOGNIZED_IMAGE,
                f"{self.type_name} must reference an image file, "
                f"'.{extension}' is not a recognized image extension",
            )

        return Accepted(value)

    def __repr__(self):
        return (
            f"ImageReferenceRule(extensions={sorted(self.extensions)!r}, "
            f"case_sensitive={self.case_sensitive!r})"
        )
