"""
Result values returned by scalar validation rules.

A rule never raises for a bad value. It returns either ``Accepted`` or
``Rejected`` and the caller decides how to signal the failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ScalarErrorKind(str, Enum):
    """Kinds of scalar validation failure. Values double as error codes."""

    WRONG_BASE_TYPE = "WRONG_BASE_TYPE"
    NOT_RECOGNIZED_IMAGE = "NOT_RECOGNIZED_IMAGE"
    UNSUPPORTED_LITERAL_KIND = "UNSUPPORTED_LITERAL_KIND"


@dataclass(frozen=True)
class ScalarError:
    kind: ScalarErrorKind
    message: str

    def __post_init__(self):
        if not isinstance(self.message, str) or not self.message.strip():
            raise ValueError("ScalarError requires a non-empty message")


@dataclass(frozen=True)
class Accepted:
    value: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    error: ScalarError

    @property
    def ok(self) -> bool:
        return False


ScalarResult = Union[Accepted, Rejected]


def reject(kind: ScalarErrorKind, message: str) -> Rejected:
    """Shorthand for ``Rejected(ScalarError(kind, message))``."""
    return Rejected(ScalarError(kind, message))
