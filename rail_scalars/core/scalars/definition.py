"""
ScalarDefinition: an immutable description of a custom scalar type.

A definition binds a GraphQL type name to the three transformation functions
an engine calls (``serialize``, ``parse_value``, ``parse_literal``). Each
function returns a ``ScalarResult``; the engine adapters in this module turn a
``Rejected`` result into a raised ``ScalarValidationError``.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from graphene import Scalar
from graphql.language import ast

from .ast_utils import (
    _STRING_VALUE_TYPES,
    _UNDEFINED,
    is_variable,
    literal_kind,
    resolve_variable,
)
from .exceptions import ScalarConfigurationError, ScalarValidationError
from .results import Rejected, ScalarErrorKind, ScalarResult, reject

_NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")
BUILTIN_SCALAR_NAMES = frozenset({"String", "Int", "Float", "Boolean", "ID"})

ValueFunction = Callable[[Any], ScalarResult]
LiteralFunction = Callable[[ast.ValueNode, Optional[dict[str, Any]]], ScalarResult]


@dataclass(frozen=True)
class ScalarDefinition:
    """
    Custom scalar type with its output and input transformations.

    ``parse_value`` and ``parse_literal`` are either both set or both omitted.
    A definition without them is output-only.
    """

    name: str
    serialize: ValueFunction
    description: str = ""
    parse_value: Optional[ValueFunction] = None
    parse_literal: Optional[LiteralFunction] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not _NAME_PATTERN.match(self.name):
            raise ScalarConfigurationError(
                f"Invalid scalar name: {self.name!r}", scalar_name=self.name
            )
        if self.name in BUILTIN_SCALAR_NAMES or self.name.startswith("__"):
            raise ScalarConfigurationError(
                f"Scalar name '{self.name}' is reserved", scalar_name=self.name
            )
        if not callable(self.serialize):
            raise ScalarConfigurationError(
                f"Scalar '{self.name}' requires a serialize function",
                scalar_name=self.name,
            )
        if (self.parse_value is None) != (self.parse_literal is None):
            raise ScalarConfigurationError(
                f"Scalar '{self.name}' must define parse_value and parse_literal together",
                scalar_name=self.name,
            )
        for func in (self.parse_value, self.parse_literal):
            if func is not None and not callable(func):
                raise ScalarConfigurationError(
                    f"Scalar '{self.name}' parse functions must be callable",
                    scalar_name=self.name,
                )

    @property
    def accepts_input(self) -> bool:
        return self.parse_value is not None

    # Engine-facing boundary

    def _unwrap(self, result: ScalarResult) -> Any:
        if isinstance(result, Rejected):
            raise ScalarValidationError(
                result.error.message, kind=result.error.kind, scalar_name=self.name
            )
        return result.value

    def _output_only(self) -> ScalarValidationError:
        return ScalarValidationError(
            f"{self.name} is an output-only scalar and cannot be used as input",
            scalar_name=self.name,
        )

    def engine_serialize(self, value: Any) -> Any:
        return self._unwrap(self.serialize(value))

    def engine_parse_value(self, value: Any) -> Any:
        if not self.accepts_input:
            raise self._output_only()
        return self._unwrap(self.parse_value(value))

    def engine_parse_literal(
        self, node: ast.ValueNode, variables: Optional[dict[str, Any]] = None
    ) -> Any:
        if not self.accepts_input:
            raise self._output_only()
        return self._unwrap(self.parse_literal(node, variables))

    def to_graphene(self) -> type:
        """
        Build a graphene ``Scalar`` subclass named after this definition.

        Call once per schema build; graphene rejects two different classes
        with the same type name in one schema.
        """
        meta = type("Meta", (), {"name": self.name, "description": self.description or None})
        return type(
            self.name,
            (Scalar,),
            {
                "Meta": meta,
                "__doc__": self.description or None,
                "definition": self,
                "serialize": staticmethod(self.engine_serialize),
                "parse_value": staticmethod(self.engine_parse_value),
                "parse_literal": staticmethod(self.engine_parse_literal),
            },
        )


def text_literal_parser(parse_value: ValueFunction, type_name: str) -> LiteralFunction:
    """
    Build a ``parse_literal`` function for a text-based scalar.

    Variable references are resolved against the supplied bindings and then
    handed to ``parse_value``. String literals are validated with
    ``parse_value``. Every other literal kind is rejected without coercion.
    """

    def parse_literal(node: ast.ValueNode, variables: Optional[dict[str, Any]] = None) -> ScalarResult:
        if is_variable(node):
            value = resolve_variable(node, variables)
            if value is _UNDEFINED:
                return reject(
                    ScalarErrorKind.UNSUPPORTED_LITERAL_KIND,
                    f"Variable '${node.name.value}' is not bound, cannot parse as {type_name}",
                )
            return parse_value(value)
        if isinstance(node, _STRING_VALUE_TYPES):
            return parse_value(node.value)
        return reject(
            ScalarErrorKind.UNSUPPORTED_LITERAL_KIND,
            f"Cannot parse {literal_kind(node)} literal as {type_name}",
        )

    return parse_literal
