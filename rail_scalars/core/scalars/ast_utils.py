"""
AST helpers for parsing scalar literals.

Literal values in query source arrive as graphql-core ``ValueNode`` instances.
The node classes form a closed set; ``literal_kind`` names the member a node
belongs to so scalars can reject kinds they cannot represent.
"""

from typing import Any, Optional

from graphql import Undefined as _UNDEFINED
from graphql.language import ast

_STRING_VALUE_TYPES = (ast.StringValueNode,)
_INT_VALUE_TYPES = (ast.IntValueNode,)
_FLOAT_VALUE_TYPES = (ast.FloatValueNode,)
_BOOLEAN_VALUE_TYPES = (ast.BooleanValueNode,)
_NULL_VALUE_TYPES = (ast.NullValueNode,)
_ENUM_VALUE_TYPES = (ast.EnumValueNode,)
_LIST_VALUE_TYPES = (ast.ListValueNode,)
_OBJECT_VALUE_TYPES = (ast.ObjectValueNode,)
_VARIABLE_TYPES = (ast.VariableNode,)

_LITERAL_KINDS = (
    (_STRING_VALUE_TYPES, "string"),
    (_INT_VALUE_TYPES, "int"),
    (_FLOAT_VALUE_TYPES, "float"),
    (_BOOLEAN_VALUE_TYPES, "boolean"),
    (_NULL_VALUE_TYPES, "null"),
    (_ENUM_VALUE_TYPES, "enum"),
    (_LIST_VALUE_TYPES, "list"),
    (_OBJECT_VALUE_TYPES, "object"),
    (_VARIABLE_TYPES, "variable"),
)


def literal_kind(node: Any) -> str:
    """Return the literal kind of an AST value node ("string", "int", ...)."""
    for node_types, kind in _LITERAL_KINDS:
        if isinstance(node, node_types):
            return kind
    return type(node).__name__


def is_variable(node: Any) -> bool:
    return isinstance(node, _VARIABLE_TYPES)


def resolve_variable(node: ast.VariableNode, variables: Optional[dict[str, Any]]) -> Any:
    """
    Look up the value bound to a variable reference.

    Returns ``Undefined`` when no bindings were supplied or the variable is
    not bound.
    """
    if not variables:
        return _UNDEFINED
    return variables.get(node.name.value, _UNDEFINED)
