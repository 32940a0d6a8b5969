"""
Registry for custom GraphQL scalars.

Maps type names to ``ScalarDefinition`` instances. Entries are added at
import or app-ready time and only read afterwards.
"""

import logging
from typing import Iterable, Optional

from graphql import GraphQLScalarType, GraphQLSchema

from .definition import ScalarDefinition
from .exceptions import ScalarBindingError, ScalarConfigurationError
from .image import IMAGE_SCALAR

logger = logging.getLogger(__name__)

# Registry of custom scalars
CUSTOM_SCALARS: dict[str, ScalarDefinition] = {
    "Image": IMAGE_SCALAR,
}


def get_custom_scalar(scalar_name: str) -> Optional[ScalarDefinition]:
    """
    Get a custom scalar definition by name.

    Args:
        scalar_name: Name of the scalar

    Returns:
        ScalarDefinition or None if not found
    """
    return CUSTOM_SCALARS.get(scalar_name)


def register_custom_scalar(definition: ScalarDefinition, *, replace: bool = False) -> None:
    """
    Register a custom scalar under its own name.

    Args:
        definition: Scalar definition to register
        replace: Allow replacing an existing definition with the same name
    """
    if not isinstance(definition, ScalarDefinition):
        raise ScalarConfigurationError(
            f"Expected a ScalarDefinition, got {type(definition).__name__}"
        )

    existing = CUSTOM_SCALARS.get(definition.name)
    if existing is not None and existing is not definition:
        if not replace:
            raise ScalarConfigurationError(
                f"Scalar '{definition.name}' is already registered",
                scalar_name=definition.name,
            )
        logger.warning("Replacing registered scalar '%s'", definition.name)

    CUSTOM_SCALARS[definition.name] = definition
    logger.debug("Registered custom scalar '%s'", definition.name)


def unregister_custom_scalar(scalar_name: str) -> Optional[ScalarDefinition]:
    """Remove a scalar from the registry and return it."""
    return CUSTOM_SCALARS.pop(scalar_name, None)


def get_enabled_scalars(schema_name: Optional[str] = None) -> dict[str, ScalarDefinition]:
    """
    Get enabled custom scalars for a schema.

    Scalars are enabled unless ``custom_scalars.<Name>.enabled`` is False.

    Args:
        schema_name: Schema name (optional)

    Returns:
        Dictionary of enabled scalar definitions
    """
    from ...config_proxy import get_setting

    enabled_scalars = {}
    for scalar_name, definition in CUSTOM_SCALARS.items():
        if not get_setting(f"custom_scalars.{scalar_name}.enabled", True, schema_name):
            logger.debug("Scalar '%s' disabled for schema %s", scalar_name, schema_name)
            continue
        enabled_scalars[scalar_name] = definition

    return enabled_scalars


def bind_scalars(
    schema: GraphQLSchema, definitions: Iterable[ScalarDefinition]
) -> GraphQLSchema:
    """
    Install scalar definitions on an SDL-built schema.

    Each definition must match a type declared with ``scalar <Name>`` in the
    schema source. The schema's scalar types are updated in place.

    Args:
        schema: Schema built with ``graphql.build_schema``
        definitions: Definitions to bind, matched by name

    Returns:
        The same schema, for chaining
    """
    for definition in definitions:
        declared = schema.type_map.get(definition.name)
        if declared is None:
            raise ScalarBindingError(
                f"Scalar '{definition.name}' is not declared in the schema",
                scalar_name=definition.name,
            )
        if not isinstance(declared, GraphQLScalarType):
            raise ScalarBindingError(
                f"Type '{definition.name}' is declared as {type(declared).__name__}, "
                "not as a scalar",
                scalar_name=definition.name,
            )

        declared.serialize = definition.engine_serialize
        declared.parse_value = definition.engine_parse_value
        declared.parse_literal = definition.engine_parse_literal
        if definition.description and not declared.description:
            declared.description = definition.description
        logger.debug("Bound scalar '%s' onto schema", definition.name)

    return schema
