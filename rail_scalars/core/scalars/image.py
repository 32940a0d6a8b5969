"""
Image custom scalar.

Accepts strings that reference an image file (a path, a bare filename or a
URL) and passes them through unchanged.
"""

from typing import Iterable, Optional

from .definition import ScalarDefinition, text_literal_parser
from .rules import IMAGE_EXTENSIONS, ImageReferenceRule

IMAGE_DESCRIPTION = (
    "A reference to an image file, such as a URL or path ending in a "
    "recognized image extension (jpeg, png, gif, ...)."
)


def build_image_scalar(
    name: str = "Image",
    *,
    extensions: Optional[Iterable[str]] = None,
    case_sensitive: Optional[bool] = None,
    description: str = IMAGE_DESCRIPTION,
    schema_name: Optional[str] = None,
) -> ScalarDefinition:
    """
    Build an image reference scalar definition.

    Args:
        name: GraphQL type name
        extensions: Recognized extensions, overriding configuration
        case_sensitive: Extension case policy, overriding configuration
        description: Type description exposed in the schema
        schema_name: Schema whose settings supply the defaults

    Returns:
        ScalarDefinition validating image references
    """
    from ...config_proxy import get_setting

    if extensions is None:
        extensions = get_setting(
            "custom_scalars.Image.extensions", IMAGE_EXTENSIONS, schema_name
        )
    if case_sensitive is None:
        case_sensitive = get_setting(
            "custom_scalars.Image.case_sensitive", False, schema_name
        )

    rule = ImageReferenceRule(extensions, case_sensitive=case_sensitive, type_name=name)
    return ScalarDefinition(
        name=name,
        description=description,
        serialize=rule,
        parse_value=rule,
        parse_literal=text_literal_parser(rule, name),
    )


# Built from library defaults only, so importing never touches Django settings.
_default_rule = ImageReferenceRule(IMAGE_EXTENSIONS)

IMAGE_SCALAR = ScalarDefinition(
    name="Image",
    description=IMAGE_DESCRIPTION,
    serialize=_default_rule,
    parse_value=_default_rule,
    parse_literal=text_literal_parser(_default_rule, "Image"),
)

Image = IMAGE_SCALAR.to_graphene()
