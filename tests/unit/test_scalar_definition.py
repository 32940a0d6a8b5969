"""
Unit tests for ScalarDefinition and its engine-facing adapters.
"""

import dataclasses

import graphene
import pytest
from graphql import GraphQLError, parse_value

from rail_scalars.core.scalars import (
    IMAGE_SCALAR,
    Accepted,
    Image,
    ScalarConfigurationError,
    ScalarDefinition,
    ScalarError,
    ScalarErrorKind,
    ScalarValidationError,
    reject,
    text_literal_parser,
)

pytestmark = pytest.mark.unit


def _accept(value):
    return Accepted(value)


class TestScalarError:
    def test_requires_message(self):
        with pytest.raises(ValueError):
            ScalarError(ScalarErrorKind.WRONG_BASE_TYPE, "")
        with pytest.raises(ValueError):
            ScalarError(ScalarErrorKind.WRONG_BASE_TYPE, "   ")

    def test_kind_values_are_codes(self):
        assert ScalarErrorKind.NOT_RECOGNIZED_IMAGE.value == "NOT_RECOGNIZED_IMAGE"


class TestScalarDefinitionValidation:
    def test_output_only_definition(self):
        definition = ScalarDefinition(name="Thumbnail", serialize=_accept)
        assert not definition.accepts_input

    @pytest.mark.parametrize("name", ["", "9lives", "has space", None])
    def test_invalid_names(self, name):
        with pytest.raises(ScalarConfigurationError):
            ScalarDefinition(name=name, serialize=_accept)

    @pytest.mark.parametrize("name", ["String", "Int", "Float", "Boolean", "ID", "__Type"])
    def test_reserved_names(self, name):
        with pytest.raises(ScalarConfigurationError, match="reserved"):
            ScalarDefinition(name=name, serialize=_accept)

    def test_serialize_is_required(self):
        with pytest.raises(ScalarConfigurationError):
            ScalarDefinition(name="Thumbnail", serialize=None)

    def test_parse_functions_come_in_pairs(self):
        with pytest.raises(ScalarConfigurationError, match="together"):
            ScalarDefinition(name="Thumbnail", serialize=_accept, parse_value=_accept)

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            IMAGE_SCALAR.name = "Picture"


class TestEngineAdapters:
    def test_serialize_unwraps_accepted(self):
        assert IMAGE_SCALAR.engine_serialize("cat.png") == "cat.png"

    def test_serialize_raises_graphql_error(self):
        with pytest.raises(ScalarValidationError) as exc_info:
            IMAGE_SCALAR.engine_serialize("https://example.com/search/cats")

        error = exc_info.value
        assert isinstance(error, GraphQLError)
        assert error.kind is ScalarErrorKind.NOT_RECOGNIZED_IMAGE
        assert error.scalar_name == "Image"
        assert error.extensions == {"code": "NOT_RECOGNIZED_IMAGE", "scalar": "Image"}
        assert error.message

    def test_wrong_base_type_code(self):
        with pytest.raises(ScalarValidationError) as exc_info:
            IMAGE_SCALAR.engine_serialize(42)
        assert exc_info.value.extensions["code"] == "WRONG_BASE_TYPE"

    def test_output_only_rejects_input(self):
        definition = ScalarDefinition(name="Thumbnail", serialize=_accept)
        with pytest.raises(ScalarValidationError, match="output-only"):
            definition.engine_parse_value("cat.png")
        with pytest.raises(ScalarValidationError, match="output-only"):
            definition.engine_parse_literal(parse_value('"cat.png"'))


class TestTextLiteralParser:
    def test_string_literal(self):
        assert IMAGE_SCALAR.parse_literal(parse_value('"cat.png"'), None).value == "cat.png"

    def test_string_literal_is_validated(self):
        result = IMAGE_SCALAR.parse_literal(parse_value('"cats"'), None)
        assert result.error.kind is ScalarErrorKind.NOT_RECOGNIZED_IMAGE

    @pytest.mark.parametrize(
        "source,kind",
        [
            ("true", "boolean"),
            ("42", "int"),
            ("4.2", "float"),
            ("null", "null"),
            ("JPEG", "enum"),
            ('["cat.png"]', "list"),
            ('{src: "cat.png"}', "object"),
        ],
    )
    def test_other_literal_kinds_are_unsupported(self, source, kind):
        result = IMAGE_SCALAR.parse_literal(parse_value(source), None)
        assert result.error.kind is ScalarErrorKind.UNSUPPORTED_LITERAL_KIND
        assert result.error.message == f"Cannot parse {kind} literal as Image"

    def test_variable_is_resolved_before_validation(self):
        node = parse_value("$img")
        assert IMAGE_SCALAR.parse_literal(node, {"img": "cat.png"}).value == "cat.png"

        result = IMAGE_SCALAR.parse_literal(node, {"img": 42})
        assert result.error.kind is ScalarErrorKind.WRONG_BASE_TYPE

    def test_unbound_variable(self):
        node = parse_value("$img")
        for variables in (None, {}, {"other": "cat.png"}):
            result = IMAGE_SCALAR.parse_literal(node, variables)
            assert result.error.kind is ScalarErrorKind.UNSUPPORTED_LITERAL_KIND
            assert "$img" in result.error.message

    def test_custom_parse_value(self):
        def only_gifs(value):
            if isinstance(value, str) and value.endswith(".gif"):
                return Accepted(value)
            return reject(ScalarErrorKind.NOT_RECOGNIZED_IMAGE, "Only GIFs")

        parse_literal = text_literal_parser(only_gifs, "Gif")
        assert parse_literal(parse_value('"dance.gif"'), None).value == "dance.gif"
        assert parse_literal(parse_value('"dance.png"'), None).error.message == "Only GIFs"


class TestGrapheneScalar:
    def test_image_is_graphene_scalar(self):
        assert issubclass(Image, graphene.Scalar)
        assert Image._meta.name == "Image"
        assert Image._meta.description == IMAGE_SCALAR.description
        assert Image.definition is IMAGE_SCALAR

    def test_graphene_methods_use_definition(self):
        assert Image.serialize("cat.png") == "cat.png"
        assert Image.parse_value("cat.png") == "cat.png"
        assert Image.parse_literal(parse_value('"cat.png"')) == "cat.png"
        with pytest.raises(ScalarValidationError):
            Image.parse_literal(parse_value("true"))

    def test_custom_definition_to_graphene(self):
        definition = ScalarDefinition(
            name="Thumbnail", description="Thumbnail URL", serialize=_accept
        )
        scalar = definition.to_graphene()
        assert scalar._meta.name == "Thumbnail"
        assert scalar._meta.description == "Thumbnail URL"
