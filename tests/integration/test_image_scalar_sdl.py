"""
Integration tests for scalars bound onto an SDL-first graphql-core schema.
"""

import pytest
from graphql import build_schema, graphql_sync, print_schema

from rail_scalars import IMAGE_SCALAR, bind_scalars, build_image_scalar

pytestmark = pytest.mark.integration

SDL = """
scalar Image

type Query {
    image: Image
    notImage: Image
    echo(image: Image!): String
}
"""


@pytest.fixture
def schema():
    return bind_scalars(build_schema(SDL), [IMAGE_SCALAR])


@pytest.fixture
def root():
    return {
        "image": "https://example.com/cat.jpeg",
        "notImage": "https://example.com/search/cats",
        "echo": lambda info, image: image,
    }


def test_printed_schema_keeps_scalar(schema):
    assert "scalar Image" in print_schema(schema)


def test_output_validation(schema, root):
    result = graphql_sync(schema, "{ image notImage }", root_value=root)

    assert result.data == {"image": "https://example.com/cat.jpeg", "notImage": None}
    assert len(result.errors) == 1
    assert result.errors[0].path == ["notImage"]
    assert result.errors[0].extensions == {"code": "NOT_RECOGNIZED_IMAGE", "scalar": "Image"}
    assert "no file extension" in result.errors[0].message


def test_literal_and_variable_input(schema, root):
    result = graphql_sync(schema, '{ echo(image: "a.b.jpeg") }', root_value=root)
    assert result.errors is None
    assert result.data == {"echo": "a.b.jpeg"}

    result = graphql_sync(schema, "{ echo(image: 12) }", root_value=root)
    assert result.data is None
    assert result.errors[0].message == "Cannot parse int literal as Image"

    result = graphql_sync(
        schema,
        "query ($img: Image!) { echo(image: $img) }",
        root_value=root,
        variable_values={"img": "photo."},
    )
    assert result.data is None
    assert "no file extension" in result.errors[0].message


def test_bind_configured_definition():
    avatar_schema = build_schema(
        "scalar Avatar type Query { image: Avatar notImage: Avatar }"
    )
    bind_scalars(avatar_schema, [build_image_scalar("Avatar", extensions=["png"])])

    result = graphql_sync(
        avatar_schema,
        "{ image notImage }",
        root_value={"image": "me.png", "notImage": "me.jpeg"},
    )
    assert result.data == {"image": "me.png", "notImage": None}
    assert result.errors[0].message.startswith("Avatar must reference an image file")
