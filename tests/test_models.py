import pytest

from apidocgen.models import (
    Components,
    InstanceType,
    MediaType,
    Operation,
    Parameter,
    ParameterIn,
    ParameterStyle,
    RequestBody,
    Response,
    Responses,
    TypedSchema,
    component_ref,
    is_reference,
)

TEST_SCHEMA = {
    "properties": {"test": {"type": "string"}},
    "required": ["test"],
    "title": "Test",
    "type": "object",
}


def test_component_ref():
    assert component_ref("Test") == {"$ref": "#/components/schemas/Test"}


def test_is_reference():
    assert is_reference(component_ref("Test"))
    assert not is_reference({"allOf": [component_ref("Name")], "nullable": True})
    assert not is_reference({"type": "string"})
    assert not is_reference(True)


def test_default_operation_serializes_only_responses():
    assert Operation().to_dict() == {"responses": {}}


def test_cookie_parameter():
    parameter = Parameter(
        name="X-Organization-Slug",
        in_=ParameterIn.COOKIE,
        description="Organization of the current caller",
        required=True,
        deprecated=False,
        schema={"title": "OrganizationSlugCookie", "type": "string"},
    )
    assert parameter.to_dict() == {
        "deprecated": False,
        "description": "Organization of the current caller",
        "in": "cookie",
        "name": "X-Organization-Slug",
        "required": True,
        "schema": {"title": "OrganizationSlugCookie", "type": "string"},
    }


def test_header_parameter_with_style():
    parameter = Parameter(
        name="X-Organization-Slug",
        in_=ParameterIn.HEADER,
        required=True,
        deprecated=False,
        style=ParameterStyle.SIMPLE,
        schema={"title": "OrganizationSlug", "type": "string"},
    )
    data = parameter.to_dict()
    assert data["in"] == "header"
    assert data["style"] == "simple"
    assert "description" not in data


def test_parameter_form_explode():
    parameter = Parameter(name="id_string", style=ParameterStyle.FORM, explode=True, required=True)
    assert parameter.to_dict() == {
        "name": "id_string",
        "in": "query",
        "required": True,
        "style": "form",
        "explode": True,
    }


def test_response_without_content():
    assert Response(description="Invalid input").to_dict() == {"description": "Invalid input"}


def test_responses():
    responses = Responses(
        {
            "405": Response(description="Invalid input"),
            "200": Response(content={"application/json": MediaType(schema=component_ref("TestResult"))}),
        }
    )
    data = responses.to_dict()
    assert data == {
        "200": {
            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/TestResult"}}},
            "description": "",
        },
        "405": {"description": "Invalid input"},
    }
    assert list(data) == sorted(data)


def test_request_body():
    body = RequestBody(content={"application/json": MediaType(schema=component_ref("Test"))}, required=True)
    assert body.to_dict() == {
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Test"}}},
        "required": True,
    }


def test_full_operation():
    operation = Operation(
        tags=["pet"],
        summary="Add a new pet to the store",
        description="Add a new pet to the store\\\nPlop",
        deprecated=False,
        request_body=RequestBody(
            content={"application/json": MediaType(schema=component_ref("Test"))}, required=True
        ),
        responses=Responses({"405": Response(description="Invalid input")}),
        security=[{"petstore_oauth": ["read:pets"]}],
    )
    assert operation.to_dict() == {
        "deprecated": False,
        "description": "Add a new pet to the store\\\nPlop",
        "requestBody": {
            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Test"}}},
            "required": True,
        },
        "responses": {"405": {"description": "Invalid input"}},
        "security": [{"petstore_oauth": ["read:pets"]}],
        "summary": "Add a new pet to the store",
        "tags": ["pet"],
    }


def test_operation_id_and_parameters():
    operation = Operation(operation_id="test2", parameters=[Parameter(name="id", in_=ParameterIn.PATH)])
    data = operation.to_dict()
    assert data["operationId"] == "test2"
    assert data["parameters"] == [{"name": "id", "in": "path"}]


def test_components():
    assert Components(schemas={"Test": TEST_SCHEMA}).to_dict() == {"schemas": {"Test": TEST_SCHEMA}}
    assert Components().to_dict() == {}


def test_components_security_schemes():
    scheme = {"in": "header", "name": "X-Client-Header", "type": "apiKey"}
    data = Components(security_schemes={"header_scheme": scheme}).to_dict()
    assert data == {"securitySchemes": {"header_scheme": scheme}}


def test_typed_schema():
    class Name(TypedSchema):
        instance_type = InstanceType.STRING
        schema_format = "lastname"

    assert Name.schema_type() is InstanceType("string")
    assert Name.schema_type().value == "string"
    assert Name.format() == "lastname"


def test_typed_schema_without_format():
    class Name(TypedSchema):
        instance_type = InstanceType.INTEGER

    assert Name.schema_type() is InstanceType("integer")
    assert Name.format() is None


def test_typed_schema_missing_type():
    class Name(TypedSchema):
        pass

    with pytest.raises(TypeError):
        TypedSchema.schema_type()
    with pytest.raises(TypeError):
        Name.schema_type()