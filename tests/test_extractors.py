import pytest

from apidocgen.component import ApiComponent, Either, ListOf, OptionOf
from apidocgen.extractors import (
    AuthDetails,
    Bool,
    Bytes,
    Char,
    Data,
    DateTime,
    Decimal,
    F32,
    F64,
    Form,
    HttpRequest,
    HttpResponse,
    I8,
    I16,
    I32,
    I64,
    I128,
    Isize,
    Json,
    Multipart,
    MultipartForm,
    MultipartJson,
    MultipartText,
    NaiveDate,
    NaiveDateTime,
    NaiveTime,
    Payload,
    Primitive,
    ReqData,
    Session,
    Str,
    U8,
    U16,
    U32,
    U64,
    U128,
    Unit,
    Url,
    Usize,
    Uuid,
)
from apidocgen.models import InstanceType

PET_SCHEMA = {"type": "object", "properties": {"test": {"type": "string"}}, "required": ["test"]}


class Pet(ApiComponent):
    @classmethod
    def schema(cls):
        return "Test", dict(PET_SCHEMA)


PRIMITIVES = [
    Char, Str, Bytes, Bool, F32, F64, I8, I16, I32, I64, I128, Isize,
    U8, U16, U32, U64, U128, Usize, NaiveDate, NaiveTime, NaiveDateTime,
    DateTime, Decimal, Uuid, Url,
]


@pytest.mark.parametrize(
    "component",
    [HttpRequest, HttpResponse, Payload, Unit, AuthDetails[Pet], Data[Pet], ReqData[Pet]],
)
def test_empty_components_contribute_nothing(component):
    assert component.schema() is None
    assert component.child_schemas() == []
    assert component.request_body() is None
    assert component.parameters() == []


def test_form_request_body():
    assert Form[Pet].content_type() == "application/x-www-form-urlencoded"
    assert Form[Pet].request_body().to_dict() == {
        "content": {
            "application/x-www-form-urlencoded": {"schema": {"$ref": "#/components/schemas/Test"}}
        },
        "required": True,
    }


def test_json_delegates_to_inner():
    assert Json[Pet].schema() == Pet.schema()
    assert Json[Pet].content_type() == "application/json"
    assert Json[OptionOf[Pet]].required() is False
    assert Json[U32].raw_schema() == U32.raw_schema()


@pytest.mark.parametrize("wrapper", [MultipartForm, MultipartText, MultipartJson])
def test_multipart_parts_use_multipart_content_type(wrapper):
    body = wrapper[Pet].request_body()
    assert list(body.content) == ["multipart/form-data"]
    assert body.content["multipart/form-data"].schema == {"$ref": "#/components/schemas/Test"}
    assert wrapper[Pet].child_schemas() == Pet.child_schemas()


def test_untyped_multipart_body():
    assert Multipart.schema() is None
    assert Multipart.request_body().to_dict() == {
        "content": {"multipart/form-data": {}},
        "required": True,
    }


def test_session_cookie_parameter():
    assert Session.request_body() is None
    params = Session.parameters()
    assert [p.to_dict() for p in params] == [
        {"name": "id", "in": "cookie", "required": True, "schema": {"type": "string"}}
    ]


def test_uint32_schema_matches_generated_shape():
    schema = U32.raw_schema()
    assert schema["format"] == "uint32"
    assert schema["minimum"] == 0.0
    assert schema["type"] == "integer"


def test_uuid_schema():
    assert Uuid.raw_schema() == {"format": "uuid", "title": "Uuid", "type": "string"}


@pytest.mark.parametrize("primitive", PRIMITIVES)
def test_primitives_are_raw_only(primitive):
    schema = primitive.raw_schema()
    assert schema["type"] in {t.value for t in InstanceType}
    assert schema["title"] == primitive.schema_title
    assert primitive.schema() is None
    assert primitive.child_schemas() == []
    assert OptionOf[primitive].raw_schema() == schema
    assert OptionOf[primitive].schema() is None


def test_primitive_schema_is_a_fresh_copy():
    first = Bytes.raw_schema()
    first["items"]["format"] = "changed"
    assert Bytes.raw_schema()["items"] == U8.json_schema


def test_bare_primitive_raises():
    with pytest.raises(TypeError):
        Primitive.raw_schema()


def test_wrapper_without_argument_raises():
    with pytest.raises(TypeError):
        Form.schema()


def test_either_of_primitives_is_one_of():
    assert Either[Json[U32], Json[Str]].raw_schema() == {
        "oneOf": [U32.raw_schema(), Str.raw_schema()]
    }


def test_list_of_json_component():
    name, schema = Json[ListOf[Pet]].schema()
    assert name == "Test"
    assert schema == {"type": "array", "items": {"$ref": "#/components/schemas/Test"}}