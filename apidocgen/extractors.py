"""Request extractors and primitive types as documented components."""

from __future__ import annotations

import copy
from typing import Any, ClassVar

from .component import ApiComponent
from .models import MediaType, Parameter, ParameterIn, RequestBody

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
_MULTIPART_CONTENT_TYPE = "multipart/form-data"


class HttpRequest(ApiComponent):
    """The raw request: contributes nothing to the documentation."""


class HttpResponse(ApiComponent):
    """A raw response: contributes nothing to the documentation."""


class Payload(ApiComponent):
    """The raw request payload stream: contributes nothing."""


class Unit(ApiComponent):
    """The empty value: contributes nothing."""


class AuthDetails(ApiComponent):
    """Authorities of the caller: ``AuthDetails[T]``, contributes nothing."""


class Data(ApiComponent):
    """Shared application state: ``Data[T]``, contributes nothing."""


class ReqData(ApiComponent):
    """Request-local data: ``ReqData[T]``, contributes nothing."""


class _Wrapped(ApiComponent):
    """A wrapper whose schemas are those of its single type argument."""

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        return cls._type_arg(0).child_schemas()

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        return cls._type_arg(0).schema()


class Form(_Wrapped):
    """A url-encoded form body: ``Form[T]``."""

    @classmethod
    def content_type(cls) -> str:
        return _FORM_CONTENT_TYPE


class Json(_Wrapped):
    """A JSON body or response: ``Json[T]``."""

    @classmethod
    def required(cls) -> bool:
        return cls._type_arg(0).required()

    @classmethod
    def raw_schema(cls) -> Any:
        return cls._type_arg(0).raw_schema()


class _MultipartPart(_Wrapped):
    @classmethod
    def content_type(cls) -> str:
        return _MULTIPART_CONTENT_TYPE


class MultipartForm(_MultipartPart):
    """A typed multipart form body: ``MultipartForm[T]``."""


class MultipartText(_MultipartPart):
    """A text field of a multipart form: ``MultipartText[T]``."""


class MultipartJson(_MultipartPart):
    """A JSON field of a multipart form: ``MultipartJson[T]``."""


class Multipart(ApiComponent):
    """An untyped multipart stream."""

    @classmethod
    def content_type(cls) -> str:
        return _MULTIPART_CONTENT_TYPE

    @classmethod
    def request_body(cls) -> RequestBody | None:
        return RequestBody(content={cls.content_type(): MediaType()}, required=cls.required())


class Session(ApiComponent):
    """A cookie-backed session, documented as the session cookie."""

    _COOKIE_NAME = "id"

    @classmethod
    def required(cls) -> bool:
        return True

    @classmethod
    def raw_schema(cls) -> Any:
        return {"type": "string"}

    @classmethod
    def request_body(cls) -> RequestBody | None:
        return None

    @classmethod
    def parameters(cls) -> list[Parameter]:
        return [
            Parameter(
                name=cls._COOKIE_NAME,
                in_=ParameterIn.COOKIE,
                required=True,
                schema=cls.raw_schema(),
            )
        ]


class Primitive(ApiComponent):
    """A primitive value documented by an inline schema.

    Subclasses set ``schema_title`` and ``json_schema``.
    """

    schema_title: ClassVar[str | None] = None
    json_schema: ClassVar[dict[str, Any]] = {}

    @classmethod
    def raw_schema(cls) -> Any:
        if cls.schema_title is None:
            raise TypeError(f"{cls.__name__} does not declare a schema")
        return {**copy.deepcopy(cls.json_schema), "title": cls.schema_title}


def _signed(bits: str) -> dict[str, Any]:
    return {"type": "integer", "format": bits}


def _unsigned(bits: str) -> dict[str, Any]:
    return {"type": "integer", "format": bits, "minimum": 0.0}


class Char(Primitive):
    schema_title = "Character"
    json_schema = {"type": "string", "minLength": 1, "maxLength": 1}


class Str(Primitive):
    schema_title = "String"
    json_schema = {"type": "string"}


class Bytes(Primitive):
    schema_title = "Array_of_uint8"
    json_schema = {"type": "array", "items": _unsigned("uint8")}


class Bool(Primitive):
    schema_title = "Boolean"
    json_schema = {"type": "boolean"}


class F32(Primitive):
    schema_title = "float"
    json_schema = {"type": "number", "format": "float"}


class F64(Primitive):
    schema_title = "double"
    json_schema = {"type": "number", "format": "double"}


class I8(Primitive):
    schema_title = "int8"
    json_schema = _signed("int8")


class I16(Primitive):
    schema_title = "int16"
    json_schema = _signed("int16")


class I32(Primitive):
    schema_title = "int32"
    json_schema = _signed("int32")


class I64(Primitive):
    schema_title = "int64"
    json_schema = _signed("int64")


class I128(Primitive):
    schema_title = "int128"
    json_schema = _signed("int128")


class Isize(Primitive):
    schema_title = "int"
    json_schema = _signed("int")


class U8(Primitive):
    schema_title = "uint8"
    json_schema = _unsigned("uint8")


class U16(Primitive):
    schema_title = "uint16"
    json_schema = _unsigned("uint16")


class U32(Primitive):
    schema_title = "uint32"
    json_schema = _unsigned("uint32")


class U64(Primitive):
    schema_title = "uint64"
    json_schema = _unsigned("uint64")


class U128(Primitive):
    schema_title = "uint128"
    json_schema = _unsigned("uint128")


class Usize(Primitive):
    schema_title = "uint"
    json_schema = _unsigned("uint")


class NaiveDate(Primitive):
    schema_title = "Date"
    json_schema = {"type": "string", "format": "date"}


class NaiveTime(Primitive):
    schema_title = "PartialTime"
    json_schema = {"type": "string", "format": "partial-date-time"}


class NaiveDateTime(Primitive):
    schema_title = "PartialDateTime"
    json_schema = {"type": "string", "format": "partial-date-time"}


class DateTime(Primitive):
    schema_title = "DateTime"
    json_schema = {"type": "string", "format": "date-time"}


class Decimal(Primitive):
    schema_title = "Decimal"
    json_schema = {"type": "string", "pattern": r"^-?[0-9]+(\.[0-9]+)?$"}


class Uuid(Primitive):
    schema_title = "Uuid"
    json_schema = {"type": "string", "format": "uuid"}


class Url(Primitive):
    schema_title = "Url"
    json_schema = {"type": "string", "format": "uri"}