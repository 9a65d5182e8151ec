"""OpenAPI 3.0 document models: media types, bodies, responses, parameters and operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

_SCHEMA_REF_PREFIX = "#/components/schemas/"


def component_ref(name: str) -> dict[str, str]:
    """Return a reference to the named schema in the components section."""
    return {"$ref": f"{_SCHEMA_REF_PREFIX}{name}"}


def is_reference(schema: Any) -> bool:
    """Tell whether a schema is a bare reference rather than an inline schema."""
    return isinstance(schema, dict) and set(schema) == {"$ref"}


def _serialize(value: Any) -> Any:
    return value.to_dict() if hasattr(value, "to_dict") else value


def _without_empty(items: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in items.items() if value is not None}


class InstanceType(str, Enum):
    """Primitive JSON schema types."""

    NULL = "null"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    STRING = "string"
    INTEGER = "integer"


class ParameterIn(str, Enum):
    """Where an operation parameter is carried."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"


class ParameterStyle(str, Enum):
    """How a parameter value is serialized."""

    MATRIX = "matrix"
    LABEL = "label"
    FORM = "form"
    SIMPLE = "simple"
    SPACE_DELIMITED = "spaceDelimited"
    PIPE_DELIMITED = "pipeDelimited"
    DEEP_OBJECT = "deepObject"


@dataclass
class MediaType:
    """Schema and example for one content type."""

    schema: Any = None
    example: Any = None

    def to_dict(self) -> dict[str, Any]:
        return _without_empty({"schema": self.schema, "example": self.example})


@dataclass
class RequestBody:
    """Request body description keyed by content type."""

    content: dict[str, MediaType] = field(default_factory=dict)
    description: str | None = None
    required: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "content": {kind: media.to_dict() for kind, media in sorted(self.content.items())}
        }
        data.update(_without_empty({"description": self.description, "required": self.required}))
        return data


@dataclass
class Response:
    """A single response of an operation."""

    description: str = ""
    headers: dict[str, Any] = field(default_factory=dict)
    content: dict[str, MediaType] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"description": self.description}
        if self.headers:
            data["headers"] = {name: _serialize(h) for name, h in sorted(self.headers.items())}
        if self.content:
            data["content"] = {kind: media.to_dict() for kind, media in sorted(self.content.items())}
        return data


@dataclass
class Responses:
    """Responses keyed by status code; values are responses or references."""

    responses: dict[str, Any] = field(default_factory=dict)
    default: Any = None

    def to_dict(self) -> dict[str, Any]:
        data = {status: _serialize(resp) for status, resp in sorted(self.responses.items())}
        if self.default is not None:
            data["default"] = _serialize(self.default)
        return data


@dataclass
class Parameter:
    """An operation parameter."""

    name: str = ""
    in_: ParameterIn = ParameterIn.QUERY
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = None
    style: ParameterStyle | None = None
    explode: bool | None = None
    allow_reserved: bool | None = None
    schema: Any = None
    example: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "in": self.in_.value}
        data.update(
            _without_empty(
                {
                    "description": self.description,
                    "required": self.required,
                    "deprecated": self.deprecated,
                    "allowEmptyValue": self.allow_empty_value,
                    "style": self.style.value if self.style is not None else None,
                    "explode": self.explode,
                    "allowReserved": self.allow_reserved,
                    "schema": self.schema,
                    "example": self.example,
                }
            )
        )
        return data


@dataclass
class Operation:
    """A single API operation on a path."""

    tags: list[str] = field(default_factory=list)
    summary: str | None = None
    description: str | None = None
    operation_id: str | None = None
    parameters: list[Any] = field(default_factory=list)
    request_body: Any = None
    responses: Responses = field(default_factory=Responses)
    deprecated: bool | None = None
    security: list[dict[str, list[str]]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.tags:
            data["tags"] = list(self.tags)
        data.update(
            _without_empty(
                {
                    "summary": self.summary,
                    "description": self.description,
                    "operationId": self.operation_id,
                }
            )
        )
        if self.parameters:
            data["parameters"] = [_serialize(p) for p in self.parameters]
        if self.request_body is not None:
            data["requestBody"] = _serialize(self.request_body)
        data["responses"] = self.responses.to_dict()
        if self.deprecated is not None:
            data["deprecated"] = self.deprecated
        if self.security:
            data["security"] = [dict(requirement) for requirement in self.security]
        return data


@dataclass
class Components:
    """Reusable objects of a document."""

    schemas: dict[str, Any] = field(default_factory=dict)
    responses: dict[str, Any] = field(default_factory=dict)
    parameters: dict[str, Any] = field(default_factory=dict)
    request_bodies: dict[str, Any] = field(default_factory=dict)
    security_schemes: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        sections = {
            "schemas": self.schemas,
            "responses": self.responses,
            "parameters": self.parameters,
            "requestBodies": self.request_bodies,
            "securitySchemes": self.security_schemes,
        }
        return {
            key: {name: _serialize(item) for name, item in sorted(values.items())}
            for key, values in sections.items()
            if values
        }


class TypedSchema:
    """A type described by a single primitive schema type and optional format.

    Subclasses set ``instance_type`` and optionally ``schema_format``.
    """

    instance_type: ClassVar[InstanceType]
    schema_format: ClassVar[str | None] = None

    @classmethod
    def schema_type(cls) -> InstanceType:
        try:
            return cls.instance_type
        except AttributeError:
            raise TypeError(f"{cls.__name__} does not declare an instance_type") from None

    @classmethod
    def format(cls) -> str | None:
        return cls.schema_format