"""Path extractors documented as path parameters."""

from __future__ import annotations

from typing import Any

from .component import ApiComponent
from .models import InstanceType, Parameter, ParameterIn, RequestBody, is_reference

_OBJECT_KEYS = frozenset(
    {
        "properties",
        "required",
        "additionalProperties",
        "maxProperties",
        "minProperties",
        "patternProperties",
        "propertyNames",
    }
)
_UNPROCESSABLE = frozenset({InstanceType.NULL.value, InstanceType.OBJECT.value})


class Path(ApiComponent):
    """Path segments: ``Path[T]`` or ``Path[A, B, ...]`` for several segments."""

    @classmethod
    def required(cls) -> bool:
        return True

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        return []

    @classmethod
    def raw_schema(cls) -> Any:
        if len(cls.type_args) == 1:
            return cls.type_args[0].raw_schema()
        return None

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        return None

    @classmethod
    def request_body(cls) -> RequestBody | None:
        return None

    @classmethod
    def parameters(cls) -> list[Parameter]:
        if not cls.type_args:
            raise TypeError(f"{cls.__name__} is missing type argument 1")
        parameters: list[Parameter] = []
        for segment in cls.type_args:
            named = segment.schema()
            schema = named[1] if named is not None else segment.raw_schema()
            if schema is not None:
                parameters.extend(parameters_for_schema(schema, cls.required()))
        return parameters


def _simple_parameter(schema: Any, required: bool) -> Parameter:
    # the name is filled in later from the route pattern
    return Parameter(name="", in_=ParameterIn.PATH, schema=schema, required=required)


def _processable(instance_type: Any) -> bool:
    if isinstance(instance_type, list):
        return bool(instance_type) and instance_type[0] not in _UNPROCESSABLE
    return instance_type not in _UNPROCESSABLE


def parameters_for_schema(schema: Any, required: bool) -> list[Parameter]:
    """Derive path parameters from a schema or reference."""
    if is_reference(schema):
        return [_simple_parameter(schema, required)]
    if not isinstance(schema, dict):
        return []
    parameters: list[Parameter] = []
    for sub in schema.get("allOf", []):
        parameters.extend(parameters_for_schema(sub, required))
    if _OBJECT_KEYS & schema.keys():
        properties = schema.get("properties") or {}
        if properties:
            parameters.extend(
                Parameter(name=name, in_=ParameterIn.PATH, schema=prop, required=required)
                for name, prop in sorted(properties.items())
            )
        else:
            parameters.append(_simple_parameter(schema, required))
    if "type" in schema and _processable(schema["type"]):
        parameters.append(_simple_parameter(schema, required))
    return parameters