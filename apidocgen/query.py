"""Query string extractors documented as query parameters."""

from __future__ import annotations

from typing import Any, ClassVar

from .component import ApiComponent
from .models import Parameter, ParameterIn, ParameterStyle, RequestBody, is_reference

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
_SUBSCHEMA_KEYS = frozenset({"allOf", "anyOf", "oneOf", "not", "if", "then", "else"})
_STRING_KEYS = frozenset({"maxLength", "minLength", "pattern"})
_NUMBER_KEYS = frozenset({"multipleOf", "maximum", "exclusiveMaximum", "minimum", "exclusiveMinimum"})
_ARRAY_KEYS = frozenset({"items", "additionalItems", "maxItems", "minItems", "uniqueItems", "contains"})
_UNKNOWN_REQUIREMENT_KEYS = _SUBSCHEMA_KEYS | _STRING_KEYS | _NUMBER_KEYS | _ARRAY_KEYS | {"$ref"}

_MAP_PARAMETER_NAME = "params"


class MapOf(ApiComponent):
    """A string-keyed map of values: ``MapOf[K, V]``."""

    @classmethod
    def required(cls) -> bool:
        return False

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        return cls._type_arg(1).child_schemas()

    @classmethod
    def raw_schema(cls) -> Any:
        return cls._type_arg(1).raw_schema()

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        return None


def _as_object(schema: Any) -> dict[str, Any]:
    return schema if isinstance(schema, dict) else {}


class Query(ApiComponent):
    """A query string extractor: ``Query[T]`` or ``Query[MapOf[K, V]]``."""

    hashmap_style: ClassVar[ParameterStyle | None] = None
    style: ClassVar[ParameterStyle | None] = None
    explode: ClassVar[bool | None] = None

    @classmethod
    def _inner(cls) -> Any:
        return cls._type_arg(0)

    @classmethod
    def _is_map(cls) -> bool:
        inner = cls._inner()
        return isinstance(inner, type) and issubclass(inner, MapOf)

    @classmethod
    def _target(cls) -> Any:
        inner = cls._inner()
        return inner._type_arg(1) if cls._is_map() else inner

    @classmethod
    def required(cls) -> bool:
        if cls._is_map():
            return False
        return cls._inner().required()

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        return cls._target().child_schemas()

    @classmethod
    def raw_schema(cls) -> Any:
        return cls._target().raw_schema()

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        return None

    @classmethod
    def request_body(cls) -> RequestBody | None:
        return None

    @classmethod
    def parameters(cls) -> list[Parameter]:
        named = cls._target().schema()
        schema = named[1] if named is not None else cls.raw_schema()
        if cls._is_map():
            return parameters_from_hashmap(schema, cls.hashmap_style)
        return parameters_from_schema(schema, None, None, cls.style, cls.explode)


class QsQuery(Query):
    """A nested query string extractor; maps are documented as deep objects."""

    hashmap_style = ParameterStyle.DEEP_OBJECT


class LabQuery(Query):
    """A query extractor with repeated keys, documented as exploded form values."""

    style = ParameterStyle.FORM
    explode = True


def _parameters_for_object(
    schema: dict[str, Any],
    required: bool | None,
    default_description: str | None,
    style: ParameterStyle | None,
    explode: bool | None,
) -> list[Parameter]:
    parameters = []
    for name, prop in sorted((schema.get("properties") or {}).items()):
        prop_required = required if required is not None else extract_required_from_schema(schema, name)
        description = _as_object(prop).get("description") or default_description
        parameters.append(
            Parameter(
                name=name,
                in_=ParameterIn.QUERY,
                schema=prop,
                required=prop_required,
                description=description,
                style=style,
                explode=explode,
            )
        )
    return parameters


def parameters_from_schema(
    schema: Any,
    required: bool | None,
    default_description: str | None,
    style: ParameterStyle | None,
    explode: bool | None,
) -> list[Parameter]:
    """Derive query parameters from the properties of a schema."""
    if schema is None or is_reference(schema):
        return []
    sch = _as_object(schema)
    parameters: list[Parameter] = []
    if _OBJECT_KEYS & sch.keys():
        parameters.extend(_parameters_for_object(sch, required, default_description, style, explode))
    for sub in sch.get("allOf") or []:
        parameters.extend(parameters_from_schema(_as_object(sub), required, default_description, style, explode))
    one_of = sch.get("oneOf")
    if one_of is not None:
        names = [
            name
            for alternative in one_of
            if _OBJECT_KEYS & _as_object(alternative).keys()
            for name in sorted(_as_object(alternative).get("properties") or {})
        ]
        description = f"{', '.join(names)} are mutually exclusive properties"
        for alternative in one_of:
            parameters.extend(parameters_from_schema(_as_object(alternative), False, description, style, explode))
    return parameters


def parameters_from_hashmap(schema: Any, style: ParameterStyle | None) -> list[Parameter]:
    """Describe a map of query values as a single free-form parameter."""
    if schema is None:
        return [Parameter(name=_MAP_PARAMETER_NAME, in_=ParameterIn.QUERY, style=style, schema={})]
    if is_reference(schema):
        return [Parameter(name=_MAP_PARAMETER_NAME, in_=ParameterIn.QUERY, schema={})]
    return [
        Parameter(
            name=_MAP_PARAMETER_NAME,
            in_=ParameterIn.QUERY,
            style=style,
            schema={"additionalProperties": schema},
        )
    ]


def extract_required_from_schema(schema: Any, property_name: str) -> bool | None:
    """Tell whether a property is required, or None when the schema cannot say."""
    sch = _as_object(schema)
    if property_name in (sch.get("required") or []):
        return True
    if _UNKNOWN_REQUIREMENT_KEYS & sch.keys():
        return None
    return False