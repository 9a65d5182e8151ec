"""Components that contribute schemas, bodies, parameters and responses to operations."""

from __future__ import annotations

import functools
from typing import Any, ClassVar

from .models import MediaType, Parameter, RequestBody, Response, Responses, component_ref, is_reference


@functools.lru_cache(maxsize=None)
def _specialize(base: type, params: tuple[Any, ...]) -> type:
    label = ", ".join(getattr(p, "__name__", repr(p)) for p in params)
    name = f"{base.__name__}[{label}]"
    return type(base)(
        name,
        (base,),
        {"type_args": params, "__module__": base.__module__, "__qualname__": name},
    )


class ApiComponent:
    """Something that appears in an operation: a body, a parameter, a response.

    Generic components are parameterised with subscription, e.g. ``ListOf[Pet]``.
    """

    type_args: ClassVar[tuple[Any, ...]] = ()

    def __class_getitem__(cls, params: Any) -> type:
        if not isinstance(params, tuple):
            params = (params,)
        return _specialize(cls, params)

    @classmethod
    def _type_arg(cls, index: int) -> Any:
        if index >= len(cls.type_args):
            raise TypeError(f"{cls.__name__} is missing type argument {index + 1}")
        return cls.type_args[index]

    @classmethod
    def content_type(cls) -> str:
        return "application/json"

    @classmethod
    def required(cls) -> bool:
        return True

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        """Named schemas this component depends on, each possibly with its own children."""
        return []

    @classmethod
    def raw_schema(cls) -> Any:
        return None

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        return None

    @classmethod
    def securities(cls) -> dict[str, Any]:
        return {}

    @classmethod
    def security_requirement_name(cls) -> str | None:
        return None

    @classmethod
    def request_body(cls) -> RequestBody | None:
        named = cls.schema()
        if named is None:
            return None
        name, _ = named
        return RequestBody(
            content={cls.content_type(): MediaType(schema=component_ref(name))},
            required=cls.required(),
        )

    @classmethod
    def error_responses(cls) -> list[tuple[str, Response]]:
        return []

    @classmethod
    def error_schemas(cls) -> dict[str, tuple[str, Any]]:
        return {}

    @classmethod
    def responses(cls, content_type: str | None) -> Responses | None:
        return None

    @classmethod
    def parameters(cls) -> list[Parameter]:
        return []


class ApiErrorComponent:
    """An error type that documents the responses it may produce."""

    @classmethod
    def schemas_by_status_code(cls) -> dict[str, tuple[str, Any]]:
        return {}

    @classmethod
    def error_responses(cls) -> list[tuple[str, Response]]:
        return []


class HttpError(ApiErrorComponent):
    """The framework's generic error: documents no responses or schemas."""


class OptionOf(ApiComponent):
    """An optional value: ``OptionOf[T]``."""

    @classmethod
    def required(cls) -> bool:
        return False

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        return cls._type_arg(0).child_schemas()

    @classmethod
    def raw_schema(cls) -> Any:
        return cls._type_arg(0).raw_schema()

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        return cls._type_arg(0).schema()

    @classmethod
    def securities(cls) -> dict[str, Any]:
        return cls._type_arg(0).securities()

    @classmethod
    def security_requirement_name(cls) -> str | None:
        return cls._type_arg(0).security_requirement_name()


class ListOf(ApiComponent):
    """A list of values: ``ListOf[T]``, described as an array of references."""

    @classmethod
    def required(cls) -> bool:
        return True

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        item = cls._type_arg(0)
        named = item.schema()
        own = [named] if named is not None else []
        return own + item.child_schemas()

    @classmethod
    def raw_schema(cls) -> Any:
        return cls._type_arg(0).raw_schema()

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        named = cls._type_arg(0).schema()
        if named is None:
            return None
        name, schema = named
        items = schema if is_reference(schema) else component_ref(name)
        return name, {"type": "array", "items": {"$ref": items["$ref"]}}


class ResultOf(ApiComponent):
    """A success type with a documented error type: ``ResultOf[T, E]``."""

    @classmethod
    def required(cls) -> bool:
        return cls._type_arg(0).required()

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        return cls._type_arg(0).child_schemas()

    @classmethod
    def raw_schema(cls) -> Any:
        return cls._type_arg(0).raw_schema()

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        return cls._type_arg(0).schema()

    @classmethod
    def error_responses(cls) -> list[tuple[str, Response]]:
        return cls._type_arg(1).error_responses()

    @classmethod
    def error_schemas(cls) -> dict[str, tuple[str, Any]]:
        return cls._type_arg(1).schemas_by_status_code()

    @classmethod
    def responses(cls, content_type: str | None) -> Responses | None:
        return cls._type_arg(0).responses(content_type)


class Either(ApiComponent):
    """One of two alternatives: ``Either[T, E]``."""

    @classmethod
    def _sides(cls) -> tuple[Any, Any]:
        return cls._type_arg(0), cls._type_arg(1)

    @classmethod
    def required(cls) -> bool:
        left, right = cls._sides()
        return left.required() and right.required()

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        left, right = cls._sides()
        return left.child_schemas() + right.child_schemas()

    @classmethod
    def raw_schema(cls) -> Any:
        left, right = cls._sides()
        first, second = left.raw_schema(), right.raw_schema()
        if first is not None and second is not None:
            return {"oneOf": [first, second]}
        return first if first is not None else second

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        left, right = cls._sides()
        first, second = left.schema(), right.schema()
        if first is not None and second is not None:
            (first_name, first_schema), (second_name, second_schema) = first, second
            return f"Either{first_name}Or{second_name}", {"oneOf": [first_schema, second_schema]}
        return first if first is not None else second

    @classmethod
    def error_responses(cls) -> list[tuple[str, Response]]:
        left, right = cls._sides()
        return left.error_responses() + right.error_responses()

    @classmethod
    def error_schemas(cls) -> dict[str, tuple[str, Any]]:
        left, right = cls._sides()
        merged = {**right.error_schemas(), **left.error_schemas()}
        return dict(sorted(merged.items()))

    @classmethod
    def responses(cls, content_type: str | None) -> Responses | None:
        left, right = cls._sides()
        first = left.responses(content_type)
        second = right.responses(content_type)
        if first is None:
            return second
        merged = dict(first.responses)
        if second is not None:
            merged.update(second.responses)
        return Responses(merged, default=first.default)