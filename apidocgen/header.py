"""Request headers documented as header parameters."""

from __future__ import annotations

from typing import Any, ClassVar

from .component import ApiComponent
from .models import Parameter, ParameterIn, ParameterStyle, RequestBody


class ApiHeader:
    """A typed header; subclasses set ``http_name`` and optionally the other fields."""

    http_name: ClassVar[str]
    http_description: ClassVar[str | None] = None
    http_required: ClassVar[bool] = False
    http_deprecated: ClassVar[bool] = False

    @classmethod
    def header_name(cls) -> str:
        try:
            return cls.http_name
        except AttributeError:
            raise TypeError(f"{cls.__name__} does not declare an http_name") from None

    @classmethod
    def header_description(cls) -> str | None:
        return cls.http_description

    @classmethod
    def header_required(cls) -> bool:
        return cls.http_required

    @classmethod
    def header_deprecated(cls) -> bool:
        return cls.http_deprecated


class Header(ApiComponent):
    """A header extractor: ``Header[T]`` where ``T`` is a component and a header."""

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        return cls._type_arg(0).child_schemas()

    @classmethod
    def raw_schema(cls) -> Any:
        return cls._type_arg(0).raw_schema()

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        return None

    @classmethod
    def request_body(cls) -> RequestBody | None:
        return None

    @classmethod
    def parameters(cls) -> list[Parameter]:
        inner = cls._type_arg(0)
        named = inner.schema()
        schema = named[1] if named is not None else cls.raw_schema()
        return [
            Parameter(
                name=inner.header_name(),
                in_=ParameterIn.HEADER,
                description=inner.header_description(),
                required=inner.header_required(),
                deprecated=inner.header_deprecated(),
                style=ParameterStyle.SIMPLE,
                schema=schema,
            )
        ]