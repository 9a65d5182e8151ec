"""Wrappers pairing handler results with the path item that documents them."""

from __future__ import annotations

from typing import Any, Generator

from .component import ApiComponent
from .models import Components, MediaType, Operation, Response, Responses, component_ref, is_reference


class PathItemDefinition:
    """Describes the operation and components contributed by a handler."""

    @classmethod
    def is_visible(cls) -> bool:
        return True

    @classmethod
    def operation(cls) -> Operation:
        return Operation()

    @classmethod
    def components(cls) -> list[Components]:
        return []


class ResponseWrapper(ApiComponent, PathItemDefinition):
    """A pending handler result with its path item: ``ResponseWrapper[R, P]``.

    ``R`` is the component type the handler resolves to and ``P`` the path item.
    Instances are awaitable and resolve to the wrapped result.
    """

    def __init__(self, inner: Any, path_item: Any) -> None:
        self.inner = inner
        self.path_item = path_item

    def __await__(self) -> Generator[Any, None, Any]:
        return self.inner.__await__()

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
        return cls._type_arg(0).error_responses()

    @classmethod
    def error_schemas(cls) -> dict[str, tuple[str, Any]]:
        return cls._type_arg(0).error_schemas()

    @classmethod
    def responses(cls, content_type: str | None) -> Responses:
        own = cls._type_arg(0).responses(content_type)
        entries: dict[str, Any] = {}
        if own is not None:
            entries.update(own.responses)
        elif (named := cls.schema()) is not None:
            name, schema = named
            inline = is_reference(schema) or (isinstance(schema, dict) and schema.get("type") == "array")
            target = schema if inline else component_ref(name)
            entries["200"] = Response(content={content_type or cls.content_type(): MediaType(schema=target)})
        elif (raw := cls.raw_schema()) is not None:
            entries["200"] = Response(content={content_type or cls.content_type(): MediaType(schema=raw)})
        elif content_type is not None:
            entries["200"] = Response(content={content_type: MediaType()})
        else:
            entries["200"] = Response()
        entries.update(cls.error_responses())
        return Responses(entries)

    @classmethod
    def is_visible(cls) -> bool:
        return cls._type_arg(1).is_visible()

    @classmethod
    def operation(cls) -> Operation:
        return cls._type_arg(1).operation()

    @classmethod
    def components(cls) -> list[Components]:
        return cls._type_arg(1).components()


class ResponderWrapper(ApiComponent, PathItemDefinition):
    """Wraps an arbitrary response value that contributes no documentation."""

    def __init__(self, value: Any) -> None:
        self.value = value

    @classmethod
    def child_schemas(cls) -> list[tuple[str, Any]]:
        return []

    @classmethod
    def schema(cls) -> tuple[str, Any] | None:
        return None