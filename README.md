# apidocgen

Building blocks for OpenAPI 3.0 documentation of web handlers.

Each input or output of a handler is described by a subclass of
`apidocgen.component.ApiComponent`. A component knows its own JSON schema,
the named schemas it depends on, and how it appears in an operation: as a
request body, as parameters (path, query, header, cookie) or as responses.
Schemas are plain dictionaries in OpenAPI 3.0 JSON-schema form.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Describing a type

Override `schema()` to return a `(name, schema)` pair, and `child_schemas()`
to list the named schemas it refers to.

```python
from apidocgen.component import ApiComponent, ListOf


class Pet(ApiComponent):
    @classmethod
    def schema(cls):
        return ("Pet", {
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"],
        })


name, schema = ListOf[Pet].schema()
# name == "Pet"
# schema == {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}}

body = Pet.request_body()
# RequestBody with "application/json" content referring to
# "#/components/schemas/Pet", required=True
```

Generic components are specialised by subscription (`ListOf[Pet]`,
`ResultOf[Pet, MyErrors]`) and stay classes.

## Modules

- `apidocgen.models`: the document objects `MediaType`, `RequestBody`,
  `Response`, `Responses`, `Parameter`, `Operation` and `Components`, each
  with `to_dict()` giving its OpenAPI JSON form; the enums `InstanceType`,
  `ParameterIn` and `ParameterStyle`; `component_ref(name)` and
  `is_reference(schema)`; and `TypedSchema`, a type described by an
  `instance_type` and an optional `schema_format`.
- `apidocgen.component`: `ApiComponent` and the generic wrappers
  - `OptionOf[T]`: the schema of `T`, not required;
  - `ListOf[T]`: an array whose items refer to `T`, with `T`'s schema among
    the child schemas;
  - `ResultOf[T, E]`: `T` on success, error responses and schemas from `E`,
    an `ApiErrorComponent`;
  - `Either[A, B]`: either component, combined as `oneOf` under the name
    `Either<A>Or<B>`.

  `ApiErrorComponent` documents error responses through
  `error_responses()` and `schemas_by_status_code()`; `HttpError` documents
  none.
- `apidocgen.wrappers`: `PathItemDefinition` (visibility, `Operation` and
  `Components` of a handler), `ResponseWrapper[R, P]` and
  `ResponderWrapper`.
- `apidocgen.extractors`: `Json`, `Form`, `MultipartForm`, `MultipartText`,
  `MultipartJson`, `Multipart`, `Session` (documented as a required cookie
  parameter named `id`), components that contribute nothing (`HttpRequest`,
  `HttpResponse`, `Payload`, `Unit`, `AuthDetails`, `Data`, `ReqData`), and
  primitive types with inline schemas (`Bool`, `Char`, `Str`, `Bytes`,
  `I8` to `I128`, `U8` to `U128`, `Isize`, `Usize`, `F32`, `F64`,
  `NaiveDate`, `NaiveTime`, `NaiveDateTime`, `DateTime`, `Decimal`, `Uuid`,
  `Url`).
- `apidocgen.path`: `Path[T]` or `Path[A, B, ...]`, and
  `parameters_for_schema(schema, required)`. Parameters for a whole
  segment get an empty name, to be filled in from the route pattern.
- `apidocgen.query`: `Query[T]`, `QsQuery[T]` (maps as `deepObject`),
  `LabQuery[T]` (style `form`, exploded), `MapOf[K, V]` for free-form
  parameters, and the functions `parameters_from_schema`,
  `parameters_from_hashmap` and `extract_required_from_schema`.
- `apidocgen.header`: `ApiHeader`, set up with the class attributes
  `http_name`, `http_description`, `http_required` and `http_deprecated`,
  and `Header[T]`.

## Parameters

```python
from apidocgen.query import Query

for parameter in Query[Pet].parameters():
    print(parameter.to_dict())
# {'name': 'name', 'in': 'query', 'required': True, 'schema': {'type': 'string'}}
```

```python
from apidocgen.extractors import Str
from apidocgen.header import ApiHeader, Header


class OrganizationSlug(Str, ApiHeader):
    http_name = "X-Organization-Slug"
    http_required = True


Header[OrganizationSlug].parameters()[0].to_dict()
# {'name': 'X-Organization-Slug', 'in': 'header', 'required': True,
#  'deprecated': False, 'style': 'simple',
#  'schema': {'type': 'string', 'title': 'String'}}
```

## Responses

`ResponseWrapper[R, P]` joins a handler's return component `R` with its
path item `P`. Its `responses(content_type)` uses `R`'s own responses when
it has some; otherwise it builds a `200` entry from `R`'s named schema (as a
reference, or inline for arrays), from its raw schema, or with no schema.
The error responses of `R` are added after it. Instances are awaitable and
resolve to the wrapped value.

## What it does not do

The package describes components and the pieces of an operation. It does
not hook into a web framework, register routes, assemble a complete
OpenAPI document with its paths, serve the documentation, or generate
component schemas from Python classes: each component's schema is written
by hand.