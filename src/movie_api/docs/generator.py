"""OpenAPI document generator.

Walks a populated ApiRegistry once and produces a JSON-compatible dict:
registered schemas become `components.schemas`, path registrations become
`paths`, and both keep registration order so the output is reproducible.
"""

from movie_api.config import DEFAULT_INFO, DocumentInfo
from movie_api.docs.registry import ApiRegistry, Param, PathRegistration
from movie_api.errors import SchemaResolutionError
from movie_api.schema.base import (
    ArraySchema,
    ObjectSchema,
    OptionalSchema,
    PrimitiveSchema,
    SchemaRef,
    UnionSchema,
)

COMPONENTS_PREFIX = "#/components/schemas/"
JSON_CONTENT_TYPE = "application/json"


class DocumentGenerator:
    """Resolves registered schemas and routes into an OpenAPI document."""

    def __init__(self, registry: ApiRegistry):
        self.registry = registry
        # Registered schema objects are referenced by identity, not by value
        self._names_by_id = {id(schema): name for name, schema in registry.schemas.items()}

    def generate(self, info: DocumentInfo = DEFAULT_INFO) -> dict:
        components = {
            name: self._resolve(schema, f"components.schemas.{name}", inline=True)
            for name, schema in self.registry.schemas.items()
        }

        paths: dict[str, dict] = {}
        for registration in self.registry.paths:
            paths.setdefault(registration.path, {})[registration.method] = self._operation(registration)

        document = {
            "openapi": info.openapi,
            "info": {
                "title": info.title,
                "version": info.version,
                "description": info.description,
            },
            "servers": [{"url": s.url, "description": s.description} for s in info.servers],
            "paths": paths,
            "components": {"schemas": components},
        }
        return document

    # -- operations -----------------------------------------------------------

    def _operation(self, registration: PathRegistration) -> dict:
        location = registration.label
        operation: dict = {"summary": registration.summary}
        if registration.description:
            operation["description"] = registration.description
        if registration.parameters:
            operation["parameters"] = [self._parameter(p) for p in registration.parameters]
        if registration.request_body is not None:
            operation["requestBody"] = {
                "content": {JSON_CONTENT_TYPE: {"schema": self._resolve(registration.request_body, location)}},
            }

        responses = {}
        for status, response in registration.responses.items():
            entry: dict = {"description": response.description}
            if response.content is not None:
                entry["content"] = {JSON_CONTENT_TYPE: {"schema": self._resolve(response.content, location)}}
            responses[str(status)] = entry
        operation["responses"] = responses
        return operation

    def _parameter(self, param: Param) -> dict:
        result = {
            "name": param.name,
            "in": param.location,
            "required": param.required,
            "schema": {"type": param.param_type},
        }
        if param.description:
            result["description"] = param.description
        return result

    # -- schemas --------------------------------------------------------------

    def _resolve(self, schema, location: str, inline: bool = False) -> dict:
        """Convert a schema value into its JSON Schema form.

        Registered schemas found below the top level become $refs. `inline`
        expands the top-level schema even when it is registered.
        """
        if not inline and id(schema) in self._names_by_id:
            return {"$ref": COMPONENTS_PREFIX + self._names_by_id[id(schema)]}

        if isinstance(schema, SchemaRef):
            if schema.name not in self.registry.schemas:
                raise SchemaResolutionError(schema.name, location)
            return {"$ref": COMPONENTS_PREFIX + schema.name}

        if isinstance(schema, OptionalSchema):
            return self._resolve(schema.inner, location)

        if isinstance(schema, PrimitiveSchema):
            result = {**schema.constraints, "type": schema.type}
        elif isinstance(schema, ObjectSchema):
            properties = {}
            required = []
            for name, field in schema.properties.items():
                if not isinstance(field, OptionalSchema):
                    required.append(name)
                properties[name] = self._resolve(field, location)
            result = {"type": "object", "properties": properties}
            if required:
                result["required"] = required
        elif isinstance(schema, ArraySchema):
            result = {"type": "array", "items": self._resolve(schema.items, location)}
        elif isinstance(schema, UnionSchema):
            result = {"anyOf": [self._resolve(v, location) for v in schema.variants]}
        else:
            raise TypeError(f"Unsupported schema type: {type(schema).__name__}")

        if getattr(schema, "description", ""):
            result["description"] = schema.description
        if isinstance(schema, PrimitiveSchema) and schema.example is not None:
            result["example"] = schema.example
        return result


def generate(registry: ApiRegistry, info: DocumentInfo = DEFAULT_INFO) -> dict:
    """Generate the OpenAPI document for a populated registry."""
    return DocumentGenerator(registry).generate(info)
