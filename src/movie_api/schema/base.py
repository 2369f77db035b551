"""Declarative schema values used to describe request and response shapes.

Schemas are immutable tagged variants. The document generator walks them
to build the OpenAPI description; nothing here knows about OpenAPI itself.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

PrimitiveType = Literal["string", "integer", "number", "boolean", "null"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PrimitiveSchema(_Frozen):
    """A scalar value."""

    kind: Literal["primitive"] = "primitive"
    type: PrimitiveType
    description: str = ""
    example: Any = None
    constraints: dict = {}  # minimum, maximum, minLength, pattern, enum, etc.


class ObjectSchema(_Frozen):
    """An object with named properties. Properties wrapped in OptionalSchema are not required."""

    kind: Literal["object"] = "object"
    properties: dict[str, "Schema"]
    description: str = ""


class ArraySchema(_Frozen):
    kind: Literal["array"] = "array"
    items: "Schema"
    description: str = ""


class UnionSchema(_Frozen):
    kind: Literal["union"] = "union"
    variants: list["Schema"]
    description: str = ""


class OptionalSchema(_Frozen):
    kind: Literal["optional"] = "optional"
    inner: "Schema"


class SchemaRef(_Frozen):
    """Reference to a registered schema by its name."""

    kind: Literal["ref"] = "ref"
    name: str


Schema = Annotated[
    Union[PrimitiveSchema, ObjectSchema, ArraySchema, UnionSchema, OptionalSchema, SchemaRef],
    Field(discriminator="kind"),
]

for _model in (ObjectSchema, ArraySchema, UnionSchema, OptionalSchema):
    _model.model_rebuild()


# Shorthands for declaring schemas

def string(description: str = "", example: Any = None, **constraints) -> PrimitiveSchema:
    return PrimitiveSchema(type="string", description=description, example=example, constraints=constraints)


def integer(description: str = "", example: Any = None, **constraints) -> PrimitiveSchema:
    return PrimitiveSchema(type="integer", description=description, example=example, constraints=constraints)


def number(description: str = "", example: Any = None, **constraints) -> PrimitiveSchema:
    return PrimitiveSchema(type="number", description=description, example=example, constraints=constraints)


def null() -> PrimitiveSchema:
    return PrimitiveSchema(type="null")


def obj(**properties) -> ObjectSchema:
    return ObjectSchema(properties=properties)


def array_of(items, description: str = "") -> ArraySchema:
    return ArraySchema(items=items, description=description)


def union_of(*variants, description: str = "") -> UnionSchema:
    return UnionSchema(variants=list(variants), description=description)


def optional(inner) -> OptionalSchema:
    return OptionalSchema(inner=inner)


def ref(name: str) -> SchemaRef:
    return SchemaRef(name=name)
