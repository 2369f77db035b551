"""Schema registry and path registrations.

A registry is an explicit value: callers build one, fill it and hand it to
the generator. It performs no validation; dangling references surface only
when the document is generated.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from movie_api.schema.base import Schema

HttpMethod = Literal["get", "post", "put", "delete", "patch"]


class Param(BaseModel):
    """A single request parameter (query, path, header, or cookie)."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: Literal["path", "query", "header", "cookie"]
    required: bool
    param_type: str = "string"  # string / integer / number / boolean
    description: str = ""


class Response(BaseModel):
    """Description of one status code, with an optional JSON body."""

    model_config = ConfigDict(frozen=True)

    description: str
    content: Schema | None = None


class PathRegistration(BaseModel):
    """One REST operation."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str  # /movies/{id}
    summary: str = ""
    description: str = ""
    parameters: list[Param] = []
    request_body: Schema | None = None
    responses: dict[int, Response]

    @property
    def label(self) -> str:
        return f"{self.method.upper()} {self.path}"


class ApiRegistry:
    """Named schemas plus the ordered list of path registrations."""

    def __init__(self):
        self.schemas: dict[str, Schema] = {}
        self.paths: list[PathRegistration] = []

    def register(self, name: str, schema: Schema) -> None:
        """Register a schema under a name. Re-registering a name replaces it."""
        self.schemas[name] = schema

    def register_path(self, registration: PathRegistration) -> None:
        self.paths.append(registration)
