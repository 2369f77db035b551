"""Default document metadata and output location."""

from pathlib import Path

from pydantic import BaseModel

# 3.1 rather than 3.0: nullable values are written as {"type": "null"} inside anyOf
OPENAPI_VERSION = "3.1.0"

# Generated files land in the package root, next to the docs package
DEFAULT_OUTPUT_DIR = Path(__file__).resolve().parent

OUTPUT_DIR_ENVVAR = "MOVIE_API_DOCS_DIR"


class Server(BaseModel):
    url: str
    description: str = ""


class DocumentInfo(BaseModel):
    """Top-level metadata merged into the generated document."""

    openapi: str = OPENAPI_VERSION
    title: str
    version: str
    description: str = ""
    servers: list[Server] = []


DEFAULT_INFO = DocumentInfo(
    title="Movie API",
    version="0.0.1",
    description="A simple API to manage movies",
    servers=[
        Server(url="http://localhost:3001", description="Local development server"),
        Server(url="https://movie-api.example.com", description="Production server"),
    ],
)
