"""Route declarations of the movie service."""

from movie_api.docs.registry import ApiRegistry, Param, PathRegistration, Response
from movie_api.schema.base import obj, string
from movie_api.schema.movies import (
    ConflictMovieResponseSchema,
    CreateMovieResponseSchema,
    CreateMovieSchema,
    DeleteMovieResponseSchema,
    GetMovieResponseUnionSchema,
    MovieNotFoundResponseSchema,
    UpdateMovieResponseSchema,
    UpdateMovieSchema,
)

MOVIE_ID_PARAM = Param(
    name="id",
    location="path",
    required=True,
    param_type="string",
    description="Movie ID",
)

MOVIE_NAME_PARAM = Param(
    name="name",
    location="query",
    required=False,
    param_type="string",
    description="Movie name to search for",
)

MOVIE_SCHEMAS = {
    "CreateMovieRequest": CreateMovieSchema,
    "CreateMovieResponse": CreateMovieResponseSchema,
    "GetMovieResponse": GetMovieResponseUnionSchema,
    "MovieNotFoundResponse": MovieNotFoundResponseSchema,
    "DeleteMovieResponse": DeleteMovieResponseSchema,
    "ConflictMovieResponse": ConflictMovieResponseSchema,
    "UpdateMovieRequest": UpdateMovieSchema,
    "UpdateMovieResponse": UpdateMovieResponseSchema,
}

NOT_FOUND = Response(description="Movie not found", content=MovieNotFoundResponseSchema)

HEALTH_CHECK = PathRegistration(
    method="get",
    path="/",
    summary="Health check",
    responses={
        200: Response(
            description="Server is running",
            content=obj(messages=string(example="Server is running")),
        ),
    },
)

MOVIE_ROUTES = [
    PathRegistration(
        method="get",
        path="/movies",
        summary="Get all movies or filter by name",
        description="Retrieve a list of all movies. Optionally, provide a query parameter to filter by name.",
        parameters=[MOVIE_NAME_PARAM],
        responses={
            200: Response(
                description="List of movies or a specific movie if the name query is provided",
                content=GetMovieResponseUnionSchema,
            ),
            404: Response(
                description="Movie not found if the name is provided and does not match any movie",
                content=MovieNotFoundResponseSchema,
            ),
        },
    ),
    PathRegistration(
        method="get",
        path="/movies/{id}",
        summary="Get a movie by ID",
        description="Retrieve a single movie by its ID",
        parameters=[MOVIE_ID_PARAM],
        responses={
            200: Response(description="Movie data", content=GetMovieResponseUnionSchema),
            404: NOT_FOUND,
        },
    ),
    PathRegistration(
        method="post",
        path="/movies",
        summary="Create a new movie",
        description="Create a new movie in the system",
        request_body=CreateMovieSchema,
        responses={
            200: Response(description="Movie created successfully", content=CreateMovieResponseSchema),
            400: Response(description="Invalid request body"),
            409: Response(description="Movie already exists", content=ConflictMovieResponseSchema),
            500: Response(description="Unexpected error"),
        },
    ),
    PathRegistration(
        method="delete",
        path="/movies/{id}",
        summary="Delete a movie by ID",
        description="Delete a movie by its ID",
        parameters=[MOVIE_ID_PARAM],
        responses={
            200: Response(description="Movie deleted successfully", content=DeleteMovieResponseSchema),
            404: NOT_FOUND,
        },
    ),
    PathRegistration(
        method="put",
        path="/movies/{id}",
        summary="Update a movie by ID",
        description="Update a movie by its ID",
        parameters=[MOVIE_ID_PARAM],
        request_body=UpdateMovieSchema,
        responses={
            200: Response(description="Movie updated successfully", content=UpdateMovieResponseSchema),
            404: NOT_FOUND,
            500: Response(description="Unexpected error"),
        },
    ),
]


def build_movie_registry() -> ApiRegistry:
    """Build a fresh registry holding every movie schema and route."""
    registry = ApiRegistry()
    for name, schema in MOVIE_SCHEMAS.items():
        registry.register(name, schema)

    registry.register_path(HEALTH_CHECK)
    for route in MOVIE_ROUTES:
        registry.register_path(route)
    return registry
