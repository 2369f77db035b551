"""Request and response shapes of the movie service."""

from movie_api.schema.base import PrimitiveSchema, array_of, integer, null, number, obj, optional, string, union_of


def _movie_fields() -> dict:
    return {
        "name": string("Movie name", example="Inception", minLength=1),
        "year": integer("Release year", example=2010, minimum=1900, maximum=2024),
        "rating": number("Rating", example=7.5),
        "director": string("Movie director", example="Christopher Nolan", minLength=1),
    }


def _status() -> PrimitiveSchema:
    return integer("HTTP status code", example=200)


MovieSchema = obj(
    id=integer("Movie ID", example=1),
    **_movie_fields(),
)

CreateMovieSchema = obj(
    id=optional(integer("Movie ID", example=1)),
    **_movie_fields(),
)

CreateMovieResponseSchema = obj(
    status=_status(),
    data=MovieSchema,
    error=optional(string("Error message, if any")),
)

GetMovieResponseUnionSchema = union_of(
    obj(
        status=_status(),
        data=array_of(MovieSchema),
        error=optional(string("Error message, if any")),
    ),
    obj(
        status=_status(),
        data=union_of(MovieSchema, null()),
        error=optional(string("Error message, if any")),
    ),
)

MovieNotFoundResponseSchema = obj(
    status=integer("HTTP status code", example=404),
    error=string("Error message", example="Movie with ID 999 not found"),
)

DeleteMovieResponseSchema = obj(
    status=_status(),
    message=string("Confirmation message", example="Movie 1 has been deleted"),
)

ConflictMovieResponseSchema = obj(
    status=integer("HTTP status code", example=409),
    error=string("Error message", example="Movie Inception already exists"),
)

UpdateMovieSchema = obj(**{k: optional(v) for k, v in _movie_fields().items()})

UpdateMovieResponseSchema = obj(
    status=_status(),
    data=MovieSchema,
    error=optional(string("Error message, if any")),
)
