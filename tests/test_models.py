import pytest
from pydantic import ValidationError

from movie_api.docs.registry import ApiRegistry, Param, PathRegistration, Response
from movie_api.schema.base import ObjectSchema, OptionalSchema, integer, obj, optional, ref, string


class TestSchema:
    def test_primitive_shorthand(self):
        s = string("Movie name", example="Inception", minLength=1)
        assert s.kind == "primitive"
        assert s.type == "string"
        assert s.constraints == {"minLength": 1}

    def test_object_keeps_property_order(self):
        s = obj(name=string(), year=integer(), id=optional(integer()))
        assert isinstance(s, ObjectSchema)
        assert list(s.properties) == ["name", "year", "id"]
        assert isinstance(s.properties["id"], OptionalSchema)

    def test_nested_schema_keeps_identity(self):
        inner = obj(name=string())
        outer = obj(data=inner)
        assert outer.properties["data"] is inner

    def test_schema_is_frozen(self):
        s = string()
        with pytest.raises(ValidationError):
            s.type = "integer"


class TestParam:
    def test_create_required_param(self):
        p = Param(name="id", location="path", required=True)
        assert p.param_type == "string"
        assert p.description == ""

    def test_param_is_immutable(self):
        p = Param(name="name", location="query", required=False)
        with pytest.raises(ValidationError):
            p.required = True

    def test_invalid_location(self):
        with pytest.raises(ValidationError):
            Param(name="id", location="body", required=True)


class TestPathRegistration:
    def test_minimal_registration(self):
        reg = PathRegistration(
            method="get",
            path="/",
            responses={200: Response(description="ok")},
        )
        assert reg.parameters == []
        assert reg.request_body is None
        assert reg.label == "GET /"

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError):
            PathRegistration(method="head", path="/", responses={})

    def test_response_content_keeps_identity(self):
        schema = obj(status=integer())
        reg = PathRegistration(
            method="post",
            path="/movies",
            request_body=schema,
            responses={200: Response(description="ok", content=schema)},
        )
        assert reg.request_body is schema
        assert reg.responses[200].content is schema

    def test_ref_content(self):
        response = Response(description="ok", content=ref("Movie"))
        assert response.content.name == "Movie"


class TestApiRegistry:
    def test_register_last_write_wins(self):
        registry = ApiRegistry()
        first, second = string(), integer()
        registry.register("Thing", first)
        registry.register("Thing", second)
        assert registry.schemas == {"Thing": second}

    def test_register_path_keeps_order(self):
        registry = ApiRegistry()
        for path in ("/b", "/a", "/c"):
            registry.register_path(PathRegistration(method="get", path=path, responses={}))
        assert [p.path for p in registry.paths] == ["/b", "/a", "/c"]

    def test_registries_are_independent(self):
        a, b = ApiRegistry(), ApiRegistry()
        a.register("X", string())
        assert b.schemas == {}
