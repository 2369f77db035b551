import json
from unittest.mock import patch

from click.testing import CliRunner

from movie_api.cli import main
from movie_api.docs.registry import ApiRegistry, PathRegistration, Response
from movie_api.docs.writer import JSON_FILENAME, YAML_FILENAME
from movie_api.schema.base import ref


def _dangling_registry() -> ApiRegistry:
    registry = ApiRegistry()
    registry.register_path(
        PathRegistration(
            method="get",
            path="/movies/{id}",
            responses={200: Response(description="ok", content=ref("Y"))},
        )
    )
    return registry


class TestCliGenerate:
    def test_generate_writes_files(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "-o", str(tmp_path)])

        assert result.exit_code == 0
        assert "Found 6 operations." in result.output
        assert "OpenAPI document generated in YAML format" in result.output
        assert "OpenAPI document generated in JSON format" in result.output
        doc = json.loads((tmp_path / JSON_FILENAME).read_text(encoding="utf-8"))
        assert doc["info"]["title"] == "Movie API"

    def test_generate_uses_envvar(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["generate"], env={"MOVIE_API_DOCS_DIR": str(tmp_path)})
        assert result.exit_code == 0
        assert (tmp_path / YAML_FILENAME).exists()

    @patch("movie_api.cli.build_movie_registry", _dangling_registry)
    def test_generate_dangling_reference_fails(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert "'Y'" in result.output
        assert "GET /movies/{id}" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_generate_unwritable_output(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "-o", str(blocker / "out")])
        assert result.exit_code == 1
        assert "Cannot write" in result.output


class TestCliCheck:
    def test_check_up_to_date(self, tmp_path):
        runner = CliRunner()
        runner.invoke(main, ["generate", "-o", str(tmp_path)])
        result = runner.invoke(main, ["check", "-o", str(tmp_path)])
        assert result.exit_code == 0
        assert "up to date" in result.output

    def test_check_stale(self, tmp_path):
        runner = CliRunner()
        runner.invoke(main, ["generate", "-o", str(tmp_path)])
        json_path = tmp_path / JSON_FILENAME
        doc = json.loads(json_path.read_text(encoding="utf-8"))
        doc["info"]["version"] = "9.9.9"
        json_path.write_text(json.dumps(doc), encoding="utf-8")

        result = runner.invoke(main, ["check", "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "openapi.json: info.version differs" in result.output

    def test_check_missing_files(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["check", "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "Missing" in result.output

    def test_check_corrupt_json(self, tmp_path):
        runner = CliRunner()
        runner.invoke(main, ["generate", "-o", str(tmp_path)])
        (tmp_path / JSON_FILENAME).write_text('{"openapi": ', encoding="utf-8")

        result = runner.invoke(main, ["check", "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "openapi.json: unreadable" in result.output
        assert "out of date" in result.output

    def test_check_corrupt_yaml(self, tmp_path):
        runner = CliRunner()
        runner.invoke(main, ["generate", "-o", str(tmp_path)])
        (tmp_path / YAML_FILENAME).write_text("key: [broken", encoding="utf-8")

        result = runner.invoke(main, ["check", "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "openapi.yaml: unreadable" in result.output


class TestCliRoutes:
    def test_routes(self):
        runner = CliRunner()
        result = runner.invoke(main, ["routes"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 6
        assert lines[0].split() == ["GET", "/"]
        assert lines[-1].split() == ["PUT", "/movies/{id}"]
