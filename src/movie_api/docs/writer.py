"""Writes the generated document as YAML and JSON."""

import json
from pathlib import Path

import yaml

from movie_api.config import DEFAULT_OUTPUT_DIR
from movie_api.docs.validator import validate_files
from movie_api.errors import FileWriteError, MovieApiDocsError

YAML_FILENAME = "openapi.yaml"
JSON_FILENAME = "openapi.json"


def render_yaml(document: dict) -> str:
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


def render_json(document: dict) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def render(document: dict) -> dict[str, str]:
    """Render both representations, returns {filename: content}."""
    return {
        YAML_FILENAME: render_yaml(document),
        JSON_FILENAME: render_json(document),
    }


def write(document: dict, output_dir: Path = DEFAULT_OUTPUT_DIR) -> list[Path]:
    """Render, validate and write both files. Returns the written paths.

    Both files are rendered and checked before either is written.
    """
    files = render(document)
    errors = validate_files(files, document)
    if errors:
        details = "; ".join(f"{name}: {msg}" for name, msg in errors.items())
        raise MovieApiDocsError(f"Rendered document is invalid: {details}")

    written = []
    for filename, content in files.items():
        path = Path(output_dir) / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as fh:
                fh.write(content)
        except OSError as e:
            raise FileWriteError(path, e.strerror or str(e)) from e
        written.append(path)
    return written
