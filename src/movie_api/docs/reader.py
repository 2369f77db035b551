"""Reads generated documents back from disk and compares them."""

import json
from pathlib import Path

import yaml

from movie_api.errors import DocumentReadError

HTTP_METHODS = ("get", "post", "put", "delete", "patch")


def load_document(file_path: Path) -> dict:
    """Load a YAML or JSON OpenAPI document.

    Raises DocumentReadError when the file cannot be read or parsed.
    """
    file_path = Path(file_path)
    try:
        text = file_path.read_text(encoding="utf-8")
        if file_path.suffix == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentReadError(file_path, str(e)) from e


def list_operations(document: dict) -> list[tuple[str, str]]:
    """Return (METHOD, route) pairs in document order."""
    operations = []
    for path, methods in document.get("paths", {}).items():
        for method in methods:
            if method.lower() in HTTP_METHODS:
                operations.append((method.upper(), path))
    return operations


def diff_documents(expected, actual, prefix: str = "") -> list[str]:
    """Return the dotted keys where two documents differ."""
    if isinstance(expected, dict) and isinstance(actual, dict):
        diffs = []
        for key in list(expected) + [k for k in actual if k not in expected]:
            child = f"{prefix}.{key}" if prefix else str(key)
            if key not in expected or key not in actual:
                diffs.append(child)
            else:
                diffs.extend(diff_documents(expected[key], actual[key], child))
        return diffs
    if isinstance(expected, list) and isinstance(actual, list) and len(expected) == len(actual):
        diffs = []
        for i, (e, a) in enumerate(zip(expected, actual)):
            diffs.extend(diff_documents(e, a, f"{prefix}[{i}]"))
        return diffs
    return [] if expected == actual else [prefix or "<root>"]
