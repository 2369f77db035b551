"""Validates rendered document files before they are written."""

import json

import yaml


def parse_rendering(filename: str, content: str):
    """Parse a rendering according to its file extension."""
    if filename.endswith(".json"):
        return json.loads(content)
    if filename.endswith((".yaml", ".yml")):
        return yaml.safe_load(content)
    raise ValueError(f"Unsupported rendering: {filename}")


def validate_files(files: dict[str, str], document: dict) -> dict[str, str]:
    """Check that every rendering parses and matches the generated document.

    Returns dict of {filename: error_message} for files with errors.
    """
    errors = {}
    for filename, content in files.items():
        try:
            parsed = parse_rendering(filename, content)
        except json.JSONDecodeError as e:
            errors[filename] = f"JSONDecodeError: {e.msg} (line {e.lineno})"
            continue
        except yaml.YAMLError as e:
            errors[filename] = f"YAMLError: {e}"
            continue
        if parsed != document:
            errors[filename] = "Rendered content does not match the generated document"
    return errors
