"""CLI entry point for movie-api-docs."""

from pathlib import Path

import click

from movie_api.config import DEFAULT_OUTPUT_DIR, OUTPUT_DIR_ENVVAR
from movie_api.docs.generator import generate
from movie_api.docs.paths import build_movie_registry
from movie_api.docs.reader import diff_documents, list_operations, load_document
from movie_api.docs.writer import JSON_FILENAME, YAML_FILENAME, write
from movie_api.errors import DocumentReadError, MovieApiDocsError


def _output_option(f):
    return click.option(
        "-o", "--output",
        default=DEFAULT_OUTPUT_DIR,
        envvar=OUTPUT_DIR_ENVVAR,
        show_default=True,
        type=click.Path(file_okay=False, path_type=Path),
        help="Directory holding openapi.yaml and openapi.json.",
    )(f)


def _build_document() -> dict:
    try:
        return generate(build_movie_registry())
    except MovieApiDocsError as e:
        raise click.ClickException(str(e)) from e


@click.group()
def main():
    """Movie API docs: generate the OpenAPI description of the movie service."""
    pass


@main.command(name="generate")
@_output_option
def generate_cmd(output: Path):
    """Generate openapi.yaml and openapi.json."""
    click.echo("Generating OpenAPI document...")
    document = _build_document()
    click.echo(f"Found {len(list_operations(document))} operations.")

    try:
        yaml_path, json_path = write(document, output)
    except MovieApiDocsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"OpenAPI document generated in YAML format: {yaml_path}")
    click.echo(f"OpenAPI document generated in JSON format: {json_path}")


@main.command()
@_output_option
def check(output: Path):
    """Fail if the generated files on disk are out of date."""
    document = _build_document()

    stale = False
    for filename in (YAML_FILENAME, JSON_FILENAME):
        file_path = output / filename
        if not file_path.exists():
            click.echo(f"  Missing {file_path}")
            stale = True
            continue
        try:
            on_disk = load_document(file_path)
        except DocumentReadError as e:
            click.echo(f"  {filename}: unreadable ({e.reason})")
            stale = True
            continue
        diffs = diff_documents(document, on_disk)
        for key in diffs:
            click.echo(f"  {filename}: {key} differs")
        stale = stale or bool(diffs)

    if stale:
        raise click.ClickException("OpenAPI documents are out of date, run 'movie-api-docs generate'")
    click.echo("OpenAPI documents are up to date.")


@main.command()
def routes():
    """List the registered operations."""
    document = _build_document()
    for method, path in list_operations(document):
        click.echo(f"{method:<7} {path}")
