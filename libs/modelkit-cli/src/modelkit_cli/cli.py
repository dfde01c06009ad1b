"""Modelkit CLI — Typer-based inspection of saved model schema snapshots."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from modelkit_core import ModelSchema, ModelSchemaError, load_schema
from modelkit_core.serialization import diff_schemas, schema_fingerprint

app = typer.Typer(name="modelkit", help="Modelkit CLI — inspect and compare canonical model schemas.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Inspect and compare model schema snapshots."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_or_exit(path: Path) -> ModelSchema:
    """Load a snapshot, exiting with an error if it is missing or invalid."""
    if not path.is_file():
        typer.echo(f"Schema snapshot not found: {path}", err=True)
        raise typer.Exit(code=1)
    try:
        return load_schema(path)
    except ModelSchemaError as exc:
        typer.echo(f"Invalid schema snapshot: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _describe_field(schema: ModelSchema, name: str) -> str:
    field = schema.fields[name]
    markers = []
    if field.is_primary_key:
        markers.append("pk")
    if field.is_foreign_key():
        markers.append(f"fk -> {field.relationship.target_model}")  # type: ignore[union-attr]
    if field.is_connected():
        markers.append(f"{field.connection.relationship.value} -> {field.connection.connection_target}")  # type: ignore[union-attr]
    suffix = f"  [{', '.join(markers)}]" if markers else ""
    target = f" as {field.target_name}" if field.target_name != field.name else ""
    return f"  {field.name}{target}: {field.declared_type.value}{suffix}"


@app.command()
def show(
    snapshot: Path = typer.Argument(..., help="Path to a schema snapshot written by save_schema."),
) -> None:
    """Print a schema's fields in canonical order."""
    schema = _load_or_exit(snapshot)

    typer.echo(f"Model: {schema.name} (target: {schema.target_model_name})")
    typer.echo(f"Fingerprint: {schema_fingerprint(schema)}")
    typer.echo("Fields:")
    for name in schema.field_names():
        typer.echo(_describe_field(schema, name))

    pk = schema.primary_key()
    typer.echo(f"Primary key: {pk.name if pk else '-'}")
    typer.echo(f"Foreign keys: {', '.join(f.name for f in schema.foreign_keys()) or '-'}")
    typer.echo(f"Connections: {', '.join(f.name for f in schema.connections()) or '-'}")
    if not schema.model_index.is_empty():
        index = schema.model_index
        typer.echo(f"Index: {index.index_name or '-'} ({', '.join(index.index_field_names)})")


@app.command()
def diff(
    old: Path = typer.Argument(..., help="Previous schema snapshot."),
    new: Path = typer.Argument(..., help="Current schema snapshot."),
) -> None:
    """Compare two schema snapshots. Exits with code 2 when they differ."""
    old_schema = _load_or_exit(old)
    new_schema = _load_or_exit(new)

    result = diff_schemas(old_schema, new_schema)
    if not result.has_changes:
        typer.echo("No changes.")
        return

    for name in result.added:
        typer.echo(f"+ {name}")
    for name in result.removed:
        typer.echo(f"- {name}")
    for name in result.changed:
        typer.echo(f"~ {name}")
    if result.order_changed:
        typer.echo("Canonical order changed.")
    if result.index_changed:
        typer.echo("Index changed.")
    raise typer.Exit(code=2)
