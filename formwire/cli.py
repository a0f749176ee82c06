"""CLI for formwire form-data transcoding."""

import logging
from pathlib import Path
from typing import Annotated

import jsonschema
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from formwire import __version__
from formwire.config import AttributeOptions, DecodeConfig, EmptyValuePolicy
from formwire.decoding import decode_form_data
from formwire.io import load_schema_tree, read_json, read_submission
from formwire.schema import get_validation_attributes
from formwire.serialization import canonicalize, serialize_form_data
from formwire.validation import aggregate_issues, issues_from_jsonschema

app = typer.Typer(
    name="formwire",
    help="Decode, flatten and check browser form submissions.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"formwire version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """formwire: form-data transcoding and input constraint extraction."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command()
def decode(
    input_path: Annotated[
        Path,
        typer.Argument(help="Submission file (urlencoded, or JSON [key, value] pairs)"),
    ],
    empty_value: Annotated[
        EmptyValuePolicy,
        typer.Option(
            "--empty-value",
            "-e",
            envvar="FORMWIRE_EMPTY_VALUE",
            help="What empty text values decode to",
        ),
    ] = EmptyValuePolicy.UNDEFINED,
    strict_paths: Annotated[
        bool,
        typer.Option("--strict-paths", help="Fail when a dotted key collides with a value"),
    ] = False,
    flatten: Annotated[
        bool,
        typer.Option("--flatten", "-f", help="Print the flattened redisplay form"),
    ] = False,
) -> None:
    """Decode a submission into nested JSON.

    Empty values decoded as 'undefined' are omitted from the output.
    """
    config = DecodeConfig(
        empty_value=empty_value,
        on_conflict="raise" if strict_paths else "overwrite",
    )
    try:
        decoded = decode_form_data(read_submission(input_path), config)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    output = serialize_form_data(decoded) if flatten else canonicalize(decoded)
    console.print_json(data=output)


@app.command()
def flatten(
    input_path: Annotated[Path, typer.Argument(help="JSON document to flatten")],
) -> None:
    """Flatten a JSON document into dot-path keys."""
    try:
        data = read_json(input_path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print_json(data=serialize_form_data(data))


@app.command()
def attrs(
    schema_path: Annotated[Path, typer.Argument(help="Schema tree JSON file")],
    field: Annotated[str, typer.Argument(help="Dot-path of the field")],
    infer_type: Annotated[
        bool,
        typer.Option("--infer-type", "-t", help="Include the input type hint"),
    ] = False,
) -> None:
    """Print the native input attributes for a schema field."""
    try:
        tree = load_schema_tree(schema_path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    result = get_validation_attributes(
        tree, field, AttributeOptions(infer_type_hint=infer_type)
    )
    console.print_json(data=result.model_dump())


@app.command()
def check(
    input_path: Annotated[
        Path,
        typer.Argument(help="Submission file (urlencoded, or JSON [key, value] pairs)"),
    ],
    schema_path: Annotated[
        Path,
        typer.Option("--schema", "-s", help="JSON Schema to validate against"),
    ],
    empty_value: Annotated[
        EmptyValuePolicy,
        typer.Option("--empty-value", "-e", envvar="FORMWIRE_EMPTY_VALUE"),
    ] = EmptyValuePolicy.UNDEFINED,
) -> None:
    """Validate a decoded submission against a JSON Schema."""
    try:
        decoded = decode_form_data(read_submission(input_path), empty_value)
        schema = read_json(schema_path)
        errors = aggregate_issues(issues_from_jsonschema(schema, decoded))
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except jsonschema.SchemaError as e:
        console.print(f"[red]Invalid schema:[/red] {e.message}")
        raise typer.Exit(1)

    if not errors:
        console.print(f"[green]Valid:[/green] {input_path}")
        return

    table = Table(title=f"Invalid: {input_path}")
    table.add_column("Field", style="bold")
    table.add_column("Messages")
    for field_path, messages in errors.items():
        table.add_row(field_path, "\n".join(messages))
    console.print(table)
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
