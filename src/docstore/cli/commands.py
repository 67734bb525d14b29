"""CLI command implementations"""

import json
import logging
from typing import Annotated, Optional

import typer
import yaml
from pydantic import ValidationError

from docstore.config import Settings, load_config
from docstore.core.seed import load_store
from docstore.crud.memory_repo import DocumentStore
from docstore.models import Document, SearchRequest


DataFileOpt = Annotated[Optional[str], typer.Option("--data-file", help="YAML file of documents to load")]
FormatOpt = Annotated[Optional[str], typer.Option("--format", help="Output format: json or yaml")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Verbose logging")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _store(settings: Settings) -> DocumentStore:
    try:
        return load_store(settings.data_file)
    except ValueError as e:
        _fail(str(e))


def _dump(payload, output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True).rstrip()
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _serialize(doc: Document) -> dict:
    return doc.model_dump(mode="json")


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Id of the document to print")],
    data_file: DataFileOpt = None,
    output_format: FormatOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Print a single document by id."""
    _setup_logging(verbose)
    settings = _settings(overrides={"data_file": data_file, "output_format": output_format})
    store = _store(settings)

    doc = store.find_by_id(doc_id)
    if doc is None:
        _fail(f"Document not found: {doc_id}")
    typer.echo(_dump(_serialize(doc), settings.output_format))


def search_cmd(
    data_file: DataFileOpt = None,
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", "-t", help="Title prefix (repeatable, OR)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", "-c", help="Content substring (repeatable, OR)")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author", "-a", help="Author id (repeatable, OR)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--from", help="Earliest creation time, ISO-8601, inclusive (UTC if no offset)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--to", help="Latest creation time, ISO-8601, inclusive (UTC if no offset)")] = None,
    output_format: FormatOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Print every document matching all given filters."""
    _setup_logging(verbose)
    settings = _settings(overrides={"data_file": data_file, "output_format": output_format})

    try:
        request = SearchRequest(
            title_prefixes=title_prefixes,
            contains_contents=contains,
            author_ids=author_ids,
            created_from=created_from,
            created_to=created_to,
        )
    except ValidationError as e:
        _fail("Invalid search filters", e)

    store = _store(settings)
    results = store.search(request)
    typer.echo(_dump([_serialize(d) for d in results], settings.output_format))
    typer.echo(f"Found {len(results)} of {len(store)} document(s)", err=True)
