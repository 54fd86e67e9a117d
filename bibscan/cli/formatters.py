"""Output formatters for parsed documents."""

import json

import yaml
from rich.box import ROUNDED
from rich.console import Group
from rich.markup import escape
from rich.table import Table

from bibscan.core.models import Bibliography, Document


def format_document_json(document: Document, pretty: bool = True) -> str:
    """Format a document as JSON."""
    if pretty:
        return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    return json.dumps(document.to_dict(), ensure_ascii=False)


def format_document_yaml(document: Document) -> str:
    """Format a document as YAML."""
    return yaml.safe_dump(
        document.to_dict(),
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )


def format_bibliography_table(bibliography: Bibliography) -> Table:
    """Format one bibliography entry as a two-column table."""
    table = Table(
        title=escape(f"@{bibliography.entry_type}{{{bibliography.citation_key}}}"),
        box=ROUNDED,
        show_header=True,
        header_style="bold cyan",
        title_style="bold",
    )
    table.add_column("Tag", style="green", no_wrap=True)
    table.add_column("Value")

    for tag in bibliography.tags:
        table.add_row(escape(tag.key), escape(tag.value))

    return table


def format_document_table(document: Document) -> Group:
    """Format a document as Rich tables, one section per construct kind."""
    renderables = []

    if document.preambles or document.comments:
        table = Table(
            title="Preambles and comments", box=ROUNDED, header_style="bold cyan"
        )
        table.add_column("Kind", style="dim", width=9)
        table.add_column("Text")
        for preamble in document.preambles:
            table.add_row("preamble", escape(preamble))
        for comment in document.comments:
            table.add_row("comment", escape(comment))
        renderables.append(table)

    if document.variables:
        table = Table(title="String variables", box=ROUNDED, header_style="bold cyan")
        table.add_column("Key", style="green", no_wrap=True)
        table.add_column("Value")
        for variable in document.variables:
            table.add_row(escape(variable.key), escape(variable.value))
        renderables.append(table)

    for bibliography in document.bibliographies:
        renderables.append(format_bibliography_table(bibliography))

    return Group(*renderables)


def format_summary(document: Document) -> str:
    """One-line count of each construct kind."""
    return (
        f"{len(document.bibliographies)} entries, "
        f"{len(document.variables)} variables, "
        f"{len(document.preambles)} preambles, "
        f"{len(document.comments)} comments"
    )
