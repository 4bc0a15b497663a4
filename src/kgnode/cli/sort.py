#!/usr/bin/env python3
"""
Sort command for the kgnode CLI.

Reads one N-Triples term token per line and prints them deduplicated in
canonical order.
"""

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape as markup_escape
from rich.table import Table

from kgnode.backend.memory import NodeSet
from kgnode.common.errors import MalformedEscapeError, NodeSyntaxError
from kgnode.model.node import label, parse_node

logger = logging.getLogger(__name__)

# Initialize Rich console for pretty output
console = Console()
err_console = Console(stderr=True)


def read_nodes(lines) -> NodeSet:
    nodes = NodeSet()
    for lineno, line in enumerate(lines, start=1):
        token = line.strip()
        if not token or token.startswith("#"):
            continue
        try:
            nodes.add(parse_node(token))
        except NodeSyntaxError as e:
            raise click.ClickException(f"line {lineno}: {e}")
    logger.info(f"Read {len(nodes)} distinct nodes")
    return nodes


@click.command(name="sort")
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--table", "as_table", is_flag=True, help="Show kind, token and label as a table")
def sort_cmd(file, as_table: bool):
    """Print the term tokens of FILE (or stdin) sorted and deduplicated."""
    nodes = read_nodes(file)

    if not as_table:
        for node in nodes:
            click.echo(node.data)
        return

    table = Table()
    table.add_column("Kind", style="cyan")
    table.add_column("Token", style="green")
    table.add_column("Label", style="yellow")
    for node in nodes:
        try:
            node_label = label(node)
        except MalformedEscapeError as e:
            err_console.print(f"[red]Error:[/red] {markup_escape(str(e))}", highlight=False)
            sys.exit(1)
        table.add_row(type(node).__name__, markup_escape(node.data), markup_escape(node_label))
    console.print(table)
    summary = ", ".join(f"{kind}: {n}" for kind, n in sorted(nodes.counts().items()))
    console.print(f"[bold]{len(nodes)} nodes[/bold] ({summary})")
