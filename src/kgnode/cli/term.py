#!/usr/bin/env python3
"""
Term commands for the kgnode CLI.

Convert between bare IRIs and N-Triples tokens.
"""

import sys

import click
from rich.console import Console
from rich.markup import escape as markup_escape

from kgnode.common.errors import MalformedEscapeError, NodeSyntaxError
from kgnode.model.node import Iri, label, parse_node

err_console = Console(stderr=True)


@click.command(name="escape")
@click.argument("iris", nargs=-1, required=True)
@click.pass_context
def escape_cmd(ctx: click.Context, iris):
    """Print the N-Triples token for each bare IRI."""
    config = ctx.obj["config"]
    for raw in iris:
        node = Iri.from_iri(
            raw,
            repair_bracketed=config.repair_bracketed,
            ascii_only=config.ascii_only,
        )
        click.echo(node.data)


@click.command(name="label")
@click.argument("tokens", nargs=-1, required=True)
def label_cmd(tokens):
    """Print the bare label of each N-Triples term token."""
    for token in tokens:
        try:
            click.echo(label(parse_node(token)))
        except (MalformedEscapeError, NodeSyntaxError) as e:
            err_console.print(f"[red]Error:[/red] {markup_escape(str(e))}", highlight=False)
            sys.exit(1)
