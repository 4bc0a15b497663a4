#!/usr/bin/env python3
"""
Main CLI entry point for kgnode.

This module defines the main CLI group and imports all subcommands.
"""

import logging
from typing import Optional

import click

from kgnode.common import setup_logging
from kgnode.config import load_config

from .term import escape_cmd, label_cmd
from .sort import sort_cmd


@click.group()
@click.version_option(version="0.1.0", prog_name="kgnode")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Path to configuration file"
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output"
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress output except errors"
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], verbose: bool, quiet: bool):
    """
    kgnode - RDF term nodes in canonical N-Triples form.
    """
    ctx.ensure_object(dict)

    cfg = load_config(config)
    ctx.obj["config"] = cfg

    # Set up logging level
    if quiet:
        level = "ERROR"
    elif verbose:
        level = "DEBUG"
    else:
        level = cfg.log_level
    ctx.obj["log_level"] = level
    setup_logging(cfg.log_file, getattr(logging, level.upper(), logging.INFO))


cli.add_command(escape_cmd)
cli.add_command(label_cmd)
cli.add_command(sort_cmd)


if __name__ == "__main__":
    cli()
