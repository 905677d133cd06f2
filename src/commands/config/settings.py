"""
Configuration Settings Commands

This module contains the configuration display command implementation.
"""

import json
from dataclasses import asdict

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from utils.logging import get_logger

console = Console()
logger = get_logger(__name__)

SECTIONS = ('matching', 'hints', 'quiz', 'extraction', 'logging')


@click.command()
@click.option('--format', type=click.Choice(['table', 'json', 'yaml']), default='table', help='Output format')
@click.pass_context
def show(ctx, format):
    """Show current configuration.

    \b
    EXAMPLES:

    vocab config show
    vocab config show --format json
    vocab config show --format yaml
    """
    config = ctx.obj.get('config')
    if not config:
        console.print("[red]Configuration not available[/red]")
        return

    config_dict = asdict(config)

    if format == 'json':
        click.echo(json.dumps(config_dict, indent=2))
    elif format == 'yaml':
        click.echo(yaml.safe_dump(config_dict, sort_keys=False))
    else:
        table = Table(title="Configuration")
        table.add_column("Section", style="cyan")
        table.add_column("Setting", style="magenta")
        table.add_column("Value", style="green")

        table.add_row("app", "name", config.name)
        table.add_row("app", "version", config.version)
        table.add_row("app", "debug", str(config.debug))

        for section in SECTIONS:
            for key, value in config_dict[section].items():
                table.add_row(section, key, escape(str(value)))

        console.print(table)
