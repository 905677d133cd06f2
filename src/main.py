"""
CLI Entry Point

Main command-line interface for the vocab-drill word list trainer
using Click framework with rich output formatting.
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from core.config import get_config, reload_config
from core.exceptions import VocabDrillException
from utils.logging import setup_logging, get_logger

from commands import check, hint, extract, quiz, validate
from commands.config import show as config_show

console = Console()
logger = get_logger(__name__)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.pass_context
def cli(ctx, config, verbose, debug):
    """vocab-drill - Practice photographed word lists"""
    ctx.ensure_object(dict)

    try:
        if config:
            app_config = reload_config(Path(config))
        else:
            app_config = get_config()

        if debug:
            app_config.debug = debug

        if verbose or debug:
            app_config.logging.level = 'DEBUG'
        setup_logging(app_config)

        ctx.obj['config'] = app_config

    except VocabDrillException as e:
        console.print(f"[red]Error initializing application: {escape(str(e))}[/red]")
        sys.exit(1)


# ===== CONFIG COMMANDS =====

@cli.group()
def config():
    """Configuration management commands."""
    pass


config.add_command(config_show)


# ===== TOP-LEVEL COMMANDS =====

cli.add_command(check)
cli.add_command(hint)
cli.add_command(validate)
cli.add_command(quiz)
cli.add_command(extract)


def main():
    """Main entry point with comprehensive error handling."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except VocabDrillException as e:
        logger.error(f"Application error: {str(e)}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
