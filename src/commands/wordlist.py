"""
Word List Commands

Loading and validation of extracted word list files.
"""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from core.exceptions import ValidationError, VocabDrillException
from quiz.models import WordList
from utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


def load_word_list(path: Path) -> WordList:
    """
    Read a word list JSON file in the extraction wire format.

    Raises:
        ValidationError: If the file is unreadable, not JSON, or not a valid word list
    """
    try:
        payload = json.loads(Path(path).read_text(encoding='utf-8'))
    except OSError as e:
        raise ValidationError(f"Cannot read word list {path}: {e}", field_name="path", invalid_value=str(path))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Word list {path} is not valid JSON: {e}", field_name="path", invalid_value=str(path))

    # Accept the raw API envelope ({"status": "ok", "extracted": {...}}) as well
    if isinstance(payload, dict) and 'extracted' in payload:
        payload = payload['extracted']

    return WordList.from_payload(payload)


@click.command()
@click.argument('wordlist', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--show/--no-show', default=True, help='List the word pairs')
def validate(wordlist, show):
    """Validate a word list file.

    \b
    EXAMPLES:

    vocab validate words.json
    vocab validate words.json --no-show
    """
    try:
        word_list = load_word_list(wordlist)
    except VocabDrillException as e:
        console.print(Panel(f"[red]{escape(str(e))}[/red]", title="Invalid word list", border_style="red"))
        logger.error(f"Word list validation failed for {wordlist}: {e}")
        sys.exit(1)

    if show:
        table = Table(title=f"{word_list.language_a.upper()} -> {word_list.language_b.upper()}")
        table.add_column("#", justify="right", style="dim")
        table.add_column(word_list.language_a, style="cyan")
        table.add_column(word_list.language_b, style="green")
        for i, pair in enumerate(word_list.items, 1):
            table.add_row(str(i), escape(pair.a), escape(" / ".join(pair.b)))
        console.print(table)

    console.print(f"[green]Valid word list with {len(word_list.items)} pairs[/green]")
