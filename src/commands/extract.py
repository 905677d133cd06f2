"""
Extract Command

Extract a word list from a photo with the vision model.
"""

import asyncio
import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from core.exceptions import RateLimitError, VocabDrillException
from extraction.client import ANONYMOUS_CLIENT, VisionExtractor
from utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.argument('image', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the word list JSON to this file')
@click.option('--client-id', default=ANONYMOUS_CLIENT, help='Identity used for request throttling')
@click.pass_context
def extract(ctx, image, output, client_id):
    """Extract word pairs from a photo of a word list.

    \b
    EXAMPLES:

    vocab extract page12.jpg
    vocab extract page12.jpg -o words.json

    \b
    Requires OPENROUTER_API_KEY in the environment or in .env.
    """
    config = ctx.obj['config']

    async def run_extraction():
        async with VisionExtractor(config=config) as extractor:
            return await extractor.extract_file(image, client_id=client_id)

    try:
        with console.status("[blue]Reading word list from photo...[/blue]"):
            word_list = asyncio.run(run_extraction())
    except RateLimitError as e:
        console.print(f"[yellow]{escape(e.message)}[/yellow]")
        sys.exit(1)
    except VocabDrillException as e:
        console.print(f"[red]Extraction failed: {escape(str(e))}[/red]")
        logger.error(f"Extraction failed for {image}: {e}")
        sys.exit(1)

    payload = json.dumps(word_list.to_payload(), ensure_ascii=False, indent=2)
    if output:
        output.write_text(payload + "\n", encoding='utf-8')
        console.print(f"[green]Saved {len(word_list.items)} word pairs to {output}[/green]")
    else:
        click.echo(payload)
