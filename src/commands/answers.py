"""
Answer Commands

Check a typed answer against reference translations and show hints.
"""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.exceptions import VocabDrillException
from evaluation.hints import MAX_HINT_LEVEL, hint_for_level
from evaluation.matcher import AnswerMatcher, MatchKind
from evaluation.normalizer import normalize
from evaluation.phonetics import fold_phonetic
from utils.logging import get_logger

console = Console()
logger = get_logger(__name__)

KIND_STYLES = {
    MatchKind.EXACT: "green",
    MatchKind.APPROXIMATE: "yellow",
    MatchKind.REJECTED: "red",
}


@click.command()
@click.argument('answer')
@click.option('--reference', '-r', 'references', multiple=True, required=True,
              help='Acceptable answer (repeat for synonyms, in preference order)')
@click.option('--lang', '-l', default=None, help='Language tag of the answer, e.g. de')
@click.option('--explain', is_flag=True, help='Show normalized and folded forms')
@click.pass_context
def check(ctx, answer, references, lang, explain):
    """Check a typed answer against reference translations.

    \b
    EXAMPLES:

    vocab check Hund -r Hund --lang de
    vocab check fogell -r Vogel --lang de --explain
    vocab check lopen -r lopen -r wandelen
    """
    try:
        matcher = AnswerMatcher.from_config(ctx.obj['config'])
        verdict = matcher.evaluate(answer, list(references), lang)
    except VocabDrillException as e:
        console.print(f"[red]Error checking answer: {escape(str(e))}[/red]")
        logger.error(f"Answer check failed: {e}")
        sys.exit(1)

    style = KIND_STYLES[verdict.match_kind]
    console.print(f"[{style}]{verdict.match_kind.value.upper()}[/{style}]")

    if explain:
        table = Table(title="Comparison")
        table.add_column("Text", style="cyan")
        table.add_column("Normalized", style="magenta")
        table.add_column("Phonetic", style="green")

        for label, text in [("answer", answer)] + [(f"reference {i + 1}", r) for i, r in enumerate(references)]:
            normalized = normalize(text)
            table.add_row(f"{label}: {escape(text)}", escape(normalized),
                          escape(fold_phonetic(normalized, lang)))
        console.print(table)


@click.command()
@click.argument('word')
@click.option('--level', type=click.IntRange(1, MAX_HINT_LEVEL), default=None,
              help='Hint level (all levels when omitted)')
@click.pass_context
def hint(ctx, word, level):
    """Show progressive hints for a word.

    \b
    EXAMPLES:

    vocab hint vogel
    vocab hint schmetterling --level 2
    """
    hints = ctx.obj['config'].hints
    levels = [level] if level else range(1, MAX_HINT_LEVEL + 1)

    for current in levels:
        text = hint_for_level(word, current, partial_reveal=hints.partial_reveal,
                              mostly_reveal=hints.mostly_reveal, mask_char=hints.mask_char)
        console.print(f"[dim]Hint {current}:[/dim] {escape(text)}")
