"""
Quiz Command

Interactive terminal quiz over a word list file.
"""

import random
import string
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from core.exceptions import VocabDrillException
from evaluation.matcher import AnswerMatcher
from quiz.builder import QuestionMode, QuizBuilder
from quiz.session import FeedbackKind, QuizSession
from utils.logging import get_logger
from .wordlist import load_word_list

console = Console()
logger = get_logger(__name__)

HINT_INPUT = "?"

FEEDBACK_STYLES = {
    FeedbackKind.CORRECT: "green",
    FeedbackKind.ALMOST: "yellow",
    FeedbackKind.WRONG: "red",
}

SERIES_TITLES = {
    QuestionMode.MULTIPLE_CHOICE: "Series 1 - Multiple choice",
    QuestionMode.MATCHING: "Series 2 - Find the pairs",
    QuestionMode.TYPED: "Series 3 - Type the answer",
}

TIER_MESSAGES = {
    "excellent": "Fantastic! You really practiced these words well.",
    "good": "Well done! One more round makes you even better.",
    "keep_practicing": "Good start! Practice helps you further.",
}


@click.command()
@click.argument('wordlist', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--scope', '-s', type=float, default=None,
              help='Share of the word list to practice (e.g. 0.3, 0.7, 1)')
@click.option('--seed', type=int, default=None, help='Random seed for a reproducible quiz')
@click.pass_context
def quiz(ctx, wordlist, scope, seed):
    """Practice a word list in the terminal.

    \b
    EXAMPLES:

    vocab quiz words.json
    vocab quiz words.json --scope 1
    vocab quiz words.json --scope 0.7 --seed 42

    \b
    Type ? on an open question to get a hint.
    """
    config = ctx.obj['config']
    scope = scope if scope is not None else config.quiz.default_scope

    if scope not in config.quiz.scopes:
        allowed = ", ".join(f"{s:g}" for s in config.quiz.scopes)
        console.print(f"[red]Scope must be one of: {allowed}[/red]")
        sys.exit(1)

    try:
        word_list = load_word_list(wordlist)
        rng = random.Random(seed if seed is not None else config.quiz.seed)
        questions = QuizBuilder.from_config(config, rng).build(word_list, scope)
        session = QuizSession(word_list, questions,
                              matcher=AnswerMatcher.from_config(config),
                              hint_config=config.hints)
    except VocabDrillException as e:
        console.print(f"[red]Error preparing quiz: {escape(str(e))}[/red]")
        logger.error(f"Quiz preparation failed for {wordlist}: {e}")
        sys.exit(1)

    console.print(Panel.fit(
        f"[bold]{word_list.language_a.upper()} -> {word_list.language_b.upper()}[/bold]\n"
        f"[dim]{len(session.questions)} questions[/dim]",
        title="Vocab Drill",
        border_style="blue"
    ))

    while not session.finished:
        question = session.current
        console.print(f"\n[bold blue]{SERIES_TITLES[question.mode]}[/bold blue] "
                      f"[dim]({session.index + 1}/{len(session.questions)}, "
                      f"{session.progress}%)[/dim]")

        if question.mode is QuestionMode.MULTIPLE_CHOICE:
            feedback = _ask_multiple_choice(session)
        elif question.mode is QuestionMode.MATCHING:
            feedback = _ask_matching(session)
        else:
            feedback = _ask_typed(session)

        style = FEEDBACK_STYLES[feedback.kind]
        console.print(f"[{style}]{escape(feedback.message)}[/{style}]")
        session.advance()

    summary = session.summary()
    console.print(Panel.fit(
        f"Your score: [bold]{summary.score}[/bold] / {summary.total} ({summary.percentage}%)\n"
        f"{TIER_MESSAGES[summary.tier]}",
        title="Well done!",
        border_style="green"
    ))


def _ask_multiple_choice(session: QuizSession):
    question = session.current
    console.print(f"[bold]{escape(question.prompt)}[/bold]")
    for i, option in enumerate(question.options, 1):
        console.print(f"  {i}. {escape(option)}")

    choice = click.prompt("Your choice", type=click.IntRange(1, len(question.options)))
    return session.choose_option(question.options[choice - 1])


def _ask_matching(session: QuizSession):
    question = session.current
    labels = string.ascii_uppercase
    for i, pair in enumerate(question.items):
        console.print(f"  {labels[i]}. {escape(pair.a)}")
    for i, option in enumerate(question.options, 1):
        console.print(f"  {i}. {escape(option)}")

    pairing = {}
    for i in range(len(question.items)):
        choice = click.prompt(f"{labels[i]} ->", type=click.IntRange(1, len(question.options)))
        pairing[i] = choice - 1
    return session.submit_matches(pairing)


def _ask_typed(session: QuizSession):
    question = session.current
    console.print(f"[bold]{escape(question.prompt)}[/bold]")

    while True:
        answer = click.prompt(f"Your answer ({HINT_INPUT} for a hint)", default="", show_default=False)
        if answer.strip() != HINT_INPUT:
            return session.answer_typed(answer)
        console.print(f"[dim]Hint:[/dim] {escape(session.request_hint())}")
