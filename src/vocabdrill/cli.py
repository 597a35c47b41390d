"""CLI entry point for vocabdrill."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger
from pydantic import ValidationError

from vocabdrill.config.settings import Settings
from vocabdrill.engine import proficiency
from vocabdrill.engine.comparator import Outcome
from vocabdrill.engine.deck import Deck, DeckFormatError
from vocabdrill.engine.selector import EmptyDeckError
from vocabdrill.engine.session import DrillSession
from vocabdrill.logs import configure_logging
from vocabdrill.state.deck_store import DeckStore

VERDICTS = {
    Outcome.OK: ("Correct!", "green"),
    Outcome.WARN: ("Almost correct:", "yellow"),
    Outcome.MINOR: ("Not quite right:", "magenta"),
    Outcome.FAIL: ("Wrong:", "red"),
}


@click.group(invoke_without_command=True)
@click.option(
    "--deck", "deck_path", type=click.Path(path_type=Path),
    help="Deck file to use (default: ~/.vocabdrill/deck.json)",
)
@click.option(
    "--config", "config_path", type=click.Path(path_type=Path),
    help="Settings file (default: ~/.vocabdrill/config.yaml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr")
@click.pass_context
def main(
    ctx: click.Context,
    deck_path: Optional[Path],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """vocabdrill: adaptive vocabulary drilling in the terminal."""
    try:
        settings = Settings.load(config_path)
    except ValidationError as e:
        raise click.ClickException(f"Invalid settings: {e}")
    configure_logging("DEBUG" if verbose else settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["store"] = DeckStore(deck_path or settings.get_deck_path())
    if ctx.invoked_subcommand is None:
        ctx.invoke(drill)


def _load_deck(store: DeckStore) -> Deck:
    try:
        return store.load()
    except FileNotFoundError:
        logger.error(f"Deck file {store.path} does not exist")
        raise click.ClickException(
            f"No deck at {store.path}. Create one with 'vocabdrill init'."
        )
    except DeckFormatError as e:
        raise click.ClickException(str(e))


def _echo_texts(texts: list[str]) -> None:
    for text in texts:
        click.echo(f"\t{text}")


def _read_answer() -> Optional[str]:
    """Read one answer line, stripped. None at end of input or on Ctrl-C."""
    click.echo("> ", nl=False)
    try:
        line = sys.stdin.readline()
    except KeyboardInterrupt:
        line = ""
    if not line:
        click.echo()
        return None
    return line.strip()


@main.command()
@click.option("--reverse", is_flag=True, help="Show answers, ask for prompts")
@click.pass_context
def drill(ctx: click.Context, reverse: bool = False) -> None:
    """Ask words until the quit sentinel or end of input."""
    settings: Settings = ctx.obj["settings"]
    store: DeckStore = ctx.obj["store"]
    deck = _load_deck(store)
    session = DrillSession(deck, store=store, settings=settings, reverse=reverse)

    click.echo(f"Type {settings.quit_sentinel} to stop.")
    while True:
        deck_grade = session.deck_grade()
        try:
            question = session.next_question()
        except EmptyDeckError as e:
            logger.error(f"Cannot drill {store.path}: {e}")
            raise click.ClickException(f"{e}; add words with 'vocabdrill add'")

        click.echo()
        header = f"Word grade {session.item_grade(question)}"
        if deck_grade is not None:
            header += f" / Deck grade {deck_grade:.2f}"
        click.echo(header)
        click.echo()
        _echo_texts(question.prompts)

        line = _read_answer()
        if line is None or session.is_quit(line):
            break

        outcome = session.submit(question, line)
        message, color = VERDICTS[outcome]
        click.secho(message, fg=color, bold=outcome is Outcome.OK)
        if outcome is not Outcome.OK:
            _echo_texts(question.expected)

    summary = session.stats
    click.echo(
        f"Asked {summary.asked}: "
        + ", ".join(f"{o.name.lower()} {summary.outcomes[o]}" for o in reversed(Outcome))
    )
    logger.info(f"Session ended after {summary.asked} answers")


@main.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Show how well the deck is known."""
    settings: Settings = ctx.obj["settings"]
    deck = _load_deck(ctx.obj["store"])
    level_count = settings.level_count

    asked = sum(1 for w in deck.words if proficiency.has_been_asked(w))
    grade = proficiency.deck_grade(deck.words, level_count)

    if deck.description:
        click.echo(deck.description)
    click.echo(f"Words: {len(deck)} (asked: {asked})")
    click.echo("Deck grade: " + ("n/a" if grade is None else f"{grade:.2f}"))
    for level, count in enumerate(proficiency.level_histogram(deck.words, level_count)):
        label = f"{level}+" if level == level_count - 1 else f"{level}"
        click.echo(f"  level {label}: {count}")


@main.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """List every word with its level and answer counters."""
    deck = _load_deck(ctx.obj["store"])
    for i, word in enumerate(deck.words):
        first = word.variants[0]
        click.echo(
            f"{i:4d}  L{word.level}  "
            f"{word.ok}/{word.warn}/{word.minor}/{word.fail}  "
            f"{', '.join(first.prompt_texts)} -> {', '.join(first.answer_texts)}"
        )


@main.command()
@click.argument("prompt")
@click.argument("answer")
@click.pass_context
def add(ctx: click.Context, prompt: str, answer: str) -> None:
    """Add a word: PROMPT is shown, ANSWER is expected."""
    store: DeckStore = ctx.obj["store"]
    deck = _load_deck(store)
    deck.add(prompt, answer)
    store.save(deck)
    click.echo(f"Added '{prompt}' -> '{answer}' ({len(deck)} words)")


@main.command()
@click.option("--description", default="", help="Free-text description of the deck")
@click.option("--force", is_flag=True, help="Overwrite an existing deck")
@click.pass_context
def init(ctx: click.Context, description: str, force: bool) -> None:
    """Create an empty deck file."""
    store: DeckStore = ctx.obj["store"]
    if store.exists() and not force:
        raise click.ClickException(f"{store.path} already exists (use --force to overwrite)")
    store.save(Deck(description=description))
    click.echo(f"Created {store.path}")
