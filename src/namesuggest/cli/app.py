"""Main CLI application."""

from __future__ import annotations

from typing import Annotated

import typer

from namesuggest import __version__
from namesuggest.cli.formatters import (
    console,
    print_did_you_mean,
    print_error,
    print_warning,
)
from namesuggest.infrastructure.config import (
    ConfigError,
    MatchConfig,
    default_threshold,
)
from namesuggest.infrastructure.logging import configure_logging, get_logger
from namesuggest.infrastructure.similarity import (
    find_best_match,
    find_similar_names,
    lev_distance,
)

app = typer.Typer(
    name="namesuggest",
    help="Edit distance and 'did you mean?' suggestions for identifiers.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"namesuggest {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
) -> None:
    """namesuggest: find the closest name for a misspelled identifier."""
    configure_logging(debug=verbose)


@app.command()
def distance(
    a: Annotated[str, typer.Argument(help="First string.")],
    b: Annotated[str, typer.Argument(help="Second string.")],
) -> None:
    """Print the Levenshtein distance between two strings."""
    typer.echo(lev_distance(a, b))


@app.command()
def suggest(
    lookup: Annotated[str, typer.Argument(help="Name to look up.")],
    candidates: Annotated[
        list[str], typer.Argument(help="Known names to choose from.")
    ],
    threshold: Annotated[
        int | None,
        typer.Option(
            "--threshold",
            "-t",
            help="Maximum edit distance (default: a third of the lookup length).",
        ),
    ] = None,
    separator: Annotated[
        str,
        typer.Option("--separator", "-s", help="Word separator for reordered names."),
    ] = "_",
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="List every close name, closest first."),
    ] = False,
) -> None:
    """Suggest the closest known name for LOOKUP.

    Exits with code 1 when nothing is close enough.
    """
    try:
        config = MatchConfig(word_separator=separator)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(2) from e

    logger.debug("suggest_started", lookup=lookup, candidates=len(candidates))

    suggestions: list[str] = []
    if show_all:
        max_distance = (
            default_threshold(lookup, config) if threshold is None else threshold
        )
        suggestions = find_similar_names(
            lookup,
            candidates,
            max_distance=max_distance,
            max_suggestions=len(candidates),
        )

    # Ranked list is distance-only; reordered words come from the tiered search
    if not suggestions:
        match = find_best_match(candidates, lookup, threshold, config=config)
        if match is not None:
            suggestions = [match]

    if not suggestions:
        print_warning(f"No close match for '{lookup}'")
        raise typer.Exit(1)

    if suggestions == [lookup]:
        console.print(f"'{lookup}' is a known name", highlight=False)
        return

    print_did_you_mean(suggestions)
