"""
Command-line interface: morph, define, lookup, serve.
"""

from __future__ import annotations

from typing import NoReturn, Optional

import typer

from logos.core.config import Settings
from logos.core.errors import LogosError
from logos.core.text import detect_language
from logos.languages import get_language
from logos.logging_config import setup_logging
from logos.processing.api_client import APIClient
from logos.processing.lookup import WordLookup
from logos.processing.morphology import MorphologyClient, format_entry
from logos.processing.wiktionary import DefinitionExtractor

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _language_for(word: str, language: Optional[str]):
    return get_language(language or detect_language(word))


def _fail(e: LogosError) -> NoReturn:
    typer.echo(f"Error: {e.message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def morph(
    word: str = typer.Argument(...),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Force language (greek/latin)"),
) -> None:
    """Show the Morpheus analyses of a word form."""
    settings = Settings.from_env()
    setup_logging(debug=settings.debug)
    try:
        profile = _language_for(word, language)
        entries = MorphologyClient(profile, api_client=APIClient(settings)).resolve(word)
    except LogosError as e:
        _fail(e)

    if not entries:
        typer.echo(f'No morphological analysis found for "{word.strip()}".')
        return
    typer.echo("\n\n".join(format_entry(entry) for entry in entries))


@app.command()
def define(
    lemma: str = typer.Argument(...),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Force language (greek/latin)"),
) -> None:
    """Print the cleaned Wiktionary definition HTML of a lemma."""
    settings = Settings.from_env()
    setup_logging(debug=settings.debug)
    try:
        profile = _language_for(lemma, language)
        result = DefinitionExtractor(APIClient(settings)).define(lemma, profile)
    except LogosError as e:
        _fail(e)
    typer.echo(result.definition_html)


@app.command()
def lookup(
    query: str = typer.Argument(...),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Force language (greek/latin)"),
) -> None:
    """Resolve a word form to its headword and print its definition."""
    settings = Settings.from_env()
    setup_logging(debug=settings.debug)
    try:
        profile = _language_for(query, language)
        api_client = APIClient(settings)
        word_lookup = WordLookup(
            profile,
            morphology=MorphologyClient(profile, api_client=api_client),
            extractor=DefinitionExtractor(api_client),
        )
        result = word_lookup.lookup(query)
    except LogosError as e:
        _fail(e)

    typer.echo(f"Lemma: {result.lemma}")
    for entry in result.entries:
        typer.echo(format_entry(entry))
    typer.echo(result.definition_html)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(5000, "--port", "-p"),
) -> None:
    """Run the development API server."""
    from logos.web.app import create_app

    settings = Settings.from_env()
    create_app(settings).run(host=host, port=port, debug=settings.debug, threaded=True)


def main() -> None:  # pragma: no cover - thin wrapper
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
