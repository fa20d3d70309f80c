"""Command-line interface using Click."""

import json
import sys
from pathlib import Path

import click

from . import __version__
from .config import DEBUG, DEFAULT_LANGUAGE, DEFAULT_PUNCTUATIONS, Language, validate_config
from .core.lexicon import Lexicon
from .exceptions import ConfigError, LexiFrontError
from .utils.logging import setup_logging
from .utils.validation import validate_input_file, validate_reserved_symbols

LANGUAGE_CHOICES = [lang.value for lang in Language]


def _lexicon_options(func):
    """Options shared by every command that loads a lexicon."""
    options = [
        click.option('--tokens', 'tokens_path', required=True, type=click.Path(),
                     help='Token table file (<symbol> <id> per line)'),
        click.option('--lexicon', 'lexicon_path', required=True, type=click.Path(),
                     help='Pronunciation lexicon file (<word> <symbol>... per line)'),
        click.option('--punctuations', default=DEFAULT_PUNCTUATIONS, show_default=True,
                     help='Space-separated punctuation symbols'),
        click.option('--language', default=DEFAULT_LANGUAGE, show_default=True,
                     type=click.Choice(LANGUAGE_CHOICES, case_sensitive=False),
                     help='Language mode'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def load_lexicon(tokens_path, lexicon_path, punctuations, language, debug=False) -> Lexicon:
    """Validate paths and build a Lexicon from files."""
    tokens_file = validate_input_file(tokens_path)
    lexicon_file = validate_input_file(lexicon_path)
    return Lexicon.from_files(
        tokens_file, lexicon_file,
        punctuations=punctuations, language=language, debug=debug,
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.pass_context
def cli(ctx, verbose, log_file):
    """lexifront - Convert text to token ids for speech models.

    Token ids are printed on stdout; log messages go to stderr.
    """
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else "INFO",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose
    )
    ctx.obj['logger'] = logger

    try:
        validate_config()
    except ConfigError as e:
        logger.error(f"❌ Configuration error: {e}")
        sys.exit(1)


@cli.command()
@click.argument('text')
@_lexicon_options
@click.option('--debug', is_flag=True, default=DEBUG,
              help='Log input bytes and word segmentation')
@click.option('--json', 'as_json', is_flag=True, help='Print ids as a JSON array')
@click.pass_context
def convert(ctx, text, tokens_path, lexicon_path, punctuations, language, debug, as_json):
    """Convert TEXT to token ids."""
    logger = ctx.obj['logger']

    try:
        lexicon = load_lexicon(tokens_path, lexicon_path, punctuations, language, debug)
        validate_reserved_symbols(lexicon.token2id, lexicon.language)
        token_ids = lexicon.convert_text_to_token_ids(text)
    except LexiFrontError as e:
        logger.error(f"❌ Error: {e}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(token_ids))
    else:
        click.echo(" ".join(str(i) for i in token_ids))


@cli.command()
@_lexicon_options
@click.pass_context
def inspect(ctx, tokens_path, lexicon_path, punctuations, language):
    """Load a token table and lexicon and report what was loaded."""
    logger = ctx.obj['logger']

    try:
        lexicon = load_lexicon(tokens_path, lexicon_path, punctuations, language)
    except LexiFrontError as e:
        logger.error(f"❌ Error: {e}")
        sys.exit(1)

    click.echo(f"Language: {lexicon.language.value}")
    click.echo(f"Tokens: {len(lexicon.token2id)}")
    click.echo(f"Words: {len(lexicon)}")
    click.echo(f"Punctuations: {' '.join(sorted(lexicon.punctuations))}")

    missing = lexicon.missing_reserved_symbols()
    if missing:
        click.echo(f"Missing reserved symbols: {', '.join(repr(s) for s in missing)}")
        sys.exit(1)
    click.echo("✅ All reserved symbols present")


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
