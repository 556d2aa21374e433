"""
tlex - Table-Driven Lexer Command-Line Interface
================================================

This module implements the command-line interface for the lexer. It
builds the automaton tables once and prints the token stream of each
input file.

Usage Examples
--------------
Lex a file with the packaged tables:
    $ tlex program.src

Lex several files, tables built once:
    $ tlex a.src b.src c.src

Use custom tables:
    $ tlex -t transitions.csv -c classes.csv program.src

Machine-readable output:
    $ tlex --format json program.src

Fail the run on unrecognized input:
    $ tlex --strict program.src

Exit Codes
----------
0 - Success
1 - Error tokens produced (only with --strict)
2 - Invalid arguments, unreadable file or malformed table
3 - Internal error
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from tablelex import __version__
from tablelex.cli.errors import handle_cli_exception
from tablelex.config import KeywordPolicy, LexerOptions
from tablelex.lexer import Lexer
from tablelex.tokens import Token

logger = logging.getLogger(__name__)


def format_token(token: Token) -> str:
    """Format a token as 'file:line:column  CLASS  'lexeme''."""
    return f"{token.location}  {token.type.name:<12} {token.lexeme!r}"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-t", "--transitions",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Transition table file (default: packaged table)",
)
@click.option(
    "-c", "--classes",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Classification table file (default: packaged table)",
)
@click.option(
    "-d", "--delimiter",
    type=str,
    default=None,
    help="Table cell delimiter (default: ',')",
)
@click.option(
    "-k", "--keyword-policy",
    type=click.Choice([p.value for p in KeywordPolicy], case_sensitive=False),
    default=None,
    help="When reserved words override the automaton's class (default: identifier)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any input contains unrecognized lexemes",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="tlex")
def main(
    files: tuple[Path, ...],
    transitions: Optional[Path],
    classes: Optional[Path],
    delimiter: Optional[str],
    keyword_policy: Optional[str],
    output_format: str,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Tokenize source files with a table-driven automaton.

    FILES are the source files to lex. Every file is lexed with the same
    tables, which are read once.

    \b
    Examples:
        tlex program.src                 # Packaged tables
        tlex -t dfa.csv -c cls.csv a.src # Custom tables
        tlex -f json program.src         # JSON output
        tlex --strict program.src        # Fail on unrecognized input

    \b
    Table settings can also come from the environment:
        TABLELEX_TRANSITIONS, TABLELEX_CLASSES, TABLELEX_DELIMITER,
        TABLELEX_KEYWORD_POLICY, TABLELEX_ENCODING
    """
    setup_logging(verbose)

    try:
        options = LexerOptions.from_env()
        if transitions is not None:
            options.transition_table_path = transitions
        if classes is not None:
            options.classification_table_path = classes
        if delimiter is not None:
            if len(delimiter) != 1:
                raise click.BadParameter(
                    f"delimiter must be a single character, got {delimiter!r}",
                    param_hint="'--delimiter'",
                )
            options.delimiter = delimiter
        if keyword_policy is not None:
            options.keyword_policy = KeywordPolicy(keyword_policy.lower())
        logger.debug(f"Options: {options}")

        lexer = Lexer.from_options(options)

        streams = []
        for path in files:
            if verbose:
                click.echo(f"Lexing {path}...", err=True)
            streams.append(lexer.lex(path))

        if output_format.lower() == "json":
            records = [token.to_dict() for stream in streams for token in stream]
            click.echo(json.dumps(records, indent=2))
        else:
            for stream in streams:
                for token in stream:
                    click.echo(format_token(token))

        if strict:
            for stream in streams:
                stream.raise_for_errors()

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
