"""
mlscan - Minilang Scanner Command-Line Interface
================================================

Scans a Minilang source file and prints a report with the token listing,
scanning statistics, symbol table and lexical errors.

Usage Examples
--------------
Full report:
    $ mlscan program.ml

Selected sections:
    $ mlscan -s symbols -s errors program.ml

Fail the build on lexical errors:
    $ mlscan --strict program.ml

Verbose mode:
    $ mlscan -v program.ml
"""

import logging
from pathlib import Path
from typing import Optional

import click

from minilang import __version__
from minilang.cli.errors import ExitCode, handle_cli_exception
from minilang.scanner import scan_file
from minilang.scanner.report import SECTIONS, render_report

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-s", "--section",
    "sections",
    multiple=True,
    type=click.Choice(SECTIONS, case_sensitive=False),
    help="Report section to print (can be repeated, default: all)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any lexical errors are found",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mlscan")
@click.pass_context
def main(
    ctx: click.Context,
    input_file: Optional[Path],
    sections: tuple[str, ...],
    strict: bool,
    verbose: bool,
) -> None:
    """
    Scan a Minilang source file.

    INPUT_FILE is the source file to scan. Any extension is accepted.

    \b
    Examples:
        mlscan program.ml                # Full report
        mlscan -s tokens program.ml      # Token listing only
        mlscan --strict program.ml       # Exit 1 on lexical errors
    """
    if input_file is None:
        click.echo(ctx.get_usage())
        ctx.exit(ExitCode.SUCCESS)

    setup_logging(verbose)

    try:
        result = scan_file(input_file)
        logger.debug("Rendering report for %s", input_file)
        selected = [s.lower() for s in sections] or None
        click.echo(render_report(result, selected))

        if strict:
            result.diagnostics.raise_if_errors(result.source)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
