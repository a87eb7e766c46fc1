"""
Command line entry point.

    exprcalc [--infix | --postfix] [--no-cycle-check] [--log-level LEVEL]

Starts the REPL in the chosen notation. Unknown options are rejected by
typer with a usage error.
"""

import logging
import sys

import typer

from exprcalc.config import LOGGING_CONFIG
from exprcalc.parser.notation import NotationMode
from exprcalc.repl import Repl

app = typer.Typer(add_completion=False, help="Evaluate infix or postfix arithmetic expressions.")


def configure_logging(level_name: str) -> None:
    """Configure root logging from a level name such as ``DEBUG``."""
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {level_name}", param_hint="--log-level")

    logging.basicConfig(level=level, format=LOGGING_CONFIG["format"])


@app.command()
def main(
    postfix: bool | None = typer.Option(
        None,
        "--postfix/--infix",
        help="Read expressions in postfix notation (default: infix).",
    ),
    cycle_check: bool = typer.Option(
        True,
        "--cycle-check/--no-cycle-check",
        help="Report self-referencing variables instead of recursing until the depth limit.",
    ),
    log_level: str = typer.Option(
        LOGGING_CONFIG["default_level"],
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Start the expression REPL."""
    configure_logging(log_level)

    if postfix is None:
        typer.echo(
            "No mode specified, defaulting to infix. "
            "To change, pass either --infix or --postfix"
        )
        mode = NotationMode.INFIX
    else:
        mode = NotationMode.POSTFIX if postfix else NotationMode.INFIX

    repl = Repl(mode, detect_cycles=cycle_check)
    if sys.stdin.isatty():
        repl.install_completion()
    repl.run()


if __name__ == "__main__":
    app()
