"""Allow ``python -m exprcalc``."""

from exprcalc.cli import app

app(prog_name="exprcalc")
