"""
Variable table - Store single-letter variable definitions.

This module provides:
- VariableTable, an in-memory mapping of variable name to raw expression text
- parse_assignment for REPL lines of the form ``x = <expression>``

Definitions are kept as text and only tokenized and parsed when a
variable is read during evaluation.
"""

import logging
from collections.abc import Iterator, Mapping

import pandas as pd

from exprcalc.errors import ExpressionError

logger = logging.getLogger(__name__)


class AssignmentError(ExpressionError):
    """Exception raised for malformed variable assignments."""


def validate_name(name: str) -> str:
    """
    Check that a variable name is a single lowercase letter.

    Args:
        name: The candidate name

    Returns:
        The name, unchanged

    Raises:
        AssignmentError: If the name is not one character in a-z
    """
    if len(name) != 1 or not ("a" <= name <= "z"):
        raise AssignmentError("Variable name has to be one character long, [a-z].")
    return name


def parse_assignment(line: str) -> tuple[str, str]:
    """
    Split an assignment line into name and definition.

    Example:
        >>> parse_assignment("x = 2 + 3")
        ('x', '2 + 3')

    Raises:
        AssignmentError: If the line has more than one ``=`` or an invalid name
    """
    parts = [part.strip() for part in line.split("=")]
    if len(parts) != 2:
        raise AssignmentError("Incorrect variable assignment.")

    name, definition = parts
    return validate_name(name), definition


class VariableTable(Mapping[str, str]):
    """
    In-memory storage for variable definitions.

    The table is a read-only Mapping from the evaluator's point of view;
    only the REPL writes to it, through ``set``.
    """

    def __init__(self, definitions: Mapping[str, str] | None = None):
        self._definitions: dict[str, str] = {}
        for name, definition in (definitions or {}).items():
            self.set(name, definition)

    def set(self, name: str, definition: str) -> None:
        """
        Store a definition, replacing any previous one.

        Args:
            name: Single lowercase letter
            definition: Raw expression text, stored as given

        Raises:
            AssignmentError: If the name is invalid
        """
        self._definitions[validate_name(name)] = definition
        logger.debug("Defined %s = %s", name, definition)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._definitions.get(name, default)

    def list(self) -> list[str]:
        """List defined names in alphabetical order."""
        return sorted(self._definitions)

    def to_frame(self) -> pd.DataFrame:
        """
        Render the table as a DataFrame.

        Returns:
            DataFrame with ``name`` and ``definition`` columns, sorted by name
        """
        names = self.list()
        return pd.DataFrame(
            {
                "name": names,
                "definition": [self._definitions[name] for name in names],
            },
            columns=["name", "definition"],
        )

    def __getitem__(self, name: str) -> str:
        return self._definitions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"VariableTable({self._definitions!r})"
