"""
Pytest configuration and shared fixtures for exprcalc tests.
"""

import pytest

from exprcalc.variables import VariableTable


@pytest.fixture
def variables() -> VariableTable:
    """
    Variable table with a small chain of definitions.

    x = 5, y = 10, z = 55
    """
    return VariableTable({
        "x": "2+3",
        "y": "x*2",
        "z": "(y+1)*x",
    })


@pytest.fixture
def cyclic_variables() -> VariableTable:
    """Variable table where a, b and c refer to each other."""
    return VariableTable({
        "a": "b+1",
        "b": "c*2",
        "c": "a",
    })


@pytest.fixture
def scripted_input():
    """
    Build an input function that replays the given lines.

    Raises EOFError once the lines run out, like input() at end of file.
    """

    def build(*lines: str):
        remaining = iter(lines)
        prompts: list[str] = []

        def read(prompt: str) -> str:
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        read.prompts = prompts  # type: ignore[attr-defined]
        return read

    return build
