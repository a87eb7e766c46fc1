"""
AST Node definitions for arithmetic expressions.

Both parsers produce trees built from these nodes. A tree is created
fresh for each parse, owns its children exclusively and is never
mutated after construction.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum


class Operator(Enum):
    """Binary operators supported by the grammar."""

    SUM = "+"
    PRODUCT = "*"

    @property
    def precedence(self) -> int:
        """Binding strength; product binds tighter than sum."""
        return 2 if self is Operator.PRODUCT else 1


class ASTNode(ABC):
    """Base class for all AST nodes."""


@dataclass(frozen=True)
class NumberNode(ASTNode):
    """Represents an unsigned integer literal."""

    value: int

    def __repr__(self) -> str:
        return f"Number({self.value})"


@dataclass(frozen=True)
class VariableNode(ASTNode):
    """Represents a reference to a single-letter variable."""

    name: str

    def __repr__(self) -> str:
        return f"Variable({self.name})"


@dataclass(frozen=True)
class BinaryOpNode(ASTNode):
    """Represents a binary operation (e.g., a + b, x * y)."""

    operator: Operator
    left: ASTNode
    right: ASTNode

    def __repr__(self) -> str:
        name = "Sum" if self.operator is Operator.SUM else "Product"
        return f"{name}({self.left!r}, {self.right!r})"
