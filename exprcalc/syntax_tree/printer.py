"""
AST Printer for rendering expression trees back to text.

The infix rendering uses as few parentheses as the right-recursive
grammar allows, so re-tokenizing and re-parsing the text rebuilds an
equal tree. The postfix rendering is a space separated RPN string that
the postfix parser reads back into the same tree.
"""

from exprcalc.syntax_tree.nodes import ASTNode, BinaryOpNode, NumberNode, VariableNode


class ASTPrinter:
    """
    Renders AST nodes as expression text.

    Provides methods to convert an AST to:
    - infix text (minimal parentheses)
    - postfix text (reverse Polish notation)
    """

    def to_infix(self, node: ASTNode) -> str:
        """
        Render a tree in infix notation.

        Args:
            node: The root of the tree

        Returns:
            Infix text that parses back to an equal tree
        """
        if isinstance(node, NumberNode):
            return str(node.value)

        if isinstance(node, VariableNode):
            return node.name

        if isinstance(node, BinaryOpNode):
            precedence = node.operator.precedence
            left = self.to_infix(node.left)
            right = self.to_infix(node.right)

            # Both operators associate to the right, so an equal-precedence
            # operand only needs grouping on the left.
            if self._precedence(node.left) <= precedence:
                left = f"({left})"
            if self._precedence(node.right) < precedence:
                right = f"({right})"

            return f"{left} {node.operator.value} {right}"

        raise TypeError(f"Unknown node type: {type(node).__name__}")

    def to_postfix(self, node: ASTNode) -> str:
        """
        Render a tree in postfix notation.

        Args:
            node: The root of the tree

        Returns:
            Space separated postfix text
        """
        if isinstance(node, NumberNode):
            return str(node.value)

        if isinstance(node, VariableNode):
            return node.name

        if isinstance(node, BinaryOpNode):
            left = self.to_postfix(node.left)
            right = self.to_postfix(node.right)
            return f"{left} {right} {node.operator.value}"

        raise TypeError(f"Unknown node type: {type(node).__name__}")

    @staticmethod
    def _precedence(node: ASTNode) -> int:
        """Precedence of a subtree; leaves never need grouping."""
        if isinstance(node, BinaryOpNode):
            return node.operator.precedence
        return 3


_printer = ASTPrinter()


def to_infix(node: ASTNode) -> str:
    """Render a tree in infix notation."""
    return _printer.to_infix(node)


def to_postfix(node: ASTNode) -> str:
    """Render a tree in postfix notation."""
    return _printer.to_postfix(node)
