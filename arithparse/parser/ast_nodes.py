"""
Abstract Syntax Tree node definitions for arithmetic expressions.

A tree is made of Value leaves and UnaryOp/BinaryOp operation nodes.
Every node holds the token it was built from and supports the visitor
pattern. Nodes compare structurally, so parses of the same expression
written with redundant parentheses are equal.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import SourceLocation, Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    VALUE = "Value"
    UNARY_OP = "UnaryOp"
    BINARY_OP = "BinaryOp"


@dataclass
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    arity = 0

    def __init__(self, node_type: ASTNodeType, token: Token):
        self.node_type = node_type
        self.token = token

    @property
    def span(self) -> SourceSpan:
        """Span from the leftmost to the rightmost token in this subtree."""
        tokens = [node.token for node in walk(self)]
        tokens.sort(key=lambda t: t.location.offset)
        return SourceSpan(tokens[0].location, tokens[-1].location)

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def to_sexpr(self) -> str:
        """Canonical printed form: parenthesized prefix notation."""
        return SexprPrinter().visit(self)

    def __str__(self) -> str:
        return self.to_sexpr()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_sexpr()!r})"

    def __eq__(self, other) -> bool:
        """Structural equality: same operators and leaves in the same shape."""
        if not isinstance(other, ASTNode):
            return NotImplemented
        pairs = [(self, other)]
        while pairs:
            mine, theirs = pairs.pop()
            if (mine.node_type != theirs.node_type
                    or mine.token.type != theirs.token.type
                    or mine.token.lexeme != theirs.token.lexeme):
                return False
            my_children, their_children = mine.children(), theirs.children()
            if len(my_children) != len(their_children):
                return False
            pairs.extend(zip(my_children, their_children))
        return True

    def __hash__(self) -> int:
        return hash(self.to_sexpr())


class Value(ASTNode):
    """Leaf node holding a NUMBER token."""

    def __init__(self, token: Token):
        super().__init__(ASTNodeType.VALUE, token)

    @property
    def value(self) -> Any:
        return self.token.value

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit(self)

    def children(self) -> List[ASTNode]:
        return []


class UnaryOp(ASTNode):
    """Unary operation, e.g. negation."""
    arity = 1

    def __init__(self, token: Token, operand: ASTNode):
        super().__init__(ASTNodeType.UNARY_OP, token)
        self.operand = operand

    @property
    def operator(self) -> str:
        return self.token.lexeme

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit(self)

    def children(self) -> List[ASTNode]:
        return [self.operand]


class BinaryOp(ASTNode):
    """Binary operation. Left/right order is significant."""
    arity = 2

    def __init__(self, token: Token, left: ASTNode, right: ASTNode):
        super().__init__(ASTNodeType.BINARY_OP, token)
        self.left = left
        self.right = right

    @property
    def operator(self) -> str:
        return self.token.lexeme

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit(self)

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


class SexprPrinter(ASTVisitor):
    """Renders a tree as `(op child child)` with leaves as their literal text."""

    def visit(self, node: ASTNode) -> str:
        return fold(node, self._render)

    @staticmethod
    def _render(node: ASTNode, parts: List[str]) -> str:
        if not parts:
            return node.token.lexeme
        return "(" + " ".join([node.token.lexeme] + parts) + ")"


def walk(node: ASTNode) -> List[ASTNode]:
    """All nodes of a tree in pre-order."""
    nodes = []
    stack = [node]
    while stack:
        current = stack.pop()
        nodes.append(current)
        stack.extend(reversed(current.children()))
    return nodes


def fold(node: ASTNode, combine: Callable[[ASTNode, List[Any]], Any]) -> Any:
    """
    Reduce a tree bottom-up with an explicit stack.

    ``combine(node, results)`` receives the already combined results of the
    node's children, in order. Tree depth is not limited by the interpreter
    recursion limit.
    """
    results: List[Any] = []
    stack = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        children = current.children()
        if children and not expanded:
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(children))
            continue
        split = len(results) - len(children)
        child_results = results[split:]
        del results[split:]
        results.append(combine(current, child_results))
    return results.pop()


def count_leaves(node: ASTNode) -> int:
    """Number of Value leaves in a tree."""
    return sum(1 for n in walk(node) if n.node_type == ASTNodeType.VALUE)


def _mirror_node(node: ASTNode, children: List[ASTNode]) -> ASTNode:
    if isinstance(node, BinaryOp):
        left, right = children
        return BinaryOp(node.token, right, left)
    if isinstance(node, UnaryOp):
        return UnaryOp(node.token, children[0])
    return Value(node.token)


def mirror(node: ASTNode) -> ASTNode:
    """
    Return a new tree with left and right swapped at every binary node.

    The whole tree is inverted, not just the root.
    """
    return fold(node, _mirror_node)
