"""Syntax tree node classes for programs, statements and expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, List, Optional

from melpc.tokens import TokenType


class NodeType(Enum):
    """Classification of syntax tree nodes."""

    PROGRAM = auto()
    FUNCTION = auto()
    RETURN = auto()
    VAR_DECL = auto()
    ASSIGNMENT = auto()
    IF = auto()
    WHILE = auto()
    EXPR_STMT = auto()
    BINARY_OP = auto()
    UNARY_OP = auto()
    LITERAL = auto()
    IDENTIFIER = auto()
    FUNCTION_CALL = auto()
    TYPE = auto()
    PARAMETER = auto()


@dataclass
class Node:
    """Base of every node: carries the 1-based source position."""

    node_type: ClassVar[NodeType]
    line: int = field(default=0, kw_only=True)
    column: int = field(default=0, kw_only=True)


@dataclass
class TypeSpec(Node):
    """A type specifier such as ``numeric`` or ``boolean``."""

    node_type: ClassVar[NodeType] = NodeType.TYPE
    type_token: TokenType


@dataclass
class Parameter(Node):
    """A function parameter: a name and its type."""

    node_type: ClassVar[NodeType] = NodeType.PARAMETER
    name: str
    type: Optional[TypeSpec]


@dataclass
class Literal(Node):
    """A number, ``true`` or ``false``."""

    node_type: ClassVar[NodeType] = NodeType.LITERAL
    literal_type: TokenType
    value: int = 0


@dataclass
class Identifier(Node):
    """A reference to a variable."""

    node_type: ClassVar[NodeType] = NodeType.IDENTIFIER
    name: str


@dataclass
class BinaryOp(Node):
    """An arithmetic, comparison or logical binary operation."""

    node_type: ClassVar[NodeType] = NodeType.BINARY_OP
    op: TokenType
    left: Optional[Node]
    right: Optional[Node]


@dataclass
class UnaryOp(Node):
    """Negation or logical not."""

    node_type: ClassVar[NodeType] = NodeType.UNARY_OP
    op: TokenType
    operand: Optional[Node]


@dataclass
class Call(Node):
    """A function call with its argument expressions."""

    node_type: ClassVar[NodeType] = NodeType.FUNCTION_CALL
    name: str
    arguments: List[Node] = field(default_factory=list)


@dataclass
class Return(Node):
    """A return statement; ``expression`` is ``None`` for a bare return."""

    node_type: ClassVar[NodeType] = NodeType.RETURN
    expression: Optional[Node] = None


@dataclass
class VarDecl(Node):
    """A typed variable declaration with an optional initializer."""

    node_type: ClassVar[NodeType] = NodeType.VAR_DECL
    name: str
    type: Optional[TypeSpec]
    initializer: Optional[Node] = None


@dataclass
class Assignment(Node):
    """Assignment of a value to an existing variable."""

    node_type: ClassVar[NodeType] = NodeType.ASSIGNMENT
    name: str
    value: Optional[Node]


@dataclass
class If(Node):
    """An if statement with a then branch and an optional else branch."""

    node_type: ClassVar[NodeType] = NodeType.IF
    condition: Optional[Node]
    then_body: List[Node] = field(default_factory=list)
    else_body: List[Node] = field(default_factory=list)


@dataclass
class While(Node):
    """A while loop."""

    node_type: ClassVar[NodeType] = NodeType.WHILE
    condition: Optional[Node]
    body: List[Node] = field(default_factory=list)


@dataclass
class ExprStmt(Node):
    """An expression evaluated for its effect, such as a call."""

    node_type: ClassVar[NodeType] = NodeType.EXPR_STMT
    expression: Optional[Node]


@dataclass
class Function(Node):
    """A function definition."""

    node_type: ClassVar[NodeType] = NodeType.FUNCTION
    name: str
    parameters: List[Parameter] = field(default_factory=list)
    return_type: Optional[TypeSpec] = None
    body: List[Node] = field(default_factory=list)


@dataclass
class Program(Node):
    """The root node: all top-level functions."""

    node_type: ClassVar[NodeType] = NodeType.PROGRAM
    functions: List[Function] = field(default_factory=list)