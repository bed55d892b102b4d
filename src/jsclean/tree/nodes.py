"""Node model for parsed JavaScript programs.

Every syntax construct is a slotted dataclass deriving from ``Node``.  The
``type`` class attribute tags the variant with a ``NodeType`` member whose
value is the snake_case form of the ESTree name (``BinaryExpression`` ->
``"binary_expression"``); the emitter dispatches on that value.

Children are plain attributes: a single ``Node``, ``None``, or a list of
nodes.  Each child belongs to exactly one parent.  ``start``/``end`` are byte
offsets into the parsed text and ``line`` is 1-based; they order comment
attachment and are never consulted for layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any, ClassVar


class CommentKind(StrEnum):
    """Comment flavours: ``// line`` and ``/* block */``."""

    LINE = auto()
    BLOCK = auto()


@dataclass(slots=True)
class Comment:
    """A comment record.

    Attributes:
        kind:  LINE or BLOCK.
        value: Text without the ``//`` or ``/* */`` delimiters.
        start: Byte offset of the first delimiter character.
        end:   Byte offset just past the comment.
        line:  1-based source line of ``start``.
    """

    kind: CommentKind
    value: str
    start: int = 0
    end: int = 0
    line: int = 0


class NodeType(StrEnum):
    """Tag of every node variant; values are lowercased member names."""

    # statements
    PROGRAM = auto()
    BLOCK_STATEMENT = auto()
    EMPTY_STATEMENT = auto()
    DEBUGGER_STATEMENT = auto()
    EXPRESSION_STATEMENT = auto()
    IF_STATEMENT = auto()
    WHILE_STATEMENT = auto()
    DO_WHILE_STATEMENT = auto()
    FOR_STATEMENT = auto()
    FOR_IN_STATEMENT = auto()
    FOR_OF_STATEMENT = auto()
    SWITCH_STATEMENT = auto()
    SWITCH_CASE = auto()
    TRY_STATEMENT = auto()
    CATCH_CLAUSE = auto()
    RETURN_STATEMENT = auto()
    THROW_STATEMENT = auto()
    BREAK_STATEMENT = auto()
    CONTINUE_STATEMENT = auto()
    LABELED_STATEMENT = auto()
    VARIABLE_DECLARATION = auto()
    VARIABLE_DECLARATOR = auto()
    FUNCTION_DECLARATION = auto()
    CLASS_DECLARATION = auto()
    CLASS_BODY = auto()
    METHOD_DEFINITION = auto()
    PROPERTY_DEFINITION = auto()
    IMPORT_DECLARATION = auto()
    IMPORT_SPECIFIER = auto()
    IMPORT_DEFAULT_SPECIFIER = auto()
    IMPORT_NAMESPACE_SPECIFIER = auto()
    EXPORT_NAMED_DECLARATION = auto()
    EXPORT_SPECIFIER = auto()
    EXPORT_DEFAULT_DECLARATION = auto()
    EXPORT_ALL_DECLARATION = auto()
    # expressions
    IDENTIFIER = auto()
    LITERAL = auto()
    TEMPLATE_LITERAL = auto()
    TAGGED_TEMPLATE_EXPRESSION = auto()
    THIS_EXPRESSION = auto()
    SUPER = auto()
    META_PROPERTY = auto()
    ARRAY_EXPRESSION = auto()
    OBJECT_EXPRESSION = auto()
    PROPERTY = auto()
    FUNCTION_EXPRESSION = auto()
    ARROW_FUNCTION_EXPRESSION = auto()
    CLASS_EXPRESSION = auto()
    UNARY_EXPRESSION = auto()
    UPDATE_EXPRESSION = auto()
    BINARY_EXPRESSION = auto()
    LOGICAL_EXPRESSION = auto()
    ASSIGNMENT_EXPRESSION = auto()
    CONDITIONAL_EXPRESSION = auto()
    SEQUENCE_EXPRESSION = auto()
    CALL_EXPRESSION = auto()
    NEW_EXPRESSION = auto()
    MEMBER_EXPRESSION = auto()
    PARENTHESIZED_EXPRESSION = auto()
    SPREAD_ELEMENT = auto()
    AWAIT_EXPRESSION = auto()
    YIELD_EXPRESSION = auto()
    # patterns
    ARRAY_PATTERN = auto()
    OBJECT_PATTERN = auto()
    ASSIGNMENT_PATTERN = auto()
    REST_ELEMENT = auto()


# Attributes shared by every node; everything else holding a Node is a child.
BASE_FIELDS = frozenset({"start", "end", "line", "comments", "trailing_comments"})


@dataclass(slots=True, kw_only=True, eq=False)
class Node:
    """Base of all node variants.

    Attributes:
        comments:          Owned comments, rendered before the node.
        trailing_comments: Comments after the last child of a container
                           (program, block, class body, switch, array or
                           object literal), rendered before its closer.
    """

    type: ClassVar[NodeType]

    start: int = 0
    end: int = 0
    line: int = 0
    comments: list[Comment] = field(default_factory=list)
    trailing_comments: list[Comment] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass(slots=True, kw_only=True, eq=False)
class Program(Node):
    type: ClassVar[NodeType] = NodeType.PROGRAM
    body: list[Node] = field(default_factory=list)
    hashbang: str = ""


@dataclass(slots=True, kw_only=True, eq=False)
class BlockStatement(Node):
    type: ClassVar[NodeType] = NodeType.BLOCK_STATEMENT
    body: list[Node] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class EmptyStatement(Node):
    type: ClassVar[NodeType] = NodeType.EMPTY_STATEMENT


@dataclass(slots=True, kw_only=True, eq=False)
class DebuggerStatement(Node):
    type: ClassVar[NodeType] = NodeType.DEBUGGER_STATEMENT


@dataclass(slots=True, kw_only=True, eq=False)
class ExpressionStatement(Node):
    type: ClassVar[NodeType] = NodeType.EXPRESSION_STATEMENT
    expression: Node


@dataclass(slots=True, kw_only=True, eq=False)
class IfStatement(Node):
    type: ClassVar[NodeType] = NodeType.IF_STATEMENT
    test: Node
    consequent: Node
    alternate: Node | None = None


@dataclass(slots=True, kw_only=True, eq=False)
class WhileStatement(Node):
    type: ClassVar[NodeType] = NodeType.WHILE_STATEMENT
    test: Node
    body: Node


@dataclass(slots=True, kw_only=True, eq=False)
class DoWhileStatement(Node):
    type: ClassVar[NodeType] = NodeType.DO_WHILE_STATEMENT
    body: Node
    test: Node


@dataclass(slots=True, kw_only=True, eq=False)
class ForStatement(Node):
    type: ClassVar[NodeType] = NodeType.FOR_STATEMENT
    init: Node | None = None
    test: Node | None = None
    update: Node | None = None
    body: Node


@dataclass(slots=True, kw_only=True, eq=False)
class ForInStatement(Node):
    type: ClassVar[NodeType] = NodeType.FOR_IN_STATEMENT
    left: Node
    right: Node
    body: Node


@dataclass(slots=True, kw_only=True, eq=False)
class ForOfStatement(Node):
    type: ClassVar[NodeType] = NodeType.FOR_OF_STATEMENT
    left: Node
    right: Node
    body: Node
    is_await: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class SwitchCase(Node):
    """One ``case``; ``test`` is None for ``default``."""

    type: ClassVar[NodeType] = NodeType.SWITCH_CASE
    test: Node | None = None
    consequent: list[Node] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class SwitchStatement(Node):
    type: ClassVar[NodeType] = NodeType.SWITCH_STATEMENT
    discriminant: Node
    cases: list[SwitchCase] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class CatchClause(Node):
    type: ClassVar[NodeType] = NodeType.CATCH_CLAUSE
    param: Node | None = None
    body: BlockStatement


@dataclass(slots=True, kw_only=True, eq=False)
class TryStatement(Node):
    type: ClassVar[NodeType] = NodeType.TRY_STATEMENT
    block: BlockStatement
    handler: CatchClause | None = None
    finalizer: BlockStatement | None = None


@dataclass(slots=True, kw_only=True, eq=False)
class ReturnStatement(Node):
    type: ClassVar[NodeType] = NodeType.RETURN_STATEMENT
    argument: Node | None = None


@dataclass(slots=True, kw_only=True, eq=False)
class ThrowStatement(Node):
    type: ClassVar[NodeType] = NodeType.THROW_STATEMENT
    argument: Node


@dataclass(slots=True, kw_only=True, eq=False)
class BreakStatement(Node):
    type: ClassVar[NodeType] = NodeType.BREAK_STATEMENT
    label: Identifier | None = None


@dataclass(slots=True, kw_only=True, eq=False)
class ContinueStatement(Node):
    type: ClassVar[NodeType] = NodeType.CONTINUE_STATEMENT
    label: Identifier | None = None


@dataclass(slots=True, kw_only=True, eq=False)
class LabeledStatement(Node):
    type: ClassVar[NodeType] = NodeType.LABELED_STATEMENT
    label: Identifier
    body: Node


@dataclass(slots=True, kw_only=True, eq=False)
class VariableDeclarator(Node):
    type: ClassVar[NodeType] = NodeType.VARIABLE_DECLARATOR
    id: Node
    init: Node | None = None


@dataclass(slots=True, kw_only=True, eq=False)
class VariableDeclaration(Node):
    """``var``/``let``/``const`` with one or more declarators."""

    type: ClassVar[NodeType] = NodeType.VARIABLE_DECLARATION
    kind: str = "var"
    declarations: list[VariableDeclarator] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class FunctionDeclaration(Node):
    type: ClassVar[NodeType] = NodeType.FUNCTION_DECLARATION
    id: Identifier
    params: list[Node] = field(default_factory=list)
    body: BlockStatement
    is_async: bool = False
    generator: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class ClassBody(Node):
    type: ClassVar[NodeType] = NodeType.CLASS_BODY
    body: list[Node] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class ClassDeclaration(Node):
    type: ClassVar[NodeType] = NodeType.CLASS_DECLARATION
    id: Identifier
    superclass: Node | None = None
    body: ClassBody


@dataclass(slots=True, kw_only=True, eq=False)
class MethodDefinition(Node):
    """Class method; ``kind`` is ``method``, ``get`` or ``set``."""

    type: ClassVar[NodeType] = NodeType.METHOD_DEFINITION
    key: Node
    value: FunctionExpression
    kind: str = "method"
    static: bool = False
    computed: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class PropertyDefinition(Node):
    """Class field, ``static x = 1``."""

    type: ClassVar[NodeType] = NodeType.PROPERTY_DEFINITION
    key: Node
    value: Node | None = None
    static: bool = False
    computed: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class ImportSpecifier(Node):
    type: ClassVar[NodeType] = NodeType.IMPORT_SPECIFIER
    imported: Node
    local: Node | None = None


@dataclass(slots=True, kw_only=True, eq=False)
class ImportDefaultSpecifier(Node):
    type: ClassVar[NodeType] = NodeType.IMPORT_DEFAULT_SPECIFIER
    local: Identifier


@dataclass(slots=True, kw_only=True, eq=False)
class ImportNamespaceSpecifier(Node):
    type: ClassVar[NodeType] = NodeType.IMPORT_NAMESPACE_SPECIFIER
    local: Identifier


@dataclass(slots=True, kw_only=True, eq=False)
class ImportDeclaration(Node):
    type: ClassVar[NodeType] = NodeType.IMPORT_DECLARATION
    specifiers: list[Node] = field(default_factory=list)
    source: Literal


@dataclass(slots=True, kw_only=True, eq=False)
class ExportSpecifier(Node):
    type: ClassVar[NodeType] = NodeType.EXPORT_SPECIFIER
    local: Node
    exported: Node | None = None


@dataclass(slots=True, kw_only=True, eq=False)
class ExportNamedDeclaration(Node):
    type: ClassVar[NodeType] = NodeType.EXPORT_NAMED_DECLARATION
    declaration: Node | None = None
    specifiers: list[ExportSpecifier] = field(default_factory=list)
    source: Literal | None = None


@dataclass(slots=True, kw_only=True, eq=False)
class ExportDefaultDeclaration(Node):
    type: ClassVar[NodeType] = NodeType.EXPORT_DEFAULT_DECLARATION
    declaration: Node


@dataclass(slots=True, kw_only=True, eq=False)
class ExportAllDeclaration(Node):
    type: ClassVar[NodeType] = NodeType.EXPORT_ALL_DECLARATION
    exported: Node | None = None
    source: Literal


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass(slots=True, kw_only=True, eq=False)
class Identifier(Node):
    type: ClassVar[NodeType] = NodeType.IDENTIFIER
    name: str


@dataclass(slots=True, kw_only=True, eq=False)
class Literal(Node):
    """A literal value.

    ``value`` holds the decoded Python value: ``str`` for strings, ``int`` or
    ``float`` for numbers, ``True``/``False``/``None`` for the keyword
    literals.  Regular expressions keep ``value=None`` and are identified by
    ``raw``.
    """

    type: ClassVar[NodeType] = NodeType.LITERAL
    value: Any = None
    raw: str


@dataclass(slots=True, kw_only=True, eq=False)
class TemplateLiteral(Node):
    """Template string; ``quasis`` holds raw text chunks, one more than expressions."""

    type: ClassVar[NodeType] = NodeType.TEMPLATE_LITERAL
    quasis: list[str] = field(default_factory=list)
    expressions: list[Node] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class TaggedTemplateExpression(Node):
    type: ClassVar[NodeType] = NodeType.TAGGED_TEMPLATE_EXPRESSION
    tag: Node
    quasi: TemplateLiteral


@dataclass(slots=True, kw_only=True, eq=False)
class ThisExpression(Node):
    type: ClassVar[NodeType] = NodeType.THIS_EXPRESSION


@dataclass(slots=True, kw_only=True, eq=False)
class Super(Node):
    type: ClassVar[NodeType] = NodeType.SUPER


@dataclass(slots=True, kw_only=True, eq=False)
class MetaProperty(Node):
    """``new.target`` or ``import.meta``."""

    type: ClassVar[NodeType] = NodeType.META_PROPERTY
    meta: Identifier
    property: Identifier


@dataclass(slots=True, kw_only=True, eq=False)
class ArrayExpression(Node):
    """Array literal; ``None`` elements are holes."""

    type: ClassVar[NodeType] = NodeType.ARRAY_EXPRESSION
    elements: list[Node | None] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class Property(Node):
    """Object literal or object pattern member.

    ``kind`` is ``init``, ``get`` or ``set``.  Shorthand members keep a copy of
    the key as their value (an ``AssignmentPattern`` when a default is given).
    """

    type: ClassVar[NodeType] = NodeType.PROPERTY
    key: Node
    value: Node
    kind: str = "init"
    method: bool = False
    shorthand: bool = False
    computed: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class ObjectExpression(Node):
    type: ClassVar[NodeType] = NodeType.OBJECT_EXPRESSION
    properties: list[Node] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class FunctionExpression(Node):
    type: ClassVar[NodeType] = NodeType.FUNCTION_EXPRESSION
    id: Identifier | None = None
    params: list[Node] = field(default_factory=list)
    body: BlockStatement
    is_async: bool = False
    generator: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class ArrowFunctionExpression(Node):
    type: ClassVar[NodeType] = NodeType.ARROW_FUNCTION_EXPRESSION
    params: list[Node] = field(default_factory=list)
    body: Node
    is_async: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class ClassExpression(Node):
    type: ClassVar[NodeType] = NodeType.CLASS_EXPRESSION
    id: Identifier | None = None
    superclass: Node | None = None
    body: ClassBody


@dataclass(slots=True, kw_only=True, eq=False)
class UnaryExpression(Node):
    type: ClassVar[NodeType] = NodeType.UNARY_EXPRESSION
    operator: str
    argument: Node


@dataclass(slots=True, kw_only=True, eq=False)
class UpdateExpression(Node):
    type: ClassVar[NodeType] = NodeType.UPDATE_EXPRESSION
    operator: str
    argument: Node
    prefix: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class BinaryExpression(Node):
    type: ClassVar[NodeType] = NodeType.BINARY_EXPRESSION
    operator: str
    left: Node
    right: Node


@dataclass(slots=True, kw_only=True, eq=False)
class LogicalExpression(Node):
    type: ClassVar[NodeType] = NodeType.LOGICAL_EXPRESSION
    operator: str
    left: Node
    right: Node


@dataclass(slots=True, kw_only=True, eq=False)
class AssignmentExpression(Node):
    type: ClassVar[NodeType] = NodeType.ASSIGNMENT_EXPRESSION
    operator: str
    left: Node
    right: Node


@dataclass(slots=True, kw_only=True, eq=False)
class ConditionalExpression(Node):
    type: ClassVar[NodeType] = NodeType.CONDITIONAL_EXPRESSION
    test: Node
    consequent: Node
    alternate: Node


@dataclass(slots=True, kw_only=True, eq=False)
class SequenceExpression(Node):
    type: ClassVar[NodeType] = NodeType.SEQUENCE_EXPRESSION
    expressions: list[Node] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class CallExpression(Node):
    type: ClassVar[NodeType] = NodeType.CALL_EXPRESSION
    callee: Node
    arguments: list[Node] = field(default_factory=list)
    optional: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class NewExpression(Node):
    type: ClassVar[NodeType] = NodeType.NEW_EXPRESSION
    callee: Node
    arguments: list[Node] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class MemberExpression(Node):
    type: ClassVar[NodeType] = NodeType.MEMBER_EXPRESSION
    object: Node
    property: Node
    computed: bool = False
    optional: bool = False


@dataclass(slots=True, kw_only=True, eq=False)
class ParenthesizedExpression(Node):
    type: ClassVar[NodeType] = NodeType.PARENTHESIZED_EXPRESSION
    expression: Node


@dataclass(slots=True, kw_only=True, eq=False)
class SpreadElement(Node):
    type: ClassVar[NodeType] = NodeType.SPREAD_ELEMENT
    argument: Node


@dataclass(slots=True, kw_only=True, eq=False)
class AwaitExpression(Node):
    type: ClassVar[NodeType] = NodeType.AWAIT_EXPRESSION
    argument: Node


@dataclass(slots=True, kw_only=True, eq=False)
class YieldExpression(Node):
    type: ClassVar[NodeType] = NodeType.YIELD_EXPRESSION
    argument: Node | None = None
    delegate: bool = False


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------


@dataclass(slots=True, kw_only=True, eq=False)
class ArrayPattern(Node):
    type: ClassVar[NodeType] = NodeType.ARRAY_PATTERN
    elements: list[Node | None] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class ObjectPattern(Node):
    type: ClassVar[NodeType] = NodeType.OBJECT_PATTERN
    properties: list[Node] = field(default_factory=list)


@dataclass(slots=True, kw_only=True, eq=False)
class AssignmentPattern(Node):
    type: ClassVar[NodeType] = NodeType.ASSIGNMENT_PATTERN
    left: Node
    right: Node


@dataclass(slots=True, kw_only=True, eq=False)
class RestElement(Node):
    type: ClassVar[NodeType] = NodeType.REST_ELEMENT
    argument: Node
