"""Emitter: renders a transformed tree back to JavaScript source text.

Recursive descent over the node model with one ``_emit_<type>`` method per
node kind; the indentation level is passed explicitly.  Output is collected
in segments.  Block comment and template literal text go into *verbatim*
segments, and only the other segments go through the layout normalizations
applied at the end:

- runs of blank lines collapse to one,
- no blank lines at the start of the file,
- no blank line after a line ending in ``{``, ``[`` or ``:``,
- no blank line before a line starting with ``}`` or ``]``,
- exactly one newline at the end of the file.

Statements are never joined or split based on source positions, so layout
is a pure function of the tree and the options.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from jsclean.config import FormatOptions
from jsclean.emit.strings import quote_string
from jsclean.tree.nodes import (
    ArrayExpression,
    ArrayPattern,
    ArrowFunctionExpression,
    AssignmentExpression,
    AssignmentPattern,
    AwaitExpression,
    BinaryExpression,
    BlockStatement,
    BreakStatement,
    CallExpression,
    ClassBody,
    ClassDeclaration,
    ClassExpression,
    Comment,
    CommentKind,
    ConditionalExpression,
    ContinueStatement,
    DebuggerStatement,
    DoWhileStatement,
    EmptyStatement,
    ExportAllDeclaration,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    ExportSpecifier,
    ExpressionStatement,
    ForInStatement,
    ForOfStatement,
    ForStatement,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    IfStatement,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    LabeledStatement,
    Literal,
    LogicalExpression,
    MemberExpression,
    MetaProperty,
    MethodDefinition,
    NewExpression,
    Node,
    ObjectExpression,
    ObjectPattern,
    ParenthesizedExpression,
    Program,
    Property,
    PropertyDefinition,
    RestElement,
    ReturnStatement,
    SequenceExpression,
    SpreadElement,
    Super,
    SwitchCase,
    SwitchStatement,
    TaggedTemplateExpression,
    TemplateLiteral,
    ThisExpression,
    ThrowStatement,
    TryStatement,
    UnaryExpression,
    UpdateExpression,
    VariableDeclaration,
    VariableDeclarator,
    WhileStatement,
    YieldExpression,
)

__all__ = ["Emitter", "emit", "leading_char", "normalize_layout"]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Layout normalization
# ---------------------------------------------------------------------------

_BLANK_RUN = re.compile(r"\n{3,}")
_LEADING_BLANKS = re.compile(r"\A\n+")
# opening bracket, or a switch case or label line
_AFTER_OPENER = re.compile(r"([{\[]\n|^[ \t]*(?:case\b.*|default|[\w$]+):\n)\n+", re.MULTILINE)
_BEFORE_CLOSER = re.compile(r"\n\n+(?=[ \t]*[}\]])")


def normalize_layout(segments: Sequence[tuple[str, bool]]) -> str:
    """Join ``(text, verbatim)`` segments, normalizing blank lines outside verbatim text."""
    out: list[str] = []
    for i, (text, verbatim) in enumerate(segments):
        if not verbatim:
            text = _BLANK_RUN.sub("\n\n", text)
            if i == 0:
                text = _LEADING_BLANKS.sub("", text)
            text = _AFTER_OPENER.sub(r"\1", text)
            text = _BEFORE_CLOSER.sub("\n", text)
        out.append(text)
    return "".join(out).rstrip("\n") + "\n"


# ---------------------------------------------------------------------------
# Node classification
# ---------------------------------------------------------------------------

# Statements that end in a terminator when semicolons are on.
_TERMINATED = (
    BreakStatement,
    ContinueStatement,
    DebuggerStatement,
    DoWhileStatement,
    ExportAllDeclaration,
    ExpressionStatement,
    ImportDeclaration,
    ReturnStatement,
    ThrowStatement,
    VariableDeclaration,
)

_FUNCTION_LIKE = (ClassDeclaration, ClassExpression, FunctionDeclaration, FunctionExpression)

# Characters that would continue the previous line when semicolons are off.
_ASI_HAZARDS = frozenset("([`+-/")

_WORD_OPERATOR = re.compile(r"[a-z]")
_DECIMAL_INT = re.compile(r"[0-9_]+")


def leading_char(node: Node) -> str:
    """First character the emitter writes for expression *node* ("" for a word)."""
    while True:
        match node:
            case ParenthesizedExpression():
                return "("
            case ArrayExpression() | ArrayPattern():
                return "["
            case ObjectExpression() | ObjectPattern():
                return "{"
            case TemplateLiteral():
                return "`"
            case Literal(raw=raw):
                return raw[:1]
            case UnaryExpression(operator=op) | UpdateExpression(prefix=True, operator=op):
                return op[0]
            case ArrowFunctionExpression(is_async=False, params=params):
                if len(params) == 1 and isinstance(params[0], Identifier):
                    return ""
                return "("
            case (
                BinaryExpression(left=inner)
                | LogicalExpression(left=inner)
                | AssignmentExpression(left=inner)
                | CallExpression(callee=inner)
                | TaggedTemplateExpression(tag=inner)
                | MemberExpression(object=inner)
                | ConditionalExpression(test=inner)
                | UpdateExpression(argument=inner)
                | SequenceExpression(expressions=[inner, *_])
            ):
                node = inner
            case _:
                return ""


def _is_spaced(node: Node) -> bool:
    """Function and class declarations and class methods get blank lines around them."""
    match node:
        case FunctionDeclaration() | ClassDeclaration() | MethodDefinition():
            return True
        case ExportNamedDeclaration(declaration=decl) | ExportDefaultDeclaration(declaration=decl):
            return isinstance(decl, _FUNCTION_LIKE)
    return False


def _is_module_header(node: Node) -> bool:
    """An import, or a ``var x = require(...)`` declaration."""
    if isinstance(node, ImportDeclaration):
        return True
    if not isinstance(node, VariableDeclaration) or len(node.declarations) != 1:
        return False
    init = node.declarations[0].init
    return (
        isinstance(init, CallExpression)
        and isinstance(init.callee, Identifier)
        and init.callee.name == "require"
    )


def _is_stray(node: Node) -> bool:
    """An uncommented ``;`` standing alone in a statement list."""
    return isinstance(node, EmptyStatement) and not node.comments


def _comment_text(comment: Comment) -> str:
    if comment.kind is CommentKind.LINE:
        value = comment.value
        return "//" + value if value.startswith(" ") else "// " + value
    return "/*" + comment.value + "*/"


# ---------------------------------------------------------------------------
# Emitter
# ---------------------------------------------------------------------------


class Emitter:
    """Single-use renderer for one program.

    Example::

        text = Emitter(FormatOptions()).render(program)
    """

    def __init__(self, options: FormatOptions) -> None:
        self._indent = options.indent
        self._semicolons = options.semicolons
        self._parts: list[str] = []
        self._segments: list[tuple[str, bool]] = []

    # ------------------------------------------------------------------
    # Output buffer
    # ------------------------------------------------------------------

    def _write(self, text: str) -> None:
        self._parts.append(text)

    def _verbatim(self, text: str) -> None:
        if not text:
            return
        self._flush()
        self._segments.append((text, True))

    def _flush(self) -> None:
        if self._parts:
            self._segments.append(("".join(self._parts), False))
            self._parts = []

    def _pad(self, level: int) -> None:
        self._write(self._indent * level)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render(self, program: Program) -> str:
        """Render *program* to normalized source text."""
        if program.hashbang:
            self._write(program.hashbang + "\n\n")
        self._statements(program.body, 0)
        self._comments(program.trailing_comments, 0)
        self._flush()
        return normalize_layout(self._segments)

    def emit(self, node: Node, level: int) -> None:
        """Write *node* at indentation *level*.

        Raises:
            TypeError: If there is no emitter for the node kind.
        """
        handler = getattr(self, f"_emit_{node.type}", None)
        if handler is None:
            msg = f"no emitter for node type {node.type!r}"
            raise TypeError(msg)
        handler(node, level)

    # ------------------------------------------------------------------
    # Statement layout
    # ------------------------------------------------------------------

    def _comments(self, comments: list[Comment], level: int) -> None:
        if not comments:
            return
        self._write("\n")
        for comment in comments:
            self._pad(level)
            if comment.kind is CommentKind.BLOCK:
                self._verbatim(_comment_text(comment))
            else:
                self._write(_comment_text(comment))
            self._write("\n")

    def _header_comments(self, node: Node, level: int) -> None:
        """Comments owned by a for-loop's init declaration, shown above the loop."""
        if isinstance(node, ForStatement) and isinstance(node.init, VariableDeclaration):
            self._comments(node.init.comments, level)
        elif isinstance(node, LabeledStatement):
            self._header_comments(node.body, level)

    def _terminator(self, node: Node) -> str:
        if isinstance(node, PropertyDefinition):
            return ";"
        if not self._semicolons:
            return ""
        match node:
            case ExportNamedDeclaration(declaration=decl):
                return ";" if decl is None or isinstance(decl, VariableDeclaration) else ""
            case ExportDefaultDeclaration(declaration=decl):
                return "" if isinstance(decl, _FUNCTION_LIKE) else ";"
        return ";" if isinstance(node, _TERMINATED) else ""

    def _statement(self, node: Node, level: int) -> None:
        self.emit(node, level)
        self._write(self._terminator(node))

    def _needs_asi_guard(self, node: Node) -> bool:
        """A list statement opening with a character that would join the previous line."""
        return (
            not self._semicolons
            and isinstance(node, ExpressionStatement)
            and leading_char(node.expression) in _ASI_HAZARDS
        )

    def _statements(self, body: list[Node], level: int) -> None:
        prev: Node | None = None
        for stmt in body:
            if isinstance(stmt, EmptyStatement):
                # dropped from the list; its comments are kept
                self._comments(stmt.comments, level)
                continue
            if prev is not None and _is_module_header(prev) and not _is_module_header(stmt):
                self._write("\n")
            self._comments(stmt.comments, level)
            self._header_comments(stmt, level)
            spaced = _is_spaced(stmt)
            if spaced:
                self._write("\n")
            self._pad(level)
            if self._needs_asi_guard(stmt):
                self._write(";")
            self._statement(stmt, level)
            self._write("\n")
            if spaced:
                self._write("\n")
            prev = stmt

    def _body(self, node: Node, level: int) -> None:
        """Body of a loop or if branch: a cuddled block or an indented statement."""
        if isinstance(node, BlockStatement):
            self._write(" ")
            self._emit_block_statement(node, level)
            return
        self._write("\n")
        self._header_comments(node, level + 1)
        self._pad(level + 1)
        self._statement(node, level + 1)

    def _after_body(self, node: Node, level: int) -> None:
        """Separator between a body and a following ``else``/``while``."""
        if isinstance(node, BlockStatement):
            self._write(" ")
        else:
            self._write("\n")
            self._pad(level)

    def _braced(self, body: list[Node], trailing: list[Comment], level: int) -> None:
        if not trailing and all(_is_stray(stmt) for stmt in body):
            self._write("{}")
            return
        self._write("{\n")
        self._statements(body, level + 1)
        self._comments(trailing, level + 1)
        self._pad(level)
        self._write("}")

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _emit_block_statement(self, node: BlockStatement, level: int) -> None:
        self._braced(node.body, node.trailing_comments, level)

    def _emit_empty_statement(self, node: EmptyStatement, level: int) -> None:
        self._write(";")

    def _emit_debugger_statement(self, node: DebuggerStatement, level: int) -> None:
        self._write("debugger")

    def _emit_expression_statement(self, node: ExpressionStatement, level: int) -> None:
        self.emit(node.expression, level)

    def _emit_if_statement(self, node: IfStatement, level: int) -> None:
        self._write("if (")
        self.emit(node.test, level)
        self._write(")")
        self._body(node.consequent, level)
        if node.alternate is None:
            return
        self._after_body(node.consequent, level)
        self._write("else")
        if isinstance(node.alternate, IfStatement):
            self._write(" ")
            self._emit_if_statement(node.alternate, level)
        else:
            self._body(node.alternate, level)

    def _emit_while_statement(self, node: WhileStatement, level: int) -> None:
        self._write("while (")
        self.emit(node.test, level)
        self._write(")")
        self._body(node.body, level)

    def _emit_do_while_statement(self, node: DoWhileStatement, level: int) -> None:
        self._write("do")
        self._body(node.body, level)
        self._after_body(node.body, level)
        self._write("while (")
        self.emit(node.test, level)
        self._write(")")

    def _emit_for_statement(self, node: ForStatement, level: int) -> None:
        self._write("for (")
        if node.init is not None:
            self.emit(node.init, level)
        self._write(";")
        if node.test is not None:
            self._write(" ")
            self.emit(node.test, level)
        self._write(";")
        if node.update is not None:
            self._write(" ")
            self.emit(node.update, level)
        self._write(")")
        self._body(node.body, level)

    def _for_each(self, node: ForInStatement | ForOfStatement, keyword: str, level: int) -> None:
        self.emit(node.left, level)
        self._write(f" {keyword} ")
        self.emit(node.right, level)
        self._write(")")
        self._body(node.body, level)

    def _emit_for_in_statement(self, node: ForInStatement, level: int) -> None:
        self._write("for (")
        self._for_each(node, "in", level)

    def _emit_for_of_statement(self, node: ForOfStatement, level: int) -> None:
        self._write("for await (" if node.is_await else "for (")
        self._for_each(node, "of", level)

    def _emit_switch_statement(self, node: SwitchStatement, level: int) -> None:
        self._write("switch (")
        self.emit(node.discriminant, level)
        self._write(") ")
        if not node.cases and not node.trailing_comments:
            self._write("{}")
            return
        self._write("{\n")
        for case in node.cases:
            self._comments(case.comments, level)
            self._pad(level)
            self._emit_switch_case(case, level)
        self._comments(node.trailing_comments, level + 1)
        self._pad(level)
        self._write("}")

    def _emit_switch_case(self, node: SwitchCase, level: int) -> None:
        if node.test is None:
            self._write("default:\n")
        else:
            self._write("case ")
            self.emit(node.test, level)
            self._write(":\n")
        self._statements(node.consequent, level + 1)

    def _emit_try_statement(self, node: TryStatement, level: int) -> None:
        self._write("try ")
        self._emit_block_statement(node.block, level)
        if node.handler is not None:
            self._write(" catch ")
            if node.handler.param is not None:
                self._write("(")
                self.emit(node.handler.param, level)
                self._write(") ")
            self._emit_block_statement(node.handler.body, level)
        if node.finalizer is not None:
            self._write(" finally ")
            self._emit_block_statement(node.finalizer, level)

    def _emit_return_statement(self, node: ReturnStatement, level: int) -> None:
        self._write("return")
        if node.argument is not None:
            self._write(" ")
            self.emit(node.argument, level)

    def _emit_throw_statement(self, node: ThrowStatement, level: int) -> None:
        self._write("throw ")
        self.emit(node.argument, level)

    def _emit_break_statement(self, node: BreakStatement, level: int) -> None:
        self._write("break" if node.label is None else f"break {node.label.name}")

    def _emit_continue_statement(self, node: ContinueStatement, level: int) -> None:
        self._write("continue" if node.label is None else f"continue {node.label.name}")

    def _emit_labeled_statement(self, node: LabeledStatement, level: int) -> None:
        self._write(f"{node.label.name}:\n")
        self._pad(level)
        self._statement(node.body, level)

    def _emit_variable_declaration(self, node: VariableDeclaration, level: int) -> None:
        self._write(node.kind + " ")
        self._list(node.declarations, level)

    def _emit_variable_declarator(self, node: VariableDeclarator, level: int) -> None:
        self.emit(node.id, level)
        if node.init is not None:
            self._write(" = ")
            self.emit(node.init, level)

    def _emit_function_declaration(self, node: FunctionDeclaration, level: int) -> None:
        self._function(node, level)

    def _emit_class_declaration(self, node: ClassDeclaration, level: int) -> None:
        self._class(node, level)

    # ------------------------------------------------------------------
    # Classes
    # ------------------------------------------------------------------

    def _class(self, node: ClassDeclaration | ClassExpression, level: int) -> None:
        self._write("class")
        if node.id is not None:
            self._write(" " + node.id.name)
        if node.superclass is not None:
            self._write(" extends ")
            self.emit(node.superclass, level)
        self._write(" ")
        self._emit_class_body(node.body, level)

    def _emit_class_body(self, node: ClassBody, level: int) -> None:
        self._braced(node.body, node.trailing_comments, level)

    def _key(self, key: Node, computed: bool, level: int) -> None:
        if computed:
            self._write("[")
            self.emit(key, level)
            self._write("]")
        else:
            self.emit(key, level)

    def _method(self, kind: str, key: Node, computed: bool, value: FunctionExpression, level: int) -> None:
        """``get x() {}``, ``async *[k]() {}`` and friends."""
        if kind in ("get", "set"):
            self._write(kind + " ")
        if value.is_async:
            self._write("async ")
        if value.generator:
            self._write("*")
        self._key(key, computed, level)
        self._params(value.params, level)
        self._write(" ")
        self._emit_block_statement(value.body, level)

    def _emit_method_definition(self, node: MethodDefinition, level: int) -> None:
        if node.static:
            self._write("static ")
        self._method(node.kind, node.key, node.computed, node.value, level)

    def _emit_property_definition(self, node: PropertyDefinition, level: int) -> None:
        if node.static:
            self._write("static ")
        self._key(node.key, node.computed, level)
        if node.value is not None:
            self._write(" = ")
            self.emit(node.value, level)

    # ------------------------------------------------------------------
    # Modules
    # ------------------------------------------------------------------

    def _emit_import_declaration(self, node: ImportDeclaration, level: int) -> None:
        self._write("import ")
        clauses: list[str] = []
        named: list[ImportSpecifier] = []
        for spec in node.specifiers:
            if isinstance(spec, ImportDefaultSpecifier):
                clauses.append(spec.local.name)
            elif isinstance(spec, ImportNamespaceSpecifier):
                clauses.append("* as " + spec.local.name)
            else:
                named.append(spec)
        self._write(", ".join(clauses))
        if named:
            if clauses:
                self._write(", ")
            self._write("{")
            self._list(named, level)
            self._write("}")
        if clauses or named:
            self._write(" from ")
        self.emit(node.source, level)

    def _emit_import_specifier(self, node: ImportSpecifier, level: int) -> None:
        self.emit(node.imported, level)
        if node.local is not None:
            self._write(" as ")
            self.emit(node.local, level)

    def _emit_import_default_specifier(self, node: ImportDefaultSpecifier, level: int) -> None:
        self.emit(node.local, level)

    def _emit_import_namespace_specifier(self, node: ImportNamespaceSpecifier, level: int) -> None:
        self._write("* as ")
        self.emit(node.local, level)

    def _emit_export_named_declaration(self, node: ExportNamedDeclaration, level: int) -> None:
        self._write("export ")
        if node.declaration is not None:
            self.emit(node.declaration, level)
            return
        self._write("{")
        self._list(node.specifiers, level)
        self._write("}")
        if node.source is not None:
            self._write(" from ")
            self.emit(node.source, level)

    def _emit_export_specifier(self, node: ExportSpecifier, level: int) -> None:
        self.emit(node.local, level)
        if node.exported is not None:
            self._write(" as ")
            self.emit(node.exported, level)

    def _emit_export_default_declaration(self, node: ExportDefaultDeclaration, level: int) -> None:
        self._write("export default ")
        self.emit(node.declaration, level)

    def _emit_export_all_declaration(self, node: ExportAllDeclaration, level: int) -> None:
        self._write("export *")
        if node.exported is not None:
            self._write(" as ")
            self.emit(node.exported, level)
        self._write(" from ")
        self.emit(node.source, level)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _list(self, nodes: Sequence[Node | None], level: int) -> None:
        for i, node in enumerate(nodes):
            if i:
                self._write(", ")
            if node is not None:
                self.emit(node, level)

    def _params(self, params: list[Node], level: int) -> None:
        self._write("(")
        self._list(params, level)
        self._write(")")

    def _emit_identifier(self, node: Identifier, level: int) -> None:
        self._write(node.name)

    def _emit_literal(self, node: Literal, level: int) -> None:
        if isinstance(node.value, str):
            self._write(quote_string(node.value))
        else:
            self._write(node.raw)

    def _emit_template_literal(self, node: TemplateLiteral, level: int) -> None:
        self._write("`")
        for i, quasi in enumerate(node.quasis):
            if i:
                self._write("${")
                self.emit(node.expressions[i - 1], level)
                self._write("}")
            self._verbatim(quasi)
        self._write("`")

    def _emit_tagged_template_expression(self, node: TaggedTemplateExpression, level: int) -> None:
        self.emit(node.tag, level)
        self._emit_template_literal(node.quasi, level)

    def _emit_this_expression(self, node: ThisExpression, level: int) -> None:
        self._write("this")

    def _emit_super(self, node: Super, level: int) -> None:
        self._write("super")

    def _emit_meta_property(self, node: MetaProperty, level: int) -> None:
        self._write(f"{node.meta.name}.{node.property.name}")

    def _emit_array_expression(self, node: ArrayExpression, level: int) -> None:
        if not node.elements and not node.trailing_comments:
            self._write("[]")
            return
        self._write("[\n")
        for element in node.elements:
            if element is not None:
                self._comments(element.comments, level + 1)
            self._pad(level + 1)
            if element is not None:
                self.emit(element, level + 1)
            self._write(",\n")
        self._comments(node.trailing_comments, level + 1)
        self._pad(level)
        self._write("]")

    def _emit_object_expression(self, node: ObjectExpression, level: int) -> None:
        if not node.properties and not node.trailing_comments:
            self._write("{}")
            return
        self._write("{\n")
        for prop in node.properties:
            spaced = isinstance(prop, Property) and isinstance(prop.value, FunctionExpression)
            if spaced:
                self._write("\n")
            self._comments(prop.comments, level + 1)
            self._pad(level + 1)
            self.emit(prop, level + 1)
            self._write(",\n")
            if spaced:
                self._write("\n")
        self._comments(node.trailing_comments, level + 1)
        self._pad(level)
        self._write("}")

    def _emit_property(self, node: Property, level: int) -> None:
        if node.shorthand:
            if isinstance(node.value, AssignmentPattern):
                self._emit_assignment_pattern(node.value, level)
            else:
                self.emit(node.key, level)
            return
        if (node.method or node.kind != "init") and isinstance(node.value, FunctionExpression):
            self._method(node.kind, node.key, node.computed, node.value, level)
            return
        self._key(node.key, node.computed, level)
        self._write(": ")
        self.emit(node.value, level)

    def _function(self, node: FunctionDeclaration | FunctionExpression, level: int) -> None:
        if node.is_async:
            self._write("async ")
        self._write("function*" if node.generator else "function")
        self._write(" " + node.id.name if node.id is not None else " ")
        self._params(node.params, level)
        self._write(" ")
        self._emit_block_statement(node.body, level)

    def _emit_function_expression(self, node: FunctionExpression, level: int) -> None:
        self._function(node, level)

    def _emit_arrow_function_expression(self, node: ArrowFunctionExpression, level: int) -> None:
        if node.is_async:
            self._write("async ")
        if len(node.params) == 1 and isinstance(node.params[0], Identifier):
            self._write(node.params[0].name)
        else:
            self._params(node.params, level)
        self._write(" => ")
        self.emit(node.body, level)

    def _emit_class_expression(self, node: ClassExpression, level: int) -> None:
        self._class(node, level)

    def _emit_unary_expression(self, node: UnaryExpression, level: int) -> None:
        op = node.operator
        self._write(op)
        if _WORD_OPERATOR.search(op) or (op in "+-" and leading_char(node.argument) == op):
            self._write(" ")
        self.emit(node.argument, level)

    def _emit_update_expression(self, node: UpdateExpression, level: int) -> None:
        if node.prefix:
            self._write(node.operator)
            self.emit(node.argument, level)
        else:
            self.emit(node.argument, level)
            self._write(node.operator)

    def _binary(self, node: BinaryExpression | LogicalExpression | AssignmentExpression, level: int) -> None:
        # left-nested chains are unwound here rather than through emit()
        rights = [(node.operator, node.right)]
        left = node.left
        while isinstance(left, BinaryExpression | LogicalExpression):
            rights.append((left.operator, left.right))
            left = left.left
        self.emit(left, level)
        for operator, right in reversed(rights):
            self._write(f" {operator} ")
            self.emit(right, level)

    def _emit_binary_expression(self, node: BinaryExpression, level: int) -> None:
        self._binary(node, level)

    def _emit_logical_expression(self, node: LogicalExpression, level: int) -> None:
        self._binary(node, level)

    def _emit_assignment_expression(self, node: AssignmentExpression, level: int) -> None:
        self._binary(node, level)

    def _emit_conditional_expression(self, node: ConditionalExpression, level: int) -> None:
        self.emit(node.test, level)
        self._write(" ? ")
        self.emit(node.consequent, level)
        self._write(" : ")
        self.emit(node.alternate, level)

    def _emit_sequence_expression(self, node: SequenceExpression, level: int) -> None:
        self._list(node.expressions, level)

    def _emit_call_expression(self, node: CallExpression, level: int) -> None:
        self.emit(node.callee, level)
        if node.optional:
            self._write("?.")
        self._params(node.arguments, level)

    def _emit_new_expression(self, node: NewExpression, level: int) -> None:
        self._write("new ")
        self.emit(node.callee, level)
        self._params(node.arguments, level)

    def _emit_member_expression(self, node: MemberExpression, level: int) -> None:
        obj = node.object
        self.emit(obj, level)
        if isinstance(obj, Literal) and not node.computed and _DECIMAL_INT.fullmatch(obj.raw):
            # 1.toString() would read as a malformed number
            self._write(" ")
        if node.optional:
            self._write("?.")
        if node.computed:
            self._write("[")
            self.emit(node.property, level)
            self._write("]")
        else:
            if not node.optional:
                self._write(".")
            self.emit(node.property, level)

    def _emit_parenthesized_expression(self, node: ParenthesizedExpression, level: int) -> None:
        self._write("(")
        self.emit(node.expression, level)
        self._write(")")

    def _emit_spread_element(self, node: SpreadElement, level: int) -> None:
        self._write("...")
        self.emit(node.argument, level)

    def _emit_await_expression(self, node: AwaitExpression, level: int) -> None:
        self._write("await ")
        self.emit(node.argument, level)

    def _emit_yield_expression(self, node: YieldExpression, level: int) -> None:
        self._write("yield*" if node.delegate else "yield")
        if node.argument is not None:
            self._write(" ")
            self.emit(node.argument, level)

    # ------------------------------------------------------------------
    # Patterns
    # ------------------------------------------------------------------

    def _emit_array_pattern(self, node: ArrayPattern, level: int) -> None:
        self._write("[")
        self._list(node.elements, level)
        if node.elements and node.elements[-1] is None:
            # a trailing hole needs its own comma
            self._write(",")
        self._write("]")

    def _emit_object_pattern(self, node: ObjectPattern, level: int) -> None:
        self._write("{")
        self._list(node.properties, level)
        self._write("}")

    def _emit_assignment_pattern(self, node: AssignmentPattern, level: int) -> None:
        self.emit(node.left, level)
        self._write(" = ")
        self.emit(node.right, level)

    def _emit_rest_element(self, node: RestElement, level: int) -> None:
        self._write("...")
        self.emit(node.argument, level)


def emit(program: Program, options: FormatOptions | None = None) -> str:
    """Render *program* with *options* (defaults when None)."""
    text = Emitter(options if options is not None else FormatOptions()).render(program)
    logger.debug("emitted %d characters", len(text))
    return text
