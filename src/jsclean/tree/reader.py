"""TreeReader: converts a tree-sitter JavaScript syntax tree into the node model.

tree-sitter produces a concrete syntax tree (tokens, parentheses, comments as
extras).  The reader walks it with recursive dispatch on the concrete node type
(``_read_<type>``) and builds the ESTree-shaped ``Node`` variants from
``jsclean.tree.nodes``.  Comments are collected separately into a flat list
ordered by source offset; attaching them to nodes is the job of
``jsclean.tree.comments``.

A leading ``#!`` line is split off before parsing.  Its newline stays with the
body, so row numbers reported by tree-sitter still match the original file.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any

import tree_sitter_javascript
from tree_sitter import Language, Parser
from tree_sitter import Node as TSNode

from jsclean.errors import ParseError, UnsupportedSyntaxError
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
    CatchClause,
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

__all__ = ["JS_LANGUAGE", "ParseResult", "TreeReader", "parse", "split_hashbang"]

logger = logging.getLogger(__name__)

# Compiled once; Parser instances are created per call.
JS_LANGUAGE = Language(tree_sitter_javascript.language())

_LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})

# Concrete node types that all read as plain identifiers.
_IDENTIFIER_TYPES = frozenset(
    {
        "identifier",
        "property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "statement_identifier",
        "private_property_identifier",
        "undefined",
        "import",
    }
)

_COMMENT_TYPES = frozenset({"comment", "html_comment"})

_SIMPLE_ESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v"}

# One escape sequence after the backslash: \u{...}, \uXXXX, \xXX, legacy octal,
# CRLF line continuation, or any single character.
_ESCAPE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[0-7]{1,3}|\r\n|[\s\S])"
)

_LINE_CONTINUATIONS = frozenset({"\n", "\r\n", "\r", "\u2028", "\u2029"})


def _unescape(match: re.Match[str]) -> str:
    seq = match.group(1)
    head = seq[0]
    if head == "u" and len(seq) > 1:
        digits = seq[2:-1] if seq[1] == "{" else seq[1:]
        return chr(int(digits, 16))
    if head == "x" and len(seq) == 3:
        return chr(int(seq[1:], 16))
    if head in "01234567":
        # \400 reads as \40 followed by "0": octal escapes stop at 0o377
        if len(seq) == 3 and head > "3":
            return chr(int(seq[:2], 8)) + seq[2]
        return chr(int(seq, 8))
    if seq in _LINE_CONTINUATIONS:
        return ""
    return _SIMPLE_ESCAPES.get(seq, seq)


def decode_string(body: str) -> str:
    """Decode the escape sequences of a string literal body (quotes removed).

    Escaped surrogate pairs (``\\ud83d\\ude00``) combine into one character;
    lone surrogates are kept as they are.
    """
    text = _ESCAPE.sub(_unescape, body)
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def number_value(raw: str) -> int | float:
    """Numeric value of a JS number literal (prefixes, separators, BigInt suffix)."""
    text = raw.replace("_", "")
    if text.endswith("n"):
        return int(text[:-1], 0)
    if text[:2].lower() in ("0x", "0o", "0b"):
        return int(text, 0)
    if len(text) > 1 and text[0] == "0" and text.isdigit():
        # legacy octal, unless a digit rules it out
        return int(text, 8) if set(text) <= set("01234567") else int(text)
    try:
        return int(text)
    except ValueError:
        return float(text)


def split_hashbang(text: str) -> tuple[str, str]:
    """Split a leading ``#!`` line off *text*; the newline stays with the body."""
    if not text.startswith("#!"):
        return "", text
    i = text.find("\n")
    if i < 0:
        return text, ""
    return text[:i], text[i:]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Output of the Parse stage.

    Attributes:
        program:  Root node; ``program.hashbang`` is set.
        comments: Every comment, ordered by source offset.
        hashbang: The split-off ``#!`` line, or "".
    """

    program: Program
    comments: list[Comment] = field(default_factory=list)
    hashbang: str = ""


def parse(text: str) -> ParseResult:
    """Parse JavaScript *text* into a ``ParseResult``.

    Raises:
        ParseError: If the text is not syntactically valid.
        UnsupportedSyntaxError: If it uses syntax outside the node model.
    """
    hashbang, body = split_hashbang(text)
    source = body.encode("utf-8")
    tree = Parser(JS_LANGUAGE).parse(source)
    root = tree.root_node
    if root.has_error:
        raise _syntax_error(root, source)
    reader = TreeReader(source)
    program = reader.read_program(root)
    program.hashbang = hashbang
    comments = reader.collect_comments(root)
    logger.debug(
        "parsed %d top-level statements, %d comments", len(program.body), len(comments)
    )
    return ParseResult(program=program, comments=comments, hashbang=hashbang)


def _first_error(node: TSNode) -> TSNode | None:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        if current.has_error:
            stack.extend(reversed(current.children))
    return None


def _syntax_error(root: TSNode, source: bytes) -> ParseError:
    bad = _first_error(root) or root
    row, column = bad.start_point
    if bad.is_missing:
        message = f"missing {bad.type!r}"
    else:
        snippet = source[bad.start_byte : bad.end_byte].decode("utf-8", errors="replace")
        snippet = snippet.strip().splitlines()[0][:30] if snippet.strip() else ""
        message = f"unexpected {snippet!r}" if snippet else "unexpected end of input"
    return ParseError(message, line=row + 1, column=column + 1)


class TreeReader:
    """Builds ``Node`` trees from tree-sitter nodes of one source buffer.

    Dispatch is by concrete node type: ``read`` looks up ``_read_<type>`` and
    raises ``UnsupportedSyntaxError`` when there is none.  A reader holds the
    source bytes only; create one per parse.

    Example::

        reader = TreeReader(source)
        program = reader.read_program(tree.root_node)
    """

    def __init__(self, source: bytes) -> None:
        self._source = source

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def read_program(self, ts: TSNode) -> Program:
        body = [self.read(c) for c in self._named(ts) if c.type != "hash_bang_line"]
        return Program(body=body, start=0, end=len(self._source), line=1)

    def collect_comments(self, root: TSNode) -> list[Comment]:
        """Return every comment in the tree, ordered by source offset."""
        comments: list[Comment] = []
        stack = [root]
        while stack:
            ts = stack.pop()
            if ts.type in _COMMENT_TYPES:
                comments.append(self._comment(ts))
                continue
            stack.extend(reversed(ts.children))
        comments.sort(key=attrgetter("start"))
        return comments

    def read(self, ts: TSNode) -> Node:
        """Convert one concrete node (statement, expression or pattern)."""
        if ts.type in _IDENTIFIER_TYPES:
            return self._identifier(ts)
        handler = getattr(self, f"_read_{ts.type}", None)
        if handler is None:
            raise self._unsupported(ts)
        return handler(ts)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _text(self, ts: TSNode) -> str:
        return self._source[ts.start_byte : ts.end_byte].decode("utf-8")

    def _named(self, ts: TSNode) -> list[TSNode]:
        return [c for c in ts.named_children if c.type not in _COMMENT_TYPES]

    def _field(self, ts: TSNode, name: str) -> TSNode | None:
        return ts.child_by_field_name(name)

    def _tokens(self, ts: TSNode) -> set[str]:
        """Types of the anonymous (keyword/punctuation) children of *ts*."""
        return {c.type for c in ts.children if not c.is_named}

    def _pos(self, ts: TSNode) -> dict[str, Any]:
        return {"start": ts.start_byte, "end": ts.end_byte, "line": ts.start_point[0] + 1}

    def _span(self, first: TSNode, last: TSNode) -> dict[str, Any]:
        return {
            "start": first.start_byte,
            "end": last.end_byte,
            "line": first.start_point[0] + 1,
        }

    def _unsupported(self, ts: TSNode) -> UnsupportedSyntaxError:
        row, column = ts.start_point
        return UnsupportedSyntaxError(
            f"unsupported syntax {ts.type!r}", line=row + 1, column=column + 1
        )

    def _require(self, ts: TSNode, name: str) -> TSNode:
        child = self._field(ts, name)
        if child is None:
            raise self._unsupported(ts)
        return child

    def _optional(self, ts: TSNode | None) -> Node | None:
        return None if ts is None else self.read(ts)

    def _comment(self, ts: TSNode) -> Comment:
        text = self._text(ts)
        pos = self._pos(ts)
        if text.startswith("//"):
            return Comment(CommentKind.LINE, text[2:].rstrip(), **pos)
        if text.startswith("/*"):
            return Comment(CommentKind.BLOCK, text[2:-2], **pos)
        raise self._unsupported(ts)

    def _identifier(self, ts: TSNode) -> Identifier:
        return Identifier(name=self._text(ts), **self._pos(ts))

    def _unparen(self, ts: TSNode) -> Node:
        """Read the expression inside the syntax parentheses of a statement head."""
        if ts.type != "parenthesized_expression":
            return self.read(ts)
        return self.read(self._named(ts)[0])

    def _params(self, ts: TSNode | None) -> list[Node]:
        if ts is None:
            return []
        return [self.read(c) for c in self._named(ts)]

    def _elements(self, ts: TSNode) -> list[Node | None]:
        """Array elements including holes, from the comma structure."""
        elements: list[Node | None] = []
        expecting = True
        for c in ts.children:
            if c.type in _COMMENT_TYPES:
                continue
            if c.type == ",":
                if expecting:
                    elements.append(None)
                expecting = True
            elif c.is_named:
                elements.append(self.read(c))
                expecting = False
        return elements

    def _property_key(self, ts: TSNode) -> tuple[Node, bool]:
        """Return (key, computed) for a property name node."""
        if ts.type == "computed_property_name":
            return self.read(self._named(ts)[0]), True
        return self.read(ts), False

    def _check_decorators(self, ts: TSNode) -> None:
        for c in ts.children:
            if c.type == "decorator":
                raise self._unsupported(c)

    def _function_expression(self, ts: TSNode, params: TSNode, body: TSNode) -> FunctionExpression:
        tokens = self._tokens(ts)
        return FunctionExpression(
            params=self._params(params),
            body=self._read_statement_block(body),
            is_async="async" in tokens,
            generator="*" in tokens,
            **self._span(params, body),
        )

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _read_expression_statement(self, ts: TSNode) -> ExpressionStatement:
        return ExpressionStatement(expression=self.read(self._named(ts)[0]), **self._pos(ts))

    def _read_variable_declaration(self, ts: TSNode) -> VariableDeclaration:
        return self._declaration(ts, "var")

    def _read_lexical_declaration(self, ts: TSNode) -> VariableDeclaration:
        return self._declaration(ts, ts.children[0].type)

    def _declaration(self, ts: TSNode, kind: str) -> VariableDeclaration:
        declarators = [
            self._read_variable_declarator(c)
            for c in self._named(ts)
            if c.type == "variable_declarator"
        ]
        return VariableDeclaration(kind=kind, declarations=declarators, **self._pos(ts))

    def _read_variable_declarator(self, ts: TSNode) -> VariableDeclarator:
        return VariableDeclarator(
            id=self.read(self._require(ts, "name")),
            init=self._optional(self._field(ts, "value")),
            **self._pos(ts),
        )

    def _read_statement_block(self, ts: TSNode) -> BlockStatement:
        return BlockStatement(body=[self.read(c) for c in self._named(ts)], **self._pos(ts))

    def _read_empty_statement(self, ts: TSNode) -> EmptyStatement:
        return EmptyStatement(**self._pos(ts))

    def _read_debugger_statement(self, ts: TSNode) -> DebuggerStatement:
        return DebuggerStatement(**self._pos(ts))

    def _read_if_statement(self, ts: TSNode) -> IfStatement:
        alternate = None
        else_clause = self._field(ts, "alternative")
        if else_clause is not None:
            alternate = self.read(self._named(else_clause)[0])
        return IfStatement(
            test=self._unparen(self._require(ts, "condition")),
            consequent=self.read(self._require(ts, "consequence")),
            alternate=alternate,
            **self._pos(ts),
        )

    def _read_while_statement(self, ts: TSNode) -> WhileStatement:
        return WhileStatement(
            test=self._unparen(self._require(ts, "condition")),
            body=self.read(self._require(ts, "body")),
            **self._pos(ts),
        )

    def _read_do_statement(self, ts: TSNode) -> DoWhileStatement:
        return DoWhileStatement(
            body=self.read(self._require(ts, "body")),
            test=self._unparen(self._require(ts, "condition")),
            **self._pos(ts),
        )

    def _for_clause(self, ts: TSNode | None) -> Node | None:
        if ts is None or ts.type == "empty_statement" or not ts.is_named:
            return None
        if ts.type == "expression_statement":
            return self.read(self._named(ts)[0])
        return self.read(ts)

    def _read_for_statement(self, ts: TSNode) -> ForStatement:
        return ForStatement(
            init=self._for_clause(self._field(ts, "initializer")),
            test=self._for_clause(self._field(ts, "condition")),
            update=self._for_clause(self._field(ts, "increment")),
            body=self.read(self._require(ts, "body")),
            **self._pos(ts),
        )

    def _read_for_in_statement(self, ts: TSNode) -> ForInStatement | ForOfStatement:
        left_ts = self._require(ts, "left")
        left = self.read(left_ts)
        kind = self._field(ts, "kind")
        if kind is not None:
            declarator = VariableDeclarator(
                id=left,
                init=self._optional(self._field(ts, "value")),
                **self._pos(left_ts),
            )
            left = VariableDeclaration(
                kind=kind.type, declarations=[declarator], **self._span(kind, left_ts)
            )
        operator = self._require(ts, "operator").type
        right = self.read(self._require(ts, "right"))
        body = self.read(self._require(ts, "body"))
        if operator == "of":
            return ForOfStatement(
                left=left,
                right=right,
                body=body,
                is_await="await" in self._tokens(ts),
                **self._pos(ts),
            )
        return ForInStatement(left=left, right=right, body=body, **self._pos(ts))

    def _read_switch_statement(self, ts: TSNode) -> SwitchStatement:
        cases = []
        for c in self._named(self._require(ts, "body")):
            statements = self._named(c)
            test = None
            if c.type == "switch_case":
                test = self.read(statements[0])
                statements = statements[1:]
            elif c.type != "switch_default":
                raise self._unsupported(c)
            cases.append(
                SwitchCase(
                    test=test,
                    consequent=[self.read(s) for s in statements],
                    **self._pos(c),
                )
            )
        return SwitchStatement(
            discriminant=self._unparen(self._require(ts, "value")),
            cases=cases,
            **self._pos(ts),
        )

    def _read_try_statement(self, ts: TSNode) -> TryStatement:
        handler = None
        handler_ts = self._field(ts, "handler")
        if handler_ts is not None:
            handler = CatchClause(
                param=self._optional(self._field(handler_ts, "parameter")),
                body=self._read_statement_block(self._require(handler_ts, "body")),
                **self._pos(handler_ts),
            )
        finalizer = None
        finalizer_ts = self._field(ts, "finalizer")
        if finalizer_ts is not None:
            finalizer = self._read_statement_block(self._require(finalizer_ts, "body"))
        return TryStatement(
            block=self._read_statement_block(self._require(ts, "body")),
            handler=handler,
            finalizer=finalizer,
            **self._pos(ts),
        )

    def _read_return_statement(self, ts: TSNode) -> ReturnStatement:
        named = self._named(ts)
        return ReturnStatement(
            argument=self.read(named[0]) if named else None, **self._pos(ts)
        )

    def _read_throw_statement(self, ts: TSNode) -> ThrowStatement:
        return ThrowStatement(argument=self.read(self._named(ts)[0]), **self._pos(ts))

    def _jump_label(self, ts: TSNode) -> Identifier | None:
        named = self._named(ts)
        return self._identifier(named[0]) if named else None

    def _read_break_statement(self, ts: TSNode) -> BreakStatement:
        return BreakStatement(label=self._jump_label(ts), **self._pos(ts))

    def _read_continue_statement(self, ts: TSNode) -> ContinueStatement:
        return ContinueStatement(label=self._jump_label(ts), **self._pos(ts))

    def _read_labeled_statement(self, ts: TSNode) -> LabeledStatement:
        return LabeledStatement(
            label=self._identifier(self._require(ts, "label")),
            body=self.read(self._require(ts, "body")),
            **self._pos(ts),
        )

    def _read_function_declaration(self, ts: TSNode) -> FunctionDeclaration:
        tokens = self._tokens(ts)
        return FunctionDeclaration(
            id=self._identifier(self._require(ts, "name")),
            params=self._params(self._field(ts, "parameters")),
            body=self._read_statement_block(self._require(ts, "body")),
            is_async="async" in tokens,
            generator="*" in tokens,
            **self._pos(ts),
        )

    _read_generator_function_declaration = _read_function_declaration

    def _heritage(self, ts: TSNode) -> Node | None:
        for c in self._named(ts):
            if c.type == "class_heritage":
                return self.read(self._named(c)[0])
        return None

    def _read_class_declaration(self, ts: TSNode) -> ClassDeclaration:
        self._check_decorators(ts)
        return ClassDeclaration(
            id=self._identifier(self._require(ts, "name")),
            superclass=self._heritage(ts),
            body=self._read_class_body(self._require(ts, "body")),
            **self._pos(ts),
        )

    def _read_class(self, ts: TSNode) -> ClassExpression:
        self._check_decorators(ts)
        name = self._field(ts, "name")
        return ClassExpression(
            id=self._identifier(name) if name is not None else None,
            superclass=self._heritage(ts),
            body=self._read_class_body(self._require(ts, "body")),
            **self._pos(ts),
        )

    def _read_class_body(self, ts: TSNode) -> ClassBody:
        return ClassBody(body=[self.read(c) for c in self._named(ts)], **self._pos(ts))

    def _method_flags(self, ts: TSNode) -> tuple[str, bool]:
        """Return (kind, static) from the modifier tokens of a method."""
        tokens = self._tokens(ts)
        static = "static" in tokens or "static get" in tokens
        if "get" in tokens or "static get" in tokens:
            return "get", static
        if "set" in tokens:
            return "set", static
        return "method", static

    def _read_method_definition(self, ts: TSNode) -> MethodDefinition:
        self._check_decorators(ts)
        kind, static = self._method_flags(ts)
        key, computed = self._property_key(self._require(ts, "name"))
        return MethodDefinition(
            key=key,
            value=self._function_expression(
                ts, self._require(ts, "parameters"), self._require(ts, "body")
            ),
            kind=kind,
            static=static,
            computed=computed,
            **self._pos(ts),
        )

    def _read_field_definition(self, ts: TSNode) -> PropertyDefinition:
        self._check_decorators(ts)
        key, computed = self._property_key(self._require(ts, "property"))
        return PropertyDefinition(
            key=key,
            value=self._optional(self._field(ts, "value")),
            static="static" in self._tokens(ts),
            computed=computed,
            **self._pos(ts),
        )

    # ------------------------------------------------------------------
    # Modules
    # ------------------------------------------------------------------

    def _read_import_statement(self, ts: TSNode) -> ImportDeclaration:
        specifiers: list[Node] = []
        for c in self._named(ts):
            if c.type == "import_clause":
                specifiers.extend(self._import_clause(c))
            elif c.type != "string":
                # import attributes (with {type: 'json'}) and anything newer
                raise self._unsupported(c)
        return ImportDeclaration(
            specifiers=specifiers,
            source=self._read_string(self._require(ts, "source")),
            **self._pos(ts),
        )

    def _import_clause(self, ts: TSNode) -> list[Node]:
        specifiers: list[Node] = []
        for c in self._named(ts):
            if c.type == "identifier":
                specifiers.append(ImportDefaultSpecifier(local=self._identifier(c), **self._pos(c)))
            elif c.type == "namespace_import":
                local = self._identifier(self._named(c)[0])
                specifiers.append(ImportNamespaceSpecifier(local=local, **self._pos(c)))
            elif c.type == "named_imports":
                for spec in self._named(c):
                    alias = self._field(spec, "alias")
                    specifiers.append(
                        ImportSpecifier(
                            imported=self.read(self._require(spec, "name")),
                            local=self._optional(alias),
                            **self._pos(spec),
                        )
                    )
            else:
                raise self._unsupported(c)
        return specifiers

    def _read_export_statement(self, ts: TSNode) -> Node:
        self._check_decorators(ts)
        tokens = self._tokens(ts)
        if "default" in tokens:
            target = self._field(ts, "declaration") or self._field(ts, "value")
            if target is None:
                raise self._unsupported(ts)
            return ExportDefaultDeclaration(declaration=self.read(target), **self._pos(ts))
        declaration = self._field(ts, "declaration")
        if declaration is not None:
            return ExportNamedDeclaration(declaration=self.read(declaration), **self._pos(ts))
        source_ts = self._field(ts, "source")
        source = self._read_string(source_ts) if source_ts is not None else None
        for c in self._named(ts):
            if c.type == "export_clause":
                specifiers = [
                    ExportSpecifier(
                        local=self.read(self._require(spec, "name")),
                        exported=self._optional(self._field(spec, "alias")),
                        **self._pos(spec),
                    )
                    for spec in self._named(c)
                ]
                return ExportNamedDeclaration(
                    specifiers=specifiers, source=source, **self._pos(ts)
                )
            if c.type == "namespace_export":
                if source is None:
                    raise self._unsupported(ts)
                exported = self.read(self._named(c)[0])
                return ExportAllDeclaration(exported=exported, source=source, **self._pos(ts))
        if "*" in tokens and source is not None:
            return ExportAllDeclaration(source=source, **self._pos(ts))
        raise self._unsupported(ts)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _read_this(self, ts: TSNode) -> ThisExpression:
        return ThisExpression(**self._pos(ts))

    def _read_super(self, ts: TSNode) -> Super:
        return Super(**self._pos(ts))

    def _read_true(self, ts: TSNode) -> Literal:
        return Literal(value=True, raw="true", **self._pos(ts))

    def _read_false(self, ts: TSNode) -> Literal:
        return Literal(value=False, raw="false", **self._pos(ts))

    def _read_null(self, ts: TSNode) -> Literal:
        return Literal(value=None, raw="null", **self._pos(ts))

    def _read_number(self, ts: TSNode) -> Literal:
        raw = self._text(ts)
        return Literal(value=number_value(raw), raw=raw, **self._pos(ts))

    def _read_string(self, ts: TSNode) -> Literal:
        raw = self._text(ts)
        return Literal(value=decode_string(raw[1:-1]), raw=raw, **self._pos(ts))

    def _read_regex(self, ts: TSNode) -> Literal:
        return Literal(value=None, raw=self._text(ts), **self._pos(ts))

    def _read_template_string(self, ts: TSNode) -> TemplateLiteral:
        quasis: list[str] = []
        expressions: list[Node] = []
        pos = ts.start_byte + 1
        for c in ts.named_children:
            if c.type != "template_substitution":
                continue
            quasis.append(self._source[pos : c.start_byte].decode("utf-8"))
            expressions.append(self.read(self._named(c)[0]))
            pos = c.end_byte
        quasis.append(self._source[pos : ts.end_byte - 1].decode("utf-8"))
        return TemplateLiteral(quasis=quasis, expressions=expressions, **self._pos(ts))

    def _read_meta_property(self, ts: TSNode) -> MetaProperty:
        meta, _, prop = self._text(ts).partition(".")
        return MetaProperty(
            meta=Identifier(name=meta.strip(), **self._pos(ts)),
            property=Identifier(name=prop.strip(), **self._pos(ts)),
            **self._pos(ts),
        )

    def _read_array(self, ts: TSNode) -> ArrayExpression:
        return ArrayExpression(elements=self._elements(ts), **self._pos(ts))

    def _read_object(self, ts: TSNode) -> ObjectExpression:
        properties: list[Node] = []
        for c in self._named(ts):
            if c.type == "pair":
                key, computed = self._property_key(self._require(c, "key"))
                properties.append(
                    Property(
                        key=key,
                        value=self.read(self._require(c, "value")),
                        computed=computed,
                        **self._pos(c),
                    )
                )
            elif c.type == "method_definition":
                properties.append(self._object_method(c))
            elif c.type == "shorthand_property_identifier":
                properties.append(self._shorthand(c))
            else:
                properties.append(self.read(c))
        return ObjectExpression(properties=properties, **self._pos(ts))

    def _object_method(self, ts: TSNode) -> Property:
        self._check_decorators(ts)
        kind, _ = self._method_flags(ts)
        key, computed = self._property_key(self._require(ts, "name"))
        return Property(
            key=key,
            value=self._function_expression(
                ts, self._require(ts, "parameters"), self._require(ts, "body")
            ),
            kind="init" if kind == "method" else kind,
            method=kind == "method",
            computed=computed,
            **self._pos(ts),
        )

    def _shorthand(self, ts: TSNode, default: TSNode | None = None) -> Property:
        key = self._identifier(ts)
        value: Node = self._identifier(ts)
        if default is not None:
            value = AssignmentPattern(left=value, right=self.read(default), **self._span(ts, default))
        return Property(key=key, value=value, shorthand=True, **self._pos(ts))

    def _read_function_expression(self, ts: TSNode) -> FunctionExpression:
        name = self._field(ts, "name")
        tokens = self._tokens(ts)
        return FunctionExpression(
            id=self._identifier(name) if name is not None else None,
            params=self._params(self._field(ts, "parameters")),
            body=self._read_statement_block(self._require(ts, "body")),
            is_async="async" in tokens,
            generator="*" in tokens,
            **self._pos(ts),
        )

    _read_function = _read_function_expression
    _read_generator_function = _read_function_expression

    def _read_arrow_function(self, ts: TSNode) -> ArrowFunctionExpression:
        single = self._field(ts, "parameter")
        params = [self.read(single)] if single is not None else self._params(self._field(ts, "parameters"))
        return ArrowFunctionExpression(
            params=params,
            body=self.read(self._require(ts, "body")),
            is_async="async" in self._tokens(ts),
            **self._pos(ts),
        )

    def _read_call_expression(self, ts: TSNode) -> Node:
        callee = self.read(self._require(ts, "function"))
        args = self._require(ts, "arguments")
        if args.type == "template_string":
            return TaggedTemplateExpression(
                tag=callee, quasi=self._read_template_string(args), **self._pos(ts)
            )
        return CallExpression(
            callee=callee,
            arguments=[self.read(c) for c in self._named(args)],
            optional=self._field(ts, "optional_chain") is not None,
            **self._pos(ts),
        )

    def _read_new_expression(self, ts: TSNode) -> NewExpression:
        args = self._field(ts, "arguments")
        return NewExpression(
            callee=self.read(self._require(ts, "constructor")),
            arguments=[self.read(c) for c in self._named(args)] if args is not None else [],
            **self._pos(ts),
        )

    def _read_member_expression(self, ts: TSNode) -> MemberExpression:
        return MemberExpression(
            object=self.read(self._require(ts, "object")),
            property=self._identifier(self._require(ts, "property")),
            optional=self._field(ts, "optional_chain") is not None,
            **self._pos(ts),
        )

    def _read_subscript_expression(self, ts: TSNode) -> MemberExpression:
        return MemberExpression(
            object=self.read(self._require(ts, "object")),
            property=self.read(self._require(ts, "index")),
            computed=True,
            optional=self._field(ts, "optional_chain") is not None,
            **self._pos(ts),
        )

    def _read_assignment_expression(self, ts: TSNode) -> AssignmentExpression:
        return AssignmentExpression(
            operator="=",
            left=self.read(self._require(ts, "left")),
            right=self.read(self._require(ts, "right")),
            **self._pos(ts),
        )

    def _read_augmented_assignment_expression(self, ts: TSNode) -> AssignmentExpression:
        return AssignmentExpression(
            operator=self._require(ts, "operator").type,
            left=self.read(self._require(ts, "left")),
            right=self.read(self._require(ts, "right")),
            **self._pos(ts),
        )

    def _read_binary_expression(self, ts: TSNode) -> BinaryExpression | LogicalExpression:
        # a + b + c nests to the left; walk the left spine instead of recursing down it
        spine = [ts]
        left = self._require(ts, "left")
        while left.type == "binary_expression":
            spine.append(left)
            left = self._require(left, "left")
        operand = self.read(left)
        for current in reversed(spine):
            operator = self._require(current, "operator").type
            cls = LogicalExpression if operator in _LOGICAL_OPERATORS else BinaryExpression
            expr = cls(
                operator=operator,
                left=operand,
                right=self.read(self._require(current, "right")),
                **self._pos(current),
            )
            operand = expr
        return expr

    def _read_unary_expression(self, ts: TSNode) -> UnaryExpression:
        return UnaryExpression(
            operator=self._require(ts, "operator").type,
            argument=self.read(self._require(ts, "argument")),
            **self._pos(ts),
        )

    def _read_update_expression(self, ts: TSNode) -> UpdateExpression:
        return UpdateExpression(
            operator=self._require(ts, "operator").type,
            argument=self.read(self._require(ts, "argument")),
            prefix=ts.children[0].type in ("++", "--"),
            **self._pos(ts),
        )

    def _read_ternary_expression(self, ts: TSNode) -> ConditionalExpression:
        return ConditionalExpression(
            test=self.read(self._require(ts, "condition")),
            consequent=self.read(self._require(ts, "consequence")),
            alternate=self.read(self._require(ts, "alternative")),
            **self._pos(ts),
        )

    def _read_sequence_expression(self, ts: TSNode) -> SequenceExpression:
        expressions: list[Node] = []
        stack = list(reversed(self._named(ts)))
        while stack:
            c = stack.pop()
            if c.type == "sequence_expression":
                stack.extend(reversed(self._named(c)))
            else:
                expressions.append(self.read(c))
        return SequenceExpression(expressions=expressions, **self._pos(ts))

    def _read_parenthesized_expression(self, ts: TSNode) -> ParenthesizedExpression:
        return ParenthesizedExpression(expression=self.read(self._named(ts)[0]), **self._pos(ts))

    def _read_spread_element(self, ts: TSNode) -> SpreadElement:
        return SpreadElement(argument=self.read(self._named(ts)[0]), **self._pos(ts))

    def _read_await_expression(self, ts: TSNode) -> AwaitExpression:
        return AwaitExpression(argument=self.read(self._named(ts)[0]), **self._pos(ts))

    def _read_yield_expression(self, ts: TSNode) -> YieldExpression:
        named = self._named(ts)
        return YieldExpression(
            argument=self.read(named[0]) if named else None,
            delegate="*" in self._tokens(ts),
            **self._pos(ts),
        )

    # ------------------------------------------------------------------
    # Patterns
    # ------------------------------------------------------------------

    def _read_array_pattern(self, ts: TSNode) -> ArrayPattern:
        return ArrayPattern(elements=self._elements(ts), **self._pos(ts))

    def _read_object_pattern(self, ts: TSNode) -> ObjectPattern:
        properties: list[Node] = []
        for c in self._named(ts):
            if c.type == "pair_pattern":
                key, computed = self._property_key(self._require(c, "key"))
                properties.append(
                    Property(
                        key=key,
                        value=self.read(self._require(c, "value")),
                        computed=computed,
                        **self._pos(c),
                    )
                )
            elif c.type == "shorthand_property_identifier_pattern":
                properties.append(self._shorthand(c))
            elif c.type == "object_assignment_pattern":
                left = self._require(c, "left")
                if left.type != "shorthand_property_identifier_pattern":
                    raise self._unsupported(c)
                prop = self._shorthand(left, self._require(c, "right"))
                prop.end = c.end_byte
                properties.append(prop)
            else:
                properties.append(self.read(c))
        return ObjectPattern(properties=properties, **self._pos(ts))

    def _read_assignment_pattern(self, ts: TSNode) -> AssignmentPattern:
        return AssignmentPattern(
            left=self.read(self._require(ts, "left")),
            right=self.read(self._require(ts, "right")),
            **self._pos(ts),
        )

    def _read_rest_pattern(self, ts: TSNode) -> RestElement:
        return RestElement(argument=self.read(self._named(ts)[0]), **self._pos(ts))
