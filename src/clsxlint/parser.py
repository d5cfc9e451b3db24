"""
Expression parser for clsxlint (Layer 1: Source Text → Expression AST).

Parses the JavaScript expression inside a dynamic attribute container
into the tagged-union tree of ``clsxlint.expressions``.

Syntax Notes:
    - Full expression grammar needed for class-name values: literals,
      templates (nested to any depth), member access, calls, optional
      chaining, unary/binary/logical operators, conditionals,
      assignment, arrow functions and comma sequences
    - Parentheses are transparent: a parenthesized node keeps the span
      of its inner expression, as ESTree does
    - Spans are offsets into the ORIGINAL source, so a container can be
      parsed in place inside a whole file without re-basing
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from clsxlint.errors import ExpressionParseError
from clsxlint.expressions import (
    Expression,
    Span,
    StringLiteral,
    OtherLiteral,
    StaticText,
    TemplateComposite,
    Conditional,
    Concatenation,
    LogicalAnd,
    LogicalOr,
    Opaque,
    OpaqueKind,
    PREC_SEQUENCE,
    PREC_ASSIGNMENT,
    PREC_NULLISH,
    PREC_UNARY,
    PREC_POSTFIX,
    PREC_NEW,
    PREC_MEMBER,
    PREC_PRIMARY,
)


# Token kinds
NAME = "name"
NUMBER = "number"
STRING = "string"
TEMPLATE = "template"
REGEX = "regex"
PUNCT = "punct"
EOF = "eof"


@dataclass(frozen=True)
class Token:
    """Lexical token with absolute source offsets."""
    kind: str
    value: str
    start: int
    end: int
    newline_before: bool = False


_WHITESPACE_RE = re.compile(r"(?:\s+|//[^\n]*|/\*[\s\S]*?\*/)+")
_NUMBER_RE = re.compile(
    r"(?:0[xX][0-9a-fA-F_]+|0[oO][0-7_]+|0[bB][01_]+"
    r"|(?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d[\d_]*)?)n?"
)
_NAME_RE = re.compile(r"(?:[^\W\d]|\$)[\w$]*")
_DIGITS = "0123456789"
_DIGIT_RE = re.compile(r"[0-9]")
_REGEX_RE = re.compile(r"/(?:[^/\\\[\n]|\\.|\[(?:[^\]\\\n]|\\.)*\])+/[A-Za-z]*")

_PUNCTUATORS = [
    ">>>=", "...", "===", "!==", "**=", "<<=", ">>=", ">>>", "&&=", "||=", "??=",
    "=>", "==", "!=", "<=", ">=", "&&", "||", "??", "?.", "++", "--",
    "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "**", "<<", ">>",
    "{", "}", "(", ")", "[", "]", ";", ",", "<", ">", "+", "-", "*", "/",
    "%", "&", "|", "^", "!", "~", "?", ":", "=", ".", "@", "#",
]
_PUNCT_RE = re.compile("|".join(re.escape(p) for p in _PUNCTUATORS))

_ASSIGNMENT_OPERATORS = {
    "=", "+=", "-=", "*=", "/=", "%=", "**=", "<<=", ">>=", ">>>=",
    "&=", "|=", "^=", "&&=", "||=", "??=",
}

_BINARY_PRECEDENCE = {
    "??": 3, "||": 3, "&&": 4, "|": 5, "^": 6, "&": 7,
    "==": 8, "!=": 8, "===": 8, "!==": 8,
    "<": 9, ">": 9, "<=": 9, ">=": 9, "instanceof": 9, "in": 9,
    "<<": 10, ">>": 10, ">>>": 10,
    "+": 11, "-": 11,
    "*": 12, "/": 12, "%": 12,
    "**": 13,
}

_UNARY_OPERATORS = {"!", "~", "+", "-"}
_UNARY_KEYWORDS = {"typeof", "void", "delete", "await"}

_REGEX_PRECEDING_KEYWORDS = {
    "return", "typeof", "instanceof", "in", "of", "new", "delete", "void",
    "throw", "case", "do", "else", "yield", "await",
}

_STATEMENT_KEYWORDS = {
    "if", "else", "for", "while", "do", "switch", "case", "default", "return",
    "throw", "try", "catch", "finally", "var", "const", "function", "class",
    "import", "export", "break", "continue", "debugger", "with", "yield",
}

# Tokens that may follow a TypeScript non-null assertion ``x!``.
_NON_NULL_FOLLOWERS = {
    ".", "?.", "[", "(", ")", "]", "}", ",", "?", ":", ";",
    "&&", "||", "??", "===", "!==", "==", "!=",
}

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)
_SIMPLE_ESCAPES = {
    "n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0",
}
_LINE_CONTINUATIONS = {"\n", "\r\n", "\r", "\u2028", "\u2029"}


def decode_escapes(raw: str) -> str:
    """Decode JavaScript string escape sequences in ``raw``."""

    def replace(m: "re.Match[str]") -> str:
        esc = m.group(1)
        if esc.startswith("u{"):
            return chr(int(esc[2:-1], 16))
        if esc[0] in "ux" and len(esc) > 1:
            return chr(int(esc[1:], 16))
        if esc in _LINE_CONTINUATIONS:
            return ""
        return _SIMPLE_ESCAPES.get(esc, esc)

    decoded = _ESCAPE_RE.sub(replace, raw)
    # Recombine surrogate pairs written as two \uXXXX escapes.
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def _cook_template_chunk(raw: str) -> str:
    return decode_escapes(raw.replace("\r\n", "\n").replace("\r", "\n"))


# =============================================================================
# SCANNING HELPERS
# =============================================================================


def _scan_string_end(source: str, pos: int, end: int) -> int:
    quote = source[pos]
    i = pos + 1
    while i < end:
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n":
            break
        i += 1
    raise ExpressionParseError("Unterminated string literal", pos)


def _scan_template_end(source: str, pos: int, end: int) -> int:
    i = pos + 1
    while i < end:
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "`":
            return i + 1
        if source.startswith("${", i, end):
            i = find_closing_brace(source, i + 2, end) + 1
            continue
        i += 1
    raise ExpressionParseError("Unterminated template literal", pos)


def find_closing_brace(source: str, pos: int, end: Optional[int] = None) -> int:
    """
    Find the ``}`` closing a brace opened just before ``pos``.

    Braces inside strings, template literals and comments are ignored.

    Args:
        source: Text to scan
        pos: Offset just after the opening ``{``
        end: Scan limit (defaults to end of source)

    Returns:
        Offset of the matching ``}``

    Raises:
        ExpressionParseError: If the brace is never closed
    """
    if end is None:
        end = len(source)
    depth = 0
    i = pos
    while i < end:
        ch = source[i]
        if ch in "'\"":
            i = _scan_string_end(source, i, end)
            continue
        if ch == "`":
            i = _scan_template_end(source, i, end)
            continue
        if source.startswith("//", i, end):
            newline = source.find("\n", i, end)
            i = end if newline == -1 else newline
            continue
        if source.startswith("/*", i, end):
            close = source.find("*/", i + 2, end)
            if close == -1:
                raise ExpressionParseError("Unterminated comment", i)
            i = close + 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                return i
            depth -= 1
        i += 1
    raise ExpressionParseError("Missing closing brace", pos - 1)


def _regex_allowed(tokens: List[Token]) -> bool:
    if not tokens:
        return True
    last = tokens[-1]
    if last.kind == NAME:
        return last.value in _REGEX_PRECEDING_KEYWORDS
    if last.kind == PUNCT:
        return last.value not in (")", "]", "}", "++", "--")
    return False


def _tokenize(source: str, start: int, end: int) -> List[Token]:
    """Tokenize ``source[start:end]``; offsets stay absolute."""
    tokens: List[Token] = []
    pos = start
    newline = False

    while pos < end:
        m = _WHITESPACE_RE.match(source, pos, end)
        if m:
            newline = newline or "\n" in m.group()
            pos = m.end()
            continue

        ch = source[pos]
        if ch in "'\"":
            kind, tok_end = STRING, _scan_string_end(source, pos, end)
        elif ch == "`":
            kind, tok_end = TEMPLATE, _scan_template_end(source, pos, end)
        elif ch in _DIGITS or (ch == "." and _DIGIT_RE.match(source, pos + 1, end)):
            kind, tok_end = NUMBER, _NUMBER_RE.match(source, pos, end).end()
        elif ch == "/" and _regex_allowed(tokens):
            m = _REGEX_RE.match(source, pos, end)
            if not m:
                raise ExpressionParseError("Unterminated regular expression", pos)
            kind, tok_end = REGEX, m.end()
        else:
            m = _NAME_RE.match(source, pos, end)
            if m:
                kind = NAME
            else:
                m = _PUNCT_RE.match(source, pos, end)
                if not m:
                    raise ExpressionParseError(f"Unexpected character {ch!r}", pos)
                kind = PUNCT
            tok_end = m.end()
            # `a?.5:b` is a conditional, not optional chaining
            if m.group() == "?." and _DIGIT_RE.match(source, tok_end, end):
                tok_end = pos + 1

        tokens.append(Token(kind, source[pos:tok_end], pos, tok_end, newline))
        newline = False
        pos = tok_end

    tokens.append(Token(EOF, "", end, end, newline))
    return tokens


# =============================================================================
# PARSER
# =============================================================================

# (node, outer_start, outer_end); the outer extent includes parentheses.
_Parsed = Tuple[Expression, int, int]


class _ExpressionParser:
    """Recursive-descent parser over one token stream."""

    def __init__(self, source: str, start: int, end: int):
        self.source = source
        self.tokens = _tokenize(source, start, end)
        self.pos = 0

    # -- token helpers --------------------------------------------------------

    def _peek(self, offset: int = 0) -> Token:
        index = min(self.pos + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        if tok.kind != EOF:
            self.pos += 1
        return tok

    def _at(self, value: str, offset: int = 0) -> bool:
        tok = self._peek(offset)
        return tok.kind in (PUNCT, NAME) and tok.value == value

    def _expect(self, value: str) -> Token:
        tok = self._peek()
        if not self._at(value):
            found = tok.value if tok.kind != EOF else "end of expression"
            raise ExpressionParseError(f"Expected '{value}', got '{found}'", tok.start)
        return self._advance()

    def _expect_name(self) -> Token:
        tok = self._peek()
        if tok.kind != NAME:
            raise ExpressionParseError(f"Expected property name, got '{tok.value}'", tok.start)
        return self._advance()

    def _matching(self, index: int, open_value: str, close_value: str) -> Optional[int]:
        depth = 0
        for i in range(index, len(self.tokens)):
            tok = self.tokens[i]
            if tok.kind != PUNCT:
                continue
            if tok.value == open_value:
                depth += 1
            elif tok.value == close_value:
                depth -= 1
                if depth == 0:
                    return i
        return None

    # -- node helpers ---------------------------------------------------------

    def _opaque(self, kind: OpaqueKind, start: int, end: int, precedence: int,
                callee: Optional[str] = None) -> Opaque:
        return Opaque(
            text=self.source[start:end],
            kind=kind,
            callee=callee,
            op_precedence=precedence,
            span=Span(start, end),
        )

    def _binary_node(self, op: str, left: Expression, right: Expression,
                     start: int, end: int) -> Expression:
        text = self.source[start:end]
        span = Span(start, end)
        if op == "+":
            return Concatenation(text=text, left=left, right=right, span=span)
        if op == "&&":
            return LogicalAnd(text=text, left=left, right=right, span=span)
        if op == "||":
            return LogicalOr(text=text, left=left, right=right, span=span)
        if op == "??":
            return self._opaque(OpaqueKind.NULLISH, start, end, PREC_NULLISH)
        return self._opaque(OpaqueKind.BINARY, start, end, _BINARY_PRECEDENCE[op])

    # -- grammar --------------------------------------------------------------

    def parse(self) -> Expression:
        node, _, _ = self._parse_sequence_expression()
        tok = self._peek()
        if tok.kind != EOF:
            raise ExpressionParseError(f"Unexpected tokens after parsing: '{tok.value}'", tok.start)
        return node

    def _parse_sequence_expression(self) -> _Parsed:
        """Parse comma sequence (lowest precedence)."""
        node, start, end = self._parse_assignment_expression()
        if not self._at(","):
            return node, start, end
        while self._at(","):
            self._advance()
            _, _, end = self._parse_assignment_expression()
        return self._opaque(OpaqueKind.SEQUENCE, start, end, PREC_SEQUENCE), start, end

    def _parse_assignment_expression(self) -> _Parsed:
        """Parse assignment or arrow function, else a conditional."""
        arrow = self._try_parse_arrow_function()
        if arrow is not None:
            return arrow

        node, start, end = self._parse_conditional_expression()
        tok = self._peek()
        if tok.kind == PUNCT and tok.value in _ASSIGNMENT_OPERATORS:
            self._advance()
            _, _, end = self._parse_assignment_expression()
            return self._opaque(OpaqueKind.ASSIGNMENT, start, end, PREC_ASSIGNMENT), start, end
        return node, start, end

    def _try_parse_arrow_function(self) -> Optional[_Parsed]:
        start_tok = self._peek()
        i = 0
        if self._at("async") and not self._peek(1).newline_before and (
                self._peek(1).kind == NAME or self._at("(", 1)):
            i = 1

        first = self._peek(i)
        if first.kind == NAME and first.value not in _STATEMENT_KEYWORDS and self._at("=>", i + 1):
            arrow_index = self.pos + i + 1
        elif self._at("(", i):
            close = self._matching(self.pos + i, "(", ")")
            if close is None or not (self.tokens[close + 1].kind == PUNCT
                                     and self.tokens[close + 1].value == "=>"):
                return None
            arrow_index = close + 1
        else:
            return None

        self.pos = arrow_index + 1
        if self._at("{"):
            close = self._matching(self.pos, "{", "}")
            if close is None:
                raise ExpressionParseError("Unterminated arrow function body", self._peek().start)
            end = self.tokens[close].end
            self.pos = close + 1
        else:
            _, _, end = self._parse_assignment_expression()
        return self._opaque(OpaqueKind.ARROW, start_tok.start, end, PREC_ASSIGNMENT), start_tok.start, end

    def _parse_conditional_expression(self) -> _Parsed:
        """Parse ``test ? consequent : alternate``."""
        test, start, end = self._parse_binary_expression(PREC_NULLISH)
        if not self._at("?"):
            return test, start, end
        self._advance()
        consequent, _, _ = self._parse_assignment_expression()
        self._expect(":")
        alternate, _, end = self._parse_assignment_expression()
        node = Conditional(
            text=self.source[start:end],
            test=test,
            consequent=consequent,
            alternate=alternate,
            span=Span(start, end),
        )
        return node, start, end

    def _binary_precedence(self, tok: Token) -> Optional[int]:
        if tok.kind == PUNCT or (tok.kind == NAME and tok.value in ("instanceof", "in")):
            return _BINARY_PRECEDENCE.get(tok.value)
        return None

    def _parse_binary_expression(self, min_precedence: int) -> _Parsed:
        """Parse binary and logical operators by precedence climbing."""
        left, start, end = self._parse_unary_expression()
        while True:
            tok = self._peek()
            precedence = self._binary_precedence(tok)
            if precedence is None or precedence < min_precedence:
                break
            self._advance()
            # ** is right-associative
            next_min = precedence if tok.value == "**" else precedence + 1
            right, _, end = self._parse_binary_expression(next_min)
            left = self._binary_node(tok.value, left, right, start, end)
        return left, start, end

    def _parse_unary_expression(self) -> _Parsed:
        """Parse prefix operators (!, -, typeof, ++, ...)."""
        tok = self._peek()
        if (tok.kind == PUNCT and tok.value in _UNARY_OPERATORS) or (
                tok.kind == NAME and tok.value in _UNARY_KEYWORDS):
            self._advance()
            _, _, end = self._parse_unary_expression()
            return self._opaque(OpaqueKind.UNARY, tok.start, end, PREC_UNARY), tok.start, end
        if tok.kind == PUNCT and tok.value in ("++", "--"):
            self._advance()
            _, _, end = self._parse_unary_expression()
            return self._opaque(OpaqueKind.UPDATE, tok.start, end, PREC_UNARY), tok.start, end
        return self._parse_postfix_expression()

    def _parse_postfix_expression(self) -> _Parsed:
        node, start, end = self._parse_call_expression()
        tok = self._peek()
        if tok.kind == PUNCT and tok.value in ("++", "--") and not tok.newline_before:
            self._advance()
            return self._opaque(OpaqueKind.UPDATE, start, tok.end, PREC_POSTFIX), start, tok.end
        return node, start, end

    def _parse_arguments(self) -> int:
        """Parse ``( args )``; returns the offset after ``)``."""
        self._expect("(")
        while not self._at(")"):
            if self._at("..."):
                self._advance()
            self._parse_assignment_expression()
            if not self._at(","):
                break
            self._advance()
        return self._expect(")").end

    def _parse_call_expression(self) -> _Parsed:
        """Parse member access, calls and tagged templates."""
        if self._at("new"):
            node, start, end = self._parse_new_expression()
        else:
            node, start, end = self._parse_primary_expression()

        while True:
            tok = self._peek()
            if self._at("."):
                self._advance()
                end = self._expect_name().end
                node = self._opaque(OpaqueKind.MEMBER, start, end, PREC_MEMBER)
            elif self._at("?."):
                self._advance()
                if self._at("("):
                    end = self._parse_arguments()
                    node = self._opaque(OpaqueKind.CALL, start, end, PREC_MEMBER)
                elif self._at("["):
                    self._advance()
                    self._parse_sequence_expression()
                    end = self._expect("]").end
                    node = self._opaque(OpaqueKind.MEMBER, start, end, PREC_MEMBER)
                else:
                    end = self._expect_name().end
                    node = self._opaque(OpaqueKind.MEMBER, start, end, PREC_MEMBER)
            elif self._at("["):
                self._advance()
                self._parse_sequence_expression()
                end = self._expect("]").end
                node = self._opaque(OpaqueKind.MEMBER, start, end, PREC_MEMBER)
            elif self._at("("):
                callee = None
                if (isinstance(node, Opaque) and node.kind is OpaqueKind.IDENTIFIER
                        and node.span.start == start):
                    callee = node.text
                end = self._parse_arguments()
                node = self._opaque(OpaqueKind.CALL, start, end, PREC_MEMBER, callee=callee)
            elif tok.kind == TEMPLATE:
                self._advance()
                end = tok.end
                node = self._opaque(OpaqueKind.TAGGED_TEMPLATE, start, end, PREC_MEMBER)
            elif self._at("!") and self._peek(1).value in _NON_NULL_FOLLOWERS | {""}:
                # TypeScript non-null assertion
                self._advance()
                end = tok.end
                node = self._opaque(OpaqueKind.MEMBER, start, end, PREC_MEMBER)
            else:
                break
        return node, start, end

    def _parse_new_expression(self) -> _Parsed:
        new_tok = self._expect("new")
        start = new_tok.start
        if self._at("."):
            self._advance()
            end = self._expect_name().end
            return self._opaque(OpaqueKind.MEMBER, start, end, PREC_MEMBER), start, end

        if self._at("new"):
            _, _, end = self._parse_new_expression()
        else:
            _, _, end = self._parse_primary_expression()
        while self._at(".") or self._at("["):
            if self._advance().value == ".":
                end = self._expect_name().end
            else:
                self._parse_sequence_expression()
                end = self._expect("]").end

        precedence = PREC_NEW
        if self._at("("):
            end = self._parse_arguments()
            precedence = PREC_MEMBER
        return self._opaque(OpaqueKind.NEW, start, end, precedence), start, end

    def _parse_primary_expression(self) -> _Parsed:
        """Parse literal, identifier, template, group, array or object."""
        tok = self._peek()
        span = Span(tok.start, tok.end)

        if tok.kind == EOF:
            raise ExpressionParseError("Unexpected end of expression", tok.start)

        if tok.kind == NUMBER or tok.kind == REGEX:
            self._advance()
            return OtherLiteral(text=tok.value, is_nullish=False, span=span), tok.start, tok.end

        if tok.kind == STRING:
            self._advance()
            value = decode_escapes(tok.value[1:-1])
            return StringLiteral(text=tok.value, value=value, span=span), tok.start, tok.end

        if tok.kind == TEMPLATE:
            self._advance()
            return self._parse_template_literal(tok), tok.start, tok.end

        if tok.kind == NAME:
            if tok.value in _STATEMENT_KEYWORDS:
                raise ExpressionParseError(f"Unsupported expression: '{tok.value}'", tok.start)
            self._advance()
            if tok.value in ("true", "false"):
                return OtherLiteral(text=tok.value, is_nullish=False, span=span), tok.start, tok.end
            if tok.value == "null":
                return OtherLiteral(text=tok.value, is_nullish=True, span=span), tok.start, tok.end
            kind = OpaqueKind.THIS if tok.value == "this" else OpaqueKind.IDENTIFIER
            return self._opaque(kind, tok.start, tok.end, PREC_PRIMARY), tok.start, tok.end

        if self._at("("):
            self._advance()
            node, _, _ = self._parse_sequence_expression()
            close = self._expect(")")
            return node, tok.start, close.end

        if self._at("["):
            return self._parse_array_literal()

        if self._at("{"):
            return self._parse_object_literal()

        raise ExpressionParseError(f"Unexpected token: '{tok.value}'", tok.start)

    def _parse_array_literal(self) -> _Parsed:
        start = self._expect("[").start
        while not self._at("]"):
            if self._at(","):
                self._advance()
                continue
            if self._at("..."):
                self._advance()
            self._parse_assignment_expression()
            if not self._at(","):
                break
            self._advance()
        end = self._expect("]").end
        return self._opaque(OpaqueKind.ARRAY, start, end, PREC_PRIMARY), start, end

    def _parse_object_literal(self) -> _Parsed:
        start = self._expect("{").start
        while not self._at("}"):
            if self._at("..."):
                self._advance()
                self._parse_assignment_expression()
            else:
                key = self._peek()
                if self._at("["):
                    self._advance()
                    self._parse_assignment_expression()
                    self._expect("]")
                elif key.kind in (NAME, STRING, NUMBER):
                    self._advance()
                else:
                    raise ExpressionParseError(f"Unexpected token in object literal: '{key.value}'", key.start)

                if self._at(":"):
                    self._advance()
                    self._parse_assignment_expression()
                elif self._at("("):
                    raise ExpressionParseError("Unsupported expression: object method", key.start)
                elif key.kind != NAME:
                    raise ExpressionParseError("Expected ':' after property key", key.end)
            if not self._at(","):
                break
            self._advance()
        end = self._expect("}").end
        return self._opaque(OpaqueKind.OBJECT, start, end, PREC_PRIMARY), start, end

    def _parse_template_literal(self, tok: Token) -> TemplateComposite:
        """Split a template token into static chunks and parsed interpolations."""
        source = self.source
        parts = []
        close = tok.end - 1
        i = chunk_start = tok.start + 1

        while i < close:
            if source[i] == "\\":
                i += 2
                continue
            if source.startswith("${", i, close):
                self._append_static_text(parts, chunk_start, i)
                expr_end = find_closing_brace(source, i + 2, close)
                parts.append(_ExpressionParser(source, i + 2, expr_end).parse())
                i = chunk_start = expr_end + 1
                continue
            i += 1
        self._append_static_text(parts, chunk_start, close)

        return TemplateComposite(text=tok.value, parts=tuple(parts), span=Span(tok.start, tok.end))

    def _append_static_text(self, parts: list, start: int, end: int) -> None:
        raw = self.source[start:end]
        if raw:
            parts.append(StaticText(value=_cook_template_chunk(raw), raw=raw))


def is_blank_expression(source: str, start: int = 0, end: Optional[int] = None) -> bool:
    """True when ``source[start:end]`` holds only whitespace and comments."""
    if end is None:
        end = len(source)
    m = _WHITESPACE_RE.match(source, start, end)
    return start == end or (m is not None and m.end() == end)


def parse_expression(source: str, start: int = 0, end: Optional[int] = None) -> Expression:
    """
    Parse a JavaScript expression into the clsxlint AST.

    Args:
        source: Text containing the expression (may be a whole file)
        start: Offset where the expression begins
        end: Offset where it ends (defaults to end of source)

    Returns:
        Expression AST whose spans are offsets into ``source``

    Raises:
        ExpressionParseError: If the text is not a single expression
    """
    if end is None:
        end = len(source)
    return _ExpressionParser(source, start, end).parse()


__all__ = [
    "parse_expression",
    "is_blank_expression",
    "find_closing_brace",
    "decode_escapes",
    "ExpressionParseError",
    "Token",
]
