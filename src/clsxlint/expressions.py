"""
Expression System for clsxlint

Every dynamic class-name value is represented as an Abstract Syntax Tree,
never inspected as a raw string.

This ensures:
    - Decisions are made on expression SHAPE only
    - The classifier and decomposer are representation-agnostic
    - Sub-trees can always be rendered back to their exact source text

ARCHITECTURAL RULE:
    Nothing in this module evaluates an expression.
    The tree is structure plus source text, nothing else.
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


# JavaScript operator precedence, MDN numbering (higher binds tighter).
PREC_SEQUENCE = 1
PREC_ASSIGNMENT = 2
PREC_CONDITIONAL = 2
PREC_LOGICAL_OR = 3
PREC_NULLISH = 3
PREC_LOGICAL_AND = 4
PREC_BITWISE_OR = 5
PREC_BITWISE_XOR = 6
PREC_BITWISE_AND = 7
PREC_EQUALITY = 8
PREC_RELATIONAL = 9
PREC_SHIFT = 10
PREC_ADDITIVE = 11
PREC_MULTIPLICATIVE = 12
PREC_EXPONENT = 13
PREC_UNARY = 14
PREC_POSTFIX = 15
PREC_NEW = 16
PREC_MEMBER = 17
PREC_PRIMARY = 18


@dataclass(frozen=True)
class Span:
    """
    Half-open character range ``[start, end)`` into the parsed source.

    Offsets are absolute: an expression parsed inside a whole file
    carries file offsets.
    """

    start: int
    end: int

    def overlaps(self, other: "Span") -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class Position:
    """1-based line and column of a file offset."""

    line: int
    column: int

    @classmethod
    def from_offset(cls, source: str, offset: int) -> "Position":
        line = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(line=line, column=offset - line_start + 1)


class Expression(ABC):
    """
    Base class for all class-name expression nodes.

    Every variant carries:
        text: exact original source of the sub-tree (without any
              enclosing parentheses)
        span: location of that text

    ``precedence`` reports how tightly the node binds, which is all a
    renderer needs to decide on parentheses.

    DO NOT:
        - Add evaluation logic here
        - Add rewriting logic here (belongs in decomposer/canonicalizer)
    """

    precedence = PREC_PRIMARY

    def render(self) -> str:
        """Render the sub-tree to its original source text."""
        return self.text


@dataclass(frozen=True)
class StringLiteral(Expression):
    """
    A quoted string literal.

    Example:
        'active'   ->  StringLiteral(text="'active'", value="active")

    Properties:
        text: source text, quotes included
        value: decoded string content
    """

    text: str
    value: str
    span: Span = field(default=Span(0, 0), compare=False)


@dataclass(frozen=True)
class OtherLiteral(Expression):
    """
    Any non-string literal: number, boolean, ``null``, regex, BigInt.

    IMPORTANT:
        ``undefined`` is NOT a literal in JavaScript; it is an identifier
        and parses as Opaque. Only ``null`` is nullish here.
    """

    text: str
    is_nullish: bool = False
    span: Span = field(default=Span(0, 0), compare=False)


@dataclass(frozen=True)
class StaticText:
    """
    A static chunk of a template literal.

    Properties:
        value: cooked text (escapes processed)
        raw: text exactly as written between the backticks
    """

    value: str
    raw: str = ""


TemplatePart = Union[StaticText, Expression]


@dataclass(frozen=True)
class TemplateComposite(Expression):
    """
    A template literal: static chunks interleaved with interpolations.

    Example:
        `foo ${bar} baz`

    Becomes:
        TemplateComposite(parts=(
            StaticText("foo "),
            Opaque("bar", ...),
            StaticText(" baz"),
        ))

    Empty static chunks are omitted, so `${x}` has exactly one part.
    """

    text: str
    parts: Tuple[TemplatePart, ...] = ()
    span: Span = field(default=Span(0, 0), compare=False)

    @property
    def expressions(self) -> Tuple[Expression, ...]:
        return tuple(p for p in self.parts if isinstance(p, Expression))


@dataclass(frozen=True)
class Conditional(Expression):
    """
    Ternary expression ``test ? consequent : alternate``.
    """

    text: str
    test: Expression
    consequent: Expression
    alternate: Expression
    span: Span = field(default=Span(0, 0), compare=False)

    precedence = PREC_CONDITIONAL


@dataclass(frozen=True)
class Concatenation(Expression):
    """
    Binary ``left + right``.

    Purely syntactic: numeric addition has the same shape.
    """

    text: str
    left: Expression
    right: Expression
    span: Span = field(default=Span(0, 0), compare=False)

    precedence = PREC_ADDITIVE


@dataclass(frozen=True)
class LogicalAnd(Expression):
    """Logical ``left && right``."""

    text: str
    left: Expression
    right: Expression
    span: Span = field(default=Span(0, 0), compare=False)

    precedence = PREC_LOGICAL_AND


@dataclass(frozen=True)
class LogicalOr(Expression):
    """
    Logical ``left || right``.

    Never decomposed: fallback semantics cannot be split into
    independent composer arguments.
    """

    text: str
    left: Expression
    right: Expression
    span: Span = field(default=Span(0, 0), compare=False)

    precedence = PREC_LOGICAL_OR


class OpaqueKind(Enum):
    """What an Opaque node was parsed from. Informational only."""

    IDENTIFIER = "identifier"
    THIS = "this"
    MEMBER = "member"
    CALL = "call"
    NEW = "new"
    TAGGED_TEMPLATE = "tagged-template"
    ARRAY = "array"
    OBJECT = "object"
    UNARY = "unary"
    UPDATE = "update"
    BINARY = "binary"
    NULLISH = "nullish"
    ASSIGNMENT = "assignment"
    ARROW = "arrow"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class Opaque(Expression):
    """
    Any expression shape that is passed through verbatim.

    Properties:
        text: source text
        kind: OpaqueKind it was parsed from
        callee: identifier name when this is a call on a bare identifier
                (e.g. ``clsx(...)``), else None
        op_precedence: binding strength of the outermost operator
    """

    text: str
    kind: OpaqueKind = OpaqueKind.IDENTIFIER
    callee: Optional[str] = None
    op_precedence: int = PREC_PRIMARY
    span: Span = field(default=Span(0, 0), compare=False)

    @property
    def precedence(self) -> int:
        return self.op_precedence


__all__ = [
    "Span",
    "Position",
    "Expression",
    "StringLiteral",
    "OtherLiteral",
    "StaticText",
    "TemplatePart",
    "TemplateComposite",
    "Conditional",
    "Concatenation",
    "LogicalAnd",
    "LogicalOr",
    "OpaqueKind",
    "Opaque",
]
