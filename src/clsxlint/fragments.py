"""
Argument Fragments

A fragment is one unit of the composer's eventual argument list, as
produced by the decomposer:

    - StaticString:   a literal string passed through
    - ConditionalMap: object-literal style { 'key': condition, ... }
    - RawGuarded:     a bare expression, optionally behind a guard

ARCHITECTURAL RULE:
    Fragments are immutable values. A fragment sequence is a tuple,
    never a list that someone else might append to.
    Rendering lives in the canonicalizer, not here.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .expressions import Expression


@dataclass(frozen=True)
class Guard:
    """
    A boolean condition gating a fragment.

    Properties:
        expr: the conditional's test expression
        negated: True for the alternate branch (``!test``)
    """

    expr: Expression
    negated: bool = False

    def negate(self) -> "Guard":
        return Guard(self.expr, not self.negated)


@dataclass(frozen=True)
class StaticString:
    """
    A literal class string.

    Properties:
        text: rendered literal, quotes included (``'foo'`` or ``"foo "``)
        value: decoded content; an empty value contributes nothing
    """

    text: str
    value: str


@dataclass(frozen=True)
class ConditionalMap:
    """
    Class-name keys paired with the conditions that enable them.

    Example:
        cond ? 'a' : 'b'

    Becomes:
        ConditionalMap(pairs=(("'a'", Guard(cond)), ("'b'", Guard(cond, negated=True))))

    Keys keep insertion order.
    """

    pairs: Tuple[Tuple[str, Guard], ...]


@dataclass(frozen=True)
class RawGuarded:
    """
    A bare expression, contributing only when ``condition`` holds.

    Renders as ``expr`` without a condition, else ``(condition && expr)``.
    """

    condition: Optional[Guard]
    expr: Expression


Fragment = Union[StaticString, ConditionalMap, RawGuarded]


__all__ = ["Guard", "StaticString", "ConditionalMap", "RawGuarded", "Fragment"]
