"""
Decomposer: class-name expression → ordered argument fragments.

Every function here is pure and returns a tuple; results of sub-calls
are concatenated, never mutated.

ORDER INVARIANT:
    Output order equals left-to-right source order of the sub-expressions,
    with one exception: for a conditional, raw branch fragments come
    first and the merged ConditionalMap comes last.
"""

import json
from typing import Tuple

from clsxlint.expressions import (
    Expression,
    StringLiteral,
    OtherLiteral,
    StaticText,
    TemplateComposite,
    Conditional,
    Concatenation,
    LogicalAnd,
    LogicalOr,
    Opaque,
)
from clsxlint.fragments import (
    Fragment,
    Guard,
    StaticString,
    ConditionalMap,
    RawGuarded,
)

Fragments = Tuple[Fragment, ...]


def static_string(value: str) -> StaticString:
    """Build a StaticString for text that has no source literal of its own."""
    return StaticString(text=json.dumps(value, ensure_ascii=False), value=value)


def _flush(pending: str) -> Fragments:
    return (static_string(pending),) if pending else ()


def _decompose_template(expr: TemplateComposite) -> Fragments:
    """One StaticString per static run, full expansion of each interpolation."""
    fragments: Fragments = ()
    pending = ""
    for part in expr.parts:
        if isinstance(part, StaticText):
            pending += part.value
            continue
        fragments = fragments + _flush(pending) + decompose(part)
        pending = ""
    return fragments + _flush(pending)


def _decompose_conditional(expr: Conditional) -> Fragments:
    """
    Merge both branches of ``test ? consequent : alternate``.

        consequent string literal  -> pair (literal, test)
        consequent anything else   -> RawGuarded(test, consequent)
        alternate non-empty string -> pair (literal, !test)
        alternate empty string     -> nothing
        alternate null             -> nothing
        alternate anything else    -> RawGuarded(!test, alternate)

    Raw fragments are emitted first, then one ConditionalMap holding
    every pair in insertion order.
    """
    guard = Guard(expr.test)
    negated = guard.negate()
    raw: Fragments = ()
    pairs: Tuple[Tuple[str, Guard], ...] = ()

    consequent = expr.consequent
    if isinstance(consequent, StringLiteral):
        pairs = pairs + ((consequent.text, guard),)
    else:
        raw = raw + (RawGuarded(guard, consequent),)

    alternate = expr.alternate
    if isinstance(alternate, StringLiteral):
        if alternate.value:
            pairs = pairs + ((alternate.text, negated),)
    elif isinstance(alternate, OtherLiteral) and alternate.is_nullish:
        pass
    else:
        raw = raw + (RawGuarded(negated, alternate),)

    if pairs:
        return raw + (ConditionalMap(pairs),)
    return raw


def decompose(expr: Expression) -> Fragments:
    """
    Decompose an expression into composer argument fragments.

    Total over every Expression: shapes without a dedicated arm are
    passed through verbatim as ``RawGuarded(None, expr)``.

    Args:
        expr: Any class-name expression (sub)tree

    Returns:
        Tuple of fragments in source order
    """
    if isinstance(expr, StringLiteral):
        return (StaticString(text=expr.text, value=expr.value),)

    if isinstance(expr, TemplateComposite):
        return _decompose_template(expr)

    if isinstance(expr, Conditional):
        return _decompose_conditional(expr)

    if isinstance(expr, (Concatenation, LogicalAnd)):
        return decompose(expr.left) + decompose(expr.right)

    if isinstance(expr, (LogicalOr, OtherLiteral, Opaque)):
        return (RawGuarded(None, expr),)

    # Unrecognized variant: same treatment as Opaque.
    return (RawGuarded(None, expr),)


__all__ = ["decompose", "static_string", "Fragments"]
