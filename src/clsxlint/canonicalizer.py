"""
Fragment Canonicalizer: fragments → ``composer(arg, arg, ...)`` text.

Steps:
    1. Render each fragment to text
    2. Drop static strings with an empty value
    3. Drop later duplicates (exact rendered-text equality, stable)
    4. Join with ", " and wrap in a call to the composer

Deduplication is textual only: two fragments that render identically
collapse even if they came from different scopes.
"""

from typing import Iterable, List

from clsxlint.classifier import DEFAULT_COMPOSER
from clsxlint.expressions import (
    Expression,
    PREC_SEQUENCE,
    PREC_LOGICAL_AND,
    PREC_UNARY,
)
from clsxlint.fragments import (
    Fragment,
    Guard,
    StaticString,
    ConditionalMap,
    RawGuarded,
)


def _wrap(text: str, precedence: int, minimum: int) -> str:
    return f"({text})" if precedence < minimum else text


def _guard_precedence(guard: Guard) -> int:
    return PREC_UNARY if guard.negated else guard.expr.precedence


def render_guard(guard: Guard) -> str:
    """Render ``test`` or ``!test``; compound tests are parenthesized under ``!``."""
    text = guard.expr.render()
    if guard.negated:
        return "!" + _wrap(text, guard.expr.precedence, PREC_UNARY)
    return text


def _render_operand(expr: Expression) -> str:
    # A composer argument or map value is an AssignmentExpression.
    return _wrap(expr.render(), expr.precedence, PREC_SEQUENCE + 1)


def render_fragment(fragment: Fragment) -> str:
    """Render a single fragment to argument text."""
    if isinstance(fragment, StaticString):
        return fragment.text

    if isinstance(fragment, RawGuarded):
        if fragment.condition is None:
            return _render_operand(fragment.expr)
        left = _wrap(render_guard(fragment.condition),
                     _guard_precedence(fragment.condition), PREC_LOGICAL_AND)
        right = _wrap(fragment.expr.render(), fragment.expr.precedence, PREC_LOGICAL_AND)
        return f"({left} && {right})"

    if isinstance(fragment, ConditionalMap):
        entries = []
        for key, guard in fragment.pairs:
            value = _wrap(render_guard(guard), _guard_precedence(guard), PREC_SEQUENCE + 1)
            entries.append(f"{key}: {value}")
        return "{ " + ", ".join(entries) + " }"

    raise TypeError(f"Unsupported fragment type: {type(fragment)}")


def render_arguments(fragments: Iterable[Fragment]) -> List[str]:
    """Render, drop empty static strings and deduplicate (steps 1-3)."""
    arguments: List[str] = []
    seen = set()
    for fragment in fragments:
        if isinstance(fragment, StaticString) and not fragment.value:
            continue
        text = render_fragment(fragment)
        if text in seen:
            continue
        seen.add(text)
        arguments.append(text)
    return arguments


def canonicalize(fragments: Iterable[Fragment], composer: str = DEFAULT_COMPOSER) -> str:
    """
    Build the canonical composer call for a fragment sequence.

    Args:
        fragments: Output of ``decompose``
        composer: Function name to call

    Returns:
        Call text, e.g. ``clsx('base', { 'active': isActive })``
    """
    return f"{composer}({', '.join(render_arguments(fragments))})"


__all__ = ["canonicalize", "render_arguments", "render_fragment", "render_guard"]
