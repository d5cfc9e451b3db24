"""
Expression Classifier: does this class-name value need rewriting?

Looks at the TOP-LEVEL variant of the expression only. Nested shapes
are the decomposer's business.

IMPORTANT: This is a pure predicate. Same input, same answer.
"""

from clsxlint.expressions import (
    Expression,
    TemplateComposite,
    Conditional,
    Concatenation,
    LogicalAnd,
    LogicalOr,
    Opaque,
    OpaqueKind,
)

DEFAULT_COMPOSER = "clsx"


def is_composer_call(expr: Expression, composer: str = DEFAULT_COMPOSER) -> bool:
    """
    True when ``expr`` is already a top-level call to the composer.

    Only a bare identifier callee counts: ``clsx(...)`` does,
    ``utils.clsx(...)`` and ``(clsx)(...)`` do not.
    """
    return (
        isinstance(expr, Opaque)
        and expr.kind is OpaqueKind.CALL
        and expr.callee == composer
    )


def needs_rewrite(expr: Expression, composer: str = DEFAULT_COMPOSER) -> bool:
    """
    Decide whether a class-name expression should be flagged.

    Rules:
        already a composer call       -> False (checked first)
        template with interpolation
            or more than one part     -> True
        a + b                         -> True
        c ? a : b                     -> True
        a && b, a || b                -> True
        anything else                 -> False

    Args:
        expr: Expression inside the attribute's dynamic container
        composer: Configured composer function name

    Returns:
        True if the expression should be rewritten
    """
    if is_composer_call(expr, composer):
        return False

    if isinstance(expr, TemplateComposite):
        return len(expr.expressions) > 0 or len(expr.parts) > 1
    if isinstance(expr, (Concatenation, Conditional, LogicalAnd, LogicalOr)):
        return True
    return False


__all__ = ["DEFAULT_COMPOSER", "is_composer_call", "needs_rewrite"]
