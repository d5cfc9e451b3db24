"""
Rule Engine: flag hand-built class strings, optionally rewrite them.

For each candidate attribute:

    attribute → classify → (flag?) → decompose → canonicalize → Fix

In report-only mode the decomposer and canonicalizer are never invoked.
An attribute that is already a composer call produces nothing at all.

IMPORTANT: The engine never modifies its input. ``apply_fixes`` returns
new text; writing it anywhere is the caller's decision.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from clsxlint.canonicalizer import canonicalize
from clsxlint.classifier import needs_rewrite
from clsxlint.config import LintConfig, Mode
from clsxlint.decomposer import decompose
from clsxlint.expressions import Expression, Position, Span
from clsxlint.markup import Attribute, ExpressionContainer, find_attributes

logger = logging.getLogger(__name__)

RULE_ID = "enforce-clsx-in-classname"
MESSAGE = "Use `{composer}` instead of string interpolation or conditional logic inside `{attribute}`."

# Same bound ESLint uses for repeated autofix passes.
MAX_FIX_PASSES = 10


@dataclass(frozen=True)
class Fix:
    """Replace ``source[range.start:range.end]`` with ``replacement``."""
    range: Span
    replacement: str


@dataclass(frozen=True)
class Diagnostic:
    """A single finding, located at the whole attribute."""
    rule_id: str
    message: str
    location: Span
    position: Position
    fix: Optional[Fix] = None


@dataclass
class LintResult:
    """Diagnostics for one source text, plus attributes that could not be read."""

    path: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def has_issues(self) -> bool:
        return len(self.diagnostics) > 0

    def fixable_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.fix is not None)


class RuleEngine:
    """
    Orchestrates classifier, decomposer and canonicalizer per attribute.

    Args:
        config: LintConfig (defaults: className / clsx / fix)
    """

    def __init__(self, config: Optional[LintConfig] = None):
        self.config = config or LintConfig()

    @property
    def message(self) -> str:
        return MESSAGE.format(composer=self.config.composer, attribute=self.config.attribute)

    def rewrite(self, expr: Expression) -> Optional[str]:
        """Canonical call text for ``expr``, or None when it is not flagged."""
        if not needs_rewrite(expr, self.config.composer):
            return None
        return canonicalize(decompose(expr), self.config.composer)

    def check_attribute(self, attribute: Attribute, source: str = "") -> Optional[Diagnostic]:
        """
        Check one attribute node.

        Args:
            attribute: Attribute from the markup scanner
            source: Text the spans refer to (used for line/column only)

        Returns:
            Diagnostic, or None when the attribute is fine or not a target
        """
        if attribute.name != self.config.attribute:
            return None
        value = attribute.value
        if not isinstance(value, ExpressionContainer) or value.expression is None:
            return None

        expr = value.expression
        if not needs_rewrite(expr, self.config.composer):
            return None

        fix = None
        if self.config.mode is Mode.FIX:
            replacement = canonicalize(decompose(expr), self.config.composer)
            fix = Fix(range=expr.span, replacement=replacement)
            logger.debug("Rewrite %r -> %r", expr.text, replacement)

        return Diagnostic(
            rule_id=RULE_ID,
            message=self.message,
            location=attribute.span,
            position=Position.from_offset(source, attribute.span.start),
            fix=fix,
        )

    def lint(self, source: str, path: str = "<input>") -> LintResult:
        """
        Lint every target attribute in ``source``.

        Containers that cannot be parsed are skipped with a UserWarning
        and recorded in ``LintResult.errors``.
        """
        result = LintResult(path=path)

        for attribute in find_attributes(source, self.config.attribute):
            value = attribute.value
            if isinstance(value, ExpressionContainer) and value.error:
                offset = value.error_offset if value.error_offset >= 0 else attribute.span.start
                pos = Position.from_offset(source, offset)
                msg = f"{path}:{pos.line}:{pos.column}: skipped {attribute.name} value: {value.error}"
                warnings.warn(msg, UserWarning)
                result.errors.append(msg)
                continue

            diagnostic = self.check_attribute(attribute, source)
            if diagnostic is not None:
                logger.debug("%s:%d:%d flagged", path, diagnostic.position.line, diagnostic.position.column)
                result.diagnostics.append(diagnostic)

        return result


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> str:
    """
    Apply every fix attached to ``diagnostics``.

    Fixes are applied in source order; a fix overlapping one already
    applied is skipped.
    """
    fixes = sorted((d.fix for d in diagnostics if d.fix is not None),
                   key=lambda f: (f.range.start, f.range.end))
    pieces = []
    last_end = 0
    applied: Optional[Span] = None
    for fix in fixes:
        if applied is not None and fix.range.overlaps(applied):
            logger.debug("Skipping overlapping fix at %d", fix.range.start)
            continue
        pieces.append(source[last_end:fix.range.start])
        pieces.append(fix.replacement)
        last_end = fix.range.end
        applied = fix.range
    pieces.append(source[last_end:])
    return "".join(pieces)


def fix_source(source: str, config: Optional[LintConfig] = None,
               path: str = "<input>") -> Tuple[str, LintResult]:
    """
    Lint and fix until nothing changes.

    Always runs in fix mode, whatever ``config.mode`` says.

    Returns:
        (fixed source, LintResult of the fixed source)
    """
    engine = RuleEngine((config or LintConfig()).with_overrides(mode=Mode.FIX))
    result = engine.lint(source, path)
    for _ in range(MAX_FIX_PASSES):
        if result.fixable_count() == 0:
            break
        fixed = apply_fixes(source, result.diagnostics)
        if fixed == source:
            break
        source = fixed
        result = engine.lint(source, path)
    return source, result


__all__ = [
    "RULE_ID",
    "MESSAGE",
    "Fix",
    "Diagnostic",
    "LintResult",
    "RuleEngine",
    "apply_fixes",
    "fix_source",
]
