"""
clsxlint: canonical class-name composition for JSX

Flags className values built by hand (string concatenation, ternaries,
template interpolation, && / || chains) and rewrites them as a single
call to a class-list composer such as clsx:

    className={`base ${isActive ? 'active' : ''}`}
becomes
    className={clsx("base ", { 'active': isActive })}

ARCHITECTURAL GUARANTEE:
------------------------
Every decision is made on expression SHAPE.
No expression is ever evaluated.
"""

__version__ = "0.1.0"

from clsxlint.expressions import Expression, Span, Position
from clsxlint.parser import parse_expression
from clsxlint.classifier import needs_rewrite, is_composer_call
from clsxlint.decomposer import decompose
from clsxlint.canonicalizer import canonicalize
from clsxlint.config import LintConfig, Mode
from clsxlint.engine import RuleEngine, Diagnostic, Fix, LintResult, apply_fixes, fix_source
from clsxlint.errors import ClsxLintError, ExpressionParseError, ConfigError

__all__ = [
    "__version__",
    "Expression",
    "Span",
    "Position",
    "parse_expression",
    "needs_rewrite",
    "is_composer_call",
    "decompose",
    "canonicalize",
    "LintConfig",
    "Mode",
    "RuleEngine",
    "Diagnostic",
    "Fix",
    "LintResult",
    "apply_fixes",
    "fix_source",
    "ClsxLintError",
    "ExpressionParseError",
    "ConfigError",
]
