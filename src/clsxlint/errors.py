"""Exception hierarchy for clsxlint.

Only the outer layers raise (parser, markup scanner, configuration).
The classifier, decomposer and canonicalizer are total functions and
never raise on a parsed tree.
"""


class ClsxLintError(Exception):
    """Base class for all clsxlint errors."""
    pass


class ExpressionParseError(ClsxLintError):
    """Raised when an attribute value is not a parseable expression."""

    def __init__(self, message: str, offset: int = -1):
        super().__init__(message)
        self.message = message
        self.offset = offset


class ConfigError(ClsxLintError):
    """Raised when configuration is missing, malformed or invalid."""
    pass
