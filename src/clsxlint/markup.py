"""
Markup scanner: locate candidate attributes in JSX/TSX source.

This is the "visit attribute node, filter by name" hook. It does not
parse whole files; it finds ``name=`` occurrences that look like JSX
attributes and delimits their values:

    name="static"    -> StaticValue
    name={ expr }    -> ExpressionContainer (expression parsed in place)

Known limitation:
    Occurrences inside JavaScript strings or comments are not excluded;
    they are treated like real attributes.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Union

from clsxlint.errors import ExpressionParseError
from clsxlint.expressions import Expression, Span
from clsxlint.parser import find_closing_brace, is_blank_expression, parse_expression


@dataclass(frozen=True)
class StaticValue:
    """A quoted attribute value; never inspected further."""
    text: str
    span: Span


@dataclass(frozen=True)
class ExpressionContainer:
    """
    A ``{ ... }`` attribute value.

    Properties:
        span: the whole container, braces included
        expression: parsed inner expression, None for an empty container
                    or when parsing failed
        error: parse error message, if any
        error_offset: file offset of the error, if any
    """
    span: Span
    expression: Optional[Expression] = None
    error: Optional[str] = None
    error_offset: int = -1


AttributeValue = Union[StaticValue, ExpressionContainer]


@dataclass(frozen=True)
class Attribute:
    """A markup attribute ``name=value`` at ``span``."""
    name: str
    span: Span
    value: Optional[AttributeValue] = None


def _attribute_pattern(name: str) -> "re.Pattern[str]":
    return re.compile(r"(?<=\s)" + re.escape(name) + r"\s*=\s*(?=[{\"'])")


def _scan_container(source: str, open_brace: int) -> ExpressionContainer:
    inner_start = open_brace + 1
    try:
        close = find_closing_brace(source, inner_start)
    except ExpressionParseError as e:
        return ExpressionContainer(
            span=Span(open_brace, open_brace + 1),
            error=e.message,
            error_offset=e.offset,
        )

    span = Span(open_brace, close + 1)
    if is_blank_expression(source, inner_start, close):
        return ExpressionContainer(span=span)
    try:
        expression = parse_expression(source, inner_start, close)
    except ExpressionParseError as e:
        return ExpressionContainer(span=span, error=e.message, error_offset=e.offset)
    return ExpressionContainer(span=span, expression=expression)


def find_attributes(source: str, name: str) -> List[Attribute]:
    """
    Find every ``name=...`` attribute in ``source``.

    Args:
        source: Whole file text
        name: Attribute name to match exactly (e.g. "className")

    Returns:
        Attributes in source order; expression spans are file offsets
    """
    attributes: List[Attribute] = []
    resume = 0

    for m in _attribute_pattern(name).finditer(source):
        if m.start() < resume:
            continue
        value_start = m.end()
        ch = source[value_start]

        if ch == "{":
            value = _scan_container(source, value_start)
            end = value.span.end
        else:
            close = source.find(ch, value_start + 1)
            if close == -1:
                continue
            end = close + 1
            value = StaticValue(text=source[value_start:end], span=Span(value_start, end))

        attributes.append(Attribute(name=name, span=Span(m.start(), end), value=value))
        resume = end

    return attributes


__all__ = [
    "Attribute",
    "AttributeValue",
    "StaticValue",
    "ExpressionContainer",
    "find_attributes",
]
