"""
Serialization helpers for lint results and expression trees.

Reports go through an explicit intermediate dict so that JSON and YAML
output share one stable structure.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

import yaml

from clsxlint.engine import Diagnostic, Fix, LintResult
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
)


def span_to_dict(span: Span) -> Dict[str, int]:
    return {"start": span.start, "end": span.end}


def fix_to_dict(fix: Fix | None) -> Dict[str, Any] | None:
    if fix is None:
        return None
    return {"range": span_to_dict(fix.range), "replacement": fix.replacement}


def diagnostic_to_dict(d: Diagnostic) -> Dict[str, Any]:
    return {
        "rule_id": d.rule_id,
        "message": d.message,
        "line": d.position.line,
        "column": d.position.column,
        "location": span_to_dict(d.location),
        "fix": fix_to_dict(d.fix),
    }


def result_to_dict(r: LintResult) -> Dict[str, Any]:
    return {
        "path": r.path,
        "diagnostics": [diagnostic_to_dict(d) for d in r.diagnostics],
        "errors": list(r.errors),
    }


def results_to_dict(results: Iterable[LintResult]) -> Dict[str, Any]:
    files: List[Dict[str, Any]] = [result_to_dict(r) for r in results]
    return {
        "files": files,
        "total_diagnostics": sum(len(f["diagnostics"]) for f in files),
        "total_errors": sum(len(f["errors"]) for f in files),
    }


def results_to_json(results: Iterable[LintResult]) -> str:
    return json.dumps(results_to_dict(results), indent=2, sort_keys=True)


def results_to_yaml(results: Iterable[LintResult]) -> str:
    return yaml.safe_dump(results_to_dict(results), sort_keys=False)


def expr_to_dict(expr: Expression | None) -> Any:
    """Debugging dump of an expression tree."""
    if expr is None:
        return None
    if isinstance(expr, StringLiteral):
        return {"type": "string", "text": expr.text, "value": expr.value}
    if isinstance(expr, OtherLiteral):
        return {"type": "literal", "text": expr.text, "nullish": expr.is_nullish}
    if isinstance(expr, TemplateComposite):
        parts = []
        for part in expr.parts:
            if isinstance(part, StaticText):
                parts.append({"type": "static", "value": part.value})
            else:
                parts.append(expr_to_dict(part))
        return {"type": "template", "parts": parts}
    if isinstance(expr, Conditional):
        return {
            "type": "conditional",
            "test": expr_to_dict(expr.test),
            "consequent": expr_to_dict(expr.consequent),
            "alternate": expr_to_dict(expr.alternate),
        }
    if isinstance(expr, (Concatenation, LogicalAnd, LogicalOr)):
        names = {Concatenation: "concat", LogicalAnd: "and", LogicalOr: "or"}
        return {
            "type": names[type(expr)],
            "left": expr_to_dict(expr.left),
            "right": expr_to_dict(expr.right),
        }
    if isinstance(expr, Opaque):
        d = {"type": "opaque", "kind": expr.kind.value, "text": expr.text}
        if expr.callee is not None:
            d["callee"] = expr.callee
        return d
    raise TypeError(f"Unsupported Expression type: {type(expr)}")


__all__ = [
    "span_to_dict",
    "fix_to_dict",
    "diagnostic_to_dict",
    "result_to_dict",
    "results_to_dict",
    "results_to_json",
    "results_to_yaml",
    "expr_to_dict",
]
