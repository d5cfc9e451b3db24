"""
Tests for report and expression serialization.

JSON and YAML reports must share one structure, built by
`clsxlint.serialization.results_to_dict`.
"""

import json

import pytest
import yaml
from clsxlint.engine import LintResult, RuleEngine
from clsxlint.expressions import OtherLiteral
from clsxlint.parser import parse_expression
from clsxlint.serialization import (
    diagnostic_to_dict,
    expr_to_dict,
    results_to_dict,
    results_to_json,
    results_to_yaml,
)


SOURCE = "<div>\n  <p className={a && 'b'} />\n</div>"


def build_results():
    flagged = RuleEngine().lint(SOURCE, path="App.jsx")
    clean = LintResult(path="Clean.jsx")
    return [flagged, clean]


class TestDiagnostics:

    def test_diagnostic_to_dict(self):
        d = diagnostic_to_dict(RuleEngine().lint(SOURCE).diagnostics[0])
        assert d["rule_id"] == "enforce-clsx-in-classname"
        assert d["line"] == 2
        assert d["column"] == 6
        assert d["location"]["start"] == SOURCE.index("className")
        assert d["fix"]["replacement"] == "clsx(a, 'b')"
        start, end = d["fix"]["range"]["start"], d["fix"]["range"]["end"]
        assert SOURCE[start:end] == "a && 'b'"

    def test_report_only_has_null_fix(self):
        from clsxlint.config import LintConfig, Mode
        engine = RuleEngine(LintConfig(mode=Mode.REPORT_ONLY))
        assert diagnostic_to_dict(engine.lint(SOURCE).diagnostics[0])["fix"] is None


class TestReports:

    def test_totals(self):
        d = results_to_dict(build_results())
        assert d["total_diagnostics"] == 1
        assert d["total_errors"] == 0
        assert [f["path"] for f in d["files"]] == ["App.jsx", "Clean.jsx"]

    def test_json_and_yaml_agree(self):
        results = build_results()
        assert json.loads(results_to_json(results)) == yaml.safe_load(results_to_yaml(results))

    def test_errors_are_reported(self):
        with pytest.warns(UserWarning):
            result = RuleEngine().lint("<p className={a b} />", path="Bad.jsx")
        d = results_to_dict([result])
        assert d["total_errors"] == 1
        assert d["files"][0]["errors"][0].startswith("Bad.jsx:1:")


class TestExpressionDump:
    """Debug view of expression trees."""

    def test_conditional(self):
        assert expr_to_dict(parse_expression("a ? 'b' : null")) == {
            "type": "conditional",
            "test": {"type": "opaque", "kind": "identifier", "text": "a"},
            "consequent": {"type": "string", "text": "'b'", "value": "b"},
            "alternate": {"type": "literal", "text": "null", "nullish": True},
        }

    def test_template(self):
        assert expr_to_dict(parse_expression("`x ${y + 'z'}`")) == {
            "type": "template",
            "parts": [
                {"type": "static", "value": "x "},
                {
                    "type": "concat",
                    "left": {"type": "opaque", "kind": "identifier", "text": "y"},
                    "right": {"type": "string", "text": "'z'", "value": "z"},
                },
            ],
        }

    def test_call_records_callee(self):
        d = expr_to_dict(parse_expression("clsx(a)"))
        assert d["kind"] == "call"
        assert d["callee"] == "clsx"

    def test_logical(self):
        assert expr_to_dict(parse_expression("a || b"))["type"] == "or"
        assert expr_to_dict(parse_expression("a && b"))["type"] == "and"

    def test_none(self):
        assert expr_to_dict(None) is None

    def test_literal(self):
        assert expr_to_dict(OtherLiteral(text="0")) == {"type": "literal", "text": "0", "nullish": False}
