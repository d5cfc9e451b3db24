"""
Tests for the Rule Engine.

These tests verify:
    - Accepted attribute values produce no diagnostic
    - Flagged values produce one diagnostic with the exact rewrite
    - Report-only mode never computes a rewrite
    - Fixed output is stable under a second lint pass
"""

import warnings

import pytest
from clsxlint.config import LintConfig, Mode
from clsxlint.engine import (
    RULE_ID,
    Diagnostic,
    Fix,
    RuleEngine,
    apply_fixes,
    fix_source,
)
from clsxlint.expressions import Position, Span
from clsxlint.markup import find_attributes


VALID = [
    "<div className=\"static-class\">Hello</div>",
    "<div className={clsx('static', active && 'active')}>Hello</div>",
    "<div className={clsx({ 'active': active })}>Hello</div>",
    "<div className={clsx('foo', 'bar')}>Hello</div>",
    "<div className={clsx(someVar)}>Hello</div>",
    "<div className={clsx('base', active && 'active', isDisabled && 'disabled')}>Hello</div>",
    "<div className={clsx('foo', { 'bar': condition, 'baz': !condition })}>Hello</div>",
    "<div className={clsx(isActive ? 'active' : 'inactive')}>Hello</div>",
    "<div className={styles.button}>Hello</div>",
    "<div className={`static`}>Hello</div>",
    "<div id={a ? 'x' : 'y'}>Hello</div>",
]

INVALID = [
    (
        "<div className={`base ${isActive ? 'active' : ''}`}>Hello</div>",
        "<div className={clsx(\"base \", { 'active': isActive })}>Hello</div>",
    ),
    (
        "<div className={`${isActive ? 'active' : 'inactive'}`}>Hello</div>",
        "<div className={clsx({ 'active': isActive, 'inactive': !isActive })}>Hello</div>",
    ),
    (
        "<div className={`${someVar}`}>Hello</div>",
        "<div className={clsx(someVar)}>Hello</div>",
    ),
    (
        "<div className={`foo ${bar} baz`}>Hello</div>",
        "<div className={clsx(\"foo \", bar, \" baz\")}>Hello</div>",
    ),
    (
        "<div className={`foo ${isActive && 'active'} ${isAdmin ? 'admin' : ''}`}>Hello</div>",
        "<div className={clsx(\"foo \", isActive, 'active', \" \", { 'admin': isAdmin })}>Hello</div>",
    ),
    (
        "<div className={\"foo\" + (isActive ? \"active\" : \"\")}>Hello</div>",
        "<div className={clsx(\"foo\", { \"active\": isActive })}>Hello</div>",
    ),
    (
        "<div className={\"foo\" + \" bar\"}>Hello</div>",
        "<div className={clsx(\"foo\", \" bar\")}>Hello</div>",
    ),
    (
        "<div className={someVar + \" bar\"}>Hello</div>",
        "<div className={clsx(someVar, \" bar\")}>Hello</div>",
    ),
    (
        "<div className={'static ' + (isActive ? 'active' : '') + (isAdmin ? ' admin' : '')}>Hello</div>",
        "<div className={clsx('static ', { 'active': isActive }, { ' admin': isAdmin })}>Hello</div>",
    ),
    (
        "<div className={isActive ? 'active' : 'inactive'}>Hello</div>",
        "<div className={clsx({ 'active': isActive, 'inactive': !isActive })}>Hello</div>",
    ),
    (
        "<div className={isAdmin ? 'admin-only' : ''}>Hello</div>",
        "<div className={clsx({ 'admin-only': isAdmin })}>Hello</div>",
    ),
    (
        "<div className={isAdmin ? 'admin-only' : null}>Hello</div>",
        "<div className={clsx({ 'admin-only': isAdmin })}>Hello</div>",
    ),
    (
        "<div className={isAdmin ? 'admin-only' : undefined}>Hello</div>",
        "<div className={clsx((!isAdmin && undefined), { 'admin-only': isAdmin })}>Hello</div>",
    ),
    (
        "<div className={isAdmin ? 'admin-only' : 0}>Hello</div>",
        "<div className={clsx((!isAdmin && 0), { 'admin-only': isAdmin })}>Hello</div>",
    ),
    (
        "<div className={isActive ? activeClass : 'inactive'}>Hello</div>",
        "<div className={clsx((isActive && activeClass), { 'inactive': !isActive })}>Hello</div>",
    ),
    (
        "<div className={isActive && 'show-active'}>Hello</div>",
        "<div className={clsx(isActive, 'show-active')}>Hello</div>",
    ),
    (
        "<div className={isAdmin || 'default-user'}>Hello</div>",
        "<div className={clsx(isAdmin || 'default-user')}>Hello</div>",
    ),
    (
        "<div className={isActive && isAdmin && 'super-user'}>Hello</div>",
        "<div className={clsx(isActive, isAdmin, 'super-user')}>Hello</div>",
    ),
    (
        "<div className={isLoggedIn && someVariable && 'show-stuff'}>Hello</div>",
        "<div className={clsx(isLoggedIn, someVariable, 'show-stuff')}>Hello</div>",
    ),
    (
        "<div className={`layout ${isActive ? 'active' : ''} ${isAdmin && 'admin-only'}`}>Hello</div>",
        "<div className={clsx(\"layout \", { 'active': isActive }, \" \", isAdmin, 'admin-only')}>Hello</div>",
    ),
    (
        "<div className={('base ' + (isActive ? 'active' : '')) + (isAdmin ? ' admin' : '')}>Hello</div>",
        "<div className={clsx('base ', { 'active': isActive }, { ' admin': isAdmin })}>Hello</div>",
    ),
]


class TestValid:
    """Values the rule accepts."""

    @pytest.mark.parametrize("source", VALID)
    def test_no_diagnostic(self, source):
        result = RuleEngine().lint(source)
        assert result.diagnostics == []
        assert result.errors == []


class TestInvalid:
    """Values the rule flags and rewrites."""

    @pytest.mark.parametrize("source, expected", INVALID)
    def test_single_diagnostic(self, source, expected):
        result = RuleEngine().lint(source)
        assert len(result.diagnostics) == 1
        d = result.diagnostics[0]
        assert d.rule_id == RULE_ID
        assert d.message == "Use `clsx` instead of string interpolation or conditional logic inside `className`."
        assert d.fix is not None

    @pytest.mark.parametrize("source, expected", INVALID)
    def test_fixed_output(self, source, expected):
        result = RuleEngine().lint(source)
        assert apply_fixes(source, result.diagnostics) == expected

    @pytest.mark.parametrize("source, expected", INVALID)
    def test_fixed_output_is_accepted(self, source, expected):
        fixed, result = fix_source(source)
        assert fixed == expected
        assert result.diagnostics == []


class TestDiagnosticLocation:
    """Diagnostics cover the whole attribute."""

    def test_location_and_position(self):
        source = "<div>\n  <span className={a && 'b'} />\n</div>"
        d = RuleEngine().lint(source).diagnostics[0]
        start = source.index("className")
        assert d.location == Span(start, source.index("} />") + 1)
        assert d.position == Position(line=2, column=9)

    def test_fix_replaces_only_the_expression(self):
        source = "<a className={ (x && 'y') } />"
        d = RuleEngine().lint(source).diagnostics[0]
        assert source[d.fix.range.start:d.fix.range.end] == "x && 'y'"
        assert apply_fixes(source, [d]) == "<a className={ (clsx(x, 'y')) } />"

    def test_several_attributes(self):
        source = "<a className={a && 'x'} /><b className=\"s\" /><c className={`${y}`} />"
        result = RuleEngine().lint(source)
        assert len(result.diagnostics) == 2
        assert result.diagnostics[0].location.start < result.diagnostics[1].location.start
        assert apply_fixes(source, result.diagnostics) == (
            "<a className={clsx(a, 'x')} /><b className=\"s\" /><c className={clsx(y)} />"
        )


class TestReportOnly:
    """Report-only mode skips decomposition entirely."""

    def test_no_fix(self, monkeypatch):
        def boom(expr):
            raise AssertionError("decompose should not run in report-only mode")

        monkeypatch.setattr("clsxlint.engine.decompose", boom)
        engine = RuleEngine(LintConfig(mode=Mode.REPORT_ONLY))
        result = engine.lint("<div className={a ? 'b' : 'c'} />")
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].fix is None
        assert result.fixable_count() == 0

    def test_fix_source_forces_fix_mode(self):
        fixed, _ = fix_source("<div className={a && 'b'} />", LintConfig(mode=Mode.REPORT_ONLY))
        assert fixed == "<div className={clsx(a, 'b')} />"


class TestConfiguredNames:
    """Attribute and composer come from configuration."""

    def test_custom_attribute(self):
        engine = RuleEngine(LintConfig(attribute="class"))
        assert engine.lint("<div className={a && 'b'} />").diagnostics == []
        result = engine.lint("<div class={a && 'b'} />")
        assert len(result.diagnostics) == 1

    def test_custom_composer(self):
        engine = RuleEngine(LintConfig(composer="cn"))
        source = "<div className={a ? 'b' : ''} />"
        result = engine.lint(source)
        assert apply_fixes(source, result.diagnostics) == "<div className={cn({ 'b': a })} />"
        assert "`cn`" in result.diagnostics[0].message

    def test_custom_composer_call_is_accepted(self):
        engine = RuleEngine(LintConfig(composer="cn"))
        assert engine.lint("<div className={cn('a', b && 'c')} />").diagnostics == []
        assert len(engine.lint("<div className={clsx('a', b && 'c')} />").diagnostics) == 0

    def test_rewrite(self):
        engine = RuleEngine()
        from clsxlint.parser import parse_expression
        assert engine.rewrite(parse_expression("a && 'b'")) == "clsx(a, 'b')"
        assert engine.rewrite(parse_expression("'b'")) is None


class TestUnreadableContainers:
    """Containers that hold no usable expression."""

    @pytest.mark.parametrize("source", [
        "<div className={} />",
        "<div className={/* todo */} />",
    ])
    def test_empty_container_is_ignored(self, source):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = RuleEngine().lint(source)
        assert result.diagnostics == []
        assert result.errors == []

    def test_unparseable_container_warns(self):
        source = "<div className={a b} />\n<p className={x && 'y'} />"
        with pytest.warns(UserWarning, match="skipped className"):
            result = RuleEngine().lint(source, path="App.jsx")
        assert len(result.errors) == 1
        assert result.errors[0].startswith("App.jsx:1:")
        assert len(result.diagnostics) == 1

    def test_unbalanced_container_warns(self):
        with pytest.warns(UserWarning):
            result = RuleEngine().lint("<div className={a && 'b' />")
        assert result.diagnostics == []
        assert len(result.errors) == 1


class TestApplyFixes:
    """Applying fixes to text."""

    def _diag(self, start, end, replacement):
        return Diagnostic(
            rule_id=RULE_ID,
            message="m",
            location=Span(start, end),
            position=Position(1, start + 1),
            fix=Fix(range=Span(start, end), replacement=replacement),
        )

    def test_fixes_applied_in_source_order(self):
        diags = [self._diag(6, 8, "Y"), self._diag(0, 2, "X")]
        assert apply_fixes("ab cd ef", diags) == "X cd Y"

    def test_overlapping_fix_skipped(self):
        diags = [self._diag(0, 5, "X"), self._diag(3, 7, "Y")]
        assert apply_fixes("0123456789", diags) == "X56789"

    def test_diagnostic_without_fix(self):
        d = Diagnostic(RULE_ID, "m", Span(0, 1), Position(1, 1))
        assert apply_fixes("abc", [d]) == "abc"

    def test_input_unchanged(self):
        source = "<div className={a && 'b'} />"
        RuleEngine().lint(source)
        assert source == "<div className={a && 'b'} />"


class TestCheckAttribute:
    """The per-attribute hook."""

    def test_static_value(self):
        attribute = find_attributes('<div className="x" />', "className")[0]
        assert RuleEngine().check_attribute(attribute) is None

    def test_other_attribute_name(self):
        attribute = find_attributes("<div id={a && 'b'} />", "id")[0]
        assert RuleEngine().check_attribute(attribute) is None
