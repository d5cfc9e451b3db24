#!/usr/bin/env python3
"""
Demo: Lint and fix a small JSX component.

Shows the full pipeline: parse → classify → decompose → canonicalize.
"""

from clsxlint import RuleEngine, decompose, canonicalize, parse_expression, fix_source
from clsxlint.serialization import expr_to_dict

COMPONENT = """\
export function Button({ size, isActive, isAdmin, extra }) {
  return (
    <button
      className={`btn ${size === 'lg' ? 'btn-lg' : ''} ${extra}`}
      title="static"
    >
      <span className={isActive ? 'on' : 'off'}>x</span>
      <span className={'role ' + (isAdmin ? 'admin' : null)}>y</span>
      <span className={clsx('already', isActive && 'fine')}>z</span>
    </button>
  );
}
"""


def main():
    print("=" * 80)
    print("CLSXLINT DEMO")
    print("=" * 80)

    # One expression, step by step
    expr = parse_expression("`base ${isActive ? 'active' : ''}`")
    print("\nExpression tree:")
    print(expr_to_dict(expr))
    fragments = decompose(expr)
    print("\nFragments:")
    for fragment in fragments:
        print(f"  {fragment}")
    print(f"\nCanonical call: {canonicalize(fragments)}")

    # A whole component
    print("\n" + "-" * 80)
    result = RuleEngine().lint(COMPONENT, path="Button.jsx")
    for d in result.diagnostics:
        print(f"{result.path}:{d.position.line}:{d.position.column}: {d.message}")
        print(f"    suggested: {d.fix.replacement}")

    fixed, after = fix_source(COMPONENT, path="Button.jsx")
    print("\nFixed source:")
    print(fixed)
    print(f"Remaining problems: {len(after.diagnostics)}")
    print("=" * 80)


if __name__ == "__main__":
    main()
