"""
Command-line front end.

Usage:
    clsxlint src/                      # report, show suggested rewrites
    clsxlint --fix src/                # rewrite files in place
    clsxlint --report-only src/        # report only, no rewrites computed
    clsxlint --format json src/        # machine-readable report

Exit status:
    0  no remaining problems
    1  problems remain
    2  usage, configuration or I/O error
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional

from clsxlint import __version__
from clsxlint.config import LintConfig, Mode, find_config_file, load_config
from clsxlint.engine import LintResult, RuleEngine, fix_source
from clsxlint.errors import ConfigError
from clsxlint.serialization import results_to_json, results_to_yaml

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = {".jsx", ".tsx", ".js", ".ts"}
SKIP_DIRECTORIES = {"node_modules"}


def iter_source_files(paths: List[str]) -> Iterator[Path]:
    """Yield files named on the command line and sources found under directories."""
    for name in paths:
        path = Path(name)
        if not path.is_dir():
            yield path
            continue
        for candidate in sorted(path.rglob("*")):
            relative = candidate.relative_to(path).parts
            if any(part in SKIP_DIRECTORIES or part.startswith(".") for part in relative[:-1]):
                continue
            if candidate.is_file() and candidate.suffix in SOURCE_SUFFIXES:
                yield candidate


def resolve_config(args: argparse.Namespace) -> LintConfig:
    """Defaults → YAML file → command-line flags."""
    config_path = args.config or find_config_file(Path.cwd())
    config = load_config(config_path) if config_path else LintConfig()
    if config_path:
        logger.debug("Loaded configuration from %s", config_path)
    mode = Mode.REPORT_ONLY if args.report_only else (Mode.FIX if args.fix else None)
    return config.with_overrides(attribute=args.attribute, composer=args.composer, mode=mode)


def format_text(results: List[LintResult], fixing: bool) -> str:
    lines = []
    problems = fixable = 0
    for result in results:
        for d in result.diagnostics:
            lines.append(f"{result.path}:{d.position.line}:{d.position.column}: {d.message} [{d.rule_id}]")
            if d.fix is not None and not fixing:
                lines.append(f"    suggested: {d.fix.replacement}")
                fixable += 1
            problems += 1
        for error in result.errors:
            lines.append(f"{error} [error]")
    if problems:
        summary = f"{problems} problem(s)"
        if fixable:
            summary += f" ({fixable} fixable with --fix)"
        lines.append(summary)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clsxlint",
        description="Flag hand-built className strings and rewrite them as clsx() calls.",
    )
    parser.add_argument("paths", nargs="+", help="Files or directories to lint")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--fix", action="store_true", help="Rewrite flagged attributes in place")
    mode.add_argument("--report-only", action="store_true", help="Report without computing rewrites")
    parser.add_argument("--attribute", help="Attribute to inspect (default: className)")
    parser.add_argument("--composer", help="Composer function name (default: clsx)")
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--format", choices=["text", "json", "yaml"], default="text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    logging.captureWarnings(True)

    try:
        config = resolve_config(args)
    except ConfigError as e:
        print(f"clsxlint: {e}", file=sys.stderr)
        return 2

    engine = RuleEngine(config)
    results: List[LintResult] = []
    io_error = False

    for path in iter_source_files(args.paths):
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"clsxlint: cannot read {path}: {e}", file=sys.stderr)
            io_error = True
            continue

        if args.fix:
            fixed, result = fix_source(source, config, path=str(path))
            if fixed != source:
                try:
                    path.write_text(fixed, encoding="utf-8")
                except OSError as e:
                    print(f"clsxlint: cannot write {path}: {e}", file=sys.stderr)
                    io_error = True
                    continue
                logger.info("Fixed %s", path)
        else:
            result = engine.lint(source, path=str(path))
        results.append(result)

    if args.format == "json":
        print(results_to_json(results))
    elif args.format == "yaml":
        print(results_to_yaml(results), end="")
    else:
        text = format_text(results, fixing=args.fix)
        if text:
            print(text)

    if io_error:
        return 2
    return 1 if any(r.has_issues() for r in results) else 0


if __name__ == "__main__":
    sys.exit(main())
