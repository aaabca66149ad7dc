from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config.load import load_config, resolve_rules
from .errors import PropOrderingUserError
from .filtering.fs import collect_files, read_text
from .jsonic import dumps as jdumps
from .linter import Linter
from .report import FileReport, file_report, format_text, run_report
from .rules import get_rule_class, list_rules
from .version import tool_version

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="prop-ordering",
        description="Property ordering linter for TypeScript/JavaScript (component props, JSX props, type members)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared arguments of check/fix
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("paths", nargs="*", metavar="PATH", help="files or directories (default: .)")
        sp.add_argument("--config", metavar="FILE", help="config file (default: prop-ordering.yaml in the current directory)")
        sp.add_argument("--format", choices=["text", "json"], default="text", help="report format")

    sp_check = sub.add_parser("check", help="report out-of-order field lists")
    add_common(sp_check)

    sp_fix = sub.add_parser("fix", help="reorder field lists in place")
    add_common(sp_fix)
    sp_fix.add_argument(
        "--dry-run",
        action="store_true",
        help="print the fixed text of changed files instead of writing them",
    )

    sub.add_parser("rules", help="built-in rules (JSON)")
    return p


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    pkg_logger = logging.getLogger("prop_ordering")
    pkg_logger.handlers[:] = [handler]
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _run(ns: argparse.Namespace, root: Path) -> int:
    config = load_config(root, Path(ns.config) if ns.config else None)
    linter = Linter(resolve_rules(config))
    targets = [Path(p) for p in (ns.paths or ["."])]
    files = collect_files(root, targets, extensions=config.normalized_extensions(), exclude=config.exclude)
    logger.debug("%d file(s) to lint", len(files))

    fixing = ns.cmd == "fix"
    dry_run = fixing and bool(getattr(ns, "dry_run", False))
    reports: List[FileReport] = []
    fixed_texts: List[Tuple[str, str]] = []
    read_failed = False

    for path in files:
        rel = _display_path(path, root)
        try:
            text = read_text(path)
        except PropOrderingUserError as e:
            # reported, file skipped, exit code 2 at the end
            read_failed = True
            reports.append(FileReport(path=rel, read_error=str(e)))
            continue

        if not fixing:
            violations = linter.lint_text(text, path.suffix, rel)
            reports.append(file_report(rel, violations, text))
            continue

        result = linter.fix_text(text, path.suffix, rel)
        if result.changed:
            if dry_run:
                fixed_texts.append((rel, result.text))
            else:
                path.write_text(result.text, encoding="utf-8")
                logger.debug("%s: written (%d fix(es))", rel, result.fixed_count)
        reports.append(file_report(rel, result.remaining, result.text, fixed_count=result.fixed_count))

    report = run_report(reports, tool_version())

    if ns.format == "json":
        sys.stdout.write(jdumps(report.model_dump(mode="json")))
    elif dry_run:
        # stdout carries the fixed sources; the report goes to stderr
        for rel, fixed in fixed_texts:
            sys.stdout.write(f"==> {rel} <==\n")
            sys.stdout.write(fixed if fixed.endswith("\n") else fixed + "\n")
        sys.stderr.write(format_text(report))
    else:
        sys.stdout.write(format_text(report))

    if read_failed:
        return 2
    return 1 if report.error_count else 0


def _rules_listing() -> list:
    data = []
    for name in list_rules():
        cls = get_rule_class(name)
        data.append({
            "name": name,
            "description": cls.description,
            "fixable": cls.fixable,
            "node_types": sorted(cls.shape.node_types),
            "default_options": cls.default_options(),
        })
    return data


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(ns.verbose))

    try:
        if ns.cmd in ("check", "fix"):
            return _run(ns, Path.cwd())

        if ns.cmd == "rules":
            sys.stdout.write(jdumps({"rules": _rules_listing()}))
            return 0

    except PropOrderingUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
