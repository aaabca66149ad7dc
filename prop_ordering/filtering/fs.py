from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set

import pathspec

from ..errors import PropOrderingUserError


def read_text(path: Path) -> str:
    """
    Read a source file as UTF-8.

    Raises:
        PropOrderingUserError: If the file cannot be read or decoded
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PropOrderingUserError(f"Cannot read {path}: {e}") from e


def build_ignore_spec(root: Path, extra_patterns: Sequence[str] = ()) -> Optional[pathspec.PathSpec]:
    """
    Build PathSpec from the root .gitignore plus extra patterns.
    Return None if there is nothing to ignore.
    """
    lines: List[str] = []
    gitignore = root / ".gitignore"
    if gitignore.is_file():
        for ln in gitignore.read_text(encoding="utf-8", errors="ignore").splitlines():
            ln = ln.strip()
            if ln and not ln.startswith("#"):
                lines.append(ln)
    lines.extend(p for p in extra_patterns if p.strip())
    if not lines:
        return None
    return pathspec.PathSpec.from_lines(pathspec.patterns.GitWildMatchPattern, lines)


def iter_files(
    root: Path,
    *,
    extensions: Set[str],
    spec_ignore: Optional[pathspec.PathSpec],
    start: Optional[Path] = None,
) -> Iterable[Path]:
    """
    Recursive file iterator with ignore-pattern support and directory pruning.
    Walks ``start`` (default: ``root``); patterns are matched relative to ``root``.
    Yields files in a stable (sorted) order.
    """
    root = root.resolve()
    start = start.resolve() if start is not None else root
    if start != root and root not in start.parents:
        # walking outside the project: patterns apply relative to the walked directory
        root = start
    for dirpath, dirnames, filenames in os.walk(start):
        # Do not enter .git or node_modules
        keep: List[str] = []
        for d in sorted(dirnames):
            if d in (".git", "node_modules"):
                continue
            rel_dir = Path(dirpath, d).relative_to(root).as_posix()
            # an ignore pattern can hide a branch completely
            if spec_ignore and spec_ignore.match_file(rel_dir + "/"):
                continue
            keep.append(d)
        dirnames[:] = keep

        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            if p.suffix.lower() not in extensions:
                continue
            rel_posix = p.relative_to(root).as_posix()
            if spec_ignore and spec_ignore.match_file(rel_posix):
                continue
            yield p


def collect_files(
    root: Path,
    targets: Sequence[Path],
    *,
    extensions: Set[str],
    exclude: Sequence[str] = (),
) -> List[Path]:
    """
    Expand CLI targets into files. Directories are walked with ignore
    patterns; explicit files only need a configured extension.

    Raises:
        PropOrderingUserError: If a target does not exist
    """
    spec_ignore = build_ignore_spec(root, exclude)
    files: List[Path] = []
    seen: Set[Path] = set()
    for target in targets:
        path = target if target.is_absolute() else root / target
        if path.is_dir():
            found: Iterable[Path] = iter_files(root, extensions=extensions, spec_ignore=spec_ignore, start=path)
        elif path.is_file():
            found = [path] if path.suffix.lower() in extensions else []
        else:
            raise PropOrderingUserError(f"No such file or directory: {target}")
        for p in found:
            resolved = p.resolve()
            if resolved not in seen:
                seen.add(resolved)
                files.append(p)
    return files


__all__ = ["read_text", "build_ignore_spec", "iter_files", "collect_files"]
