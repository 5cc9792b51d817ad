from __future__ import annotations

import ast
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

Checker = Callable[[Path, str, ast.Module], list[str]]


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if not base.exists():
            continue
        if base.is_file():
            yield base
            continue
        yield from sorted(base.rglob("*.py"))


def parse(path: Path) -> tuple[str, ast.Module]:
    try:
        text = path.read_text(encoding="utf-8")
        tree = ast.parse(text, filename=str(path))
    except (OSError, SyntaxError, ValueError) as exc:
        # Surface parse errors explicitly and re-raise to fail the check
        sys.stderr.write(f"{path}: PARSE_ERROR {exc}\n")
        raise
    return text, tree


def run_checker(check: Checker, roots: list[str]) -> int:
    errors: list[str] = []
    for path in iter_python_files(roots):
        text, tree = parse(path)
        errors.extend(check(path, text, tree))
    if errors:
        sys.stderr.write("\n".join(errors) + "\n")
        return 1
    return 0
