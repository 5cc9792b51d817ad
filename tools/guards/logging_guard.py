from __future__ import annotations

import ast
import sys
from pathlib import Path

from tools.guards._scan import run_checker


def check(path: Path, text: str, tree: ast.Module) -> list[str]:
    return [
        f"{path}:{n.lineno} use logger; 'print' is forbidden"
        for n in ast.walk(tree)
        if (
            isinstance(n, ast.Call)
            and isinstance(n.func, ast.Name)
            and n.func.id == "print"
        )
    ]


def run(roots: list[str]) -> int:
    return run_checker(check, roots)


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
