"""Guard checkers for repository standards.

Each checker exposes ``check(path, text, tree) -> list[str]`` and a
``run(roots: list[str]) -> int`` wrapper that returns non-zero on violations.
"""
