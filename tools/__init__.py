"""Internal tooling for repository guard checks.

Enforced across the library, tests and scripts:
- No use of typing.Any or casts
- No "type: ignore" comments
- No bare except, and every handler re-raises
- No print; use contract.logging instead
"""
