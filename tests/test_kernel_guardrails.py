"""Tripwire test: kernel modules stay pure.

Sanitisation and rendering are pure functions of their input. This test
scans the installed package source and fails if a kernel module touches
files, the environment, or global logging configuration.
"""

import re
from pathlib import Path

import typefirst

FORBIDDEN = [
    (r"\bopen\(", "file access"),
    (r"\bos\.environ\b", "environment access"),
    (r"\bsys\.path\b", "sys.path manipulation"),
    (r"logging\.basicConfig", "global logging configuration"),
    (r"\bthreading\b", "threading"),
]


def _kernel_files():
    pkg_dir = Path(typefirst.__file__).parent
    return sorted(
        p for p in pkg_dir.rglob("*.py")
        if "__pycache__" not in p.parts
    )


def test_no_forbidden_tokens():
    violations = []
    for py_file in _kernel_files():
        for line_num, line in enumerate(py_file.read_text(encoding="utf-8").splitlines(), 1):
            if line.strip().startswith("#"):
                continue
            for pattern, description in FORBIDDEN:
                if re.search(pattern, line):
                    violations.append(f"{py_file.name}:{line_num}: {description} - {line.strip()}")

    if violations:
        msg = "Forbidden tokens found in typefirst package:\n"
        msg += "\n".join(f"  - {v}" for v in violations)
        raise AssertionError(msg)


def test_module_loggers_have_no_handlers():
    """Library loggers never install handlers of their own."""
    import logging
    import typefirst.api  # noqa: F401
    import typefirst.kernel.generic  # noqa: F401
    import typefirst.kernel.reducer  # noqa: F401
    import typefirst.kernel.sanitised  # noqa: F401

    for name in (
        "typefirst.api",
        "typefirst.kernel.generic",
        "typefirst.kernel.reducer",
        "typefirst.kernel.sanitised",
    ):
        assert logging.getLogger(name).handlers == []
