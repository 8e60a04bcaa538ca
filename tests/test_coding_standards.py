"""
Tests that enforce coding standards.

These tests verify that the codebase follows our import and logging
conventions.
"""

import pathlib as _pathlib
import re as _re

import pytest as _pytest

# Directories to check
SRC_DIR = _pathlib.Path(__file__).parent.parent / "src" / "logconverter"
TESTS_DIR = _pathlib.Path(__file__).parent.parent / "tests"

_LOGGER_PATTERN = _re.compile(r"getLogger\((?P<arg>[^)]*)\)")


def _get_python_files(directory: _pathlib.Path) -> list[_pathlib.Path]:
    """Get all Python files in a directory, recursively."""
    return sorted(directory.rglob("*.py"))


def _is_init_file(path: _pathlib.Path) -> bool:
    return path.name == "__init__.py"


def _extract_imports(content: str) -> list[tuple[int, str]]:
    """
    Extract 'from X import Y' statements from file content.

    Returns list of (line_number, line_content) tuples.
    Excludes:
    - 'from __future__ import' (allowed)
    - Lines inside TYPE_CHECKING blocks (allowed)
    """
    imports: list[tuple[int, str]] = []
    in_type_checking = False

    for i, line in enumerate(content.split("\n"), start=1):
        stripped = line.strip()

        if "if TYPE_CHECKING:" in line or "if _typing.TYPE_CHECKING:" in line:
            in_type_checking = True
            continue

        # Block ends at the first non-indented code line
        if in_type_checking and stripped and not stripped.startswith("#") and not line[0].isspace():
            in_type_checking = False

        if in_type_checking:
            continue

        if stripped.startswith("from ") and " import " in stripped:
            if "from __future__ import" in stripped:
                continue
            imports.append((i, stripped))

    return imports


def _import_violations(paths: list[_pathlib.Path]) -> list[str]:
    violations: list[str] = []
    for path in paths:
        # __init__.py re-exports are allowed
        if _is_init_file(path) or path.name == "test_coding_standards.py":
            continue
        for line_num, line in _extract_imports(path.read_text(encoding="utf-8")):
            violations.append(f"{path}:{line_num}: {line}")
    return violations


class TestImportStyle:
    """Tests for import style compliance."""

    @_pytest.mark.parametrize("directory", [SRC_DIR, TESTS_DIR], ids=["src", "tests"])
    def test_no_from_imports(self, directory: _pathlib.Path) -> None:
        """Modules use 'import X as _x' rather than 'from X import Y'."""
        violations = _import_violations(_get_python_files(directory))
        if violations:
            msg = "Found forbidden 'from X import Y' imports:\n"
            msg += "\n".join(f"  {v}" for v in violations)
            msg += "\n\nUse 'import X as _x' (external) or 'import X as x' (internal) instead."
            _pytest.fail(msg)


class TestLoggingStyle:
    """Library modules log through module-level loggers only."""

    def test_loggers_are_named_after_module(self) -> None:
        """Every getLogger() call in the package uses __name__."""
        violations: list[str] = []
        for path in _get_python_files(SRC_DIR):
            for match in _LOGGER_PATTERN.finditer(path.read_text(encoding="utf-8")):
                if match["arg"].strip() != "__name__":
                    violations.append(f"{path}: getLogger({match['arg']})")
        assert violations == []

    def test_library_does_not_print(self) -> None:
        """Only the CLI writes to the terminal."""
        offenders = [
            path
            for path in _get_python_files(SRC_DIR)
            if "cli" not in path.relative_to(SRC_DIR).parts
            and _re.search(r"^\s*print\(", path.read_text(encoding="utf-8"), _re.MULTILINE)
        ]
        assert offenders == []


class TestImportExtraction:
    """Tests for the import extraction logic itself."""

    def test_detects_from_import(self) -> None:
        imports = _extract_imports("from pathlib import Path")
        assert imports == [(1, "from pathlib import Path")]

    def test_allows_future_imports(self) -> None:
        assert _extract_imports("from __future__ import annotations") == []

    def test_ignores_type_checking_block(self) -> None:
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from some_module import SomeType

def foo():
    pass
"""
        assert _extract_imports(content) == []

    def test_detects_import_after_type_checking(self) -> None:
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from allowed import Type

from forbidden import Other
"""
        imports = _extract_imports(content)
        assert len(imports) == 1
        assert "from forbidden import Other" in imports[0][1]
