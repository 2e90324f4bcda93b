# tests/test_architecture_contracts.py
"""
Architecture contract tests for django-dive-progress.

These tests enforce structural invariants that unit tests don't catch:
- The analysis engine stays framework free (no Django imports)
- Version consistency (__init__.py vs pyproject.toml)
- AUTH_USER_MODEL usage (not direct User imports)
- ForeignKey on_delete patterns on student data
- Package __init__.py files import no models (prevent AppRegistryNotReady)
"""
from __future__ import annotations

import ast
import re
from pathlib import Path
from typing import List, Set

ROOT_DIR = Path(__file__).parent.parent
PACKAGE_DIR = ROOT_DIR / "src" / "django_dive_progress"
ANALYSIS_DIR = PACKAGE_DIR / "analysis"


def python_files(directory: Path) -> List[Path]:
    """All .py files under a directory, migrations excluded."""
    return sorted(
        p for p in directory.rglob("*.py") if "migrations" not in p.parts
    )


def get_imports_from_file(path: Path) -> Set[str]:
    """Extract absolute import targets from a Python file."""
    tree = ast.parse(path.read_text())
    imports = set()

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.add(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module and node.level == 0:
                imports.add(node.module)

    return imports


def get_relative_imports_from_file(path: Path) -> Set[str]:
    """Extract relative import targets as '<dots><module>' strings."""
    tree = ast.parse(path.read_text())
    imports = set()

    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.level > 0:
            imports.add("." * node.level + (node.module or ""))

    return imports


# -----------------------------
# 1) Engine layering
# -----------------------------

def test_analysis_does_not_import_django():
    """The scoring engine must run without Django configured."""
    violations = []

    for path in python_files(ANALYSIS_DIR):
        for name in get_imports_from_file(path):
            if name == "django" or name.startswith("django."):
                violations.append(f"{path.name}: imports {name}")

    assert not violations, (
        "analysis/ must stay framework free:\n" + "\n".join(violations)
    )


def test_analysis_only_reaches_up_to_exceptions():
    """analysis/ may import from the parent package only for exceptions."""
    violations = []

    for path in python_files(ANALYSIS_DIR):
        for target in get_relative_imports_from_file(path):
            if target.startswith("..") and target != "..exceptions":
                violations.append(f"{path.name}: from {target} import ...")

    assert not violations, (
        "analysis/ imports outside its layer:\n" + "\n".join(violations)
    )


def test_exceptions_module_has_no_dependencies():
    """exceptions.py is imported by every layer and must import nothing."""
    path = PACKAGE_DIR / "exceptions.py"

    assert not get_imports_from_file(path)
    assert not get_relative_imports_from_file(path)


# -----------------------------
# 2) Version consistency
# -----------------------------

def test_version_matches_pyproject():
    """__version__ in __init__.py must match pyproject.toml."""
    pyproject = (ROOT_DIR / "pyproject.toml").read_text()
    init_source = (PACKAGE_DIR / "__init__.py").read_text()

    pyproject_match = re.search(r'^version\s*=\s*"([^"]+)"', pyproject, re.MULTILINE)
    init_match = re.search(r'__version__\s*=\s*"([^"]+)"', init_source)

    assert pyproject_match, "No version in pyproject.toml"
    assert init_match, "No __version__ in __init__.py"
    assert pyproject_match.group(1) == init_match.group(1)


# -----------------------------
# 3) AUTH_USER_MODEL usage
# -----------------------------

def test_no_direct_user_model_imports():
    """Students and instructors must go through settings.AUTH_USER_MODEL."""
    violations = []

    for path in python_files(PACKAGE_DIR):
        source = path.read_text()
        if "from django.contrib.auth.models import User" in source:
            violations.append(path.relative_to(PACKAGE_DIR).as_posix())

    assert not violations, (
        "Direct User imports found:\n" + "\n".join(violations)
    )


# -----------------------------
# 4) ForeignKey on_delete patterns
# -----------------------------

def test_student_foreign_keys_protect_history():
    """
    Dive logs and medical records keep their student with PROTECT.

    CASCADE on a student FK would silently drop the dive history the
    progress analysis is computed from.
    """
    models_py = PACKAGE_DIR / "models.py"
    tree = ast.parse(models_py.read_text())
    violations = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.Assign):
            continue
        target = node.targets[0]
        if not (isinstance(target, ast.Name) and target.id == "student"):
            continue
        call = node.value
        for keyword in getattr(call, "keywords", []):
            if keyword.arg == "on_delete" and ast.unparse(keyword.value) != "models.PROTECT":
                violations.append(f"models.py:{node.lineno}: {ast.unparse(keyword.value)}")

    assert not violations, (
        "Student ForeignKeys should use PROTECT:\n" + "\n".join(violations)
    )


# -----------------------------
# 5) No model imports in __init__.py
# -----------------------------

def test_init_files_do_not_import_models():
    """
    Importing models from a package __init__.py raises AppRegistryNotReady
    when the package is imported before Django apps are loaded.
    """
    violations = []

    for path in PACKAGE_DIR.rglob("__init__.py"):
        if "migrations" in path.parts:
            continue
        for target in get_relative_imports_from_file(path) | get_imports_from_file(path):
            if target.endswith("models") or target.startswith("django"):
                violations.append(f"{path.relative_to(PACKAGE_DIR).as_posix()}: {target}")

    assert not violations, (
        "__init__.py files must not import models:\n" + "\n".join(violations)
    )
