#!/usr/bin/env python
"""Reject lazily-initialized module-global clients in runtime Python modules.

Provider clients and stores live on the runtime deps object built at startup.
A module-level `_provider = None` filled in on first use, or a function that
rebinds module state through `global`, hides that lifecycle from tests.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "parley"

SINGLETON_CLASS_SUFFIX = "Singleton"
SINGLETON_FN_NAMES = {"get_instance", "reset_instance", "get_provider", "get_client"}
LAZY_NAME_SUFFIXES = ("_instance", "_provider", "_client", "_store", "_limiter")


def _top_level_targets(node: ast.Assign | ast.AnnAssign) -> list[str]:
    if isinstance(node, ast.AnnAssign):
        return [node.target.id] if isinstance(node.target, ast.Name) else []
    return [target.id for target in node.targets if isinstance(target, ast.Name)]


def _is_lazy_global(node: ast.Assign | ast.AnnAssign) -> bool:
    value = node.value
    if not (isinstance(value, ast.Constant) and value.value is None):
        return False
    names = [name.lower().lstrip("_") for name in _top_level_targets(node)]
    return any(name in {"provider", "client", "instance"} or name.endswith(LAZY_NAME_SUFFIXES) for name in names)


def _global_rebinds(tree: ast.Module) -> list[tuple[int, str]]:
    found: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            for inner in ast.walk(node):
                if isinstance(inner, ast.Global):
                    found.append((inner.lineno, f"{node.name}: global {', '.join(inner.names)}"))
    return found


def collect_violations(filepath: Path, root: Path = ROOT) -> list[str]:
    try:
        source = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []

    try:
        tree = ast.parse(source, filename=str(filepath))
    except SyntaxError:
        return []

    violations: list[str] = []
    rel = filepath.relative_to(root)

    for node in tree.body:
        if isinstance(node, ast.ClassDef) and node.name.endswith(SINGLETON_CLASS_SUFFIX):
            violations.append(f"  {rel}:{node.lineno} class `{node.name}` uses singleton naming")
            continue
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)) and node.name in SINGLETON_FN_NAMES:
            violations.append(f"  {rel}:{node.lineno} function `{node.name}` suggests singleton lifecycle")
            continue
        if isinstance(node, (ast.Assign, ast.AnnAssign)) and _is_lazy_global(node):
            names = ", ".join(_top_level_targets(node))
            violations.append(f"  {rel}:{node.lineno} lazy module-global client: {names}")

    for lineno, detail in _global_rebinds(tree):
        violations.append(f"  {rel}:{lineno} module state rebound at runtime ({detail})")

    return violations


def main(src_dir: Path = SRC_DIR) -> int:
    if not src_dir.is_dir():
        print(f"[no-runtime-singletons] Missing source directory: {src_dir}", file=sys.stderr)
        return 1

    violations: list[str] = []
    for py_file in sorted(src_dir.rglob("*.py")):
        if "__pycache__" in py_file.parts:
            continue
        violations.extend(collect_violations(py_file, src_dir.parent))

    if not violations:
        return 0

    print("Runtime singleton pattern violations:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
