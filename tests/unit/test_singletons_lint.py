from __future__ import annotations

from pathlib import Path

from linting.no_runtime_singletons import main, collect_violations


def _write(tmp_path: Path, source: str) -> Path:
    package = tmp_path / "pkg"
    package.mkdir(exist_ok=True)
    target = package / "routes.py"
    target.write_text(source, encoding="utf-8")
    return target


def test_flags_lazy_provider_global(tmp_path: Path) -> None:
    target = _write(
        tmp_path,
        "_provider = None\n\n"
        "def get_provider():\n"
        "    global _provider\n"
        "    if _provider is None:\n"
        "        _provider = object()\n"
        "    return _provider\n",
    )

    violations = collect_violations(target, tmp_path)

    assert any("lazy module-global client: _provider" in v for v in violations)
    assert any("get_provider" in v for v in violations)
    assert any("global _provider" in v for v in violations)


def test_plain_constants_pass(tmp_path: Path) -> None:
    target = _write(tmp_path, "DEFAULT_TIMEOUT = None\nlogger = None\n_DONE = object()\n")
    assert collect_violations(target, tmp_path) == []


def test_repository_is_clean() -> None:
    assert main() == 0
