from __future__ import annotations

from pathlib import Path
import re

import alikekit
import alikepack

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _project_field(name: str) -> str:
    content = PYPROJECT.read_text(encoding="utf-8")
    match = re.search(rf'(?m)^{name}\s*=\s*"([^"]+)"\s*$', content)
    assert match is not None, f"pyproject.toml has no [project].{name}"
    return match.group(1)


def test_package_metadata_matches_runtime() -> None:
    assert _project_field("name") == alikekit.__name__
    assert _project_field("version") == alikekit.__version__


def test_declared_packages_are_importable_from_the_checkout() -> None:
    root = PYPROJECT.parent
    for module in (alikekit, alikepack):
        assert Path(module.__file__).resolve().parent == root / module.__name__
    assert '"rich>=' in PYPROJECT.read_text(encoding="utf-8")
