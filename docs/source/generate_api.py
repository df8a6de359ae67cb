#!/usr/bin/env python3
"""Generate the API reference pages of PySATL Calc.

Every package under ``src/pysatl_calc`` gets an ``index.rst`` holding a toctree
of its subpackages and modules; every module gets a page with ``automodule``.
The distribution builtins are grouped the same way as in the package, so
``builtins/discrete`` and ``builtins/continuous`` become separate sections.

Run:
    python docs/source/generate_api.py
"""

from __future__ import annotations

import shutil
from pathlib import Path

DOCS_SOURCE = Path(__file__).resolve().parent
SRC_ROOT = DOCS_SOURCE.parents[1] / "src"
PKG_NAME = "pysatl_calc"
API_ROOT = DOCS_SOURCE / "api"


def _dotted(path: Path) -> str:
    return ".".join(path.relative_to(SRC_ROOT).with_suffix("").parts)


def _heading(title: str) -> list[str]:
    return [title, "=" * len(title), ""]


def _package_page(package: Path) -> str:
    subpackages = sorted(p for p in package.iterdir() if (p / "__init__.py").is_file())
    modules = sorted(p for p in package.glob("*.py") if p.name != "__init__.py")
    title = PKG_NAME if package.name == PKG_NAME else package.name
    lines = _heading(title) + [f".. automodule:: {_dotted(package)}", "   :no-index:", ""]
    if subpackages or modules:
        lines += [".. toctree::", "   :maxdepth: 2", ""]
        lines += [f"   {p.name}/index" for p in subpackages]
        lines += [f"   {p.stem}" for p in modules]
        lines.append("")
    return "\n".join(lines)


def _module_page(module: Path) -> str:
    lines = _heading(module.stem) + [f".. automodule:: {_dotted(module)}", "   :members:", ""]
    return "\n".join(lines)


def main() -> None:
    package_root = SRC_ROOT / PKG_NAME
    out_root = API_ROOT / PKG_NAME
    if out_root.exists():
        shutil.rmtree(out_root)

    for init in sorted(package_root.rglob("__init__.py")):
        package = init.parent
        out_dir = out_root / package.relative_to(package_root)
        out_dir.mkdir(parents=True, exist_ok=True)
        (out_dir / "index.rst").write_text(_package_page(package), encoding="utf-8")
        for module in package.glob("*.py"):
            if module.name == "__init__.py":
                continue
            (out_dir / f"{module.stem}.rst").write_text(_module_page(module), encoding="utf-8")

    api_index = _heading("API Reference") + [
        ".. toctree::",
        "   :maxdepth: 1",
        "",
        f"   {PKG_NAME}/index",
        "",
    ]
    (API_ROOT / "index.rst").write_text("\n".join(api_index), encoding="utf-8")


if __name__ == "__main__":
    main()
