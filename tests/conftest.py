"""Shared fixtures for asset_build tests."""

from pathlib import Path

import pytest

from asset_build.config import BuildConfig


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path):
    """A minimal project tree laid out like the default path table."""
    write(tmp_path / "src/scss/main.scss", "$c: #fff;\n@import 'vars';\nbody { color: $c; }\n")
    write(tmp_path / "src/scss/_vars.scss", "$unused: 1px;\n")
    write(tmp_path / "src/js/app.js", "// comment\nfunction add(a, b) {\n    return a + b;\n}\n")
    write(tmp_path / "src/js/lib/util.js", "var x = 1;\n")
    write(tmp_path / "src/index.html", "<body>\n  //= parts/header.html\n</body>\n")
    write(tmp_path / "src/parts/header.html", "<header>Hi</header>\n")
    write(tmp_path / "src/img/photos/a.png", "png")
    write(
        tmp_path / "src/img/svg-sprite/arrow.svg",
        '<svg viewBox="0 0 10 10"><path id="p" fill="url(#g)"/></svg>',
    )
    write(
        tmp_path / "src/img/svg-sprite/close.svg",
        '<svg viewBox="0 0 20 20"><path id="p"/></svg>',
    )
    write(tmp_path / "src/fonts/sans.woff", "woff")
    write(tmp_path / "src/fonts/sans.woff2", "woff2")
    write(tmp_path / "src/fonts/sans.ttf", "ttf")
    write(tmp_path / "node_modules/jquery/dist/jquery.js", "var jq = 1;\n")
    write(tmp_path / "node_modules/materialize-css/dist/js/materialize.js", "var mz = 2;\n")
    return tmp_path


@pytest.fixture
def config(project):
    return BuildConfig(root=project)
