"""File-producing build steps.

Every step takes a :class:`BuildConfig` and returns the list of files it
wrote. Compilation and minification are delegated to libsass and jsmin.
"""

import shutil
from pathlib import Path

import sass
from jsmin import jsmin

from .config import BuildConfig
from .errors import BuildError
from .html import resolve_includes
from .sources import output_path, resolve_sources
from .svg.sprite import build_sprite
from .svg.utils import read_fragments, save_svg_file

MIN_SUFFIX = ".min"
LIBS_BUNDLE = "libs.js"


def _write_text(path: Path, content: str) -> Path:
    """Write UTF-8 text, creating parent directories; return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _copy_sources(config: BuildConfig, patterns: list[str], dest: str) -> list[Path]:
    """Copy files matched by ``patterns`` into ``dest``, keeping relative paths."""
    written = []
    for source, relative in resolve_sources(config.root, patterns):
        target = config.resolve(dest) / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)
        written.append(target)
    return written


def compile_styles(config: BuildConfig) -> list[Path]:
    """Compile top-level SCSS files to ``NAME.min.css``.

    Partials (``_name.scss``) are only compiled through imports. Source
    maps are written alongside in development mode.
    """
    dest = config.resolve(config.paths.build.style)
    written = []
    for source, relative in resolve_sources(config.root, config.paths.src.style):
        if source.name.startswith("_"):
            continue

        target = output_path(dest, relative.with_suffix(".css"), MIN_SUFFIX)
        map_target = target.with_name(target.name + ".map")
        try:
            if config.is_production:
                css = sass.compile(filename=str(source), output_style="compressed")
                source_map = None
            else:
                css, source_map = sass.compile(
                    filename=str(source),
                    output_style="compressed",
                    source_map_filename=str(map_target),
                    output_filename_hint=str(target),
                )
        except sass.CompileError as e:
            raise BuildError(str(e), task="styles") from e

        written.append(_write_text(target, css))
        if source_map is not None:
            written.append(_write_text(map_target, source_map))
    return written


def minify_javascript(config: BuildConfig) -> list[Path]:
    """Minify each script to ``NAME.min.js``, keeping relative paths."""
    dest = config.resolve(config.paths.build.js)
    written = []
    for source, relative in resolve_sources(config.root, config.paths.src.js):
        minified = jsmin(source.read_text(encoding="utf-8"))
        written.append(_write_text(output_path(dest, relative, MIN_SUFFIX), minified))
    return written


def bundle_js_libs(config: BuildConfig) -> list[Path]:
    """Concatenate third-party libraries in order and minify to ``libs.min.js``."""
    chunks = []
    for lib in config.js_libs:
        path = config.resolve(lib)
        if not path.is_file():
            raise BuildError(f"Library not found: {lib}", task="js-libs")
        chunks.append(path.read_text(encoding="utf-8"))

    bundle = jsmin("\n;\n".join(chunks))
    target = output_path(config.resolve(config.paths.build.js), Path(LIBS_BUNDLE), MIN_SUFFIX)
    return [_write_text(target, bundle)]


def render_html(config: BuildConfig) -> list[Path]:
    """Expand includes in the HTML entry file and write it to the build root."""
    source = config.resolve(config.paths.src.html)
    if not source.is_file():
        raise BuildError(f"HTML entry not found: {config.paths.src.html}", task="html")
    try:
        content = resolve_includes(source)
    except BuildError as e:
        raise BuildError(str(e), task="html") from e
    return [_write_text(config.resolve(config.paths.build.html) / source.name, content)]


def copy_images(config: BuildConfig) -> list[Path]:
    """Copy images into the build tree unchanged."""
    return _copy_sources(config, config.paths.src.img, config.paths.build.img)


def copy_fonts(config: BuildConfig) -> list[Path]:
    """Copy font files into the build tree."""
    return _copy_sources(config, config.paths.src.fonts, config.paths.build.fonts)


def write_svg_sprite(config: BuildConfig) -> list[Path]:
    """Namespace sprite fragments and write the symbol sprite document."""
    paths = [path for path, _ in resolve_sources(config.root, config.paths.src.svg_sprite)]
    sprite = build_sprite(read_fragments(paths))

    target_cfg = config.paths.build.svg_sprite
    target = config.resolve(target_cfg.folder) / target_cfg.file
    save_svg_file(target, sprite.render())
    return [target]
