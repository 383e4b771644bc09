"""Invoke task collection and the ordered build pipeline.

Tasks read the :class:`BuildConfig` from the invoke context
(``c.config.asset_build.build``) and delegate to :mod:`.steps`.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Sequence

from invoke import Collection, Config, Context, task

from . import steps
from .config import BuildConfig
from .errors import BuildError


def make_context(config: BuildConfig) -> Context:
    """Create an invoke context carrying ``config``."""
    return Context(config=Config(overrides={"asset_build": {"build": config}}))


def build_config_from(c: Context) -> BuildConfig:
    """Return the build configuration stored on an invoke context."""
    return c.config.asset_build.build


@task
def styles(c):
    """Compile SCSS to minified CSS."""
    return steps.compile_styles(build_config_from(c))


@task
def javascript(c):
    """Minify application scripts."""
    return steps.minify_javascript(build_config_from(c))


@task
def js_libs(c):
    """Bundle and minify third-party libraries."""
    return steps.bundle_js_libs(build_config_from(c))


@task
def html(c):
    """Resolve HTML includes."""
    return steps.render_html(build_config_from(c))


@task
def img(c):
    """Copy images."""
    return steps.copy_images(build_config_from(c))


@task
def fonts(c):
    """Copy web fonts."""
    return steps.copy_fonts(build_config_from(c))


@task
def svg_build(c):
    """Write the namespaced SVG symbol sprite."""
    return steps.write_svg_sprite(build_config_from(c))


ns = Collection()
ns.add_task(styles, name="styles")
ns.add_task(javascript, name="javascript")
ns.add_task(js_libs, name="js-libs")
ns.add_task(html, name="html")
ns.add_task(img, name="img")
ns.add_task(fonts, name="fonts")
ns.add_task(svg_build, name="svg-build")

TASK_NAMES: list[str] = list(ns.tasks)

# Stages run in order; tasks inside a stage run concurrently
BUILD_PIPELINE: list[tuple[str, ...]] = [
    ("styles", "javascript", "svg-build"),
    ("img", "html", "fonts"),
]


def run_task(name: str, config: BuildConfig) -> list[Path]:
    """Run a single named task from the collection, reporting start and finish."""
    if name not in ns.tasks:
        raise BuildError(f"Unknown task: {name}")
    print(f"Starting '{name}'...")
    written = ns[name](make_context(config))
    print(f"Finished '{name}' ({len(written)} files)")
    return written


def run_pipeline(
    config: BuildConfig,
    stages: Sequence[Sequence[str]] = BUILD_PIPELINE,
    max_workers: int | None = None,
) -> dict[str, list[Path]]:
    """Run pipeline stages in order, each stage's tasks in parallel.

    A stage always runs to completion; if any of its tasks failed, the
    first failure (in stage order) is raised and later stages are skipped.

    Returns:
        Mapping of task name to files written, in execution order
    """
    results: dict[str, list[Path]] = {}
    for stage in stages:
        unknown = [name for name in stage if name not in ns.tasks]
        if unknown:
            raise BuildError(f"Unknown task(s): {', '.join(unknown)}")

        with ThreadPoolExecutor(max_workers=max_workers or max(len(stage), 1)) as pool:
            futures = [(name, pool.submit(run_task, name, config)) for name in stage]

        for name, future in futures:
            results[name] = future.result()
    return results
