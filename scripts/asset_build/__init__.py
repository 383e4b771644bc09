"""
Static-site asset build: styles, scripts, HTML includes, images and SVG sprites.

Usage:
    python -m asset_build build
    python -m asset_build task svg-build
    python -m asset_build sprite icons/*.svg -o sprite.html
    python -m asset_build default --port 3000   # build, serve, rebuild on change
"""

from .config import (
    BuildConfig,
    BuildPaths,
    PathsConfig,
    ServerConfig,
    SourcePaths,
    SpriteTarget,
    load_build_config,
    load_yaml,
)
from .errors import BuildError
from .svg import (
    DuplicateFragmentError,
    RewrittenFragment,
    Sprite,
    SvgFragment,
    build_sprite,
    namespace_fragment,
    namespace_fragments,
)
from .tasks import BUILD_PIPELINE, TASK_NAMES, ns, run_pipeline, run_task

__all__ = [
    # Config
    "BuildConfig",
    "BuildPaths",
    "PathsConfig",
    "ServerConfig",
    "SourcePaths",
    "SpriteTarget",
    "load_build_config",
    "load_yaml",
    # Errors
    "BuildError",
    "DuplicateFragmentError",
    # SVG
    "SvgFragment",
    "RewrittenFragment",
    "Sprite",
    "build_sprite",
    "namespace_fragment",
    "namespace_fragments",
    # Tasks
    "BUILD_PIPELINE",
    "TASK_NAMES",
    "ns",
    "run_pipeline",
    "run_task",
]
