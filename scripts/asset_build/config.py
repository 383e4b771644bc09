"""Configuration models and loaders for the asset build."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from .errors import BuildError

DEFAULT_CONFIG_FILE = "asset_build.yaml"

BuildMode = Literal["development", "production"]


class SourcePaths(BaseModel):
    """Source globs per asset type, relative to the project root."""

    style: list[str] = Field(default_factory=lambda: ["src/scss/*.scss"])
    html: str = Field("src/index.html", description="HTML entry file")
    img: list[str] = Field(default_factory=lambda: ["src/img/**/*"])
    js: list[str] = Field(default_factory=lambda: ["src/js/**/*.js"])
    fonts: list[str] = Field(
        default_factory=lambda: ["src/fonts/**/*.woff", "src/fonts/**/*.woff2"]
    )
    svg_sprite: list[str] = Field(default_factory=lambda: ["src/img/svg-sprite/*.svg"])


class SpriteTarget(BaseModel):
    """Output location of the generated SVG sprite."""

    folder: str = "dist/img/svg-sprites"
    file: str = "_svg-sprite.html"


class BuildPaths(BaseModel):
    """Output directories per asset type, relative to the project root."""

    style: str = "dist/css"
    html: str = "dist"
    img: str = "dist/img"
    js: str = "dist/js"
    fonts: str = "dist/fonts"
    svg_sprite: SpriteTarget = Field(default_factory=SpriteTarget)


class PathsConfig(BaseModel):
    """Source and build path tables."""

    src: SourcePaths = Field(default_factory=SourcePaths)
    build: BuildPaths = Field(default_factory=BuildPaths)
    watch: dict[str, list[str]] = Field(
        default_factory=lambda: {
            "styles": ["src/scss/**/*.scss"],
            "html": ["src/**/*.html"],
        },
        description="Task name -> globs whose changes re-run it in watch mode",
    )


class ServerConfig(BaseModel):
    """Local dev server settings."""

    base_dir: str = Field("dist", description="Directory to serve")
    host: str = "localhost"
    port: int = Field(3000, ge=0, le=65535)


class BuildConfig(BaseModel):
    """Complete build configuration passed to every task."""

    root: Path = Field(default_factory=Path.cwd, description="Project root")
    mode: BuildMode = "production"
    paths: PathsConfig = Field(default_factory=PathsConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    js_libs: list[str] = Field(
        default_factory=lambda: [
            "node_modules/jquery/dist/jquery.js",
            "node_modules/materialize-css/dist/js/materialize.js",
        ]
    )

    @property
    def is_production(self) -> bool:
        return self.mode == "production"

    def resolve(self, relative: str) -> Path:
        """Resolve a configured path against the project root."""
        return self.root / relative


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_build_config(path: Path, root: Path | None = None) -> BuildConfig:
    """Load build configuration from a YAML file.

    Missing files yield the default configuration. Relative paths inside
    the file are resolved against ``root``, which defaults to the
    directory containing the file.
    """
    root = root if root is not None else path.parent
    if not path.exists():
        return BuildConfig(root=root)

    try:
        data = load_yaml(path)
    except yaml.YAMLError as e:
        raise BuildError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise BuildError(f"Config {path} must be a mapping, got {type(data).__name__}")

    return BuildConfig.model_validate({**data, "root": root})


def apply_overrides(config: BuildConfig, **overrides: Any) -> BuildConfig:
    """Return a copy of ``config`` with non-None CLI overrides applied.

    ``host``, ``port`` and ``base_dir`` are routed to the server section.
    The result is validated, so out-of-range values raise ``ValidationError``.
    """
    server_keys = {"host", "port", "base_dir"}
    server_updates = {
        k: v for k, v in overrides.items() if k in server_keys and v is not None
    }
    updates = {
        k: v for k, v in overrides.items() if k not in server_keys and v is not None
    }
    data = config.model_dump()
    data.update(updates)
    data["server"].update(server_updates)
    return BuildConfig.model_validate(data)
