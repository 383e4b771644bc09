"""Command-line interface for the asset build."""

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG_FILE, BuildConfig, apply_overrides, load_build_config
from .errors import BuildError
from .server import serve
from .svg.sprite import build_sprite
from .svg.utils import read_fragments, save_svg_file
from .tasks import BUILD_PIPELINE, TASK_NAMES, run_pipeline, run_task
from .watch import develop


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="asset_build",
        description="Static-site asset build: styles, scripts, HTML, images and SVG sprites",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root that source and build paths are relative to (default: cwd)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help=f"Path to build config YAML (default: ROOT/{DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--mode",
        choices=["development", "production"],
        help="Build mode (overrides config)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- build subcommand ---
    subparsers.add_parser(
        "build",
        help="Run the full build pipeline",
    )

    # --- task subcommand ---
    task_parser = subparsers.add_parser(
        "task",
        help="Run a single build task",
    )
    task_parser.add_argument("name", choices=sorted(TASK_NAMES), help="Task to run")

    # --- list subcommand ---
    subparsers.add_parser(
        "list",
        help="List tasks and the build pipeline stages",
    )

    # --- sprite subcommand ---
    sprite_parser = subparsers.add_parser(
        "sprite",
        help="Build an SVG symbol sprite from explicit files",
    )
    sprite_parser.add_argument(
        "svg_files",
        type=Path,
        nargs="+",
        help="SVG files to include, in sprite order",
    )
    sprite_parser.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="Output sprite file",
    )

    # --- serve / default subcommands ---
    for name, help_text in (
        ("serve", "Serve the build directory"),
        ("default", "Build in development mode, then serve and rebuild on change"),
    ):
        server_parser = subparsers.add_parser(name, help=help_text)
        server_parser.add_argument("--host", help="Bind address (overrides config)")
        server_parser.add_argument("--port", type=int, help="Port (overrides config)")

    return parser


def load_config(args: argparse.Namespace) -> BuildConfig:
    """Load the build config and apply CLI overrides."""
    root = (args.root or Path.cwd()).resolve()
    config_path = args.config or root / DEFAULT_CONFIG_FILE
    config = load_build_config(config_path, root=root)
    return apply_overrides(
        config,
        mode=args.mode,
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
    )


def cmd_build(config: BuildConfig) -> int:
    """Execute build subcommand."""
    results = run_pipeline(config)
    total = sum(len(written) for written in results.values())
    print(f"Build finished ({config.mode}): {total} files written")
    return 0


def cmd_task(config: BuildConfig, name: str) -> int:
    """Execute task subcommand."""
    run_task(name, config)
    return 0


def cmd_list(config: BuildConfig) -> int:
    """Execute list subcommand."""
    print("Available tasks:")
    for name in TASK_NAMES:
        print(f"  - {name}")
    print("Build pipeline:")
    for i, stage in enumerate(BUILD_PIPELINE, start=1):
        print(f"  {i}. {', '.join(stage)}")
    return 0


def cmd_sprite(args: argparse.Namespace) -> int:
    """Execute sprite subcommand."""
    missing = [path for path in args.svg_files if not path.exists()]
    if missing:
        print(f"Error: SVG file not found: {missing[0]}", file=sys.stderr)
        return 1

    sprite = build_sprite(read_fragments(args.svg_files))
    save_svg_file(args.output, sprite.render())
    print(f"Wrote {len(sprite.fragments)} symbols to {args.output}")
    return 0


def cmd_serve(config: BuildConfig) -> int:
    """Execute serve subcommand."""
    serve(config)
    return 0


def cmd_default(config: BuildConfig) -> int:
    """Execute default subcommand: development build, then serve and watch."""
    config = config.model_copy(update={"mode": "development"})
    cmd_build(config)
    develop(config)
    return 0


def dispatch(args: argparse.Namespace) -> int:
    """Run the selected subcommand, mapping build failures to exit status 1."""
    try:
        if args.command == "sprite":
            return cmd_sprite(args)

        config = load_config(args)
        if args.command == "build":
            return cmd_build(config)
        elif args.command == "task":
            return cmd_task(config, args.name)
        elif args.command == "list":
            return cmd_list(config)
        elif args.command == "serve":
            return cmd_serve(config)
        elif args.command == "default":
            return cmd_default(config)
    except (BuildError, ValueError, OSError) as e:
        # ValidationError and DuplicateFragmentError are both ValueErrors
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 1


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    sys.exit(dispatch(args))


if __name__ == "__main__":
    main()
