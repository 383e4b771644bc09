"""Rebuild-on-change loop and the development server."""

import sys
import threading
from pathlib import Path
from typing import Iterable

from watchfiles import watch as watch_changes

from .config import BuildConfig
from .errors import BuildError
from .server import create_server
from .sources import matches_pattern
from .tasks import run_task


def tasks_for_changes(config: BuildConfig, changes: Iterable[tuple[object, str]]) -> list[str]:
    """Map a batch of changed paths to the tasks that must re-run.

    Args:
        config: Build configuration (``paths.watch`` maps task -> globs)
        changes: ``(change, path)`` pairs as yielded by watchfiles

    Returns:
        Task names in ``paths.watch`` order, each at most once
    """
    relatives = []
    for _, raw_path in changes:
        try:
            relatives.append(Path(raw_path).resolve().relative_to(config.root.resolve()).as_posix())
        except ValueError:
            continue

    return [
        name
        for name, patterns in config.paths.watch.items()
        if any(matches_pattern(rel, pattern) for rel in relatives for pattern in patterns)
    ]


def watch_and_rebuild(config: BuildConfig, stop_event: threading.Event | None = None) -> None:
    """Re-run mapped tasks whenever watched sources change.

    Task failures are reported on stderr and watching continues.
    """
    for changes in watch_changes(config.root, stop_event=stop_event):
        for name in tasks_for_changes(config, changes):
            try:
                run_task(name, config)
            except BuildError as e:
                print(f"Error: {e}", file=sys.stderr)


def develop(config: BuildConfig) -> None:
    """Serve the build directory and rebuild on change until interrupted."""
    server = create_server(config)
    host, port = server.server_address[:2]
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    print(f"Serving {config.server.base_dir} at http://{host}:{port}/, watching for changes")
    try:
        watch_and_rebuild(config)
    except KeyboardInterrupt:
        print("Stopping server")
    finally:
        server.shutdown()
        server.server_close()
