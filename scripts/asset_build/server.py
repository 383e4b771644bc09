"""Static dev server for the build output directory."""

from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer

from .config import BuildConfig
from .errors import BuildError


def create_server(config: BuildConfig) -> ThreadingHTTPServer:
    """Create (but do not start) a server for ``config.server.base_dir``.

    Raises:
        BuildError: if the directory to serve does not exist
    """
    base_dir = config.resolve(config.server.base_dir)
    if not base_dir.is_dir():
        raise BuildError(f"Nothing to serve, directory not found: {base_dir}", task="serve")

    handler = partial(SimpleHTTPRequestHandler, directory=str(base_dir))
    return ThreadingHTTPServer((config.server.host, config.server.port), handler)


def serve(config: BuildConfig) -> None:
    """Serve the build directory until interrupted."""
    server = create_server(config)
    host, port = server.server_address[:2]
    print(f"Serving {config.server.base_dir} at http://{host}:{port}/ (Ctrl+C to stop)")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("Stopping server")
    finally:
        server.server_close()
