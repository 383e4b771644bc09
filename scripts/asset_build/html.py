"""HTML include resolution (``//= path`` directives)."""

import re
from pathlib import Path

from .errors import BuildError

INCLUDE_PATTERN = re.compile(
    r"^(?P<indent>[ \t]*)//=[ \t]*(?:include[ \t]+)?(?P<path>\S+)[ \t]*$",
    re.MULTILINE,
)


def resolve_includes(path: Path, _stack: tuple[Path, ...] = ()) -> str:
    """Return the content of ``path`` with include directives expanded.

    Each ``//= file`` line is replaced by the content of ``file`` resolved
    relative to the including file. Includes nest.

    Raises:
        BuildError: if an included file is missing or includes itself
    """
    path = path.resolve()
    if path in _stack:
        chain = " -> ".join(p.name for p in (*_stack, path))
        raise BuildError(f"Include cycle: {chain}")
    if not path.is_file():
        raise BuildError(f"Included file not found: {path}")

    stack = (*_stack, path)
    content = path.read_text(encoding="utf-8")

    def replace(match: re.Match) -> str:
        included = resolve_includes(path.parent / match.group("path"), stack)
        return match.group("indent") + included.rstrip("\n")

    return INCLUDE_PATTERN.sub(replace, content)
