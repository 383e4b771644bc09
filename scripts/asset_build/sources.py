"""Source glob resolution relative to a project root."""

import re
from pathlib import Path, PurePosixPath
from typing import Iterable

WILDCARD_CHARS = set("*?[")


def glob_base(pattern: str) -> PurePosixPath:
    """Return the leading wildcard-free directory of a glob pattern.

    ``src/img/**/*`` -> ``src/img``; a pattern without wildcards has its
    parent directory as base.
    """
    parts = PurePosixPath(pattern).parts
    base: list[str] = []
    for part in parts:
        if WILDCARD_CHARS & set(part):
            return PurePosixPath(*base) if base else PurePosixPath(".")
        base.append(part)
    return PurePosixPath(pattern).parent


def has_wildcard(pattern: str) -> bool:
    """Return True if the pattern contains glob wildcard characters."""
    return bool(WILDCARD_CHARS & set(pattern))


def resolve_sources(root: Path, patterns: Iterable[str]) -> list[tuple[Path, Path]]:
    """Expand glob patterns into files under ``root``.

    Args:
        root: Project root that patterns are relative to
        patterns: POSIX-style globs, ``**`` allowed

    Returns:
        (path, relative) pairs in pattern order, where ``relative`` is the
        file's path relative to its pattern's glob base. Files matched by
        more than one pattern are kept at their first match.
    """
    seen: set[Path] = set()
    results: list[tuple[Path, Path]] = []
    for pattern in patterns:
        base = root / glob_base(pattern)
        if has_wildcard(pattern):
            matches = sorted(root.glob(pattern))
        else:
            matches = [root / pattern]

        for path in matches:
            if not path.is_file() or path in seen:
                continue
            seen.add(path)
            results.append((path, path.relative_to(base)))
    return results


def output_path(dest: Path, relative: Path, suffix: str | None = None) -> Path:
    """Map a relative source path into ``dest``, optionally replacing its suffix.

    ``suffix`` is inserted before the extension: ``app.js`` with ``.min``
    becomes ``app.min.js``.
    """
    target = dest / relative
    if suffix:
        target = target.with_name(f"{target.stem}{suffix}{target.suffix}")
    return target


def glob_to_regex(pattern: str) -> re.Pattern:
    """Translate a POSIX glob into a regex matching whole relative paths.

    ``*`` and ``?`` stay inside one path segment; ``**/`` matches zero or
    more directories.
    """
    out = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            out.append("(?:[^/]+/)*")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif pattern[i] == "*":
            out.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            out.append("[^/]")
            i += 1
        elif pattern[i] == "[" and "]" in pattern[i + 1:]:
            end = pattern.index("]", i + 1)
            body = pattern[i + 1:end]
            if body.startswith("!"):
                body = "^" + body[1:]
            out.append(f"[{body}]")
            i = end + 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(out) + r"\Z")


def matches_pattern(relative: str, pattern: str) -> bool:
    """Check a root-relative POSIX path against a glob pattern."""
    return glob_to_regex(pattern).match(relative) is not None
