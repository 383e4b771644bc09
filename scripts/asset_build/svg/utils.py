"""SVG file and markup helpers."""

import re
from pathlib import Path
from typing import Iterable

from .namespacer import SvgFragment

# Everything that may precede the root element
PROLOG_PATTERN = re.compile(
    r"^\s*(?:<\?xml[^>]*\?>\s*|<!DOCTYPE[^>\[]*(?:\[.*?\])?\s*>\s*|<!--.*?-->\s*)*", re.DOTALL
)
ROOT_PATTERN = re.compile(r"<svg\b([^>]*?)(/?)>(.*)", re.DOTALL)
CLOSING_ROOT_PATTERN = re.compile(r"</svg>\s*(?:<!--.*?-->\s*)*$", re.DOTALL)
ATTR_PATTERN = re.compile(r'([\w:-]+)\s*=\s*"([^"]*)"')
NUMBER_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)(?:px)?\s*$")


def escape_xml(text: str) -> str:
    """Escape XML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def fragment_name(path: Path) -> str:
    """Return the symbolic name for an SVG source file (base name, no extension)."""
    return path.stem


def load_svg_file(path: Path) -> str:
    """Load SVG file content as UTF-8 text."""
    return path.read_text(encoding="utf-8")


def save_svg_file(path: Path, content: str) -> None:
    """Save SVG content to file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def read_fragments(paths: Iterable[Path]) -> list[SvgFragment]:
    """Read SVG files into fragments, one per path, in the given order."""
    return [
        SvgFragment(name=fragment_name(path), raw_markup=load_svg_file(path))
        for path in paths
    ]


def parse_attributes(attr_text: str) -> dict[str, str]:
    """Parse double-quoted attributes from the inside of a start tag."""
    return dict(ATTR_PATTERN.findall(attr_text))


def split_root(markup: str) -> tuple[dict[str, str], str] | None:
    """Split SVG markup into root attributes and inner content.

    Args:
        markup: SVG document text

    Returns:
        (attributes, inner) tuple, or None if the markup does not start
        with an ``<svg>`` root element after its prolog
    """
    body = PROLOG_PATTERN.sub("", markup, count=1)
    match = ROOT_PATTERN.match(body)
    if not match:
        return None

    attributes = parse_attributes(match.group(1))
    if match.group(2):
        return attributes, ""

    inner = CLOSING_ROOT_PATTERN.sub("", match.group(3), count=1)
    return attributes, inner.strip()


def view_box_for(attributes: dict[str, str]) -> str | None:
    """Return the root viewBox, falling back to numeric width/height."""
    if "viewBox" in attributes:
        return attributes["viewBox"]

    width = NUMBER_PATTERN.match(attributes.get("width", ""))
    height = NUMBER_PATTERN.match(attributes.get("height", ""))
    if width and height:
        return f"0 0 {width.group(1)} {height.group(1)}"
    return None
