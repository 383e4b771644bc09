"""SVG sprite utilities: id namespacing and symbol sprite assembly."""

from .namespacer import (
    SvgFragment,
    RewrittenFragment,
    namespace_markup,
    namespace_fragment,
    namespace_fragments,
)
from .sprite import DuplicateFragmentError, Sprite, assemble_sprite, build_sprite, make_symbol
from .utils import escape_xml, fragment_name, read_fragments, save_svg_file, split_root

__all__ = [
    # Namespacer
    "SvgFragment",
    "RewrittenFragment",
    "namespace_markup",
    "namespace_fragment",
    "namespace_fragments",
    # Sprite
    "DuplicateFragmentError",
    "Sprite",
    "assemble_sprite",
    "build_sprite",
    "make_symbol",
    # Utils
    "escape_xml",
    "fragment_name",
    "read_fragments",
    "save_svg_file",
    "split_root",
]
