"""Symbol sprite assembly from namespaced SVG fragments."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from .namespacer import RewrittenFragment, SvgFragment, namespace_fragments
from .utils import escape_xml, split_root, view_box_for

# SVG namespace constants
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

SPRITE_OPEN = f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" style="display:none">'
SPRITE_CLOSE = "</svg>"


class DuplicateFragmentError(ValueError):
    """Two fragments in one sprite share a symbolic name."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate sprite fragment name: {name!r}")
        self.name = name


class Sprite(BaseModel):
    """Ordered collection of rewritten fragments forming one sprite document."""

    model_config = ConfigDict(frozen=True)

    fragments: tuple[RewrittenFragment, ...] = ()

    @property
    def names(self) -> list[str]:
        """Fragment names in sprite order."""
        return [fragment.name for fragment in self.fragments]

    def render(self) -> str:
        """Serialize the sprite, one ``<symbol>`` per fragment in order."""
        symbols = "\n".join(make_symbol(fragment) for fragment in self.fragments)
        if not symbols:
            return f"{SPRITE_OPEN}{SPRITE_CLOSE}\n"
        return f"{SPRITE_OPEN}\n{symbols}\n{SPRITE_CLOSE}\n"


def make_symbol(fragment: RewrittenFragment) -> str:
    """Wrap a rewritten fragment as a ``<symbol>`` element.

    The symbol takes the fragment name as its id and the root ``<svg>``
    viewBox (and preserveAspectRatio, if any). Markup without a root
    ``<svg>`` becomes the symbol body as-is.
    """
    attrs = [f'id="{escape_xml(fragment.name)}"']

    root = split_root(fragment.raw_markup)
    if root is None:
        body = fragment.raw_markup.strip()
    else:
        attributes, body = root
        view_box = view_box_for(attributes)
        if view_box:
            attrs.append(f'viewBox="{view_box}"')
        if "preserveAspectRatio" in attributes:
            attrs.append(f'preserveAspectRatio="{attributes["preserveAspectRatio"]}"')

    return f'<symbol {" ".join(attrs)}>{body}</symbol>'


def assemble_sprite(fragments: Iterable[RewrittenFragment]) -> Sprite:
    """Collect rewritten fragments into a sprite, rejecting duplicate names.

    Raises:
        DuplicateFragmentError: if two fragments share a name
    """
    seen: set[str] = set()
    ordered = []
    for fragment in fragments:
        if fragment.name in seen:
            raise DuplicateFragmentError(fragment.name)
        seen.add(fragment.name)
        ordered.append(fragment)
    return Sprite(fragments=tuple(ordered))


def build_sprite(fragments: Iterable[SvgFragment]) -> Sprite:
    """Namespace raw fragments and assemble them into a sprite."""
    return assemble_sprite(namespace_fragments(fragments))
