"""SVG id namespacing for sprite fragments.

Each fragment is rewritten at the text level so that every ``id`` it
declares, and every ``fill``/``mask``/``filter`` reference to one, is
prefixed with the fragment's symbolic name. This keeps ids unique once
independently authored SVGs are concatenated into a single sprite.
"""

import re
from typing import Iterable

from pydantic import BaseModel, ConfigDict

# Attribute rewrites, applied in order to every fragment
ID_PATTERN = re.compile(r'id="([^"]+)"', re.MULTILINE)
URL_REF_PATTERNS = {
    attr: re.compile(rf'{attr}="url\(#([^"]+)\)"', re.MULTILINE)
    for attr in ("fill", "mask", "filter")
}


class SvgFragment(BaseModel):
    """Raw SVG markup tagged with its symbolic name."""

    model_config = ConfigDict(frozen=True)

    name: str
    raw_markup: str


class RewrittenFragment(SvgFragment):
    """Fragment whose markup has had its ids namespaced."""


def namespace_markup(name: str, markup: str) -> str:
    """Prefix ids and url(#id) references in ``markup`` with ``name``.

    Rewrites are purely syntactic: only ``attr="..."`` with double quotes
    is matched, and malformed markup passes through untouched apart from
    those matches. The result is not idempotent; running it twice prefixes
    twice.

    Args:
        name: Symbolic name of the fragment (namespace prefix)
        markup: Raw SVG text

    Returns:
        Rewritten SVG text
    """
    # Lambdas keep backslashes in names from being read as group references
    markup = ID_PATTERN.sub(lambda m: f'id="{name}-{m.group(1)}"', markup)

    for attr, pattern in URL_REF_PATTERNS.items():
        markup = pattern.sub(
            lambda m, attr=attr: f'{attr}="url(#{name}-{m.group(1)})"', markup
        )

    # Values already carrying the name end up as NAME-NAME-VALUE after the
    # id rewrite; fold the first one back down.
    return markup.replace(f'id="{name}-{name}-', f'id="{name}-', 1)


def namespace_fragment(fragment: SvgFragment) -> RewrittenFragment:
    """Namespace a single fragment, keeping its name."""
    return RewrittenFragment(
        name=fragment.name,
        raw_markup=namespace_markup(fragment.name, fragment.raw_markup),
    )


def namespace_fragments(fragments: Iterable[SvgFragment]) -> list[RewrittenFragment]:
    """Namespace fragments in the order they are supplied."""
    return [namespace_fragment(fragment) for fragment in fragments]
