"""Navigation values — links and redirects built from registered templates.

A ``Link`` or ``Redirect`` can only be produced through the registry,
so every href a page emits is guaranteed to come from a registered
template with its parameters filled in.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from wren.errors import UnknownTemplateError
from wren.routing.registry import PathRegistry


@dataclass(frozen=True, slots=True)
class Link:
    """A navigation link to a concrete path."""

    href: str
    text: str = ""
    replace: bool = False


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to a concrete path.

    ``push`` adds a history entry instead of replacing the current one.
    ``source`` limits the redirect to a single registered template.
    """

    url: str
    push: bool = False
    source: str | None = None


def link_to(
    registry: PathRegistry,
    template: str,
    params: Mapping[str, Any] | None = None,
    text: str = "",
    *,
    replace: bool = False,
) -> Link:
    """Build a ``Link`` to a registered template.

    Example::

        link_to(registry, "/post/:id", {"id": "42"}, "Post #42")
        # Link(href="/post/42", text="Post #42")
    """
    return Link(href=registry.build(template, params), text=text, replace=replace)


def redirect_to(
    registry: PathRegistry,
    template: str,
    params: Mapping[str, Any] | None = None,
    *,
    push: bool = False,
    source: str | None = None,
) -> Redirect:
    """Build a ``Redirect`` to a registered template.

    Raises ``UnknownTemplateError`` if *template* or *source* is not
    registered.
    """
    if source is not None and source not in registry:
        raise UnknownTemplateError(source)
    return Redirect(url=registry.build(template, params), push=push, source=source)


def nav_links(
    registry: PathRegistry,
    items: Iterable[tuple[str, Mapping[str, Any] | None, str]],
) -> list[Link]:
    """Build the links of a navigation bar from ``(template, params, text)`` tuples."""
    return [link_to(registry, template, params, text) for template, params, text in items]
