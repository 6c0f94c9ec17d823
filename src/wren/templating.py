"""Kida template helpers for building links from the registry.

Registers URL helpers on a kida Environment so templates render hrefs
through the same registry the dispatcher uses::

    <a href="{{ url("/post/:id", id=post.id) }}">...</a>
    {{ link("/calendar/:year/:month", "May 2024", year="2024", month="5") }}
    {{ "/post/:id" | url_for(id=post.id) }}
"""

import html
from collections.abc import Callable
from typing import Any

from kida import Environment
from kida.template import Markup

from wren.navigation import link_to
from wren.routing.registry import PathRegistry


def url_helpers(registry: PathRegistry) -> dict[str, Callable[..., Any]]:
    """Return the ``url`` and ``link`` callables bound to *registry*."""

    def url(template: str, **params: Any) -> str:
        return registry.build(template, params)

    def link(template: str, text: str = "", **params: Any) -> Markup:
        built = link_to(registry, template, params, text)
        href = html.escape(built.href, quote=True)
        return Markup(f'<a href="{href}">{html.escape(built.text or built.href)}</a>')

    return {"url": url, "link": link}


def register_url_helpers(env: Environment, registry: PathRegistry) -> Environment:
    """Register ``url``/``link`` globals and the ``url_for`` filter on *env*.

    Returns *env* so it can be used inline when building an environment.
    """
    helpers = url_helpers(registry)
    for name, value in helpers.items():
        env.add_global(name, value)
    env.update_filters({"url_for": helpers["url"]})
    return env
