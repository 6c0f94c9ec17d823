"""Dispatcher — picks a handler (or the fallback) for a requested path.

Dispatching is a two-step affair: the matcher yields untyped string
params, and the handler that expects a particular template asserts its
shape with ``params_for`` before trusting it.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wren.routing.matcher import match_template
from wren.routing.params import typed_params
from wren.routing.registry import PathRegistry
from wren.routing.template import PathTemplate

logger = logging.getLogger("wren.routing")

_EMPTY: MappingProxyType[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of a dispatch that selected something to render.

    ``template`` is ``None`` when the fallback handler was selected.
    """

    handler: Any
    params: MappingProxyType[str, str] = field(default=_EMPTY)
    template: PathTemplate | None = None

    @property
    def is_fallback(self) -> bool:
        return self.template is None


class Dispatcher:
    """Select the handler for a requested path.

    Usage::

        dispatcher = Dispatcher(registry, fallback=not_found)
        resolution = dispatcher.dispatch("/post/42")
        params = dispatcher.params_for("/post/:id", "/post/42")   # {"id": "42"}
    """

    __slots__ = ("_fallback", "_registry")

    def __init__(self, registry: PathRegistry, fallback: Any = None) -> None:
        self._registry = registry
        self._fallback = fallback

    @property
    def registry(self) -> PathRegistry:
        return self._registry

    @property
    def fallback(self) -> Any:
        return self._fallback

    def dispatch(self, path: str) -> Resolution | None:
        """Match *path* and return what to render.

        Returns the matched handler with its observed params, the
        fallback handler when nothing matched, or ``None`` when nothing
        matched and no fallback was configured.
        """
        found = self.registry.match(path)
        if found is not None:
            logger.debug("Dispatch %r -> %s", path, found.template.path)
            return Resolution(handler=found.handler, params=found.params, template=found.template)

        if self.fallback is not None:
            logger.debug("Dispatch %r -> fallback", path)
            return Resolution(handler=self.fallback)

        logger.debug("Dispatch %r -> nothing", path)
        return None

    def params_for(self, template: str, path: str) -> dict[str, str] | None:
        """Typed params for *path* as seen by a handler expecting *template*.

        Matches *path* against that one template (exact, slash-strict,
        case-sensitive) and validates the observed params. Returns
        ``None`` when the path does not belong to *template*.
        """
        parsed = self.registry.parse(template)
        observed = match_template(parsed, path)
        if observed is None:
            return None
        return typed_params(parsed, observed, strict=self.registry.config.strict_params)

    def invoke(self, path: str, *args: Any, **kwargs: Any) -> Any:
        """Dispatch *path* and call the selected handler.

        Callable handlers receive any extra *args* and *kwargs* plus the
        observed params as keyword arguments. An observed param replaces
        an extra keyword argument of the same name. Non-callable handlers
        are returned as-is. Returns ``None`` when nothing was selected.
        """
        resolution = self.dispatch(path)
        if resolution is None:
            return None
        if not callable(resolution.handler):
            return resolution.handler
        return resolution.handler(*args, **{**kwargs, **resolution.params})
