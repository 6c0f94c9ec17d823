"""Path registry — ordered, immutable table of templates and handlers.

Templates are parsed once here and the parsed form is reused by every
build, validation and match. Mirrors the frozen ``Route`` + compiled
table split: ``RegistryEntry`` is the frozen definition, ``PathRegistry``
is the table.

Thread safety:
    - RegistryEntry and PathTemplate are frozen dataclasses
    - PathRegistry._entries, ._by_path and ._config are set in __init__, never
      mutated, and exposed through read-only properties
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from wren.config import RouterConfig
from wren.errors import ConfigurationError, DuplicateTemplateError, UnknownTemplateError
from wren.routing.builder import build_url
from wren.routing.matcher import PathMatch, match
from wren.routing.params import is_params, typed_params
from wren.routing.template import PathTemplate, parse_template

logger = logging.getLogger("wren.routing")


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """A parsed template paired with its opaque handler."""

    template: PathTemplate
    handler: Any

    @property
    def path(self) -> str:
        return self.template.path


class PathRegistry:
    """Ordered registry of path templates. Immutable after construction.

    Usage::

        registry = PathRegistry([
            ("/", home),
            ("/post/:id", post),
            ("/calendar/:year/:month", calendar),
        ])
        registry.build("/post/:id", {"id": "42"})   # "/post/42"
        registry.match("/post/42").params            # {"id": "42"}
    """

    __slots__ = ("_by_path", "_config", "_entries")

    def __init__(
        self,
        entries: Iterable[tuple[str, Any] | RegistryEntry],
        *,
        config: RouterConfig | None = None,
    ) -> None:
        self._config = config or RouterConfig()
        parsed: list[RegistryEntry] = []
        by_path: dict[str, RegistryEntry] = {}

        for item in entries:
            entry = self._coerce(item)
            if entry.path in by_path:
                raise DuplicateTemplateError(entry.path)
            by_path[entry.path] = entry
            parsed.append(entry)

        self._entries: tuple[RegistryEntry, ...] = tuple(parsed)
        self._by_path: Mapping[str, RegistryEntry] = by_path
        logger.debug("Registered %d path template(s)", len(self._entries))

        if self.config.check_contracts:
            self._check()

    @classmethod
    def from_mapping(
        cls,
        routes: Mapping[str, Any],
        *,
        config: RouterConfig | None = None,
    ) -> "PathRegistry":
        """Build a registry from a ``{template: handler}`` mapping, in mapping order."""
        return cls(routes.items(), config=config)

    def _coerce(self, item: tuple[str, Any] | RegistryEntry) -> RegistryEntry:
        if isinstance(item, RegistryEntry):
            if item.template.marker != self.config.marker:
                return RegistryEntry(
                    template=parse_template(item.template.path, self.config.marker),
                    handler=item.handler,
                )
            return item
        msg = f"Registry entries must be (template, handler) pairs, got {item!r}"
        if isinstance(item, (str, bytes)):
            raise ConfigurationError(msg)
        try:
            path, handler = item
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(msg) from exc
        return RegistryEntry(template=parse_template(path, self.config.marker), handler=handler)

    def _check(self) -> None:
        from wren.contracts import check_registry

        result = check_registry(self)
        for issue in result.warnings:
            logger.warning("%s", issue.message)
        if not result.ok:
            raise ConfigurationError(result.summary())

    # -- Lookup --

    @property
    def config(self) -> RouterConfig:
        """The configuration fixed at construction."""
        return self._config

    @property
    def entries(self) -> tuple[RegistryEntry, ...]:
        return self._entries

    @property
    def templates(self) -> tuple[str, ...]:
        """Registered template strings, in registration order."""
        return tuple(entry.path for entry in self._entries)

    def get(self, template: str) -> RegistryEntry | None:
        """Look up an entry by template string. Returns ``None`` if not found."""
        return self._by_path.get(template)

    def parse(self, template: str) -> PathTemplate:
        """Return the cached parsed form of a registered template.

        Raises ``UnknownTemplateError`` if *template* is not registered.
        """
        entry = self._by_path.get(template)
        if entry is None:
            raise UnknownTemplateError(template)
        return entry.template

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._entries)

    def __contains__(self, template: object) -> bool:
        return template in self._by_path

    def __repr__(self) -> str:
        return f"PathRegistry({list(self.templates)!r})"

    # -- Operations bound to this registry's config --

    def build(self, template: str, params: Mapping[str, Any] | None = None) -> str:
        """Build a URL for a registered template."""
        return build_url(
            self.parse(template),
            params or {},
            on_missing=self.config.missing_params,
        )

    def is_params(self, template: str, candidate: object) -> bool:
        """Check *candidate* against a registered template's required parameters."""
        return is_params(self.parse(template), candidate, strict=self.config.strict_params)

    def typed_params(self, template: str, candidate: object) -> dict[str, str] | None:
        """Narrow *candidate* to a registered template's parameters, or ``None``."""
        return typed_params(self.parse(template), candidate, strict=self.config.strict_params)

    def match(self, path: str) -> PathMatch | None:
        """Return the first entry matching *path*, or ``None``."""
        return match(self._entries, path)
