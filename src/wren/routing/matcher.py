"""Exact, slash-strict, case-sensitive path matching.

A template matches a path only when both split into the same number of
``/``-delimited segments, every literal segment is identical, and every
parameter segment lines up with a non-empty segment. Registry entries
are tried in registration order and the first match wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from wren.routing.template import PathTemplate

if TYPE_CHECKING:
    from wren.routing.registry import RegistryEntry


@dataclass(frozen=True, slots=True)
class PathMatch:
    """Result of a successful match: the winning entry and observed params."""

    entry: RegistryEntry
    params: MappingProxyType[str, str]

    @property
    def template(self) -> PathTemplate:
        return self.entry.template

    @property
    def handler(self) -> Any:
        return self.entry.handler


def match_template(template: PathTemplate, path: str) -> MappingProxyType[str, str] | None:
    """Match *path* against a single template.

    Returns a read-only mapping of observed parameters on success and
    ``None`` otherwise.
    """
    if not isinstance(path, str):
        return None

    parts = path.split("/")
    if len(parts) != len(template.segments):
        return None

    params: dict[str, str] = {}
    for seg, part in zip(template.segments, parts, strict=True):
        if seg.is_param:
            if not part:
                return None
            params[seg.param_name or ""] = part
        elif seg.value != part:
            return None
    return MappingProxyType(params)


def match(entries: Iterable[RegistryEntry], path: str) -> PathMatch | None:
    """Return the first entry whose template matches *path*, or ``None``.

    *entries* is usually a ``PathRegistry``; registration order is the
    tie-break for overlapping templates, so a literal ``/post/new``
    registered before ``/post/:id`` intercepts ``/post/new``.
    """
    for entry in entries:
        params = match_template(entry.template, path)
        if params is not None:
            return PathMatch(entry=entry, params=params)
    return None
