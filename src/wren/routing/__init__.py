"""Routing — parsed path templates, URL building, validation and dispatch.

Templates are registered once at startup and parsed into an immutable
registry; building, validating and matching are pure functions of it.
"""

from wren.routing.builder import build_url
from wren.routing.dispatch import Dispatcher, Resolution
from wren.routing.matcher import PathMatch, match, match_template
from wren.routing.params import ParamsBag, is_params, missing_params, typed_params
from wren.routing.registry import PathRegistry, RegistryEntry
from wren.routing.template import PathSegment, PathTemplate, parse_template

__all__ = [
    "Dispatcher",
    "ParamsBag",
    "PathMatch",
    "PathRegistry",
    "PathSegment",
    "PathTemplate",
    "RegistryEntry",
    "Resolution",
    "build_url",
    "is_params",
    "match",
    "match_template",
    "missing_params",
    "parse_template",
    "typed_params",
]
