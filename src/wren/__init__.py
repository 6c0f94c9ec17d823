"""Wren — typed path templates for building and matching URLs.

One registry of path templates drives URL building, parameter
validation and dispatch, so links and route handlers cannot drift
apart.

Basic usage::

    from wren import Dispatcher, PathRegistry

    registry = PathRegistry([
        ("/", home),
        ("/post/:id", post),
        ("/calendar/:year/:month", calendar),
    ])

    registry.build("/post/:id", {"id": "42"})          # "/post/42"
    resolution = Dispatcher(registry).dispatch("/post/42")
    resolution.handler, resolution.params              # post, {"id": "42"}

Template helpers (kida)::

    from wren.templating import register_url_helpers
    register_url_helpers(env, registry)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "Dispatcher",
    "Link",
    "MalformedTemplateError",
    "MissingParameterError",
    "PathRegistry",
    "PathTemplate",
    "Redirect",
    "Resolution",
    "RouterConfig",
    "UnknownTemplateError",
    "WrenError",
    "build_url",
    "check_registry",
    "expects",
    "is_params",
    "parse_template",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "RouterConfig":
        from wren.config import RouterConfig

        return RouterConfig

    if name in (
        "Dispatcher",
        "PathRegistry",
        "PathTemplate",
        "Resolution",
        "build_url",
        "is_params",
        "parse_template",
    ):
        from wren import routing as _routing

        return getattr(_routing, name)

    if name in ("Link", "Redirect"):
        from wren import navigation as _nav

        return getattr(_nav, name)

    if name in ("check_registry", "expects"):
        from wren import contracts as _contracts

        return getattr(_contracts, name)

    if name in (
        "ConfigurationError",
        "MalformedTemplateError",
        "MissingParameterError",
        "UnknownTemplateError",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
