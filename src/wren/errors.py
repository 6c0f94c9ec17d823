"""Wren exception hierarchy.

Shared across the parser, registry, builder and dispatcher so every
module raises and catches the same types. Match misses and invalid
parameter bags are ordinary return values, not exceptions.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when router configuration is invalid.

    Typically raised while building a ``PathRegistry`` at startup.
    """


class MalformedTemplateError(ConfigurationError):
    """A path template could not be parsed.

    Empty parameter names, repeated parameter names, and templates that
    are not absolute paths all end up here.
    """

    def __init__(self, template: object, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Malformed path template {template!r}: {reason}")


class DuplicateTemplateError(ConfigurationError):
    """The same template string was registered twice."""

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__(f"Path template {template!r} is registered more than once.")


class UnknownTemplateError(WrenError, LookupError):
    """A template string that is not in the registry was used."""

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__(f"Path template {template!r} is not registered.")


class MissingParameterError(WrenError, LookupError):
    """URL building was asked for a template without all of its parameters."""

    def __init__(self, template: str, missing: tuple[str, ...]) -> None:
        self.template = template
        self.missing = missing
        names = ", ".join(missing)
        super().__init__(f"Cannot build {template!r}: missing parameter(s) {names}")


class ParameterValueError(WrenError, ValueError):
    """A supplied parameter value cannot stand in for a single path segment."""

    def __init__(self, template: str, name: str, value: object) -> None:
        self.template = template
        self.name = name
        self.value = value
        super().__init__(
            f"Cannot build {template!r}: value {value!r} for parameter "
            f"{name!r} must be a non-empty string without '/'."
        )
