"""PathSegment and PathTemplate frozen dataclasses, plus the template parser."""

from dataclasses import dataclass
from functools import lru_cache

from wren.errors import MalformedTemplateError

DEFAULT_MARKER = ":"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a path template.

    Literal:  ``post``  (is_param=False)
    Param:    ``:id``   (is_param=True, param_name="id")

    The empty segment before the leading ``/`` and after a trailing ``/``
    are kept as empty literals so matching stays strict about slashes.
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class PathTemplate:
    """A parsed, immutable path template.

    Created once per template at registry construction and reused by the
    builder, the validator and the matcher.
    """

    path: str
    segments: tuple[PathSegment, ...]
    required_params: tuple[str, ...]
    marker: str = DEFAULT_MARKER

    @property
    def is_static(self) -> bool:
        """True when the template has no parameters."""
        return not self.required_params

    def __str__(self) -> str:
        return self.path


def parse_template(template: str, marker: str = DEFAULT_MARKER) -> PathTemplate:
    """Parse a path template string into segments and required parameters.

    Examples::

        "/"                      -> segments ["", ""], required_params ()
        "/post/:id"              -> segments ["", "post", ":id"], required_params ("id",)
        "/calendar/:year/:month" -> required_params ("year", "month")

    Raises ``MalformedTemplateError`` for an empty or repeated parameter
    name, or a template that is not an absolute path.
    """
    if not isinstance(template, str):
        raise MalformedTemplateError(template, "template must be a string")
    return _parse(template, marker)


@lru_cache(maxsize=512)
def _parse(template: str, marker: str) -> PathTemplate:
    if not template.startswith("/"):
        raise MalformedTemplateError(template, "template must start with '/'")

    segments: list[PathSegment] = []
    names: list[str] = []
    for part in template.split("/"):
        if not part.startswith(marker):
            segments.append(PathSegment(value=part))
            continue

        name = part[len(marker):]
        if not name:
            raise MalformedTemplateError(template, "parameter name is empty")
        if name in names:
            raise MalformedTemplateError(template, f"parameter {name!r} appears more than once")
        names.append(name)
        segments.append(PathSegment(value=part, is_param=True, param_name=name))

    return PathTemplate(
        path=template,
        segments=tuple(segments),
        required_params=tuple(names),
        marker=marker,
    )
