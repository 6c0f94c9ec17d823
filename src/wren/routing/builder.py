"""URL building from a parsed template and a parameter bag."""

from collections.abc import Mapping
from typing import Any

from wren.errors import MissingParameterError, ParameterValueError
from wren.routing.params import missing_params
from wren.routing.template import PathTemplate


def build_url(
    template: PathTemplate,
    params: Mapping[str, Any],
    *,
    on_missing: str = "raise",
) -> str:
    """Build a concrete path by substituting each parameter segment.

    Substitution works on parsed segments, so only the exact ``:name``
    segment is replaced — a literal like ``post:id`` is left alone.
    Extra keys in *params* are ignored.

    ``on_missing="raise"`` raises ``MissingParameterError`` when a
    required name is absent. ``on_missing="keep"`` leaves the marker
    token in the output instead.

    Example::

        build_url(parse_template("/calendar/:year/:month"), {"year": "2024", "month": "5"})
        # "/calendar/2024/5"
    """
    if template.is_static:
        return template.path

    missing = missing_params(template, params)
    if missing and on_missing == "raise":
        raise MissingParameterError(template.path, missing)

    parts: list[str] = []
    for seg in template.segments:
        if not seg.is_param or seg.param_name in missing:
            parts.append(seg.value)
            continue
        value = params[seg.param_name]  # type: ignore[index]
        text = value if isinstance(value, str) else str(value)
        if value is None or not text or "/" in text:
            raise ParameterValueError(template.path, seg.param_name or "", value)
        parts.append(text)
    return "/".join(parts)
