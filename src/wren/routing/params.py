"""Path parameter validation.

Matching produces untyped string data; these helpers are where a
caller's expected parameter shape is asserted. Every function here
returns a value — a miss is ``False`` or ``None``, never an exception.
"""

from collections.abc import Mapping
from typing import Any, TypeAlias

from wren.routing.template import PathTemplate

ParamsBag: TypeAlias = Mapping[str, str]


def supports_lookup(candidate: object) -> bool:
    """True when *candidate* supports key lookup and key-set enumeration.

    Mappings qualify, as does any object exposing both ``keys()`` and
    ``__getitem__``. Strings, sequences, numbers and ``None`` do not.
    """
    if isinstance(candidate, Mapping):
        return True
    if candidate is None or isinstance(candidate, (str, bytes, list, tuple)):
        return False
    return callable(getattr(candidate, "keys", None)) and hasattr(candidate, "__getitem__")


def missing_params(template: PathTemplate, candidate: Any) -> tuple[str, ...]:
    """Return required parameter names absent from *candidate*, in template order.

    A candidate that does not support lookup is missing everything.
    """
    if not supports_lookup(candidate):
        return template.required_params
    keys = set(candidate.keys())
    return tuple(name for name in template.required_params if name not in keys)


def is_params(template: PathTemplate, candidate: object, *, strict: bool = True) -> bool:
    """Check whether *candidate* carries every parameter *template* requires.

    Extra keys are ignored — this is a subset check, not an exact-shape
    check. With ``strict`` each required value must also be a non-empty
    ``str``; ``strict=False`` only checks that the keys exist.

    Example::

        is_params(parse_template("/post/:id"), {"id": "42", "extra": "x"})  # True
        is_params(parse_template("/post/:id"), {})                          # False
    """
    if not supports_lookup(candidate):
        return False
    if missing_params(template, candidate):
        return False
    if not strict:
        return True
    for name in template.required_params:
        value = candidate[name]  # type: ignore[index]
        if not isinstance(value, str) or not value:
            return False
    return True


def typed_params(
    template: PathTemplate,
    candidate: object,
    *,
    strict: bool = True,
) -> dict[str, str] | None:
    """Return *candidate* narrowed to *template*'s parameters, or ``None``.

    The result is a new dict holding only the required keys, so extra
    keys observed in the candidate never leak into the typed view.
    """
    if not is_params(template, candidate, strict=strict):
        return None
    return {name: candidate[name] for name in template.required_params}  # type: ignore[index]
