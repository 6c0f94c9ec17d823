"""Route contracts — startup validation of the registry against its handlers.

Validates that the registry is internally consistent: every handler
that declares the template it expects is registered under that
template, every callable handler can receive the parameters its
template produces, and no entry is unreachable because an earlier
entry always wins.

Usage::

    result = check_registry(registry)
    for issue in result.issues:
        print(f"{issue.severity}: {issue.message}")

    # Or fail at startup:
    PathRegistry(routes, config=RouterConfig(check_contracts=True))

"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from wren.routing.template import PathTemplate

if TYPE_CHECKING:
    from wren.routing.registry import PathRegistry, RegistryEntry

logger = logging.getLogger("wren.contracts")

# ---------------------------------------------------------------------------
# Issue types
# ---------------------------------------------------------------------------


class Severity(Enum):
    """Severity of a contract validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class ContractIssue:
    """A single validation issue found during contract checking."""

    severity: Severity
    category: str
    message: str
    template: str | None = None
    details: str | None = None


# ---------------------------------------------------------------------------
# Contract declarations (for handler metadata)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RouteContract:
    """Declares which template a handler expects to be registered under.

    Attached to handlers via ``@expects()``.
    """

    template: str
    description: str = ""


def expects(template: str, *, description: str = "") -> Any:
    """Declare the template a handler expects its params to come from.

    Usage::

        @expects("/post/:id")
        def post(id: str):
            ...

    """
    rc = RouteContract(template=template, description=description)

    def decorator(func: Any) -> Any:
        func._wren_contract = rc
        return func

    return decorator


def get_contract(handler: Any) -> RouteContract | None:
    """Return the contract attached to *handler*, if any."""
    return getattr(handler, "_wren_contract", None)


# ---------------------------------------------------------------------------
# Template relations
# ---------------------------------------------------------------------------


def covers(earlier: PathTemplate, later: PathTemplate) -> bool:
    """True when every path matched by *later* is also matched by *earlier*.

    A parameter segment covers any parameter or non-empty literal; a
    literal segment covers only the identical literal.
    """
    if len(earlier.segments) != len(later.segments):
        return False
    for a, b in zip(earlier.segments, later.segments, strict=True):
        if a.is_param:
            if not b.is_param and not b.value:
                return False
        elif b.is_param or a.value != b.value:
            return False
    return True


def _accepts_keywords(handler: Any, names: tuple[str, ...]) -> list[str]:
    """Return the names *handler* cannot take as keyword arguments.

    Handlers whose signature cannot be inspected are assumed to accept
    everything.
    """
    try:
        sig = inspect.signature(handler)
    except (TypeError, ValueError):
        return []

    params = sig.parameters.values()
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params):
        return []
    keyword_kinds = (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
    accepted = {p.name for p in params if p.kind in keyword_kinds}
    return [name for name in names if name not in accepted]


# ---------------------------------------------------------------------------
# Checker
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class CheckResult:
    """Result of a registry contract check."""

    issues: list[ContractIssue] = field(default_factory=list)
    templates_checked: int = 0
    contracts_found: int = 0

    @property
    def errors(self) -> list[ContractIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ContractIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            f"Checked {self.templates_checked} templates, "
            f"found {self.contracts_found} handler contracts.",
        ]
        if self.ok and not self.warnings:
            lines.append("No issues found.")
        elif self.ok:
            lines.append(f"No errors. {len(self.warnings)} warning(s).")
        else:
            lines.append(f"{len(self.errors)} error(s), {len(self.warnings)} warning(s).")
        for issue in self.issues:
            prefix = issue.severity.value.upper()
            loc = f" in {issue.template}" if issue.template else ""
            lines.append(f"  [{prefix}] {issue.message}{loc}")
            if issue.details:
                lines.append(f"           {issue.details}")
        return "\n".join(lines)


def _check_contract(entry: RegistryEntry, registry: PathRegistry) -> ContractIssue | None:
    rc = get_contract(entry.handler)
    if rc is None or rc.template == entry.path:
        return None
    hint = "" if rc.template in registry else f" ('{rc.template}' is not registered)"
    return ContractIssue(
        severity=Severity.ERROR,
        category="contract",
        message=(
            f"Handler {_handler_name(entry.handler)} expects '{rc.template}' "
            f"but is registered under '{entry.path}'.{hint}"
        ),
        template=entry.path,
    )


def _handler_name(handler: Any) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


def check_registry(registry: PathRegistry) -> CheckResult:
    """Validate the contracts of every entry in *registry*.

    Checks:
    1. **Handler contracts**: a handler decorated with ``@expects`` is
       registered under the template it declares.
    2. **Signatures**: a callable handler accepts every parameter of its
       template as a keyword argument.
    3. **Shadowed entries**: no entry is fully covered by an earlier one
       (warning — it can never be selected).
    4. **Trailing slashes**: templates that differ only by a trailing
       slash (info — usually a typo).

    Returns:
        CheckResult with issues and statistics.

    """
    result = CheckResult(templates_checked=len(registry))
    entries = registry.entries

    for index, entry in enumerate(entries):
        # 1. Declared contracts
        if get_contract(entry.handler) is not None:
            result.contracts_found += 1
        issue = _check_contract(entry, registry)
        if issue is not None:
            result.issues.append(issue)

        # 2. Handler signatures
        if callable(entry.handler) and entry.template.required_params:
            rejected = _accepts_keywords(entry.handler, entry.template.required_params)
            if rejected:
                result.issues.append(ContractIssue(
                    severity=Severity.ERROR,
                    category="signature",
                    message=(
                        f"Handler {_handler_name(entry.handler)} cannot accept "
                        f"parameter(s) {', '.join(rejected)} as keyword arguments."
                    ),
                    template=entry.path,
                ))

        # 3. Shadowing by an earlier entry
        for earlier in entries[:index]:
            if covers(earlier.template, entry.template):
                result.issues.append(ContractIssue(
                    severity=Severity.WARNING,
                    category="shadowed",
                    message=(
                        f"Template '{entry.path}' is unreachable: "
                        f"'{earlier.path}' is registered first and matches every path it does."
                    ),
                    template=entry.path,
                    details="Register the more specific template first.",
                ))
                break

        # 4. Trailing-slash twins
        if entry.path != "/" and entry.path.endswith("/"):
            twin = entry.path[:-1]
            if twin in registry:
                result.issues.append(ContractIssue(
                    severity=Severity.INFO,
                    category="trailing-slash",
                    message=f"Templates '{twin}' and '{entry.path}' differ only by a trailing slash.",
                    template=entry.path,
                ))

    logger.debug(
        "Contract check: %d template(s), %d issue(s)", result.templates_checked, len(result.issues)
    )
    return result
