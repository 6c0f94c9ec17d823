"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from wren.errors import ConfigurationError

MISSING_PARAM_POLICIES = frozenset({"raise", "keep"})


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(missing_params="keep", strict_params=False)
    """

    # Template syntax
    marker: str = ":"  # Prefix that turns a segment into a named parameter

    # URL building: "raise" fails fast, "keep" leaves the ":name" token in place
    missing_params: str = "raise"

    # Validation: require parameter values to be non-empty strings
    strict_params: bool = True

    # Run contract checks when the registry is built
    check_contracts: bool = False

    def __post_init__(self) -> None:
        if len(self.marker) != 1 or self.marker == "/":
            msg = f"marker must be a single character other than '/', got {self.marker!r}"
            raise ConfigurationError(msg)
        if self.missing_params not in MISSING_PARAM_POLICIES:
            allowed = ", ".join(sorted(MISSING_PARAM_POLICIES))
            msg = f"missing_params must be one of {allowed}, got {self.missing_params!r}"
            raise ConfigurationError(msg)
