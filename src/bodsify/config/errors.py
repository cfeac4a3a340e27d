"""Errors raised while reading ``BODSIFY_*`` settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """An environment setting has an unusable value."""

    def __init__(self, variable: str, message: str) -> None:
        super().__init__(f"{variable}: {message}")
        self.variable = variable


class BlankConfigurationError(ConfigurationError):
    def __init__(self, variable: str) -> None:
        super().__init__(variable, "value is blank")


class UnsupportedBodsVersionError(ConfigurationError):
    def __init__(self, variable: str, version: str, supported: Iterable[str]) -> None:
        super().__init__(
            variable,
            f"unsupported BODS version {version!r} (supported: {', '.join(sorted(supported))})",
        )
        self.version = version
