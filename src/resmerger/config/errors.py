"""Errors raised for unusable ``RESMERGER_*`` settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when an environment setting is present but unusable."""

    def __init__(self, variable: str, problem: str) -> None:
        super().__init__(f"{variable}: {problem}")
        self.variable = variable


class MissingConfigurationError(ConfigurationError):
    """Raised when a required setting is unset or blank."""

    def __init__(self, variable: str) -> None:
        super().__init__(variable, "required but not set")
