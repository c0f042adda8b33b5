"""Error types raised by the Raindrop MCP Server."""

from typing import Optional


class RaindropError(Exception):
    """Base class for every failure surfaced to the calling agent."""


class ConfigurationError(RaindropError):
    """Required configuration (the API token) is missing."""


class ValidationError(RaindropError):
    """Tool arguments do not satisfy the tool's input contract.

    Holds every violation found, as ``(path, message)`` pairs, so the caller
    can fix all of them in one go.
    """

    def __init__(self, violations: list[tuple[str, str]]):
        self.violations = violations
        details = ", ".join(f"{path}: {message}" for path, message in violations)
        super().__init__(f"Invalid arguments: {details}")


class RemoteError(RaindropError):
    """The Raindrop API answered with a non-success status."""

    def __init__(self, status_text: str, status_code: Optional[int] = None):
        self.status_text = status_text
        self.status_code = status_code
        super().__init__(f"Raindrop API error: {status_text}")


class UnknownToolError(RaindropError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
