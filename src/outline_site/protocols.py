"""Protocols for dependency injection of the Outline API client."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ApiProtocol(Protocol):
    """Protocol for Outline API clients."""

    def call(self, path: str, args: dict[str, Any]) -> dict[str, Any]:
        """Invoke an API endpoint and return the JSON response."""
        ...
