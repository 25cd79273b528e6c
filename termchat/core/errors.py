"""Exception hierarchy shared by the session engine and the CLI."""

from __future__ import annotations

from typing import Optional


class ChatError(Exception):
    """Base class for every error a submission can surface to the user."""


class ConfigurationError(ChatError):
    """A provider needs something the session was not configured with."""


class TransportError(ChatError):
    """The provider could not be reached (DNS, refused connection, timeout)."""


class ProtocolError(ChatError):
    """The provider answered, but not with a usable chat completion."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DocumentError(ChatError):
    """A document handed to ``/doc`` could not be read."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
