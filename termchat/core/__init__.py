from .errors import (
    ChatError,
    ConfigurationError,
    DocumentError,
    ProtocolError,
    TransportError,
)
from .history import MessageStore, Role, Turn
from .providers import ProviderConfig, ProviderKind
from .session import ChatSession, DOCUMENT_PROMPT

__all__ = [
    "ChatError",
    "ConfigurationError",
    "DocumentError",
    "ProtocolError",
    "TransportError",
    "MessageStore",
    "Role",
    "Turn",
    "ProviderConfig",
    "ProviderKind",
    "ChatSession",
    "DOCUMENT_PROMPT",
]
