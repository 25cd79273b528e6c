"""Interactive terminal chat with OpenAI or a local Ollama server.

Commands
--------
    /doc <filepath>   – send the whole file to the model for analysis
    /switch           – toggle between OpenAI and Ollama (the model resets to
                        that provider's default; the conversation is kept)
    /quit             – exit

Everything else you type is sent as a chat turn. The full conversation is
resent with every request and lives only as long as the process.

Environment variables
---------------------
* OPENAI_API_KEY – OpenAI API key (prompted for when missing)
* OPENAI_BASE_URL / OLLAMA_BASE_URL – override a provider's base URL
* TERMCHAT_LOG_LEVEL – logging level for diagnostics on stderr

Run `termchat` or `python -m termchat`.
"""
# Re-export useful symbols for convenience
from .core import (
    ChatError,
    ChatSession,
    MessageStore,
    ProviderKind,
    Role,
    Turn,
)
from .core.client import ProviderClient
from .cli import ChatCLI, run_cli

__all__ = [
    "ChatError",
    "ChatSession",
    "MessageStore",
    "ProviderKind",
    "Role",
    "Turn",
    "ProviderClient",
    "ChatCLI",
    "run_cli",
]
