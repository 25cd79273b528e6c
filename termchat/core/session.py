"""Session state: conversation history plus the active provider and model."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..utils.documents import read_document
from .client import ProviderClient
from .errors import ChatError
from .history import MessageStore, Turn
from .providers import ProviderKind

logger = logging.getLogger(__name__)

DOCUMENT_PROMPT = "Please analyze this document:\n\n"


class ChatSession:
    """A single in-memory conversation bound to one provider at a time.

    A failed submission keeps its user turn in the history; the next
    request is sent with that unanswered turn still in place.
    """

    def __init__(
        self,
        provider: ProviderKind = ProviderKind.OPENAI,
        credential: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[ProviderClient] = None,
        reader: Callable[[str], str] = read_document,
    ) -> None:
        self.history = MessageStore()
        self.credential = credential
        self.client = client or ProviderClient()
        self._reader = reader
        self._provider = provider
        self._model = model or provider.default_model

    @property
    def provider(self) -> ProviderKind:
        return self._provider

    @property
    def model(self) -> str:
        return self._model

    def submit_turn(self, content: str) -> str:
        """Send *content* as a user turn and return the assistant's reply."""
        self.history.append(Turn.user(content))
        logger.debug(
            "Submitting turn %d to %s (%s)", len(self.history), self._provider.label, self._model
        )
        try:
            reply = self.client.send(
                self._provider.config,
                self._model,
                self.history.snapshot(),
                credential=self.credential,
            )
        except ChatError as exc:
            logger.warning("Submission to %s failed: %s", self._provider.label, exc)
            raise
        self.history.append(Turn.assistant(reply))
        return reply

    def submit_document(self, path: str) -> str:
        """Ask the model to analyze the whole text of the file at *path*."""
        content = self._reader(path)
        return self.submit_turn(DOCUMENT_PROMPT + content)

    def switch_provider(self) -> ProviderKind:
        """Toggle to the other provider and reset the model to its default."""
        new_provider = self._provider.toggled()
        self._provider, self._model = new_provider, new_provider.default_model
        logger.info("Switched to %s (model=%s)", new_provider.label, self._model)
        return new_provider
