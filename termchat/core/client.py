"""OpenAI-compatible chat-completions client shared by every provider."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

import openai
from openai import OpenAI  # type: ignore

from .errors import ConfigurationError, ProtocolError, TransportError
from .history import Turn
from .providers import ProviderConfig

logger = logging.getLogger(__name__)

UNAUTHENTICATED_KEY = "unused"


class ProviderClient:
    """Sends a conversation to a provider and returns the first reply.

    Every provider is addressed through the same ``/chat/completions``
    request and response shape; only the base URL, the credential
    requirement and the default model differ. One SDK client is kept per
    provider configuration.
    """

    def __init__(self, client_factory: Callable[..., Any] = OpenAI):
        self._client_factory = client_factory
        self._clients: Dict[ProviderConfig, Any] = {}

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _client_for(self, config: ProviderConfig, credential: Optional[str]) -> Any:
        client = self._clients.get(config)
        if client is None:
            kwargs: Dict[str, Any] = {
                "base_url": config.resolve_base_url(),
                "max_retries": 0,
            }
            if config.requires_auth:
                kwargs["api_key"] = credential
            else:
                # The SDK insists on a key; never send it.
                kwargs["api_key"] = UNAUTHENTICATED_KEY
                kwargs["default_headers"] = {"Authorization": openai.Omit()}
            client = self._client_factory(**kwargs)
            self._clients[config] = client
        return client

    @staticmethod
    def _extract_reply(response: Any) -> str:
        """Return the content of the first choice in *response*."""
        choices = getattr(response, "choices", None)
        if not isinstance(choices, (list, tuple)):
            raise ProtocolError(f"Unexpected response body: {response!r}")
        if not choices:
            raise ProtocolError("Provider returned no choices")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            raise ProtocolError("First choice carries no message content")
        return content

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def send(
        self,
        config: ProviderConfig,
        model: str,
        turns: Sequence[Turn],
        credential: Optional[str] = None,
    ) -> str:
        """POST ``{model, messages}`` to *config*'s endpoint and return the reply."""
        if config.requires_auth and not (credential and credential.strip()):
            raise ConfigurationError(f"{config.label} requires an API key but none is configured")

        messages: List[Dict[str, str]] = [turn.as_message() for turn in turns]
        try:
            client = self._client_for(config, credential)
        except openai.OpenAIError as exc:
            raise ConfigurationError(f"Could not set up {config.label} client: {exc}") from exc
        logger.debug(
            "POST %s/chat/completions model=%s messages=%d",
            config.resolve_base_url(),
            model,
            len(messages),
        )

        try:
            response = client.chat.completions.create(model=model, messages=messages)
        except openai.APIConnectionError as exc:
            raise TransportError(f"Could not reach {config.label}: {exc}") from exc
        except openai.APIStatusError as exc:
            raise ProtocolError(
                f"{config.label} returned HTTP {exc.status_code}: {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except (openai.OpenAIError, ValueError) as exc:
            raise ProtocolError(f"Invalid response from {config.label}: {exc}") from exc

        return self._extract_reply(response)
