"""Supported chat-completion providers and their fixed configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


@dataclass(frozen=True)
class ProviderConfig:
    label: str
    base_url: str
    requires_auth: bool
    default_model: str
    # Environment variable that may override ``base_url``.
    base_url_env: str

    def resolve_base_url(self, env: Optional[Mapping[str, str]] = None) -> str:
        env = os.environ if env is None else env
        return env.get(self.base_url_env) or self.base_url


class ProviderKind(Enum):
    """Closed set of backends. Both speak the OpenAI chat-completions schema."""

    OPENAI = ProviderConfig(
        label="OpenAI",
        base_url="https://api.openai.com/v1",
        requires_auth=True,
        default_model="gpt-3.5-turbo",
        base_url_env="OPENAI_BASE_URL",
    )
    OLLAMA = ProviderConfig(
        label="Ollama",
        base_url="http://localhost:11434/v1",
        requires_auth=False,
        default_model="llama2",
        base_url_env="OLLAMA_BASE_URL",
    )

    @property
    def config(self) -> ProviderConfig:
        return self.value

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def default_model(self) -> str:
        return self.value.default_model

    def toggled(self) -> "ProviderKind":
        return ProviderKind.OLLAMA if self is ProviderKind.OPENAI else ProviderKind.OPENAI

    @classmethod
    def from_name(cls, name: str) -> "ProviderKind":
        """Look up a provider by case-insensitive name (``openai``, ``ollama``)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(kind.name.lower() for kind in cls)
            raise ValueError(f"Unknown provider '{name}' (expected one of: {choices})") from None
