"""Acquire the OpenAI API key once at startup."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Mapping, Optional

from .ansi import console

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"

_RC_PATTERN = re.compile(r"(?:export\s+)?OPENAI_API_KEY\s*=\s*['\"]?([^'\"\n]+)['\"]?")


def _key_from_rc(rc_path: Path) -> Optional[str]:
    """Return a key exported in a shell rc file (convenience for macOS users)."""
    if not rc_path.exists():
        return None
    match = _RC_PATTERN.search(rc_path.read_text())
    return match.group(1).strip() if match else None


def acquire_credential(
    env: Optional[Mapping[str, str]] = None,
    rc_path: Optional[Path] = None,
    interactive: bool = True,
) -> Optional[str]:
    """Return the API key from the environment, ``~/.zshrc`` or a prompt.

    The value is opaque to the rest of the application. ``None`` means no
    key was supplied; providers that need one will refuse requests.
    """
    env = os.environ if env is None else env

    api_key = env.get(API_KEY_ENV)
    if api_key:
        return api_key.strip()

    api_key = _key_from_rc(rc_path or Path.home() / ".zshrc")
    if api_key:
        logger.debug("Using %s found in shell rc file", API_KEY_ENV)
        return api_key

    if not interactive:
        return None

    try:
        api_key = console.input("OpenAI API key: ", password=True)
    except (EOFError, KeyboardInterrupt):
        console.print()
        return None
    return api_key.strip() or None
