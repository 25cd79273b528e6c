from .ansi import (
    Ansi,
    PROMPT_LABEL,
    ASSISTANT_LABEL,
    ERROR_LABEL,
    DOCUMENT_ERROR_LABEL,
    console,
)
from .credentials import acquire_credential
from .documents import read_document
from .log import setup_logging
from .spinner import Spinner

__all__ = [
    "Ansi",
    "PROMPT_LABEL",
    "ASSISTANT_LABEL",
    "ERROR_LABEL",
    "DOCUMENT_ERROR_LABEL",
    "console",
    "acquire_credential",
    "read_document",
    "setup_logging",
    "Spinner",
]
