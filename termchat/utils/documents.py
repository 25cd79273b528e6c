"""Reading documents submitted with ``/doc``."""

from pathlib import Path
from typing import Union

from ..core.errors import DocumentError


def read_document(path: Union[str, Path]) -> str:
    """Return the full text of *path*, decoded as UTF-8."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DocumentError(f"File not found: {path}", str(path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"Could not read {path}: {exc}", str(path)) from exc
