"""Reading phrase collections stored as JSON files in a directory."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from motivar.phrase import Phrase

_log = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _decode(content: bytes, source: Path) -> Iterator[Phrase]:
    """Yield the phrases of one file; content that is not an array yields none."""
    try:
        data = json.loads(content)
    except ValueError as exc:
        _log.warning("skipping %s: %s", source, exc)
        return
    if not isinstance(data, list):
        _log.warning("skipping %s: expected a JSON array", source)
        return
    for item in data:
        if not isinstance(item, dict):
            continue
        lowered = {str(key).lower(): value for key, value in item.items()}
        yield Phrase(
            author=_text(lowered.get("author")),
            phrase=_text(lowered.get("quote")),
        )


def read_phrases_from_directory(path: str | os.PathLike[str]) -> list[Phrase]:
    """Read every file in ``path``, in name order, as a JSON array of quotes.

    Each object carries a ``quote`` and an ``author``; keys are matched
    without regard to case. A missing directory, or an entry that cannot be
    read as a file, raises OSError.
    """
    directory = Path(path)
    phrases: list[Phrase] = []
    for entry in sorted(directory.iterdir(), key=lambda item: item.name):
        phrases.extend(_decode(entry.read_bytes(), entry))
    return phrases