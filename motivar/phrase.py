"""The phrase record shared by the bundled data, the database and fetching."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_FIELDS = ("author", "phrase", "language")


@dataclass(frozen=True)
class Phrase:
    """A quote together with its author and, optionally, its language."""

    author: str = ""
    phrase: str = ""
    language: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Phrase:
        """Build a phrase from a decoded JSON object.

        Missing keys and null values leave the field empty and unknown keys
        are ignored. A value of any other type than a string is an error.
        """
        if not isinstance(data, Mapping):
            raise TypeError(
                f"expected a mapping, got {type(data).__name__}"
            )
        values: dict[str, str] = {}
        for name in _FIELDS:
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise TypeError(
                    f"field {name!r} must be a string, got {type(value).__name__}"
                )
            values[name] = value
        return cls(**values)