"""SQLite storage for phrases downloaded from the internet."""

from __future__ import annotations

import hashlib
import os
import sqlite3
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable

from motivar.phrase import Phrase

_MAX_INT64 = (1 << 63) - 1

_MIGRATIONS = (
    """
    CREATE TABLE IF NOT EXISTS hashes (
        id INTEGER PRIMARY KEY,
        url TEXT NOT NULL,
        content_hash TEXT NOT NULL,
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    );
    CREATE INDEX IF NOT EXISTS hashes_content_hash ON hashes (content_hash);
    """,
    """
    CREATE TABLE IF NOT EXISTS phrases (
        id INTEGER PRIMARY KEY,
        author TEXT NOT NULL,
        phrase TEXT NOT NULL,
        phrase_hash TEXT NOT NULL UNIQUE,
        language TEXT NOT NULL,
        created_at TIMESTAMP,
        updated_at TIMESTAMP,
        hash_id INTEGER REFERENCES hashes (id)
    );
    CREATE INDEX IF NOT EXISTS phrases_language ON phrases (language);
    """,
)

_INSERT_HASH = (
    "INSERT INTO hashes (id, url, content_hash, created_at, updated_at) "
    "VALUES (?, ?, ?, ?, ?)"
)
_INSERT_PHRASE = (
    "INSERT INTO phrases (id, author, phrase, phrase_hash, language, "
    "created_at, updated_at, hash_id) VALUES (?, ?, ?, ?, ?, ?, ?, ?) "
    "ON CONFLICT(phrase_hash) DO NOTHING"
)


@dataclass
class DatabasePhrase:
    """A phrase ready to be stored, with the hashes that identify it."""

    content_hash: str
    author: str
    phrase: str
    phrase_hash: str
    language: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


def default_database_path() -> Path:
    """Return the database file inside the user's configuration directory."""
    return Path.home() / ".motivar" / "data" / "database.db"


def generate_hash_timestamp() -> int:
    """Return a random non-negative 63-bit identifier seeded by the clock."""
    seed = time.time_ns().to_bytes(8, "big", signed=True) + os.urandom(8)
    digest = hashlib.sha1(seed).digest()
    return int.from_bytes(digest[:8], "big") & _MAX_INT64


class Database:
    """A connection to the phrase database."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else default_database_path()
        self._conn = sqlite3.connect(self.path)

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def connect_and_test(self) -> None:
        """Run a trivial query, raising if the database is unusable."""
        self._conn.execute("SELECT 1;").fetchone()

    def run_migrations(self) -> None:
        """Create the tables and indexes when they are missing."""
        for script in _MIGRATIONS:
            self._conn.executescript(script)

    def insert_phrases(
        self, phrases: Iterable[DatabasePhrase], url: str, content_hash: str
    ) -> None:
        """Store phrases and the content hash they came from in one transaction.

        Phrases whose hash is already stored are skipped.
        """
        phrases = list(phrases)
        if not phrases:
            raise ValueError("no phrases to insert")
        now = datetime.now().isoformat(sep=" ")
        hash_id = generate_hash_timestamp()
        with self._conn:
            self._conn.execute(_INSERT_HASH, (hash_id, url, content_hash, now, now))
            self._conn.executemany(
                _INSERT_PHRASE,
                (
                    (
                        generate_hash_timestamp(),
                        item.author,
                        item.phrase,
                        item.phrase_hash,
                        item.language,
                        now,
                        now,
                        hash_id,
                    )
                    for item in phrases
                ),
            )

    def get_random_phrase(self, language: str) -> Phrase:
        """Return a random stored phrase in ``language``.

        Raises LookupError when there is none.
        """
        row = self._conn.execute(
            "SELECT phrase, author FROM phrases WHERE language = ? "
            "ORDER BY RANDOM() LIMIT 1",
            (language,),
        ).fetchone()
        if row is None:
            raise LookupError(f"no phrases stored for language {language!r}")
        return Phrase(phrase=row[0], author=row[1])

    def content_hash_exists(self, content_hash: str) -> bool:
        """Tell whether content with this hash was already stored."""
        row = self._conn.execute(
            "SELECT 1 FROM hashes WHERE content_hash = ? LIMIT 1", (content_hash,)
        ).fetchone()
        return row is not None

    def close(self) -> None:
        """Close the connection."""
        self._conn.close()