"""Downloading phrase collections in CSV or JSON form and storing them."""

from __future__ import annotations

import csv
import hashlib
import io
import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any

from motivar.database import Database, DatabasePhrase
from motivar.phrase import Phrase

BODY_MAX_LENGTH = 200_000
_CHUNK_SIZE = 100

_log = logging.getLogger(__name__)


class FetchError(Exception):
    """Downloading or validating remote content failed."""


class ContentExistsError(FetchError):
    """The downloaded content was already stored."""


def generate_hash(data: str | bytes) -> str:
    """Return the hex SHA-256 digest of ``data``."""
    raw = data.encode("utf-8") if isinstance(data, str) else data
    return hashlib.sha256(raw).hexdigest()


def _parse_csv(body: bytes) -> list[list[str]]:
    text = body.decode("utf-8", errors="replace")
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    rows: list[list[str]] = []
    width: int | None = None
    try:
        for row in reader:
            if not row:
                continue
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise ValueError(
                    f"record on line {reader.line_num}: wrong number of fields"
                )
            rows.append(row)
    except csv.Error as exc:
        raise ValueError(f"invalid CSV: {exc}") from exc
    return rows


def _parse_json_objects(body: bytes) -> list[dict[str, Any] | None]:
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, list) or not all(
        item is None or isinstance(item, dict) for item in data
    ):
        raise ValueError("JSON content must be an array of objects")
    return data


@dataclass
class Request:
    """Downloaded content and what has been parsed out of it."""

    body: bytes
    body_hash: str = ""
    csv_content: list[list[str]] = field(default_factory=list)

    def is_csv(self) -> bool:
        """Tell whether the body is well-formed CSV."""
        try:
            _parse_csv(self.body)
        except ValueError:
            return False
        return True

    def is_json(self) -> bool:
        """Tell whether the body is a JSON array of objects."""
        try:
            _parse_json_objects(self.body)
        except ValueError:
            return False
        return True

    def convert_to_csv(self) -> list[list[str]]:
        """Parse the body as CSV records, raising ValueError when malformed."""
        return _parse_csv(self.body)

    def _to_database_phrase(self, phrase: Phrase, language: str) -> DatabasePhrase:
        return DatabasePhrase(
            content_hash=self.body_hash,
            author=phrase.author,
            phrase=phrase.phrase,
            phrase_hash=generate_hash(phrase.phrase),
            language=language,
        )

    def csv_to_database_object(self, language: str) -> list[DatabasePhrase]:
        """Turn the parsed CSV records into phrases to store.

        The first record is a header and is skipped. Records must hold an
        author and a phrase; others are left out.
        """
        if not language:
            raise ValueError("url or language is empty")
        result = []
        for line in self.csv_content[1:]:
            if len(line) != 2:
                continue
            author, text = line
            if not author or not text:
                _log.debug(
                    'Author or phrase is empty: author="%s" phrase="%s"', author, text
                )
                continue
            result.append(
                self._to_database_phrase(Phrase(author=author, phrase=text), language)
            )
        return result

    def json_to_database_object(self, language: str) -> list[DatabasePhrase]:
        """Turn the JSON body into phrases to store.

        Keys are matched without regard to case; objects without an author
        or a phrase are left out.
        """
        if not language:
            raise ValueError("url or language is empty")
        result = []
        for item in _parse_json_objects(self.body):
            lowered = {key.lower(): value for key, value in (item or {}).items()}
            try:
                phrase = Phrase.from_mapping(lowered)
            except TypeError as exc:
                raise ValueError(f"invalid phrase object: {exc}") from exc
            if not phrase.phrase or not phrase.author:
                _log.info(
                    'Author or phrase is empty: author="%s" phrase="%s"',
                    phrase.author,
                    phrase.phrase,
                )
                continue
            result.append(self._to_database_phrase(phrase, language))
        return result


def fetch(url: str) -> tuple[bytes, str]:
    """Download ``url`` and return its body with the body's hash.

    Raises FetchError on a failed request, a status other than 200 or a
    body longer than BODY_MAX_LENGTH bytes.
    """
    try:
        response = urllib.request.urlopen(url)
    except urllib.error.HTTPError as exc:
        raise FetchError(f"fetching {url}: {exc.code}") from exc
    except (urllib.error.URLError, ValueError, OSError) as exc:
        raise FetchError(f"fetching {url}: {exc}") from exc
    with response:
        if response.status != 200:
            raise FetchError(f"fetching {url}: {response.status}")
        chunks = []
        length = 0
        while chunk := response.read(_CHUNK_SIZE):
            chunks.append(chunk)
            length += len(chunk)
            if length > BODY_MAX_LENGTH:
                raise FetchError(
                    f"the body ({length}) exceeded the limit ({BODY_MAX_LENGTH})"
                )
    body = b"".join(chunks)
    return body, generate_hash(body)


def _ensure_new(db: Database, content_hash: str) -> None:
    _log.info("Checking if hash content exists in database.")
    if db.content_hash_exists(content_hash):
        raise ContentExistsError("This content already exists in the database")


def fetch_and_save(db: Database, kind: str, url: str, language: str) -> None:
    """Download phrases of format ``kind`` from ``url`` and store them."""
    if not kind or not url or not language:
        raise ValueError("kind, url or language is empty")
    if kind not in ("csv", "json"):
        raise ValueError("unknown kind")

    _log.info("Fetching %s", url)
    body, content_hash = fetch(url)
    _log.debug("Hash of content: %s", content_hash)
    request = Request(body=body, body_hash=content_hash)

    _log.info("Validating content format...")
    if kind == "csv":
        if not request.is_csv():
            raise FetchError("invalid CSV format")
        _log.info("Trying to convert bytes to CSV format...")
        request.csv_content = request.convert_to_csv()
        _ensure_new(db, content_hash)
        _log.info("Parse CSV content to database object.")
        phrases = request.csv_to_database_object(language)
    else:
        if not request.is_json():
            raise FetchError("invalid JSON format")
        _ensure_new(db, content_hash)
        _log.info("Trying to convert to database Object.")
        phrases = request.json_to_database_object(language)

    _log.info("Inserting in the database...")
    db.insert_phrases(phrases, url, content_hash)
    _log.info("OK, phrases into database.")