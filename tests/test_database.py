import sqlite3
from pathlib import Path

import pytest

from motivar.database import (
    Database,
    DatabasePhrase,
    default_database_path,
    generate_hash_timestamp,
)
from motivar.phrase import Phrase


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "database.db"


@pytest.fixture
def db(db_path):
    database = Database(db_path)
    database.connect_and_test()
    database.run_migrations()
    yield database
    database.close()


def _item(phrase, author="Ada", language="us", content_hash="content"):
    return DatabasePhrase(
        content_hash=content_hash,
        author=author,
        phrase=phrase,
        phrase_hash="hash-" + phrase,
        language=language,
    )


def _count(path, table):
    with sqlite3.connect(path) as conn:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def test_default_path_is_under_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert default_database_path() == Path(tmp_path) / ".motivar" / "data" / "database.db"


def test_hash_timestamp_is_non_negative_63_bit():
    values = {generate_hash_timestamp() for _ in range(200)}
    assert all(0 <= value < 2**63 for value in values)
    assert len(values) == 200


def test_migrations_are_idempotent(db, db_path):
    db.run_migrations()
    db.insert_phrases([_item("Keep going.")], "http://localhost/a", "content")
    assert db.get_random_phrase("us") == Phrase(author="Ada", phrase="Keep going.")
    assert db.content_hash_exists("content") is True
    assert _count(db_path, "phrases") == 1


def test_insert_and_read_back(db):
    db.insert_phrases([_item("Keep going.")], "http://localhost/a", "content")
    assert db.get_random_phrase("us") == Phrase(author="Ada", phrase="Keep going.")


def test_insert_records_url_and_hash(db, db_path):
    assert db.content_hash_exists("abc") is False
    db.insert_phrases([_item("One."), _item("Two.")], "http://localhost/a", "abc")
    assert db.content_hash_exists("abc") is True
    with sqlite3.connect(db_path) as conn:
        rows = conn.execute("SELECT url, content_hash FROM hashes").fetchall()
        hash_ids = {r[0] for r in conn.execute("SELECT hash_id FROM phrases")}
        ids = {r[0] for r in conn.execute("SELECT id FROM hashes")}
    assert rows == [("http://localhost/a", "abc")]
    assert hash_ids == ids


def test_empty_insert_is_an_error(db):
    with pytest.raises(ValueError, match="no phrases to insert"):
        db.insert_phrases([], "http://localhost/a", "content")


def test_duplicate_phrase_hash_is_skipped(db, db_path):
    db.insert_phrases([_item("Same.")], "http://localhost/a", "first")
    db.insert_phrases([_item("Same.", author="Bob")], "http://localhost/b", "second")
    seen = {db.get_random_phrase("us") for _ in range(10)}
    assert seen == {Phrase(author="Ada", phrase="Same.")}
    assert db.content_hash_exists("first") is True
    assert db.content_hash_exists("second") is True
    assert _count(db_path, "phrases") == 1
    assert _count(db_path, "hashes") == 2


def test_content_hash_exists(db):
    assert db.content_hash_exists("content") is False
    db.insert_phrases([_item("Keep going.")], "http://localhost/a", "content")
    assert db.content_hash_exists("content") is True


def test_random_phrase_filters_language(db):
    db.insert_phrases([_item("Vai.", language="br")], "http://localhost/a", "c")
    assert db.get_random_phrase("br").phrase == "Vai."
    with pytest.raises(LookupError):
        db.get_random_phrase("us")


def test_random_phrase_comes_from_stored_set(db):
    texts = {"One.", "Two.", "Three."}
    db.insert_phrases([_item(text) for text in texts], "http://localhost/a", "c")
    seen = {db.get_random_phrase("us").phrase for _ in range(30)}
    assert seen <= texts


def test_closed_database_fails(db_path):
    database = Database(db_path)
    database.close()
    with pytest.raises(sqlite3.ProgrammingError):
        database.connect_and_test()


def test_context_manager_closes(db_path):
    with Database(db_path) as database:
        database.run_migrations()
    with pytest.raises(sqlite3.ProgrammingError):
        database.content_hash_exists("x")