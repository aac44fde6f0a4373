from unittest.mock import patch

import pytest

from motivar.cli import (
    Config,
    check_format,
    check_languages,
    get_random_phrase,
    init_database,
    main,
    print_phrase,
    read_env,
)
from motivar.database import DatabasePhrase
from motivar.phrase import Phrase
from motivar.phrases_br import PHRASES_BR
from motivar.phrases_us import PHRASES_US

LANG_ERROR = "language not supported. Use 'br' or 'us'"


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.delenv("MOTIVAR_LANGUAGE", raising=False)
    return tmp_path


@pytest.fixture
def db(tmp_path):
    database = init_database(tmp_path / "phrases.db")
    yield database
    database.close()


def _lines(phrases):
    return {f"{p.phrase} {p.author}" for p in phrases}


@pytest.mark.parametrize("lang", ["br", "us"])
def test_check_languages_supported(lang):
    assert check_languages(lang) == lang


@pytest.mark.parametrize("lang", ["fr", "ko", "la", "zh"])
def test_check_languages_unsupported(lang):
    with pytest.raises(ValueError) as excinfo:
        check_languages(lang)
    assert str(excinfo.value) == LANG_ERROR


@pytest.mark.parametrize("fmt", ["csv", "json"])
def test_check_format_supported(fmt):
    assert check_format(fmt) == fmt


def test_check_format_unsupported():
    with pytest.raises(ValueError) as excinfo:
        check_format("xml")
    assert str(excinfo.value) == 'format not supported. Use "csv" or "json"'


def test_read_env_overrides(monkeypatch):
    monkeypatch.setenv("MOTIVAR_LANGUAGE", "us")
    assert read_env("br") == "us"


def test_read_env_ignores_unsupported(monkeypatch):
    monkeypatch.setenv("MOTIVAR_LANGUAGE", "fr")
    assert read_env("br") == "br"


def test_read_env_unset(monkeypatch):
    monkeypatch.delenv("MOTIVAR_LANGUAGE", raising=False)
    assert read_env("us") == "us"


def test_config_from_home(tmp_path):
    cfg = Config.from_home(tmp_path)
    assert cfg.directory == tmp_path / ".motivar"
    assert cfg.file == tmp_path / ".motivar" / "motivar.ini"
    assert cfg.data_dir == tmp_path / ".motivar" / "data"


def test_setup_creates_layout(tmp_path):
    cfg = Config.from_home(tmp_path)
    cfg.setup()
    assert cfg.directory.is_dir()
    assert cfg.data_dir.is_dir()
    assert cfg.file.read_text(encoding="utf-8") == "language = br\n"


def test_setup_keeps_existing_file(tmp_path):
    cfg = Config.from_home(tmp_path)
    cfg.directory.mkdir()
    cfg.file.write_text("language = us\n", encoding="utf-8")
    cfg.setup()
    assert cfg.file.read_text(encoding="utf-8") == "language = us\n"
    assert cfg.data_dir.is_dir()


def test_make_conf_replaces_key_and_keeps_others(tmp_path):
    cfg = Config.from_home(tmp_path)
    cfg.directory.mkdir()
    cfg.file.write_text("language = us\ntheme = dark\n[extra]\nx = 1\n", encoding="utf-8")
    cfg.make_conf()
    assert cfg.file.read_text(encoding="utf-8").splitlines() == [
        "language = br",
        "theme = dark",
        "[extra]",
        "x = 1",
    ]


def test_get_random_phrase_skips_first_bundled(db):
    phrases = [Phrase(author="A", phrase="zero"), Phrase(author="B", phrase="one")]
    for _ in range(20):
        assert get_random_phrase("us", phrases, db) == phrases[1]


def test_get_random_phrase_uses_index_from_random(db):
    phrases = [Phrase(phrase=str(n), author="x") for n in range(3)]
    with patch("random.randrange", side_effect=[0, 2]):
        assert get_random_phrase("us", phrases, db) == phrases[2]


def test_get_random_phrase_from_database(db):
    db.insert_phrases(
        [
            DatabasePhrase(
                content_hash="c",
                author="Stored Author",
                phrase="Stored phrase",
                phrase_hash="h",
                language="us",
            )
        ],
        "http://localhost/q.csv",
        "c",
    )
    with patch("random.randrange", side_effect=[1]):
        result = get_random_phrase("us", PHRASES_US, db)
    assert result == Phrase(author="Stored Author", phrase="Stored phrase")


def test_get_random_phrase_too_few_phrases(db):
    with pytest.raises(ValueError):
        get_random_phrase("us", [Phrase(author="A", phrase="only")], db)


def test_print_phrase(capsys):
    print_phrase(Phrase(author="Lao Tzu", phrase="Begin."))
    assert capsys.readouterr().out == "Begin. Lao Tzu\n"


def test_init_database_creates_tables(db):
    assert db.content_hash_exists("nothing") is False


def test_main_shows_us_phrase(home, capsys):
    assert main(["-l", "us"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] in _lines(PHRASES_US[1:])
    assert (home / ".motivar" / "motivar.ini").is_file()
    assert (home / ".motivar" / "data" / "database.db").is_file()


def test_main_defaults_to_br(home, capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines()[-1] in _lines(PHRASES_BR[1:])


def test_main_language_from_env(home, capsys, monkeypatch):
    monkeypatch.setenv("MOTIVAR_LANGUAGE", "us")
    assert main(["-debug"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] in _lines(PHRASES_US[1:])


def test_main_unsupported_language_exits(home, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-l", "fr"])
    assert excinfo.value.code == 1
    assert LANG_ERROR in capsys.readouterr().err


def test_main_help_prints_usage(home, capsys):
    assert main(["-h"]) == 0
    err = capsys.readouterr().err
    assert "Motivar v0.1.0" in err
    assert "Subcommand add-phrases:" in err


def test_main_add_phrases_missing_language_prints_usage(home, capsys):
    assert main(["add-phrases", "-url", "http://localhost/q.csv"]) == 0
    err = capsys.readouterr().err
    assert "  -fmt string" in err
    assert '(default "csv")' in err


def test_main_add_phrases_bad_language_exits(home, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["add-phrases", "-url", "http://localhost/q", "-language", "fr"])
    assert excinfo.value.code == 1
    assert LANG_ERROR in capsys.readouterr().err


def test_main_add_phrases_bad_format_exits(home, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(
            ["add-phrases", "-fmt", "xml", "-url", "http://localhost/q", "-language", "us"]
        )
    assert excinfo.value.code == 1
    assert 'format not supported. Use "csv" or "json"' in capsys.readouterr().err


def test_main_unknown_flag_exits_with_usage(home, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-unknown"])
    assert excinfo.value.code == 2
    assert "Usage:" in capsys.readouterr().err