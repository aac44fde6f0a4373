"""Command line entry point: show a motivational phrase or download more."""

from __future__ import annotations

import argparse
import logging
import os
import random
import re
import sqlite3
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from motivar.database import Database
from motivar.fetch import ContentExistsError, FetchError, fetch_and_save
from motivar.logger import new_logger
from motivar.phrase import Phrase
from motivar.phrases_br import PHRASES_BR
from motivar.phrases_us import PHRASES_US

NAME = "motivar"
VERSION = "v0.1.0"
LANGUAGES = ("br", "us")
FORMATS = ("csv", "json")
ENV_LANGUAGE = "MOTIVAR_LANGUAGE"

BANNER = rf"""
             ._ o o
             \_´-)|_
          ,""       \
        ,"  ## |   ಠ ಠ. 
      ," ##   ,-\__    ´.
    ,"       /     ´--._;)
  ,"     ## / Motivar {VERSION}
,"   ##    /

"""

_DIR_MODE = 0o764
_BUNDLED = {"br": PHRASES_BR, "us": PHRASES_US}


@dataclass(frozen=True)
class _Flag:
    name: str
    help: str
    default: str | bool = ""

    @property
    def is_bool(self) -> bool:
        return isinstance(self.default, bool)


_MAIN_FLAGS = (
    _Flag("debug", "Enable debug mode", False),
    _Flag("l", "Choose a language to show quotes [br,us]", "br"),
)
_ADD_FLAGS = (
    _Flag("fmt", "Specify format phrases content [csv,json]", "csv"),
    _Flag("url", "Specify URL to download from"),
    _Flag("language", "The language of phrases [br,us]"),
)
_ADD_COMMAND = "add-phrases"


def _render_defaults(flags: Sequence[_Flag]) -> str:
    lines = []
    for flag in sorted(flags, key=lambda item: item.name):
        head = f"  -{flag.name}" if flag.is_bool else f"  -{flag.name} string"
        body = f"    \t{flag.help}"
        if not flag.is_bool and flag.default:
            body += f' (default "{flag.default}")'
        lines.extend((head, body))
    return "\n".join(lines) + "\n"


def _print_usage() -> None:
    sys.stderr.write(
        BANNER
        + "Usage:\n"
        + _render_defaults(_MAIN_FLAGS)
        + f"Subcommand {_ADD_COMMAND}:\n"
        + _render_defaults(_ADD_FLAGS)
    )


class _FlagParser(argparse.ArgumentParser):
    """Argument parser that reports errors with the program's own usage."""

    def error(self, message: str) -> NoReturn:
        sys.stderr.write(f"{message}\n")
        _print_usage()
        self.exit(2)


def _build_parser(flags: Sequence[_Flag]) -> _FlagParser:
    parser = _FlagParser(prog=NAME, add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "-help", "--help", dest="help", action="store_true")
    for flag in flags:
        names = (f"-{flag.name}", f"--{flag.name}")
        if flag.is_bool:
            parser.add_argument(*names, dest=flag.name, action="store_true")
        else:
            parser.add_argument(*names, dest=flag.name, default=flag.default)
    parser.add_argument("rest", nargs=argparse.REMAINDER)
    return parser


def _die(error: BaseException) -> NoReturn:
    sys.stderr.write(f"{error}\n")
    raise SystemExit(1)


@dataclass(frozen=True)
class Config:
    """Locations of the configuration directory, file and data directory."""

    directory: Path
    file: Path
    data_dir: Path

    @classmethod
    def from_home(cls, home: str | os.PathLike[str]) -> Config:
        """Place the configuration under ``home``."""
        directory = Path(home) / ".motivar"
        return cls(
            directory=directory,
            file=directory / "motivar.ini",
            data_dir=directory / "data",
        )

    def setup(self) -> None:
        """Create the directories and a default configuration file if missing."""
        if not self.directory.exists():
            self.directory.mkdir(mode=_DIR_MODE)
        if not self.file.exists():
            self.file.touch()
            self.make_conf()
        if not self.data_dir.exists():
            self.data_dir.mkdir(mode=_DIR_MODE)

    def make_conf(self) -> None:
        """Set ``language = br`` in the default section of the configuration file."""
        lines = self.file.read_text(encoding="utf-8").splitlines()
        header_at = next(
            (pos for pos, line in enumerate(lines) if line.strip().startswith("[")),
            len(lines),
        )
        default, sections = lines[:header_at], lines[header_at:]
        entry = "language = br"
        for pos, line in enumerate(default):
            stripped = line.strip()
            if stripped.startswith((";", "#")) or not re.search(r"[=:]", stripped):
                continue
            if re.split(r"[=:]", stripped, maxsplit=1)[0].strip() == "language":
                default[pos] = entry
                break
        else:
            default.append(entry)
        self.file.write_text("\n".join(default + sections) + "\n", encoding="utf-8")


def check_languages(lang: str) -> str:
    """Return ``lang`` if it is a supported language, else raise ValueError."""
    if lang not in LANGUAGES:
        raise ValueError("language not supported. Use 'br' or 'us'")
    return lang


def check_format(fmt: str) -> str:
    """Return ``fmt`` if it is a supported content format, else raise ValueError."""
    if fmt not in FORMATS:
        raise ValueError('format not supported. Use "csv" or "json"')
    return fmt


def read_env(language: str) -> str:
    """Return the language from the environment when it is set and supported."""
    env_language = os.environ.get(ENV_LANGUAGE, "")
    if env_language in LANGUAGES:
        return env_language
    return language


def get_random_phrase(
    language: str, phrases: Sequence[Phrase], db: Database | None
) -> Phrase:
    """Pick a phrase from the database half of the time, else from ``phrases``.

    The bundled pick never chooses the first entry, so ``phrases`` must hold
    at least two.
    """
    if db is not None and random.randrange(2) == 1:
        try:
            phrase = db.get_random_phrase(language)
        except (LookupError, sqlite3.Error):
            phrase = None
        if phrase is not None and phrase.phrase:
            return phrase
    if len(phrases) < 2:
        raise ValueError("at least two phrases are needed to choose from")
    return phrases[random.randrange(1, len(phrases))]


def print_phrase(phrase: Phrase) -> None:
    """Write the phrase followed by its author."""
    print(f"{phrase.phrase} {phrase.author}")


def init_database(path: str | os.PathLike[str] | None = None) -> Database:
    """Open the database, check it works and create its tables."""
    db = Database(path)
    try:
        db.connect_and_test()
        db.run_migrations()
    except BaseException:
        db.close()
        raise
    return db


def _add_phrases(db: Database, args: list[str], logger: logging.Logger) -> int:
    opts = _build_parser(_ADD_FLAGS).parse_args(args)
    if opts.help or not opts.fmt or not opts.url or not opts.language:
        _print_usage()
        return 0
    try:
        check_languages(opts.language)
        check_format(opts.fmt)
    except ValueError as exc:
        _die(exc)
    try:
        fetch_and_save(db, opts.fmt, opts.url, opts.language)
    except ContentExistsError as exc:
        logger.warning("%s. Exiting...", exc)
        return 1
    except (FetchError, ValueError, sqlite3.Error) as exc:
        logger.error(str(exc))
        return 1
    return 0


def _show_phrase(db: Database, args: list[str], logger: logging.Logger) -> int:
    opts = _build_parser(_MAIN_FLAGS).parse_args(args)
    if opts.help:
        _print_usage()
        return 0
    language = read_env(opts.l)
    if opts.debug:
        logger.setLevel(logging.DEBUG)
    try:
        check_languages(language)
    except ValueError as exc:
        _die(exc)
    print_phrase(get_random_phrase(language, _BUNDLED[language], db))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    logger = new_logger()
    cfg = Config.from_home(Path.home())
    try:
        cfg.setup()
        db = init_database(cfg.data_dir / "database.db")
    except (OSError, sqlite3.Error) as exc:
        _die(exc)
    with db:
        if args and args[0] == _ADD_COMMAND:
            return _add_phrases(db, args[1:], logger)
        return _show_phrase(db, args, logger)


if __name__ == "__main__":
    sys.exit(main())