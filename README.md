# motivar

A small command-line tool that prints a random motivational quote followed by
its author. It comes with built-in collections in Brazilian Portuguese (`br`)
and English (`us`). You can add more quotes from CSV or JSON files published on
the web. Quotes you add are kept in a local SQLite database.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Showing a quote

```
motivar
```

This prints one quote in Brazilian Portuguese, the default language. To choose
the language, pass `-l`:

```
motivar -l us
```

The supported languages are `br` and `us`. Any other value ends the program
with an error. If the `MOTIVAR_LANGUAGE` environment variable is set to `br`
or `us`, it takes precedence over `-l`. Other values of the variable are
ignored.

Each run picks a quote at random. About half the time the program asks the
database for a quote in the chosen language. Otherwise it takes one from the
built-in collection. If the database has no quote in that language, the
built-in collection is used.

`--debug` (or `-debug`) lowers the log level so that debug messages are shown:

```
motivar --debug
```

`-h`, `-help` or `--help` prints the usage text, with the options of both the
main command and the subcommand.

## Adding quotes

The `add-phrases` subcommand downloads a file, checks its format and stores its
quotes in the database:

```
motivar add-phrases -fmt csv -url https://example.com/quotes.csv -language us
motivar add-phrases -fmt json -url https://example.com/quotes.json -language br
```

- `-fmt` is the format of the file: `csv` (the default) or `json`.
- `-url` is the address to download from. It is required.
- `-language` is the language of the quotes, `br` or `us`. It is required.

If `-url` or `-language` is missing, the usage text is printed and nothing is
downloaded.

**CSV.** The first line is a header and is not imported. Every line must have
the same number of fields as the header, or the file is rejected as invalid
CSV. Blank lines are ignored. Quotes are taken only from lines with exactly two
fields, the author first and the quote second. Lines where the author or the
quote is empty are skipped.

**JSON.** The file must be an array of objects. Each object has an `author`
and a `phrase` key. Keys are matched without regard to case, and other keys
are ignored. Objects where either value is missing or empty are skipped.

**Rules for every download:**

- The server must answer with status 200.
- A body larger than 200,000 bytes is rejected.
- Each imported file is recorded by the SHA-256 hash of its content. The same
  content cannot be imported twice. A second attempt logs a warning and exits
  with status 1.
- A quote whose text is already in the database is not stored again.
- If a file yields no usable quote, nothing is stored and an error is reported.

Download, format and database errors are logged, and the command exits with
status 1.

Log lines go to standard output in `key=value` form, with a timestamp, the
level, the source file and line, and the message.

## Files

On first run motivar creates these files in your home directory:

- `~/.motivar/`, the configuration directory, together with its `data/`
  subdirectory
- `~/.motivar/motivar.ini`, a configuration file that holds
  `language = br`
- `~/.motivar/data/database.db`, the SQLite database that holds added quotes

## Using it as a library

- `motivar.phrase.Phrase` is a quote record with `author`, `phrase` and
  `language` fields. `Phrase.from_mapping` builds one from a decoded JSON
  object.
- `motivar.phrases_br.PHRASES_BR` and `motivar.phrases_us.PHRASES_US` are the
  built-in collections.
- `motivar.database.Database` opens the SQLite file and offers these methods:
  - `run_migrations`
  - `insert_phrases`
  - `get_random_phrase`, which raises `LookupError` when there is no match
  - `content_hash_exists`
  - `close`

  It can also be used as a context manager.
- `motivar.fetch.fetch_and_save(db, kind, url, language)` does what
  `add-phrases` does. `fetch` downloads a body and returns it with its hash.
  `Request` parses a downloaded body. Errors are raised as `FetchError`, or
  `ContentExistsError` for content already stored, or `ValueError`.
- `motivar.loader.read_phrases_from_directory(path)` reads every file in a
  directory, in name order. Each file is read as a JSON array of objects with
  `quote` and `author` keys. Files that are not such an array are skipped with
  a warning.
- `motivar.cli.main(argv=None)` runs the command and returns its exit status.

## What it does not do

- The configuration file is created but never read. Choose the language with
  `-l` or `MOTIVAR_LANGUAGE`.
- There is no command to list, edit or delete stored quotes. There is also no
  command to import quotes from a local file. Downloads go over the network
  only.
- The built-in collections are fixed. `read_phrases_from_directory` is not
  used by the command.