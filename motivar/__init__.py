"""Random motivational quotes on the command line, with built-in collections and a SQLite store for downloaded ones."""

__version__ = "0.1.0"