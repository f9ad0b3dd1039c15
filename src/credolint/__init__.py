"""credolint - run Credo on Elixir documents and publish editor diagnostics."""

__version__ = "0.1.0"
