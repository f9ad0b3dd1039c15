"""In-memory diagnostic collection keyed by document identity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from credolint.lint.models import Diagnostic


class DiagnosticCollection:
    """Current diagnostics per document.

    Every :meth:`set` replaces the document's entry wholesale; entries are
    never merged.
    """

    def __init__(self, name: str = "credo") -> None:
        self.name = name
        self._entries: dict[str, tuple[Diagnostic, ...]] = {}
        self._disposed = False

    def set(self, uri: str, diagnostics: Iterable[Diagnostic]) -> None:
        if self._disposed:
            raise RuntimeError(f"Diagnostic collection '{self.name}' is disposed")
        self._entries[uri] = tuple(diagnostics)

    def get(self, uri: str) -> tuple[Diagnostic, ...]:
        return self._entries.get(uri, ())

    def delete(self, uri: str) -> None:
        self._entries.pop(uri, None)

    def clear(self) -> None:
        self._entries.clear()

    def dispose(self) -> None:
        self.clear()
        self._disposed = True

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __iter__(self) -> Iterator[tuple[str, tuple[Diagnostic, ...]]]:
        return iter(list(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)
