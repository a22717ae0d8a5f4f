"""Candidate and completion result types."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """A single completion word.

    ``suffix`` is appended on insertion (``=`` after a filter key, ``://``
    after an address scheme).  A candidate with a suffix, or with
    ``nospace`` set, expects the user to keep typing in the same word.
    """

    value: str
    suffix: str = ""
    nospace: bool = False

    @property
    def text(self) -> str:
        return self.value + self.suffix

    @property
    def keeps_word_open(self) -> bool:
        return self.nospace or bool(self.suffix)


@dataclass(frozen=True)
class Completion:
    """Deduplicated candidates plus an optional filename fallback for the host."""

    candidates: frozenset[Candidate] = frozenset()
    filedir: str | None = None  # "file" or "dir"

    def __or__(self, other: Completion | None) -> Completion:
        if other is None:
            return self
        return Completion(self.candidates | other.candidates, self.filedir or other.filedir)

    def __bool__(self) -> bool:
        return bool(self.candidates) or self.filedir is not None

    def __len__(self) -> int:
        return len(self.candidates)

    def values(self) -> set[str]:
        return {c.value for c in self.candidates}

    def texts(self) -> list[str]:
        return sorted(c.text for c in self.candidates)

    @property
    def nospace(self) -> bool:
        return any(c.keeps_word_open for c in self.candidates)

    def prefixed(self, prefix: str) -> Completion:
        """Return the completion with ``prefix`` prepended to every value."""
        if not prefix:
            return self
        return Completion(
            frozenset(Candidate(prefix + c.value, c.suffix, c.nospace) for c in self.candidates),
            self.filedir,
        )


EMPTY = Completion()


def offer(words: Iterable[str], text: str = "", *, suffix: str = "", nospace: bool = False) -> Completion:
    """Keep the words that start with ``text`` and wrap them as candidates."""
    return Completion(frozenset(
        Candidate(w, suffix, nospace) for w in words if w and w.startswith(text)
    ))


def files() -> Completion:
    return Completion(filedir="file")


def directories() -> Completion:
    return Completion(filedir="dir")
