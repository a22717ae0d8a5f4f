"""Flag descriptors and the token classifier.

The host line editor splits ``--flag=value`` into three words
(``--flag``, ``=``, ``value``) and ``--flag value`` into two.  Some hosts
pass ``--flag=value`` through as a single word.  The classifier treats all
of these forms the same way.
"""

from __future__ import annotations

import fnmatch
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_GLOB_CHARS = re.compile(r"[*?\[]")

# resolver(line, entities, text) -> Completion | None
Resolver = Callable[[Any, Any, str], Any]


class TokenKind(Enum):
    FLAG = "flag"
    FLAG_VALUE = "flag=value"
    ASSIGN = "="
    VALUE = "value"
    FREE = "free"


@dataclass(frozen=True)
class Token:
    index: int
    text: str
    kind: TokenKind


@dataclass(frozen=True, eq=False)
class Flag:
    """One option of a command: its spellings and what follows it."""

    names: tuple[str, ...]
    takes_value: bool = False
    complete: Resolver | None = None
    # key -> resolver for ``key=value`` values given to this flag
    assignments: Mapping[str, Resolver] = field(default_factory=dict)

    def matches(self, token: str) -> bool:
        for name in self.names:
            if _GLOB_CHARS.search(name):
                if fnmatch.fnmatchcase(token, name):
                    return True
            elif token == name:
                return True
        return False

    @property
    def spellings(self) -> list[str]:
        return [n for n in self.names if not _GLOB_CHARS.search(n)]


def option(*names: str, complete: Resolver | None = None, assignments=None) -> Flag:
    """Declare a value-consuming flag."""
    return Flag(names, takes_value=True, complete=complete, assignments=assignments or {})


def switch(*names: str) -> Flag:
    """Declare a boolean flag."""
    return Flag(names)


class FlagSet:
    """Lookup table over flag descriptors."""

    def __init__(self, flags: Iterable[Flag] = ()):
        self._flags = tuple(flags)
        self._exact: dict[str, Flag] = {}
        self._globs: list[Flag] = []
        for flag in self._flags:
            if any(_GLOB_CHARS.search(n) for n in flag.names):
                self._globs.append(flag)
            for name in flag.spellings:
                self._exact.setdefault(name, flag)

    @classmethod
    def from_pattern(cls, pattern: str) -> FlagSet:
        """Build a set of value-consuming flags from ``--a|-b`` or ``@(--a|-b)``."""
        pattern = pattern.strip()
        if pattern.startswith("@(") and pattern.endswith(")"):
            pattern = pattern[2:-1]
        names = tuple(p.strip() for p in re.split(r"[|\s]+", pattern) if p.strip())
        return cls([Flag(names, takes_value=True)]) if names else cls()

    @classmethod
    def coerce(cls, flags: FlagSet | Flag | Iterable[Flag] | str | None) -> FlagSet:
        if flags is None:
            return cls()
        if isinstance(flags, FlagSet):
            return flags
        if isinstance(flags, Flag):
            return cls([flags])
        if isinstance(flags, str):
            return cls.from_pattern(flags)
        return cls(flags)

    def __iter__(self):
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def find(self, token: str) -> Flag | None:
        """Return the flag spelled exactly as ``token``."""
        flag = self._exact.get(token)
        if flag is not None:
            return flag
        for flag in self._globs:
            if flag.matches(token):
                return flag
        return None

    def match(self, token: str) -> tuple[Flag, str | None] | None:
        """Match ``token`` against the set.

        Returns ``(flag, value)`` where ``value`` is the text after the first
        ``=`` for a joined ``--flag=value`` word and None otherwise.
        """
        flag = self.find(token)
        if flag is not None:
            return flag, None
        if token.startswith("-") and "=" in token:
            name, _, value = token.partition("=")
            flag = self.find(name)
            if flag is not None:
                return flag, value
        return None

    def valued(self) -> FlagSet:
        return FlagSet(f for f in self._flags if f.takes_value)

    def spellings(self) -> list[str]:
        names: list[str] = []
        for flag in self._flags:
            names.extend(flag.spellings)
        return names


def word_at(words, index: int) -> str:
    """Return ``words[index]`` or an empty string past the end."""
    return words[index] if 0 <= index < len(words) else ""


def step(words, index: int, flags: FlagSet) -> tuple[list[TokenKind], int]:
    """Classify the word at ``index`` and every word it consumes.

    Returns the kinds of the consumed words and the index after them.
    """
    token = words[index]
    kinds: list[TokenKind] = []
    hit = flags.match(token)
    if hit is not None and hit[0].takes_value:
        _, joined = hit
        index += 1
        if joined:
            kinds.append(TokenKind.FLAG_VALUE)
        else:
            kinds.append(TokenKind.FLAG)
            if word_at(words, index) == "=":
                kinds.append(TokenKind.ASSIGN)
                index += 1
            kinds.append(TokenKind.VALUE)
            index += 1
    elif token == "=":
        kinds.append(TokenKind.ASSIGN)
        index += 1
    elif token.startswith("-"):
        kinds.append(TokenKind.FLAG)
        index += 1
    else:
        kinds.append(TokenKind.FREE)
        index += 1
    # "--debug=false" and "--log-opt tag=x" leave "=" words behind the value
    while word_at(words, index) == "=":
        kinds += [TokenKind.ASSIGN, TokenKind.VALUE]
        index += 2
    return kinds, index


def classify_tokens(words, start: int, flags=None, stop: int | None = None) -> list[Token]:
    """Classify every word after ``start`` up to and including ``stop``."""
    flags = FlagSet.coerce(flags)
    if stop is None:
        stop = len(words) - 1
    tokens: list[Token] = []
    index = start + 1
    while index <= stop:
        kinds, following = step(words, index, flags)
        for offset, kind in enumerate(kinds):
            position = index + offset
            if position > stop:
                break
            tokens.append(Token(position, word_at(words, position), kind))
        index = following
    return tokens


def tokenize_line(line: str) -> tuple[list[str], int]:
    """Split a raw line the way bash fills COMP_WORDS.

    Words are separated by whitespace, ``=`` becomes a word of its own and
    trailing whitespace starts a new empty word.  Returns the words and the
    index of the last one.
    """
    words: list[str] = []
    for chunk in line.split():
        for piece in re.split(r"(=)", chunk):
            if piece:
                words.append(piece)
    if not words or line[-1:].isspace():
        words.append("")
    return words, len(words) - 1
