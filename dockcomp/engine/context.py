"""Command line state for one completion request."""

from __future__ import annotations

from dataclasses import dataclass

from dockcomp.engine.positional import first_free_position, positional_slot, value_of
from dockcomp.engine.tokens import word_at


@dataclass(frozen=True)
class Assignment:
    """A ``key=value`` word the cursor sits on the value side of."""

    key: str
    value: str
    flag: str | None = None  # the word the pair was given to, e.g. "--log-opt"
    joined: bool = False  # key and value arrived as a single word


@dataclass(frozen=True)
class CommandLine:
    """Words of the line being completed and where the subcommand sits.

    Rebuilt from scratch for every request.  ``host`` and ``config`` are
    the global ``--host``/``--config`` values typed before the subcommand.
    """

    words: tuple[str, ...]
    cword: int
    command: str = "docker"
    command_pos: int = 0
    host: str | None = None
    config: str | None = None

    def __post_init__(self):
        if not 0 <= self.cword < len(self.words):
            raise ValueError(f"cursor index {self.cword} outside {len(self.words)} words")
        if not 0 <= self.command_pos <= self.cword:
            raise ValueError(f"subcommand index {self.command_pos} past cursor {self.cword}")

    @classmethod
    def from_words(cls, words, cword: int | None = None, **kwargs) -> CommandLine:
        words = tuple(words) or ("",)
        if cword is None:
            cword = len(words) - 1
        return cls(words, cword, **kwargs)

    @property
    def cur(self) -> str:
        return self.words[self.cword]

    @property
    def prev(self) -> str:
        return self.word(self.cword - 1) if self.cword > 0 else ""

    def word(self, index: int) -> str:
        return word_at(self.words, index)

    def owns(self, index: int) -> bool:
        """True when ``index`` lies between the subcommand and the cursor."""
        return self.command_pos < index < self.cword

    def first_free(self, flags=None) -> int:
        return first_free_position(self.words, self.command_pos, flags, self.cword)

    def slot(self, flags=None) -> int | None:
        return positional_slot(self.words, self.command_pos, flags, self.cword)

    def value_of(self, flag_pattern) -> str | None:
        return value_of(self.words, self.command_pos, self.cword, flag_pattern)

    def has_flag(self, *names: str) -> bool:
        """True when any of ``names`` appears after the subcommand, cursor word excluded."""
        return any(
            w in names for i, w in enumerate(self.words) if i > self.command_pos and i != self.cword
        )

    def assignment(self) -> Assignment | None:
        """Detect a ``key=value`` word the cursor is completing the value of."""
        if self.cur == "=" and self.owns(self.cword - 1):
            key_index, value = self.cword - 1, ""
        elif self.prev == "=" and self.owns(self.cword - 2):
            key_index, value = self.cword - 2, self.cur
        elif "=" in self.cur and not self.cur.startswith(("-", "=")):
            key, _, value = self.cur.partition("=")
            return Assignment(key, value, self._flag_before(self.cword), joined=True)
        else:
            return None
        return Assignment(self.words[key_index], value, self._flag_before(key_index))

    def _flag_before(self, index: int) -> str | None:
        index -= 1
        if self.word(index) == "=":
            index -= 1
        return self.words[index] if self.owns(index) else None
