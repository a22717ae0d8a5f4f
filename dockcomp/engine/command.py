"""Per-subcommand completion rules."""

from __future__ import annotations

from dockcomp.engine.candidates import Completion, offer
from dockcomp.engine.tokens import FlagSet, switch


class Command:
    """Completion rules for one subcommand.

    ``flags`` declares boolean and value-consuming flags (with their value
    resolvers), ``positionals`` the resolver for each positional slot and
    ``rest`` the resolver for every slot past those.
    """

    def __init__(self, name: str, *, flags=(), positionals=(), rest=None):
        self.name = name
        self.flags = FlagSet([*flags, switch("--help")])
        self.value_flags = self.flags.valued()
        self.positionals = tuple(positionals)
        self.rest = rest

    def __repr__(self) -> str:
        return f"Command({self.name!r})"

    def complete(self, line, entities) -> Completion | None:
        pending = self._pending_flag(line)
        if pending is not None:
            return self._complete_flag_value(line, entities, *pending)

        assignment = line.assignment()
        if assignment is not None:
            flag = self.value_flags.find(assignment.flag) if assignment.flag else None
            if flag is None:
                return None
            prefix = f"{assignment.key}=" if assignment.joined else ""
            return self._complete_assignment(line, entities, flag, assignment.key, assignment.value, prefix)

        if line.cur.startswith("-"):
            return offer(self.flags.spellings(), line.cur)
        return self._complete_positional(line, entities)

    def _pending_flag(self, line):
        """Find the value-consuming flag whose value the cursor is on.

        Returns ``(flag, text, prefix)``: ``text`` is the value typed so far
        and ``prefix`` what precedes it inside the current word.
        """
        cur = line.cur
        hit = self.value_flags.match(cur)
        if hit is not None and hit[1] is not None:
            flag, value = hit
            return flag, value, cur[: len(cur) - len(value)]
        if cur == "=" and line.owns(line.cword - 1):
            flag = self.value_flags.find(line.prev)
            return (flag, "", "") if flag is not None else None
        if line.prev == "=" and line.owns(line.cword - 2):
            flag = self.value_flags.find(line.word(line.cword - 2))
            return (flag, cur, "") if flag is not None else None
        if line.owns(line.cword - 1):
            flag = self.value_flags.find(line.prev)
            if flag is not None:
                return flag, cur, ""
        return None

    def _complete_flag_value(self, line, entities, flag, text, prefix):
        if flag.assignments and "=" in text:
            key, _, value = text.partition("=")
            return self._complete_assignment(line, entities, flag, key, value, f"{prefix}{key}=")
        if flag.complete is None:
            return None
        result = flag.complete(line, entities, text)
        return result.prefixed(prefix) if result is not None else None

    def _complete_assignment(self, line, entities, flag, key, value, prefix):
        resolver = flag.assignments.get(key)
        if resolver is None:
            return None
        result = resolver(line, entities, value)
        return result.prefixed(prefix) if result is not None else None

    def _complete_positional(self, line, entities):
        slot = line.slot(self.value_flags)
        if slot is None:
            return None
        resolver = self.positionals[slot] if slot < len(self.positionals) else self.rest
        if resolver is None:
            return None
        return resolver(line, entities, line.cur)


class GlobalCommand(Command):
    """Rules for the words before any subcommand.

    While the cursor is on the first free word, both the global flags and
    the subcommand vocabulary are offered.
    """

    def _complete_positional(self, line, entities):
        result = super()._complete_positional(line, entities)
        if result is None:
            return None
        return result | offer(self.flags.spellings(), line.cur)
