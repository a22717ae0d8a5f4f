"""Top-level dispatcher: locate the subcommand and run its handler."""

from __future__ import annotations

import logging

from dockcomp.engine.candidates import EMPTY, Completion
from dockcomp.engine.commands import build_dispatch_table, global_command
from dockcomp.engine.context import CommandLine
from dockcomp.engine.entities import EntityResolver
from dockcomp.engine.tokens import word_at

log = logging.getLogger(__name__)


class Dispatcher:
    """Resolve completions for whole command lines.

    ``client_factory(host=..., config=...)`` builds the daemon client for a
    request; the global ``--host``/``--config`` values typed on the line
    are passed through so every query targets the same daemon.
    """

    def __init__(self, client_factory, table=None):
        self.client_factory = client_factory
        self.table = table if table is not None else build_dispatch_table()
        self.root = global_command(self.table)

    def locate(self, words, cword: int | None = None) -> CommandLine:
        """Split global options from the subcommand and its arguments."""
        words = tuple(words) or ("",)
        if cword is None:
            cword = len(words) - 1
        if not 0 <= cword < len(words):
            raise ValueError(f"cursor index {cword} outside {len(words)} words")
        host = config = None
        index = 1
        while index < cword:
            token = words[index]
            hit = self.root.value_flags.match(token)
            if hit is not None:
                flag, value = hit
                if not value:
                    index += 1
                    if word_at(words, index) == "=":
                        index += 1
                    value = words[index] if index < cword else None
                if value is not None:
                    if "--host" in flag.names:
                        host = value
                    elif "--config" in flag.names:
                        config = value
            elif token == "=":
                # value of a boolean flag written as --debug=false
                index += 1
            elif not token.startswith("-"):
                return CommandLine(words, cword, token, index, host, config)
            index += 1
        return CommandLine(words, cword, "docker", 0, host, config)

    def complete(self, words, cword: int | None = None) -> Completion:
        """Return the candidates for ``words[cword]``; never raises on bad input."""
        try:
            line = self.locate(words, cword)
        except ValueError as e:
            log.debug("Unusable command line: %s", e)
            return EMPTY
        if line.command_pos == 0:
            handler = self.root
        else:
            handler = self.table.get(line.command)
        if handler is None:
            log.debug("No completion rules for %r", line.command)
            return EMPTY
        entities = EntityResolver(self.client_factory(host=line.host, config=line.config))
        result = handler.complete(line, entities)
        return result if result is not None else EMPTY
