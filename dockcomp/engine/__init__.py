"""Completion-resolution engine for the docker command line.

Public API re-exported here.
"""

from dockcomp.engine.candidates import (
    EMPTY,
    Candidate,
    Completion,
    directories,
    files,
    offer,
)
from dockcomp.engine.command import Command, GlobalCommand
from dockcomp.engine.commands import (
    HELP_TARGET,
    build_dispatch_table,
    global_command,
)
from dockcomp.engine.context import Assignment, CommandLine
from dockcomp.engine.dispatch import Dispatcher
from dockcomp.engine.entities import (
    EntityResolver,
    container_candidates,
    image_candidates,
    pauseable,
    running,
    stopped,
    unpauseable,
)
from dockcomp.engine.positional import (
    first_free_position,
    positional_slot,
    value_of,
)
from dockcomp.engine.tokens import (
    Flag,
    FlagSet,
    Token,
    TokenKind,
    classify_tokens,
    option,
    switch,
    tokenize_line,
)

__all__ = [
    "EMPTY",
    "HELP_TARGET",
    "Assignment",
    "Candidate",
    "Command",
    "CommandLine",
    "Completion",
    "Dispatcher",
    "EntityResolver",
    "Flag",
    "FlagSet",
    "GlobalCommand",
    "Token",
    "TokenKind",
    "build_dispatch_table",
    "classify_tokens",
    "container_candidates",
    "directories",
    "files",
    "first_free_position",
    "global_command",
    "image_candidates",
    "offer",
    "option",
    "pauseable",
    "positional_slot",
    "running",
    "stopped",
    "switch",
    "tokenize_line",
    "unpauseable",
    "value_of",
]
