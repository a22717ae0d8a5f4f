"""Value resolvers shared by the subcommand handlers.

A resolver is called as ``resolver(line, entities, text)`` where ``text``
is the part of the current word being completed.  It returns a
Completion, or None when there is nothing to suggest.
"""

from __future__ import annotations

import logging
import os
import socket

from dockcomp.engine import entities as states
from dockcomp.engine.candidates import Completion, directories, files, offer
from dockcomp.engine.constants import (
    CAPABILITIES,
    LOG_DRIVER_OPTIONS,
    LOG_DRIVERS,
    LOG_LEVELS,
    SIGNALS,
    SYSLOG_FACILITIES,
)

log = logging.getLogger(__name__)


# ── Factories ─────────────────────────────────────────────


def words(*values: str, suffix: str = "", nospace: bool = False):
    """Resolver offering a fixed vocabulary."""

    def resolve(line, entities, text):
        return offer(values, text, suffix=suffix, nospace=nospace)

    return resolve


def containers(predicate=None, *, suffix: str = ""):
    """Resolver offering container names and ids, narrowed by ``predicate``."""

    def resolve(line, entities, text):
        return offer(entities.containers(predicate), text, suffix=suffix)

    return resolve


def nothing(line, entities, text):
    return None


def file_paths(line, entities, text):
    return files()


def directory_paths(line, entities, text):
    return directories()


all_containers = containers()
running_containers = containers(states.running)
stopped_containers = containers(states.stopped)
pauseable_containers = containers(states.pauseable)
unpauseable_containers = containers(states.unpauseable)


def container_names(line, entities, text):
    return offer(entities.container_names(), text)


def container_ids(line, entities, text):
    return offer(entities.container_ids(), text)


def image_repos(line, entities, text):
    return offer(entities.image_repos(), text)


def image_repos_and_tags(line, entities, text):
    return offer(entities.image_repos_and_tags(), text)


def image_references(line, entities, text):
    return offer(entities.image_references(), text)


def containers_and_images(line, entities, text):
    return offer(entities.containers() | entities.image_references(), text)


# ── Static vocabularies ───────────────────────────────────


capabilities = words(*CAPABILITIES)
log_levels = words(*LOG_LEVELS)
log_drivers = words(*LOG_DRIVERS)
syslog_facilities = words(*SYSLOG_FACILITIES)


def signals(line, entities, text):
    """Signal names with and without the SIG prefix, matched case-insensitively."""
    names = list(SIGNALS) + [s.removeprefix("SIG") for s in SIGNALS]
    return offer(names, text.upper())


def log_driver_options(line, entities, text):
    """Option keys of the --log-driver chosen earlier on the line, or of all drivers."""
    driver = line.value_of("--log-driver")
    if driver is None:
        keys = [k for opts in LOG_DRIVER_OPTIONS.values() for k in opts]
    elif driver in LOG_DRIVER_OPTIONS:
        keys = LOG_DRIVER_OPTIONS[driver]
    else:
        return None
    return offer(keys, text, suffix="=")


def environment_names(line, entities, text):
    return offer(sorted(os.environ), text, nospace=True)


def _host_addresses(name: str) -> list[str]:
    try:
        return socket.gethostbyname_ex(name)[2]
    except (OSError, UnicodeError) as e:
        log.debug("Cannot resolve %s: %s", name, e)
        return []


# ── Sub-syntax resolvers ──────────────────────────────────


def host_address(line, entities, text):
    """``--add-host name:<addr>``: offer the addresses ``name`` resolves to."""
    if ":" not in text:
        return None
    name, _, partial = text.partition(":")
    if not name:
        return None
    return offer(_host_addresses(name), partial).prefixed(f"{name}:")


def device_paths(line, entities, text):
    if ":" in text:
        return None
    if not text:
        return offer(["/"], nospace=True)
    if text.startswith("/"):
        return files()
    return None


def ipc_namespace(line, entities, text):
    if text.startswith("container:"):
        rest = text.removeprefix("container:")
        return running_containers(line, entities, rest).prefixed("container:")
    return offer(["host"], text) | offer(["container:"], text, nospace=True)


def link_target(line, entities, text):
    if ":" in text:
        return None
    return containers(states.running, suffix=":")(line, entities, text)


def network_mode(line, entities, text):
    if text.startswith("container:"):
        rest = text.removeprefix("container:")
        return all_containers(line, entities, rest).prefixed("container:")
    return offer(["bridge", "none", "host"], text) | offer(["container:"], text, nospace=True)


def restart_policy(line, entities, text):
    if text.startswith("on-failure:"):
        return None
    return offer(["no", "on-failure", "always"], text) | offer(["on-failure:"], text, nospace=True)


def security_option(line, entities, text):
    if text.startswith("label:"):
        rest = text.removeprefix("label:")
        if ":" in rest:
            return None
        result = offer(["user:", "role:", "type:", "level:"], rest, nospace=True) | offer(["disable"], rest)
        return result.prefixed("label:")
    return offer(["label", "apparmor"], text, suffix=":")


def copy_source(line, entities, text):
    """``cp`` source: a container name followed by ":"."""
    if ":" in text:
        return None
    return containers(suffix=":")(line, entities, text)


def inspect_target(line, entities, text):
    kind = line.value_of("--type")
    if kind is None:
        return containers_and_images(line, entities, text)
    if kind == "container":
        return all_containers(line, entities, text)
    if kind == "image":
        return image_references(line, entities, text)
    return None


def removable_containers(line, entities, text):
    """Stopped containers, or every container once --force is on the line."""
    if line.has_flag("--force", "-f"):
        return all_containers(line, entities, text)
    return stopped_containers(line, entities, text)


def pullable_images(line, entities, text):
    if line.has_flag("--all-tags", "-a"):
        return image_repos(line, entities, text)
    return image_repos_and_tags(line, entities, text)


def merge(*resolvers):
    """Resolver returning the union of ``resolvers``."""

    def resolve(line, entities, text):
        result = Completion()
        for resolver in resolvers:
            result = result | resolver(line, entities, text)
        return result

    return resolve
