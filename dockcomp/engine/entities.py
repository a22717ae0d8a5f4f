"""Turn live daemon state into completion words.

Every query goes to the daemon fresh.  A daemon failure yields an empty
set: completion degrades to no suggestions instead of an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from dockcomp.engine.constants import NONE_REPOSITORY, NONE_TAG
from dockcomp.lib.docker_client import ContainerRecord, DockerError, ImageRecord

log = logging.getLogger(__name__)

StatePredicate = Callable[[ContainerRecord], bool]


# ── State predicates ──────────────────────────────────────


def running(c: ContainerRecord) -> bool:
    return c.running


def stopped(c: ContainerRecord) -> bool:
    return not c.running


def pauseable(c: ContainerRecord) -> bool:
    return c.running and not c.paused


def unpauseable(c: ContainerRecord) -> bool:
    return c.paused


# ── Projections ───────────────────────────────────────────


def container_candidates(
    records: Iterable[ContainerRecord],
    predicate: StatePredicate | None = None,
    *,
    names: bool = True,
    ids: bool = True,
) -> set[str]:
    """Return display names and ids of the records ``predicate`` accepts."""
    words: set[str] = set()
    for record in records:
        if predicate is not None and not predicate(record):
            continue
        if names and record.display_name:
            words.add(record.display_name)
        if ids:
            words.add(record.id)
    return words


def image_candidates(
    records: Iterable[ImageRecord],
    *,
    repos: bool = True,
    tags: bool = True,
    ids: bool = True,
) -> set[str]:
    """Return bare repositories, repository:tag pairs and ids.

    Untagged images only show up by id.
    """
    words: set[str] = set()
    for record in records:
        if ids and record.id:
            words.add(record.id)
        if record.repository == NONE_REPOSITORY:
            continue
        if repos:
            words.add(record.repository)
        if tags and record.tag and record.tag != NONE_TAG:
            words.add(f"{record.repository}:{record.tag}")
    return words


# ── Resolver ──────────────────────────────────────────────


class EntityResolver:
    """Entity queries for one completion request against one daemon client."""

    def __init__(self, client):
        self.client = client

    def _container_records(self) -> list[ContainerRecord]:
        try:
            ids = self.client.list_containers(all=True, no_trunc=True)
            return self.client.inspect_containers(ids)
        except DockerError as e:
            log.debug("Container query failed: %s", e)
            return []

    def _image_records(self, *, all: bool) -> list[ImageRecord]:  # noqa: A002
        try:
            return self.client.list_images(all=all)
        except DockerError as e:
            log.debug("Image query failed: %s", e)
            return []

    def containers(self, predicate: StatePredicate | None = None) -> set[str]:
        """Names and full ids of containers, optionally narrowed by state."""
        return container_candidates(self._container_records(), predicate)

    def container_names(self) -> set[str]:
        return container_candidates(self._container_records(), ids=False)

    def container_ids(self) -> set[str]:
        """Short ids, as `docker ps` prints them."""
        try:
            return set(self.client.list_containers(all=True, no_trunc=False))
        except DockerError as e:
            log.debug("Container id query failed: %s", e)
            return set()

    def image_repos(self) -> set[str]:
        return image_candidates(self._image_records(all=False), tags=False, ids=False)

    def image_repos_and_tags(self) -> set[str]:
        return image_candidates(self._image_records(all=False), ids=False)

    def image_references(self) -> set[str]:
        """Repositories, repository:tag pairs and ids of all images, intermediate layers included."""
        return image_candidates(self._image_records(all=True))
