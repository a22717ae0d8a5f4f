"""Thin client over the docker CLI for the queries completion needs.

Every call shells out to the docker binary once.  Failures surface as
DockerError; callers decide whether to degrade or propagate.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

log = logging.getLogger(__name__)

# One line per inspected id, in the order the ids were given
_INSPECT_FORMAT = "{{.Name}}\t{{.State.Running}}\t{{.State.Paused}}\t{{.State.Status}}"
_IMAGES_FORMAT = "{{.Repository}}\t{{.Tag}}\t{{.ID}}"


class DockerError(Exception):
    """The docker CLI could not be run or returned unusable output."""


@dataclass(frozen=True)
class ContainerRecord:
    id: str
    name: str
    running: bool = False
    paused: bool = False
    status: str = ""

    @property
    def display_name(self) -> str:
        """Name without the single leading "/" the daemon stores."""
        return self.name[1:] if self.name.startswith("/") else self.name

    @property
    def exited(self) -> bool:
        return self.status == "exited"


@dataclass(frozen=True)
class ImageRecord:
    repository: str
    tag: str
    id: str


def _parse_bool(value: str) -> bool:
    return value.strip().lower() == "true"


class DockerClient:
    """Run read-only docker queries against one daemon."""

    def __init__(
        self,
        *,
        host: str | None = None,
        config: str | None = None,
        binary: str = "docker",
        timeout: float | None = None,
    ) -> None:
        self.host = host
        self.config = config
        self.binary = binary
        self.timeout = timeout

    def _command(self, *args: str) -> list[str]:
        cmd = [self.binary]
        if self.host:
            cmd.extend(["--host", self.host])
        if self.config:
            cmd.extend(["--config", self.config])
        cmd.extend(args)
        return cmd

    def _run(self, *args: str) -> str:
        cmd = self._command(*args)
        log.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, errors="replace", check=False, timeout=self.timeout,
            )
        except FileNotFoundError as e:
            msg = f"Command not found: {self.binary}"
            raise DockerError(msg) from e
        except OSError as e:
            msg = f"Cannot run {self.binary}: {e}"
            raise DockerError(msg) from e
        except subprocess.TimeoutExpired as e:
            msg = f"{' '.join(cmd)} timed out after {self.timeout}s"
            raise DockerError(msg) from e
        if result.returncode != 0:
            msg = f"{' '.join(cmd)} exited {result.returncode}: {result.stderr.strip()}"
            raise DockerError(msg)
        return result.stdout

    def list_containers(self, *, all: bool = True, no_trunc: bool = True) -> list[str]:  # noqa: A002
        """Return container ids, newest first."""
        args = ["ps", "--quiet"]
        if all:
            args.append("--all")
        if no_trunc:
            args.append("--no-trunc")
        return [line.strip() for line in self._run(*args).splitlines() if line.strip()]

    def inspect_containers(self, ids: list[str]) -> list[ContainerRecord]:
        """Inspect ``ids`` and return one record per id, in the same order."""
        if not ids:
            return []
        output = self._run("inspect", "--type", "container", "--format", _INSPECT_FORMAT, *ids)
        lines = [line for line in output.splitlines() if line]
        if len(lines) != len(ids):
            msg = f"inspect returned {len(lines)} records for {len(ids)} ids"
            raise DockerError(msg)
        records = []
        for cid, line in zip(ids, lines, strict=True):
            fields = line.split("\t")
            fields += [""] * (4 - len(fields))
            name, running, paused, status = fields[:4]
            records.append(ContainerRecord(
                id=cid,
                name=name,
                running=_parse_bool(running),
                paused=_parse_bool(paused),
                status=status.strip(),
            ))
        return records

    def list_images(self, *, all: bool = False) -> list[ImageRecord]:  # noqa: A002
        """Return (repository, tag, id) rows; untagged images carry "<none>"."""
        args = ["images", "--format", _IMAGES_FORMAT]
        if all:
            args.extend(["--all", "--no-trunc"])
        images = []
        for line in self._run(*args).splitlines():
            if not line.strip():
                continue
            fields = line.split("\t")
            if len(fields) != 3:
                msg = f"Unexpected images row: {line!r}"
                raise DockerError(msg)
            repository, tag, image_id = (f.strip() for f in fields)
            images.append(ImageRecord(repository, tag, image_id))
        return images
