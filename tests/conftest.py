"""Shared fixtures and helpers for the dockcomp tests."""

import os
import stat

import pytest

from dockcomp.engine import Dispatcher, tokenize_line
from dockcomp.lib.docker_client import ContainerRecord, DockerError, ImageRecord

# ---------------------------------------------------------------------------
# Shared helpers (importable by test files)
# ---------------------------------------------------------------------------


def read_log(log_file):
    """Return list of invocations from a log file written by a mock binary."""
    if log_file.exists():
        return [line.strip() for line in log_file.read_text().splitlines() if line.strip()]
    return []


def make_mock_script(path, content="#!/usr/bin/env bash\nexit 0\n"):
    """Write an executable shell script to path."""
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IEXEC)


class FakeDocker:
    """In-memory stand-in for DockerClient."""

    def __init__(self, containers=(), images=(), *, fail=False, host=None, config=None):
        self.containers = list(containers)
        self.images = list(images)
        self.fail = fail
        self.host = host
        self.config = config
        self.calls = []

    def _check(self, call):
        self.calls.append(call)
        if self.fail:
            raise DockerError("Cannot connect to the Docker daemon")

    def list_containers(self, *, all=True, no_trunc=True):
        self._check("ps")
        return [c.id if no_trunc else c.id[:12] for c in self.containers]

    def inspect_containers(self, ids):
        self._check("inspect")
        by_id = {c.id: c for c in self.containers}
        return [by_id[i] for i in ids]

    def list_images(self, *, all=False):
        self._check("images")
        return list(self.images)


def container(cid, name, *, running=False, paused=False):
    status = "paused" if paused else "running" if running else "exited"
    return ContainerRecord(id=cid, name=f"/{name}", running=running, paused=paused, status=status)


def complete_line(dispatcher, line):
    """Complete the last word of ``line``, tokenized the way bash does."""
    words, cword = tokenize_line(line)
    return dispatcher.complete(words, cword)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

STOPPED_ID = "c1" + "0" * 62
RUNNING_ID = "c2" + "0" * 62
PAUSED_ID = "c3" + "0" * 62


@pytest.fixture()
def containers():
    """One stopped, one running and one paused container."""
    return [
        container(STOPPED_ID, "c1"),
        container(RUNNING_ID, "c2", running=True),
        container(PAUSED_ID, "c3", running=True, paused=True),
    ]


@pytest.fixture()
def images():
    return [
        ImageRecord("myrepo", "1.0", "sha256:aaa111"),
        ImageRecord("myrepo", "latest", "sha256:bbb222"),
        ImageRecord("busybox", "latest", "sha256:ccc333"),
        ImageRecord("<none>", "<none>", "sha256:ddd444"),
    ]


@pytest.fixture()
def fake_docker(containers, images):
    return FakeDocker(containers, images)


@pytest.fixture()
def dispatcher(fake_docker):
    """Dispatcher whose client factory hands out ``fake_docker``, recording the target."""

    def factory(*, host=None, config=None):
        fake_docker.host = host
        fake_docker.config = config
        return fake_docker

    return Dispatcher(factory)


@pytest.fixture()
def mock_bin_env(tmp_path):
    """Create a mock bin directory and environment with PATH pointing to it.

    Returns (mock_bin, env) where mock_bin is a Path to the bin directory
    and env is a copy of os.environ with mock_bin prepended to PATH.
    """
    mock_bin = tmp_path / "bin"
    mock_bin.mkdir()
    env = os.environ.copy()
    env["PATH"] = f"{mock_bin}:{env['PATH']}"
    return mock_bin, env
