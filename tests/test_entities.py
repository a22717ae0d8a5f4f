"""Tests for the entity resolution layer."""

from conftest import PAUSED_ID, RUNNING_ID, STOPPED_ID, FakeDocker, container

from dockcomp.engine import (
    EntityResolver,
    container_candidates,
    image_candidates,
    pauseable,
    running,
    stopped,
    unpauseable,
)
from dockcomp.lib.docker_client import ContainerRecord, ImageRecord


class TestContainerCandidates:
    def test_names_and_ids(self, containers):
        assert container_candidates(containers) == {
            "c1", "c2", "c3", STOPPED_ID, RUNNING_ID, PAUSED_ID,
        }

    def test_running(self, containers):
        assert container_candidates(containers, running) == {"c2", "c3", RUNNING_ID, PAUSED_ID}

    def test_stopped(self, containers):
        assert container_candidates(containers, stopped) == {"c1", STOPPED_ID}

    def test_pauseable(self, containers):
        assert container_candidates(containers, pauseable) == {"c2", RUNNING_ID}

    def test_unpauseable(self, containers):
        assert container_candidates(containers, unpauseable) == {"c3", PAUSED_ID}

    def test_names_only(self, containers):
        assert container_candidates(containers, ids=False) == {"c1", "c2", "c3"}

    def test_strips_exactly_one_leading_slash(self):
        record = ContainerRecord(id="abc", name="//odd")
        assert container_candidates([record], ids=False) == {"/odd"}

    def test_name_without_slash_kept(self):
        record = ContainerRecord(id="abc", name="plain")
        assert record.display_name == "plain"

    def test_deduplicated(self):
        records = [container("abc", "web"), container("abc", "web")]
        assert container_candidates(records) == {"web", "abc"}

    def test_exited_flag(self):
        assert container("abc", "web").exited
        assert not container("abc", "web", running=True).exited


class TestImageCandidates:
    def test_all_shapes(self, images):
        assert image_candidates(images) == {
            "myrepo", "myrepo:1.0", "myrepo:latest", "busybox", "busybox:latest",
            "sha256:aaa111", "sha256:bbb222", "sha256:ccc333", "sha256:ddd444",
        }

    def test_untagged_only_by_id(self, images):
        words = image_candidates(images)
        assert "<none>" not in words
        assert "<none>:<none>" not in words
        assert "sha256:ddd444" in words

    def test_repos_only(self, images):
        assert image_candidates(images, tags=False, ids=False) == {"myrepo", "busybox"}

    def test_repos_and_tags(self, images):
        assert image_candidates(images, ids=False) == {
            "myrepo", "myrepo:1.0", "myrepo:latest", "busybox", "busybox:latest",
        }

    def test_repository_with_untagged_tag(self):
        words = image_candidates([ImageRecord("myrepo", "<none>", "sha256:eee")])
        assert words == {"myrepo", "sha256:eee"}


class TestEntityResolver:
    def test_containers(self, fake_docker):
        assert EntityResolver(fake_docker).containers(stopped) == {"c1", STOPPED_ID}

    def test_container_ids_are_short(self, fake_docker):
        assert EntityResolver(fake_docker).container_ids() == {
            STOPPED_ID[:12], RUNNING_ID[:12], PAUSED_ID[:12],
        }

    def test_container_names(self, fake_docker):
        assert EntityResolver(fake_docker).container_names() == {"c1", "c2", "c3"}

    def test_image_repos(self, fake_docker):
        assert EntityResolver(fake_docker).image_repos() == {"myrepo", "busybox"}

    def test_image_references_include_ids(self, fake_docker):
        assert "sha256:ddd444" in EntityResolver(fake_docker).image_references()

    def test_every_query_hits_the_daemon(self, fake_docker):
        resolver = EntityResolver(fake_docker)
        resolver.containers()
        resolver.containers()
        assert fake_docker.calls.count("ps") == 2

    def test_daemon_failure_is_empty(self, containers, images):
        resolver = EntityResolver(FakeDocker(containers, images, fail=True))
        assert resolver.containers() == set()
        assert resolver.container_ids() == set()
        assert resolver.container_names() == set()
        assert resolver.image_repos() == set()
        assert resolver.image_repos_and_tags() == set()
        assert resolver.image_references() == set()

    def test_no_containers(self):
        fake = FakeDocker()
        assert EntityResolver(fake).containers() == set()
