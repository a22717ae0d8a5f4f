"""Clients for external processes the completion engine queries.

- docker_client: read-only container and image listings from the docker CLI

Failures raise DockerError; the engine degrades them to empty candidate sets.
"""
